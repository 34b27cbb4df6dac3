
"""
Items FastAPI main
------------------
- Carga Settings (.env)
- Registra router de API y de debug
- Traduce ItemNotFoundError a 404 {"message": "Item not found"}
Synopsis: created by emeday 2025
"""
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from items_shared import Settings, load_settings, get_logger
from items_shared.http_debug import build_debug_router
from app.application.queries import ServiceContainer, get_container
from app.domain.errors import ItemNotFoundError
from .router import build_api_router


def create_app(settings: Optional[Settings] = None, container: Optional[ServiceContainer] = None) -> FastAPI:
    settings = settings or load_settings(service_name="items-service")
    container = container or get_container(settings)
    log = get_logger(__name__, service_name=settings.SERVICE_NAME, level=settings.LOG_LEVEL)

    app = FastAPI(title="Items Service", version="0.1.0", docs_url="/docs", redoc_url="/redoc")

    # El frontend llama desde otro origen
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    @app.exception_handler(ItemNotFoundError)
    async def item_not_found(request: Request, exc: ItemNotFoundError):
        return JSONResponse(status_code=404, content={"message": "Item not found"})

    # Routers (primary + debug)
    app.include_router(build_api_router(settings, container))
    if settings.DEBUG_ROUTES:
        app.include_router(build_debug_router(settings))

    @app.on_event("startup")
    async def on_startup():
        log.info("Starting %s on %s:%s", settings.SERVICE_NAME, settings.APP_HOST, settings.APP_PORT)

    return app


app = create_app()


def run():
    import uvicorn
    settings = load_settings(service_name="items-service")
    uvicorn.run(create_app(settings), host=settings.APP_HOST, port=settings.APP_PORT)


if __name__ == "__main__":
    run()
