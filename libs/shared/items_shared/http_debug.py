
"""
items_shared.http_debug
-----------------------
Router de endpoints de debug comunes.
Synopsis: created by emeday 2025
"""
from fastapi import APIRouter
from .config import Settings

def build_debug_router(settings: Settings) -> APIRouter:
    router = APIRouter(tags=["_debug"])

    @router.get("/_debug/env")
    def debug_env():
        # Solo datos de arranque, nada sensible
        return {
            "service": settings.SERVICE_NAME,
            "app_host": settings.APP_HOST,
            "app_port": settings.APP_PORT,
            "log_level": settings.LOG_LEVEL,
        }

    @router.get("/_debug/probe")
    def probe():
        return {"ok": True, "service": settings.SERVICE_NAME}

    return router
