# router.py — Items Service (endpoints públicos, solo lectura)
from fastapi import APIRouter
from typing import List

from items_shared.config import Settings
from items_shared.logger import get_logger
from app.application.queries import ServiceContainer, ListItems, GetItem
from app.domain.errors import ItemNotFoundError

from .schemas import Health, Message, ItemOut


def build_api_router(settings: Settings, container: ServiceContainer) -> APIRouter:
    r = APIRouter(tags=["items"])
    log = get_logger(__name__, service_name=settings.SERVICE_NAME, level=settings.LOG_LEVEL)
    list_items = ListItems(container.repo)
    get_item = GetItem(container.repo)

    @r.get("/", response_model=Message, operation_id="items_root")
    def root():
        return {"message": "Backend API is running!"}

    @r.get("/health", response_model=Health, operation_id="items_health")
    def health():
        return {"status": "ok"}

    # GET /api/items — todos los items, en el orden del store
    @r.get("/api/items", response_model=List[ItemOut])
    def items():
        return list_items.execute()

    # GET /api/items/{item_id} — el id llega como texto; no numérico => 404
    @r.get("/api/items/{item_id}", response_model=ItemOut,
           responses={404: {"model": Message, "description": "Item not found"}})
    def item_detail(item_id: str):
        try:
            return get_item.execute(item_id)
        except ItemNotFoundError:
            log.debug("Item no encontrado: %r", item_id)
            raise

    return r
