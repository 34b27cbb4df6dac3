# created by emeday 2025
"""
Infrastructure Layer - Repositorio en memoria
El store se arma una sola vez al arrancar y no se modifica después.
"""
from typing import Iterable, Optional, Sequence, Tuple
from app.domain.models import Item
from app.domain.ports import ItemRepository

# Dataset de referencia
SEED_ITEMS: Tuple[Item, ...] = (
    Item(id=1, name="Item 1", description="This is item 1"),
    Item(id=2, name="Item 2", description="This is item 2"),
    Item(id=3, name="Item 3", description="This is item 3"),
)

class InMemoryItemRepository(ItemRepository):
    def __init__(self, items: Optional[Iterable[Item]] = None):
        self._items: Tuple[Item, ...] = tuple(SEED_ITEMS if items is None else items)
        seen = set()
        for item in self._items:
            if item.id in seen:
                raise ValueError(f"Id de item duplicado: {item.id}")
            seen.add(item.id)

    def list_items(self) -> Sequence[Item]:
        return self._items

    def get_item(self, item_id: int) -> Optional[Item]:
        for item in self._items:
            if item.id == item_id:
                return item
        return None
