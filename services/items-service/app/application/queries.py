# created by emeday 2025
"""
Application Layer - Queries
Items Service (solo lectura)
"""
import re
from dataclasses import dataclass
from typing import List
from items_shared.config import Settings
from app.domain.errors import ItemNotFoundError
from app.domain.models import Item
from app.domain.ports import ItemRepository
from app.infrastructure.memory.repositories import InMemoryItemRepository

_INT_RE = re.compile(r"[-+]?[0-9]+")

@dataclass
class ServiceContainer:
    settings: Settings
    repo: ItemRepository

def get_container(settings: Settings) -> ServiceContainer:
    return ServiceContainer(settings=settings, repo=InMemoryItemRepository())

class ListItems:
    def __init__(self, repo: ItemRepository):
        self.repo = repo
    def execute(self) -> List[Item]:
        return list(self.repo.list_items())

class GetItem:
    """
    Busca un item por id recibido como texto de la ruta.
    Un id que no es entero cae en el mismo camino que un id inexistente.
    """
    def __init__(self, repo: ItemRepository):
        self.repo = repo

    def execute(self, raw_id: str) -> Item:
        if not _INT_RE.fullmatch(raw_id):
            raise ItemNotFoundError(raw_id)
        item = self.repo.get_item(int(raw_id))
        if item is None:
            raise ItemNotFoundError(raw_id)
        return item
