# created by emeday 2025
from abc import ABC, abstractmethod
from typing import Optional, Sequence
from app.domain.models import Item

class ItemRepository(ABC):
    @abstractmethod
    def list_items(self) -> Sequence[Item]:
        raise NotImplementedError()

    @abstractmethod
    def get_item(self, item_id: int) -> Optional[Item]:
        raise NotImplementedError()
