"""Item directory consumed by the booking core."""

from __future__ import annotations

from dataclasses import dataclass

from shared.domain.exceptions import NotFoundError
from shared.infrastructure.db import lock_queryset_if_possible

from .models import Item


@dataclass(frozen=True)
class ItemRecord:
    id: int
    owner_id: int
    name: str
    description: str
    available: bool

    @classmethod
    def from_model(cls, item: Item) -> "ItemRecord":
        return cls(
            id=item.pk,
            owner_id=item.owner_id,
            name=item.name,
            description=item.description,
            available=item.available,
        )


class ItemDirectory:
    """Lookup of items by id."""

    def exists(self, item_id: int) -> bool:
        return Item.objects.filter(pk=item_id).exists()

    def get(self, item_id: int, *, lock: bool = False) -> ItemRecord:
        """Return the item; with ``lock`` the row stays locked until commit."""

        queryset = Item.objects.filter(pk=item_id)
        if lock:
            queryset = lock_queryset_if_possible(queryset)
        item = queryset.first()
        if item is None:
            raise NotFoundError(f"Item with id {item_id} not found")
        return ItemRecord.from_model(item)

    def require(self, item_id: int) -> None:
        """Fail with ``NotFoundError`` unless the item exists."""
        if not self.exists(item_id):
            raise NotFoundError(f"Item with id {item_id} not found")
