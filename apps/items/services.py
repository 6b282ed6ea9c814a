"""Services for managing ShareIt items."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable
import logging

from django.db import transaction  # type: ignore
from django.utils import timezone  # type: ignore

from shared.domain.exceptions import DomainValidationError, NotFoundError
from shared.domain.value_objects import PageRequest
from apps.bookings.domain.entities import Booking
from apps.bookings.repositories import BookingRepository
from apps.comments.models import Comment
from apps.comments.services import CommentService
from apps.requests.models import ItemRequest
from apps.users.directory import UserDirectory

from .filters import ItemSearchFilterSet
from .models import Item

logger = logging.getLogger(__name__)


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


@dataclass
class ItemDetails:
    """Item card: the item with its comments and, for the owner, nearby bookings."""
    item: Item
    last_booking: Booking | None = None
    next_booking: Booking | None = None
    comments: list[Comment] = field(default_factory=list)


class ItemService:
    """Item operations for owners and renters."""

    def __init__(
        self,
        booking_repo: BookingRepository | None = None,
        users: UserDirectory | None = None,
        comments: CommentService | None = None,
        clock: Callable[[], datetime] = timezone.now,
    ):
        self.booking_repo = booking_repo or BookingRepository()
        self.users = users or UserDirectory()
        self.comments = comments or CommentService(booking_repo=self.booking_repo, clock=clock)
        self.clock = clock

    @transaction.atomic
    def add_item(
        self,
        owner_id: int,
        name: str | None = None,
        description: str | None = None,
        available: bool | None = None,
        request_id: int | None = None,
    ) -> Item:
        self.users.require(owner_id)
        if _is_blank(name):
            raise DomainValidationError("Name must not be null or empty")
        if _is_blank(description):
            raise DomainValidationError("Description must not be null or empty")
        if available is None:
            raise DomainValidationError("Available must not be null")
        if request_id is not None and not ItemRequest.objects.filter(pk=request_id).exists():
            raise NotFoundError(f"ItemRequest with id {request_id} not found")
        item = Item.objects.create(
            owner_id=owner_id,
            name=name,
            description=description,
            available=available,
            request_id=request_id,
        )
        logger.info(f"'Add item': '{item}'")
        return item

    @transaction.atomic
    def update_item(
        self,
        owner_id: int,
        item_id: int,
        name: str | None = None,
        description: str | None = None,
        available: bool | None = None,
    ) -> Item:
        self.users.require(owner_id)
        item = self._get(item_id)
        if item.owner_id != owner_id:
            raise NotFoundError(
                f"The user with id {owner_id} cannot change an item that he does not own"
            )
        update_fields = []
        if not _is_blank(name):
            item.name = name
            update_fields.append("name")
        if not _is_blank(description):
            item.description = description
            update_fields.append("description")
        if available is not None:
            item.available = available
            update_fields.append("available")
        if update_fields:
            item.save(update_fields=update_fields)
        logger.info(f"'Update item': '{item}'")
        return item

    def get_item(self, caller_id: int, item_id: int) -> ItemDetails:
        """Item card; last and next bookings are shown to the owner only."""
        self.users.require(caller_id)
        item = self._get(item_id)
        if item.owner_id == caller_id:
            return self._details(item, self.clock())
        return ItemDetails(item=item, comments=self.comments.comments_for_item(item.pk))

    def list_items(self, owner_id: int, page: PageRequest | None = None) -> list[ItemDetails]:
        """The owner's items ordered by id, optionally one page of them."""
        self.users.require(owner_id)
        now = self.clock()
        queryset = Item.objects.filter(owner_id=owner_id).order_by("id")
        if page is not None:
            queryset = page.apply(queryset)
        return [self._details(item, now) for item in queryset]

    def search(
        self, caller_id: int, text: str | None, page: PageRequest | None = None
    ) -> list[Item]:
        self.users.require(caller_id)
        if _is_blank(text):
            return []
        filterset = ItemSearchFilterSet(
            data={"text": text, "available": True},
            queryset=Item.objects.order_by("id"),
        )
        queryset = filterset.qs
        if page is not None:
            queryset = page.apply(queryset)
        return list(queryset)

    def _details(self, item: Item, now: datetime) -> ItemDetails:
        return ItemDetails(
            item=item,
            last_booking=self.booking_repo.find_last_for_item(item.pk, now),
            next_booking=self.booking_repo.find_next_for_item(item.pk, now),
            comments=self.comments.comments_for_item(item.pk),
        )

    @staticmethod
    def _get(item_id: int) -> Item:
        try:
            return Item.objects.get(pk=item_id)
        except Item.DoesNotExist:
            raise NotFoundError(f"Item with id {item_id} not found")
