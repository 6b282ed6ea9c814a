"""Comment services."""

from __future__ import annotations

from datetime import datetime
from typing import Callable
import logging

from django.db import transaction  # type: ignore
from django.utils import timezone  # type: ignore

from shared.domain.exceptions import DomainValidationError
from apps.bookings.repositories import BookingRepository
from apps.items.directory import ItemDirectory
from apps.users.directory import UserDirectory

from .models import Comment

logger = logging.getLogger(__name__)


class CommentService:
    """Comments may only be left by users whose booking of the item has ended."""

    def __init__(
        self,
        booking_repo: BookingRepository | None = None,
        users: UserDirectory | None = None,
        items: ItemDirectory | None = None,
        clock: Callable[[], datetime] = timezone.now,
    ):
        self.booking_repo = booking_repo or BookingRepository()
        self.users = users or UserDirectory()
        self.items = items or ItemDirectory()
        self.clock = clock

    def comments_for_item(self, item_id: int) -> list[Comment]:
        return list(
            Comment.objects.filter(item_id=item_id).select_related("author").order_by("id")
        )

    @transaction.atomic
    def add_comment(self, author_id: int, item_id: int, text: str | None) -> Comment:
        self.users.require(author_id)
        self.items.require(item_id)
        if text is None or not text.strip():
            raise DomainValidationError("Text must not be null or empty")

        now = self.clock()
        if not self.booking_repo.find_completed(item_id, author_id, now):
            raise DomainValidationError(
                f"User with id {author_id} did not book the item with id {item_id} "
                f"or the reservation has not ended yet."
            )

        comment = Comment.objects.create(
            text=text,
            item_id=item_id,
            author_id=author_id,
            created=now,
        )
        logger.info(f"'Add comment': '{comment}'")
        return Comment.objects.select_related("author").get(pk=comment.pk)
