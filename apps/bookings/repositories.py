"""
Booking Repository

Persists ``Booking`` entities in the ``bookings`` table and answers the
filtered, time-ordered listings used by the query handlers and by the
item and comment services.
"""

from __future__ import annotations

from datetime import datetime
import logging

from shared.domain.exceptions import DomainValidationError, NotFoundError
from shared.domain.value_objects import PageRequest
from shared.infrastructure.db import lock_queryset_if_possible
from apps.items.directory import ItemRecord
from apps.users.directory import UserRecord

from .domain.entities import Booking, BookingStatus, BookingView
from .domain.states import BookingQuery, BookingRole
from .models import Booking as BookingModel

logger = logging.getLogger(__name__)


def _to_view(model: BookingModel) -> BookingView:
    return BookingView(
        id=model.pk,
        item=ItemRecord.from_model(model.item),
        booker=UserRecord.from_model(model.booker),
        start=model.start,
        end=model.end,
        status=BookingStatus(model.status),
    )


class BookingRepository:
    """Django ORM backed booking store."""

    def save(self, booking: Booking) -> Booking:
        """
        Insert a new booking or persist a status change

        Only the status of an existing row is ever written back, and an
        approved row is never overwritten, even from a stale entity.
        """
        if booking.id is None:
            model = BookingModel.objects.create(
                item_id=booking.item_id,
                booker_id=booking.booker_id,
                start=booking.start,
                end=booking.end,
                status=booking.status.value,
            )
            logger.info(f"Saved booking {model.pk} for item {booking.item_id}")
            return model.to_entity()

        updated = (
            BookingModel.objects.filter(pk=booking.id)
            .exclude(status=BookingModel.Status.APPROVED)
            .update(status=booking.status.value)
        )
        if not updated:
            if BookingModel.objects.filter(pk=booking.id).exists():
                raise DomainValidationError(
                    f"The booking with id {booking.id} has already been confirmed"
                )
            raise NotFoundError(f"Booking with id {booking.id} not found")
        logger.info(f"Booking {booking.id} status set to {booking.status.value}")
        return booking

    def get_by_id(self, booking_id: int, *, lock: bool = False) -> Booking:
        """Return the booking; with ``lock`` the row stays locked until commit."""
        queryset = BookingModel.objects.filter(pk=booking_id)
        if lock:
            queryset = lock_queryset_if_possible(queryset)
        model = queryset.first()
        if model is None:
            raise NotFoundError(f"Booking with id {booking_id} not found")
        return model.to_entity()

    def get_view(self, booking_id: int) -> BookingView:
        try:
            model = BookingModel.objects.select_related('item', 'booker').get(pk=booking_id)
        except BookingModel.DoesNotExist:
            raise NotFoundError(f"Booking with id {booking_id} not found")
        return _to_view(model)

    def find(
        self,
        role: BookingRole,
        user_id: int,
        query: BookingQuery,
        page: PageRequest | None = None,
    ) -> list[BookingView]:
        """Bookings made by the user, or made on the user's items."""
        if role is BookingRole.BOOKER:
            queryset = BookingModel.objects.filter(booker_id=user_id)
        else:
            queryset = BookingModel.objects.filter(item__owner_id=user_id)

        queryset = (
            queryset.filter(query.to_q())
            .select_related('item', 'booker')
            .order_by(*query.ordering)
        )
        if page is not None:
            queryset = page.apply(queryset)
        return [_to_view(model) for model in queryset]

    # ----- Item timeline -----

    def find_last_for_item(self, item_id: int, now: datetime) -> Booking | None:
        """Latest booking of the item that started before ``now``."""
        model = (
            BookingModel.objects.filter(item_id=item_id, start__lt=now)
            .order_by('-start', '-id')
            .first()
        )
        return model.to_entity() if model else None

    def find_next_for_item(self, item_id: int, now: datetime) -> Booking | None:
        """Earliest booking of the item that starts after ``now``."""
        model = (
            BookingModel.objects.filter(item_id=item_id, start__gt=now)
            .order_by('start', 'id')
            .first()
        )
        return model.to_entity() if model else None

    def find_completed(self, item_id: int, booker_id: int, now: datetime) -> list[Booking]:
        """Bookings of the item by the booker that ended before ``now``."""
        queryset = BookingModel.objects.filter(
            item_id=item_id,
            booker_id=booker_id,
            end__lt=now,
        ).order_by('-start', '-id')
        return [model.to_entity() for model in queryset]
