"""
Booking Query Handlers

Read-side use cases: fetch one booking, or list bookings by state for
the booker or for the owner of the booked items.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable
import logging

from django.utils import timezone  # type: ignore

from shared.domain.exceptions import NotFoundError
from shared.domain.value_objects import PageRequest
from apps.users.directory import UserDirectory

from apps.bookings.domain.entities import BookingView
from apps.bookings.domain.states import BookingRole, BookingState, booking_query_for
from apps.bookings.repositories import BookingRepository

logger = logging.getLogger(__name__)


@dataclass
class GetBookingQuery:
    requester_id: int
    booking_id: int


@dataclass
class ListBookingsQuery:
    requester_id: int
    role: BookingRole
    state: str = 'ALL'
    offset_from: int | None = None
    size: int | None = None


class GetBookingHandler:
    """Booking details, visible to its booker and to the item owner only."""

    def __init__(
        self,
        booking_repo: BookingRepository | None = None,
        users: UserDirectory | None = None,
    ):
        self.booking_repo = booking_repo or BookingRepository()
        self.users = users or UserDirectory()

    def handle(self, query: GetBookingQuery) -> BookingView:
        self.users.require(query.requester_id)
        view = self.booking_repo.get_view(query.booking_id)
        if query.requester_id not in (view.booker.id, view.item.owner_id):
            raise NotFoundError(
                f"The user with id {query.requester_id} is not the owner and not booker"
            )
        return view


class ListBookingsHandler:
    """
    Bookings of a booker or of an owner's items, filtered by state

    ``clock`` supplies "now" for the time-based states.
    """

    def __init__(
        self,
        booking_repo: BookingRepository | None = None,
        users: UserDirectory | None = None,
        clock: Callable[[], datetime] = timezone.now,
    ):
        self.booking_repo = booking_repo or BookingRepository()
        self.users = users or UserDirectory()
        self.clock = clock

    def handle(self, query: ListBookingsQuery) -> list[BookingView]:
        self.users.require(query.requester_id)
        state = BookingState.parse(query.state)
        page = PageRequest.of(query.offset_from, query.size)

        descriptor = booking_query_for(state, self.clock())
        bookings = self.booking_repo.find(query.role, query.requester_id, descriptor, page)
        logger.debug(
            f"Listed {len(bookings)} bookings for {query.role.value.lower()} "
            f"{query.requester_id} in state {state.value}"
        )
        return bookings
