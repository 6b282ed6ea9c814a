"""
Booking Command Handlers

These are the use cases that change bookings.
They orchestrate domain operations within transactions.

Commands:
- AddBookingCommand: Request an item for a period
- DecideBookingCommand: Owner approves or rejects a booking
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
import logging

from shared.application.uow import DjangoUnitOfWork
from shared.domain.exceptions import DomainValidationError, NotFoundError
from shared.domain.value_objects import Period
from apps.items.directory import ItemDirectory
from apps.users.directory import UserDirectory

from apps.bookings.domain.entities import Booking, BookingView
from apps.bookings.repositories import BookingRepository

logger = logging.getLogger(__name__)


# ===== Commands =====

@dataclass
class AddBookingCommand:
    """Command to request an item for a period"""
    booker_id: int
    item_id: int
    start: datetime
    end: datetime


@dataclass
class DecideBookingCommand:
    """Command for the item owner to approve or reject a booking"""
    decider_id: int
    booking_id: int
    approved: bool


# ===== Command Handlers =====

class AddBookingHandler:
    """
    Handler for AddBooking command

    Checks run in a fixed order and the first failure wins:
    1. Booker exists (NotFound)
    2. Item exists (NotFound)
    3. Period does not end before it starts (Validation)
    4. Item is available (Validation)
    5. Booker is not the item owner (NotFound)

    The item row is locked (SELECT FOR UPDATE) from the availability check
    until the booking is inserted.
    """

    def __init__(
        self,
        booking_repo: BookingRepository | None = None,
        users: UserDirectory | None = None,
        items: ItemDirectory | None = None,
    ):
        self.booking_repo = booking_repo or BookingRepository()
        self.users = users or UserDirectory()
        self.items = items or ItemDirectory()

    def handle(self, command: AddBookingCommand) -> BookingView:
        logger.info(
            f"Creating booking for item {command.item_id}, "
            f"booker {command.booker_id}, dates {command.start} - {command.end}"
        )

        with DjangoUnitOfWork('add_booking'):
            self.users.require(command.booker_id)
            self.items.require(command.item_id)

            period = Period(command.start, command.end)

            item = self.items.get(command.item_id, lock=True)
            if not item.available:
                raise DomainValidationError(
                    f"The item with id {item.id} is not available for booking"
                )
            if item.owner_id == command.booker_id:
                raise NotFoundError("It is impossible to book a thing if you are its owner")

            booking = self.booking_repo.save(
                Booking.request(item_id=item.id, booker_id=command.booker_id, period=period)
            )

        logger.info(f"Booking {booking.id} created with status {booking.status.value}")
        return self.booking_repo.get_view(booking.id)


class DecideBookingHandler:
    """
    Handler for DecideBooking command

    Only the owner of the booked item may decide. An approved booking is
    final; a rejected one may be decided again.

    The booking row is locked until commit, so concurrent decisions on the
    same booking run one after the other.
    """

    def __init__(
        self,
        booking_repo: BookingRepository | None = None,
        users: UserDirectory | None = None,
        items: ItemDirectory | None = None,
    ):
        self.booking_repo = booking_repo or BookingRepository()
        self.users = users or UserDirectory()
        self.items = items or ItemDirectory()

    def handle(self, command: DecideBookingCommand) -> BookingView:
        with DjangoUnitOfWork('decide_booking'):
            self.users.require(command.decider_id)
            booking = self.booking_repo.get_by_id(command.booking_id, lock=True)

            item = self.items.get(booking.item_id)
            if item.owner_id != command.decider_id:
                raise NotFoundError(
                    f"The user with id {command.decider_id} cannot change "
                    f"an item that he does not own"
                )

            booking = self.booking_repo.save(booking.decide(command.approved))

        logger.info(
            f"Booking {booking.id} {booking.status.value.lower()} by owner {command.decider_id}"
        )
        return self.booking_repo.get_view(booking.id)
