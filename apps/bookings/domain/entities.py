"""
Booking Domain Entities

Core business entities for the booking domain:
- Booking: a request to borrow an item for a period
- BookingStatus: FSM states for the approval lifecycle
- BookingView: booking enriched with item and booker display data
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum

from shared.domain.exceptions import DomainValidationError
from shared.domain.value_objects import Period
from apps.items.directory import ItemRecord
from apps.users.directory import UserRecord


class BookingStatus(Enum):
    """
    Booking Status Finite State Machine

    State transitions:
    - WAITING -> APPROVED (owner approved)
    - WAITING -> REJECTED (owner rejected)
    - REJECTED -> APPROVED or REJECTED (owner decided again)

    APPROVED is terminal.
    """
    WAITING = 'WAITING'
    APPROVED = 'APPROVED'
    REJECTED = 'REJECTED'


@dataclass(frozen=True)
class Booking:
    """
    Booking entity

    Item, booker and period are fixed at creation. The status is the
    only thing that changes, and only through ``decide``.
    """
    item_id: int
    booker_id: int
    period: Period
    status: BookingStatus = BookingStatus.WAITING
    id: int | None = None

    @classmethod
    def request(cls, item_id: int, booker_id: int, period: Period) -> Booking:
        """New booking awaiting the owner's decision."""
        return cls(item_id=item_id, booker_id=booker_id, period=period)

    @property
    def start(self) -> datetime:
        return self.period.start

    @property
    def end(self) -> datetime:
        return self.period.end

    def decide(self, approved: bool) -> Booking:
        """
        Apply the owner's decision (WAITING/REJECTED -> APPROVED/REJECTED)

        Raises:
            DomainValidationError: if the booking is already approved
        """
        if self.status == BookingStatus.APPROVED:
            raise DomainValidationError(
                f"The booking with id {self.id} has already been confirmed"
            )
        new_status = BookingStatus.APPROVED if approved else BookingStatus.REJECTED
        return replace(self, status=new_status)


@dataclass(frozen=True)
class BookingView:
    """Booking as returned to callers: item and booker are embedded."""
    id: int
    item: ItemRecord
    booker: UserRecord
    start: datetime
    end: datetime
    status: BookingStatus
