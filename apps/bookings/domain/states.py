"""
Booking list filters

A listing request names a state token. Each token maps, together with the
current time, to a ``BookingQuery``: a plain description of which
bookings qualify and how they are ordered. The repository turns that
description into SQL; nothing here touches the database.

| token    | predicate vs now      |
|----------|-----------------------|
| ALL      | none                  |
| CURRENT  | start <= now <= end   |
| PAST     | end < now             |
| FUTURE   | start > now           |
| WAITING  | status == WAITING     |
| REJECTED | status == REJECTED    |

Every token orders by start, newest first.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Callable

from django.db.models import Q  # type: ignore

from shared.domain.exceptions import DomainValidationError
from .entities import BookingStatus


class BookingState(Enum):
    ALL = 'ALL'
    CURRENT = 'CURRENT'
    PAST = 'PAST'
    FUTURE = 'FUTURE'
    WAITING = 'WAITING'
    REJECTED = 'REJECTED'

    @classmethod
    def parse(cls, token: str) -> BookingState:
        """Case-sensitive lookup of a state token."""
        try:
            return cls(token)
        except ValueError:
            raise DomainValidationError(f"Unknown state: {token}")


class BookingRole(Enum):
    """Whose bookings are listed: the caller's own, or those of the caller's items."""
    BOOKER = 'BOOKER'
    OWNER = 'OWNER'


@dataclass(frozen=True)
class BookingQuery:
    """Filter and ordering for a booking listing."""
    status: BookingStatus | None = None
    active_at: datetime | None = None
    ended_before: datetime | None = None
    starts_after: datetime | None = None
    ordering: tuple[str, ...] = ('-start', '-id')

    def to_q(self) -> Q:
        q = Q()
        if self.status is not None:
            q &= Q(status=self.status.value)
        if self.active_at is not None:
            q &= Q(start__lte=self.active_at, end__gte=self.active_at)
        if self.ended_before is not None:
            q &= Q(end__lt=self.ended_before)
        if self.starts_after is not None:
            q &= Q(start__gt=self.starts_after)
        return q


_QUERY_BUILDERS: dict[BookingState, Callable[[datetime], BookingQuery]] = {
    BookingState.ALL: lambda now: BookingQuery(),
    BookingState.CURRENT: lambda now: BookingQuery(active_at=now),
    BookingState.PAST: lambda now: BookingQuery(ended_before=now),
    BookingState.FUTURE: lambda now: BookingQuery(starts_after=now),
    BookingState.WAITING: lambda now: BookingQuery(status=BookingStatus.WAITING),
    BookingState.REJECTED: lambda now: BookingQuery(status=BookingStatus.REJECTED),
}


def booking_query_for(state: BookingState, now: datetime) -> BookingQuery:
    return _QUERY_BUILDERS[state](now)
