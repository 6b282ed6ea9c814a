"""
Common Value Objects

Value objects used across multiple apps:
- Period: the reserved interval of a booking (start to end)
- PageRequest: offset pagination as accepted by list endpoints
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from shared.domain.exceptions import DomainValidationError


@dataclass(frozen=True)
class Period:
    """
    Booking period value object

    Represents the interval from start to end, both inclusive.
    A zero-length period (start == end) is accepted; only an end
    that comes before the start is rejected.
    """
    start: datetime
    end: datetime

    def __post_init__(self):
        if self.start > self.end:
            raise DomainValidationError("The end of the booking should not be before it starts")

    def __str__(self):
        return f"{self.start.isoformat()} - {self.end.isoformat()}"


@dataclass(frozen=True)
class PageRequest:
    """
    Page of an ordered result set

    ``offset_from`` is the ``from`` query parameter. It selects the page
    ``offset_from // size``, so a ``from`` that is not a multiple of
    ``size`` is rounded down to the start of its page.
    """
    offset_from: int
    size: int

    def __post_init__(self):
        if self.offset_from < 0:
            raise DomainValidationError("Parameter 'from' must not be negative")
        if self.size <= 0:
            raise DomainValidationError("Parameter 'size' must be positive")

    @classmethod
    def of(cls, offset_from: int | None, size: int | None) -> PageRequest | None:
        """Both values or nothing: a partial pair means 'no pagination'."""
        if offset_from is None or size is None:
            return None
        return cls(offset_from, size)

    @property
    def page(self) -> int:
        return self.offset_from // self.size

    @property
    def offset(self) -> int:
        return self.page * self.size

    def apply(self, sequence):
        """Slice a queryset or list down to this page."""
        return sequence[self.offset:self.offset + self.size]
