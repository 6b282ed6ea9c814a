"""User directory consumed by the booking core.

The booking and item services never touch the ``User`` model directly;
they ask this directory whether a user exists and for the display data
they embed in their responses.
"""

from __future__ import annotations

from dataclasses import dataclass

from shared.domain.exceptions import NotFoundError

from .models import User


@dataclass(frozen=True)
class UserRecord:
    id: int
    name: str
    email: str

    @classmethod
    def from_model(cls, user: User) -> "UserRecord":
        return cls(id=user.pk, name=user.name, email=user.email)


class UserDirectory:
    """Lookup of users by id."""

    def exists(self, user_id: int) -> bool:
        return User.objects.filter(pk=user_id).exists()

    def get(self, user_id: int) -> UserRecord:
        try:
            return UserRecord.from_model(User.objects.get(pk=user_id))
        except User.DoesNotExist:
            raise NotFoundError(f"User with id {user_id} not found")

    def require(self, user_id: int) -> None:
        """Fail with ``NotFoundError`` unless the user exists."""
        if not self.exists(user_id):
            raise NotFoundError(f"User with id {user_id} not found")
