"""Services for managing ShareIt users."""

from __future__ import annotations

import logging

from django.db import transaction  # type: ignore

from shared.domain.exceptions import ConflictError, DomainValidationError, NotFoundError

from .models import User

logger = logging.getLogger(__name__)


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


class UserService:
    """CRUD operations over users."""

    def list_users(self) -> list[User]:
        return list(User.objects.order_by("id"))

    def get_user(self, user_id: int) -> User:
        try:
            return User.objects.get(pk=user_id)
        except User.DoesNotExist:
            raise NotFoundError(f"User with id {user_id} not found")

    @transaction.atomic
    def add_user(self, name: str | None = None, email: str | None = None) -> User:
        if _is_blank(email):
            raise DomainValidationError("Email must not be null or empty")
        if _is_blank(name):
            raise DomainValidationError("Name must not be null or empty")
        self._ensure_email_is_free(email)
        user = User.objects.create(name=name, email=email)
        logger.info(f"'Add user': '{user}'")
        return user

    @transaction.atomic
    def update_user(self, user_id: int, name: str | None = None, email: str | None = None) -> User:
        user = self.get_user(user_id)
        update_fields = []
        if not _is_blank(email) and email != user.email:
            self._ensure_email_is_free(email, exclude_id=user.pk)
            user.email = email
            update_fields.append("email")
        if not _is_blank(name):
            user.name = name
            update_fields.append("name")
        if update_fields:
            user.save(update_fields=update_fields)
        logger.info(f"'Update user': '{user}'")
        return user

    @transaction.atomic
    def delete_user(self, user_id: int) -> None:
        user = self.get_user(user_id)
        user.delete()
        logger.info(f"'Delete user': 'User with id {user_id}'")

    @staticmethod
    def _ensure_email_is_free(email: str, exclude_id: int | None = None) -> None:
        qs = User.objects.filter(email__iexact=email)
        if exclude_id is not None:
            qs = qs.exclude(pk=exclude_id)
        if qs.exists():
            raise ConflictError(f"User with email {email} already exists")
