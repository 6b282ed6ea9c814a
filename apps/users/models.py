"""User domain models for ShareIt."""

from __future__ import annotations

from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class User(models.Model):
    """Пользователь сервиса: владелец вещей и/или арендатор."""

    name = models.CharField(_("Имя"), max_length=255)
    email = models.EmailField(_("Email"), max_length=512, unique=True)

    class Meta:
        db_table = "users"
        verbose_name = _("Пользователь")
        verbose_name_plural = _("Пользователи")
        ordering = ["id"]

    def __str__(self) -> str:
        return f"User(id={self.pk}, name={self.name!r}, email={self.email!r})"
