"""Item request models for ShareIt."""

from __future__ import annotations

from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class ItemRequest(models.Model):
    """Запрос вещи, которой пока нет среди предложений."""

    description = models.TextField(_("Описание"))
    requestor = models.ForeignKey(
        "users.User",
        on_delete=models.CASCADE,
        related_name="item_requests",
    )
    created = models.DateTimeField(_("Создан"))

    class Meta:
        db_table = "requests"
        verbose_name = _("Запрос вещи")
        verbose_name_plural = _("Запросы вещей")
        ordering = ["-created", "-id"]
        indexes = [
            models.Index(fields=["requestor", "created"], name="request_requestor_created_idx"),
        ]

    def __str__(self) -> str:
        return (
            f"ItemRequest(id={self.pk}, requestor_id={self.requestor_id}, "
            f"created={self.created.isoformat()})"
        )
