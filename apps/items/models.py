"""Item domain models for ShareIt."""

from __future__ import annotations

from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Item(models.Model):
    """Вещь, которую владелец готов сдать в аренду."""

    owner = models.ForeignKey(
        "users.User",
        on_delete=models.CASCADE,
        related_name="items",
    )
    name = models.CharField(_("Название"), max_length=255)
    description = models.TextField(_("Описание"))
    available = models.BooleanField(
        _("Доступна"),
        default=True,
        help_text=_("Только доступные вещи можно забронировать."),
    )
    request = models.ForeignKey(
        "requests.ItemRequest",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="items",
        help_text=_("Запрос, в ответ на который добавлена вещь."),
    )

    class Meta:
        db_table = "items"
        verbose_name = _("Вещь")
        verbose_name_plural = _("Вещи")
        ordering = ["id"]

    def __str__(self) -> str:
        return (
            f"Item(id={self.pk}, owner_id={self.owner_id}, name={self.name!r}, "
            f"available={self.available}, request_id={self.request_id})"
        )
