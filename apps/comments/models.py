"""Comment models for ShareIt."""

from __future__ import annotations

from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Comment(models.Model):
    """Отзыв арендатора о вещи после завершения бронирования."""

    text = models.TextField(_("Текст"))
    item = models.ForeignKey(
        "items.Item",
        on_delete=models.CASCADE,
        related_name="comments",
    )
    author = models.ForeignKey(
        "users.User",
        on_delete=models.CASCADE,
        related_name="comments",
    )
    created = models.DateTimeField(_("Создан"))

    class Meta:
        db_table = "comments"
        verbose_name = _("Комментарий")
        verbose_name_plural = _("Комментарии")
        ordering = ["id"]

    def __str__(self) -> str:
        return (
            f"Comment(id={self.pk}, item_id={self.item_id}, author_id={self.author_id}, "
            f"created={self.created.isoformat()})"
        )
