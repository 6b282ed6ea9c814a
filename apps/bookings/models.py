"""Booking persistence model for ShareIt."""

from __future__ import annotations

from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

from .domain.entities import Booking as BookingEntity, BookingStatus
from shared.domain.value_objects import Period


class Booking(models.Model):
    """Бронирование вещи пользователем на период."""

    class Status(models.TextChoices):
        WAITING = "WAITING", _("Ожидает подтверждения")
        APPROVED = "APPROVED", _("Подтверждено")
        REJECTED = "REJECTED", _("Отклонено")

    item = models.ForeignKey(
        "items.Item",
        on_delete=models.CASCADE,
        related_name="bookings",
    )
    booker = models.ForeignKey(
        "users.User",
        on_delete=models.CASCADE,
        related_name="bookings",
    )
    start = models.DateTimeField(_("Начало"), db_column="start_time")
    end = models.DateTimeField(_("Окончание"), db_column="end_time")
    status = models.CharField(
        max_length=16,
        choices=Status.choices,
        default=Status.WAITING,
    )

    class Meta:
        db_table = "bookings"
        verbose_name = _("Бронирование")
        verbose_name_plural = _("Бронирования")
        ordering = ["-start"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(end__gte=models.F("start")),
                name="booking_end_not_before_start",
            ),
        ]
        indexes = [
            models.Index(fields=["booker", "start"], name="booking_booker_start_idx"),
            models.Index(fields=["item", "start"], name="booking_item_start_idx"),
            models.Index(fields=["status"], name="booking_status_idx"),
        ]

    def __str__(self) -> str:
        return (
            f"Booking(id={self.pk}, item_id={self.item_id}, booker_id={self.booker_id}, "
            f"start={self.start.isoformat()}, end={self.end.isoformat()}, status={self.status})"
        )

    def to_entity(self) -> BookingEntity:
        return BookingEntity(
            id=self.pk,
            item_id=self.item_id,
            booker_id=self.booker_id,
            period=Period(self.start, self.end),
            status=BookingStatus(self.status),
        )
