"""Serializers for item-related API endpoints."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from apps.bookings.serializers import BookingShortSerializer
from apps.comments.serializers import CommentSerializer

from .models import Item


class ItemSerializer(serializers.ModelSerializer):
    """Краткое представление вещи."""

    requestId = serializers.IntegerField(source="request_id", read_only=True, allow_null=True)

    class Meta:
        model = Item
        fields = ["id", "name", "description", "available", "requestId"]
        read_only_fields = ["id"]


class ItemDetailSerializer(serializers.Serializer):
    """Карточка вещи с ближайшими бронированиями и отзывами."""

    id = serializers.IntegerField(source="item.pk", read_only=True)
    name = serializers.CharField(source="item.name", read_only=True)
    description = serializers.CharField(source="item.description", read_only=True)
    available = serializers.BooleanField(source="item.available", read_only=True)
    lastBooking = BookingShortSerializer(source="last_booking", read_only=True, allow_null=True)
    nextBooking = BookingShortSerializer(source="next_booking", read_only=True, allow_null=True)
    comments = CommentSerializer(many=True, read_only=True)


class ItemWriteSerializer(serializers.Serializer):
    """Входные данные для создания и обновления вещи.

    Presence rules differ between create and update, so they are left to
    the service. ``requestId`` is only taken into account on create.
    """

    name = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    available = serializers.BooleanField(required=False, allow_null=True)
    requestId = serializers.IntegerField(source="request_id", required=False, allow_null=True)
