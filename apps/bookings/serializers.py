"""Serializers for the booking domain."""

from __future__ import annotations

from django.utils import timezone  # type: ignore

from rest_framework import serializers  # type: ignore

from shared.infrastructure.paging import PageParamsSerializer


class BookingItemSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name = serializers.CharField()
    description = serializers.CharField()
    available = serializers.BooleanField()


class BookingBookerSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name = serializers.CharField()
    email = serializers.EmailField()


class BookingSerializer(serializers.Serializer):
    """Детальное представление бронирования с вещью и арендатором."""

    id = serializers.IntegerField(read_only=True)
    item = BookingItemSerializer(read_only=True)
    booker = BookingBookerSerializer(read_only=True)
    start = serializers.DateTimeField(read_only=True)
    end = serializers.DateTimeField(read_only=True)
    status = serializers.CharField(source="status.value", read_only=True)


class BookingShortSerializer(serializers.Serializer):
    """Краткое представление бронирования внутри карточки вещи."""

    id = serializers.IntegerField(read_only=True)
    itemId = serializers.IntegerField(source="item_id", read_only=True)
    bookerId = serializers.IntegerField(source="booker_id", read_only=True)
    start = serializers.DateTimeField(read_only=True)
    end = serializers.DateTimeField(read_only=True)


class BookingCreateSerializer(serializers.Serializer):
    """Создание брони арендатором."""

    itemId = serializers.IntegerField()
    start = serializers.DateTimeField()
    end = serializers.DateTimeField()

    def validate_start(self, value):
        if value < timezone.now().replace(microsecond=0):
            raise serializers.ValidationError("Start must be in the present or future.")
        return value

    def validate_end(self, value):
        if value <= timezone.now():
            raise serializers.ValidationError("End must be in the future.")
        return value


class BookingDecisionSerializer(serializers.Serializer):
    approved = serializers.BooleanField()


class BookingListParamsSerializer(PageParamsSerializer):
    """Query parameters of the booking listings: ``state``, ``from`` and ``size``."""

    state = serializers.CharField(required=False, default="ALL")
