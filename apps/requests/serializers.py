"""Serializers for item requests."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from apps.items.serializers import ItemSerializer

from .models import ItemRequest


class ItemRequestSerializer(serializers.ModelSerializer):
    """Краткое представление запроса."""

    class Meta:
        model = ItemRequest
        fields = ["id", "description", "created"]


class ItemRequestDetailSerializer(serializers.Serializer):
    """Запрос вместе с вещами, добавленными в ответ на него."""

    id = serializers.IntegerField(source="request.pk", read_only=True)
    description = serializers.CharField(source="request.description", read_only=True)
    created = serializers.DateTimeField(source="request.created", read_only=True)
    items = ItemSerializer(many=True, read_only=True)


class ItemRequestCreateSerializer(serializers.Serializer):
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
