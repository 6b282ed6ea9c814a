"""Serializers for user-related API endpoints."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import User


class UserSerializer(serializers.ModelSerializer):
    """Основной сериализатор пользователя."""

    class Meta:
        model = User
        fields = ["id", "name", "email"]
        read_only_fields = ["id"]


class UserWriteSerializer(serializers.Serializer):
    """Входные данные для создания и обновления пользователя.

    Both fields are optional here; the service decides which ones are
    mandatory for the operation at hand.
    """

    name = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    email = serializers.EmailField(required=False, allow_blank=True, allow_null=True)
