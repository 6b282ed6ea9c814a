"""Serializers for comments."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import Comment


class CommentSerializer(serializers.ModelSerializer):
    authorName = serializers.ReadOnlyField(source="author.name")

    class Meta:
        model = Comment
        fields = ["id", "text", "authorName", "created"]


class CommentCreateSerializer(serializers.Serializer):
    text = serializers.CharField(required=False, allow_blank=True, allow_null=True)
