"""Admin registration for comments."""

from __future__ import annotations

from django.contrib import admin

from .models import Comment


@admin.register(Comment)
class CommentAdmin(admin.ModelAdmin):
    list_display = ("id", "item", "author", "created")
    search_fields = ("text", "item__name", "author__email")
    raw_id_fields = ("item", "author")
