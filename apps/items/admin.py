"""Admin registrations for items."""

from __future__ import annotations

from django.contrib import admin

from .models import Item


@admin.register(Item)
class ItemAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "owner", "available")
    list_filter = ("available",)
    search_fields = ("name", "description", "owner__email")
    raw_id_fields = ("owner",)
