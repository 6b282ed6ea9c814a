"""FilterSet definitions for item search."""

from __future__ import annotations

import django_filters  # type: ignore
from django.db.models import Q  # type: ignore

from .models import Item


class ItemSearchFilterSet(django_filters.FilterSet):
    """Case-insensitive text search over name and description of available items."""

    text = django_filters.CharFilter(method="filter_text")

    class Meta:
        model = Item
        fields = ["available"]

    def filter_text(self, queryset, name, value):  # type: ignore
        if not value or not value.strip():
            return queryset.none()
        return queryset.filter(Q(name__icontains=value) | Q(description__icontains=value))
