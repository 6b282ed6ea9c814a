"""URL declarations for the item requests app."""

from __future__ import annotations

from django.urls import path, include  # type: ignore
from rest_framework.routers import SimpleRouter  # type: ignore

from .views import ItemRequestViewSet

router = SimpleRouter(trailing_slash=False)
router.register(r'requests', ItemRequestViewSet, basename='request')

urlpatterns = [
    path('', include(router.urls)),
]
