"""URL configuration for ShareIt project.

The `urlpatterns` list routes URLs to views. Resources are mounted at the
root (``/users``, ``/items``, ``/bookings``, ``/requests``) without
trailing slashes, the way the gateway in front of the service addresses them.
"""
from django.contrib import admin  # type: ignore
from django.urls import path, include  # type: ignore

urlpatterns = [
    path('admin/', admin.site.urls),
    # Application URLs
    path('', include('apps.users.urls')),
    path('', include('apps.items.urls')),
    path('', include('apps.bookings.urls')),
    path('', include('apps.requests.urls')),
]
