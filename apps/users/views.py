"""User API views."""

from __future__ import annotations

from rest_framework import viewsets  # type: ignore
from rest_framework.response import Response  # type: ignore

from .serializers import UserSerializer, UserWriteSerializer
from .services import UserService


class UserViewSet(viewsets.ViewSet):
    """Управление пользователями.

    Users are plain records; no caller header is required for these
    endpoints.
    """

    lookup_value_regex = r"\d+"
    service = UserService()

    def list(self, request):
        return Response(UserSerializer(self.service.list_users(), many=True).data)

    def retrieve(self, request, pk=None):
        return Response(UserSerializer(self.service.get_user(int(pk))).data)

    def create(self, request):
        serializer = UserWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = self.service.add_user(**serializer.validated_data)
        return Response(UserSerializer(user).data)

    def partial_update(self, request, pk=None):
        serializer = UserWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        user = self.service.update_user(int(pk), **serializer.validated_data)
        return Response(UserSerializer(user).data)

    def destroy(self, request, pk=None):
        self.service.delete_user(int(pk))
        return Response()
