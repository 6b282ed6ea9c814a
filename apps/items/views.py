"""Item API views."""

from __future__ import annotations

from rest_framework import viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from shared.infrastructure.http import CallerIdMixin
from shared.infrastructure.paging import page_from_request
from apps.comments.serializers import CommentCreateSerializer, CommentSerializer
from apps.comments.services import CommentService

from .serializers import ItemDetailSerializer, ItemSerializer, ItemWriteSerializer
from .services import ItemService


class ItemViewSet(CallerIdMixin, viewsets.ViewSet):
    """Viewset для управления вещами, поиска и отзывов."""

    lookup_value_regex = r"\d+"

    def get_service(self) -> ItemService:
        return ItemService()

    def create(self, request):
        owner_id = self.caller_id
        serializer = ItemWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        item = self.get_service().add_item(owner_id, **serializer.validated_data)
        return Response(ItemSerializer(item).data)

    def partial_update(self, request, pk=None):
        owner_id = self.caller_id
        serializer = ItemWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        data = dict(serializer.validated_data)
        data.pop("request_id", None)
        item = self.get_service().update_item(owner_id, int(pk), **data)
        return Response(ItemSerializer(item).data)

    def retrieve(self, request, pk=None):
        details = self.get_service().get_item(self.caller_id, int(pk))
        return Response(ItemDetailSerializer(details).data)

    def list(self, request):
        owner_id = self.caller_id
        details = self.get_service().list_items(owner_id, page_from_request(request))
        return Response(ItemDetailSerializer(details, many=True).data)

    @action(detail=False, methods=["get"])
    def search(self, request):
        caller_id = self.caller_id
        items = self.get_service().search(
            caller_id, request.query_params.get("text"), page_from_request(request)
        )
        return Response(ItemSerializer(items, many=True).data)

    @action(detail=True, methods=["post"])
    def comment(self, request, pk=None):
        author_id = self.caller_id
        serializer = CommentCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        comment = CommentService().add_comment(
            author_id, int(pk), serializer.validated_data.get("text")
        )
        return Response(CommentSerializer(comment).data)
