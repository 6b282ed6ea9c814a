"""Item request API views."""

from __future__ import annotations

from rest_framework import viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from shared.infrastructure.http import CallerIdMixin
from shared.infrastructure.paging import page_from_request

from .serializers import (
    ItemRequestCreateSerializer,
    ItemRequestDetailSerializer,
    ItemRequestSerializer,
)
from .services import ItemRequestService


class ItemRequestViewSet(CallerIdMixin, viewsets.ViewSet):
    """Viewset для запросов вещей."""

    lookup_value_regex = r"\d+"
    service = ItemRequestService()

    def create(self, request):
        requestor_id = self.caller_id
        serializer = ItemRequestCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        item_request = self.service.add_request(
            requestor_id, serializer.validated_data.get("description")
        )
        return Response(ItemRequestSerializer(item_request).data)

    def list(self, request):
        details = self.service.list_own(self.caller_id)
        return Response(ItemRequestDetailSerializer(details, many=True).data)

    @action(detail=False, methods=["get"], url_path="all", url_name="all")
    def others(self, request):
        user_id = self.caller_id
        details = self.service.list_others(user_id, page_from_request(request))
        return Response(ItemRequestDetailSerializer(details, many=True).data)

    def retrieve(self, request, pk=None):
        details = self.service.get_request(self.caller_id, int(pk))
        return Response(ItemRequestDetailSerializer(details).data)
