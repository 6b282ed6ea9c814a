"""API views for the booking domain."""

from __future__ import annotations

from rest_framework import viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from shared.infrastructure.http import CallerIdMixin

from .application.command_handlers import (
    AddBookingCommand,
    AddBookingHandler,
    DecideBookingCommand,
    DecideBookingHandler,
)
from .application.queries import (
    GetBookingHandler,
    GetBookingQuery,
    ListBookingsHandler,
    ListBookingsQuery,
)
from .domain.states import BookingRole
from .serializers import (
    BookingCreateSerializer,
    BookingDecisionSerializer,
    BookingListParamsSerializer,
    BookingSerializer,
)


class BookingViewSet(CallerIdMixin, viewsets.ViewSet):
    """Viewset для создания, подтверждения и просмотра бронирований."""

    lookup_value_regex = r"\d+"

    def create(self, request):
        booker_id = self.caller_id
        serializer = BookingCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        booking = AddBookingHandler().handle(
            AddBookingCommand(
                booker_id=booker_id,
                item_id=data["itemId"],
                start=data["start"],
                end=data["end"],
            )
        )
        return Response(BookingSerializer(booking).data)

    def partial_update(self, request, pk=None):
        decider_id = self.caller_id
        # plain dict: a QueryDict would turn a missing flag into False
        params = BookingDecisionSerializer(data=request.query_params.dict())
        params.is_valid(raise_exception=True)
        booking = DecideBookingHandler().handle(
            DecideBookingCommand(
                decider_id=decider_id,
                booking_id=int(pk),
                approved=params.validated_data["approved"],
            )
        )
        return Response(BookingSerializer(booking).data)

    def retrieve(self, request, pk=None):
        booking = GetBookingHandler().handle(
            GetBookingQuery(requester_id=self.caller_id, booking_id=int(pk))
        )
        return Response(BookingSerializer(booking).data)

    def list(self, request):
        return self._list(request, BookingRole.BOOKER)

    @action(detail=False, methods=["get"])
    def owner(self, request):
        return self._list(request, BookingRole.OWNER)

    def _list(self, request, role: BookingRole):
        requester_id = self.caller_id
        params = BookingListParamsSerializer(data=request.query_params.dict())
        params.is_valid(raise_exception=True)
        data = params.validated_data
        bookings = ListBookingsHandler().handle(
            ListBookingsQuery(
                requester_id=requester_id,
                role=role,
                state=data["state"],
                offset_from=data.get("from"),
                size=data.get("size"),
            )
        )
        return Response(BookingSerializer(bookings, many=True).data)
