"""Integration tests for booking API endpoints."""

from __future__ import annotations

from datetime import timedelta

from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from apps.bookings.models import Booking
from apps.items.models import Item
from apps.users.models import User

HEADER = "HTTP_X_SHARER_USER_ID"


class BookingAPITests(APITestCase):
    """Covers создание, подтверждение, просмотр и списки бронирований."""

    def setUp(self) -> None:
        self.owner = User.objects.create(name="Owner", email="owner@example.com")
        self.booker = User.objects.create(name="Booker", email="booker@example.com")
        self.stranger = User.objects.create(name="Stranger", email="stranger@example.com")
        self.item = Item.objects.create(
            owner=self.owner,
            name="Дрель",
            description="Аккумуляторная дрель",
            available=True,
        )
        self.list_url = reverse("booking-list")
        self.owner_url = reverse("booking-owner")

    def _as(self, user: User) -> dict[str, str]:
        return {HEADER: str(user.id)}

    def _payload(self, start, end, item: Item | None = None) -> dict:
        return {
            "itemId": (item or self.item).id,
            "start": start.strftime("%Y-%m-%dT%H:%M:%S"),
            "end": end.strftime("%Y-%m-%dT%H:%M:%S"),
        }

    def _create(self, days_from_now: int = 1, length: int = 2):
        start = timezone.now() + timedelta(days=days_from_now)
        return self.client.post(
            self.list_url,
            self._payload(start, start + timedelta(days=length)),
            format="json",
            **self._as(self.booker),
        )

    def test_booker_can_create_booking(self) -> None:
        response = self._create()

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["status"], "WAITING")
        self.assertEqual(response.data["item"]["id"], self.item.id)
        self.assertEqual(response.data["item"]["name"], "Дрель")
        self.assertEqual(response.data["booker"]["id"], self.booker.id)
        self.assertEqual(response.data["booker"]["email"], "booker@example.com")
        self.assertEqual(Booking.objects.count(), 1)

    def test_owner_cannot_book_own_item(self) -> None:
        start = timezone.now() + timedelta(days=1)
        response = self.client.post(
            self.list_url,
            self._payload(start, start + timedelta(days=1)),
            format="json",
            **self._as(self.owner),
        )

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND, response.data)
        self.assertEqual(response.data["status"], 404)
        self.assertEqual(response.data["error"], "Not Found")
        self.assertIn("impossible to book", response.data["message"])
        self.assertEqual(Booking.objects.count(), 0)

    def test_end_before_start_is_rejected(self) -> None:
        start = timezone.now() + timedelta(days=5)
        response = self.client.post(
            self.list_url,
            self._payload(start, start - timedelta(days=2)),
            format="json",
            **self._as(self.booker),
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertIn("should not be before it starts", response.data["message"])

    def test_start_in_the_past_is_rejected(self) -> None:
        start = timezone.now() - timedelta(days=1)
        response = self.client.post(
            self.list_url,
            self._payload(start, start + timedelta(days=3)),
            format="json",
            **self._as(self.booker),
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertIn("start", response.data)

    def test_unavailable_item_is_rejected(self) -> None:
        self.item.available = False
        self.item.save(update_fields=["available"])

        response = self._create()

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertIn("not available", response.data["message"])

    def test_missing_caller_header_is_bad_request(self) -> None:
        start = timezone.now() + timedelta(days=1)
        response = self.client.post(
            self.list_url,
            self._payload(start, start + timedelta(days=1)),
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("X-Sharer-User-Id", response.data)

    def test_owner_approves_booking_once(self) -> None:
        booking_id = self._create().data["id"]
        url = reverse("booking-detail", args=[booking_id])

        approve = self.client.patch(f"{url}?approved=true", **self._as(self.owner))
        self.assertEqual(approve.status_code, status.HTTP_200_OK, approve.data)
        self.assertEqual(approve.data["status"], "APPROVED")

        again = self.client.patch(f"{url}?approved=false", **self._as(self.owner))
        self.assertEqual(again.status_code, status.HTTP_400_BAD_REQUEST, again.data)
        self.assertIn("already been confirmed", again.data["message"])
        self.assertEqual(Booking.objects.get(pk=booking_id).status, Booking.Status.APPROVED)

    def test_booker_cannot_decide(self) -> None:
        booking_id = self._create().data["id"]
        url = reverse("booking-detail", args=[booking_id])

        response = self.client.patch(f"{url}?approved=true", **self._as(self.booker))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND, response.data)

    def test_decision_requires_approved_flag(self) -> None:
        booking_id = self._create().data["id"]
        url = reverse("booking-detail", args=[booking_id])

        missing = self.client.patch(url, **self._as(self.owner))
        garbage = self.client.patch(f"{url}?approved=maybe", **self._as(self.owner))

        self.assertEqual(missing.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(garbage.status_code, status.HTTP_400_BAD_REQUEST)

    def test_booking_is_visible_to_parties_only(self) -> None:
        booking_id = self._create().data["id"]
        url = reverse("booking-detail", args=[booking_id])

        self.assertEqual(self.client.get(url, **self._as(self.booker)).status_code, status.HTTP_200_OK)
        self.assertEqual(self.client.get(url, **self._as(self.owner)).status_code, status.HTTP_200_OK)
        self.assertEqual(
            self.client.get(url, **self._as(self.stranger)).status_code,
            status.HTTP_404_NOT_FOUND,
        )

    def test_lists_for_booker_and_owner(self) -> None:
        first = self._create(days_from_now=1).data["id"]
        second = self._create(days_from_now=3).data["id"]

        booker_list = self.client.get(self.list_url, **self._as(self.booker))
        owner_list = self.client.get(self.owner_url, {"state": "FUTURE"}, **self._as(self.owner))
        stranger_list = self.client.get(self.owner_url, **self._as(self.stranger))

        self.assertEqual([b["id"] for b in booker_list.data], [second, first])
        self.assertEqual([b["id"] for b in owner_list.data], [second, first])
        self.assertEqual(stranger_list.data, [])

    def test_list_pagination(self) -> None:
        ids = [self._create(days_from_now=day).data["id"] for day in (1, 2, 3)]

        response = self.client.get(
            self.list_url, {"from": 2, "size": 2}, **self._as(self.booker)
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual([b["id"] for b in response.data], [ids[0]])

    def test_list_rejects_bad_paging_and_state(self) -> None:
        negative = self.client.get(self.list_url, {"from": -1, "size": 2}, **self._as(self.booker))
        zero = self.client.get(self.list_url, {"from": 0, "size": 0}, **self._as(self.booker))
        unknown = self.client.get(self.list_url, {"state": "UNKNOWN"}, **self._as(self.booker))

        self.assertEqual(negative.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(zero.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(unknown.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(unknown.data["message"], "Unknown state: UNKNOWN")

    def test_list_for_unknown_user_is_not_found(self) -> None:
        response = self.client.get(self.list_url, HTTP_X_SHARER_USER_ID="999")

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND, response.data)
