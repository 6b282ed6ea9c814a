"""Integration tests for item API endpoints."""

from __future__ import annotations

from datetime import timedelta

from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from apps.bookings.models import Booking
from apps.items.models import Item
from apps.requests.models import ItemRequest
from apps.users.models import User

HEADER = "HTTP_X_SHARER_USER_ID"


class ItemAPITests(APITestCase):
    """Covers создание, изменение, карточку, поиск и отзывы."""

    def setUp(self) -> None:
        self.owner = User.objects.create(name="Owner", email="owner@example.com")
        self.booker = User.objects.create(name="Booker", email="booker@example.com")
        self.list_url = reverse("item-list")

    def _as(self, user: User) -> dict[str, str]:
        return {HEADER: str(user.id)}

    def _item(self, **overrides) -> Item:
        data = {"owner": self.owner, "name": "Drill", "description": "Cordless drill", "available": True}
        data.update(overrides)
        return Item.objects.create(**data)

    def test_create_item(self) -> None:
        response = self.client.post(
            self.list_url,
            {"name": "Drill", "description": "Cordless drill", "available": True},
            format="json",
            **self._as(self.owner),
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(
            set(response.data), {"id", "name", "description", "available", "requestId"}
        )
        self.assertIsNone(response.data["requestId"])
        self.assertEqual(Item.objects.get().owner, self.owner)

    def test_create_item_without_available_fails(self) -> None:
        response = self.client.post(
            self.list_url,
            {"name": "Drill", "description": "Cordless drill"},
            format="json",
            **self._as(self.owner),
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertEqual(response.data["message"], "Available must not be null")

    def test_patch_by_stranger_is_not_found(self) -> None:
        item = self._item()

        response = self.client.patch(
            reverse("item-detail", args=[item.id]),
            {"name": "Hijacked"},
            format="json",
            **self._as(self.booker),
        )

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND, response.data)
        item.refresh_from_db()
        self.assertEqual(item.name, "Drill")

    def test_item_card_for_owner_and_others(self) -> None:
        item = self._item()
        now = timezone.now()
        Booking.objects.create(
            item=item, booker=self.booker, start=now - timedelta(days=2), end=now - timedelta(days=1)
        )
        Booking.objects.create(
            item=item, booker=self.booker, start=now + timedelta(days=1), end=now + timedelta(days=2)
        )
        url = reverse("item-detail", args=[item.id])

        owner_view = self.client.get(url, **self._as(self.owner))
        booker_view = self.client.get(url, **self._as(self.booker))

        self.assertEqual(owner_view.status_code, status.HTTP_200_OK, owner_view.data)
        self.assertEqual(owner_view.data["lastBooking"]["bookerId"], self.booker.id)
        self.assertEqual(owner_view.data["nextBooking"]["itemId"], item.id)
        self.assertEqual(owner_view.data["comments"], [])
        self.assertIsNone(booker_view.data["lastBooking"])
        self.assertIsNone(booker_view.data["nextBooking"])

    def test_search(self) -> None:
        drill = self._item()
        self._item(name="Hidden drill", available=False)

        response = self.client.get(
            reverse("item-search"), {"text": "DRILL"}, **self._as(self.booker)
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual([i["id"] for i in response.data], [drill.id])

    def test_comment_after_finished_booking(self) -> None:
        item = self._item()
        now = timezone.now()
        Booking.objects.create(
            item=item,
            booker=self.booker,
            start=now - timedelta(days=3),
            end=now - timedelta(days=1),
            status=Booking.Status.APPROVED,
        )
        url = reverse("item-comment", args=[item.id])

        response = self.client.post(url, {"text": "Отличная дрель"}, format="json", **self._as(self.booker))

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["authorName"], "Booker")
        card = self.client.get(reverse("item-detail", args=[item.id]), **self._as(self.owner))
        self.assertEqual([c["text"] for c in card.data["comments"]], ["Отличная дрель"])

    def test_comment_without_finished_booking_fails(self) -> None:
        item = self._item()

        response = self.client.post(
            reverse("item-comment", args=[item.id]),
            {"text": "Never used it"},
            format="json",
            **self._as(self.booker),
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertIn("did not book the item", response.data["message"])

    def test_create_item_for_request(self) -> None:
        item_request = ItemRequest.objects.create(
            requestor=self.booker, description="Нужна дрель", created=timezone.now()
        )

        response = self.client.post(
            self.list_url,
            {"name": "Drill", "description": "Cordless drill", "available": True, "requestId": item_request.id},
            format="json",
            **self._as(self.owner),
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["requestId"], item_request.id)

    def test_create_item_for_unknown_request_is_not_found(self) -> None:
        response = self.client.post(
            self.list_url,
            {"name": "Drill", "description": "Cordless drill", "available": True, "requestId": 404},
            format="json",
            **self._as(self.owner),
        )

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND, response.data)
        self.assertEqual(Item.objects.count(), 0)

    def test_list_items_is_paged(self) -> None:
        items = [self._item(name=f"Item {n}") for n in range(3)]

        first = self.client.get(self.list_url, {"from": 0, "size": 1}, **self._as(self.owner))
        last = self.client.get(self.list_url, {"from": 2, "size": 2}, **self._as(self.owner))
        everything = self.client.get(self.list_url, {"from": 0}, **self._as(self.owner))

        self.assertEqual(first.status_code, status.HTTP_200_OK, first.data)
        self.assertEqual([i["id"] for i in first.data], [items[0].id])
        self.assertEqual([i["id"] for i in last.data], [items[2].id])
        self.assertEqual(len(everything.data), 3)

    def test_search_is_paged(self) -> None:
        items = [self._item(name=f"Item {n}") for n in range(3)]

        response = self.client.get(
            reverse("item-search"), {"text": "n", "from": 0, "size": 1}, **self._as(self.booker)
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual([i["id"] for i in response.data], [items[0].id])

    def test_bad_paging_is_rejected(self) -> None:
        negative = self.client.get(self.list_url, {"from": -1, "size": 1}, **self._as(self.owner))
        zero = self.client.get(
            reverse("item-search"), {"text": "n", "from": 0, "size": 0}, **self._as(self.owner)
        )

        self.assertEqual(negative.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(zero.status_code, status.HTTP_400_BAD_REQUEST)
