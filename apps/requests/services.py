"""Services for item requests."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable
import logging

from django.db import transaction  # type: ignore
from django.utils import timezone  # type: ignore

from shared.domain.exceptions import DomainValidationError, NotFoundError
from shared.domain.value_objects import PageRequest
from apps.items.models import Item
from apps.users.directory import UserDirectory

from .models import ItemRequest

logger = logging.getLogger(__name__)


@dataclass
class ItemRequestDetails:
    """A request together with the items listed in answer to it."""
    request: ItemRequest
    items: list[Item] = field(default_factory=list)


class ItemRequestService:
    """Posting and browsing requests for items nobody offers yet."""

    def __init__(
        self,
        users: UserDirectory | None = None,
        clock: Callable[[], datetime] = timezone.now,
    ):
        self.users = users or UserDirectory()
        self.clock = clock

    @transaction.atomic
    def add_request(self, requestor_id: int, description: str | None) -> ItemRequest:
        self.users.require(requestor_id)
        if description is None or not description.strip():
            raise DomainValidationError("Description must not be empty")
        item_request = ItemRequest.objects.create(
            requestor_id=requestor_id,
            description=description,
            created=self.clock(),
        )
        logger.info(f"'Add item request': '{item_request}'")
        return item_request

    def list_own(self, requestor_id: int) -> list[ItemRequestDetails]:
        """The caller's requests, newest first."""
        self.users.require(requestor_id)
        queryset = ItemRequest.objects.filter(requestor_id=requestor_id).order_by("-created", "-id")
        return self._with_items(queryset)

    def list_others(self, user_id: int, page: PageRequest | None = None) -> list[ItemRequestDetails]:
        """Requests of everybody except the caller, newest first."""
        self.users.require(user_id)
        queryset = ItemRequest.objects.exclude(requestor_id=user_id).order_by("-created", "-id")
        if page is not None:
            queryset = page.apply(queryset)
        return self._with_items(queryset)

    def get_request(self, user_id: int, request_id: int) -> ItemRequestDetails:
        self.users.require(user_id)
        item_request = ItemRequest.objects.filter(pk=request_id).first()
        if item_request is None:
            raise NotFoundError(f"ItemRequest with id {request_id} not found")
        return self._with_items([item_request])[0]

    @staticmethod
    def _with_items(requests) -> list[ItemRequestDetails]:
        requests = list(requests)
        by_request: dict[int, list[Item]] = {r.pk: [] for r in requests}
        for item in Item.objects.filter(request_id__in=list(by_request)).order_by("id"):
            by_request[item.request_id].append(item)
        return [ItemRequestDetails(request=r, items=by_request[r.pk]) for r in requests]
