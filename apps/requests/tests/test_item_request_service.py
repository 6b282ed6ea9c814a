from datetime import datetime, timedelta, timezone

import pytest

from apps.items.models import Item
from apps.requests.models import ItemRequest
from apps.requests.services import ItemRequestService
from apps.users.models import User
from shared.domain.exceptions import DomainValidationError, NotFoundError
from shared.domain.value_objects import PageRequest

NOW = datetime(2030, 1, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def requestor():
    return User.objects.create(name="Requestor", email="requestor@example.com")


@pytest.fixture
def other():
    return User.objects.create(name="Other", email="other@example.com")


@pytest.fixture
def service():
    return ItemRequestService(clock=lambda: NOW)


def _request(user, description, minutes_ago):
    return ItemRequest.objects.create(
        requestor=user, description=description, created=NOW - timedelta(minutes=minutes_ago)
    )


@pytest.mark.django_db
def test_add_request_stamps_creation_time(service, requestor):
    item_request = service.add_request(requestor.id, "Need a ladder")

    assert item_request.requestor_id == requestor.id
    assert item_request.description == "Need a ladder"
    assert item_request.created == NOW


@pytest.mark.django_db
@pytest.mark.parametrize("description", [None, "", "   "])
def test_add_request_requires_description(service, requestor, description):
    with pytest.raises(DomainValidationError) as exc_info:
        service.add_request(requestor.id, description)

    assert exc_info.value.message == "Description must not be empty"
    assert ItemRequest.objects.count() == 0


@pytest.mark.django_db
def test_add_request_by_unknown_user_is_not_found(service):
    with pytest.raises(NotFoundError):
        service.add_request(404, "Need a ladder")


@pytest.mark.django_db
def test_list_own_newest_first_with_items(service, requestor, other):
    older = _request(requestor, "Ladder", minutes_ago=30)
    newer = _request(requestor, "Tent", minutes_ago=5)
    _request(other, "Bike", minutes_ago=1)
    ladder = Item.objects.create(owner=other, name="Ladder", description="3 m", available=True, request=older)

    details = service.list_own(requestor.id)

    assert [d.request.id for d in details] == [newer.id, older.id]
    assert details[0].items == []
    assert details[1].items == [ladder]


@pytest.mark.django_db
def test_list_others_skips_own_requests(service, requestor, other):
    _request(requestor, "Ladder", minutes_ago=30)
    first = _request(other, "Bike", minutes_ago=20)
    second = _request(other, "Tent", minutes_ago=10)

    details = service.list_others(requestor.id)

    assert [d.request.id for d in details] == [second.id, first.id]


@pytest.mark.django_db
def test_list_others_page(service, requestor, other):
    created = [_request(other, f"Thing {n}", minutes_ago=n) for n in range(3)]

    first_page = service.list_others(requestor.id, PageRequest(0, 2))
    second_page = service.list_others(requestor.id, PageRequest(2, 2))

    assert [d.request.id for d in first_page] == [created[0].id, created[1].id]
    assert [d.request.id for d in second_page] == [created[2].id]


@pytest.mark.django_db
def test_get_request_by_any_user(service, requestor, other):
    item_request = _request(requestor, "Ladder", minutes_ago=1)

    details = service.get_request(other.id, item_request.id)

    assert details.request == item_request
    assert details.items == []


@pytest.mark.django_db
def test_get_unknown_request_is_not_found(service, requestor):
    with pytest.raises(NotFoundError) as exc_info:
        service.get_request(requestor.id, 404)

    assert exc_info.value.message == "ItemRequest with id 404 not found"
