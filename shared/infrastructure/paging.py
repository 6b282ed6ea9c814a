"""Query parameters shared by the paginated list endpoints."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from shared.domain.value_objects import PageRequest


class PageParamsSerializer(serializers.Serializer):
    """``from`` (>= 0) and ``size`` (> 0), both optional."""

    size = serializers.IntegerField(required=False, min_value=1)

    def get_fields(self):  # type: ignore
        fields = super().get_fields()
        # ``from`` is a keyword, so it cannot be declared as a class attribute
        fields["from"] = serializers.IntegerField(required=False, min_value=0)
        return fields


def page_from_request(request) -> PageRequest | None:
    """Validate ``from``/``size`` of the query string; 400 on bad values."""

    params = PageParamsSerializer(data=request.query_params.dict())
    params.is_valid(raise_exception=True)
    return PageRequest.of(params.validated_data.get("from"), params.validated_data.get("size"))
