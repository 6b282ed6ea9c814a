"""Caller identification for the HTTP API.

ShareIt trusts the ``X-Sharer-User-Id`` header set by the gateway in
front of it; there is no other authentication.
"""

from __future__ import annotations

from rest_framework.exceptions import ValidationError  # type: ignore

CALLER_ID_HEADER = "X-Sharer-User-Id"


def get_caller_id(request) -> int:
    """Return the acting user's id or fail with 400."""

    raw = request.headers.get(CALLER_ID_HEADER)
    if raw is None or raw == "":
        raise ValidationError({CALLER_ID_HEADER: "Header is required."})
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise ValidationError({CALLER_ID_HEADER: "Header must be an integer user id."})


class CallerIdMixin:
    """ViewSet mixin exposing the caller id of the current request."""

    @property
    def caller_id(self) -> int:
        return get_caller_id(self.request)  # type: ignore[attr-defined]
