"""DRF exception handler mapping domain errors to HTTP responses."""

from __future__ import annotations

import logging

from rest_framework.response import Response  # type: ignore
from rest_framework.views import exception_handler as drf_exception_handler, set_rollback  # type: ignore

from shared.domain.exceptions import DomainError

logger = logging.getLogger(__name__)


def api_exception_handler(exc, context):
    """Render ``DomainError`` subclasses, defer everything else to DRF."""

    if isinstance(exc, DomainError):
        logger.warning(f"{exc.__class__.__name__}: {exc.message}")
        set_rollback()
        return Response(
            {
                "status": exc.status_code,
                "error": exc.description,
                "message": exc.message,
            },
            status=exc.status_code,
        )
    return drf_exception_handler(exc, context)
