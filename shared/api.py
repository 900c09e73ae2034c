"""DRF glue shared by all apps."""

from __future__ import annotations

import logging

from rest_framework.response import Response  # type: ignore
from rest_framework.views import exception_handler  # type: ignore

from shared.exceptions import DomainError

logger = logging.getLogger(__name__)


def domain_exception_handler(exc, context):
    """Render DomainError subclasses as ``{"code", "detail"}`` responses.

    Everything else falls through to the stock DRF handler.
    """
    if isinstance(exc, DomainError):
        view = context.get("view")
        logger.info(
            f"{exc.__class__.__name__} in {view.__class__.__name__ if view else 'unknown view'}: {exc.message}"
        )
        return Response(exc.to_dict(), status=exc.status_code)
    return exception_handler(exc, context)
