"""
Domain Error Taxonomy

All failures of the booking core are raised as subclasses of DomainError.
Each carries a stable machine-readable ``code`` and the HTTP status the API
layer answers with. Apps define their concrete errors next to their
services; this module only holds the base class and the few errors shared
between apps.
"""

from __future__ import annotations


class DomainError(Exception):
    """Base class for expected, typed failures of a core operation."""

    code = "error"
    status_code = 400
    default_message = "Request could not be processed."

    def __init__(self, message: str | None = None, **details):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"code": self.code, "detail": self.message}


class NotFound(DomainError):
    code = "not_found"
    status_code = 404
    default_message = "Not found."
