from __future__ import annotations

from shared.exceptions import DomainError, NotFound


class CodeNotFound(NotFound):
    """No live code: never issued, already consumed or replaced."""

    default_message = "Verification code not found. Request a new one."


class CodeExpired(DomainError):
    code = "expired"
    status_code = 400
    default_message = "Verification code has expired."


class CodeMismatch(DomainError):
    code = "mismatch"
    status_code = 400
    default_message = "Verification code is incorrect."
