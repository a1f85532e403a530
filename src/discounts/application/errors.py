"""Map domain exceptions to user-visible outcome classes.

Adapters (the CLI today) use this instead of inspecting exception types
themselves, so every adapter reports the same failure the same way.
Storage failures are reported with an opaque message; their detail goes
to the log, never to the caller.
"""

from __future__ import annotations

from enum import Enum

from discounts.domain.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ValidationError,
)

INTERNAL_ERROR_MESSAGE = "Internal server error"


class ErrorCategory(Enum):
    CLIENT_INPUT = "client_input"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    SERVER_FAILURE = "server_failure"


def classify(exc: DomainException) -> tuple[ErrorCategory, str]:
    """Return the outcome class and the message safe to show the caller."""
    if isinstance(exc, ValidationError):
        return ErrorCategory.CLIENT_INPUT, str(exc)
    if isinstance(exc, EntityNotFoundError):
        return ErrorCategory.NOT_FOUND, str(exc)
    if isinstance(exc, ConflictError):
        return ErrorCategory.CONFLICT, str(exc)
    return ErrorCategory.SERVER_FAILURE, INTERNAL_ERROR_MESSAGE
