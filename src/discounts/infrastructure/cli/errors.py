"""Translate domain exceptions into click failures with per-class exit codes."""

from __future__ import annotations

import logging

import click

from discounts.application.errors import ErrorCategory, classify
from discounts.domain.exceptions import DomainException

logger = logging.getLogger(__name__)

EXIT_CLIENT_INPUT = 2
EXIT_NOT_FOUND = 3
EXIT_CONFLICT = 4
EXIT_SERVER_FAILURE = 5

_EXIT_CODES = {
    ErrorCategory.CLIENT_INPUT: EXIT_CLIENT_INPUT,
    ErrorCategory.NOT_FOUND: EXIT_NOT_FOUND,
    ErrorCategory.CONFLICT: EXIT_CONFLICT,
    ErrorCategory.SERVER_FAILURE: EXIT_SERVER_FAILURE,
}


def to_click_exception(exc: DomainException) -> click.ClickException:
    category, message = classify(exc)
    if category is ErrorCategory.SERVER_FAILURE:
        logger.error("Command failed: %s", exc)
    error = click.ClickException(message)
    error.exit_code = _EXIT_CODES[category]
    return error
