"""Field validation rules for Address and Person.

Each ``validate_*`` function is pure: it maps raw field values to the
first rule they violate, or ``None``. Checks run in a fixed order and
short-circuit, so callers can rely on the precedence (street before city
before postal code; name before age).
"""

from __future__ import annotations

import logging
from enum import Enum

from pydantic import ValidationError as SettingsError

from roster.config import get_settings

logger = logging.getLogger(__name__)


class ValidationError(Enum):
    EMPTY_STREET = "EMPTY_STREET"
    EMPTY_CITY = "EMPTY_CITY"
    INVALID_POSTAL_CODE = "INVALID_POSTAL_CODE"
    EMPTY_NAME = "EMPTY_NAME"
    INVALID_AGE = "INVALID_AGE"


# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
MIN_POSTAL_CODE = 1
MAX_POSTAL_CODE = 99950
MIN_AGE = 1
MAX_AGE = 120

DEFAULT_MAX_LENGTH = 100
ELLIPSIS = "..."

UNKNOWN_ERROR_MESSAGE = "Unknown validation error."

_MESSAGES: dict[ValidationError, str] = {
    ValidationError.EMPTY_STREET: "Street cannot be empty.",
    ValidationError.EMPTY_CITY: "City cannot be empty.",
    ValidationError.INVALID_POSTAL_CODE: (
        f"The postal code must be between {MIN_POSTAL_CODE} and {MAX_POSTAL_CODE}."
    ),
    ValidationError.EMPTY_NAME: "Name cannot be empty.",
    ValidationError.INVALID_AGE: f"Age must be between {MIN_AGE} and {MAX_AGE}.",
}


def validate_address(
    street: str, city: str, postal_code: int | None
) -> ValidationError | None:
    """Return the first address rule violated, or ``None``.

    A ``postal_code`` of ``None`` means "unset" and is accepted. Anything
    else must be a plain ``int`` (``bool`` excluded) within range.
    """
    if not street:
        return ValidationError.EMPTY_STREET
    if not city:
        return ValidationError.EMPTY_CITY
    if postal_code is not None and (
        not _is_int(postal_code)
        or postal_code < MIN_POSTAL_CODE
        or postal_code > MAX_POSTAL_CODE
    ):
        return ValidationError.INVALID_POSTAL_CODE
    return None


def validate_person(name: str, age: int) -> ValidationError | None:
    """Return the first person rule violated, or ``None``."""
    if not name:
        return ValidationError.EMPTY_NAME
    if not _is_int(age) or age < MIN_AGE or age > MAX_AGE:
        return ValidationError.INVALID_AGE
    return None


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def get_error_message(error: ValidationError) -> str:
    return _MESSAGES.get(error, UNKNOWN_ERROR_MESSAGE)


def truncate(text: str, max_length: int = DEFAULT_MAX_LENGTH) -> str:
    """Cut *text* to *max_length* characters, marking the cut with an ellipsis."""
    if len(text) <= max_length:
        return text
    return text[:max_length] + ELLIPSIS


def _diagnostic_defaults() -> tuple[bool, int]:
    try:
        settings = get_settings()
    except SettingsError:
        return False, DEFAULT_MAX_LENGTH
    return settings.developer_mode, settings.diagnostic_max_length


def handle_validation_failure(
    error: ValidationError,
    context: str,
    additional_info: str,
    max_length: int | None = None,
    *,
    level: int = logging.ERROR,
    enabled: bool | None = None,
) -> None:
    """Emit a diagnostic record for a rejected construction.

    *enabled* and *max_length* default to ``Settings.developer_mode`` and
    ``Settings.diagnostic_max_length``. Settings that fail to load count
    as "disabled". Purely observational: it returns nothing and never
    raises.
    """
    if enabled is None or max_length is None:
        default_enabled, default_max_length = _diagnostic_defaults()
        enabled = default_enabled if enabled is None else enabled
        max_length = default_max_length if max_length is None else max_length
    if not enabled:
        return

    logger.log(
        level,
        "[Validation Failure] %s | context=%s | %s",
        get_error_message(error),
        truncate(context, max_length),
        truncate(additional_info, max_length),
        extra={"validation_error": getattr(error, "value", str(error))},
    )
