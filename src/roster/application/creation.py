"""Generic creation harness.

Wraps the ``create()`` factory of any entity type, reports failures
through the validator's diagnostic sink, and optionally escalates a
failure to ``CreationAborted``. The harness knows nothing about the
fields of the entities it builds.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, TypeVar

from roster.config import Settings
from roster.domain.exceptions import CreationAborted
from roster.domain.validator import (
    ValidationError,
    get_error_message,
    handle_validation_failure,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

CREATION_FAILED = "Creation failed"
CRITICAL_CREATION_FAILURE = "Critical Creation Failure"


@dataclass(frozen=True)
class ErrorReport:
    """Describes one rejected construction. Built only when it fails."""

    error: ValidationError
    context: str
    message: str

    @property
    def detail(self) -> str:
        return get_error_message(self.error)

    def emit(self, level: int = logging.ERROR, settings: Settings | None = None) -> None:
        """Hand the report to the diagnostic sink.

        Without *settings* the sink falls back to the process settings.
        """
        if settings is None:
            handle_validation_failure(self.error, self.context, self.message, level=level)
            return
        handle_validation_failure(
            self.error,
            self.context,
            self.message,
            settings.diagnostic_max_length,
            level=level,
            enabled=settings.developer_mode,
        )


@dataclass
class CreationCounter:
    """Explicit tally of construction attempts.

    Create one at process start and pass it to the harness; only the
    harness increments it.
    """

    created: int = 0
    rejected: int = 0

    @property
    def attempts(self) -> int:
        return self.created + self.rejected

    def reset(self) -> None:
        self.created = 0
        self.rejected = 0


def create_safely(
    entity_type: type[T],
    context: str,
    *args: Any,
    counter: CreationCounter | None = None,
    settings: Settings | None = None,
    **kwargs: Any,
) -> T | ValidationError:
    """Run ``entity_type.create(*args, **kwargs)`` and log a failure.

    The factory's result is returned unchanged whether or not logging
    is enabled. *settings*, when given, decides whether and how much is
    logged; otherwise the process settings do.
    """
    result = entity_type.create(*args, **kwargs)  # type: ignore[attr-defined]

    if isinstance(result, ValidationError):
        ErrorReport(result, context, CREATION_FAILED).emit(settings=settings)
        if counter is not None:
            counter.rejected += 1
    elif counter is not None:
        counter.created += 1

    return result


def create_and_check(
    entity_type: type[T],
    context: str,
    *args: Any,
    counter: CreationCounter | None = None,
    settings: Settings | None = None,
    **kwargs: Any,
) -> T:
    """Like ``create_safely`` but treats the construction as mandatory.

    Raises CreationAborted on failure; the top-level driver is expected
    to turn it into a process exit with ``CreationAborted.exit_code``.
    """
    result = create_safely(
        entity_type, context, *args, counter=counter, settings=settings, **kwargs
    )

    if isinstance(result, ValidationError):
        report = ErrorReport(result, context, CRITICAL_CREATION_FAILURE)
        report.emit(level=logging.CRITICAL, settings=settings)
        raise CreationAborted(report)

    logger.debug("Created %s (%s)", entity_type.__name__, context)
    return result
