"""Domain-level exceptions.

Validation failures are ordinary return values (see
``roster.domain.validator.ValidationError``), not exceptions. The classes
below cover the few cases where control flow really has to change.
"""

from __future__ import annotations

import errno
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from roster.application.creation import ErrorReport


class DomainException(Exception):
    """Base class for all domain errors."""


class CreationAborted(DomainException):
    """A mandatory construction failed and the caller must stop.

    Raised only by ``create_and_check``. The top-level driver turns it
    into a process exit with ``exit_code``.
    """

    exit_code = errno.EINVAL

    def __init__(self, report: ErrorReport) -> None:
        super().__init__(f"{report.message} ({report.context}): {report.detail}")
        self.report = report
