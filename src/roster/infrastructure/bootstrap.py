"""Composition root: wires settings, logging and handlers together.

This is the only place in the codebase that knows about *all* layers.
Settings are resolved here once and handed down explicitly.
"""

from __future__ import annotations

from roster.application.creation import CreationCounter
from roster.application.register_person import RegisterPersonHandler
from roster.config import Settings, get_settings
from roster.infrastructure.logging_setup import configure_logging

# Reset at process start; incremented only by the creation harness.
_COUNTER = CreationCounter()


def settings(debug: bool = False) -> Settings:
    """Load settings, apply the ``--debug`` override, configure logging.

    The cached process settings are never modified; the override lives
    on a copy.
    """
    current = get_settings()
    if debug:
        current = current.model_copy(update={"developer_mode": True, "log_level": "DEBUG"})
    configure_logging(current.log_level)
    return current


def register_person_handler(app_settings: Settings | None = None) -> RegisterPersonHandler:
    return RegisterPersonHandler(counter=_COUNTER, settings=app_settings)
