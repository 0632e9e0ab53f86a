"""CLI commands for the Address value object."""

from __future__ import annotations

import click

from roster.config import Settings
from roster.domain.exceptions import CreationAborted
from roster.domain.validator import ValidationError, get_error_message
from roster.infrastructure.bootstrap import register_person_handler
from roster.infrastructure.cli.abort import exit_on_abort


@click.command("create")
@click.option("--street", required=True, help="Street and number.")
@click.option("--city", required=True, help="City.")
@click.option("--postal-code", type=int, default=None, help="Postal code (1-99950).")
@click.option("--strict", is_flag=True, default=False, help="Abort the process on failure.")
@click.pass_obj
def address_create(
    app_settings: Settings,
    street: str,
    city: str,
    postal_code: int | None,
    strict: bool,
) -> None:
    """Validate an address and print it."""
    handler = register_person_handler(app_settings)

    try:
        result = handler.handle_address(street, city, postal_code, strict=strict)
    except CreationAborted as exc:
        exit_on_abort(exc)

    if isinstance(result, ValidationError):
        raise click.ClickException(get_error_message(result))

    click.echo(result.summary)
