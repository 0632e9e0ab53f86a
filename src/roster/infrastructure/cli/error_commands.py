"""CLI command listing the validation errors and their messages."""

from __future__ import annotations

import click

from roster.domain.validator import ValidationError, get_error_message


@click.command("errors")
def errors() -> None:
    """List every validation error and its message."""
    click.echo(f"{'Error':<22} Message")
    click.echo("-" * 70)
    for error in ValidationError:
        click.echo(f"{error.value:<22} {get_error_message(error)}")
