"""Turns an aborted mandatory construction into a process exit."""

from __future__ import annotations

from typing import NoReturn

import click

from roster.domain.exceptions import CreationAborted


def exit_on_abort(exc: CreationAborted) -> NoReturn:
    click.echo(f"Error: {exc}", err=True)
    raise click.exceptions.Exit(exc.exit_code)
