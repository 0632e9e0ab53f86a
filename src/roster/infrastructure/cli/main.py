import click
from pydantic import ValidationError as SettingsError

from roster.infrastructure.bootstrap import settings
from roster.infrastructure.cli.address_commands import address_create
from roster.infrastructure.cli.error_commands import errors
from roster.infrastructure.cli.person_commands import person_create


@click.group()
@click.option("--debug", is_flag=True, default=False, help="Emit validation diagnostics.")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """Roster: validated address and person records"""
    try:
        ctx.obj = settings(debug=debug)
    except SettingsError as exc:
        raise click.ClickException(f"Invalid configuration: {exc}")


@cli.group()
def address() -> None:
    """Validate addresses."""


@cli.group()
def person() -> None:
    """Validate people."""


# Register subcommands
address.add_command(address_create)
person.add_command(person_create)
cli.add_command(errors)
