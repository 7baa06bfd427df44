"""lit-modelfile command line."""

import json
import os
from typing import TextIO

import click
from dotenv import find_dotenv, load_dotenv
from rich.console import Console
from rich.table import Table

from lit_modelfile.__about__ import __version__
from lit_modelfile.errors import ModelfileError
from lit_modelfile.models.file import ModelFile
from lit_modelfile.parser import Command, format_commands, parse
from lit_modelfile.utils import logging

console = Console()


def _read(source: TextIO) -> tuple[Command, ...]:
    try:
        return parse(source)
    except ModelfileError as e:
        raise click.ClickException(f"{source.name}: {e}") from e


@click.group(invoke_without_command=True)
@click.pass_context
def main(ctx: click.Context) -> None:
    """Parse and format Modelfiles."""
    load_dotenv(find_dotenv(usecwd=True))
    # keep DEBUG lines off stderr unless asked for
    logging.set_level(os.environ.get("LOG_LEVEL", "WARNING"))
    if ctx.invoked_subcommand is None:
        click.echo(f"lit-modelfile v{__version__}")


@main.command("parse")
@click.argument("source", type=click.File(encoding="utf-8"), default="-")
@click.option("--json", "as_json", is_flag=True, help="Print commands as a JSON array")
def parse_cmd(source: TextIO, as_json: bool) -> None:
    """Print the commands of a Modelfile."""
    commands = _read(source)
    if as_json:
        click.echo(json.dumps([{"name": cmd.name, "args": cmd.args} for cmd in commands], indent=2))
        return

    table = Table(title=source.name)
    table.add_column("Name", style="cyan")
    table.add_column("Args")
    for cmd in commands:
        table.add_row(cmd.name, cmd.args)
    console.print(table)


@main.command("fmt")
@click.argument("source", type=click.File(encoding="utf-8"), default="-")
def fmt_cmd(source: TextIO) -> None:
    """Print a Modelfile in canonical form."""
    click.echo(format_commands(_read(source)), nl=False)


@main.command("check")
@click.argument("source", type=click.File(encoding="utf-8"), default="-")
@click.option("--strict", is_flag=True, help="Treat unknown parameters as errors")
def check_cmd(source: TextIO, strict: bool) -> None:
    """Validate a Modelfile."""
    model = ModelFile.from_commands(_read(source))
    try:
        warnings = model.validate(strict=strict)
    except ValueError as e:
        raise click.ClickException(str(e)) from e
    for warning in warnings:
        click.echo(f"warning: {warning}", err=True)
    click.echo(f"{source.name}: ok")


if __name__ == "__main__":
    main()
