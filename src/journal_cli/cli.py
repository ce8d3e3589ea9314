"""journal-cli - scaffold a journal and add dated entries."""

import logging
import sys
from datetime import date
from pathlib import Path

import click

from .errors import JournalError
from .workflows import add_article, add_entry, initialize


@click.group()
@click.version_option(package_name="journal-cli")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool):
    """journal-cli - Personal journal scaffolding."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )


@main.command()
@click.argument("name", type=click.Path(path_type=Path))
def new(name: Path):
    """Create a new journal directory."""
    try:
        result = initialize(name, Path.cwd())
    except JournalError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo("ok: journal directory")
    for path in result.written:
        click.echo(f"ok: {path} file")
    for path, error in result.failures:
        click.echo(f"Error: {error}", err=True)

    if not result.ok:
        sys.exit(1)


@main.group()
def add():
    """Add a new page."""
    pass


@add.command()
@click.option("--date", "-d", "target_date", default=None,
              help="Entry date (YYYY-MM-DD), defaults to today in UTC")
def entry(target_date: str | None):
    """Add today's entry."""
    try:
        target = date.fromisoformat(target_date) if target_date else None
    except ValueError:
        raise click.BadParameter(f"invalid date: {target_date}", param_hint="--date")

    try:
        path = add_entry(Path.cwd(), target)
    except JournalError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"ok: {path} file")


@add.command()
def article():
    """Add new article."""
    try:
        add_article(Path.cwd())
    except JournalError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
