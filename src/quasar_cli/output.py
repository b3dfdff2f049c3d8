"""Terminal messages shared by all commands."""

import sys
from typing import NoReturn

import click

BANNER = click.style(" Quasar", fg="bright_black")


def log(message: str) -> None:
    click.echo(f"{BANNER} · {message}")


def warn(message: str) -> None:
    click.echo(f"{BANNER} · {click.style(message, fg='yellow')}", err=True)


def fatal(message: str, error: BaseException | None = None) -> NoReturn:
    """Print `message` (and the triggering error) to stderr and exit 1."""
    click.echo(f"{BANNER} · {click.style(message, fg='red')}", err=True)
    if error is not None:
        click.echo(f"\n{error}", err=True)
        if error.__cause__ is not None:
            click.echo(str(error.__cause__), err=True)
    click.echo(err=True)
    sys.exit(1)
