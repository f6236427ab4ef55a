"""Command-line interface for tally.

Provides commands for:
- Running fixture modules
- Listing what fixture modules register
"""

from __future__ import annotations

# Load .env file before settings are read (TALLYUNIT_* env vars)
from dotenv import load_dotenv

load_dotenv()

# ruff: noqa: E402 - imports must come after load_dotenv()
from typing import Annotated

import typer

from tallyunit.cli._display import console
from tallyunit.constants import VERSION_STRING

app = typer.Typer(
    name="tally",
    help="Self-registering test fixtures with a counter-driven runner",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"tally v{VERSION_STRING}")
        raise typer.Exit()


@app.callback()  # type: ignore[misc]
def main(
    version: Annotated[
        bool,
        typer.Option("--version", callback=version_callback, is_eager=True),
    ] = False,
) -> None:
    """Self-registering test fixtures with a counter-driven runner."""


def _register_commands() -> None:
    """Register all commands with the app.

    Done in a function to control import order and avoid circular imports.
    """
    from tallyunit.cli import listing, run

    app.command("run")(run.run)
    app.command("list")(listing.list_cmd)


_register_commands()


__all__ = ["app", "console", "main"]

if __name__ == "__main__":
    app()
