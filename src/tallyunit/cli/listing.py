"""tally list: show what a set of fixture modules registers."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated

import typer

from tallyunit.cli._display import format_error, print_fixture_table
from tallyunit.constants import USAGE_ERROR_EXIT_CODE
from tallyunit.exceptions import FixtureLoadError
from tallyunit.loader import load_paths
from tallyunit.registry import Registry


def list_cmd(
    paths: Annotated[
        list[Path],
        typer.Argument(help="Fixture modules or directories of fixture modules"),
    ],
) -> None:
    """List registered fixtures and their hooks in execution order.

    Nothing is run. Fixture constructors do execute, since constructing a
    fixture is what registers it.
    """
    registry = Registry()
    try:
        load_paths(paths, registry)
    except FixtureLoadError as e:
        print(format_error(e), file=sys.stderr)
        raise typer.Exit(code=USAGE_ERROR_EXIT_CODE) from None

    print_fixture_table(registry.fixtures)
