"""Console output helpers for the CLI.

The test report itself is written by :mod:`tallyunit.reporting`; this module
only covers errors and the fixture listing.
"""

from __future__ import annotations

import os
import traceback

from rich.console import Console
from rich.table import Table

from tallyunit.domain.records import FixtureRecord, HookRole
from tallyunit.exceptions import TallyError

# Respect NO_COLOR environment variable for testing and accessibility
console = Console(no_color=os.environ.get("NO_COLOR") == "1")

# Execution order of the roles within one fixture
_ROLE_ORDER = (
    HookRole.BEFORE_CLASS,
    HookRole.BEFORE_EACH,
    HookRole.TEST,
    HookRole.AFTER_EACH,
    HookRole.AFTER_CLASS,
)


def format_error(error: TallyError, verbose: bool = False) -> str:
    """Format a TallyError for stderr output.

    With verbose=True, includes full traceback.
    Otherwise, just the error class name and message.
    """
    class_name = type(error).__name__
    message = f"{class_name}: {error}"
    if verbose:
        tb = traceback.format_exc()
        if tb and tb.strip() != "NoneType: None":
            return f"{tb}\n{message}"
    return message


def print_fixture_table(fixtures: tuple[FixtureRecord, ...]) -> None:
    """Print registered fixtures and their hooks in execution order."""
    table = Table(title="Registered Fixtures")
    table.add_column("#", justify="right")
    table.add_column("Fixture", style="cyan")
    table.add_column("Role", style="green")
    table.add_column("Hook")

    for fixture in fixtures:
        first = True
        for role in _ROLE_ORDER:
            for hook in fixture.hooks(role):
                table.add_row(
                    str(fixture.index) if first else "",
                    fixture.name if first else "",
                    role.value,
                    hook.name,
                )
                first = False
        if first:
            # Fixture without hooks still runs (and prints its delimiters)
            table.add_row(str(fixture.index), fixture.name, "-", "-")

    console.print(table)
    tests = sum(len(fixture.tests) for fixture in fixtures)
    console.print(f"\n[dim]{len(fixtures)} fixture(s), {tests} test(s)[/dim]")
