"""tally run: load fixture modules and run every registered test."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated

import typer

from tallyunit._api import reset
from tallyunit.cli._display import format_error
from tallyunit.config.settings import RunSettings, load_settings
from tallyunit.constants import MAX_EXIT_CODE, USAGE_ERROR_EXIT_CODE
from tallyunit.domain.results import RunResult
from tallyunit.exceptions import ConfigError, FixtureLoadError
from tallyunit.loader import load_paths
from tallyunit.logging import logger, setup_logging
from tallyunit.protocols import Reporter
from tallyunit.reporting import NullReporter, TextReporter
from tallyunit.results.persistence import save_run_result
from tallyunit.runner import Runner

# ---------------------------------------------------------------------------
# Command
# ---------------------------------------------------------------------------


def run(
    paths: Annotated[
        list[Path],
        typer.Argument(help="Fixture modules or directories of fixture modules"),
    ],
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Print the run result as JSON instead of the text report"),
    ] = False,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Directory to save run_result.json into"),
    ] = None,
    config: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Settings file (default: ./tallyunit.yaml)"),
    ] = None,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Only log warnings and errors"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Debug logging and tracebacks"),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option("--log-file", help="Also write debug logs to this file"),
    ] = None,
) -> None:
    """Run every test registered by the given fixture modules.

    Exits with the number of failed tests (0 when all pass).
    """
    try:
        result = _run_impl(
            paths=paths,
            json_output=json_output,
            output=output,
            config=config,
            quiet=quiet,
            verbose=verbose,
            log_file=log_file,
        )
    except (ConfigError, FixtureLoadError) as e:
        print(format_error(e, verbose=verbose), file=sys.stderr)
        raise typer.Exit(code=USAGE_ERROR_EXIT_CODE) from None

    raise typer.Exit(code=min(result.exit_code, MAX_EXIT_CODE))


# ---------------------------------------------------------------------------
# Implementation
# ---------------------------------------------------------------------------


def resolve_settings(
    config: Path | None,
    json_output: bool,
    output: Path | None,
    quiet: bool,
    verbose: bool,
    log_file: Path | None = None,
) -> RunSettings:
    """Load settings and apply CLI flags on top (flags win)."""
    settings = load_settings(config)
    updates: dict[str, object] = {}
    if quiet:
        updates["verbosity"] = "quiet"
    elif verbose:
        updates["verbosity"] = "verbose"
    if json_output:
        updates["json_output"] = True
    if output is not None:
        updates["output_dir"] = str(output)
    if log_file is not None:
        updates["log_file"] = str(log_file)
    return settings.model_copy(update=updates) if updates else settings


def _run_impl(
    paths: list[Path],
    json_output: bool,
    output: Path | None,
    config: Path | None,
    quiet: bool,
    verbose: bool,
    log_file: Path | None = None,
) -> RunResult:
    """Core implementation. run() maps its errors to exit codes."""
    settings = resolve_settings(config, json_output, output, quiet, verbose, log_file)
    setup_logging(
        verbosity=settings.verbosity, colorize=settings.color, log_file=settings.log_file
    )

    # This command is the single entry point: start from an empty registry
    reset()
    load_paths(paths)

    reporter: Reporter = NullReporter() if settings.json_output else TextReporter()
    result = Runner(reporter=reporter).execute()

    if settings.json_output:
        print(result.model_dump_json(indent=2))
    if settings.output_dir is not None:
        path = save_run_result(result, settings.output_dir)
        logger.info("Run result saved to {}", path)

    return result
