"""Internal API implementation for tallyunit.

This module is internal (underscore prefix). Import via tallyunit.__init__ only.
"""

from __future__ import annotations

from typing import TextIO

from tallyunit.protocols import Reporter
from tallyunit.recorder import Recorder, reset_recorder
from tallyunit.registry import Registry, reset_registry
from tallyunit.reporting import TextReporter
from tallyunit.runner import Runner


def run_all(
    registry: Registry | None = None,
    recorder: Recorder | None = None,
    reporter: Reporter | None = None,
    stream: TextIO | None = None,
) -> int:
    """Run every registered fixture and return the number of failed tests.

    Intended as the body of a program's entry point::

        if __name__ == "__main__":
            sys.exit(tallyunit.run_all())

    Args:
        registry: Fixtures to run. Defaults to the process-wide registry.
        recorder: Counters to update. Defaults to the process-wide recorder.
        reporter: Report sink. Defaults to a text report on ``stream``.
        stream: Text stream for the default reporter (stdout when None).

    Returns:
        Total failed tests; 0 means every test passed.
    """
    if reporter is None:
        reporter = TextReporter(stream)
    return Runner(registry=registry, recorder=recorder, reporter=reporter).run()


def reset() -> None:
    """Clear the process-wide registry and zero the process-wide recorder.

    Call between independent runs in one process. Runs must not overlap.
    """
    reset_registry()
    reset_recorder()
