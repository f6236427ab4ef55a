"""Line-oriented text report.

Output shape::

    [--------------]
    [ RUN          ] adds_numbers
    [       PASSED ] adds_numbers
    [ RUN          ] divides_by_zero
    [              ]    assert #1 at tests/math.py:42
    [       FAILED ] divides_by_zero
    [--------------]

    [==============]
    [ TEST RESULTS ]
    [==============]
    [    PASSED    ]    1 tests
    [    FAILED    ]    1 tests
    [==============]

All report output goes to one text stream (stdout by default). Logs go to
stderr via loguru, never here.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from tallyunit.constants import (
    FAILED_TAG,
    FIXTURE_RULE,
    NOTE_TAG,
    PASSED_TAG,
    RUN_TAG,
    SUMMARY_RULE,
    SUMMARY_TITLE,
    TOTAL_ERRORS_TAG,
    TOTAL_FAILED_TAG,
    TOTAL_PASSED_TAG,
)

if TYPE_CHECKING:
    from tallyunit.domain.records import FixtureRecord
    from tallyunit.domain.results import RunResult
    from tallyunit.recorder import SourceLocation


class TextReporter:
    """Writes the textual report to ``stream``.

    Args:
        stream: Destination. None means whatever ``sys.stdout`` is at write
            time, so redirection set up after construction is honoured.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def _line(self, text: str = "") -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(text + "\n")

    # Fixture delimiters

    def fixture_started(self, fixture: FixtureRecord) -> None:
        self._line(FIXTURE_RULE)

    def fixture_finished(self, fixture: FixtureRecord) -> None:
        self._line(FIXTURE_RULE)
        self._line()

    # Per-test lines

    def test_started(self, name: str) -> None:
        self._line(f"{RUN_TAG} {name}")

    def test_passed(self, name: str) -> None:
        self._line(f"{PASSED_TAG} {name}")

    def test_failed(self, name: str) -> None:
        self._line(f"{FAILED_TAG} {name}")

    # Recorder events

    def on_assertion(self, sequence: int, location: SourceLocation) -> None:
        self._line(f"{NOTE_TAG}    assert #{sequence} at {location}")

    def on_trace(self, sequence: int, location: SourceLocation, message: str) -> None:
        self._line(f"{NOTE_TAG}    trace #{sequence} at {location}: {message}")

    def on_error(self, sequence: int, location: SourceLocation, description: str) -> None:
        self._line(f"{NOTE_TAG}    error #{sequence} at {location}: {description}")

    def summary(self, result: RunResult) -> None:
        self._line(SUMMARY_RULE)
        self._line(SUMMARY_TITLE)
        self._line(SUMMARY_RULE)
        self._line(f"{TOTAL_PASSED_TAG} {result.passes:4d} tests")
        self._line(f"{TOTAL_FAILED_TAG} {result.failures:4d} tests")
        if result.errors:
            self._line(f"{TOTAL_ERRORS_TAG} {result.errors:4d} hooks")
        self._line(SUMMARY_RULE)


class NullReporter:
    """Reporter that discards everything (used for JSON output)."""

    def fixture_started(self, fixture: FixtureRecord) -> None:
        pass

    def fixture_finished(self, fixture: FixtureRecord) -> None:
        pass

    def test_started(self, name: str) -> None:
        pass

    def test_passed(self, name: str) -> None:
        pass

    def test_failed(self, name: str) -> None:
        pass

    def on_assertion(self, sequence: int, location: SourceLocation) -> None:
        pass

    def on_trace(self, sequence: int, location: SourceLocation, message: str) -> None:
        pass

    def on_error(self, sequence: int, location: SourceLocation, description: str) -> None:
        pass

    def summary(self, result: RunResult) -> None:
        pass


__all__ = ["NullReporter", "TextReporter"]
