"""Protocol fakes for unit tests.

Each fake implements a Protocol structurally (duck typing). Behaviour is
explicit in the class body. Tests inject fakes via constructor args, never
via unittest.mock.patch on internal modules.
"""

from __future__ import annotations

from typing import Any

from tallyunit.domain.records import FixtureRecord
from tallyunit.domain.results import RunResult
from tallyunit.recorder import SourceLocation


class RecordingReporter:
    """Reporter fake -- appends one tuple per event to ``events``."""

    def __init__(self) -> None:
        self.events: list[tuple[Any, ...]] = []
        self.summaries: list[RunResult] = []

    def fixture_started(self, fixture: FixtureRecord) -> None:
        self.events.append(("fixture_started", fixture.name))

    def fixture_finished(self, fixture: FixtureRecord) -> None:
        self.events.append(("fixture_finished", fixture.name))

    def test_started(self, name: str) -> None:
        self.events.append(("run", name))

    def test_passed(self, name: str) -> None:
        self.events.append(("passed", name))

    def test_failed(self, name: str) -> None:
        self.events.append(("failed", name))

    def on_assertion(self, sequence: int, location: SourceLocation) -> None:
        self.events.append(("assert", sequence))

    def on_trace(self, sequence: int, location: SourceLocation, message: str) -> None:
        self.events.append(("trace", sequence, message))

    def on_error(self, sequence: int, location: SourceLocation, description: str) -> None:
        self.events.append(("error", sequence, description))

    def summary(self, result: RunResult) -> None:
        self.summaries.append(result)

    def verdicts(self) -> list[tuple[str, str]]:
        """(verdict, test name) pairs in report order."""
        return [e for e in self.events if e[0] in ("passed", "failed")]  # type: ignore[misc]


class CallLog:
    """Shared list that fixture hooks append markers to."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def mark(self, label: str) -> None:
        self.calls.append(label)

    def marker(self, label: str):
        """Return a zero-argument callable that appends ``label`` when called."""
        return lambda: self.mark(label)
