"""Protocol definitions for tallyunit.

The runner and recorder only talk to reporters through these interfaces, so
tests can capture events without parsing text.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from tallyunit.domain.records import FixtureRecord
    from tallyunit.domain.results import RunResult
    from tallyunit.recorder import SourceLocation


@runtime_checkable
class RecorderListener(Protocol):
    """Receives one event per counter increment that carries a location."""

    def on_assertion(self, sequence: int, location: SourceLocation) -> None:
        """A failing check was recorded; ``sequence`` is the new counter value."""
        ...

    def on_trace(self, sequence: int, location: SourceLocation, message: str) -> None:
        """A trace was recorded."""
        ...

    def on_error(self, sequence: int, location: SourceLocation, description: str) -> None:
        """An exception escaped a test body or hook."""
        ...


@runtime_checkable
class Reporter(RecorderListener, Protocol):
    """Full reporting surface driven by the runner."""

    def fixture_started(self, fixture: FixtureRecord) -> None: ...

    def fixture_finished(self, fixture: FixtureRecord) -> None: ...

    def test_started(self, name: str) -> None: ...

    def test_passed(self, name: str) -> None: ...

    def test_failed(self, name: str) -> None: ...

    def summary(self, result: RunResult) -> None:
        """Emit the final summary block."""
        ...
