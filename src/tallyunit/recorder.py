"""Process-wide outcome counters.

Test verdicts are inferred from the assertion counter: the runner opens a
:class:`FailureScope` around each test body and the test failed if the
counter moved. Assertion call sites only increment the counter; they never
return a result to the runner.
"""

from __future__ import annotations

import contextlib
import sys
from collections.abc import Iterator
from dataclasses import dataclass
from types import FrameType, TracebackType

from tallyunit.protocols import RecorderListener


@dataclass(frozen=True)
class SourceLocation:
    """File and line a failure or trace was reported from."""

    file: str
    line: int

    def __str__(self) -> str:
        return f"{self.file}:{self.line}"

    @classmethod
    def from_frame(cls, frame: FrameType) -> SourceLocation:
        return cls(file=frame.f_code.co_filename, line=frame.f_lineno)

    @classmethod
    def from_traceback(cls, tb: TracebackType | None) -> SourceLocation:
        """Location of the innermost frame of ``tb`` (where the exception was raised)."""
        if tb is None:
            return cls(file="<unknown>", line=0)
        while tb.tb_next is not None:
            tb = tb.tb_next
        return cls(file=tb.tb_frame.f_code.co_filename, line=tb.tb_lineno)


def caller_location(depth: int = 1) -> SourceLocation:
    """Location of the frame ``depth`` levels above the caller of this function."""
    frame = sys._getframe(depth + 1)
    return SourceLocation.from_frame(frame)


@dataclass(frozen=True)
class RecorderSnapshot:
    """Counter values at one point in time."""

    assertions: int
    passes: int
    failures: int
    traces: int
    errors: int


class Recorder:
    """Monotonic counters for assertions, passes, failures, traces and hook errors.

    Args:
        listener: Optional sink notified of every assertion, trace and error
            (normally the text reporter).
    """

    def __init__(self, listener: RecorderListener | None = None) -> None:
        self.listener = listener
        self.assertions = 0
        self.passes = 0
        self.failures = 0
        self.traces = 0
        self.errors = 0

    def record_assertion(self, location: SourceLocation) -> int:
        self.assertions += 1
        if self.listener is not None:
            self.listener.on_assertion(self.assertions, location)
        return self.assertions

    def record_trace(self, location: SourceLocation, message: str) -> int:
        self.traces += 1
        if self.listener is not None:
            self.listener.on_trace(self.traces, location, message)
        return self.traces

    def record_test_error(self, location: SourceLocation, description: str) -> int:
        """Record an exception that escaped a test body.

        Counts as one failed assertion so the enclosing scope sees the test
        as failed.
        """
        self.assertions += 1
        if self.listener is not None:
            self.listener.on_error(self.assertions, location, description)
        return self.assertions

    def record_hook_error(self, location: SourceLocation, description: str) -> int:
        """Record an exception that escaped a before/after hook."""
        self.errors += 1
        if self.listener is not None:
            self.listener.on_error(self.errors, location, description)
        return self.errors

    def record_pass(self) -> None:
        self.passes += 1

    def record_failure(self) -> None:
        self.failures += 1

    def snapshot(self) -> RecorderSnapshot:
        return RecorderSnapshot(
            assertions=self.assertions,
            passes=self.passes,
            failures=self.failures,
            traces=self.traces,
            errors=self.errors,
        )

    def scope(self) -> FailureScope:
        return FailureScope(self)

    def reset(self) -> None:
        self.assertions = 0
        self.passes = 0
        self.failures = 0
        self.traces = 0
        self.errors = 0


class FailureScope:
    """Context manager measuring how far the assertion counter moved.

    Usage::

        with recorder.scope() as scope:
            body()
        if scope.failed:
            ...

    Exceptions inside the block are not handled here.
    """

    def __init__(self, recorder: Recorder) -> None:
        self._recorder = recorder
        self._start: RecorderSnapshot | None = None
        self._end: RecorderSnapshot | None = None

    def __enter__(self) -> FailureScope:
        self._start = self._recorder.snapshot()
        self._end = None
        return self

    def __exit__(self, *exc_info: object) -> None:
        self._end = self._recorder.snapshot()

    def _bounds(self) -> tuple[RecorderSnapshot, RecorderSnapshot]:
        if self._start is None:
            raise RuntimeError("FailureScope has not been entered")
        return self._start, self._end or self._recorder.snapshot()

    @property
    def delta(self) -> int:
        """Number of failed assertions recorded inside the scope."""
        start, end = self._bounds()
        return end.assertions - start.assertions

    @property
    def traces(self) -> int:
        start, end = self._bounds()
        return end.traces - start.traces

    @property
    def failed(self) -> bool:
        return self.delta != 0


_recorder: Recorder | None = None
_active: Recorder | None = None


def get_recorder() -> Recorder:
    """Return the process-wide recorder, creating it on first use."""
    global _recorder
    if _recorder is None:
        _recorder = Recorder()
    return _recorder


def reset_recorder() -> None:
    get_recorder().reset()


def active_recorder() -> Recorder:
    """Recorder that assertion call sites report to right now.

    This is the recorder bound by the running runner, or the process-wide
    recorder outside a run.
    """
    return _active if _active is not None else get_recorder()


@contextlib.contextmanager
def use_recorder(recorder: Recorder) -> Iterator[Recorder]:
    """Bind ``recorder`` as the active recorder for the duration of the block."""
    global _active
    previous = _active
    _active = recorder
    try:
        yield recorder
    finally:
        _active = previous


__all__ = [
    "FailureScope",
    "Recorder",
    "RecorderSnapshot",
    "SourceLocation",
    "active_recorder",
    "caller_location",
    "get_recorder",
    "reset_recorder",
    "use_recorder",
]
