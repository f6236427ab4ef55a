"""Assertion and trace primitives for test bodies.

Two severities:

- ``assert_*`` and :func:`abort` record a failure and unwind the current test
  body by raising :class:`~tallyunit.exceptions.Aborted`. The rest of the
  fixture (after-each hooks, later tests) still runs.
- ``expect_*`` and :func:`fail` record a failure and return, so the body
  keeps going.

Every failing check increments the active recorder's assertion counter
exactly once and reports the caller's file and line. A passing check records
nothing. :func:`trace` increments the separate trace counter and never
affects a verdict.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, NoReturn

from tallyunit.exceptions import Aborted
from tallyunit.recorder import SourceLocation, active_recorder, caller_location


def _check(ok: bool, aborting: bool, location: SourceLocation) -> None:
    if ok:
        return
    active_recorder().record_assertion(location)
    if aborting:
        raise Aborted()


def _raises(func: Callable[[], Any], exc_type: type[BaseException] | None) -> bool:
    """True if ``func`` raises ``exc_type`` (any Exception when None)."""
    expected: type[BaseException] = exc_type if exc_type is not None else Exception
    try:
        func()
    except expected:
        return True
    except Exception:
        return False
    return False


# ---------------------------------------------------------------------------
# Basic signals
# ---------------------------------------------------------------------------


def abort() -> NoReturn:
    """Record a failure and return from the current test body immediately."""
    active_recorder().record_assertion(caller_location())
    raise Aborted()


def fail() -> None:
    """Record a failure and let the current test body continue."""
    active_recorder().record_assertion(caller_location())


def pass_() -> None:
    """Do nothing. Marks a branch as the intended outcome."""


def trace(message: str) -> None:
    """Add a numbered trace line with the caller's location to the report."""
    active_recorder().record_trace(caller_location(), str(message))


# ---------------------------------------------------------------------------
# Boolean predicates
# ---------------------------------------------------------------------------


def assert_true(condition: object) -> None:
    _check(bool(condition), True, caller_location())


def expect_true(condition: object) -> None:
    _check(bool(condition), False, caller_location())


def assert_false(condition: object) -> None:
    _check(not condition, True, caller_location())


def expect_false(condition: object) -> None:
    _check(not condition, False, caller_location())


# ---------------------------------------------------------------------------
# Comparisons
# ---------------------------------------------------------------------------


def assert_equal(lhs: Any, rhs: Any) -> None:
    _check(bool(lhs == rhs), True, caller_location())


def expect_equal(lhs: Any, rhs: Any) -> None:
    _check(bool(lhs == rhs), False, caller_location())


def assert_not_equal(lhs: Any, rhs: Any) -> None:
    _check(bool(lhs != rhs), True, caller_location())


def expect_not_equal(lhs: Any, rhs: Any) -> None:
    _check(bool(lhs != rhs), False, caller_location())


def assert_greater_than(lhs: Any, rhs: Any) -> None:
    _check(bool(lhs > rhs), True, caller_location())


def expect_greater_than(lhs: Any, rhs: Any) -> None:
    _check(bool(lhs > rhs), False, caller_location())


def assert_greater_than_equal(lhs: Any, rhs: Any) -> None:
    _check(bool(lhs >= rhs), True, caller_location())


def expect_greater_than_equal(lhs: Any, rhs: Any) -> None:
    _check(bool(lhs >= rhs), False, caller_location())


def assert_less_than(lhs: Any, rhs: Any) -> None:
    _check(bool(lhs < rhs), True, caller_location())


def expect_less_than(lhs: Any, rhs: Any) -> None:
    _check(bool(lhs < rhs), False, caller_location())


def assert_less_than_equal(lhs: Any, rhs: Any) -> None:
    _check(bool(lhs <= rhs), True, caller_location())


def expect_less_than_equal(lhs: Any, rhs: Any) -> None:
    _check(bool(lhs <= rhs), False, caller_location())


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


def assert_throw(func: Callable[[], Any], exc_type: type[BaseException]) -> None:
    """Fail and abort unless ``func()`` raises ``exc_type``."""
    _check(_raises(func, exc_type), True, caller_location())


def expect_throw(func: Callable[[], Any], exc_type: type[BaseException]) -> None:
    """Fail unless ``func()`` raises ``exc_type``."""
    _check(_raises(func, exc_type), False, caller_location())


def assert_no_throw(func: Callable[[], Any]) -> None:
    """Fail and abort if ``func()`` raises anything."""
    _check(not _raises(func, None), True, caller_location())


def expect_no_throw(func: Callable[[], Any]) -> None:
    """Fail if ``func()`` raises anything."""
    _check(not _raises(func, None), False, caller_location())


def assert_any_throw(func: Callable[[], Any]) -> None:
    """Fail and abort unless ``func()`` raises some exception."""
    _check(_raises(func, None), True, caller_location())


def expect_any_throw(func: Callable[[], Any]) -> None:
    """Fail unless ``func()`` raises some exception."""
    _check(_raises(func, None), False, caller_location())


__all__ = [
    "abort",
    "assert_any_throw",
    "assert_equal",
    "assert_false",
    "assert_greater_than",
    "assert_greater_than_equal",
    "assert_less_than",
    "assert_less_than_equal",
    "assert_no_throw",
    "assert_not_equal",
    "assert_throw",
    "assert_true",
    "expect_any_throw",
    "expect_equal",
    "expect_false",
    "expect_greater_than",
    "expect_greater_than_equal",
    "expect_less_than",
    "expect_less_than_equal",
    "expect_no_throw",
    "expect_not_equal",
    "expect_throw",
    "expect_true",
    "fail",
    "pass_",
    "trace",
]
