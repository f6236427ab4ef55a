"""tallyunit -- self-registering test fixtures with a counter-driven runner.

Public API:
    Fixture, register_fixtures, run_all, reset, Runner, Registry, Recorder,
    the assertion primitives, __version__

Stability contract: exports in __all__ follow SemVer. Names not in __all__
are internal and may change without notice.
"""

from tallyunit._api import reset, run_all
from tallyunit.assertions import (
    abort,
    assert_any_throw,
    assert_equal,
    assert_false,
    assert_greater_than,
    assert_greater_than_equal,
    assert_less_than,
    assert_less_than_equal,
    assert_no_throw,
    assert_not_equal,
    assert_throw,
    assert_true,
    expect_any_throw,
    expect_equal,
    expect_false,
    expect_greater_than,
    expect_greater_than_equal,
    expect_less_than,
    expect_less_than_equal,
    expect_no_throw,
    expect_not_equal,
    expect_throw,
    expect_true,
    fail,
    pass_,
    trace,
)
from tallyunit.constants import VERSION, VERSION_STRING
from tallyunit.domain.records import HookRole
from tallyunit.domain.results import RunResult, Verdict
from tallyunit.fixture import Fixture, register_fixtures
from tallyunit.recorder import Recorder
from tallyunit.registry import Registry
from tallyunit.runner import Runner

__version__: str = VERSION_STRING

__all__ = [
    "VERSION",
    "Fixture",
    "HookRole",
    "Recorder",
    "Registry",
    "RunResult",
    "Runner",
    "Verdict",
    "__version__",
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
    "register_fixtures",
    "reset",
    "run_all",
    "trace",
]
