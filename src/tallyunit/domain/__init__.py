"""Domain models for tallyunit: registry records and run results."""

from tallyunit.domain.records import FixtureRecord, HookRole, MethodRecord
from tallyunit.domain.results import CaseResult, FixtureResult, RunResult, Verdict

__all__ = [
    "CaseResult",
    "FixtureRecord",
    "FixtureResult",
    "HookRole",
    "MethodRecord",
    "RunResult",
    "Verdict",
]
