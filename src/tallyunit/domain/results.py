"""Run result domain models.

The runner builds these alongside the textual report so a run can be
exported as JSON. They mirror the recorder's counters; the counters remain
the source of truth for verdicts.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

from tallyunit.constants import VERSION_STRING


class Verdict(str, Enum):
    """Outcome of a single test."""

    PASSED = "passed"
    FAILED = "failed"


class CaseResult(BaseModel):
    """Outcome of one TEST hook."""

    name: str = Field(..., description="Display name of the test")
    verdict: Verdict = Field(..., description="PASSED if no assertion failed in the body")
    failed_assertions: int = Field(
        default=0, ge=0, description="Assertion counter delta across the test body"
    )
    traces: int = Field(default=0, ge=0, description="Traces emitted by the test body")
    duration_sec: float = Field(default=0.0, ge=0.0, description="Wall time of the test body")
    error: str | None = Field(
        default=None, description="Exception that escaped the test body, if any"
    )

    @property
    def passed(self) -> bool:
        return self.verdict is Verdict.PASSED


class FixtureResult(BaseModel):
    """Outcomes of every test in one registered fixture, in execution order."""

    name: str = Field(..., description="Fixture display name")
    index: int = Field(..., ge=0, description="Registration position")
    cases: list[CaseResult] = Field(default_factory=list)
    hook_errors: list[str] = Field(
        default_factory=list, description="Errors raised by before/after hooks"
    )

    @property
    def passes(self) -> int:
        return sum(1 for case in self.cases if case.passed)

    @property
    def failures(self) -> int:
        return sum(1 for case in self.cases if not case.passed)


class RunResult(BaseModel):
    """Complete result of one runner invocation."""

    schema_version: str = Field(default=VERSION_STRING, description="tallyunit version")
    started_at: datetime = Field(default_factory=datetime.now)
    finished_at: datetime | None = Field(default=None)
    fixtures: list[FixtureResult] = Field(default_factory=list)
    assertions: int = Field(default=0, ge=0, description="Failed assertions recorded")
    passes: int = Field(default=0, ge=0)
    failures: int = Field(default=0, ge=0)
    traces: int = Field(default=0, ge=0)
    errors: int = Field(default=0, ge=0, description="Hook errors recorded")

    @property
    def exit_code(self) -> int:
        """Process result code: the number of failed tests."""
        return self.failures

    @property
    def total_tests(self) -> int:
        return self.passes + self.failures

    @property
    def duration_sec(self) -> float:
        if self.finished_at is None:
            return 0.0
        return (self.finished_at - self.started_at).total_seconds()
