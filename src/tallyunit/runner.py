"""Runner: executes every registered fixture and classifies each test.

Per fixture, in registration order:

1. fixture-start marker
2. every before-class hook
3. for every test: every before-each hook, the test body inside a
   :class:`~tallyunit.recorder.FailureScope`, PASSED or FAILED depending on
   whether the assertion counter moved, every after-each hook
4. every after-class hook
5. fixture-end marker

Then the summary block. ``run()`` returns the number of failed tests and
``execute()`` the full :class:`~tallyunit.domain.results.RunResult`.

Nothing a fixture does stops the run. An aborting check unwinds only the
current body. An exception escaping a test body counts as a failed assertion
for that test. An exception escaping a hook is reported and counted as a hook
error; the remaining lifecycle still runs. KeyboardInterrupt and SystemExit
propagate.
"""

from __future__ import annotations

import time
from collections.abc import Sequence
from datetime import datetime

from tallyunit.domain.records import FixtureRecord, MethodRecord
from tallyunit.domain.results import CaseResult, FixtureResult, RunResult, Verdict
from tallyunit.exceptions import Aborted
from tallyunit.logging import logger
from tallyunit.protocols import Reporter
from tallyunit.recorder import Recorder, SourceLocation, get_recorder, use_recorder
from tallyunit.registry import Registry, get_registry
from tallyunit.reporting import TextReporter


def describe_exception(exc: BaseException) -> str:
    message = str(exc)
    return f"{type(exc).__name__}: {message}" if message else type(exc).__name__


class Runner:
    """Executes a registry's fixtures once, sequentially.

    Args:
        registry: Fixtures to run. Defaults to the process-wide registry.
        recorder: Counters to update. Defaults to the process-wide recorder.
            Counters are not reset; totals accumulate across runs until
            :func:`tallyunit.reset` is called.
        reporter: Report sink. Defaults to a :class:`TextReporter` on stdout.
    """

    def __init__(
        self,
        registry: Registry | None = None,
        recorder: Recorder | None = None,
        reporter: Reporter | None = None,
    ) -> None:
        self.registry = registry if registry is not None else get_registry()
        self.recorder = recorder if recorder is not None else get_recorder()
        self.reporter: Reporter = reporter if reporter is not None else TextReporter()
        self.result: RunResult | None = None

    def run(self) -> int:
        """Run every fixture and return the total failure count."""
        return self.execute().failures

    def execute(self) -> RunResult:
        """Run every fixture and return the structured result.

        The result is also kept on :attr:`result`.
        """
        result = RunResult()
        logger.info("Running {} fixture(s)", len(self.registry))

        previous_listener = self.recorder.listener
        self.recorder.listener = self.reporter
        try:
            with use_recorder(self.recorder):
                for fixture in self.registry:
                    result.fixtures.append(self._run_fixture(fixture))
        finally:
            self.recorder.listener = previous_listener

        result.finished_at = datetime.now()
        result.assertions = self.recorder.assertions
        result.passes = self.recorder.passes
        result.failures = self.recorder.failures
        result.traces = self.recorder.traces
        result.errors = self.recorder.errors
        self.result = result

        self.reporter.summary(result)
        logger.info(
            "Run finished: {} tests, {} passed, {} failed in {:.3f}s",
            result.total_tests,
            result.passes,
            result.failures,
            result.duration_sec,
        )
        return result

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def _run_fixture(self, fixture: FixtureRecord) -> FixtureResult:
        logger.debug("Fixture #{} {} ({} tests)", fixture.index, fixture.name, len(fixture.tests))
        fixture_result = FixtureResult(name=fixture.name, index=fixture.index)

        self.reporter.fixture_started(fixture)
        self._run_hooks(fixture.before_class, fixture_result)
        for test in tuple(fixture.tests):
            self._run_hooks(fixture.before_each, fixture_result)
            fixture_result.cases.append(self._run_test(test))
            self._run_hooks(fixture.after_each, fixture_result)
        self._run_hooks(fixture.after_class, fixture_result)
        self.reporter.fixture_finished(fixture)

        return fixture_result

    def _run_hooks(self, hooks: Sequence[MethodRecord], fixture_result: FixtureResult) -> None:
        for hook in tuple(hooks):
            try:
                hook.invoke()
            except Aborted:
                # Already counted by the check that aborted
                continue
            except Exception as exc:
                description = f"{hook.name}: {describe_exception(exc)}"
                location = SourceLocation.from_traceback(exc.__traceback__)
                self.recorder.record_hook_error(location, description)
                fixture_result.hook_errors.append(description)
                logger.opt(exception=exc).error("Hook {} raised", hook.name)

    def _run_test(self, test: MethodRecord) -> CaseResult:
        self.reporter.test_started(test.name)
        error: str | None = None

        started = time.perf_counter()
        with self.recorder.scope() as scope:
            try:
                test.invoke()
            except Aborted:
                pass
            except Exception as exc:
                error = describe_exception(exc)
                location = SourceLocation.from_traceback(exc.__traceback__)
                self.recorder.record_test_error(location, error)
                logger.opt(exception=exc).debug("Test {} raised", test.name)
        duration = time.perf_counter() - started

        if scope.failed:
            verdict = Verdict.FAILED
            self.recorder.record_failure()
            self.reporter.test_failed(test.name)
        else:
            verdict = Verdict.PASSED
            self.recorder.record_pass()
            self.reporter.test_passed(test.name)

        return CaseResult(
            name=test.name,
            verdict=verdict,
            failed_assertions=scope.delta,
            traces=scope.traces,
            duration_sec=duration,
            error=error,
        )


__all__ = ["Runner", "describe_exception"]
