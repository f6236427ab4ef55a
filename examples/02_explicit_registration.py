"""
Explicit Registration
=====================

Fixtures do not have to register at import time. This example keeps one list
of fixture types and registers them from a single entry point, so the run
order is exactly the order of that list.

Features demonstrated:
- register_fixtures() as the single registration point
- A deliberately failing test and its report lines
- Reading the structured RunResult after a run
"""

import sys

from tallyunit import Fixture, Runner, expect_equal, expect_less_than, register_fixtures


class ParsingFixture(Fixture):
    def __init__(self):
        super().__init__(
            self.test(self.parses_integers),
            self.test(self.rejects_padding),
        )

    def parses_integers(self):
        expect_equal(int("42"), 42)

    def rejects_padding(self):
        # int() strips whitespace, so this check fails on purpose
        expect_equal(int(" 7 "), None)


class OrderingFixture(Fixture):
    def __init__(self):
        super().__init__(self.test(self.sorts_ascending))

    def sorts_ascending(self):
        values = sorted([3, 1, 2])
        expect_less_than(values[0], values[-1])


FIXTURES = [OrderingFixture, ParsingFixture]


def main() -> int:
    register_fixtures(*FIXTURES)

    runner = Runner()
    failures = runner.run()

    result = runner.result
    print(f"\n{result.total_tests} tests in {len(result.fixtures)} fixtures")
    for fixture in result.fixtures:
        for case in fixture.cases:
            if not case.passed:
                print(f"  {fixture.name}.{case.name}: {case.failed_assertions} failed check(s)")
    return failures


if __name__ == "__main__":
    sys.exit(main())
