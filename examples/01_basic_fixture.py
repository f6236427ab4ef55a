"""
Basic Fixture
=============

This example shows the smallest complete tallyunit program: one fixture that
registers itself on construction, and a main block that runs everything and
exits with the number of failed tests.

Features demonstrated:
- Class and per-test setup/teardown hooks
- Aborting (assert_*) and non-aborting (expect_*) checks
- Traces
- The process exit contract (0 means every test passed)

Run it with ``python examples/01_basic_fixture.py`` or
``tally run examples/01_basic_fixture.py``.
"""

import sys

import tallyunit
from tallyunit import (
    Fixture,
    assert_equal,
    assert_throw,
    expect_false,
    expect_true,
    trace,
)


class StackFixture(Fixture):
    """Exercises a list used as a stack."""

    def __init__(self):
        self.stack = []
        super().__init__(
            self.before_class(self.announce),
            self.before(self.push_one),
            self.test(self.pops_what_was_pushed),
            self.test(self.grows_on_push),
            self.test(self.empty_pop_raises),
            self.after(self.clear),
        )

    def announce(self):
        trace("starting stack checks")

    def push_one(self):
        self.stack.append(1)

    def pops_what_was_pushed(self):
        assert_equal(self.stack.pop(), 1)
        expect_false(self.stack)

    def grows_on_push(self):
        self.stack.append(2)
        expect_true(len(self.stack) == 2)

    def empty_pop_raises(self):
        self.stack.clear()
        assert_throw(self.stack.pop, IndexError)

    def clear(self):
        self.stack.clear()


# Constructing the fixture is what registers it
StackFixture()


if __name__ == "__main__":
    sys.exit(tallyunit.run_all())
