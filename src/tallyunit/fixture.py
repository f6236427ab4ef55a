"""Fixture base class and the self-registration protocol.

A fixture type derives from :class:`Fixture` and hands its hooks to the base
constructor, in the order they should run::

    class StackFixture(Fixture):
        def __init__(self):
            super().__init__(
                self.before_class(self.open),
                self.before(self.push_one),
                self.test(self.pops_what_was_pushed),
                self.after_class(self.close),
            )

    StackFixture()  # appended to the process-wide registry

Constructing a fixture always appends a new record, so constructing the same
type twice runs it twice. ``None`` entries are skipped, which lets callers
build hook lists conditionally.
"""

from __future__ import annotations

import contextlib
from collections.abc import Callable, Iterator
from typing import Any, TypeVar

from tallyunit.constants import (
    AFTER_CLASS_PREFIX,
    AFTER_PREFIX,
    BEFORE_CLASS_PREFIX,
    BEFORE_PREFIX,
)
from tallyunit.domain.records import FixtureRecord, HookRole, MethodRecord, bound_name
from tallyunit.exceptions import StaleFixtureError
from tallyunit.registry import Registry, get_registry

F = TypeVar("F", bound="Fixture")

_target: Registry | None = None


def target_registry() -> Registry:
    """Registry that fixtures constructed right now register into."""
    return _target if _target is not None else get_registry()


@contextlib.contextmanager
def registration_target(registry: Registry) -> Iterator[Registry]:
    """Route fixture construction inside the block to ``registry``."""
    global _target
    previous = _target
    _target = registry
    try:
        yield registry
    finally:
        _target = previous


def _callable_name(func: Callable[[], Any]) -> str:
    return getattr(func, "__name__", None) or repr(func)


class Fixture:
    """Base of all test fixtures.

    Args:
        *hooks: Hook descriptors built with :meth:`before`, :meth:`before_class`,
            :meth:`after`, :meth:`after_class` and :meth:`test`. ``None`` is
            skipped.
        registry: Registry to append to. Defaults to the current registration
            target (the process-wide registry outside
            :func:`registration_target`).
        name: Fixture display name. Defaults to the class name.
    """

    # Keep pytest from collecting fixture subclasses named Test*
    __test__ = False

    def __init__(
        self,
        *hooks: MethodRecord | None,
        registry: Registry | None = None,
        name: str | None = None,
    ) -> None:
        self._registry = registry if registry is not None else target_registry()
        record = self._registry.add_fixture(bound_name(name or type(self).__name__))
        self.fixture_index = record.index
        self.fixture_generation = self._registry.generation
        self.fixture_name = record.name
        for hook in hooks:
            if hook is None:
                continue
            record.append(hook)

    @property
    def record(self) -> FixtureRecord:
        """This fixture's record in the registry it was constructed into.

        Raises:
            StaleFixtureError: The registry was reset after this fixture was
                constructed, so its index may now name another fixture.
        """
        if self._registry.generation != self.fixture_generation:
            raise StaleFixtureError(self.fixture_name, self.fixture_index)
        return self._registry.get(self.fixture_index)

    @classmethod
    def register(cls: type[F], registry: Registry | None = None) -> F:
        """Construct one instance of this fixture type into ``registry``."""
        if registry is None:
            return cls()
        with registration_target(registry):
            return cls()

    # ------------------------------------------------------------------
    # Hook descriptors
    # ------------------------------------------------------------------

    def _hook(
        self, func: Callable[[], Any], role: HookRole, prefix: str, name: str | None
    ) -> MethodRecord:
        return MethodRecord(
            func=func,
            name=prefix + (name or _callable_name(func)),
            role=role,
            owner=self,
        )

    def before(self, func: Callable[[], Any], name: str | None = None) -> MethodRecord:
        """Run ``func`` before each test of this fixture."""
        return self._hook(func, HookRole.BEFORE_EACH, BEFORE_PREFIX, name)

    def before_class(self, func: Callable[[], Any], name: str | None = None) -> MethodRecord:
        """Run ``func`` once, before any test of this fixture."""
        return self._hook(func, HookRole.BEFORE_CLASS, BEFORE_CLASS_PREFIX, name)

    def after(self, func: Callable[[], Any], name: str | None = None) -> MethodRecord:
        """Run ``func`` after each test of this fixture."""
        return self._hook(func, HookRole.AFTER_EACH, AFTER_PREFIX, name)

    def after_class(self, func: Callable[[], Any], name: str | None = None) -> MethodRecord:
        """Run ``func`` once, after every test and after-each hook of this fixture."""
        return self._hook(func, HookRole.AFTER_CLASS, AFTER_CLASS_PREFIX, name)

    def test(self, func: Callable[[], Any], name: str | None = None) -> MethodRecord:
        """Run ``func`` as a test."""
        return self._hook(func, HookRole.TEST, "", name)


def register_fixtures(
    *fixture_types: type[Fixture], registry: Registry | None = None
) -> list[Fixture]:
    """Construct each fixture type once, in the given order.

    This is the explicit alternative to constructing fixtures at import time:
    keep one list of fixture types and register it from a single entry point.

    Returns:
        The constructed fixture instances, in registration order.
    """
    target = registry if registry is not None else target_registry()
    return [fixture_type.register(target) for fixture_type in fixture_types]


__all__ = ["Fixture", "register_fixtures", "registration_target", "target_registry"]
