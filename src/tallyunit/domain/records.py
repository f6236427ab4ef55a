"""Registry records: one MethodRecord per registered hook, one FixtureRecord
per fixture construction.

A FixtureRecord keeps a separate ordered list per role. Lists are
append-only, so hook order within a role always equals registration order.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from tallyunit.constants import MAX_NAME_LENGTH


class HookRole(str, Enum):
    """Lifecycle role a hook was registered under."""

    BEFORE_EACH = "before_each"
    BEFORE_CLASS = "before_class"
    AFTER_EACH = "after_each"
    AFTER_CLASS = "after_class"
    TEST = "test"


def bound_name(name: str) -> str:
    """Truncate a display name to MAX_NAME_LENGTH characters."""
    return name[:MAX_NAME_LENGTH]


@dataclass(frozen=True)
class MethodRecord:
    """A single registered callable plus its display name and role.

    ``owner`` is the fixture instance the callable belongs to. The record
    does not manage its lifetime; it is only kept for introspection.
    """

    func: Callable[[], Any]
    name: str
    role: HookRole
    owner: Any = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", bound_name(self.name))

    def invoke(self) -> Any:
        return self.func()


@dataclass
class FixtureRecord:
    """Ordered per-role hook lists for one fixture construction.

    Created by :meth:`tallyunit.registry.Registry.add_fixture` only; ``index``
    is the record's position in the registry arena.
    """

    name: str
    index: int
    before_class: list[MethodRecord] = field(default_factory=list)
    before_each: list[MethodRecord] = field(default_factory=list)
    tests: list[MethodRecord] = field(default_factory=list)
    after_each: list[MethodRecord] = field(default_factory=list)
    after_class: list[MethodRecord] = field(default_factory=list)

    def hooks(self, role: HookRole) -> list[MethodRecord]:
        """Return the live list holding hooks of ``role``."""
        if role is HookRole.BEFORE_CLASS:
            return self.before_class
        if role is HookRole.BEFORE_EACH:
            return self.before_each
        if role is HookRole.TEST:
            return self.tests
        if role is HookRole.AFTER_EACH:
            return self.after_each
        return self.after_class

    def append(self, method: MethodRecord) -> None:
        """Append ``method`` to the tail of the list for its role."""
        self.hooks(method.role).append(method)

    @property
    def hook_count(self) -> int:
        return sum(len(self.hooks(role)) for role in HookRole)

    def clear(self) -> None:
        for role in HookRole:
            self.hooks(role).clear()
