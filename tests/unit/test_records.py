"""Unit tests for MethodRecord and FixtureRecord."""

from __future__ import annotations

import dataclasses

import pytest

from tallyunit.constants import MAX_NAME_LENGTH
from tallyunit.domain.records import FixtureRecord, HookRole, MethodRecord


def _record(name: str, role: HookRole) -> MethodRecord:
    return MethodRecord(func=lambda: name, name=name, role=role)


# ---------------------------------------------------------------------------
# MethodRecord
# ---------------------------------------------------------------------------


def test_invoke_calls_func():
    record = _record("adds", HookRole.TEST)
    assert record.invoke() == "adds"


def test_role_is_immutable():
    record = _record("adds", HookRole.TEST)
    with pytest.raises(dataclasses.FrozenInstanceError):
        record.role = HookRole.BEFORE_EACH  # type: ignore[misc]


def test_long_names_are_truncated():
    record = _record("x" * (MAX_NAME_LENGTH + 50), HookRole.TEST)
    assert len(record.name) == MAX_NAME_LENGTH


def test_owner_defaults_to_none():
    assert _record("adds", HookRole.TEST).owner is None


# ---------------------------------------------------------------------------
# FixtureRecord
# ---------------------------------------------------------------------------


def test_append_distributes_by_role():
    fixture = FixtureRecord(name="F", index=0)
    fixture.append(_record("bc", HookRole.BEFORE_CLASS))
    fixture.append(_record("be", HookRole.BEFORE_EACH))
    fixture.append(_record("t", HookRole.TEST))
    fixture.append(_record("ae", HookRole.AFTER_EACH))
    fixture.append(_record("ac", HookRole.AFTER_CLASS))

    assert [m.name for m in fixture.before_class] == ["bc"]
    assert [m.name for m in fixture.before_each] == ["be"]
    assert [m.name for m in fixture.tests] == ["t"]
    assert [m.name for m in fixture.after_each] == ["ae"]
    assert [m.name for m in fixture.after_class] == ["ac"]
    assert fixture.hook_count == 5


def test_append_preserves_order_within_role():
    fixture = FixtureRecord(name="F", index=0)
    for name in ("one", "two", "three"):
        fixture.append(_record(name, HookRole.TEST))
    assert [m.name for m in fixture.hooks(HookRole.TEST)] == ["one", "two", "three"]


def test_hooks_returns_live_list():
    fixture = FixtureRecord(name="F", index=0)
    assert fixture.hooks(HookRole.AFTER_CLASS) is fixture.after_class


def test_clear_empties_every_role():
    fixture = FixtureRecord(name="F", index=0)
    for role in HookRole:
        fixture.append(_record(role.value, role))
    fixture.clear()
    assert fixture.hook_count == 0
