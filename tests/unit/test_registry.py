"""Unit tests for the fixture registry arena."""

from __future__ import annotations

from tallyunit.domain.records import HookRole, MethodRecord
from tallyunit.registry import Registry, get_registry, reset_registry


def test_new_registry_is_empty(registry):
    assert len(registry) == 0
    assert registry.fixtures == ()


def test_add_fixture_appends_in_order(registry):
    first = registry.add_fixture("First")
    second = registry.add_fixture("Second")

    assert (first.index, second.index) == (0, 1)
    assert [f.name for f in registry] == ["First", "Second"]


def test_same_name_is_never_merged(registry):
    registry.add_fixture("Same")
    registry.add_fixture("Same")
    assert len(registry) == 2


def test_append_hook_by_index(registry):
    registry.add_fixture("F")
    registry.append_hook(0, MethodRecord(func=lambda: None, name="t", role=HookRole.TEST))
    assert [m.name for m in registry.get(0).tests] == ["t"]


def test_fixtures_is_a_snapshot(registry):
    registry.add_fixture("F")
    snapshot = registry.fixtures
    registry.add_fixture("G")
    assert len(snapshot) == 1


def test_iteration_ignores_fixtures_added_meanwhile(registry):
    registry.add_fixture("F")
    seen = []
    for fixture in registry:
        seen.append(fixture.name)
        registry.add_fixture("Late")
    assert seen == ["F"]


def test_reset_drops_fixtures_and_hooks(registry):
    record = registry.add_fixture("F")
    record.append(MethodRecord(func=lambda: None, name="t", role=HookRole.TEST))
    registry.reset()

    assert len(registry) == 0
    assert record.hook_count == 0
    assert registry.add_fixture("G").index == 0


def test_reset_starts_a_new_generation(registry):
    assert registry.generation == 0
    registry.reset()
    registry.reset()
    assert registry.generation == 2


# ---------------------------------------------------------------------------
# Process-wide registry
# ---------------------------------------------------------------------------


def test_get_registry_is_a_singleton():
    assert get_registry() is get_registry()
    assert isinstance(get_registry(), Registry)


def test_reset_registry_clears_global():
    get_registry().add_fixture("F")
    reset_registry()
    assert len(get_registry()) == 0
