"""Process-wide fixture registry.

The registry is the single owner of every FixtureRecord. Fixtures append to
it while they are constructed and keep only their record's index. Teardown is
an explicit :meth:`Registry.reset`, never a side effect of a fixture going
away.

Runs are serial: resetting or appending while a runner iterates the same
registry is not supported.
"""

from __future__ import annotations

from collections.abc import Iterator

from tallyunit.domain.records import FixtureRecord, MethodRecord
from tallyunit.logging import logger


class Registry:
    """Ordered arena of FixtureRecords, in construction order."""

    def __init__(self) -> None:
        self._fixtures: list[FixtureRecord] = []
        self._generation = 0

    def add_fixture(self, name: str) -> FixtureRecord:
        """Append a fresh, empty FixtureRecord at the tail and return it.

        Records are never merged: registering the same name twice yields two
        records.
        """
        record = FixtureRecord(name=name, index=len(self._fixtures))
        self._fixtures.append(record)
        logger.debug("Registered fixture #{} ({})", record.index, name)
        return record

    def append_hook(self, index: int, method: MethodRecord) -> None:
        """Append ``method`` to the fixture registered at ``index``."""
        self.get(index).append(method)

    def get(self, index: int) -> FixtureRecord:
        return self._fixtures[index]

    @property
    def generation(self) -> int:
        """Number of resets so far. Indices are only valid within one generation."""
        return self._generation

    @property
    def fixtures(self) -> tuple[FixtureRecord, ...]:
        """Snapshot of all fixtures in registration order."""
        return tuple(self._fixtures)

    def reset(self) -> None:
        """Drop every fixture and the hooks it owns."""
        for record in self._fixtures:
            record.clear()
        count = len(self._fixtures)
        self._fixtures.clear()
        self._generation += 1
        logger.debug("Registry reset ({} fixtures dropped)", count)

    def __len__(self) -> int:
        return len(self._fixtures)

    def __iter__(self) -> Iterator[FixtureRecord]:
        return iter(tuple(self._fixtures))


_registry: Registry | None = None


def get_registry() -> Registry:
    """Return the process-wide registry, creating it on first use."""
    global _registry
    if _registry is None:
        _registry = Registry()
    return _registry


def reset_registry() -> None:
    """Clear the process-wide registry."""
    get_registry().reset()


__all__ = ["Registry", "get_registry", "reset_registry"]
