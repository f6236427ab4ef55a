"""Import fixture modules from the filesystem.

Fixture modules register their fixtures as a side effect of being imported
(by constructing fixture instances at module level). Modules are imported in
sorted path order, so registration order is the same on every run.

Each file executes exactly once per load. A file is also published in
``sys.modules`` under its plain name, so a sibling doing ``import helpers``
gets the module the loader already executed instead of a second copy. If a
sibling import gets there first, the loader reuses that module when it
reaches the file.

The directories of the loaded files are on ``sys.path`` only while loading.
Imports a fixture module needs should happen at module level.
"""

from __future__ import annotations

import contextlib
import hashlib
import importlib.util
import os
import sys
from collections.abc import Iterable, Iterator
from pathlib import Path
from types import ModuleType

from tallyunit.exceptions import FixtureLoadError
from tallyunit.fixture import registration_target, target_registry
from tallyunit.logging import logger
from tallyunit.registry import Registry


def discover_modules(paths: Iterable[str | Path]) -> list[Path]:
    """Expand files and directories into an ordered list of ``.py`` files.

    Directories are searched recursively; their files are sorted. Explicit
    files keep the order they were given in. Duplicates are dropped.

    Raises:
        FixtureLoadError: A path does not exist or is not a Python file.
    """
    found: list[Path] = []
    for raw in paths:
        path = Path(raw)
        if path.is_dir():
            found.extend(
                sorted(p for p in path.rglob("*.py") if p.name != "__init__.py")
            )
        elif path.is_file():
            if path.suffix != ".py":
                raise FixtureLoadError(str(path), "not a Python file")
            found.append(path)
        else:
            raise FixtureLoadError(str(path), "no such file or directory")

    seen: set[Path] = set()
    unique: list[Path] = []
    for path in found:
        resolved = path.resolve()
        if resolved not in seen:
            seen.add(resolved)
            unique.append(path)
    return unique


def _module_name(path: Path) -> str:
    digest = hashlib.sha256(str(path.resolve()).encode()).hexdigest()[:12]
    return f"_tallyunit_fixtures.{path.stem}_{digest}"


def _modules_from(files: set[Path]) -> dict[str, ModuleType]:
    """Entries of ``sys.modules`` whose source is one of ``files``."""
    basenames = {file.name for file in files}
    found: dict[str, ModuleType] = {}
    for name, module in list(sys.modules.items()):
        source = getattr(module, "__file__", None)
        if not isinstance(source, str) or os.path.basename(source) not in basenames:
            continue
        if Path(source).resolve() in files:
            found[name] = module
    return found


@contextlib.contextmanager
def _import_session(paths: list[Path]) -> Iterator[None]:
    """Make ``paths`` importable by plain name for the duration of one load.

    Copies left in ``sys.modules`` by an earlier load are evicted first, so
    every load executes each file again.
    """
    files = {path.resolve() for path in paths}
    for name in _modules_from(files):
        del sys.modules[name]

    saved_path = list(sys.path)
    for parent in dict.fromkeys(str(file.parent) for file in files):
        if parent not in sys.path:
            sys.path.insert(0, parent)
    try:
        yield
    finally:
        sys.path[:] = saved_path


def _execute(path: Path, registry: Registry) -> ModuleType:
    resolved = path.resolve()
    imported = _modules_from({resolved})
    if imported:
        name, module = next(iter(imported.items()))
        logger.debug("{} already imported as {} by a sibling module", path, name)
        return module

    name = _module_name(path)
    spec = importlib.util.spec_from_file_location(name, path)
    if spec is None or spec.loader is None:
        raise FixtureLoadError(str(path), "cannot create import spec")

    module = importlib.util.module_from_spec(spec)
    aliases = [name]
    if path.stem.isidentifier() and path.stem not in sys.modules:
        aliases.append(path.stem)
    for alias in aliases:
        sys.modules[alias] = module

    before = len(registry)
    try:
        with registration_target(registry):
            spec.loader.exec_module(module)
    except Exception as e:
        for alias in aliases:
            sys.modules.pop(alias, None)
        raise FixtureLoadError(str(path), f"{type(e).__name__}: {e}") from e

    logger.debug("Loaded {} ({} fixture(s) registered)", path, len(registry) - before)
    return module


def load_module(path: str | Path, registry: Registry | None = None) -> ModuleType:
    """Import one fixture module, registering its fixtures into ``registry``.

    ``registry`` defaults to the current registration target. The module's
    directory is on ``sys.path`` while it executes, so it can import its
    siblings.

    Raises:
        FixtureLoadError: The module could not be imported.
    """
    path = Path(path)
    target = registry if registry is not None else target_registry()
    with _import_session([path]):
        return _execute(path, target)


def load_paths(paths: Iterable[str | Path], registry: Registry | None = None) -> list[ModuleType]:
    """Discover and import every fixture module under ``paths``, once each."""
    files = discover_modules(paths)
    target = registry if registry is not None else target_registry()
    with _import_session(files):
        modules = [_execute(path, target) for path in files]
    logger.info("Loaded {} fixture module(s)", len(modules))
    return modules


__all__ = ["discover_modules", "load_module", "load_paths"]
