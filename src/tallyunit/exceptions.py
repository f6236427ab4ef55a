"""Exception hierarchy for tallyunit."""


class TallyError(Exception):
    """Base exception for tallyunit."""


class ConfigError(TallyError):
    """Invalid or unreadable settings."""


class FixtureLoadError(TallyError):
    """A fixture module could not be located or imported."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Cannot load fixtures from {path}: {reason}")
        self.path = path
        self.reason = reason


class StaleFixtureError(TallyError):
    """A fixture's registry record was dropped by a registry reset."""

    def __init__(self, name: str, index: int):
        super().__init__(f"Fixture {name!r} (#{index}) was registered before the last reset")
        self.name = name
        self.index = index


class Aborted(BaseException):
    """Unwinds the current test body after an aborting failure.

    Derives from BaseException so an ``except Exception`` inside a test body
    does not swallow it. The runner catches it at the per-test and per-hook
    boundary; it never escapes a run.
    """
