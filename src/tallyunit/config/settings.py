"""Run settings loading.

Settings control how a run is reported, never which tests run. They are
read from ``tallyunit.yaml`` in the working directory, falling back to the
platform user config dir (via platformdirs). A missing file silently applies
all defaults. Invalid YAML or schema raises ConfigError.

Precedence (low → high):
  built-in defaults < settings file < env vars < CLI flags (handled by the CLI)
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError

from tallyunit.constants import OUTPUT_DIR_ENV, SETTINGS_FILENAME, VERBOSITY_ENV
from tallyunit.exceptions import ConfigError


class RunSettings(BaseModel):
    """Output and logging preferences for a run.

    All fields are optional; missing fields fall back to defaults.
    """

    model_config = {"extra": "forbid"}

    verbosity: Literal["quiet", "normal", "verbose"] = Field(
        default="normal", description="Log verbosity on stderr"
    )
    json_output: bool = Field(
        default=False, description="Print the run result as JSON instead of the text report"
    )
    output_dir: str | None = Field(
        default=None, description="Directory to save run_result.json into"
    )
    color: bool = Field(default=True, description="Colourise log output")
    log_file: str | None = Field(
        default=None, description="Also write DEBUG logs to this file (rotated at 10 MB)"
    )


def get_settings_path() -> Path:
    """Return the settings file path.

    ``./tallyunit.yaml`` if it exists, otherwise the platform user config path:

    Linux:   ~/.config/tallyunit/tallyunit.yaml
    macOS:   ~/Library/Application Support/tallyunit/tallyunit.yaml
    Windows: %APPDATA%\\tallyunit\\tallyunit.yaml
    """
    local = Path.cwd() / SETTINGS_FILENAME
    if local.exists():
        return local

    from platformdirs import user_config_dir

    return Path(user_config_dir("tallyunit")) / SETTINGS_FILENAME


def _apply_env_overrides(settings: RunSettings) -> RunSettings:
    """Apply TALLYUNIT_* environment variable overrides."""
    updates: dict[str, Any] = {}
    verbosity = os.environ.get(VERBOSITY_ENV, "").lower()
    if verbosity in ("quiet", "normal", "verbose"):
        updates["verbosity"] = verbosity
    if val := os.environ.get(OUTPUT_DIR_ENV):
        updates["output_dir"] = val

    if updates:
        return settings.model_copy(update=updates)
    return settings


def load_settings(path: Path | None = None) -> RunSettings:
    """Load run settings.

    Missing file: silently applies all defaults.
    Invalid YAML: raises ConfigError with parse error detail.
    Invalid schema: raises ConfigError with field path context.

    Args:
        path: Explicit settings file. None = ./tallyunit.yaml or the user config dir.

    Returns:
        RunSettings with file values merged over defaults, env vars applied on top.
    """
    settings_path = path or get_settings_path()

    if not settings_path.exists():
        if path is not None:
            raise ConfigError(f"Settings file not found: {settings_path}")
        return _apply_env_overrides(RunSettings())

    try:
        data = yaml.safe_load(settings_path.read_text()) or {}
        if not isinstance(data, dict):
            raise ConfigError(f"Settings must be a YAML mapping: {settings_path}")
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in settings {settings_path}: {e}") from e

    try:
        settings = RunSettings.model_validate(data)
    except ValidationError as e:
        errors = [f"  {'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()]
        raise ConfigError(f"Invalid settings {settings_path}:\n" + "\n".join(errors)) from e

    return _apply_env_overrides(settings)


__all__ = ["RunSettings", "get_settings_path", "load_settings"]
