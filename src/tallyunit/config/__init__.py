"""Settings for tallyunit runs.

Public API:
- RunSettings: output and logging preferences for a run
- load_settings: load from YAML with env var overrides
- get_settings_path: locate the settings file
"""

from tallyunit.config.settings import RunSettings, get_settings_path, load_settings

__all__ = ["RunSettings", "get_settings_path", "load_settings"]
