"""Fixture module that cannot be imported."""

raise RuntimeError("broken on import")
