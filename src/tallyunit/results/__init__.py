"""Run result persistence."""

from tallyunit.results.persistence import load_run_result, save_run_result

__all__ = ["load_run_result", "save_run_result"]
