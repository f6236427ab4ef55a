"""Run result persistence: atomic JSON save and load."""

from __future__ import annotations

import contextlib
import os
import tempfile
from pathlib import Path

from tallyunit.constants import RESULT_FILENAME
from tallyunit.domain.results import RunResult
from tallyunit.logging import logger


def _atomic_write(content: str, path: Path) -> None:
    """Write content to path atomically via temp file + os.replace().

    Cleans up the temp file on failure.
    """
    tmp_fd, tmp_path = tempfile.mkstemp(dir=path.parent, suffix=".tmp", prefix=path.stem)
    try:
        with os.fdopen(tmp_fd, "w", encoding="utf-8") as f:
            f.write(content)
        os.replace(tmp_path, path)
    except Exception:
        with contextlib.suppress(OSError):
            os.unlink(tmp_path)
        raise


def save_run_result(result: RunResult, output_dir: str | Path) -> Path:
    """Save ``result`` as ``{output_dir}/run_result.json``, replacing any previous one.

    Returns:
        Path to the written file.
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    result_path = output_dir / RESULT_FILENAME
    _atomic_write(result.model_dump_json(indent=2), result_path)
    logger.debug("Saved run result to {}", result_path)
    return result_path


def load_run_result(path: str | Path) -> RunResult:
    """Load a RunResult from a file written by :func:`save_run_result`."""
    content = Path(path).read_text(encoding="utf-8")
    return RunResult.model_validate_json(content)
