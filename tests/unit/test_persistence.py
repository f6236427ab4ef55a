"""Unit tests for run result persistence."""

from __future__ import annotations

import json

from tallyunit.domain.results import CaseResult, FixtureResult, RunResult, Verdict
from tallyunit.results import load_run_result, save_run_result


def sample_result() -> RunResult:
    fixture = FixtureResult(
        name="Sample",
        index=0,
        cases=[
            CaseResult(name="good", verdict=Verdict.PASSED),
            CaseResult(name="bad", verdict=Verdict.FAILED, failed_assertions=2),
        ],
    )
    return RunResult(fixtures=[fixture], assertions=2, passes=1, failures=1)


def test_save_creates_directory_and_file(tmp_path):
    path = save_run_result(sample_result(), tmp_path / "nested" / "out")
    assert path == tmp_path / "nested" / "out" / "run_result.json"
    data = json.loads(path.read_text())
    assert data["failures"] == 1
    assert data["fixtures"][0]["cases"][1]["verdict"] == "failed"


def test_save_replaces_previous_result(tmp_path):
    save_run_result(RunResult(passes=5), tmp_path)
    save_run_result(sample_result(), tmp_path)
    assert load_run_result(tmp_path / "run_result.json").passes == 1
    assert [p.name for p in tmp_path.iterdir()] == ["run_result.json"]


def test_load_restores_model(tmp_path):
    original = sample_result()
    loaded = load_run_result(save_run_result(original, tmp_path))
    assert loaded == original
    assert loaded.fixtures[0].cases[1].verdict is Verdict.FAILED
