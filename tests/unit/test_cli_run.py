"""Unit tests for the tally run CLI command.

Tests use typer.testing.CliRunner against the fixture modules under
tests/data, so every run is real: modules are imported, fixtures register,
tests execute.

Note: typer's CliRunner routes all output (stdout + stderr) to .output.
Log lines and error messages are captured in .output alongside the report.
"""

from __future__ import annotations

import json
import re
from pathlib import Path

from loguru import logger
from typer.testing import CliRunner

from tallyunit.cli import app
from tallyunit.cli.run import resolve_settings
from tallyunit.registry import get_registry

runner = CliRunner()

_ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")

DATA = Path(__file__).parent.parent / "data"
FIXTURES = DATA / "fixture_modules"
PASSING = FIXTURES / "a_arithmetic.py"
BROKEN = DATA / "broken_modules" / "raises_on_import.py"


def _strip_ansi(text: str) -> str:
    return _ANSI_RE.sub("", text)


def _json_payload(output: str) -> dict:
    return json.loads(output[output.index("{") :])


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------


def test_all_passing_exits_zero():
    result = runner.invoke(app, ["run", str(PASSING), "--quiet"])
    assert result.exit_code == 0, result.output
    assert "[       PASSED ] adds" in result.output
    assert "[       PASSED ] multiplies" in result.output
    assert "[    FAILED    ]    0 tests" in result.output


def test_exit_code_is_failure_count():
    result = runner.invoke(app, ["run", str(FIXTURES), "--quiet"])
    assert result.exit_code == 1, result.output
    assert "[       FAILED ] wrong_length" in result.output
    assert "[    PASSED    ]    3 tests" in result.output


def test_fixtures_run_in_sorted_module_order():
    result = runner.invoke(app, ["run", str(FIXTURES), "--quiet"])
    output = result.output
    assert output.index("] adds") < output.index("] upper_case")


def test_state_is_reset_between_invocations():
    runner.invoke(app, ["run", str(FIXTURES), "--quiet"])
    result = runner.invoke(app, ["run", str(FIXTURES), "--quiet"])
    assert result.exit_code == 1
    assert "[    PASSED    ]    3 tests" in result.output
    assert len(get_registry()) == 2


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


def test_broken_module_exits_two():
    result = runner.invoke(app, ["run", str(BROKEN)])
    assert result.exit_code == 2
    assert "FixtureLoadError" in result.output
    assert "RuntimeError" in result.output


def test_missing_path_exits_two(tmp_path):
    result = runner.invoke(app, ["run", str(tmp_path / "nope.py")])
    assert result.exit_code == 2
    assert "no such file or directory" in _strip_ansi(result.output)


def test_missing_config_exits_two(tmp_path):
    result = runner.invoke(app, ["run", str(PASSING), "--config", str(tmp_path / "none.yaml")])
    assert result.exit_code == 2
    assert "ConfigError" in result.output


# ---------------------------------------------------------------------------
# Output options
# ---------------------------------------------------------------------------


def test_json_output_replaces_text_report():
    result = runner.invoke(app, ["run", str(FIXTURES), "--json", "--quiet"])
    assert result.exit_code == 1
    assert "[ RUN          ]" not in result.output

    payload = _json_payload(result.output)
    assert payload["passes"] == 3
    assert payload["failures"] == 1
    assert [f["name"] for f in payload["fixtures"]] == ["ArithmeticFixture", "StringFixture"]


def test_output_dir_saves_result(tmp_path):
    result = runner.invoke(app, ["run", str(PASSING), "-o", str(tmp_path), "--quiet"])
    assert result.exit_code == 0
    saved = json.loads((tmp_path / "run_result.json").read_text())
    assert saved["passes"] == 2
    assert saved["traces"] == 1


def test_config_file_enables_json(tmp_path):
    config = tmp_path / "tallyunit.yaml"
    config.write_text("json_output: true\nverbosity: quiet\n")
    result = runner.invoke(app, ["run", str(PASSING), "-c", str(config)])
    assert result.exit_code == 0
    assert _json_payload(result.output)["failures"] == 0


def test_log_file_option_writes_debug_log(tmp_path):
    log_file = tmp_path / "tally.log"
    result = runner.invoke(app, ["run", str(PASSING), "--quiet", "--log-file", str(log_file)])
    assert result.exit_code == 0
    logger.remove()
    assert "Loaded" in log_file.read_text()


def test_exit_code_is_clamped(tmp_path):
    module = tmp_path / "many_failures.py"
    module.write_text(
        "from tallyunit import Fixture, fail\n"
        "\n"
        "class ManyFailures(Fixture):\n"
        "    def __init__(self):\n"
        "        super().__init__(*[self.test(fail, name=f\"t{i}\") for i in range(300)])\n"
        "\n"
        "ManyFailures()\n"
    )
    result = runner.invoke(app, ["run", str(module), "--json", "--quiet"])
    assert result.exit_code == 255
    assert _json_payload(result.output)["failures"] == 300


def test_verbose_logs_debug_lines():
    result = runner.invoke(app, ["run", str(PASSING), "--verbose"])
    assert result.exit_code == 0
    assert "DEBUG" in _strip_ansi(result.output)


# ---------------------------------------------------------------------------
# resolve_settings
# ---------------------------------------------------------------------------


def test_flags_override_settings_file(tmp_path):
    config = tmp_path / "tallyunit.yaml"
    config.write_text("verbosity: verbose\noutput_dir: from_file\n")
    settings = resolve_settings(config, True, tmp_path / "flag", True, False)
    assert settings.verbosity == "quiet"
    assert settings.json_output is True
    assert settings.output_dir == str(tmp_path / "flag")


def test_no_flags_keep_file_values(tmp_path):
    config = tmp_path / "tallyunit.yaml"
    config.write_text("verbosity: verbose\n")
    settings = resolve_settings(config, False, None, False, False)
    assert settings.verbosity == "verbose"
    assert settings.json_output is False


def test_log_file_flag_overrides_settings(tmp_path):
    config = tmp_path / "tallyunit.yaml"
    config.write_text("log_file: from_file.log\n")
    settings = resolve_settings(config, False, None, False, False, tmp_path / "flag.log")
    assert settings.log_file == str(tmp_path / "flag.log")
