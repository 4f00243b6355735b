from __future__ import annotations

import json
import textwrap
from pathlib import Path

import pytest
from click.testing import CliRunner

from simpletester import __version__
from simpletester.cli.main import cli

SUITE = """
def passing(report):
    report(True)


def failing(report):
    report(False)


def later(report):
    import asyncio

    asyncio.get_running_loop().call_later(0.01, report, True)


def silent(report):
    pass


def explodes(report):
    raise RuntimeError("exploded in test")


TESTS = {"alpha_passes": passing, "beta_fails": failing, "gamma_later": later}
PASSING = {"alpha_passes": passing, "gamma_later": later}
STALLS = {"never_reports": silent}
NOT_A_MAPPING = [passing]
EXPLODES = {"alpha_passes": passing, "explodes": explodes}


def make_tests():
    return {"from_factory": passing}
"""


@pytest.fixture
def suite(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    (tmp_path / "st_cli_suite.py").write_text(SUITE, encoding="utf-8")
    monkeypatch.syspath_prepend(str(tmp_path))
    return tmp_path


def test_cli_help_short_flag() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["-h"])
    assert result.exit_code == 0
    assert "Usage:" in result.output
    assert "run" in result.output


def test_cli_version() -> None:
    result = CliRunner().invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert result.output.strip() == f"simpletester {__version__}"


def test_cli_run_passing_suite(suite: Path) -> None:
    result = CliRunner().invoke(cli, ["run", "st_cli_suite:PASSING", "--no-color"])
    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == [
        "Start test 1 alpha_passes",
        "Test 1 PASSED",
        "Start test 2 gamma_later",
        "Test 2 PASSED",
        "Test results:",
        "PASSED: alpha_passes",
        "PASSED: gamma_later",
        "Total 2/2 tests passed.",
    ]


def test_cli_run_with_failures_exits_nonzero(suite: Path) -> None:
    result = CliRunner().invoke(cli, ["run", "st_cli_suite:TESTS", "--no-color"])
    assert result.exit_code == 1
    assert "FAILED: beta_fails" in result.output
    assert "Total 2/3 tests passed." in result.output


def test_cli_filter(suite: Path) -> None:
    result = CliRunner().invoke(cli, ["run", "st_cli_suite:TESTS", "--filter", "alpha", "--no-color"])
    assert result.exit_code == 0, result.output
    assert "beta_fails" not in result.output
    assert "Total 1/1 tests passed." in result.output


def test_cli_filter_without_matches(suite: Path) -> None:
    result = CliRunner().invoke(cli, ["run", "st_cli_suite:TESTS", "--filter", "zzz"])
    assert result.exit_code == 1
    assert "No tests matched the provided filter." in result.output


def test_cli_list(suite: Path) -> None:
    result = CliRunner().invoke(cli, ["run", "st_cli_suite:TESTS", "--list", "--filter", "^(alpha|gamma)"])
    assert result.exit_code == 0
    assert result.output.splitlines() == ["alpha_passes", "gamma_later"]


def test_cli_factory_suite(suite: Path) -> None:
    result = CliRunner().invoke(cli, ["run", "st_cli_suite:make_tests", "--scheduler", "manual", "--no-color"])
    assert result.exit_code == 0, result.output
    assert "PASSED: from_factory" in result.output


def test_cli_manual_scheduler_reports_stall(suite: Path) -> None:
    result = CliRunner().invoke(cli, ["run", "st_cli_suite:STALLS", "--scheduler", "manual", "--no-color"])
    assert result.exit_code == 1
    assert "Start test 1 never_reports" in result.output
    assert "Run stalled: 0/1 test(s) reported." in result.output


def test_cli_json_report(suite: Path) -> None:
    report_path = suite / "report.json"
    result = CliRunner().invoke(
        cli,
        ["run", "st_cli_suite:TESTS", "--report", "json", "--report-path", str(report_path)],
    )
    assert result.exit_code == 1
    payload = json.loads(report_path.read_text(encoding="utf-8"))
    assert payload["summary"]["total"] == 3
    assert payload["summary"]["passed"] == 2
    assert [case["status"] for case in payload["cases"]] == ["passed", "failed", "passed"]


def test_cli_config_file(suite: Path) -> None:
    config = suite / "simpletester.yaml"
    config.write_text(
        textwrap.dedent(
            """
            tests: st_cli_suite:TESTS
            filter: beta
            color: false
            """
        ),
        encoding="utf-8",
    )
    result = CliRunner().invoke(cli, ["run", "--config", str(config)])
    assert result.exit_code == 1
    assert "Total 0/1 tests passed." in result.output

    override = CliRunner().invoke(cli, ["run", "--config", str(config), "--filter", "alpha"])
    assert override.exit_code == 0, override.output
    assert "Total 1/1 tests passed." in override.output


def test_cli_bundled_self_tests() -> None:
    result = CliRunner().invoke(cli, ["run", "simpletester.self_tests:SELF_TESTS", "--no-color"])
    assert result.exit_code == 0, result.output
    assert "PASSED: unitTest_Tester_ShouldReportTestResults" in result.output


@pytest.mark.parametrize(
    "args, message",
    [
        (["run"], "No tests given"),
        (["run", "st_cli_suite:TESTS", "--scheduler", "tk"], "No scheduler registered as 'tk'"),
        (["run", "st_cli_suite:NOT_A_MAPPING"], "must be a mapping"),
        (["run", "st_cli_suite:MISSING"], "has no attribute 'MISSING'"),
        (["run", "st_cli_suite:TESTS", "--filter", "("], "Invalid test filter"),
        (["run", "st_cli_suite:EXPLODES", "--no-color"], "exploded in test"),
        (["run", "st_cli_suite:EXPLODES", "--scheduler", "manual"], "exploded in test"),
    ],
)
def test_cli_errors_are_reported(suite: Path, args: list, message: str) -> None:
    result = CliRunner().invoke(cli, args)
    assert result.exit_code == 1
    assert "Error:" in result.output
    assert message in result.output
