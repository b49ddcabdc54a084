"""Mini README: Tests for the Typer command line entry point."""

from __future__ import annotations

import json

from typer.testing import CliRunner

from transaction_insights_cli import cli

runner = CliRunner()


def test_report_prints_summary_json(reference_path) -> None:
    result = runner.invoke(
        cli, ["report", "--data-file", str(reference_path), "--client", "Tom Shelby"]
    )

    assert result.exit_code == 0
    summary = json.loads(result.stdout)
    assert summary["top_sender"] == "Arthur Shelby"
    assert summary["unique_clients"] == 14
    assert round(summary["client"]["total_sent"], 2) == 678.06


def test_report_reads_default_path_from_environment(monkeypatch, reference_path) -> None:
    monkeypatch.setenv("TRANSACTION_INSIGHTS_DATA_FILE", str(reference_path))

    result = runner.invoke(cli, ["report"])
    assert result.exit_code == 0
    assert json.loads(result.stdout)["records"] == 13


def test_report_missing_file_exits_with_error(tmp_path) -> None:
    result = runner.invoke(cli, ["report", "--data-file", str(tmp_path / "missing.json")])
    assert result.exit_code == 1
