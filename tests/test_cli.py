"""
Signal-Mind – Command-Line Tests
════════════════════════════════

Run: python -m pytest tests/test_cli.py -v
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from main import main

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def test_list_approaches(capsys):
    assert main(["--list"]) == 0
    out = capsys.readouterr().out
    for name in ("North", "East", "South", "West"):
        assert name in out


def test_single_run_with_csv_export(tmp_path, capsys):
    path = tmp_path / "events.csv"
    assert main(["--strategy", "fixed", "--time", "120", "--export-csv", str(path)]) == 0
    assert "Fixed run" in capsys.readouterr().out
    assert len(path.read_text().splitlines()) == 121


def test_single_run_streams_to_log_file(tmp_path):
    path = tmp_path / "stream.csv"
    assert main(["--strategy", "adaptive", "--time", "60", "--log-file", str(path)]) == 0
    assert len(path.read_text().splitlines()) == 61


def test_compare_with_chart(tmp_path, capsys):
    chart = tmp_path / "chart.png"
    assert main(["--time", "240", "--plot", str(chart)]) == 0
    assert "Adaptive vs Fixed" in capsys.readouterr().out
    assert chart.exists() and chart.stat().st_size > 0


def test_scenario_file(capsys):
    scenario = os.path.join(ROOT, "scenarios", "short_cycle.json")
    assert main(["--scenario", scenario, "--time", "90"]) == 0
    assert "Cycle too short" in capsys.readouterr().out


def test_bad_scenario_reports_error(tmp_path, capsys):
    path = tmp_path / "bad.json"
    path.write_text("[]")
    assert main(["--scenario", str(path)]) == 2
    assert "❌" in capsys.readouterr().out


def test_compare_streams_log_file_per_strategy(tmp_path, capsys):
    path = tmp_path / "run.csv"
    assert main(["--time", "60", "--log-file", str(path)]) == 0
    for suffix in ("fixed", "adaptive"):
        assert len((tmp_path / f"run_{suffix}.csv").read_text().splitlines()) == 61
    assert "run_adaptive.csv" in capsys.readouterr().out


def test_compare_exports_both_strategies(tmp_path):
    path = tmp_path / "events.csv"
    assert main(["--time", "60", "--export-csv", str(path)]) == 0
    for suffix in ("fixed", "adaptive"):
        assert len((tmp_path / f"events_{suffix}.csv").read_text().splitlines()) == 61


@pytest.mark.parametrize("value", ["0", "-5", "ten"])
def test_time_must_be_positive(value, capsys):
    with pytest.raises(SystemExit) as info:
        main(["--time", value])
    assert info.value.code == 2
