"""
Tests for the day registry, the timing harness and the command line.
"""

import pytest

from aoc2024.benchmark import (
    DAYS,
    BenchmarkReport,
    DaySolver,
    RunResult,
    available_days,
    get_day,
    invoke_timed,
    read_input,
    render_table,
    run_all,
    run_day,
)
from aoc2024.main import main
from aoc2024.shared.configuration.settings import BenchmarkSettings
from conftest import read_resource


def count_chars(text, config=None):
    return len(text)


def shout(text, config=None):
    return text.strip().upper()


@pytest.fixture
def test_day(monkeypatch):
    day = DaySolver(25, "Test Day", count_chars, shout)
    monkeypatch.setitem(DAYS, 25, day)
    return day


def test_registered_days():
    assert available_days() == [16, 18, 20]
    assert get_day(16).title == "Reindeer Maze"
    assert get_day(18).input_name == "day_18.txt"
    assert set(get_day(20).parts()) == {"a", "b"}


def test_unknown_day_is_a_key_error():
    with pytest.raises(KeyError):
        get_day(3)


def test_missing_input_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_input(get_day(16), tmp_path)


def test_render_table():
    results = [
        RunResult("Day 16 - Part A", "7036", 0.0005),
        RunResult("Day 16 - Part B", "45", 0.0025),
    ]

    lines = render_table(results, slow_threshold_us=1000).splitlines()

    assert lines[0] == "Day 16 - Part A: 7036    500 us  "
    assert lines[1] == "Day 16 - Part B: 45     2500 us !"
    assert lines[2] == "=" * 33
    assert lines[3] == "Total:           " + "       3000 us !"


def test_empty_report():
    assert BenchmarkReport().render() == "No results"


def test_invoke_timed_runs_the_solver_repeatedly():
    calls = []

    result = invoke_timed("Day 99 - Part A", lambda: calls.append(1) or len(calls), num_runs=3)

    assert len(calls) == 3
    assert result.solution == "3"
    assert result.duration_s >= 0


def test_invoke_timed_needs_a_run():
    with pytest.raises(ValueError):
        invoke_timed("never", lambda: 0, num_runs=0)


def test_run_day_adds_both_parts(test_day):
    report = BenchmarkReport()

    results = run_day(test_day, "hello\n", report, num_runs=2)

    assert [r.name for r in results] == ["Day 25 - Part A", "Day 25 - Part B"]
    assert [r.solution for r in results] == ["6", "HELLO"]
    assert len(report) == 2
    assert report.tracker.get_summary()["Day 25 - Part A"]["count"] == 2


def test_run_day_single_part(test_day):
    report = BenchmarkReport()

    run_day(test_day, "abc", report, num_runs=1, parts=["b"])

    assert [r.solution for r in report.results] == ["ABC"]
    with pytest.raises(KeyError):
        run_day(test_day, "abc", report, num_runs=1, parts=["c"])


def test_run_all_reads_inputs(test_day, tmp_path):
    (tmp_path / "day_25.txt").write_text("abcd", encoding="utf-8")
    settings = BenchmarkSettings(num_runs=1, input_dir=str(tmp_path), days=[25])

    report = run_all(settings)

    assert [r.solution for r in report.results] == ["4", "ABCD"]
    assert report.total_duration == sum(r.duration_s for r in report.results)
    assert report.render().splitlines()[-1].startswith("Total:")


def test_cli_solves_one_part(tmp_path, capsys):
    path = tmp_path / "maze.txt"
    path.write_text(read_resource("example_16-part_1.txt"), encoding="utf-8")

    assert main(["day", "16", "--part", "a", "-i", str(path)]) == 0
    assert capsys.readouterr().out.strip() == "[Day 16 - Part A] 7036"


def test_cli_times_selected_days(tmp_path, capsys):
    (tmp_path / "day_16.txt").write_text(read_resource("example_16-part_2.txt"), encoding="utf-8")

    assert main(["--input-dir", str(tmp_path), "all", "--days", "16", "--runs", "1"]) == 0

    out = capsys.readouterr().out
    assert "Day 16 - Part A: 11048" in out
    assert "Day 16 - Part B: 64" in out
    assert "Total:" in out


def test_cli_reports_missing_input(tmp_path, capsys):
    assert main(["--input-dir", str(tmp_path), "day", "18"]) == 1
    assert "error:" in capsys.readouterr().err


def test_cli_rejects_invalid_runs(capsys):
    assert main(["all", "--runs", "0"]) == 1
    assert "num_runs" in capsys.readouterr().err
