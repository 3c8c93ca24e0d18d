"""Tests for settings loading and validation."""

import json

import pytest

from aoc2024.algorithms.shortest_path import SolverConfig
from aoc2024.shared.configuration.settings import (
    ApplicationSettings,
    BenchmarkSettings,
    LoggingSettings,
    load_settings,
)


def test_defaults_are_valid():
    settings = ApplicationSettings()

    assert settings.errors() == []
    assert settings.benchmark.num_runs == 11
    assert settings.solver.to_solver_config() == SolverConfig()


def test_overlay_from_file(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({
        "solver": {"early_exit": False},
        "benchmark": {"num_runs": 3, "days": [16, 20]},
    }), encoding="utf-8")

    settings = load_settings(str(path))

    assert settings.solver.early_exit is False
    assert settings.solver.debug_checks is True
    assert settings.benchmark.num_runs == 3
    assert settings.benchmark.days == [16, 20]
    assert settings.logging == LoggingSettings()


def test_no_path_gives_defaults():
    assert load_settings() == ApplicationSettings()


@pytest.mark.parametrize("data", [
    {"solver": {"turbo": True}},
    {"plugins": {}},
    {"benchmark": [1, 2]},
])
def test_unknown_settings_are_rejected(data):
    with pytest.raises(ValueError):
        ApplicationSettings.from_dict(data)


def test_settings_file_must_hold_an_object(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("[]", encoding="utf-8")

    with pytest.raises(ValueError):
        load_settings(str(path))


def test_validation_errors_are_grouped():
    settings = ApplicationSettings(
        benchmark=BenchmarkSettings(num_runs=0, days=[26]),
        logging=LoggingSettings(level="LOUD"),
    )

    errors = settings.validate()

    assert len(errors["benchmark"]) == 2
    assert errors["logging"] == ["level must be one of ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']"]
    assert errors["solver"] == []
    assert "benchmark: num_runs must be positive" in settings.errors()


def test_solver_settings_share_engine_validation():
    settings = ApplicationSettings.from_dict({"solver": {"max_nodes": 0}})

    assert settings.validate()["solver"] == ["max_nodes must be positive"]
    assert settings.solver.to_solver_config().validate() == ["max_nodes must be positive"]
