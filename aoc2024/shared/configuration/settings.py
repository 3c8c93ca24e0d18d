"""Configuration settings dataclasses."""
import json
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Dict, Any, List, Optional

from ...algorithms.shortest_path.config import (
    DEBUG_CHECKS,
    EARLY_EXIT,
    ENABLE_INSTRUMENTATION,
    MAX_NODES,
    SolverConfig,
)


@dataclass
class SolverSettings:
    """Settings for the shortest-path engine."""
    early_exit: bool = EARLY_EXIT
    debug_checks: bool = DEBUG_CHECKS
    enable_instrumentation: bool = ENABLE_INSTRUMENTATION
    max_nodes: int = MAX_NODES

    def validate(self) -> List[str]:
        """Validate settings and return list of errors."""
        return self.to_solver_config().validate()

    def to_solver_config(self) -> SolverConfig:
        return SolverConfig(
            early_exit=self.early_exit,
            debug_checks=self.debug_checks,
            enable_instrumentation=self.enable_instrumentation,
            max_nodes=self.max_nodes,
        )


@dataclass
class BenchmarkSettings:
    """Settings for the timing harness."""
    num_runs: int = 11                 # Median of this many runs is reported
    input_dir: str = "resources"
    slow_threshold_us: int = 1000      # Runs slower than this get flagged
    days: Optional[List[int]] = None   # None = every registered day

    def validate(self) -> List[str]:
        errors = []

        if self.num_runs <= 0:
            errors.append("num_runs must be positive")

        if self.slow_threshold_us < 0:
            errors.append("slow_threshold_us must be non-negative")

        if self.days is not None:
            for day in self.days:
                if not 1 <= day <= 25:
                    errors.append(f"day {day} must be between 1 and 25")

        return errors


@dataclass
class LoggingSettings:
    """Settings for logging configuration."""
    level: str = "WARNING"
    console_output: bool = True
    file_output: bool = False
    log_file: str = "logs/aoc2024.log"
    max_file_size_mb: int = 10
    backup_count: int = 5

    # Format settings
    format_string: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"

    # Component-specific levels
    component_levels: Dict[str, str] = field(default_factory=lambda: {
        "aoc2024.algorithms": "INFO",
        "aoc2024.benchmark": "INFO",
    })

    def validate(self) -> List[str]:
        """Validate logging settings."""
        errors = []

        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if self.level not in valid_levels:
            errors.append(f"level must be one of {valid_levels}")

        if self.max_file_size_mb <= 0:
            errors.append("max_file_size_mb must be positive")

        if self.backup_count < 0:
            errors.append("backup_count must be non-negative")

        for component, level in self.component_levels.items():
            if level not in valid_levels:
                errors.append(f"component level for {component} must be one of {valid_levels}")

        return errors


@dataclass
class ApplicationSettings:
    """Main application settings container."""
    solver: SolverSettings = field(default_factory=SolverSettings)
    benchmark: BenchmarkSettings = field(default_factory=BenchmarkSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)

    # Application metadata
    version: str = "0.1.0"
    config_version: int = 1

    def validate(self) -> Dict[str, List[str]]:
        """Validate all settings and return errors by category."""
        return {
            "solver": self.solver.validate(),
            "benchmark": self.benchmark.validate(),
            "logging": self.logging.validate(),
        }

    def errors(self) -> List[str]:
        """Flattened ``category: message`` list of validation errors."""
        return [f"{category}: {error}"
                for category, messages in self.validate().items()
                for error in messages]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ApplicationSettings":
        """Overlay ``data`` on the defaults. Unknown keys raise ValueError."""
        sections = {
            "solver": SolverSettings,
            "benchmark": BenchmarkSettings,
            "logging": LoggingSettings,
        }
        settings = cls()

        for key, value in data.items():
            if key in sections:
                if not isinstance(value, dict):
                    raise ValueError(f"Section '{key}' must be a mapping")
                section_cls = sections[key]
                known = {f.name for f in fields(section_cls)}
                unknown = set(value) - known
                if unknown:
                    raise ValueError(f"Unknown {key} settings: {sorted(unknown)}")
                setattr(settings, key, section_cls(**value))
            elif key in ("version", "config_version"):
                setattr(settings, key, value)
            else:
                raise ValueError(f"Unknown settings section: {key}")

        return settings


def load_settings(path: Optional[str] = None) -> ApplicationSettings:
    """Load settings from an optional JSON file on top of the defaults."""
    if path is None:
        return ApplicationSettings()

    config_path = Path(path)
    with config_path.open("r", encoding="utf-8") as handle:
        data = json.load(handle)

    if not isinstance(data, dict):
        raise ValueError(f"Settings file {config_path} must contain a JSON object")

    return ApplicationSettings.from_dict(data)
