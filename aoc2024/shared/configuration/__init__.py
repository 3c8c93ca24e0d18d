"""Configuration management."""

from .settings import (
    ApplicationSettings,
    BenchmarkSettings,
    LoggingSettings,
    SolverSettings,
    load_settings,
)

__all__ = [
    'ApplicationSettings',
    'BenchmarkSettings',
    'LoggingSettings',
    'SolverSettings',
    'load_settings',
]
