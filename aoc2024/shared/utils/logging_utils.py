"""Logging utilities for the puzzle runner."""
import logging
import logging.handlers
import sys
from pathlib import Path

from ..configuration.settings import LoggingSettings


def setup_logging(settings: LoggingSettings) -> None:
    """Setup logging configuration based on settings.

    Args:
        settings: Logging settings configuration
    """
    level = getattr(logging, settings.level.upper())

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Clear existing handlers
    root_logger.handlers.clear()

    formatter = logging.Formatter(
        fmt=settings.format_string,
        datefmt=settings.date_format
    )

    if settings.console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    if settings.file_output:
        try:
            log_path = Path(settings.log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.handlers.RotatingFileHandler(
                filename=settings.log_file,
                maxBytes=settings.max_file_size_mb * 1024 * 1024,
                backupCount=settings.backup_count,
                encoding='utf-8',
                delay=True  # Don't open file until first log
            )
            # File gets everything the loggers let through
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
            root_logger.setLevel(logging.DEBUG)

        except OSError as e:
            root_logger.error(f"Failed to setup file logging: {e}")

    # Set component-specific levels
    for component, component_level in settings.component_levels.items():
        component_logger = logging.getLogger(component)
        component_logger.setLevel(getattr(logging, component_level.upper()))

    root_logger.debug("Logging initialized")


class ContextLogger(logging.LoggerAdapter):
    """Logger adapter that prefixes messages with ``[key=value ...]``."""

    def process(self, msg, kwargs):
        if self.extra:
            context = " ".join(f"{key}={value}" for key, value in self.extra.items())
            msg = f"[{context}] {msg}"
        return msg, kwargs


def get_context_logger(name: str, **context) -> ContextLogger:
    """Module logger carrying ``context`` (e.g. ``day=16, part='a'``) on every line."""
    return ContextLogger(logging.getLogger(name), context)
