"""Project logging helpers.

Loggers write to a dated file under ``<project root>/logs`` and optionally
to the console. ``get_app_logger`` and ``get_usage_logger`` expose
process-wide singletons so every use case shares the same handlers.
"""

from datetime import datetime
import logging
from pathlib import Path
from typing import Callable

from src.utils.utils import get_project_root


class LoggerBuilder:
    """Fluent builder for configured ``logging.Logger`` instances."""

    def __init__(self) -> None:
        self._name = "app"
        self._subdir = "app"
        self._prefix = "app_logs"
        self._console = True
        self._level = logging.INFO
        self._formatter_factory: Callable[[], logging.Formatter] = (
            LoggerBuilder._default_formatter
        )
        self._file_handler_factory = LoggerBuilder._default_file_handler
        self._console_handler_factory = (
            LoggerBuilder._default_console_handler
        )

    def name(self, name: str) -> "LoggerBuilder":
        self._name = name
        return self

    def subdir(self, subdir: str) -> "LoggerBuilder":
        self._subdir = subdir
        return self

    def prefix(self, prefix: str) -> "LoggerBuilder":
        self._prefix = prefix
        return self

    def console(self, enabled: bool) -> "LoggerBuilder":
        self._console = enabled
        return self

    def level(self, level: int) -> "LoggerBuilder":
        self._level = level
        return self

    def formatter(
        self,
        factory: Callable[[], logging.Formatter],
    ) -> "LoggerBuilder":
        self._formatter_factory = factory
        return self

    def file_handler(self, factory) -> "LoggerBuilder":
        self._file_handler_factory = factory
        return self

    def console_handler(self, factory) -> "LoggerBuilder":
        self._console_handler_factory = factory
        return self

    def build(self) -> logging.Logger:
        """Build the logger, reusing it when it was already configured.

        Returns:
            logging.Logger: Logger with file and optional console handlers.
        """
        logger = logging.getLogger(self._name)
        logger.setLevel(self._level)
        if logger.handlers:
            return logger

        log_dir = get_project_root() / "logs" / self._subdir
        log_dir.mkdir(parents=True, exist_ok=True)
        log_path = log_dir / f"{self._today_stamp()}_{self._prefix}.log"

        fmt = self._formatter_factory()
        logger.addHandler(self._file_handler_factory(log_path, fmt))
        if self._console:
            logger.addHandler(self._console_handler_factory(fmt))
        logger.propagate = False
        return logger

    @staticmethod
    def _today_stamp() -> str:
        return datetime.now().strftime("%Y%m%d")

    @staticmethod
    def _default_formatter() -> logging.Formatter:
        return logging.Formatter(
            "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
        )

    @staticmethod
    def _default_file_handler(
        path: Path,
        fmt: logging.Formatter,
    ) -> logging.FileHandler:
        handler = logging.FileHandler(path, encoding="utf-8")
        handler.setLevel(logging.INFO)
        handler.setFormatter(fmt)
        return handler

    @staticmethod
    def _default_console_handler(
        fmt: logging.Formatter,
    ) -> logging.StreamHandler:
        handler = logging.StreamHandler()
        handler.setLevel(logging.INFO)
        handler.setFormatter(fmt)
        return handler


class Logger:
    """Singleton wrapper delegating to a built ``logging.Logger``."""

    _instance = None
    _subdir = "app"
    _prefix = "app_logs"

    def __new__(cls, name: str = "app"):
        if cls._instance is None:
            instance = super().__new__(cls)
            instance.logger = (
                LoggerBuilder()
                .name(name)
                .subdir(cls._subdir)
                .prefix(cls._prefix)
                .build()
            )
            cls._instance = instance
        return cls._instance

    def info(self, message: str, *args) -> None:
        self.logger.info(message, *args)

    def warning(self, message: str, *args) -> None:
        self.logger.warning(message, *args)

    def error(self, message: str, *args) -> None:
        self.logger.error(message, *args)

    def debug(self, message: str, *args) -> None:
        self.logger.debug(message, *args)

    def critical(self, message: str, *args) -> None:
        self.logger.critical(message, *args)


class AppLogger(Logger):
    """Application-wide logger for use cases and adapters."""

    _instance = None
    _subdir = "app"
    _prefix = "app_logs"


class UsageLogger(Logger):
    """Logger for command-line usage events."""

    _instance = None
    _subdir = "usage"
    _prefix = "usage_logs"


def get_app_logger() -> AppLogger:
    """Return the shared application logger."""
    return AppLogger("finance_tracker")


def get_usage_logger() -> UsageLogger:
    """Return the shared usage logger."""
    return UsageLogger("finance_tracker.usage")


__all__ = [
    "LoggerBuilder",
    "Logger",
    "AppLogger",
    "UsageLogger",
    "get_app_logger",
    "get_usage_logger",
]
