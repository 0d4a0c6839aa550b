"""Logging helpers for the normalized decimal package.

Loggers are built through a fluent ``LoggerBuilder`` and exposed as
singletons. File output is opt-in: a library must not create log files on
import, so a file handler is attached only when a directory is given.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date
from pathlib import Path

DEFAULT_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
APP_LOGGER_NAME = "norm_decimal"

FormatterFactory = Callable[[], logging.Formatter]
FileHandlerFactory = Callable[[Path, logging.Formatter], logging.Handler]
ConsoleHandlerFactory = Callable[[logging.Formatter], logging.Handler]


class LoggerBuilder:
    """Fluent builder for configured ``logging.Logger`` instances."""

    def __init__(self) -> None:
        self._name = APP_LOGGER_NAME
        self._directory: Path | None = None
        self._subdir: str | None = None
        self._prefix = "norm_decimal"
        self._console = True
        self._level = logging.WARNING
        self._formatter_factory: FormatterFactory = self._default_formatter
        self._file_handler_factory: FileHandlerFactory = (
            self._default_file_handler
        )
        self._console_handler_factory: ConsoleHandlerFactory = (
            self._default_console_handler
        )

    def name(self, name: str) -> "LoggerBuilder":
        self._name = name
        return self

    def directory(self, directory: Path | str | None) -> "LoggerBuilder":
        self._directory = Path(directory) if directory is not None else None
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

    def formatter(self, factory: FormatterFactory) -> "LoggerBuilder":
        self._formatter_factory = factory
        return self

    def file_handler(self, factory: FileHandlerFactory) -> "LoggerBuilder":
        self._file_handler_factory = factory
        return self

    def console_handler(
        self,
        factory: ConsoleHandlerFactory,
    ) -> "LoggerBuilder":
        self._console_handler_factory = factory
        return self

    def build(self) -> logging.Logger:
        """Build the logger, reusing it when already configured.

        Returns:
            logging.Logger: Logger with the configured handlers attached.
        """
        logger = logging.getLogger(self._name)
        logger.setLevel(self._level)
        if logger.handlers:
            return logger
        fmt = self._formatter_factory()
        if self._directory is not None:
            log_dir = self._directory
            if self._subdir:
                log_dir = log_dir / self._subdir
            log_dir.mkdir(parents=True, exist_ok=True)
            log_path = log_dir / f"{self._today_stamp()}_{self._prefix}.log"
            logger.addHandler(self._file_handler_factory(log_path, fmt))
        if self._console:
            logger.addHandler(self._console_handler_factory(fmt))
        logger.propagate = False
        return logger

    @staticmethod
    def _today_stamp() -> str:
        return date.today().strftime("%Y%m%d")

    @staticmethod
    def _default_formatter() -> logging.Formatter:
        return logging.Formatter(DEFAULT_FORMAT)

    @staticmethod
    def _default_file_handler(
        path: Path,
        fmt: logging.Formatter,
    ) -> logging.Handler:
        handler = logging.FileHandler(path, encoding="utf-8")
        handler.setLevel(logging.INFO)
        handler.setFormatter(fmt)
        return handler

    @staticmethod
    def _default_console_handler(fmt: logging.Formatter) -> logging.Handler:
        handler = logging.StreamHandler()
        handler.setLevel(logging.INFO)
        handler.setFormatter(fmt)
        return handler


class Logger:
    """Singleton wrapper delegating to a built ``logging.Logger``."""

    _instance: "Logger | None" = None

    def __new__(cls, name: str = APP_LOGGER_NAME) -> "Logger":
        if cls._instance is None:
            instance = super().__new__(cls)
            instance.logger = LoggerBuilder().name(name).build()
            cls._instance = instance
        return cls._instance

    def set_level(self, level: int | str) -> None:
        """Change the level of the wrapped logger."""
        self.logger.setLevel(level)

    def info(self, message: str) -> None:
        self.logger.info(message)

    def warning(self, message: str) -> None:
        self.logger.warning(message)

    def error(self, message: str) -> None:
        self.logger.error(message)

    def debug(self, message: str) -> None:
        self.logger.debug(message)

    def critical(self, message: str) -> None:
        self.logger.critical(message)


class AppLogger(Logger):
    """Package-wide logger."""

    _instance: "AppLogger | None" = None


def get_app_logger() -> AppLogger:
    """Return the package logger singleton."""
    return AppLogger(APP_LOGGER_NAME)


__all__ = ["LoggerBuilder", "Logger", "AppLogger", "get_app_logger"]
