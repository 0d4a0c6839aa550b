"""Logging infrastructure."""

from .logger import AppLogger, Logger, LoggerBuilder, get_app_logger

__all__ = ["AppLogger", "Logger", "LoggerBuilder", "get_app_logger"]
