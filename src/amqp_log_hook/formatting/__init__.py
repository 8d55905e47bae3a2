"""Formatters for published log entries."""

from .json_log_formatter import JSONLogFormatter

__all__ = ["JSONLogFormatter"]
