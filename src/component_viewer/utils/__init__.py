"""Shared utility helpers for the component viewer."""

from .asyncio import call_later, qt_call_later
from .logging import LoggingOptions, configure_logging, get_logger, log_file_path
from .sanitize import sanitize_log_message, sanitize_search_text

__all__ = [
    "LoggingOptions",
    "configure_logging",
    "get_logger",
    "log_file_path",
    "sanitize_search_text",
    "sanitize_log_message",
    "call_later",
    "qt_call_later",
]
