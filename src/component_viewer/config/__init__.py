"""Configuration helpers for the component viewer."""

from .settings import (
    DEFAULT_DEBOUNCE_MS,
    LAST_SEARCH_KEY,
    Settings,
    SettingsManager,
)

__all__ = [
    "DEFAULT_DEBOUNCE_MS",
    "LAST_SEARCH_KEY",
    "Settings",
    "SettingsManager",
]
