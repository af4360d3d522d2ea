from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv
from platformdirs import user_cache_dir, user_config_dir

APP_NAME = "ComponentViewer"
ENV_PREFIX = "COMPONENT_VIEWER_"
ENV_FILE_NAME = "settings.env"

DEFAULT_DEBOUNCE_MS = 250
LAST_SEARCH_KEY = "component_viewer/last_search"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


def _config_dir() -> Path:
    path = Path(user_config_dir(APP_NAME, roaming=True))
    path.mkdir(parents=True, exist_ok=True)
    return path


def _cache_dir() -> Path:
    path = Path(user_cache_dir(APP_NAME))
    path.mkdir(parents=True, exist_ok=True)
    return path


def config_dir() -> Path:
    return _config_dir()


def cache_dir() -> Path:
    return _cache_dir()


def log_dir() -> Path:
    path = cache_dir() / "logs"
    path.mkdir(parents=True, exist_ok=True)
    return path


def _env_file_path(explicit: Path | None) -> Path:
    if explicit is not None:
        return explicit
    return _config_dir() / ENV_FILE_NAME


@dataclass(slots=True)
class Settings:
    """Runtime options for the catalog window.

    ``catalog_modules`` lists importable module paths whose import registers
    scenes and components. ``debounce_ms`` is the quiescence window used to
    coalesce registry change notifications.
    """

    catalog_modules: list[str] = field(default_factory=list)
    debounce_ms: int = DEFAULT_DEBOUNCE_MS
    watch: bool = False
    log_level: str = "INFO"

    @property
    def debounce_seconds(self) -> float:
        return max(self.debounce_ms, 0) / 1000


class SettingsManager:
    """Load and persist viewer settings with environment overrides."""

    def __init__(self, env_file: Path | None = None) -> None:
        self._env_file = _env_file_path(env_file)

    @property
    def env_file(self) -> Path:
        return self._env_file

    def load(self) -> Settings:
        """Load settings from environment, falling back to persisted file."""
        load_dotenv(self._env_file, override=False)

        settings = Settings()

        modules = self._get_modules_from_env()
        if modules:
            settings.catalog_modules = modules

        debounce = self._get_env("DEBOUNCE_MS")
        if debounce:
            try:
                settings.debounce_ms = int(debounce)
            except ValueError:
                settings.debounce_ms = DEFAULT_DEBOUNCE_MS

        watch = self._get_env("WATCH")
        if watch:
            settings.watch = watch.strip().lower() in _TRUE_VALUES

        log_level = self._get_env("LOG_LEVEL")
        if log_level and log_level.strip().upper() in LOG_LEVELS:
            settings.log_level = log_level.strip().upper()

        return settings

    def save(self, settings: Settings) -> None:
        """Persist configuration fields to the managed env file."""
        self._env_file.parent.mkdir(parents=True, exist_ok=True)
        content = [
            f"{ENV_PREFIX}CATALOG_MODULES={';'.join(settings.catalog_modules)}",
            f"{ENV_PREFIX}DEBOUNCE_MS={settings.debounce_ms}",
            f"{ENV_PREFIX}WATCH={'true' if settings.watch else 'false'}",
            f"{ENV_PREFIX}LOG_LEVEL={settings.log_level}",
        ]
        self._env_file.write_text("\n".join(content) + "\n", encoding="utf-8")

    def _get_env(self, name: str) -> str | None:
        return os.getenv(f"{ENV_PREFIX}{name}") or None

    def _get_modules_from_env(self) -> list[str] | None:
        raw = self._get_env("CATALOG_MODULES")
        if not raw:
            return None
        modules = [module.strip() for module in raw.split(";") if module.strip()]
        return modules or None


__all__ = [
    "DEFAULT_DEBOUNCE_MS",
    "LAST_SEARCH_KEY",
    "Settings",
    "SettingsManager",
    "cache_dir",
    "config_dir",
    "log_dir",
]
