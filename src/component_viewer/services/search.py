from __future__ import annotations

from typing import Iterable, Protocol

from PySide6.QtCore import QSettings

from component_viewer.config.settings import APP_NAME, LAST_SEARCH_KEY
from component_viewer.registry import RegisteredItem
from component_viewer.utils import get_logger, sanitize_search_text


logger = get_logger(__name__)


def search_text(item: RegisteredItem) -> str:
    return f"{item.name} {item.title or ''}".lower()


def filter_items(items: Iterable[RegisteredItem], query: str) -> list[RegisteredItem]:
    """Keep items whose name or title contains ``query``, case-insensitively.

    The input order is preserved and an empty query keeps everything.
    """

    needle = sanitize_search_text(query or "").lower()
    if not needle:
        return list(items)
    return [item for item in items if needle in search_text(item)]


class StringStore(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryStore:
    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.values[key] = value


class QSettingsStore:
    """String store backed by the platform ``QSettings`` location."""

    def __init__(self, settings: QSettings | None = None) -> None:
        self._settings = settings or QSettings(APP_NAME, APP_NAME)

    def get(self, key: str) -> str | None:
        value = self._settings.value(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        self._settings.setValue(key, value)


class SearchHistory:
    """Best-effort persistence of the last search string."""

    def __init__(self, store: StringStore, *, key: str = LAST_SEARCH_KEY) -> None:
        self._store = store
        self._key = key

    def load(self) -> str:
        try:
            value = self._store.get(self._key)
        except Exception:  # noqa: BLE001 - persistence is optional
            logger.warning("Unable to restore last search", exc_info=True)
            return ""
        return value or ""

    def save(self, query: str) -> None:
        try:
            self._store.set(self._key, query)
        except Exception:  # noqa: BLE001 - persistence is optional
            logger.warning("Unable to persist last search", exc_info=True)


__all__ = [
    "MemoryStore",
    "QSettingsStore",
    "SearchHistory",
    "StringStore",
    "filter_items",
    "search_text",
]
