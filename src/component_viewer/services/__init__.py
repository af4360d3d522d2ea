"""Services backing the catalog UI."""

from .base import EventHook
from .search import (
    MemoryStore,
    QSettingsStore,
    SearchHistory,
    StringStore,
    filter_items,
)
from .selection import (
    ContentSection,
    SelectionChange,
    SelectionController,
    SelectionEvent,
    SelectionState,
    build_content,
)

__all__ = [
    "ContentSection",
    "EventHook",
    "MemoryStore",
    "QSettingsStore",
    "SearchHistory",
    "SelectionChange",
    "SelectionController",
    "SelectionEvent",
    "SelectionState",
    "StringStore",
    "build_content",
    "filter_items",
]
