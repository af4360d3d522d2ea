from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Callable, Sequence

from component_viewer.registry import (
    CloseCallback,
    ComponentRegistry,
    ItemKind,
    RegisteredItem,
)
from component_viewer.utils import get_logger

from .base import EventHook


logger = get_logger(__name__)


class SelectionState(StrEnum):
    CLOSED = "closed"
    OPEN = "open"


class SelectionChange(StrEnum):
    OPENED = "opened"
    CLOSED = "closed"
    REFRESHED = "refreshed"


@dataclass(slots=True)
class SelectionEvent:
    change: SelectionChange
    key: str | None
    item: RegisteredItem | None


@dataclass(slots=True)
class ContentSection:
    """One block of rendered content; ``label`` is ``None`` for scenes."""

    label: str | None
    element: Any
    wrapper_style: Any = None
    error: str | None = None


def _render(
    item: RegisteredItem,
    close: CloseCallback,
    label: str | None,
) -> ContentSection:
    section = ContentSection(label=label, element=None, wrapper_style=item.wrapper_style)
    if item.renderable is None:
        return section
    try:
        section.element = item.renderable.resolve(close)
    except Exception as exc:  # noqa: BLE001 - shown inline as an error section
        logger.exception("Failed to render catalog item", key=item.key, title=item.title)
        section.error = f"{type(exc).__name__}: {exc}"
    return section


def build_content(item: RegisteredItem, close: CloseCallback) -> list[ContentSection]:
    """Resolve an item's renderables into display sections.

    Scenes yield a single unlabeled section. Components yield one section per
    state in declaration order, labelled with the state's title. A renderable
    that raises produces a section carrying ``error`` instead of an element.
    """

    if item.kind is ItemKind.COMPONENT and item.states is not None:
        return [_render(state, close, state.title or "") for state in item.states]
    if item.renderable is None:
        return []
    return [_render(item, close, None)]


class SelectionController:
    """Tracks which registry item is open in the overlay.

    States are ``CLOSED`` and ``OPEN(key)``. While open, change batches that
    include the open key re-resolve the displayed item from the registry so
    hot-reloaded content shows up without closing the overlay.
    """

    def __init__(self, registry: ComponentRegistry) -> None:
        self._registry = registry
        self._key: str | None = None
        self._item: RegisteredItem | None = None
        self._unsubscribe: Callable[[], None] | None = None
        self.changed: EventHook[SelectionEvent] = EventHook()

    # ------------------------------------------------------------ Lifecycle

    def attach(self) -> None:
        if self._unsubscribe is None:
            self._unsubscribe = self._registry.subscribe(self.handle_changes)

    def detach(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    # ---------------------------------------------------------------- State

    @property
    def state(self) -> SelectionState:
        return SelectionState.CLOSED if self._key is None else SelectionState.OPEN

    @property
    def selected_key(self) -> str | None:
        return self._key

    @property
    def displayed_item(self) -> RegisteredItem | None:
        return self._item

    # ---------------------------------------------------------- Transitions

    def select_item(self, key: str) -> bool:
        item = self._registry.get(key)
        if item is None:
            logger.debug("Ignoring selection of unknown item", key=key)
            return False
        self._key = key
        self._item = item
        logger.debug("Opened catalog item", key=key, kind=item.kind.value)
        self.changed.emit(SelectionEvent(SelectionChange.OPENED, key, item))
        return True

    def close(self) -> None:
        if self._key is None:
            return
        key = self._key
        self._key = None
        self._item = None
        logger.debug("Closed catalog item", key=key)
        self.changed.emit(SelectionEvent(SelectionChange.CLOSED, key, None))

    def handle_changes(self, keys: Sequence[str]) -> None:
        key = self._key
        if key is None or key not in keys:
            return
        refreshed = self._registry.get(key)
        if refreshed is None:
            logger.info("Open item no longer registered; keeping last view", key=key)
            return
        self._item = refreshed
        self.changed.emit(SelectionEvent(SelectionChange.REFRESHED, key, refreshed))

    def content(self) -> list[ContentSection]:
        if self._item is None:
            return []
        return build_content(self._item, self.close)


__all__ = [
    "ContentSection",
    "SelectionChange",
    "SelectionController",
    "SelectionEvent",
    "SelectionState",
    "build_content",
]
