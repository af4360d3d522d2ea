from __future__ import annotations

from typing import Callable

from PySide6.QtCore import QEvent, QObject, Signal
from PySide6.QtGui import QKeySequence, QShortcut
from PySide6.QtWidgets import (
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from component_viewer.registry import ComponentRegistry, default_registry
from component_viewer.services import (
    SearchHistory,
    SelectionChange,
    SelectionController,
    SelectionEvent,
)
from component_viewer.utils import get_logger

from .item_view import ItemView
from .searchable_list import SearchableList
from .theme import catalog_stylesheet


logger = get_logger(__name__)


class ComponentViewer(QWidget):
    """Catalog window: a searchable list that opens items in an overlay."""

    closed = Signal()

    def __init__(
        self,
        registry: ComponentRegistry | None = None,
        *,
        controller: SelectionController | None = None,
        history: SearchHistory | None = None,
        reload_callback: Callable[[], object] | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setObjectName("ComponentViewer")
        self.setStyleSheet(catalog_stylesheet())
        self._registry = registry or default_registry()
        self._controller = controller or SelectionController(self._registry)
        self._reload_callback = reload_callback
        self._subscriptions: list[Callable[[], None]] = []

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.stack = QStackedWidget()
        layout.addWidget(self.stack)

        self.list_page = SearchableList(self._registry, history=history)
        self.list_page.item_activated.connect(self._controller.select_item)
        self.list_page.close_requested.connect(self.closed)
        self.stack.addWidget(self.list_page)

        self.overlay_page = QWidget()
        self.overlay_page.setObjectName("ItemOverlay")
        overlay_layout = QVBoxLayout(self.overlay_page)
        overlay_layout.setContentsMargins(0, 0, 0, 0)
        self.item_view = ItemView()
        overlay_layout.addWidget(self.item_view)
        self.close_button = QPushButton("Close", self.overlay_page)
        self.close_button.setObjectName("OverlayCloseButton")
        self.close_button.setFixedSize(100, 30)
        self.close_button.clicked.connect(self._controller.close)
        self.stack.addWidget(self.overlay_page)
        self.overlay_page.installEventFilter(self)

        close_shortcut = QShortcut(QKeySequence("Esc"), self)
        close_shortcut.activated.connect(self._controller.close)
        for sequence in (QKeySequence("F5"), QKeySequence("Ctrl+R")):
            shortcut = QShortcut(sequence, self)
            shortcut.activated.connect(self.reload_catalog)

        self._controller.attach()
        self._subscriptions.append(self._controller.changed.subscribe(self._on_selection))
        self._subscriptions.append(self._controller.detach)
        self._subscriptions.append(self.list_page.dispose)

    # ----------------------------------------------------------------- Public

    @property
    def controller(self) -> SelectionController:
        return self._controller

    def is_overlay_visible(self) -> bool:
        return self.stack.currentWidget() is self.overlay_page

    def reload_catalog(self) -> None:
        if self._reload_callback is None:
            return
        logger.info("Reloading catalog modules")
        self._reload_callback()

    def dispose(self) -> None:
        while self._subscriptions:
            unsubscribe = self._subscriptions.pop()
            try:
                unsubscribe()
            except Exception:  # pragma: no cover - best effort cleanup
                logger.exception("Failed to release viewer subscription")

    # -------------------------------------------------------------- Overrides

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:
        if watched is self.overlay_page and event.type() in {
            QEvent.Type.Resize,
            QEvent.Type.Show,
        }:
            self._place_close_button()
        return super().eventFilter(watched, event)

    def closeEvent(self, event) -> None:  # type: ignore[override]  # noqa: ANN001
        self.dispose()
        super().closeEvent(event)

    # -------------------------------------------------------------- Internals

    def _on_selection(self, event: SelectionEvent) -> None:
        if event.change is SelectionChange.CLOSED:
            self.item_view.clear()
            self.stack.setCurrentWidget(self.list_page)
            return
        self.item_view.set_sections(self._controller.content())
        self.stack.setCurrentWidget(self.overlay_page)
        self._place_close_button()

    def _place_close_button(self) -> None:
        rect = self.overlay_page.rect()
        self.close_button.move(0, max(rect.height() - self.close_button.height(), 0))
        self.close_button.raise_()


__all__ = ["ComponentViewer"]
