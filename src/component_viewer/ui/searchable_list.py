from __future__ import annotations

from typing import Callable, Iterable, Sequence

from PySide6.QtCore import QSize, Qt, QTimer, Signal
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from component_viewer.registry import ComponentRegistry, RegisteredItem
from component_viewer.services import SearchHistory, filter_items
from component_viewer.utils import get_logger

from .theme import ROW_HEIGHT, SPACING_XS


logger = get_logger(__name__)

KEY_ROLE = Qt.ItemDataRole.UserRole


class CatalogRow(QWidget):
    """Row showing an item's name with its title underneath."""

    def __init__(self, item: RegisteredItem, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(SPACING_XS, SPACING_XS, SPACING_XS, SPACING_XS)
        layout.setSpacing(2)
        layout.addStretch()

        self.title_label = QLabel(item.name)
        self.title_label.setObjectName("RowTitle")
        self.title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.title_label)

        if item.title:
            self.subtitle_label: QLabel | None = QLabel(item.title)
            self.subtitle_label.setObjectName("RowSubtitle")
            self.subtitle_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
            layout.addWidget(self.subtitle_label)
        else:
            self.subtitle_label = None
        layout.addStretch()


class SearchableList(QWidget):
    """Catalog list with a search box that narrows it as the user types."""

    item_activated = Signal(str)
    close_requested = Signal()

    def __init__(
        self,
        registry: ComponentRegistry,
        *,
        history: SearchHistory | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._registry = registry
        self._history = history
        self._all: list[RegisteredItem] = registry.list()
        self._visible: list[RegisteredItem] = []
        self._subscriptions: list[Callable[[], None]] = []

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        search_bar = QWidget()
        search_bar.setObjectName("SearchBar")
        search_bar.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        bar_layout = QHBoxLayout(search_bar)
        bar_layout.setContentsMargins(5, 5, 5, 5)

        self.search_input = QLineEdit()
        self.search_input.setObjectName("SearchInput")
        self.search_input.setPlaceholderText("Search…")
        self.search_input.setClearButtonEnabled(True)
        bar_layout.addWidget(self.search_input, stretch=1)

        self.done_button = QPushButton("Done")
        self.done_button.setObjectName("DoneButton")
        self.done_button.clicked.connect(self.close_requested)
        bar_layout.addWidget(self.done_button)

        layout.addWidget(search_bar)

        self.list_widget = QListWidget()
        self.list_widget.setObjectName("CatalogList")
        self.list_widget.itemClicked.connect(self._activate)
        self.list_widget.itemActivated.connect(self._activate)
        layout.addWidget(self.list_widget, stretch=1)

        self.search_input.textChanged.connect(self._on_text_changed)
        self.search_input.returnPressed.connect(self._activate_current)

        restored = self._history.load() if self._history is not None else ""
        if restored:
            self.search_input.setText(restored)
        else:
            self._apply_filter()

        self._subscriptions.append(registry.subscribe(self._on_registry_changed))

    # ----------------------------------------------------------------- Public

    def query(self) -> str:
        return self.search_input.text()

    def visible_items(self) -> list[RegisteredItem]:
        return list(self._visible)

    def refresh(self) -> None:
        self._all = self._registry.list()
        self._apply_filter()

    def dispose(self) -> None:
        while self._subscriptions:
            unsubscribe = self._subscriptions.pop()
            unsubscribe()

    # -------------------------------------------------------------- Internals

    def _on_registry_changed(self, keys: Sequence[str]) -> None:
        logger.debug("Refreshing catalog list", changed=len(keys))
        self.refresh()

    def _on_text_changed(self, text: str) -> None:
        self._apply_filter()
        if self._history is not None:
            history = self._history
            QTimer.singleShot(0, lambda: history.save(text))

    def _apply_filter(self) -> None:
        self._visible = filter_items(self._all, self.search_input.text())
        self._populate(self._visible)

    def _populate(self, items: Iterable[RegisteredItem]) -> None:
        self.list_widget.clear()
        for item in items:
            row = QListWidgetItem()
            row.setData(KEY_ROLE, item.key)
            row.setToolTip(item.key)
            row.setSizeHint(QSize(0, ROW_HEIGHT))
            self.list_widget.addItem(row)
            self.list_widget.setItemWidget(row, CatalogRow(item))

    def _activate(self, row: QListWidgetItem) -> None:
        key = row.data(KEY_ROLE)
        if isinstance(key, str):
            self.item_activated.emit(key)

    def _activate_current(self) -> None:
        row = self.list_widget.currentItem()
        if row is None and self.list_widget.count() == 1:
            row = self.list_widget.item(0)
        if row is not None:
            self._activate(row)


__all__ = ["CatalogRow", "SearchableList"]
