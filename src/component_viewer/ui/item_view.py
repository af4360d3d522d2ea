from __future__ import annotations

from typing import Sequence

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QFrame, QLabel, QScrollArea, QVBoxLayout, QWidget

from component_viewer.services import ContentSection

from .theme import SPACING_MD, SPACING_SM, TOKENS, wrapper_stylesheet


def _error_label(message: str) -> QLabel:
    label = QLabel(f"Render failed: {message}")
    label.setObjectName("RenderError")
    label.setWordWrap(True)
    label.setStyleSheet(f"color: {TOKENS['danger']};")
    return label


def _as_widget(element: object) -> QWidget:
    if isinstance(element, QWidget):
        return element
    label = QLabel("" if element is None else str(element))
    label.setWordWrap(True)
    return label


class ItemView(QScrollArea):
    """Scrollable surface that shows the sections of the open item."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("ItemView")
        self.setWidgetResizable(True)
        self.setFrameShape(QFrame.Shape.NoFrame)
        self._elements: list[QWidget] = []
        self._retired: list[QWidget] = []
        self.section_labels: list[QLabel] = []

    def set_sections(self, sections: Sequence[ContentSection]) -> None:
        self.clear()

        content = QWidget()
        layout = QVBoxLayout(content)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(SPACING_MD)

        for section in sections:
            if section.label is not None:
                label = QLabel(section.label)
                label.setObjectName("StateTitle")
                label.setContentsMargins(SPACING_SM, SPACING_SM, SPACING_SM, 0)
                font = label.font()
                font.setBold(True)
                label.setFont(font)
                layout.addWidget(label)
                self.section_labels.append(label)

            wrapper = QFrame()
            wrapper.setObjectName("SectionWrapper")
            stylesheet = wrapper_stylesheet(section.wrapper_style)
            if stylesheet:
                wrapper.setStyleSheet(stylesheet)
            wrapper_layout = QVBoxLayout(wrapper)
            wrapper_layout.setContentsMargins(0, 0, 0, 0)
            if section.error is not None:
                element: QWidget = _error_label(section.error)
            else:
                element = _as_widget(section.element)
            wrapper_layout.addWidget(element)
            element.show()
            self._elements.append(element)
            # Scenes fill the overlay; component states keep their natural height.
            layout.addWidget(wrapper, stretch=1 if section.label is None else 0)

        if any(section.label is not None for section in sections):
            layout.addStretch()
        layout.setAlignment(Qt.AlignmentFlag.AlignTop)
        self.setWidget(content)

    def elements(self) -> list[QWidget]:
        return list(self._elements)

    def clear(self) -> None:
        # Ready elements belong to the registry; detach rather than delete.
        # Detached elements stay referenced until the next clear because a
        # factory element may still be inside its close callback.
        for element in self._elements:
            element.hide()
            element.setParent(None)
        self._retired = self._elements
        self._elements = []
        self.section_labels.clear()
        previous = self.takeWidget()
        if previous is not None:
            previous.deleteLater()


__all__ = ["ItemView"]
