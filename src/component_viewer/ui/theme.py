from __future__ import annotations

from typing import Any, Mapping, TypedDict


SPACING_XS = 4
SPACING_SM = 8
SPACING_MD = 12
SPACING_LG = 16

ROW_HEIGHT = 80


class ThemeTokens(TypedDict):
    """Colors used by the catalog widgets."""

    text: str
    text_inverse: str
    surface: str
    search_bar: str
    border: str
    row_divider: str
    row_pressed: str
    overlay_button: str
    danger: str


TOKENS = ThemeTokens(
    text="#000000",
    text_inverse="#ffffff",
    surface="#ffffff",
    search_bar="#eeeeee",
    border="#cccccc",
    row_divider="#000000",
    row_pressed="#dddddd",
    overlay_button="rgba(128, 128, 128, 0.6)",
    danger="#c62828",
)


def catalog_stylesheet(tokens: ThemeTokens = TOKENS) -> str:
    return (
        f"QWidget#SearchBar {{ background-color: {tokens['search_bar']}; }}"
        f"QLineEdit#SearchInput {{"
        f"  background-color: {tokens['surface']};"
        f"  border: 1px solid {tokens['border']};"
        f"  border-radius: 10px;"
        f"  padding: 8px;"
        f"  min-height: 24px;"
        f"}}"
        f"QPushButton#DoneButton {{"
        f"  color: {tokens['text']}; font-weight: bold; border: none; padding: 10px;"
        f"}}"
        f"QListWidget#CatalogList::item {{"
        f"  border-bottom: 1px solid {tokens['row_divider']};"
        f"}}"
        f"QListWidget#CatalogList::item:pressed {{"
        f"  background-color: {tokens['row_pressed']};"
        f"}}"
        f"QLabel#RowTitle {{ font-size: 20px; }}"
        f"QLabel#RowSubtitle {{ font-size: 10px; }}"
        f"QPushButton#OverlayCloseButton {{"
        f"  background-color: {tokens['overlay_button']};"
        f"  color: {tokens['text_inverse']};"
        f"  border: none;"
        f"}}"
    )


def wrapper_stylesheet(style: Any) -> str | None:
    """Translate an opaque wrapper style into a Qt style sheet, if possible.

    Strings are used verbatim and mappings become ``key: value;`` pairs. Other
    payloads are left to the rendered content.
    """

    if isinstance(style, str):
        return style or None
    if isinstance(style, Mapping) and style:
        return " ".join(f"{key}: {value};" for key, value in style.items())
    return None


__all__ = [
    "ROW_HEIGHT",
    "SPACING_LG",
    "SPACING_MD",
    "SPACING_SM",
    "SPACING_XS",
    "TOKENS",
    "ThemeTokens",
    "catalog_stylesheet",
    "wrapper_stylesheet",
]
