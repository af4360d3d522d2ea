"""PySide6 widgets for browsing the catalog."""

from .item_view import ItemView
from .searchable_list import CatalogRow, SearchableList
from .viewer import ComponentViewer

__all__ = ["CatalogRow", "ComponentViewer", "ItemView", "SearchableList"]
