from __future__ import annotations

import importlib
import sys
from dataclasses import dataclass
from pathlib import Path
from types import ModuleType
from typing import Iterable

from PySide6.QtCore import QFileSystemWatcher, QObject

from component_viewer.config import Settings
from component_viewer.registry import ComponentRegistry, default_registry
from component_viewer.services import QSettingsStore, SearchHistory, SelectionController
from component_viewer.utils import get_logger


logger = get_logger(__name__)


class CatalogLoader(QObject):
    """Import catalog modules and re-run them on demand.

    Importing a catalog module executes its registration calls. Reloading
    re-executes them, so edited scenes and components replace their previous
    registrations in place and the registry batches the resulting changes.
    """

    def __init__(
        self,
        modules: Iterable[str],
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._module_names = list(dict.fromkeys(modules))
        self._modules: dict[str, ModuleType] = {}
        self._watcher: QFileSystemWatcher | None = None

    @property
    def module_names(self) -> list[str]:
        return list(self._module_names)

    def loaded_modules(self) -> list[ModuleType]:
        return list(self._modules.values())

    def load(self) -> list[str]:
        """Import every configured module; return the names that loaded."""

        loaded: list[str] = []
        for name in self._module_names:
            try:
                self._modules[name] = importlib.import_module(name)
            except Exception:  # noqa: BLE001 - one broken catalog must not stop others
                logger.exception("Failed to import catalog module", module=name)
                continue
            loaded.append(name)
        logger.info("Catalog modules loaded", count=len(loaded))
        return loaded

    def reload(self) -> list[str]:
        """Re-execute loaded modules, importing any that failed previously."""

        reloaded: list[str] = []
        for name in self._module_names:
            module = self._modules.get(name) or sys.modules.get(name)
            try:
                if module is None:
                    module = importlib.import_module(name)
                else:
                    module = importlib.reload(module)
            except Exception:  # noqa: BLE001 - keep the previous registrations
                logger.exception("Failed to reload catalog module", module=name)
                continue
            self._modules[name] = module
            reloaded.append(name)
        logger.info("Catalog modules reloaded", count=len(reloaded))
        self._refresh_watch_paths()
        return reloaded

    def watch(self) -> QFileSystemWatcher:
        """Reload whenever a loaded module's source file changes."""

        if self._watcher is None:
            self._watcher = QFileSystemWatcher(self)
            self._watcher.fileChanged.connect(self._on_file_changed)
        self._refresh_watch_paths()
        return self._watcher

    def watched_paths(self) -> list[str]:
        if self._watcher is None:
            return []
        return list(self._watcher.files())

    def _source_paths(self) -> list[str]:
        paths: list[str] = []
        for module in self._modules.values():
            source = getattr(module, "__file__", None)
            if source and Path(source).exists():
                paths.append(str(Path(source).resolve()))
        return paths

    def _refresh_watch_paths(self) -> None:
        if self._watcher is None:
            return
        current = set(self._watcher.files())
        missing = [path for path in self._source_paths() if path not in current]
        if missing:
            self._watcher.addPaths(missing)

    def _on_file_changed(self, path: str) -> None:
        logger.info("Catalog source changed", path=path)
        self.reload()


@dataclass(slots=True)
class ViewerContext:
    """Objects shared by the catalog window."""

    registry: ComponentRegistry
    controller: SelectionController
    history: SearchHistory
    loader: CatalogLoader


def build_context(
    settings: Settings,
    *,
    registry: ComponentRegistry | None = None,
    history: SearchHistory | None = None,
) -> ViewerContext:
    """Wire the registry, controller and catalog loader for ``settings``."""

    if registry is None:
        registry = default_registry()
    registry.notifier.set_window(settings.debounce_seconds)

    loader = CatalogLoader(settings.catalog_modules)
    loader.load()
    if settings.watch:
        loader.watch()

    controller = SelectionController(registry)
    logger.debug(
        "Viewer context initialised",
        items=len(registry),
        modules=len(loader.module_names),
    )
    return ViewerContext(
        registry=registry,
        controller=controller,
        history=history or SearchHistory(QSettingsStore()),
        loader=loader,
    )


__all__ = ["CatalogLoader", "ViewerContext", "build_context"]
