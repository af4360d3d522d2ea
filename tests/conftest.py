from __future__ import annotations

import os
from collections.abc import Iterator

import pytest
from PySide6.QtWidgets import QApplication

from component_viewer.registry import (
    ChangeNotifier,
    ComponentRegistry,
    set_default_registry,
)
from tests.stubs import WINDOW, ManualScheduler


os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qt_app() -> Iterator[QApplication]:
    """Ensure a QApplication instance exists for UI tests."""

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def notifier(scheduler: ManualScheduler) -> ChangeNotifier:
    return ChangeNotifier(scheduler, window=WINDOW)


@pytest.fixture
def registry(notifier: ChangeNotifier) -> Iterator[ComponentRegistry]:
    """Isolated registry that also stands in as the process default."""

    registry = ComponentRegistry(notifier)
    set_default_registry(registry)
    try:
        yield registry
    finally:
        set_default_registry(None)


@pytest.fixture(autouse=True)
def _reset_default_registry() -> Iterator[None]:
    yield
    set_default_registry(None)

