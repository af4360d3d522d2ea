"""Developer catalog for viewing PySide6 scenes and components in isolation."""

from __future__ import annotations

import asyncio
import sys

from PySide6.QtWidgets import QApplication
from qasync import QEventLoop

from component_viewer.bootstrap import build_context
from component_viewer.config import SettingsManager
from component_viewer.registry import (
    add_component_test,
    add_scene_test,
    add_test_scene,
    default_registry,
    get_test_scenes,
    get_tests,
)
from component_viewer.ui import ComponentViewer
from component_viewer.utils import LoggingOptions, configure_logging, get_logger

__all__ = [
    "ComponentViewer",
    "add_component_test",
    "add_scene_test",
    "add_test_scene",
    "default_registry",
    "get_test_scenes",
    "get_tests",
    "main",
]


def main() -> None:
    settings = SettingsManager().load()
    configure_logging(
        LoggingOptions(level=settings.log_level, debug=settings.log_level == "DEBUG")  # type: ignore[arg-type]
    )
    logger = get_logger(__name__)
    logger.info("Starting component viewer", modules=settings.catalog_modules)

    app = QApplication(sys.argv)
    loop = QEventLoop(app)
    asyncio.set_event_loop(loop)

    context = build_context(settings)
    window = ComponentViewer(
        context.registry,
        controller=context.controller,
        history=context.history,
        reload_callback=context.loader.reload,
    )
    window.setWindowTitle("Component Viewer")
    window.resize(420, 760)
    window.closed.connect(app.quit)
    window.show()

    app.aboutToQuit.connect(loop.stop)

    try:
        with loop:
            loop.run_forever()
    except KeyboardInterrupt:
        logger.info("Viewer interrupted by user")
    finally:
        context.registry.notifier.flush()
