from __future__ import annotations

import asyncio
from typing import Callable

from PySide6.QtCore import QCoreApplication, QTimer


def call_later(delay: float, func: Callable[[], None]) -> Callable[[], None]:
    loop = asyncio.get_event_loop()
    handler = loop.call_later(delay, func)
    return handler.cancel


def qt_call_later(delay: float, func: Callable[[], None]) -> Callable[[], None]:
    """Schedule ``func`` on the Qt event loop after ``delay`` seconds."""

    # Parented to the application so dropping the handle never deletes the
    # timer mid-emission; it is released with deleteLater once done.
    timer = QTimer(QCoreApplication.instance())
    timer.setSingleShot(True)
    done = False

    def fire() -> None:
        nonlocal done
        done = True
        timer.deleteLater()
        func()

    def cancel() -> None:
        nonlocal done
        if done:
            return
        done = True
        timer.stop()
        timer.deleteLater()

    timer.timeout.connect(fire)
    timer.start(max(int(delay * 1000), 0))
    return cancel


__all__ = ["call_later", "qt_call_later"]
