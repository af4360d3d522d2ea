from __future__ import annotations

from typing import Callable, Protocol

from PySide6.QtCore import QCoreApplication

from component_viewer.utils import get_logger
from component_viewer.utils.asyncio import call_later, qt_call_later


logger = get_logger(__name__)

Cancel = Callable[[], None]


class Scheduler(Protocol):
    """Single-timer abstraction used by the change notifier."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> Cancel: ...


def _noop() -> None:
    return None


class QtScheduler:
    """Schedule callbacks on the running Qt event loop.

    Registrations commonly run at import time, before a ``QApplication``
    exists. Those timers are skipped; the batch stays pending and is delivered
    by the next write made once the application is up.
    """

    def call_later(self, delay: float, callback: Callable[[], None]) -> Cancel:
        if QCoreApplication.instance() is None:
            logger.debug("No Qt application yet; deferring change delivery")
            return _noop
        return qt_call_later(delay, callback)


class AsyncioScheduler:
    """Schedule callbacks on the current asyncio loop (qasync in the app)."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> Cancel:
        return call_later(delay, callback)


__all__ = ["AsyncioScheduler", "Cancel", "QtScheduler", "Scheduler"]
