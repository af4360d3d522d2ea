from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Callable, Sequence

from component_viewer.config.settings import DEFAULT_DEBOUNCE_MS
from component_viewer.utils import get_logger

from .scheduling import Cancel, Scheduler


logger = get_logger(__name__)

ChangeListener = Callable[[Sequence[str]], None]


class NotifierState(StrEnum):
    IDLE = "idle"
    PENDING = "pending"


@dataclass(slots=True)
class _Batch:
    keys: dict[str, None] = field(default_factory=dict)
    cancel: Cancel | None = None


class ChangeNotifier:
    """Trailing-edge debounce of registry changes.

    Keys enqueued while a batch is pending are merged into it and push the
    deadline back by the quiescence window. When the timer fires every
    subscribed listener receives the batch once, in first-seen order.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        *,
        window: float = DEFAULT_DEBOUNCE_MS / 1000,
    ) -> None:
        self._scheduler = scheduler
        self._window = window
        self._listeners: list[ChangeListener] = []
        self._batch: _Batch | None = None

    # ------------------------------------------------------------------ State

    @property
    def state(self) -> NotifierState:
        return NotifierState.IDLE if self._batch is None else NotifierState.PENDING

    @property
    def window(self) -> float:
        return self._window

    def set_window(self, window: float) -> None:
        self._window = max(window, 0.0)

    @property
    def subscriber_count(self) -> int:
        return len(self._listeners)

    def pending_keys(self) -> list[str]:
        if self._batch is None:
            return []
        return list(self._batch.keys)

    # ---------------------------------------------------------- Subscriptions

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        if listener in self._listeners:
            logger.debug("Listener already subscribed", listener=repr(listener))
        else:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            self.unsubscribe(listener)

        return unsubscribe

    def unsubscribe(self, listener: ChangeListener) -> None:
        try:
            self._listeners.remove(listener)
        except ValueError:
            logger.debug("Unsubscribe ignored for unknown listener", listener=repr(listener))

    # --------------------------------------------------------------- Batching

    def enqueue(self, key: str) -> None:
        batch = self._batch
        if batch is None:
            batch = self._batch = _Batch()
        batch.keys.setdefault(key, None)
        if batch.cancel is not None:
            batch.cancel()
        batch.cancel = self._scheduler.call_later(self._window, self._fire)

    def flush(self) -> None:
        """Deliver the pending batch immediately, if any."""

        batch = self._batch
        if batch is None:
            return
        if batch.cancel is not None:
            batch.cancel()
        self._fire()

    def _fire(self) -> None:
        batch, self._batch = self._batch, None
        if batch is None or not batch.keys:
            return
        keys = tuple(batch.keys)
        logger.debug("Delivering registry changes", count=len(keys))
        for listener in list(self._listeners):
            try:
                listener(keys)
            except Exception:  # noqa: BLE001 - listeners must not break delivery
                logger.exception("Registry change listener failed", keys=list(keys))


__all__ = ["ChangeListener", "ChangeNotifier", "NotifierState"]
