from __future__ import annotations

from component_viewer.registry import ChangeNotifier, NotifierState
from tests.stubs import WINDOW, ManualScheduler, RecordingListener


def test_burst_is_delivered_once_after_quiet_period(
    notifier: ChangeNotifier, scheduler: ManualScheduler
) -> None:
    listener = RecordingListener()
    notifier.subscribe(listener)

    for key in ["a", "b", "a", "c", "b"]:
        notifier.enqueue(key)
        scheduler.advance(WINDOW / 2)

    assert listener.batches == []
    assert notifier.state is NotifierState.PENDING

    scheduler.advance(WINDOW)

    assert listener.batches == [("a", "b", "c")]
    assert notifier.state is NotifierState.IDLE


def test_each_write_pushes_the_deadline_back(
    notifier: ChangeNotifier, scheduler: ManualScheduler
) -> None:
    listener = RecordingListener()
    notifier.subscribe(listener)

    notifier.enqueue("a")
    scheduler.advance(0.125)
    notifier.enqueue("b")
    scheduler.advance(0.125)

    assert listener.batches == []
    assert scheduler.active == 1

    scheduler.advance(0.125)

    assert listener.batches == [("a", "b")]


def test_separate_bursts_produce_separate_batches(
    notifier: ChangeNotifier, scheduler: ManualScheduler
) -> None:
    listener = RecordingListener()
    notifier.subscribe(listener)

    notifier.enqueue("a")
    scheduler.advance(WINDOW)
    notifier.enqueue("b")
    scheduler.advance(WINDOW)

    assert listener.batches == [("a",), ("b",)]


def test_every_listener_gets_the_batch_even_when_one_fails(
    notifier: ChangeNotifier, scheduler: ManualScheduler
) -> None:
    first = RecordingListener()
    last = RecordingListener()

    def broken(keys) -> None:  # noqa: ANN001
        raise RuntimeError("listener exploded")

    notifier.subscribe(first)
    notifier.subscribe(broken)
    notifier.subscribe(last)

    notifier.enqueue("a")
    scheduler.advance(WINDOW)
    notifier.enqueue("b")
    scheduler.advance(WINDOW)

    assert first.batches == [("a",), ("b",)]
    assert last.batches == [("a",), ("b",)]
    assert notifier.state is NotifierState.IDLE


def test_duplicate_subscribe_and_unknown_unsubscribe_are_noops(
    notifier: ChangeNotifier, scheduler: ManualScheduler
) -> None:
    listener = RecordingListener()
    notifier.subscribe(listener)
    notifier.subscribe(listener)
    notifier.unsubscribe(RecordingListener())

    assert notifier.subscriber_count == 1

    notifier.enqueue("a")
    scheduler.advance(WINDOW)

    assert listener.batches == [("a",)]


def test_unsubscribed_listener_is_not_called(
    notifier: ChangeNotifier, scheduler: ManualScheduler
) -> None:
    kept = RecordingListener()
    dropped = RecordingListener()
    notifier.subscribe(kept)
    unsubscribe = notifier.subscribe(dropped)

    notifier.enqueue("a")
    unsubscribe()
    scheduler.advance(WINDOW)

    assert kept.batches == [("a",)]
    assert dropped.batches == []
    assert notifier.subscriber_count == 1


def test_flush_delivers_immediately_and_cancels_timer(
    notifier: ChangeNotifier, scheduler: ManualScheduler
) -> None:
    listener = RecordingListener()
    notifier.subscribe(listener)
    notifier.enqueue("a")
    notifier.enqueue("b")

    assert notifier.pending_keys() == ["a", "b"]

    notifier.flush()

    assert listener.batches == [("a", "b")]
    assert notifier.pending_keys() == []
    assert scheduler.active == 0

    scheduler.advance(WINDOW)
    notifier.flush()
    assert listener.batches == [("a", "b")]


def test_listener_writes_start_a_new_batch(
    notifier: ChangeNotifier, scheduler: ManualScheduler
) -> None:
    seen = RecordingListener()

    def reentrant(keys) -> None:  # noqa: ANN001
        if "a" in keys:
            notifier.enqueue("derived")

    notifier.subscribe(reentrant)
    notifier.subscribe(seen)

    notifier.enqueue("a")
    scheduler.advance(WINDOW)
    assert seen.batches == [("a",)]

    scheduler.advance(WINDOW)
    assert seen.batches == [("a",), ("derived",)]


def test_window_is_adjustable() -> None:
    scheduler = ManualScheduler()
    notifier = ChangeNotifier(scheduler, window=1.0)
    listener = RecordingListener()
    notifier.subscribe(listener)

    notifier.set_window(0.5)
    notifier.enqueue("a")
    scheduler.advance(0.5)

    assert notifier.window == 0.5
    assert listener.batches == [("a",)]


class _Counter:
    def __init__(self) -> None:
        self.calls = 0

    def on_change(self, keys) -> None:  # noqa: ANN001
        self.calls += 1


def test_bound_methods_subscribe_once_and_unsubscribe_by_equality(
    notifier: ChangeNotifier, scheduler: ManualScheduler
) -> None:
    counter = _Counter()
    notifier.subscribe(counter.on_change)
    notifier.subscribe(counter.on_change)

    notifier.enqueue("a")
    scheduler.advance(WINDOW)

    assert counter.calls == 1
    assert notifier.subscriber_count == 1

    notifier.unsubscribe(counter.on_change)
    notifier.enqueue("b")
    scheduler.advance(WINDOW)

    assert counter.calls == 1
    assert notifier.subscriber_count == 0
