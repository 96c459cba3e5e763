from __future__ import annotations

from hotseq.events.recorder import RecordingObserver
from hotseq.scheduling import VirtualScheduler
from hotseq.sources import UnicastSequenceSource


def test_late_subscriber_gets_full_sequence_on_its_own_clock() -> None:
    scheduler = VirtualScheduler()
    source = UnicastSequenceSource(values=range(1, 6), delay=1.0, scheduler=scheduler)
    first = RecordingObserver("A", clock=lambda: scheduler.now)
    second = RecordingObserver("B", clock=lambda: scheduler.now)

    source.subscribe(first)
    scheduler.call_at(1.5, lambda: source.subscribe(second))
    scheduler.run()

    assert first.values == [1, 2, 3, 4, 5]
    assert second.values == [1, 2, 3, 4, 5]
    assert first.notifications[-1].clock == 5.0
    assert second.notifications[-1].clock == 6.5


def test_each_subscription_has_its_own_timer() -> None:
    scheduler = VirtualScheduler()
    source = UnicastSequenceSource(values=[1, 2, 3], scheduler=scheduler)
    source.subscribe(RecordingObserver("A"))
    source.subscribe(RecordingObserver("B"))

    assert scheduler.pending == 2
    assert source.observer_count == 2


def test_unsubscribe_cancels_only_that_run() -> None:
    scheduler = VirtualScheduler()
    source = UnicastSequenceSource(values=[1, 2, 3], scheduler=scheduler)
    keep = RecordingObserver("keep")
    leave = RecordingObserver("leave")
    source.subscribe(keep)
    sub = source.subscribe(leave)

    scheduler.advance(1.5)
    sub.unsubscribe()
    sub.unsubscribe()
    scheduler.run()

    assert leave.values == [1]
    assert not leave.completed
    assert keep.values == [1, 2, 3]
    assert keep.completed
    assert source.observer_count == 1


def test_finished_run_no_longer_counts_as_active() -> None:
    scheduler = VirtualScheduler()
    source = UnicastSequenceSource(values=[1, 2], scheduler=scheduler)
    obs = RecordingObserver("A")
    sub = source.subscribe(obs)

    scheduler.run()

    assert obs.completed
    assert source.observer_count == 0
    sub.unsubscribe()
    assert source.observer_count == 0
