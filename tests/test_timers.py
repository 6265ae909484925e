import pytest

from timers import Scheduler


def test_callback_runs_once_when_due():
    scheduler = Scheduler()
    calls = []
    scheduler.call_later(0.5, lambda: calls.append('fired'))
    assert scheduler.tick(0.25) == 0
    assert scheduler.tick(0.25) == 1
    assert scheduler.tick(1.0) == 0
    assert calls == ['fired']


def test_due_callbacks_run_in_due_order():
    scheduler = Scheduler()
    calls = []
    scheduler.call_later(0.3, lambda: calls.append('late'))
    scheduler.call_later(0.1, lambda: calls.append('early'))
    scheduler.call_later(0.1, lambda: calls.append('early-second'))
    scheduler.tick(1.0)
    assert calls == ['early', 'early-second', 'late']


def test_cancelled_timer_never_fires():
    scheduler = Scheduler()
    calls = []
    timer = scheduler.call_later(0.1, lambda: calls.append(1))
    timer.cancel()
    assert scheduler.pending == 0
    scheduler.tick(1.0)
    assert calls == []


def test_timers_scheduled_from_a_callback_wait_for_the_next_tick():
    scheduler = Scheduler()
    calls = []

    def chain():
        calls.append(scheduler.now)
        scheduler.call_later(0, chain)

    scheduler.call_later(0, chain)
    scheduler.tick(0.1)
    scheduler.tick(0.1)
    assert len(calls) == 2


def test_clear_cancels_everything_pending():
    scheduler = Scheduler()
    calls = []
    timers = [scheduler.call_later(delay, lambda: calls.append(1)) for delay in (0.1, 0.2)]
    assert scheduler.pending == 2
    scheduler.clear()
    assert scheduler.pending == 0
    assert all(timer.cancelled for timer in timers)
    scheduler.tick(1.0)
    assert calls == []


def test_negative_delay_fires_on_next_tick():
    scheduler = Scheduler()
    calls = []
    scheduler.call_later(-5, lambda: calls.append(1))
    scheduler.tick(0)
    assert calls == [1]


def test_raising_callback_keeps_the_rest_of_the_batch_queued():
    scheduler = Scheduler()
    calls = []

    def boom():
        raise RuntimeError('boom')

    scheduler.call_later(0.1, boom)
    scheduler.call_later(0.2, lambda: calls.append('late'))
    with pytest.raises(RuntimeError):
        scheduler.tick(1.0)
    assert scheduler.pending == 1

    assert scheduler.tick(0) == 1
    assert calls == ['late']
