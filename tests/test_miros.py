import pytest

from dsakit.miros import OSThread, Scheduler


def _setup():
    sched = Scheduler()
    blinky1 = OSThread(name="blinky1")
    blinky2 = OSThread(name="blinky2")
    sched.start(blinky1, 5)
    sched.start(blinky2, 2)
    return sched, blinky1, blinky2


def test_idle_runs_when_nothing_ready():
    sched = Scheduler()
    assert sched.schedule() is sched.idle_thread
    assert sched.ready_set == 0


def test_start_sets_ready_bit():
    sched, blinky1, blinky2 = _setup()
    assert sched.ready_set == (1 << 4) | (1 << 1)
    assert blinky1.prio == 5 and blinky2.prio == 2


def test_highest_priority_runs_first():
    sched, blinky1, _ = _setup()
    assert sched.schedule() is blinky1
    assert sched.current is blinky1


def test_delay_switches_to_lower_priority():
    sched, blinky1, blinky2 = _setup()
    sched.schedule()
    assert sched.delay(1) is blinky2
    assert sched.delayed_set == 1 << 4
    assert blinky1.timeout == 1


def test_tick_makes_delayed_thread_ready_again():
    sched, blinky1, _ = _setup()
    sched.schedule()
    sched.delay(1)
    sched.tick()
    assert sched.delayed_set == 0
    assert sched.schedule() is blinky1


def test_longer_delay_needs_more_ticks():
    sched, blinky1, blinky2 = _setup()
    sched.schedule()
    sched.delay(3)
    sched.tick()
    sched.tick()
    assert sched.schedule() is blinky2
    sched.tick()
    assert sched.schedule() is blinky1


def test_all_delayed_runs_idle():
    sched, _, _ = _setup()
    sched.schedule()
    sched.delay(2)
    assert sched.delay(50) is sched.idle_thread
    assert sched.ready_set == 0


def test_duplicate_priority_rejected():
    sched, _, _ = _setup()
    with pytest.raises(ValueError):
        sched.start(OSThread(), 5)


def test_priority_out_of_range_rejected():
    sched = Scheduler()
    with pytest.raises(ValueError):
        sched.start(OSThread(), 33)


def test_delay_from_idle_rejected():
    sched = Scheduler()
    sched.schedule()
    with pytest.raises(RuntimeError):
        sched.delay(1)


def test_delay_requires_positive_ticks():
    sched, _, _ = _setup()
    sched.schedule()
    with pytest.raises(ValueError):
        sched.delay(0)


def test_top_priority_slot():
    sched = Scheduler()
    top = OSThread(name="top")
    sched.start(top, 32)
    assert sched.schedule() is top