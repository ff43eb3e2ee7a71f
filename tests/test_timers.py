import pytest

from dsakit.timers import (
    CallbackResult,
    Timer,
    TimerList,
    TimerPoolExhausted,
    TimerType,
)


def _arm(timers, fire, callback, user_data=None, kind=TimerType.RELATIVE):
    timer = timers.allocate()
    timers.configure(timer, kind, fire, callback, user_data)
    timers.arm(timer)
    return timer


def test_pool_exhaustion():
    timers = TimerList(2)
    timers.allocate()
    timers.allocate()
    with pytest.raises(TimerPoolExhausted):
        timers.allocate()


def test_active_sorted_by_fire():
    timers = TimerList()
    for fire in (7, 3, 9, 1, 5):
        _arm(timers, fire, lambda data: CallbackResult.FREE_TIMER)
    fires = [t.fire for t in timers.active()]
    assert fires == sorted(fires)


def test_equal_fire_keeps_insertion_order():
    timers = TimerList()
    first = _arm(timers, 4, lambda data: CallbackResult.FREE_TIMER)
    second = _arm(timers, 4, lambda data: CallbackResult.FREE_TIMER)
    assert timers.active() == [first, second]


def test_relative_fire_counts_from_current_tick():
    timers = TimerList()
    timers.tick()
    timers.tick()
    relative = _arm(timers, 5, lambda data: None)
    absolute = _arm(timers, 5, lambda data: None, kind=TimerType.ABSOLUTE)
    assert relative.fire == timers.tick_count + 5
    assert absolute.fire == 5


def test_invalid_timer_type():
    timers = TimerList()
    with pytest.raises(ValueError):
        timers.configure(timers.allocate(), TimerType.INVALID, 1, lambda d: None)


def test_timers_fire_in_order_with_user_data():
    timers = TimerList()
    seen = []

    def record(data):
        seen.append(data)
        return CallbackResult.FREE_TIMER

    _arm(timers, 3, record, "c")
    _arm(timers, 1, record, "a")
    _arm(timers, 2, record, "b")
    for _ in range(3):
        timers.tick()
    assert seen == ["a", "b", "c"]
    assert timers.active() == []


def test_timer_fires_exactly_when_due():
    timers = TimerList()
    timer = _arm(timers, 3, lambda data: CallbackResult.FREE_TIMER)
    assert timers.tick() == []
    assert timers.tick() == []
    assert timers.tick() == [timer]


def test_free_timer_result_returns_timer_to_pool():
    timers = TimerList(3)
    _arm(timers, 1, lambda data: CallbackResult.FREE_TIMER)
    _arm(timers, 1, lambda data: CallbackResult.NORMAL)
    before = timers.free_count
    fired = timers.tick()
    assert len(fired) == 2
    assert timers.free_count == before + 1


def test_disarm_removes_timer():
    timers = TimerList()
    timer = _arm(timers, 2, lambda data: CallbackResult.FREE_TIMER)
    timers.disarm(timer)
    assert timers.active() == []
    assert timers.tick() == []
    assert timers.tick() == []
    with pytest.raises(ValueError):
        timers.disarm(timer)


def test_release_makes_timer_allocatable_again():
    timers = TimerList(1)
    timer = timers.allocate()
    timers.release(timer)
    assert timers.allocate() is timer


def test_timer_default_fields():
    timer = Timer()
    timers = TimerList()
    timers.configure(timer, TimerType.ABSOLUTE, 2, lambda d: d, "payload")
    assert (timer.fire, timer.user_data) == (2, "payload")