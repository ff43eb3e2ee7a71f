import pytest

from dsakit.timer_wheel import GRANULARITY, DeadlineTooFarError, TimingWheel


def test_deadlines_in_same_slot_fire_together_in_order():
    wheel = TimingWheel(GRANULARITY)
    calls = []
    deadlines = [4 * GRANULARITY, int(4.25 * GRANULARITY), int(4.9 * GRANULARITY)]
    for deadline in deadlines:
        wheel.install(deadline, lambda d=deadline: calls.append(d))
    for _ in range(4):
        assert wheel.tick() == []
    assert wheel.tick() == deadlines
    assert calls == deadlines
    assert len(wheel) == 0


def test_deadline_beyond_wheel_rejected():
    wheel = TimingWheel(GRANULARITY)
    with pytest.raises(DeadlineTooFarError):
        wheel.install(12 * GRANULARITY, lambda: None)
    with pytest.raises(DeadlineTooFarError):
        wheel.install(wheel.slots * GRANULARITY, lambda: None)


def test_negative_deadline_rejected():
    wheel = TimingWheel(GRANULARITY)
    with pytest.raises(ValueError):
        wheel.install(-1, lambda: None)


def test_install_wraps_around():
    wheel = TimingWheel(GRANULARITY)
    for _ in range(8):
        wheel.tick()
    slot = wheel.install(4 * GRANULARITY, lambda: None)
    assert slot == (8 + 4) % wheel.slots
    fired_at = None
    for step in range(wheel.slots):
        if wheel.tick():
            fired_at = step
            break
    assert fired_at == 4


def test_current_slot_cycles():
    wheel = TimingWheel(1, slots=3)
    positions = []
    for _ in range(4):
        wheel.tick()
        positions.append(wheel.current_slot)
    assert positions == [1, 2, 0, 1]


def test_callback_installed_once_fires_once():
    wheel = TimingWheel(1, slots=5)
    calls = []
    wheel.install(2, lambda: calls.append("x"))
    for _ in range(15):
        wheel.tick()
    assert calls == ["x"]


def test_invalid_construction():
    with pytest.raises(ValueError):
        TimingWheel(0)
    with pytest.raises(ValueError):
        TimingWheel(1, slots=0)