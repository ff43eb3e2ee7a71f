import pytest

from dsakit.fan import (
    MAX_MODULE_NUM,
    FanHardware,
    Message,
    MessageType,
    default_fans,
    temperature_to_duty,
)
from dsakit.fan_server import FanGroup, Module, parse_module_count


def test_parse_module_count_default():
    assert parse_module_count([]) == MAX_MODULE_NUM


def test_parse_module_count_value():
    assert parse_module_count(["5"]) == 5


@pytest.mark.parametrize("argv", [["abc"], ["21"], ["1", "2"], ["0"], [""], ["-3"]])
def test_parse_module_count_rejects(argv):
    with pytest.raises(ValueError):
        parse_module_count(argv)


def test_too_many_modules_for_fans():
    with pytest.raises(ValueError):
        FanGroup(3, default_fans()[:2])


def test_normal_message_attaches_by_pid():
    group = FanGroup(4)
    module = group.handle_message(Message(pid=6, temperature=37.9))
    assert module is group.modules[6 % 4]
    assert module.module_id == 6 % 4
    assert module.current_temp == int(37.9)
    assert group.active_count == 1


def test_repeated_reports_count_once():
    group = FanGroup(4)
    group.handle_message(Message(pid=1, temperature=30))
    group.handle_message(Message(pid=1, temperature=40))
    assert group.active_count == 1
    assert group.modules[1].current_temp == 40


def test_attach_twice_counts_once():
    group = FanGroup(4)
    group.handle_message(Message(pid=2, type=MessageType.ATTACH))
    group.handle_message(Message(pid=2, type=MessageType.ATTACH))
    assert group.active_count == 1
    assert group.active_modules() == [group.modules[2]]


def test_detach_resets_module():
    group = FanGroup(4)
    group.handle_message(Message(pid=3, temperature=50))
    module = group.handle_message(Message(pid=3, type=MessageType.DETACH))
    assert module.module_id is None
    assert module.current_temp == 0
    assert group.active_count == 0
    assert group.active_modules() == []


def test_detach_never_goes_negative():
    group = FanGroup(4)
    group.handle_message(Message(pid=0, type=MessageType.DETACH))
    assert group.active_count == 0


def test_urgent_sets_speed_immediately():
    group = FanGroup(4)
    module = group.handle_message(Message(pid=1, temperature=65, type=MessageType.URGENT))
    reference = FanHardware("General_vendor", "0xa1", 0, 0)
    assert module.read_speed() == reference.set_speed(temperature_to_duty(65))
    assert group.active_count == 1


def test_query_message_is_ignored():
    group = FanGroup(4)
    group.handle_message(Message(pid=1, type=MessageType.QUERY))
    assert group.active_count == 0


def test_update_speed_follows_hottest_module():
    group = FanGroup(4)
    group.handle_message(Message(pid=0, temperature=30))
    group.handle_message(Message(pid=1, temperature=60))
    duty = group.update_speed()
    assert duty == temperature_to_duty(60)
    assert group.max_temp == 60
    assert group.modules[0].read_speed() == group.modules[1].read_speed()
    assert group.modules[0].read_speed() > 0
    assert group.modules[2].read_speed() == 0


def test_timer_without_active_modules():
    group = FanGroup(4)
    assert group.timer_expired() == {}
    assert all(module.read_speed() == 0 for module in group.modules)


def test_timer_queries_active_modules():
    group = FanGroup(4)
    group.handle_message(Message(pid=1, temperature=45))
    group.handle_message(Message(pid=3, temperature=25))
    queries = group.timer_expired()
    assert sorted(queries) == [1, 3]
    assert all(message.type is MessageType.QUERY for message in queries.values())
    assert group.modules[3].read_speed() == group.modules[1].read_speed()


def test_summary_reports_state():
    group = FanGroup(3)
    group.handle_message(Message(pid=0, temperature=22))
    group.handle_message(Message(pid=2, temperature=33))
    group.update_speed()
    text = group.summary()
    assert "Active module number: 2" in text
    assert "Max temperature: 33" in text
    assert "[22 0 33]" in text


def test_module_set_speed_applies_to_all_fans():
    fans = default_fans()[:2]
    module = Module(fans)
    module.set_speed(70)
    assert fans[0].read_speed() == fans[1].read_speed() == module.read_speed()
    assert module.read_speed() > 0