import io

import pytest

from dsakit.atm import AtmMachine, Event, State, main, next_state


@pytest.mark.parametrize(
    "state, event, expected",
    [
        (State.IDLE, Event.CARD_INSERT, State.CARD_INSERTED),
        (State.CARD_INSERTED, Event.PIN_ENTER, State.PIN_ENTERED),
        (State.PIN_ENTERED, Event.OPTION_SELECTION, State.OPTION_SELECTED),
        (State.OPTION_SELECTED, Event.AMOUNT_ENTER, State.AMOUNT_ENTERED),
        (State.AMOUNT_ENTERED, Event.AMOUNT_DISPATCH, State.IDLE),
    ],
)
def test_accepted_transitions(state, event, expected):
    assert next_state(state, event) is expected


@pytest.mark.parametrize("state", list(State))
def test_unexpected_events_leave_state_unchanged(state):
    accepted = [e for e in Event if next_state(state, e) is not state]
    assert len(accepted) == 1
    for event in Event:
        if event not in accepted:
            assert next_state(state, event) is state


def test_full_withdrawal_returns_to_idle():
    machine = AtmMachine()
    visited = [machine.handle(event) for event in Event]
    assert visited[-1] is State.IDLE
    assert visited[:-1] == [
        State.CARD_INSERTED,
        State.PIN_ENTERED,
        State.OPTION_SELECTED,
        State.AMOUNT_ENTERED,
    ]


def test_out_of_order_event_ignored():
    machine = AtmMachine()
    assert machine.handle(Event.PIN_ENTER) is State.IDLE
    assert machine.handle(Event.CARD_INSERT) is State.CARD_INSERTED


def test_invalid_event_number_raises():
    with pytest.raises(ValueError):
        next_state(State.IDLE, 9)


def test_main_reads_events(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0\n1\nx\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    states = [line for line in out.splitlines() if line.startswith("curState:")]
    assert states == ["curState: 0", "curState: 1", "curState: 2", "curState: 2"]
    assert "invalid input" in out