"""A small ATM state machine driven by numbered events."""

from __future__ import annotations

import argparse
import sys
from enum import IntEnum


class State(IntEnum):
    """States the machine moves through during one withdrawal."""

    IDLE = 0
    CARD_INSERTED = 1
    PIN_ENTERED = 2
    OPTION_SELECTED = 3
    AMOUNT_ENTERED = 4


class Event(IntEnum):
    """Events that drive the machine forward."""

    CARD_INSERT = 0
    PIN_ENTER = 1
    OPTION_SELECTION = 2
    AMOUNT_ENTER = 3
    AMOUNT_DISPATCH = 4


_TRANSITIONS: dict[State, tuple[Event, State]] = {
    State.IDLE: (Event.CARD_INSERT, State.CARD_INSERTED),
    State.CARD_INSERTED: (Event.PIN_ENTER, State.PIN_ENTERED),
    State.PIN_ENTERED: (Event.OPTION_SELECTION, State.OPTION_SELECTED),
    State.OPTION_SELECTED: (Event.AMOUNT_ENTER, State.AMOUNT_ENTERED),
    State.AMOUNT_ENTERED: (Event.AMOUNT_DISPATCH, State.IDLE),
}


def next_state(state: State, event: Event) -> State:
    """Return the state reached from ``state`` on ``event``.

    Each state accepts exactly one event; any other event leaves it unchanged.
    """
    state = State(state)
    expected, target = _TRANSITIONS[state]
    return target if Event(event) is expected else state


class AtmMachine:
    """Tracks the current state and applies events to it."""

    def __init__(self) -> None:
        self.state = State.IDLE

    def handle(self, event: Event) -> State:
        """Apply ``event`` and return the resulting state."""
        self.state = next_state(self.state, event)
        return self.state

    def __repr__(self) -> str:
        return f"AtmMachine(state={self.state.name})"


_PROMPT = "please enter event\n" + "\n".join(
    f"{event.value} = {event.name}" for event in Event
)


def main(argv: list[str] | None = None) -> int:
    """Read event numbers from standard input, one per line, until end of input."""
    parser = argparse.ArgumentParser(
        prog="atm", description="Drive the ATM state machine from standard input."
    )
    parser.parse_args(argv)
    machine = AtmMachine()
    while True:
        print(f"curState: {machine.state.value}")
        print(_PROMPT)
        line = sys.stdin.readline()
        if not line:
            return 0
        text = line.strip()
        if not text:
            continue
        try:
            event = Event(int(text))
        except ValueError:
            print("invalid input")
            continue
        machine.handle(event)