"""Fan hardware model, control messages and temperature-to-speed mapping."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import IntEnum

logger = logging.getLogger(__name__)

MAX_FAN_NUM = 20
MAX_MODULE_NUM = MAX_FAN_NUM
OVERHEAT_TEMP = 75

SERVER_QUEUE_NAME = "/fan-control-server"
CLIENT_QUEUE_NAME_PREFIX = "/fan-control-client"

# Temperature band mapped linearly onto a 0-100 % duty cycle.
_IDLE_TEMP = 20
_FULL_SPEED_TEMP = 70
_MAX_DUTY = 100

# PWM counts per percent of duty cycle; the register is 16 bits wide.
_PWM_STEP = 0xFFFF // _MAX_DUTY
_PWM_MASK = 0xFFFF


class MessageType(IntEnum):
    """Kinds of message exchanged between modules and the controller."""

    NORMAL = 0
    DETACH = 1
    ATTACH = 2
    URGENT = 3
    QUERY = 4


@dataclass(frozen=True)
class Message:
    """A temperature report or control message from the process ``pid``."""

    pid: int
    temperature: float = 0.0
    type: MessageType = MessageType.NORMAL


@dataclass(eq=False)
class FanHardware:
    """A fan driven through a PWM write register and a speed read register."""

    vendor: str
    model: str
    write_register: int
    read_register: int
    _pwm_count: int = field(default=0, init=False, repr=False)

    def set_speed(self, duty_cycle: int) -> int:
        """Program the fan for ``duty_cycle`` percent; return the PWM count written."""
        if duty_cycle < 0:
            raise ValueError(f"duty cycle must be non-negative, got {duty_cycle}")
        value = (int(duty_cycle) * _PWM_STEP) & _PWM_MASK
        logger.debug(
            "fan %s: write PWM count %d to register %#x", self.model, value, self.write_register
        )
        self._pwm_count = value
        return value

    def read_speed(self) -> int:
        """Return the PWM count currently programmed into the fan."""
        logger.debug("fan %s: read register %#x", self.model, self.read_register)
        return self._pwm_count


_FAN_MODELS = (
    ("0xa1", 0xFFFF8000, 0xFFFF4000),
    ("0xb2", 0xFFFFA000, 0xFFFF2000),
    ("0xc3", 0xFFFFE000, 0xFFFF6000),
    ("0xd4", 0xFFFF8020, 0xFFFF4020),
    ("0xe5", 0xFFFF8040, 0xFFFF1000),
)


def default_fans() -> list[FanHardware]:
    """Return the standard set of ``MAX_FAN_NUM`` fans, two of each model, repeating."""
    fans: list[FanHardware] = []
    while len(fans) < MAX_FAN_NUM:
        for model, write_register, read_register in _FAN_MODELS:
            for _ in range(2):
                fans.append(FanHardware("General_vendor", model, write_register, read_register))
    return fans[:MAX_FAN_NUM]


def is_number(text: str) -> bool:
    """Return whether every character of ``text`` is an ASCII digit."""
    return all(char in "0123456789" for char in text)


def temperature_to_duty(temperature: float) -> int:
    """Map a temperature to a fan duty cycle in percent.

    At or below 20 degrees the fan is off, at or above 70 it runs at 100 %,
    and in between the duty cycle rises by two percent per degree.
    """
    if temperature <= _IDLE_TEMP:
        return 0
    if temperature >= _FULL_SPEED_TEMP:
        return _MAX_DUTY
    return int((temperature - _IDLE_TEMP) * 2.0)