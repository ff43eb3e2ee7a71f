"""The fan controller: tracks attached modules and drives their fans."""

from __future__ import annotations

import logging
import os
import threading
from dataclasses import dataclass, field
from typing import Sequence

from dsakit.fan import (
    MAX_MODULE_NUM,
    FanHardware,
    Message,
    MessageType,
    default_fans,
    is_number,
    temperature_to_duty,
)

logger = logging.getLogger(__name__)

TIMER_PERIOD = 5


@dataclass(eq=False)
class Module:
    """A module slot; ``module_id`` is None while no module is attached."""

    fans: list[FanHardware]
    module_id: int | None = None
    current_temp: int = 0
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    @property
    def attached(self) -> bool:
        """Whether a module is currently attached to this slot."""
        return self.module_id is not None

    def set_speed(self, duty_cycle: int) -> None:
        """Set every fan of the module to ``duty_cycle`` percent."""
        for fan in self.fans:
            with self._lock:
                fan.set_speed(duty_cycle)

    def read_speed(self) -> int:
        """Return the speed read from the module's fans (the last one read)."""
        value = 0
        for fan in self.fans:
            with self._lock:
                value = fan.read_speed()
        return value


class FanGroup:
    """A group of module slots whose fans share one speed, set by the hottest."""

    def __init__(
        self, module_count: int = MAX_MODULE_NUM, fans: Sequence[FanHardware] | None = None
    ) -> None:
        fans = list(default_fans() if fans is None else fans)
        if module_count < 1:
            raise ValueError(f"module_count must be positive, got {module_count}")
        if module_count > len(fans):
            raise ValueError(f"at most {len(fans)} modules allowed, got {module_count}")
        self.module_count = module_count
        self.active_count = 0
        self.max_temp = 0
        # One fan per module: fan i belongs to module i.
        self.modules = [Module([fans[i]]) for i in range(module_count)]

    def _attach(self, module: Module, mid: int) -> None:
        if not module.attached:
            module.module_id = mid
            self.active_count += 1

    def handle_message(self, message: Message) -> Module:
        """Apply a message from a module and return the module slot it concerns."""
        mid = message.pid % self.module_count
        module = self.modules[mid]
        kind = MessageType(message.type)
        logger.debug("temp val %f from module %d", message.temperature, mid)
        if kind is MessageType.NORMAL:
            self._attach(module, mid)
            module.current_temp = int(message.temperature)
        elif kind is MessageType.DETACH:
            logger.info("detach from module %d", mid)
            self.active_count = max(self.active_count - 1, 0)
            module.module_id = None
            module.current_temp = 0
        elif kind is MessageType.ATTACH:
            if module.attached:
                logger.warning("module %d already attached; ignoring attach request", mid)
            else:
                logger.info("module %d attached", mid)
                self._attach(module, mid)
        elif kind is MessageType.URGENT:
            logger.warning("urgent message from module %d; adjusting speed now", mid)
            self._attach(module, mid)
            module.current_temp = int(message.temperature)
            module.set_speed(temperature_to_duty(module.current_temp))
        return module

    def active_modules(self) -> list[Module]:
        """Return the slots that have a module attached."""
        return [module for module in self.modules if module.attached]

    def update_speed(self) -> int:
        """Set every attached fan from the hottest attached module; return the duty."""
        active = self.active_modules()
        self.max_temp = max((module.current_temp for module in active), default=0)
        duty = temperature_to_duty(self.max_temp)
        for module in active:
            module.set_speed(duty)
        logger.debug("%s", self.summary())
        return duty

    def timer_expired(self) -> dict[int, Message]:
        """Update fan speeds and return a temperature query for each attached module.

        Does nothing and returns no queries while no module is active.
        """
        if self.active_count == 0:
            logger.debug("no active module")
            return {}
        self.update_speed()
        server_pid = os.getpid()
        return {
            module.module_id: Message(pid=server_pid, type=MessageType.QUERY)
            for module in self.active_modules()
            if module.module_id is not None
        }

    def summary(self) -> str:
        """Return a printable report of the group's state."""
        temps = " ".join(str(module.current_temp) for module in self.modules)
        rule = "======================="
        return "\n".join(
            [
                rule,
                f"Active module number: {self.active_count}",
                f"Max temperature: {self.max_temp}",
                f"Temperature by module: [{temps}]",
                f"Fan speed duty cycle: {temperature_to_duty(self.max_temp)}",
                rule,
            ]
        )

    def __repr__(self) -> str:
        return f"FanGroup(modules={self.module_count}, active={self.active_count})"


def parse_module_count(argv: Sequence[str]) -> int:
    """Return the module count from the command arguments (program name excluded).

    With no argument the maximum is used. Raise ValueError for a bad argument.
    """
    if len(argv) > 1:
        raise ValueError("incorrect input arguments")
    if not argv:
        return MAX_MODULE_NUM
    text = argv[0]
    if not text or not is_number(text):
        raise ValueError("incorrect input arguments; expected a number")
    count = int(text)
    if count > MAX_MODULE_NUM:
        raise ValueError(f"at most {MAX_MODULE_NUM} modules allowed")
    if count < 1:
        raise ValueError("module count must be positive")
    return count