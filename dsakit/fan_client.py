"""A fan module client: reports temperatures and answers controller queries."""

from __future__ import annotations

import logging
import random
from typing import Callable, Sequence

from dsakit.fan import (
    CLIENT_QUEUE_NAME_PREFIX,
    MAX_MODULE_NUM,
    Message,
    MessageType,
    is_number,
)

logger = logging.getLogger(__name__)

CLIENT_POLLING_PERIOD_MS = 1000
TEMP_THRESHOLD = 90

# Temperatures are split into bands of this width, one priority per band.
_PRIORITY_BAND = 25
_PRIORITY_LEVELS = 4


def message_priority(temperature: float) -> int:
    """Return the queue priority of a report at ``temperature``.

    Each band of 25 degrees raises the priority by one, over four levels:
    0-24 gives 0, 25-49 gives 1, 50-74 gives 2 and 75-99 gives 3.
    """
    return (int(temperature) // _PRIORITY_BAND) % _PRIORITY_LEVELS


def parse_module_id(argv: Sequence[str]) -> int:
    """Return the module id from the command arguments (program name excluded).

    With no argument the id is 0. Raise ValueError for a bad argument.
    """
    if len(argv) > 1:
        raise ValueError("incorrect input arguments")
    if not argv:
        return 0
    text = argv[0]
    if not text or not is_number(text):
        raise ValueError("incorrect input arguments; expected a number")
    module_id = int(text)
    if module_id > MAX_MODULE_NUM:
        raise ValueError(f"at most {MAX_MODULE_NUM} modules allowed")
    return module_id


def _random_temperature() -> float:
    return float(random.randrange(100))


class FanClient:
    """Produces the messages one module sends to the fan controller.

    Each message's queue priority is ``message_priority(message.temperature)``,
    except the detach message, which is always sent at priority 0.
    """

    def __init__(
        self, module_id: int, read_temperature: Callable[[], float] | None = None
    ) -> None:
        if module_id < 0:
            raise ValueError(f"module id must be non-negative, got {module_id}")
        self.module_id = module_id
        self._read_temperature = read_temperature or _random_temperature
        self.last_temperature: float | None = None

    @property
    def queue_name(self) -> str:
        """Name of the queue on which this client receives controller messages."""
        return f"{CLIENT_QUEUE_NAME_PREFIX}-{self.module_id % MAX_MODULE_NUM}"

    def attach(self) -> Message:
        """Return the message announcing this module to the controller."""
        logger.debug("client %d: send ATTACH", self.module_id)
        return Message(pid=self.module_id, temperature=0.0, type=MessageType.ATTACH)

    def poll(self, incoming: Message | None = None) -> list[Message]:
        """Read the temperature once and return the messages to send.

        A QUERY in ``incoming`` is answered with a NORMAL report; a reading
        above the threshold also produces an URGENT report.
        """
        temperature = self._read_temperature()
        self.last_temperature = temperature
        logger.debug("client %d temperature %s", self.module_id, temperature)
        outgoing: list[Message] = []
        if incoming is not None and incoming.type == MessageType.QUERY:
            outgoing.append(
                Message(pid=self.module_id, temperature=temperature, type=MessageType.NORMAL)
            )
        if temperature > TEMP_THRESHOLD:
            logger.debug("client %d: temperature above threshold", self.module_id)
            outgoing.append(
                Message(pid=self.module_id, temperature=temperature, type=MessageType.URGENT)
            )
        return outgoing

    def detach(self) -> Message:
        """Return the message telling the controller this module is leaving."""
        temperature = self._read_temperature()
        self.last_temperature = temperature
        logger.debug("client %d: send DETACH", self.module_id)
        return Message(pid=self.module_id, temperature=temperature, type=MessageType.DETACH)

    def __repr__(self) -> str:
        return f"FanClient(module_id={self.module_id})"