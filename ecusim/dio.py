"""Simulated digital I/O port driving the headlight lamps."""

from __future__ import annotations

import enum
from dataclasses import dataclass

GPIO_HEADLIGHT_NORMAL = 1 << 0
GPIO_HEADLIGHT_HIGH_BEAM = 1 << 1


class DioChannel(enum.IntEnum):
    """Digital channels of the headlight ECU."""

    HEADLIGHT_NORMAL = 10
    HEADLIGHT_HIGH_BEAM = 11


class Level(enum.IntEnum):
    """Logic level of a channel."""

    LOW = 0
    HIGH = 1


_MASKS = {
    DioChannel.HEADLIGHT_NORMAL: GPIO_HEADLIGHT_NORMAL,
    DioChannel.HEADLIGHT_HIGH_BEAM: GPIO_HEADLIGHT_HIGH_BEAM,
}


def _mask(channel: int) -> int | None:
    try:
        return _MASKS[DioChannel(channel)]
    except ValueError:
        return None


@dataclass
class Dio:
    """Port with an output register ``p2out`` and an input register ``p2in``."""

    p2out: int = 0
    p2in: int = 0

    def read_channel(self, channel: int) -> Level:
        """Read a channel from the input register; unknown channels read LOW."""
        mask = _mask(channel)
        if mask is None:
            return Level.LOW
        return Level.HIGH if self.p2in & mask else Level.LOW

    def write_channel(self, channel: int, level: int) -> None:
        """Drive a channel in the output register; unknown channels are ignored."""
        mask = _mask(channel)
        if mask is None:
            return
        if level == Level.LOW:
            self.p2out &= ~mask & 0xFF
        else:
            self.p2out |= mask