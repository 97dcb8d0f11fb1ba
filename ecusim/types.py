"""Shared data types for the simulated ECU stacks."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

CAN_ID_STANDARD_MASK = 0x000007FF
CAN_ID_EXTENDED_MASK = 0x1FFFFFFF


class EcuError(Exception):
    """Raised where a service of the ECU stack reports failure."""


class HeadlightState(enum.IntEnum):
    """Operating mode of the headlights."""

    OFF = 0
    NORMAL = 1
    HIGH_BEAM = 2


@dataclass
class PduInfo:
    """A protocol data unit: its payload and the length it claims."""

    data: bytes = b""
    length: int | None = None

    def __post_init__(self) -> None:
        self.data = bytes(self.data)
        if self.length is None:
            self.length = len(self.data)
        if not 0 <= self.length <= 0xFF:
            raise EcuError(f"PDU length out of range: {self.length}")


@dataclass
class CanPdu:
    """A CAN L-PDU handed to or received from the driver."""

    sw_pdu_handle: int
    length: int
    can_id: int
    sdu: bytes = field(default=b"")

    @property
    def is_extended(self) -> bool:
        """True when the identifier does not fit in 11 bits."""
        return self.can_id & ~CAN_ID_STANDARD_MASK != 0


@dataclass(frozen=True)
class CanHw:
    """A hardware object: CAN identifier, handle and controller."""

    can_id: int
    hoh: int = 0
    controller_id: int = 0