"""Receive path of the headlight ECU: CAN driver and CAN interface."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from ecusim.types import CanHw, CanPdu, EcuError, PduInfo

logger = logging.getLogger(__name__)

CAN_BUFFER_SIZE = 8

_SIMULATED_FRAME = bytes([120, 45, 0, 0, 0, 0, 0, 0])
_SIMULATED_CAN_ID = 0x123

RxIndication = Callable[[int, PduInfo], object]


@dataclass(frozen=True)
class RxPduConfig:
    """Configuration of one received PDU."""

    can_id: int
    hoh: int = 0
    read_data_enabled: bool = True


def default_rx_configs() -> list[RxPduConfig]:
    """The two received PDUs configured on the headlight ECU."""
    return [
        RxPduConfig(can_id=0x123, hoh=1, read_data_enabled=True),
        RxPduConfig(can_id=0x456, hoh=2, read_data_enabled=True),
    ]


class CanIfRx:
    """CAN interface buffering the last frame of each configured PDU."""

    def __init__(
        self,
        configs: Iterable[RxPduConfig] | None = None,
        indication: RxIndication | None = None,
    ) -> None:
        self.configs = list(default_rx_configs() if configs is None else configs)
        self.indication = indication
        self._buffers: list[bytes] = [b"" for _ in self.configs]

    def rx_indication(self, mailbox: CanHw, pdu: PduInfo) -> None:
        """Store a received frame in the buffer of the PDU with its CAN id."""
        for index, config in enumerate(self.configs):
            if config.can_id == mailbox.can_id:
                if not config.read_data_enabled:
                    return
                length = min(pdu.length, CAN_BUFFER_SIZE)
                self._buffers[index] = pdu.data[:length]
                return

    def read_rx_pdu_data(self, pdu_id: int) -> PduInfo:
        """Return the buffered data of a PDU and pass it up the stack."""
        if not 0 <= pdu_id < len(self.configs):
            raise EcuError(f"Unknown Rx PDU id: {pdu_id:#x}")
        buffered = self._buffers[pdu_id]
        if not self.configs[pdu_id].read_data_enabled or not buffered:
            raise EcuError(f"No data received for Rx PDU {pdu_id}")
        info = PduInfo(buffered)
        if self.indication is not None:
            self.indication(pdu_id, info)
        return info


class CanRxDriver:
    """Polling CAN driver delivering a simulated frame."""

    def __init__(self, can_if: CanIfRx) -> None:
        self.can_if = can_if
        logger.info("CAN Driver initialized.")

    def receive_data(self, hw_handle: int) -> CanPdu:
        """Return the frame currently on the bus."""
        return CanPdu(
            sw_pdu_handle=1, length=2, can_id=_SIMULATED_CAN_ID, sdu=_SIMULATED_FRAME
        )

    def main_function_read(self) -> None:
        """Poll the bus and hand the received frame to the interface."""
        mailbox = CanHw(can_id=_SIMULATED_CAN_ID, hoh=0, controller_id=0)
        pdu = self.receive_data(0)
        self.can_if.rx_indication(mailbox, PduInfo(pdu.sdu, pdu.length))