"""Transmit path of the vehicle-state ECU: COM, PDU router, CAN interface, driver."""

from __future__ import annotations

import logging

from ecusim.types import CanPdu, EcuError, PduInfo

logger = logging.getLogger(__name__)

PDU_ID_VEHICLE_STATE_FRAME = 0x200
VEHICLE_STATE_FRAME_LENGTH = 8


class TxCanDriver:
    """CAN driver that accepts frames with a non-empty payload."""

    def __init__(self, can_if: TxCanInterface | None = None) -> None:
        self.can_if = can_if
        self.sent: list[tuple[int, CanPdu]] = []

    def write(self, hth: int, pdu: CanPdu) -> CanPdu:
        """Put ``pdu`` on the bus through hardware object ``hth``.

        A frame of length zero is refused: its failure is confirmed upward
        and EcuError is raised.
        """
        if pdu.length > 0:
            self.sent.append((hth, pdu))
            self.tx_confirmation(hth, True)
            return pdu
        self.tx_confirmation(hth, False)
        raise EcuError(f"Cannot transmit empty frame on HTH {hth}")

    def tx_confirmation(self, pdu_id: int, ok: bool) -> None:
        """Report the outcome of a transmission to the CAN interface."""
        if self.can_if is not None:
            self.can_if.tx_confirmation(pdu_id, ok)


class TxCanInterface:
    """Maps PDUs onto CAN frames and hands them to the driver."""

    def __init__(
        self,
        driver: TxCanDriver | None = None,
        router: TxPduRouter | None = None,
    ) -> None:
        self.driver = driver
        self.router = router

    def transmit(self, pdu_id: int, pdu_info: PduInfo) -> CanPdu:
        """Build the CAN frame of ``pdu_id`` and write it."""
        if self.driver is None:
            raise EcuError("CAN interface has no driver")
        hth = pdu_id & 0xFF
        frame = CanPdu(
            sw_pdu_handle=pdu_id,
            length=pdu_info.length,
            can_id=pdu_id,
            sdu=pdu_info.data,
        )
        return self.driver.write(hth, frame)

    def tx_confirmation(self, pdu_id: int, ok: bool) -> None:
        """Pass a transmission outcome up to the PDU router."""
        if self.router is not None:
            self.router.tx_confirmation(pdu_id, ok)


class TxPduRouter:
    """Forwards PDUs from COM to the CAN interface and confirmations back."""

    def __init__(
        self,
        can_if: TxCanInterface | None = None,
        com: TxCom | None = None,
    ) -> None:
        self.can_if = can_if
        self.com = com

    def com_transmit(self, pdu_id: int, pdu_info: PduInfo) -> CanPdu:
        """Forward a PDU from COM to the CAN interface."""
        if self.can_if is None:
            raise EcuError("PDU router has no CAN interface")
        return self.can_if.transmit(pdu_id, pdu_info)

    def tx_confirmation(self, pdu_id: int, ok: bool) -> None:
        """Pass a transmission outcome up to COM."""
        if self.com is not None:
            self.com.tx_confirmation(pdu_id, ok)


class TxCom:
    """COM service sending signals and recording their confirmations."""

    def __init__(self, router: TxPduRouter | None = None) -> None:
        self.router = router
        self.confirmations: list[tuple[int, bool]] = []

    def send_signal(self, pdu_id: int, pdu_info: PduInfo) -> CanPdu:
        """Send a PDU down the stack; return the frame written."""
        if self.router is None:
            raise EcuError("COM has no PDU router")
        return self.router.com_transmit(pdu_id, pdu_info)

    def tx_confirmation(self, pdu_id: int, ok: bool) -> None:
        """Record the outcome of a transmission."""
        self.confirmations.append((pdu_id, bool(ok)))
        if not ok:
            logger.warning("Transmission of PDU %#x failed", pdu_id)


def build_tx_stack() -> TxCom:
    """Wire COM, router, interface and driver together; return COM."""
    com = TxCom()
    router = TxPduRouter(com=com)
    can_if = TxCanInterface(router=router)
    driver = TxCanDriver(can_if=can_if)
    com.router = router
    router.can_if = can_if
    can_if.driver = driver
    return com