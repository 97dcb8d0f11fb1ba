"""Receive-side PDU router and COM service of the headlight ECU."""

from __future__ import annotations

from collections.abc import Callable

from ecusim.types import PduInfo

CAN_MSG_ID_SPEED = 0x101
CAN_MSG_ID_STEERING_ANGLE = 0x102


class RxCom:
    """COM service writing received signals to the runtime environment."""

    def __init__(
        self,
        speed_writer: Callable[[int], object],
        angle_writer: Callable[[int], object],
    ) -> None:
        self.speed_writer = speed_writer
        self.angle_writer = angle_writer

    def write_speed_data(self, speed: int) -> None:
        """Pass a received speed upward."""
        self.speed_writer(speed)

    def write_steering_angle_data(self, angle: int) -> None:
        """Pass a received steering angle upward."""
        self.angle_writer(angle)


class RxPduRouter:
    """Routes received PDUs to the COM signal they carry."""

    def __init__(self, com: RxCom) -> None:
        self.com = com

    def rx_indication(self, pdu_id: int, pdu_info: PduInfo | None) -> bool:
        """Route a PDU; return whether a signal was delivered."""
        if pdu_info is None or not pdu_info.data:
            return False
        data = pdu_info.data
        if pdu_id == CAN_MSG_ID_SPEED:
            self.com.write_speed_data(data[0])
            return True
        if pdu_id == CAN_MSG_ID_STEERING_ANGLE and len(data) > 1:
            self.com.write_steering_angle_data(data[1])
            return True
        return False