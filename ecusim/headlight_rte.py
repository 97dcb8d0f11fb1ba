"""Runtime environment of the headlight ECU: the ports its components use."""

from __future__ import annotations

import logging

from ecusim.can_rx import CanIfRx, CanRxDriver
from ecusim.pdu_router import CAN_MSG_ID_SPEED, CAN_MSG_ID_STEERING_ANGLE
from ecusim.sensors import AmbientSensor
from ecusim.types import EcuError, HeadlightState

logger = logging.getLogger(__name__)


def _to_int16(value: int) -> int:
    value &= 0xFFFF
    return value - 0x10000 if value & 0x8000 else value


class HeadlightRte:
    """Holds the signals exchanged between the headlight components.

    Reading the ambient light samples the sensor first; reading speed or
    steering angle polls the CAN bus and asks the CAN interface for the
    corresponding PDU before the stored value is returned.
    """

    def __init__(
        self,
        ambient_sensor: AmbientSensor,
        can_driver: CanRxDriver,
        can_if: CanIfRx,
    ) -> None:
        self.ambient_sensor = ambient_sensor
        self.can_driver = can_driver
        self.can_if = can_if
        self.speed_pdu_id = CAN_MSG_ID_SPEED
        self.steering_pdu_id = CAN_MSG_ID_STEERING_ANGLE
        self._ambient = 0
        self._speed = 0
        self._steering_angle = 0
        self._headlight_state = HeadlightState.OFF

    def write_ambient(self, value: int | None) -> None:
        """Store an ambient light value (16 bits)."""
        if value is None:
            raise EcuError("No ambient value given")
        self._ambient = value & 0xFFFF

    def read_ambient(self) -> int:
        """Sample the ambient sensor and return the stored value."""
        self.ambient_sensor.read()
        return self._ambient

    def write_speed(self, value: int) -> None:
        """Store a vehicle speed (8 bits)."""
        self._speed = value & 0xFF

    def read_speed(self) -> int:
        """Poll the bus, request the speed PDU and return the stored speed.

        The outcome of the PDU request does not affect the result.
        """
        self.can_driver.main_function_read()
        try:
            self.can_if.read_rx_pdu_data(self.speed_pdu_id)
        except EcuError as exc:
            logger.debug("Speed PDU not available: %s", exc)
        return self._speed

    def write_steering_angle(self, value: int) -> None:
        """Store a steering angle (signed 16 bits)."""
        self._steering_angle = _to_int16(value)

    def read_steering_angle(self) -> int:
        """Request the steering PDU and return the stored angle.

        Raises EcuError when the CAN interface has no data for the PDU.
        """
        self.can_if.read_rx_pdu_data(self.steering_pdu_id)
        return self._steering_angle

    def write_headlight_state(self, state: HeadlightState) -> None:
        """Store the headlight state computed by the controller."""
        self._headlight_state = HeadlightState(state)

    def read_headlight_state(self) -> HeadlightState:
        """Return the last headlight state written."""
        return self._headlight_state