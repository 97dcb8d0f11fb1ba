"""Vehicle-state sensor component: reads speed and steering, sends the frame."""

from __future__ import annotations

import logging
from typing import Protocol

from ecusim.types import CanPdu, EcuError

logger = logging.getLogger(__name__)


class _SensorPorts(Protocol):
    def read_speed(self) -> int: ...

    def read_steering_angle(self) -> int: ...

    def write_vehicle_state_frame(self, frame: bytes) -> CanPdu: ...


def encode_frame(speed: int, angle: int) -> bytes:
    """Pack speed (8 bits) and steering angle in 0.1 degree (16 bits, big endian)."""
    steering = (angle * 10) & 0xFFFF
    return bytes([speed & 0xFF, steering >> 8, steering & 0xFF])


class VehicleStateSensor:
    """Holds the last speed and steering angle read through the RTE.

    A failed read leaves the previously held value in place.
    """

    def __init__(self, rte: _SensorPorts) -> None:
        self.rte = rte
        self.speed = 0
        self.steering_angle = 0

    def read_speed_and_steering(self) -> tuple[int, int]:
        """Refresh speed and steering angle; return them."""
        try:
            self.speed = self.rte.read_speed()
        except EcuError as exc:
            logger.debug("Failed to read Speed Sensor: %s", exc)
        try:
            self.steering_angle = self.rte.read_steering_angle()
        except EcuError as exc:
            logger.debug("Failed to read Steering Sensor: %s", exc)
        return self.speed, self.steering_angle

    def send_sensor_data(self) -> CanPdu:
        """Encode the held values and send the vehicle-state frame."""
        frame = encode_frame(self.speed, self.steering_angle)
        try:
            return self.rte.write_vehicle_state_frame(frame)
        except EcuError:
            logger.error("Failed to send Vehicle State Frame")
            raise