"""Runtime environment of the vehicle-state ECU."""

from __future__ import annotations

from ecusim.sensors import SpeedSensor, SteeringAngleSensor
from ecusim.tx_stack import (
    PDU_ID_VEHICLE_STATE_FRAME,
    VEHICLE_STATE_FRAME_LENGTH,
    TxCom,
)
from ecusim.types import CanPdu, EcuError, PduInfo


def _to_int16(value: int) -> int:
    value &= 0xFFFF
    return value - 0x10000 if value & 0x8000 else value


class VehicleStateRte:
    """Holds the sensor signals of the vehicle-state ECU and sends its frame.

    Reading a signal samples its sensor first; the sensor writes the new
    value back through :meth:`write_speed` or :meth:`write_steering_angle`.
    """

    def __init__(
        self,
        speed_sensor: SpeedSensor | None,
        steering_sensor: SteeringAngleSensor | None,
        com: TxCom,
    ) -> None:
        self.speed_sensor = speed_sensor
        self.steering_sensor = steering_sensor
        self.com = com
        self._speed = 0
        self._steering_angle = 0

    @property
    def speed(self) -> int:
        return self._speed

    @property
    def steering_angle(self) -> int:
        return self._steering_angle

    def read_speed(self) -> int:
        """Sample the speed sensor and return the stored speed."""
        if self.speed_sensor is None:
            raise EcuError("No speed sensor connected")
        self.speed_sensor.read()
        return self._speed

    def read_steering_angle(self) -> int:
        """Sample the steering sensor and return the stored angle."""
        if self.steering_sensor is None:
            raise EcuError("No steering angle sensor connected")
        self.steering_sensor.read()
        return self._steering_angle

    def write_speed(self, value: int | None) -> None:
        """Store a speed (unsigned 16 bits)."""
        if value is None:
            raise EcuError("No speed value given")
        self._speed = value & 0xFFFF

    def write_steering_angle(self, value: int | None) -> None:
        """Store a steering angle (signed 16 bits)."""
        if value is None:
            raise EcuError("No steering angle given")
        self._steering_angle = _to_int16(value)

    def write_vehicle_state_frame(self, frame: bytes) -> CanPdu:
        """Send the vehicle-state frame through COM; return the CAN frame."""
        info = PduInfo(bytes(frame), VEHICLE_STATE_FRAME_LENGTH)
        return self.com.send_signal(PDU_ID_VEHICLE_STATE_FRAME, info)