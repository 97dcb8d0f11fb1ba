"""I/O hardware abstraction: sensors and the headlight lamp outputs."""

from __future__ import annotations

import random
from collections.abc import Callable

from ecusim.adc import (
    AMBIENT_SENSOR_GROUP,
    SPEED_SENSOR_GROUP,
    STEERING_SENSOR_GROUP,
    Adc,
)
from ecusim.dio import Dio, DioChannel, Level
from ecusim.types import EcuError, HeadlightState

MAX_AMBIENT = 1000
MAX_SPEED_KMH = 250
MAX_STEERING_ANGLE = 180

Writer = Callable[[int], object]

_LAMP_LEVELS = {
    HeadlightState.OFF: (Level.LOW, Level.LOW),
    HeadlightState.NORMAL: (Level.HIGH, Level.LOW),
    HeadlightState.HIGH_BEAM: (Level.LOW, Level.HIGH),
}


def _make_rng(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else random.Random()


class AmbientSensor:
    """Ambient light sensor; readings run from 0 to ``MAX_AMBIENT``."""

    def __init__(
        self, adc: Adc, writer: Writer, rng: random.Random | None = None
    ) -> None:
        self.adc = adc
        self.writer = writer
        self.rng = _make_rng(rng)

    def init(self) -> None:
        """Initialise the converter behind the sensor."""
        self.adc.reset()

    def read(self) -> int:
        """Sample the sensor, write the value upward and return it."""
        self.adc.start_conversion(AMBIENT_SENSOR_GROUP)
        self.adc.read_group(AMBIENT_SENSOR_GROUP)
        value = self.rng.randrange(MAX_AMBIENT + 1)
        self.writer(value)
        return value


class SpeedSensor:
    """Vehicle speed sensor in km/h, from 0 to ``MAX_SPEED_KMH``."""

    def __init__(
        self, adc: Adc, writer: Writer, rng: random.Random | None = None
    ) -> None:
        self.adc = adc
        self.writer = writer
        self.rng = _make_rng(rng)

    def init(self) -> None:
        """Initialise the converter behind the sensor."""
        self.adc.reset()

    def read(self) -> int:
        """Sample the sensor, write the value upward and return it."""
        self.adc.start_conversion(SPEED_SENSOR_GROUP)
        self.adc.read_group(SPEED_SENSOR_GROUP)
        value = self.rng.randrange(MAX_SPEED_KMH + 1)
        self.writer(value)
        return value


class SteeringAngleSensor:
    """Steering angle sensor in degrees, within +/- ``MAX_STEERING_ANGLE``."""

    def __init__(
        self, adc: Adc, writer: Writer, rng: random.Random | None = None
    ) -> None:
        self.adc = adc
        self.writer = writer
        self.rng = _make_rng(rng)

    def init(self) -> None:
        """Initialise the converter behind the sensor."""
        self.adc.reset()

    def read(self) -> int:
        """Sample the sensor, write the value upward and return it."""
        self.adc.read_group(STEERING_SENSOR_GROUP)
        value = self.rng.randrange(2 * MAX_STEERING_ANGLE + 1) - MAX_STEERING_ANGLE
        self.writer(value)
        return value


class LightControl:
    """Drives the lamp outputs from the commanded headlight state."""

    def __init__(self, dio: Dio, command_reader: Callable[[], HeadlightState]) -> None:
        self.dio = dio
        self.command_reader = command_reader

    def control_headlight(self) -> HeadlightState | None:
        """Apply the current command; return it, or None if none could be read."""
        try:
            command = HeadlightState(self.command_reader())
        except (EcuError, ValueError):
            return None
        normal, high_beam = _LAMP_LEVELS[command]
        self.dio.write_channel(DioChannel.HEADLIGHT_NORMAL, normal)
        self.dio.write_channel(DioChannel.HEADLIGHT_HIGH_BEAM, high_beam)
        return command