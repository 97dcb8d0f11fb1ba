"""Headlight controller component: decides the headlight mode from sensor data."""

from __future__ import annotations

import logging
from typing import Protocol

from ecusim.types import EcuError, HeadlightState

logger = logging.getLogger(__name__)

DAYLIGHT_THRESHOLD = 600
DARK_THRESHOLD = 300
LOW_SPEED_KMH = 10
HIGH_SPEED_KMH = 80
STRAIGHT_ANGLE = 10
TURN_ANGLE = 45


class _ControllerPorts(Protocol):
    def read_ambient(self) -> int: ...

    def read_speed(self) -> int: ...

    def read_steering_angle(self) -> int: ...

    def write_headlight_state(self, state: HeadlightState) -> None: ...


def compute_headlight_mode(ambient: int, speed: int, angle: int) -> HeadlightState:
    """Return the headlight mode for the given ambient light, speed and angle."""
    is_day = ambient > DAYLIGHT_THRESHOLD
    if (is_day and speed < LOW_SPEED_KMH) or (
        is_day and -STRAIGHT_ANGLE <= angle <= STRAIGHT_ANGLE
    ):
        return HeadlightState.OFF
    if (
        ambient <= DAYLIGHT_THRESHOLD
        and speed >= LOW_SPEED_KMH
        and -TURN_ANGLE <= angle <= TURN_ANGLE
    ):
        return HeadlightState.NORMAL
    if (
        ambient <= DARK_THRESHOLD
        and speed >= HIGH_SPEED_KMH
        and (angle <= -TURN_ANGLE or angle >= TURN_ANGLE)
    ):
        return HeadlightState.HIGH_BEAM
    return HeadlightState.OFF


class HeadlightController:
    """Collects sensor inputs through the RTE and writes the computed mode.

    A failed read leaves the previously held value in place.
    """

    def __init__(self, rte: _ControllerPorts) -> None:
        self.rte = rte
        self.ambient = 0
        self.speed = 0
        self.steering_angle = 0

    def read_ambient_sensor(self) -> int:
        """Refresh and return the ambient light value."""
        try:
            self.ambient = self.rte.read_ambient()
        except EcuError as exc:
            logger.debug("Ambient read failed: %s", exc)
        return self.ambient

    def read_speed_data(self) -> int:
        """Refresh and return the vehicle speed."""
        try:
            self.speed = self.rte.read_speed()
        except EcuError as exc:
            logger.debug("Speed read failed: %s", exc)
        return self.speed

    def read_steering_angle_data(self) -> int:
        """Refresh and return the steering angle."""
        try:
            self.steering_angle = self.rte.read_steering_angle()
        except EcuError as exc:
            logger.debug("Steering angle read failed: %s", exc)
        return self.steering_angle

    def compute_headlight_logic(self) -> HeadlightState:
        """Compute the mode from the held inputs, write it and return it."""
        mode = compute_headlight_mode(self.ambient, self.speed, self.steering_angle)
        self.rte.write_headlight_state(mode)
        return mode