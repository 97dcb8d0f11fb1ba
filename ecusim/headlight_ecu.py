"""The headlight ECU: its stack wired together and its task cycle."""

from __future__ import annotations

import argparse
import logging
import random
from dataclasses import dataclass

from ecusim.adc import make_headlight_adc
from ecusim.can_rx import CanIfRx, CanRxDriver
from ecusim.dio import Dio
from ecusim.headlight_actuator import ActuatorPorts, HeadlightActuator
from ecusim.headlight_controller import HeadlightController
from ecusim.headlight_rte import HeadlightRte
from ecusim.pdu_router import RxCom, RxPduRouter
from ecusim.sensors import AmbientSensor, LightControl
from ecusim.types import HeadlightState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HeadlightCycle:
    """Inputs read and headlight state reached in one task cycle."""

    ambient: int
    speed: int
    steering_angle: int
    state: HeadlightState


class HeadlightEcu:
    """Headlight ECU running its input, logic, control and feedback tasks."""

    def __init__(self, seed: int | None = None) -> None:
        self.rng = random.Random(seed)
        self.adc = make_headlight_adc()
        self.ambient_sensor = AmbientSensor(self.adc, self._write_ambient, self.rng)

        self.can_if = CanIfRx()
        self.can_driver = CanRxDriver(self.can_if)
        self.rte = HeadlightRte(self.ambient_sensor, self.can_driver, self.can_if)
        self.router = RxPduRouter(
            RxCom(self.rte.write_speed, self.rte.write_steering_angle)
        )
        self.can_if.indication = self.router.rx_indication

        self.dio = Dio()
        self.ports = ActuatorPorts()
        self.light_control = LightControl(self.dio, self.ports.read_command)
        self.ports.on_command = self.light_control.control_headlight

        self.controller = HeadlightController(self.rte)
        self.actuator = HeadlightActuator(self.rte, self.ports)

        self.input_toggle = 0
        self.logic_toggle = 0
        self.control_toggle = 0
        self.feedback_toggle = 0

        self.ambient_sensor.init()

    def _write_ambient(self, value: int) -> None:
        self.rte.write_ambient(value)

    def run_cycle(self) -> HeadlightCycle:
        """Run the four tasks once, in the order their events chain them."""
        ambient = self.controller.read_ambient_sensor()
        speed = self.controller.read_speed_data()
        angle = self.controller.read_steering_angle_data()
        self.input_toggle ^= 1

        self.controller.compute_headlight_logic()
        self.logic_toggle ^= 1

        state = self.actuator.control_headlight()
        self.control_toggle ^= 1

        logger.debug("Headlight state reported: %s", self.ports.current_state.name)
        self.feedback_toggle ^= 1

        return HeadlightCycle(ambient, speed, angle, state)


def main(argv: list[str] | None = None) -> int:
    """Run the headlight ECU for a number of cycles and print each one."""
    parser = argparse.ArgumentParser(description="Simulate the headlight ECU.")
    parser.add_argument("--cycles", type=int, default=10)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    if args.cycles < 0:
        parser.error("--cycles must not be negative")

    ecu = HeadlightEcu(args.seed)
    for number in range(1, args.cycles + 1):
        cycle = ecu.run_cycle()
        print(
            f"cycle {number}: ambient={cycle.ambient} speed={cycle.speed} "
            f"angle={cycle.steering_angle} state={cycle.state.name}"
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())