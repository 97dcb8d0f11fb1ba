"""The vehicle-state ECU: its stack wired together and its sensor task."""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass

from ecusim.adc import make_vehicle_state_adc
from ecusim.sensors import SpeedSensor, SteeringAngleSensor
from ecusim.tx_stack import build_tx_stack
from ecusim.types import CanPdu
from ecusim.vehicle_rte import VehicleStateRte
from ecusim.vehicle_state_sensor import VehicleStateSensor


@dataclass(frozen=True)
class VehicleCycle:
    """Values read and frame sent in one run of the sensor task."""

    speed: int
    steering_angle: int
    frame: CanPdu


class VehicleStateEcu:
    """Vehicle-state ECU sampling its sensors and sending the state frame."""

    def __init__(self, seed: int | None = None) -> None:
        self.rng = random.Random(seed)
        self.adc = make_vehicle_state_adc()
        self.com = build_tx_stack()
        self.rte = VehicleStateRte(None, None, self.com)
        self.speed_sensor = SpeedSensor(self.adc, self.rte.write_speed, self.rng)
        self.steering_sensor = SteeringAngleSensor(
            self.adc, self.rte.write_steering_angle, self.rng
        )
        self.rte.speed_sensor = self.speed_sensor
        self.rte.steering_sensor = self.steering_sensor
        self.sensor = VehicleStateSensor(self.rte)
        self.sensor_toggle = 0

        self.speed_sensor.init()
        self.steering_sensor.init()

    def run_cycle(self) -> VehicleCycle:
        """Read speed and steering, then send the vehicle-state frame."""
        self.sensor_toggle ^= 1
        speed, angle = self.sensor.read_speed_and_steering()
        frame = self.sensor.send_sensor_data()
        return VehicleCycle(speed, angle, frame)


def main(argv: list[str] | None = None) -> int:
    """Run the vehicle-state ECU for a number of cycles and print each one."""
    parser = argparse.ArgumentParser(description="Simulate the vehicle-state ECU.")
    parser.add_argument("--cycles", type=int, default=10)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    if args.cycles < 0:
        parser.error("--cycles must not be negative")

    ecu = VehicleStateEcu(args.seed)
    for number in range(1, args.cycles + 1):
        cycle = ecu.run_cycle()
        print(
            f"cycle {number}: speed={cycle.speed} angle={cycle.steering_angle} "
            f"frame={cycle.frame.sdu.hex()}"
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())