"""Simulated analogue-to-digital converter with a bank of result registers."""

from __future__ import annotations

from collections.abc import Mapping

from ecusim.types import EcuError

ADC_REGISTER_COUNT = 10

AMBIENT_SENSOR_GROUP = 0
SPEED_SENSOR_GROUP = 0
STEERING_SENSOR_GROUP = 1


class Adc:
    """An ADC whose conversions load fixed values into its registers.

    ``conversions`` maps a group to the value a conversion of that group
    produces. Starting a conversion of a group not in the mapping leaves
    its register as it was.
    """

    def __init__(self, conversions: Mapping[int, int] | None = None) -> None:
        self.conversions = dict(conversions or {})
        self.registers = [0] * ADC_REGISTER_COUNT

    def _check_group(self, group: int) -> None:
        if not 0 <= group < len(self.registers):
            raise EcuError(f"ADC group out of range: {group}")

    def reset(self) -> None:
        """Clear every result register."""
        self.registers = [0] * ADC_REGISTER_COUNT

    def start_conversion(self, group: int) -> None:
        """Run a conversion of ``group``."""
        self._check_group(group)
        if group in self.conversions:
            self.registers[group] = self.conversions[group] & 0xFFFF

    def read_group(self, group: int) -> int:
        """Return the last conversion result of ``group``."""
        self._check_group(group)
        return self.registers[group]


def make_headlight_adc() -> Adc:
    """ADC of the headlight ECU: the ambient group reads 512, others 0."""
    conversions = {group: 0 for group in range(ADC_REGISTER_COUNT)}
    conversions[AMBIENT_SENSOR_GROUP] = 512
    return Adc(conversions)


def make_vehicle_state_adc() -> Adc:
    """ADC of the vehicle-state ECU: speed reads 512, steering 300."""
    return Adc({SPEED_SENSOR_GROUP: 512, STEERING_SENSOR_GROUP: 300})