"""Headlight actuator component and the RTE ports it writes to."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from ecusim.types import HeadlightState


class _StateSource(Protocol):
    def read_headlight_state(self) -> HeadlightState: ...


class ActuatorPorts:
    """Holds the commanded and the reported headlight state.

    Writing a command triggers ``on_command`` so the lamp outputs follow it.
    """

    def __init__(self, on_command: Callable[[], object] | None = None) -> None:
        self.on_command = on_command
        self._command = HeadlightState.OFF
        self._state = HeadlightState.OFF

    @property
    def current_state(self) -> HeadlightState:
        return self._state

    def write_command(self, command: HeadlightState) -> None:
        """Store a command and apply it to the lamps."""
        self._command = HeadlightState(command)
        if self.on_command is not None:
            self.on_command()

    def read_command(self) -> HeadlightState:
        """Return the last command written."""
        return self._command

    def write_state(self, state: HeadlightState) -> None:
        """Store the state the actuator reports back."""
        self._state = HeadlightState(state)


class HeadlightActuator:
    """Turns the controller's headlight state into a lamp command."""

    def __init__(self, rte: _StateSource, ports: ActuatorPorts) -> None:
        self.rte = rte
        self.ports = ports

    def control_headlight(self) -> HeadlightState:
        """Command the lamps to the controller's state and report it back."""
        state = HeadlightState(self.rte.read_headlight_state())
        self.ports.write_command(state)
        self.ports.write_state(state)
        return state