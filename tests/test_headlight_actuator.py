import pytest

from ecusim.dio import Dio, DioChannel, Level
from ecusim.headlight_actuator import ActuatorPorts, HeadlightActuator
from ecusim.headlight_rte import HeadlightRte
from ecusim.sensors import LightControl
from ecusim.types import HeadlightState


def test_write_command_triggers_callback():
    calls = []
    ports = ActuatorPorts(on_command=lambda: calls.append(ports.read_command()))
    ports.write_command(HeadlightState.NORMAL)
    assert calls == [HeadlightState.NORMAL]
    assert ports.read_command() is HeadlightState.NORMAL


def test_write_state_is_reported():
    ports = ActuatorPorts()
    ports.write_state(HeadlightState.HIGH_BEAM)
    assert ports.current_state is HeadlightState.HIGH_BEAM
    assert ports.read_command() is HeadlightState.OFF


def test_invalid_command_rejected():
    ports = ActuatorPorts()
    with pytest.raises(ValueError):
        ports.write_command(7)


@pytest.mark.parametrize("state", list(HeadlightState))
def test_control_copies_controller_state(state):
    rte = HeadlightRte(None, None, None)
    rte.write_headlight_state(state)
    ports = ActuatorPorts()
    actuator = HeadlightActuator(rte, ports)
    assert actuator.control_headlight() is state
    assert ports.read_command() is state
    assert ports.current_state is state


@pytest.mark.parametrize(
    "state, normal, high",
    [
        (HeadlightState.OFF, Level.LOW, Level.LOW),
        (HeadlightState.NORMAL, Level.HIGH, Level.LOW),
        (HeadlightState.HIGH_BEAM, Level.LOW, Level.HIGH),
    ],
)
def test_control_drives_lamps(state, normal, high):
    rte = HeadlightRte(None, None, None)
    rte.write_headlight_state(state)
    dio = Dio()
    ports = ActuatorPorts()
    light = LightControl(dio, ports.read_command)
    ports.on_command = light.control_headlight
    HeadlightActuator(rte, ports).control_headlight()
    dio.p2in = dio.p2out
    assert dio.read_channel(DioChannel.HEADLIGHT_NORMAL) is normal
    assert dio.read_channel(DioChannel.HEADLIGHT_HIGH_BEAM) is high