import pytest

from ecusim.headlight_controller import HeadlightController, compute_headlight_mode
from ecusim.types import EcuError, HeadlightState


class FakeRte:
    def __init__(self, ambient=0, speed=0, angle=0, fail=False):
        self.ambient = ambient
        self.speed = speed
        self.angle = angle
        self.fail = fail
        self.written = []

    def _value(self, value):
        if self.fail:
            raise EcuError("read failed")
        return value

    def read_ambient(self):
        return self._value(self.ambient)

    def read_speed(self):
        return self._value(self.speed)

    def read_steering_angle(self):
        return self._value(self.angle)

    def write_headlight_state(self, state):
        self.written.append(state)


@pytest.mark.parametrize(
    "ambient, speed, angle, expected",
    [
        (700, 5, 0, HeadlightState.OFF),
        (700, 50, 5, HeadlightState.OFF),
        (500, 50, 0, HeadlightState.NORMAL),
        (600, 10, 45, HeadlightState.NORMAL),
        (600, 10, -45, HeadlightState.NORMAL),
        (200, 100, 90, HeadlightState.HIGH_BEAM),
        (200, 100, -90, HeadlightState.HIGH_BEAM),
        (300, 80, 46, HeadlightState.HIGH_BEAM),
        (500, 5, 0, HeadlightState.OFF),
        (700, 50, 30, HeadlightState.OFF),
        (400, 50, 90, HeadlightState.OFF),
    ],
)
def test_compute_headlight_mode(ambient, speed, angle, expected):
    assert compute_headlight_mode(ambient, speed, angle) is expected


def test_reads_store_values_from_rte():
    rte = FakeRte(ambient=250, speed=90, angle=-60)
    controller = HeadlightController(rte)
    assert controller.read_ambient_sensor() == 250
    assert controller.read_speed_data() == 90
    assert controller.read_steering_angle_data() == -60
    assert (controller.ambient, controller.speed, controller.steering_angle) == (
        250,
        90,
        -60,
    )


def test_compute_writes_mode_to_rte():
    rte = FakeRte(ambient=250, speed=90, angle=-60)
    controller = HeadlightController(rte)
    controller.read_ambient_sensor()
    controller.read_speed_data()
    controller.read_steering_angle_data()
    mode = controller.compute_headlight_logic()
    assert mode is HeadlightState.HIGH_BEAM
    assert rte.written == [HeadlightState.HIGH_BEAM]


def test_failed_reads_keep_previous_values():
    rte = FakeRte(ambient=500, speed=40, angle=20)
    controller = HeadlightController(rte)
    controller.read_ambient_sensor()
    controller.read_speed_data()
    controller.read_steering_angle_data()
    rte.fail = True
    rte.ambient, rte.speed, rte.angle = 900, 1, 1
    assert controller.read_ambient_sensor() == 500
    assert controller.read_speed_data() == 40
    assert controller.read_steering_angle_data() == 20


def test_initial_state_computes_off():
    rte = FakeRte()
    controller = HeadlightController(rte)
    assert controller.compute_headlight_logic() is HeadlightState.OFF
    assert rte.written == [HeadlightState.OFF]