from ecusim.pdu_router import (
    CAN_MSG_ID_SPEED,
    CAN_MSG_ID_STEERING_ANGLE,
    RxCom,
    RxPduRouter,
)
from ecusim.types import PduInfo


def _router():
    speeds, angles = [], []
    router = RxPduRouter(RxCom(speeds.append, angles.append))
    return router, speeds, angles


def test_speed_uses_first_byte():
    router, speeds, angles = _router()
    assert router.rx_indication(CAN_MSG_ID_SPEED, PduInfo(bytes([120, 45])))
    assert speeds == [120]
    assert angles == []


def test_steering_uses_second_byte():
    router, speeds, angles = _router()
    assert router.rx_indication(CAN_MSG_ID_STEERING_ANGLE, PduInfo(bytes([120, 45])))
    assert angles == [45]
    assert speeds == []


def test_unknown_pdu_id_is_dropped():
    router, speeds, angles = _router()
    assert not router.rx_indication(0x7FF, PduInfo(b"\x01\x02"))
    assert speeds == [] and angles == []


def test_missing_data_is_dropped():
    router, speeds, angles = _router()
    assert not router.rx_indication(CAN_MSG_ID_SPEED, None)
    assert not router.rx_indication(CAN_MSG_ID_SPEED, PduInfo(b""))
    assert speeds == []


def test_com_writers_are_called():
    seen = []
    com = RxCom(lambda v: seen.append(("speed", v)), lambda v: seen.append(("angle", v)))
    com.write_speed_data(30)
    com.write_steering_angle_data(-5)
    assert seen == [("speed", 30), ("angle", -5)]