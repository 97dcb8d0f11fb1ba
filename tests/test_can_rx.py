import pytest

from ecusim.can_rx import (
    CanIfRx,
    CanRxDriver,
    RxPduConfig,
    default_rx_configs,
)
from ecusim.types import CanHw, EcuError, PduInfo


def test_default_configs():
    configs = default_rx_configs()
    assert [c.can_id for c in configs] == [0x123, 0x456]
    assert all(c.read_data_enabled for c in configs)


def test_read_without_data_fails():
    can_if = CanIfRx()
    with pytest.raises(EcuError):
        can_if.read_rx_pdu_data(0)


def test_indication_then_read_round_trip():
    calls = []
    can_if = CanIfRx(indication=lambda pdu_id, info: calls.append((pdu_id, info)))
    can_if.rx_indication(CanHw(0x456), PduInfo(b"\x01\x02\x03"))
    info = can_if.read_rx_pdu_data(1)
    assert info.data == b"\x01\x02\x03"
    assert info.length == 3
    assert calls == [(1, info)]


def test_data_is_truncated_to_buffer():
    can_if = CanIfRx()
    payload = bytes(range(12))
    can_if.rx_indication(CanHw(0x123), PduInfo(payload))
    assert can_if.read_rx_pdu_data(0).data == payload[:8]


def test_length_limits_copy():
    can_if = CanIfRx()
    can_if.rx_indication(CanHw(0x123), PduInfo(b"abcdef", length=2))
    assert can_if.read_rx_pdu_data(0).data == b"ab"


def test_disabled_pdu_is_not_buffered():
    can_if = CanIfRx([RxPduConfig(0x123, 1, read_data_enabled=False)])
    can_if.rx_indication(CanHw(0x123), PduInfo(b"\x09"))
    with pytest.raises(EcuError):
        can_if.read_rx_pdu_data(0)


def test_unknown_can_id_is_ignored():
    can_if = CanIfRx()
    can_if.rx_indication(CanHw(0x7FF), PduInfo(b"\x09"))
    with pytest.raises(EcuError):
        can_if.read_rx_pdu_data(0)
    with pytest.raises(EcuError):
        can_if.read_rx_pdu_data(1)


def test_pdu_id_out_of_range():
    can_if = CanIfRx()
    with pytest.raises(EcuError):
        can_if.read_rx_pdu_data(0x101)


def test_driver_receive_data():
    driver = CanRxDriver(CanIfRx())
    pdu = driver.receive_data(0)
    assert pdu.can_id == 0x123
    assert pdu.length == 2
    assert pdu.sdu[:2] == bytes([120, 45])


def test_main_function_read_fills_buffer():
    can_if = CanIfRx()
    CanRxDriver(can_if).main_function_read()
    assert can_if.read_rx_pdu_data(0).data == bytes([120, 45])