import dataclasses

import pytest

from groundcontrol.enums import EventType, PIDFeature
from groundcontrol.packets import (
    AccelPacket,
    AssistPacket,
    AutoPacket,
    BarometerPacket,
    EventData16Packet,
    EventData32Packet,
    EventData64Packet,
    EventData8Packet,
    EventPacket,
    EventTimedDataPacket,
    EventTimedPacket,
    GPSEnvPacket,
    GPSPacket,
    GyroPacket,
    MagnetPacket,
    ManualPacket,
    PacketType,
    PIDPacket,
    TempHumidPacket,
    pipe_for,
)
from groundcontrol.radio import (
    AI_PIPE,
    IMU_PIPE,
    LOG_PIPE,
    MAIN_PIPE,
    MISC_PIPE,
    SERVO_PIPE,
)


def test_manual_payload_prefix():
    packet = ManualPacket("m", 90, 90, 90, 90, 90)
    assert packet.payload() == bytes((PacketType.MANUAL, ord("m"), 3))


def test_accel_default_header_is_null():
    packet = AccelPacket(1, -2, 3)
    assert packet.payload()[:2] == bytes((PacketType.ACCEL, 0))


def test_accel_accepts_explicit_header():
    packet = AccelPacket(1, 2, 3, header="a")
    assert packet.payload()[1] == ord("a")
    assert (packet.x, packet.y, packet.z) == (1, 2, 3)


@pytest.mark.parametrize(
    "packet, pipe",
    [
        (EventPacket("e", EventType.SYSTEM_STARTUP), MAIN_PIPE),
        (EventData8Packet("e", EventType.FIXED_ALTITUDE_DATA_CHANGE, 40), MAIN_PIPE),
        (EventData16Packet("e", EventType.FIXED_HEADING_DATA_CHANGE, 1000), MAIN_PIPE),
        (EventData32Packet("e", EventType.WAYPOINT_DATA_UPDATE, 100000), MAIN_PIPE),
        (EventData64Packet("e", EventType.WAYPOINT_DATA_UPDATE, 2**40), MAIN_PIPE),
        (EventTimedPacket("e", EventType.FLIGHT_START_TRUE, 1700000000), MAIN_PIPE),
        (AutoPacket("a", 1, 2, 3, 4, 5), AI_PIPE),
        (AssistPacket("s", 1, 2, 3, 4, 5), SERVO_PIPE),
        (ManualPacket("m", 1, 2, 3, 4, 5), SERVO_PIPE),
        (AccelPacket(1, 2, 3), IMU_PIPE),
        (GyroPacket("g", 1, 2, 3), IMU_PIPE),
        (MagnetPacket("n", 1, 2, 3), IMU_PIPE),
        (GPSPacket("g", 1, 2, 3), MISC_PIPE),
        (GPSEnvPacket("v", 1, 2, 3, 4), MISC_PIPE),
        (BarometerPacket(1, 2, 3), LOG_PIPE),
        (TempHumidPacket("t", 1, 2), LOG_PIPE),
    ],
)
def test_pipe_assignment(packet, pipe):
    assert pipe_for(packet) == pipe


@pytest.mark.parametrize(
    "packet",
    [
        EventTimedDataPacket("e", EventType.FLIGHT_START_TRUE, 1700000000, 1),
        PIDPacket("p", PIDFeature.ROLL, 1.0, 0.5, 0.25),
    ],
)
def test_packets_without_pipe(packet):
    assert pipe_for(packet) is None


def test_event_type_is_coerced_from_int():
    packet = EventPacket("e", int(EventType.PAIR_ATC_REQUEST))
    assert packet.event_type is EventType.PAIR_ATC_REQUEST


def test_unknown_event_type_rejected():
    with pytest.raises(ValueError):
        EventPacket("e", 146)


def test_pid_feature_and_gains_are_normalised():
    packet = PIDPacket("p", int(PIDFeature.ALTITUDE), 2, 1, 0)
    assert packet.feature_id is PIDFeature.ALTITUDE
    assert (packet.kp, packet.ki, packet.kd) == (2.0, 1.0, 0.0)
    assert isinstance(packet.kp, float)


@pytest.mark.parametrize(
    "factory",
    [
        lambda: ManualPacket("m", 256, 0, 0, 0, 0),
        lambda: AssistPacket("s", 0, -1, 0, 0, 0),
        lambda: GyroPacket("g", 40000, 0, 0),
        lambda: GPSPacket("g", 2**31, 0, 0),
        lambda: GPSEnvPacket("v", 0, 0, 0, 300),
        lambda: EventData8Packet("e", EventType.EXTRA, 256),
        lambda: EventData16Packet("e", EventType.EXTRA, 2**16),
        lambda: EventData64Packet("e", EventType.EXTRA, -1),
        lambda: EventTimedPacket("e", EventType.EXTRA, 2**32),
    ],
)
def test_out_of_range_fields_rejected(factory):
    with pytest.raises(ValueError):
        factory()


def test_gps_accepts_negative_coordinates():
    packet = GPSPacket("g", -1223456789, -2**31, -100)
    assert (packet.lat, packet.lon, packet.alt) == (-1223456789, -2**31, -100)


def test_bool_is_not_accepted_as_int():
    with pytest.raises(TypeError):
        ManualPacket("m", True, 0, 0, 0, 0)


@pytest.mark.parametrize("header", ["", "ab", "\u0394"])
def test_header_must_be_one_byte_character(header):
    with pytest.raises(ValueError):
        EventPacket(header, EventType.SYSTEM_STARTUP)


def test_packets_are_immutable():
    packet = ManualPacket("m", 1, 2, 3, 4, 5)
    with pytest.raises(dataclasses.FrozenInstanceError):
        packet.throttle = 10
    assert packet.throttle == 1
    assert packet.payload() == bytes((PacketType.MANUAL, ord("m"), 3))


def test_equal_fields_give_equal_packets():
    assert EventData8Packet("e", EventType.EXTRA, 7) == EventData8Packet(
        "e", EventType.EXTRA, 7
    )
    assert EventData8Packet("e", EventType.EXTRA, 7) != EventData8Packet(
        "e", EventType.EXTRA, 8
    )


def test_payload_type_byte_matches_class_type():
    packets = [
        EventData32Packet("e", EventType.EXTRA, 1),
        TempHumidPacket("t", 1, 2),
        BarometerPacket(-1, 0, 1),
    ]
    for packet in packets:
        assert packet.payload()[0] == packet.type