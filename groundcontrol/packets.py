"""Radio packets exchanged with the aircraft and their pipe assignment."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import ClassVar, Mapping, Optional, Tuple

from groundcontrol.enums import EventType, PIDFeature

SOH = 0x01
NULL_CHAR = 0x00
STX = 0x02
ETX = 0x03
EOT = 0x04
RECSEP = 0x1E

_UINT8 = (0, 0xFF)
_INT16 = (-0x8000, 0x7FFF)
_UINT16 = (0, 0xFFFF)
_INT32 = (-0x80000000, 0x7FFFFFFF)
_UINT32 = (0, 0xFFFFFFFF)
_UINT64 = (0, 0xFFFFFFFFFFFFFFFF)

_PAYLOAD_PREFIX_MARK = 3


class PacketType(IntEnum):
    BASE = 0
    PID = 1
    AUTO = 2
    ASSIST = 3
    MANUAL = 4
    ACCEL = 5
    GYRO = 6
    MAGNET = 7
    GPS = 8
    GPS_ENV = 9
    BAROMETER = 10
    TEMP_HUMID = 11
    EVENT = 12
    EVENT_DATA8 = 13
    EVENT_DATA16 = 14
    EVENT_DATA32 = 15
    EVENT_DATA64 = 16
    EVENT_TIMED = 17
    EVENT_TIMED_DATA = 18


def _check_int(name: str, value: object, bounds: Tuple[int, int]) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    low, high = bounds
    if not low <= value <= high:
        raise ValueError(f"{name} must be in [{low}, {high}], got {value}")


class Packet:
    """Base of all packets: a type, a one-character header and a payload."""

    type: ClassVar[PacketType] = PacketType.BASE
    _ranges: ClassVar[Mapping[str, Tuple[int, int]]] = {}
    _enums: ClassVar[Mapping[str, type]] = {}
    _floats: ClassVar[Tuple[str, ...]] = ()

    header: str

    def __post_init__(self) -> None:
        header = self.header
        if not isinstance(header, str) or len(header) != 1 or ord(header) > 0xFF:
            raise ValueError(f"header must be a single 8-bit character, got {header!r}")
        for name, enum_type in self._enums.items():
            object.__setattr__(self, name, enum_type(getattr(self, name)))
        for name, bounds in self._ranges.items():
            _check_int(name, getattr(self, name), bounds)
        for name in self._floats:
            object.__setattr__(self, name, float(getattr(self, name)))

    def payload(self) -> bytes:
        """The payload prefix: packet type, header byte and marker."""
        return bytes((self.type, ord(self.header), _PAYLOAD_PREFIX_MARK))


@dataclass(frozen=True)
class _ControlSurfacePacket(Packet):
    header: str
    throttle: int
    elevator: int
    rudder: int
    left_aileron: int
    right_aileron: int

    _ranges: ClassVar[Mapping[str, Tuple[int, int]]] = {
        "throttle": _UINT8,
        "elevator": _UINT8,
        "rudder": _UINT8,
        "left_aileron": _UINT8,
        "right_aileron": _UINT8,
    }


@dataclass(frozen=True)
class AssistPacket(_ControlSurfacePacket):
    type: ClassVar[PacketType] = PacketType.ASSIST


@dataclass(frozen=True)
class AutoPacket(_ControlSurfacePacket):
    type: ClassVar[PacketType] = PacketType.AUTO


@dataclass(frozen=True)
class ManualPacket(_ControlSurfacePacket):
    type: ClassVar[PacketType] = PacketType.MANUAL


_XYZ_RANGES = {"x": _INT16, "y": _INT16, "z": _INT16}


@dataclass(frozen=True)
class AccelPacket(Packet):
    """Accelerometer reading, each axis scaled by 100."""

    x: int
    y: int
    z: int
    header: str = field(default="\x00", kw_only=True)

    type: ClassVar[PacketType] = PacketType.ACCEL
    _ranges: ClassVar[Mapping[str, Tuple[int, int]]] = _XYZ_RANGES


@dataclass(frozen=True)
class _AxesPacket(Packet):
    header: str
    x: int
    y: int
    z: int

    _ranges: ClassVar[Mapping[str, Tuple[int, int]]] = _XYZ_RANGES


@dataclass(frozen=True)
class GyroPacket(_AxesPacket):
    """Gyroscope reading, each axis scaled by 100."""

    type: ClassVar[PacketType] = PacketType.GYRO


@dataclass(frozen=True)
class MagnetPacket(_AxesPacket):
    """Magnetometer reading, each axis scaled by 100."""

    type: ClassVar[PacketType] = PacketType.MAGNET


@dataclass(frozen=True)
class BarometerPacket(Packet):
    pressure: int
    temperature: int
    baro_altitude: int
    header: str = field(default="\x00", kw_only=True)

    type: ClassVar[PacketType] = PacketType.BAROMETER
    _ranges: ClassVar[Mapping[str, Tuple[int, int]]] = {
        "pressure": _INT16,
        "temperature": _INT16,
        "baro_altitude": _INT16,
    }


@dataclass(frozen=True)
class TempHumidPacket(Packet):
    header: str
    temp: int
    humid: int

    type: ClassVar[PacketType] = PacketType.TEMP_HUMID
    _ranges: ClassVar[Mapping[str, Tuple[int, int]]] = {
        "temp": _UINT16,
        "humid": _UINT16,
    }


@dataclass(frozen=True)
class GPSPacket(Packet):
    """Position: latitude and longitude in degrees * 1e7, altitude in metres."""

    header: str
    lat: int
    lon: int
    alt: int

    type: ClassVar[PacketType] = PacketType.GPS
    _ranges: ClassVar[Mapping[str, Tuple[int, int]]] = {
        "lat": _INT32,
        "lon": _INT32,
        "alt": _INT16,
    }


@dataclass(frozen=True)
class GPSEnvPacket(Packet):
    header: str
    heading: int
    speed: int
    sats: int
    signal_strength: int

    type: ClassVar[PacketType] = PacketType.GPS_ENV
    _ranges: ClassVar[Mapping[str, Tuple[int, int]]] = {
        "heading": _UINT16,
        "speed": _UINT16,
        "sats": _UINT8,
        "signal_strength": _UINT8,
    }


@dataclass(frozen=True)
class PIDPacket(Packet):
    header: str
    feature_id: PIDFeature
    kp: float
    ki: float
    kd: float

    type: ClassVar[PacketType] = PacketType.PID
    _enums: ClassVar[Mapping[str, type]] = {"feature_id": PIDFeature}
    _floats: ClassVar[Tuple[str, ...]] = ("kp", "ki", "kd")


_EVENT_ENUMS: Mapping[str, type] = {"event_type": EventType}


@dataclass(frozen=True)
class EventPacket(Packet):
    header: str
    event_type: EventType

    type: ClassVar[PacketType] = PacketType.EVENT
    _enums: ClassVar[Mapping[str, type]] = _EVENT_ENUMS


@dataclass(frozen=True)
class EventData8Packet(Packet):
    header: str
    event_type: EventType
    data: int

    type: ClassVar[PacketType] = PacketType.EVENT_DATA8
    _enums: ClassVar[Mapping[str, type]] = _EVENT_ENUMS
    _ranges: ClassVar[Mapping[str, Tuple[int, int]]] = {"data": _UINT8}


@dataclass(frozen=True)
class EventData16Packet(Packet):
    header: str
    event_type: EventType
    data: int

    type: ClassVar[PacketType] = PacketType.EVENT_DATA16
    _enums: ClassVar[Mapping[str, type]] = _EVENT_ENUMS
    _ranges: ClassVar[Mapping[str, Tuple[int, int]]] = {"data": _UINT16}


@dataclass(frozen=True)
class EventData32Packet(Packet):
    header: str
    event_type: EventType
    data: int

    type: ClassVar[PacketType] = PacketType.EVENT_DATA32
    _enums: ClassVar[Mapping[str, type]] = _EVENT_ENUMS
    _ranges: ClassVar[Mapping[str, Tuple[int, int]]] = {"data": _UINT32}


@dataclass(frozen=True)
class EventData64Packet(Packet):
    header: str
    event_type: EventType
    data: int

    type: ClassVar[PacketType] = PacketType.EVENT_DATA64
    _enums: ClassVar[Mapping[str, type]] = _EVENT_ENUMS
    _ranges: ClassVar[Mapping[str, Tuple[int, int]]] = {"data": _UINT64}


@dataclass(frozen=True)
class EventTimedPacket(Packet):
    header: str
    event_type: EventType
    timestamp: int

    type: ClassVar[PacketType] = PacketType.EVENT_TIMED
    _enums: ClassVar[Mapping[str, type]] = _EVENT_ENUMS
    _ranges: ClassVar[Mapping[str, Tuple[int, int]]] = {"timestamp": _UINT32}


@dataclass(frozen=True)
class EventTimedDataPacket(Packet):
    header: str
    event_type: EventType
    timestamp: int
    data: int

    type: ClassVar[PacketType] = PacketType.EVENT_TIMED_DATA
    _enums: ClassVar[Mapping[str, type]] = _EVENT_ENUMS
    _ranges: ClassVar[Mapping[str, Tuple[int, int]]] = {
        "timestamp": _UINT32,
        "data": _UINT8,
    }


_PIPE_BY_TYPE: Mapping[PacketType, int] = {
    PacketType.EVENT: 0,
    PacketType.EVENT_DATA8: 0,
    PacketType.EVENT_DATA16: 0,
    PacketType.EVENT_DATA32: 0,
    PacketType.EVENT_DATA64: 0,
    PacketType.EVENT_TIMED: 0,
    PacketType.AUTO: 1,
    PacketType.ASSIST: 2,
    PacketType.MANUAL: 2,
    PacketType.ACCEL: 3,
    PacketType.GYRO: 3,
    PacketType.MAGNET: 3,
    PacketType.GPS: 4,
    PacketType.GPS_ENV: 4,
    PacketType.BAROMETER: 5,
    PacketType.TEMP_HUMID: 5,
}


def pipe_for(packet: Packet) -> Optional[int]:
    """The radio pipe a packet travels on, or None if it has no pipe."""
    return _PIPE_BY_TYPE.get(packet.type)