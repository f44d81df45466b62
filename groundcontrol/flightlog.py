"""Unit-converting front end that feeds raw telemetry into the flight database."""

from __future__ import annotations

import struct
from typing import Optional

from groundcontrol import timing
from groundcontrol.database import FlightDatabase
from groundcontrol.enums import EventType, PIDFeature

EVENT_LOG_NULL_DATA = 0

_UINT8 = (0, 0xFF)
_INT8 = (-0x80, 0x7F)
_INT16 = (-0x8000, 0x7FFF)
_UINT16 = (0, 0xFFFF)
_UINT32 = (0, 0xFFFFFFFF)
_UINT64 = (0, 0xFFFFFFFFFFFFFFFF)

_CENTI = 0.01


def _check(name: str, value: int, bounds: tuple) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    low, high = bounds
    if not low <= value <= high:
        raise ValueError(f"{name} must be in [{low}, {high}], got {value}")
    return value


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def _centi_f32(name: str, value: int) -> float:
    """Scale a signed 16-bit reading by 0.01 in single precision."""
    _check(name, value, _INT16)
    return _f32(_f32(float(value)) * _f32(_CENTI))


class FlightLog:
    """Accepts telemetry in wire units and records it in engineering units."""

    def __init__(self, database: FlightDatabase) -> None:
        self.database = database

    @classmethod
    def open(cls, path: str) -> "FlightLog":
        """Create a new database at path and wrap it."""
        return cls(FlightDatabase(path))

    def start(self) -> None:
        """Start writing queued records in the background."""
        self.database.start()

    def stop(self) -> None:
        """Stop the background writer and close the database."""
        self.database.stop()

    # Flight data

    def insert_plane_state(self, pitch: float, roll: float, yaw: float) -> bool:
        return self.database.insert_plane_state(pitch, roll, yaw)

    def insert_servo_data(
        self, throttle: int, elevator: int, rudder: int, left_aileron: int, right_aileron: int
    ) -> bool:
        return self.database.insert_servo_data(
            _check("throttle", throttle, _UINT8),
            _check("elevator", elevator, _UINT8),
            _check("rudder", rudder, _UINT8),
            _check("left_aileron", left_aileron, _UINT8),
            _check("right_aileron", right_aileron, _UINT8),
        )

    def insert_gps_data(
        self, latitude: int, longitude: int, altitude: int, distance_meters: int
    ) -> bool:
        """Latitude and longitude arrive scaled by 1e7, altitude and distance by 10."""
        return self.database.insert_gps_data(
            _check("latitude", latitude, _UINT32) * 1e-7,
            _check("longitude", longitude, _UINT32) * 1e-7,
            _check("altitude", altitude, _UINT16) * 1e-1,
            _check("distance_meters", distance_meters, _UINT16) * 1e-1,
        )

    def insert_gps_env_data(
        self, heading: int, speed: int, satellites: int, signal_strength: int
    ) -> bool:
        """Heading arrives scaled by 100, speed by 10."""
        return self.database.insert_gps_env_data(
            _check("heading", heading, _UINT16) * 1e-2,
            _check("speed", speed, _UINT16) * 1e-1,
            _check("satellites", satellites, _UINT8),
            _check("signal_strength", signal_strength, _INT8),
        )

    def insert_accel_data(self, accel_x: int, accel_y: int, accel_z: int) -> bool:
        return self.database.insert_accel_data(
            _centi_f32("accel_x", accel_x),
            _centi_f32("accel_y", accel_y),
            _centi_f32("accel_z", accel_z),
        )

    def insert_gyro_data(self, gyro_x: int, gyro_y: int, gyro_z: int) -> bool:
        return self.database.insert_gyro_data(
            _centi_f32("gyro_x", gyro_x),
            _centi_f32("gyro_y", gyro_y),
            _centi_f32("gyro_z", gyro_z),
        )

    def insert_mag_data(self, mag_x: int, mag_y: int, mag_z: int) -> bool:
        return self.database.insert_mag_data(
            _centi_f32("mag_x", mag_x),
            _centi_f32("mag_y", mag_y),
            _centi_f32("mag_z", mag_z),
        )

    def insert_baro_data(self, pressure: int, temperature: int, baro_altitude: int) -> bool:
        return self.database.insert_baro_data(
            _centi_f32("pressure", pressure),
            _centi_f32("temperature", temperature),
            _centi_f32("baro_altitude", baro_altitude),
        )

    def insert_pid_data(self, feature: PIDFeature, kp: float, ki: float, kd: float) -> bool:
        return self.database.insert_pid_data(feature, kp, ki, kd)

    # Events

    def insert_event(
        self,
        event_type: EventType,
        data: int = EVENT_LOG_NULL_DATA,
        timestamp: Optional[int] = None,
    ) -> bool:
        """Record an event; the timestamp defaults to the current time."""
        _check("data", data, _UINT64)
        if timestamp is None:
            timestamp = timing.timestamp()
        else:
            _check("timestamp", timestamp, _UINT32)
        return self.database.insert_event_log(event_type, timestamp, data)