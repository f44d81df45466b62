import sqlite3
import time

import pytest

from groundcontrol.enums import EventType, PIDFeature
from groundcontrol.flightlog import EVENT_LOG_NULL_DATA, FlightLog


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "flight.db")


def _flush_and_read(log, path, sql):
    log.database.execute_transaction()
    log.stop()
    conn = sqlite3.connect(path)
    try:
        return conn.execute(sql).fetchall()
    finally:
        conn.close()


def test_plane_state_is_recorded_with_current_timestamp(db_path):
    log = FlightLog.open(db_path)
    before = int(time.time())
    assert log.insert_plane_state(1.5, -2.25, 3.0) is True
    rows = _flush_and_read(log, db_path, "SELECT * FROM plane_state")
    assert len(rows) == 1
    ts, pitch, roll, yaw = rows[0]
    assert before <= ts <= int(time.time())
    assert (pitch, roll, yaw) == (1.5, -2.25, 3.0)


def test_servo_data_stored_as_given(db_path):
    log = FlightLog.open(db_path)
    assert log.insert_servo_data(0, 90, 180, 45, 255)
    rows = _flush_and_read(log, db_path, "SELECT throttle, elevator, rudder, left_aileron, right_aileron FROM servo_data")
    assert rows == [(0, 90, 180, 45, 255)]


def test_gps_data_is_scaled(db_path):
    log = FlightLog.open(db_path)
    assert log.insert_gps_data(123456789, 987654321, 1234, 50)
    rows = _flush_and_read(log, db_path, "SELECT latitude, longitude, altitude, distance FROM gps_data")
    lat, lon, alt, dist = rows[0]
    assert lat == pytest.approx(12.3456789)
    assert lon == pytest.approx(98.7654321)
    assert alt == pytest.approx(123.4)
    assert dist == pytest.approx(5.0)


def test_gps_env_data_is_scaled(db_path):
    log = FlightLog.open(db_path)
    assert log.insert_gps_env_data(18000, 250, 7, -60)
    rows = _flush_and_read(log, db_path, "SELECT heading, speed, satellites, signal_strength FROM gps_env_data")
    heading, speed, sats, signal = rows[0]
    assert heading == pytest.approx(180.0)
    assert speed == pytest.approx(25.0)
    assert (sats, signal) == (7, -60)


@pytest.mark.parametrize(
    "method, table, columns",
    [
        ("insert_accel_data", "accel_data", "accel_x, accel_y, accel_z"),
        ("insert_gyro_data", "gyro_data", "gyro_x, gyro_y, gyro_z"),
        ("insert_mag_data", "mag_data", "mag_x, mag_y, mag_z"),
        ("insert_baro_data", "baro_data", "pressure, temperature, calculated_altitude"),
    ],
)
def test_centi_scaled_readings(db_path, method, table, columns):
    log = FlightLog.open(db_path)
    assert getattr(log, method)(150, -250, 0)
    rows = _flush_and_read(log, db_path, f"SELECT {columns} FROM {table}")
    x, y, z = rows[0]
    assert x == pytest.approx(1.5, rel=1e-6)
    assert y == pytest.approx(-2.5, rel=1e-6)
    assert z == 0.0


def test_pid_data_records_feature(db_path):
    log = FlightLog.open(db_path)
    assert log.insert_pid_data(PIDFeature.ROLL, 0.5, 0.25, 0.125)
    rows = _flush_and_read(log, db_path, "SELECT PIDFeature, p, i, d FROM pid_data")
    assert rows == [(int(PIDFeature.ROLL), 0.5, 0.25, 0.125)]


def test_event_with_explicit_timestamp_and_data(db_path):
    log = FlightLog.open(db_path)
    assert log.insert_event(EventType.CONTROLLER_CONNECTED, 7, 1000)
    rows = _flush_and_read(log, db_path, "SELECT * FROM event_log")
    assert rows == [(1000, int(EventType.CONTROLLER_CONNECTED), 7)]


def test_event_defaults_to_null_data_and_now(db_path):
    log = FlightLog.open(db_path)
    before = int(time.time())
    assert log.insert_event(EventType.SYSTEM_STARTUP)
    rows = _flush_and_read(log, db_path, "SELECT * FROM event_log")
    ts, event, data = rows[0]
    assert before <= ts <= int(time.time())
    assert event == int(EventType.SYSTEM_STARTUP)
    assert data == EVENT_LOG_NULL_DATA


def test_servo_out_of_range_rejected(db_path):
    log = FlightLog.open(db_path)
    try:
        with pytest.raises(ValueError):
            log.insert_servo_data(256, 0, 0, 0, 0)
        assert log.database.pending() == 0
    finally:
        log.stop()


def test_accel_out_of_int16_rejected(db_path):
    log = FlightLog.open(db_path)
    try:
        with pytest.raises(ValueError):
            log.insert_accel_data(40000, 0, 0)
    finally:
        log.stop()


def test_event_negative_data_rejected(db_path):
    log = FlightLog.open(db_path)
    try:
        with pytest.raises(ValueError):
            log.insert_event(EventType.EXTRA, -1)
    finally:
        log.stop()


def test_background_writer_flushes(db_path):
    log = FlightLog.open(db_path)
    log.start()
    assert log.insert_event(EventType.DB_STARTED, 0, 5)
    deadline = time.monotonic() + 5
    while log.database.pending() and time.monotonic() < deadline:
        time.sleep(0.05)
    assert log.database.pending() == 0
    log.stop()
    conn = sqlite3.connect(db_path)
    try:
        rows = conn.execute("SELECT timestamp, event_type FROM event_log").fetchall()
    finally:
        conn.close()
    assert rows == [(5, int(EventType.DB_STARTED))]