"""Batched, pooled writer of flight telemetry into an SQLite database."""

from __future__ import annotations

import logging
import sqlite3
import threading
import time
from dataclasses import dataclass
from typing import Optional, Tuple

from groundcontrol import timing
from groundcontrol.enums import EventType, PIDFeature
from groundcontrol.schema import (
    CREATE_TABLE_STATEMENTS,
    TRANSACTION_MAX_BATCH_SIZE,
    TRANSACTION_MAX_DELAY_MS,
    TRANSACTION_MIN_BATCH_SIZE,
    StatementType,
)
from groundcontrol.workqueue import WorkQueue

logger = logging.getLogger(__name__)

FREE_STATEMENTS_PER_TABLE = 30
PENDING_QUEUE_CAPACITY = 50

_IDLE_WAIT_S = 0.1
_LOOP_WAIT_S = 0.01
_UINT64_LIMIT = 1 << 64
_INT64_LIMIT = 1 << 63


@dataclass(frozen=True)
class _Row:
    table: StatementType
    values: Tuple[object, ...]


def _as_int64(value: int) -> int:
    if not 0 <= value < _UINT64_LIMIT:
        raise ValueError(f"event data must fit in 64 unsigned bits, got {value}")
    return value - _UINT64_LIMIT if value >= _INT64_LIMIT else value


class FlightDatabase:
    """Queues telemetry rows and writes them to SQLite in transactions.

    Each table has a fixed number of row slots; an insert fails (returns
    False) while all of a table's slots are waiting to be written.
    """

    def __init__(self, path: str) -> None:
        self._conn = sqlite3.connect(path, check_same_thread=False, isolation_level=None)
        try:
            self._conn.execute("PRAGMA journal_mode = WAL")
            self._conn.execute("PRAGMA synchronous = NORMAL")
            for sql in CREATE_TABLE_STATEMENTS:
                self._conn.execute(sql)
        except sqlite3.Error:
            self._conn.close()
            raise
        logger.info("Database schema created successfully")

        self._db_lock = threading.Lock()
        self._pool_lock = threading.Lock()
        self._pending: WorkQueue[_Row] = WorkQueue(PENDING_QUEUE_CAPACITY)
        self._free = {table: FREE_STATEMENTS_PER_TABLE for table in StatementType}
        self._last_trans = time.monotonic()
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._closed = False

    # Lifecycle

    def start(self) -> None:
        """Start the background loop that flushes queued rows."""
        if self._thread is not None and self._thread.is_alive():
            return
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Stop the background loop and close the database.

        Rows still queued are not written.
        """
        self._stop_event.set()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join()
            self._thread = None
            logger.info("Logging thread finished successfully.")
        with self._db_lock:
            if not self._closed:
                self._conn.close()
                self._closed = True

    def __enter__(self) -> "FlightDatabase":
        return self

    def __exit__(self, *args) -> None:
        self.stop()

    def _run(self) -> None:
        while not self._stop_event.is_set():
            if self._pending.empty():
                self._stop_event.wait(_IDLE_WAIT_S)
                continue
            elapsed_ms = (time.monotonic() - self._last_trans) * 1000
            if len(self._pending) > TRANSACTION_MIN_BATCH_SIZE or elapsed_ms > TRANSACTION_MAX_DELAY_MS:
                try:
                    self.execute_transaction()
                except sqlite3.Error as exc:
                    logger.warning("Transaction failed: %s", exc)
            self._stop_event.wait(_LOOP_WAIT_S)

    # Transactions

    def pending(self) -> int:
        """Number of rows queued and not yet written."""
        return len(self._pending)

    def execute_transaction(self) -> int:
        """Write up to one batch of queued rows in a single transaction.

        Returns the number of rows committed. On failure the transaction is
        rolled back, the rows written before the failing one are queued again,
        the failing row is dropped and the error is raised.
        """
        with self._db_lock:
            conn = self._conn
            conn.execute("BEGIN TRANSACTION")
            processed = []
            try:
                while not self._pending.empty() and len(processed) < TRANSACTION_MAX_BATCH_SIZE:
                    row = self._pending.get()
                    try:
                        conn.execute(row.table.insert_sql, row.values)
                    except sqlite3.Error:
                        self._release(row.table)
                        raise
                    processed.append(row)
                    self._last_trans = time.monotonic()
                conn.execute("COMMIT")
            except sqlite3.Error:
                try:
                    conn.execute("ROLLBACK")
                except sqlite3.Error:
                    pass
                for row in reversed(processed):
                    self._pending.put(row)
                raise
        for row in processed:
            self._release(row.table)
        return len(processed)

    # Row slots

    def _release(self, table: StatementType) -> None:
        with self._pool_lock:
            self._free[table] += 1

    def _queue(self, table: StatementType, values: Tuple[object, ...]) -> bool:
        with self._pool_lock:
            if self._free[table] == 0:
                logger.warning("no free %s statements", table.table_name)
                return False
            self._free[table] -= 1
        self._pending.put(_Row(table, values))
        return True

    # Inserts

    def insert_plane_state(self, pitch: float, roll: float, yaw: float) -> bool:
        return self._queue(
            StatementType.PLANE_STATE,
            (timing.timestamp(), float(pitch), float(roll), float(yaw)),
        )

    def insert_servo_data(
        self, throttle: int, elevator: int, rudder: int, left_aileron: int, right_aileron: int
    ) -> bool:
        return self._queue(
            StatementType.SERVO_DATA,
            (
                timing.timestamp(),
                int(throttle),
                int(elevator),
                int(rudder),
                int(left_aileron),
                int(right_aileron),
            ),
        )

    def insert_gps_data(
        self, latitude: float, longitude: float, altitude: float, distance: float
    ) -> bool:
        return self._queue(
            StatementType.GPS_DATA,
            (timing.timestamp(), float(latitude), float(longitude), float(altitude), float(distance)),
        )

    def insert_gps_env_data(
        self, heading: float, speed: float, satellites: int, signal_strength: int
    ) -> bool:
        return self._queue(
            StatementType.GPS_ENV_DATA,
            (timing.timestamp(), float(heading), float(speed), int(satellites), int(signal_strength)),
        )

    def insert_accel_data(self, accel_x: float, accel_y: float, accel_z: float) -> bool:
        return self._queue(
            StatementType.ACCEL_DATA,
            (timing.timestamp(), float(accel_x), float(accel_y), float(accel_z)),
        )

    def insert_gyro_data(self, gyro_x: float, gyro_y: float, gyro_z: float) -> bool:
        return self._queue(
            StatementType.GYRO_DATA,
            (timing.timestamp(), float(gyro_x), float(gyro_y), float(gyro_z)),
        )

    def insert_mag_data(self, mag_x: float, mag_y: float, mag_z: float) -> bool:
        return self._queue(
            StatementType.MAG_DATA,
            (timing.timestamp(), float(mag_x), float(mag_y), float(mag_z)),
        )

    def insert_baro_data(self, pressure: float, temperature: float, baro_altitude: float) -> bool:
        return self._queue(
            StatementType.BARO_DATA,
            (timing.timestamp(), float(pressure), float(temperature), float(baro_altitude)),
        )

    def insert_pid_data(self, feature: PIDFeature, kp: float, ki: float, kd: float) -> bool:
        return self._queue(
            StatementType.PID_DATA,
            (timing.timestamp(), int(PIDFeature(feature)), float(kp), float(ki), float(kd)),
        )

    def insert_event_log(self, event_type: EventType, timestamp: int, data: int) -> bool:
        return self._queue(
            StatementType.EVENT_LOG,
            (int(timestamp), int(EventType(event_type)), _as_int64(int(data))),
        )