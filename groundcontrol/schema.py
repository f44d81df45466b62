"""Flight-log table layout, insert statements and database file naming."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import IntEnum

DB_NAME_BASE = "flight_"
DB_FILE_TYPE = ".db"
DB_MAX_FILES = 25
DB_NAME = "dev.db"
MULTI_FILE_MODE = False

TRANSACTION_MAX_DELAY_MS = 1000
TRANSACTION_MIN_BATCH_SIZE = 10
TRANSACTION_MAX_BATCH_SIZE = 15
NUM_SQL_BINDED_STATEMENTS = 100
NUM_SQL_UNBINDED_STATEMENTS_EACH_TABLE = 10


@dataclass(frozen=True)
class Table:
    """One flight-log table: its columns in order and its primary key."""

    name: str
    columns: tuple[tuple[str, str], ...]
    primary_key: tuple[str, ...] = ("timestamp",)

    @property
    def create_sql(self) -> str:
        single_key = len(self.primary_key) == 1
        parts = [
            f"{column} {sql_type}"
            + (" PRIMARY KEY" if single_key and column == self.primary_key[0] else "")
            for column, sql_type in self.columns
        ]
        if not single_key:
            parts.append(f"PRIMARY KEY ({', '.join(self.primary_key)})")
        return f"CREATE TABLE {self.name} ({', '.join(parts)});"

    @property
    def insert_sql(self) -> str:
        placeholders = ", ".join("?" for _ in self.columns)
        return f"INSERT INTO {self.name} VALUES ({placeholders})"


def _timed(name: str, *columns: tuple[str, str], key: tuple[str, ...] = ("timestamp",)) -> Table:
    return Table(name, (("timestamp", "INTEGER"), *columns), key)


def _reals(*names: str) -> tuple[tuple[str, str], ...]:
    return tuple((name, "REAL") for name in names)


def _ints(*names: str) -> tuple[tuple[str, str], ...]:
    return tuple((name, "INTEGER") for name in names)


TABLES = (
    _timed("plane_state", *_reals("pitch", "roll", "yaw")),
    _timed(
        "servo_data",
        *_ints("throttle", "elevator", "rudder", "left_aileron", "right_aileron"),
    ),
    _timed("gps_data", *_reals("latitude", "longitude", "altitude", "distance")),
    _timed(
        "gps_env_data",
        *_reals("heading", "speed"),
        *_ints("satellites", "signal_strength"),
    ),
    _timed("accel_data", *_reals("accel_x", "accel_y", "accel_z")),
    _timed("gyro_data", *_reals("gyro_x", "gyro_y", "gyro_z")),
    _timed("mag_data", *_reals("mag_x", "mag_y", "mag_z")),
    _timed("baro_data", *_reals("pressure", "temperature", "calculated_altitude")),
    _timed(
        "pid_data",
        *_ints("PIDFeature"),
        *_reals("p", "i", "d"),
        key=("timestamp", "PIDFeature"),
    ),
    _timed(
        "event_log",
        *_ints("event_type", "event_data"),
        key=("timestamp", "event_type"),
    ),
)

NUM_SQL_DB_TABLES = len(TABLES)
TABLE_NAMES = tuple(table.name for table in TABLES)
INSERT_STATEMENTS = tuple(table.insert_sql for table in TABLES)
CREATE_TABLE_STATEMENTS = tuple(table.create_sql for table in TABLES)


class StatementType(IntEnum):
    """The flight-log tables, in schema order."""

    PLANE_STATE = 0
    SERVO_DATA = 1
    GPS_DATA = 2
    GPS_ENV_DATA = 3
    ACCEL_DATA = 4
    GYRO_DATA = 5
    MAG_DATA = 6
    BARO_DATA = 7
    PID_DATA = 8
    EVENT_LOG = 9

    @property
    def table(self) -> Table:
        return TABLES[self]

    @property
    def table_name(self) -> str:
        return TABLES[self].name

    @property
    def insert_sql(self) -> str:
        return TABLES[self].insert_sql

    @property
    def create_sql(self) -> str:
        return TABLES[self].create_sql


def next_unique_filename(directory: str = "") -> str:
    """The first ``flight_<n>.db`` in directory that does not yet exist.

    Raises FileExistsError when every one of the allowed names is taken.
    """
    for suffix in range(DB_MAX_FILES):
        filename = os.path.join(directory, f"{DB_NAME_BASE}{suffix}{DB_FILE_TYPE}")
        if not os.path.exists(filename):
            return filename
    raise FileExistsError(f"Unable to find an available filename in {directory!r}")


def database_filename(multi_file: bool = MULTI_FILE_MODE, directory: str = "") -> str:
    """The database file to log to: a fresh numbered file or the fixed name."""
    if multi_file:
        return next_unique_filename(directory)
    return os.path.join(directory, DB_NAME)