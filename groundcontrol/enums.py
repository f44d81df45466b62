"""Shared enumerations, button masks and small value records."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, IntFlag

NUM_FEATS = 5
PRE_RX_THRESHOLD = 10
ATC_RADIUS_METERS_SQUARED = 10000
ATC_RADIUS_METERS = 100
PAYLOAD_SIZE = 24
NUM_PID_FEATURES = 9

INT16_MIN = -32768
INT16_MAX = 32767
UINT16_MAX = 0xFFFF
UINT32_MAX = 0xFFFFFFFF


class ServiceState(IntEnum):
    DISABLED = 0
    INACTIVE = 1
    ACTIVE = 2
    STARTED = 3
    STOPPED = 4
    IN_STARTUP = 5
    IN_SHUTDOWN = 6
    IN_RECOVERY = 7


class Flaps(IntEnum):
    DEGREES_0 = 0
    DEGREES_5 = 1
    DEGREES_10 = 2
    DEGREES_15 = 3
    DEGREES_20 = 4
    DEGREES_25 = 5
    DEGREES_30 = 6
    DEGREES_35 = 7
    DEGREES_40 = 8
    DEGREES_45 = 9
    DEGREES_50 = 10
    DEGREES_55 = 11
    DEGREES_60 = 12
    DEGREES_75 = 13
    DEGREES_90 = 14


class ControlMode(IntEnum):
    AUTO = 0
    MANUAL = 1
    ASSIST = 2
    EMERGENCY = 3
    PAIRING = 4
    HOLDING = 5
    TAXI = 6
    RECOVERY = 7


class TypeLevel(IntEnum):
    GROUND = 0
    OK = 1
    WARNING_LOW = 2
    DANGER_LOW = 3
    WARNING_HIGH = 4
    DANGER_HIGH = 5


class RollLevel(IntEnum):
    OK = 0
    LEFT_LOW = 1
    LEFT_MID = 2
    LEFT_HIGH = 3
    LEFT_WARNING = 4
    LEFT_DANGER = 5
    RIGHT_LOW = 6
    RIGHT_MID = 7
    RIGHT_HIGH = 8
    RIGHT_WARNING = 9
    RIGHT_DANGER = 10


class EventType(IntEnum):
    # System events
    SYSTEM_STARTUP = 0
    SYSTEM_SHUTDOWN = 1
    SYSTEM_RESTART = 2
    KILL_PILOT = 3
    FLIGHT_TIME_START_SET_TRUE = 4
    FLIGHT_TIME_START_SET_FALSE = 5
    FLIGHT_TIME_END_SET_TRUE = 6
    FLIGHT_TIME_END_SET_FALSE = 7
    FLIGHT_START_TRUE = 8
    FLIGHT_START_FALSE = 9

    # Control mode requests
    CONTROL_MODE_CHANGE_AUTO = 10
    CONTROL_MODE_CHANGE_ASSIST = 11
    CONTROL_MODE_CHANGE_MANUAL = 12
    CONTROL_MODE_CHANGE_HOLDING = 13
    CONTROL_MODE_CHANGE_TAXI = 14
    CONTROL_MODE_CHANGE_EMERGENCY = 15
    CONTROL_MODE_CHANGE_RECOVERY = 16
    CONTROL_MODE_CHANGE_PAIRING = 17
    # Control mode acceptances
    CONTROL_MODE_CHANGE_AUTO_ACCEPT = 18
    CONTROL_MODE_CHANGE_ASSIST_ACCEPT = 19
    CONTROL_MODE_CHANGE_MANUAL_ACCEPT = 20
    CONTROL_MODE_CHANGE_HOLDING_ACCEPT = 21
    CONTROL_MODE_CHANGE_TAXI_ACCEPT = 22
    CONTROL_MODE_CHANGE_EMERGENCY_ACCEPT = 23
    CONTROL_MODE_CHANGE_RECOVERY_ACCEPT = 24
    CONTROL_MODE_CHANGE_PAIRING_ACCEPT = 25

    # Airplane status events
    AIRPLANE_CONNECTED_TRUE = 26
    AIRPLANE_CONNECTED_FALSE = 27
    PAIRED_FALSE = 28
    PAIRED_TRUE = 29
    PAIRED_FAIL = 30
    THROTTLE_LOCK_DATA_CHANGE = 31
    THROTTLE_LOCK_FALSE = 32
    THROTTLE_LOCK_TRUE = 33
    WITHIN_RANGE_FALSE = 34
    WITHIN_RANGE_TRUE = 35
    APPROACHING_BOUNDARY_FALSE = 36
    APPROACHING_BOUNDARY_TRUE = 37
    RETURNING_HOME_FALSE = 38
    RETURNING_HOME_TRUE = 39
    IS_FLYING_FALSE = 40
    IS_FLYING_TRUE = 41
    AIRPLANE_GPS_ACTIVE_FALSE = 42
    AIRPLANE_GPS_ACTIVE_TRUE = 43
    AIRPLANE_GPS_FAIL_FALSE = 44
    AIRPLANE_GPS_FAIL_TRUE = 45
    ATC_GPS_ACTIVE_FALSE = 46
    ATC_GPS_ACTIVE_TRUE = 47
    ATC_GPS_FAIL_FALSE = 48
    ATC_GPS_FAIL_TRUE = 49
    IMU_ACTIVE_FALSE = 50
    IMU_ACTIVE_TRUE = 51
    IMU_FAIL_FALSE = 52
    IMU_FAIL_TRUE = 53
    FIXED_ALTITUDE_DATA_CHANGE = 54
    FIXED_ALTITUDE_FALSE = 55
    FIXED_ALTITUDE_TRUE = 56
    FIXED_HEADING_DATA_CHANGE = 57
    FIXED_HEADING_FALSE = 58
    FIXED_HEADING_TRUE = 59
    FIXED_SPEED_DATA_CHANGE = 60
    FIXED_SPEED_FALSE = 61
    FIXED_SPEED_TRUE = 62

    # Airplane events
    ENGINE_ON_TRUE = 63
    ENGINE_ON_FALSE = 64
    ENGINE_FAIL_FALSE = 65
    ENGINE_FAIL_TRUE = 66

    # Flight events
    ALTITUDE_GROUND = 67
    ALTITUDE_OK = 68
    ALTITUDE_WARNING_LOW = 69
    ALTITUDE_LOW = 70
    ALTITUDE_HIGH = 71
    ALTITUDE_WARNING_HIGH = 72
    PITCH_GROUND = 73
    PITCH_OK = 74
    PITCH_WARNING_LOW = 75
    PITCH_LOW = 76
    PITCH_HIGH = 77
    PITCH_WARNING_HIGH = 78
    ROLL_OK = 79
    ROLL_LEFT_LOW = 80
    ROLL_LEFT_MID = 81
    ROLL_LEFT_HIGH = 82
    ROLL_LEFT_WARNING = 83
    ROLL_LEFT_DANGER = 84
    ROLL_RIGHT_LOW = 85
    ROLL_RIGHT_MID = 86
    ROLL_RIGHT_HIGH = 87
    ROLL_RIGHT_WARNING = 88
    ROLL_RIGHT_DANGER = 89
    AIR_SPEED_GROUND = 90
    AIR_SPEED_OK = 91
    AIR_SPEED_WARNING_LOW = 92
    AIR_SPEED_LOW = 93
    AIR_SPEED_HIGH = 94
    AIR_SPEED_WARNING_HIGH = 95
    ENGINE_STALL_FALSE = 96
    ENGINE_STALL_TRUE = 97
    MOTOR_SPINNING_TRUE = 98
    MOTOR_SPINNING_FALSE = 99

    # Flight plan events
    WAYPOINT_SET_FALSE = 100
    WAYPOINT_SET_TRUE = 101
    WAYPOINT_ENROUTE_TRUE = 102
    WAYPOINT_ENROUTE_FALSE = 103
    WAYPOINT_CIRCLE = 104
    WAYPOINT_DATA_UPDATE = 105

    # Flight phase events
    FLIGHT_PHASE_CHANGE_NONE = 106
    FLIGHT_PHASE_CHANGE_INIT = 107
    FLIGHT_PHASE_CHANGE_TAXI_TO_RUNWAY = 108
    FLIGHT_PHASE_CHANGE_PREFLIGHT_CHECKS = 109
    FLIGHT_PHASE_CHANGE_TAKEOFF_ROLL = 110
    FLIGHT_PHASE_CHANGE_TAKEOFF_ASCEND = 111
    FLIGHT_PHASE_CHANGE_CLIMB = 112
    FLIGHT_PHASE_CHANGE_CRUISE = 113
    FLIGHT_PHASE_CHANGE_DESCENT = 114
    FLIGHT_PHASE_CHANGE_ALIGN_APPROACH = 115
    FLIGHT_PHASE_CHANGE_FINAL_APPROACH = 116
    FLIGHT_PHASE_CHANGE_FLARE = 117
    FLIGHT_PHASE_CHANGE_TOUCHDOWN = 118
    FLIGHT_PHASE_CHANGE_ROLL_OUT = 119
    FLIGHT_PHASE_CHANGE_GO_AROUND = 120
    FLIGHT_PHASE_CHANGE_HOLDING_PATTERN = 121
    FLIGHT_PHASE_CHANGE_EMERGENCY_LANDING = 122
    FLIGHT_PHASE_CHANGE_COMPLETE_FLIGHT = 123

    # Diagnostics
    DB_STARTED = 124
    DB_STOPPED = 125
    DB_LOOPED = 126
    EXTRA = 127
    DB_CREATED = 128
    RF_RX_LOOPED = 129
    RF_RX_FAILED_TO_START = 130
    RF_TX_FAILED_TO_START = 131

    # Service start and stop
    RF_RX_START = 132
    RF_RX_STOP = 133
    RF_TX_START = 134
    RF_TX_STOP = 135
    ATC_START = 136
    ATC_STOP = 137
    LOGGER_START = 138
    LOGGER_STOP = 139
    PROCESS_START = 140
    PROCESS_STOP = 141
    DM_INSERT_ERROR = 142

    # Controller events
    CONTROLLER_CONNECTED = 143
    CONTROLLER_DISCONNECTED = 144
    CONTROLLER_CLICKED = 145

    # Pairing handshake
    PAIR_ATC_REQUEST = 150
    PAIR_ATC_REQUEST_ACK = 151
    PAIR_ATC_REQUEST_OK = 152


class PIDFeature(IntEnum):
    PITCH = 0
    ROLL = 1
    YAW = 2
    HEADING = 3
    ALTITUDE = 4
    AIR_SPEED = 5
    GROUND_SPEED = 6
    VERTICAL_SPEED = 7
    DISTANCE = 8


class FlightPhase(IntEnum):
    NONE = 0
    INIT = 1
    TAXI_TO_RUNWAY = 2
    PREFLIGHT_CHECKS = 3
    TAKEOFF_ROLL = 4
    TAKEOFF_ASCEND = 5
    CLIMB = 6
    CRUISE = 7
    DESCENT = 8
    ALIGN_APPROACH = 9
    FINAL_APPROACH = 10
    FLARE = 11
    TOUCHDOWN = 12
    ROLL_OUT = 13
    GO_AROUND = 14
    HOLDING_PATTERN = 15
    EMERGENCY_LANDING = 16
    COMPLETE_FLIGHT = 17


class FlightManeuver(IntEnum):
    STRAIGHT_AND_LEVEL = 0
    CLIMB = 1
    DESCENT = 2
    LEVEL_TURN_LEFT = 3
    LEVEL_TURN_RIGHT = 4
    SHALLOW_TURN_LEFT = 5
    SHALLOW_TURN_RIGHT = 6
    MEDIUM_TURN_LEFT = 7
    MEDIUM_TURN_RIGHT = 8
    CLIMBING_TURN_LEFT = 9
    CLIMBING_TURN_RIGHT = 10
    DESCENDING_TURN_LEFT = 11
    DESCENDING_TURN_RIGHT = 12
    FIGURE_EIGHT = 13
    S_TURNS = 14
    RECTANGULAR_COURSE = 15
    CIRCLE_AROUND_POINT = 16
    SLOW_FLIGHT = 17
    STALL_RECOVERY = 18
    STRAIGHT_IN_APPROACH = 19
    CROSSWIND_APPROACH = 20
    BASE_TO_FINAL_TURN = 21
    GO_AROUND = 22
    ENGINE_OUT_GLIDE = 23
    ALIGN_WITH_HEADING = 24
    ALIGN_WITH_RUNWAY = 25
    INTERCEPT_COURSE = 26
    TOUCH_AND_GO = 27
    LOW_PASS = 28
    HOLDING_PATTERN = 29
    LOOP = 30
    BARREL_ROLL = 31
    TRIM_FLIGHT = 32
    ALTITUDE_HOLD = 33
    HEADING_HOLD = 34
    RETURN_TO_HOME = 35
    WAYPOINT_NAVIGATION = 36
    TAKEOFF = 37
    LANDING = 38


class Button(IntFlag):
    """Controller button masks, as numbered by the game-controller layer.

    Several physical buttons share a bit: L2 is an alias of SHARE and R2
    of the bit after it, matching the controller's own numbering.
    """

    NONE = 0
    CROSS = 1 << 0
    CIRCLE = 1 << 1
    SQUARE = 1 << 2
    TRIANGLE = 1 << 3
    SHARE = 1 << 4
    R2 = 1 << 5
    OPTIONS = 1 << 6
    L3 = 1 << 7
    R3 = 1 << 8
    L1 = 1 << 9
    R1 = 1 << 10
    PS = 1 << 12
    TOUCHPAD = 1 << 13
    MUTE = 1 << 14
    L2 = 1 << 4


NULL_BUTTONS = Button.NONE


def _check_range(name: str, value: int, low: int, high: int) -> None:
    if not low <= value <= high:
        raise ValueError(f"{name} must be in [{low}, {high}], got {value}")


@dataclass(frozen=True)
class GPSCoordinate:
    """A position: latitude and longitude scaled by 1e7, altitude by 1e2."""

    latitude: int
    longitude: int
    altitude_feet: int

    def __post_init__(self) -> None:
        _check_range("latitude", self.latitude, 0, UINT32_MAX)
        _check_range("longitude", self.longitude, 0, UINT32_MAX)
        _check_range("altitude_feet", self.altitude_feet, 0, UINT16_MAX)


@dataclass(frozen=True)
class ControllerInput:
    """Raw stick and trigger readings from the game controller."""

    raw_throttle: int = 0
    raw_elevator: int = 0
    raw_rudder: int = 0
    raw_right_x: int = 0
    raw_right_y: int = 0

    def __post_init__(self) -> None:
        _check_range("raw_throttle", self.raw_throttle, 0, INT16_MAX)
        for name in ("raw_elevator", "raw_rudder", "raw_right_x", "raw_right_y"):
            _check_range(name, getattr(self, name), INT16_MIN, INT16_MAX)


@dataclass(frozen=True)
class ControllerOutput:
    """Corrected control-surface values derived from controller input."""

    fixed_throttle: int = 0
    fixed_elevator: int = 0
    fixed_rudder: int = 0
    fixed_left_aileron: int = 0
    fixed_right_aileron: int = 0

    def __post_init__(self) -> None:
        _check_range("fixed_throttle", self.fixed_throttle, 0, INT16_MAX)
        for name in (
            "fixed_elevator",
            "fixed_rudder",
            "fixed_left_aileron",
            "fixed_right_aileron",
        ):
            _check_range(name, getattr(self, name), INT16_MIN, INT16_MAX)