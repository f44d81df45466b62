"""Shared state of the ground station and of the aircraft it controls."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from groundcontrol.enums import (
    NUM_FEATS,
    ControlMode,
    FlightPhase,
    GPSCoordinate,
    RollLevel,
    TypeLevel,
)


@dataclass
class Session:
    """Flags, positions and flight parameters used by several services."""

    # Database
    sql_finalized: bool = False
    sql_closed: bool = False

    # General
    program_finished: bool = False
    quit_flag: bool = False
    logger_started: bool = False

    # Service active
    atc_active: bool = False
    ctlr_active: bool = False
    logger_active: bool = False
    rf_rx_active: bool = False
    rf_tx_active: bool = False
    process_active: bool = False

    # Service loop active
    ctlr_loop_active: bool = False
    logger_loop_active: bool = False
    rf_rx_loop_active: bool = False
    rf_tx_loop_active: bool = False
    process_loop_active: bool = False

    # Shutdown in progress
    atc_shtdwn: bool = False
    ctlr_shtdwn: bool = False
    logger_shtdwn: bool = False
    rf_rx_shtdwn: bool = False
    rf_tx_shtdwn: bool = False
    process_shtdwn: bool = False

    # Service finished
    atc_finished: bool = False
    ctlr_finished: bool = False
    logger_finished: bool = False
    rf_rx_finished: bool = False
    rf_tx_finished: bool = False
    process_finished: bool = False

    # Locations
    atc_gps: Optional[GPSCoordinate] = None
    plane_gps: Optional[GPSCoordinate] = None
    atc_gps_alt: int = 0
    atc_gps_lat: float = 0.0
    atc_gps_lon: float = 0.0
    calc_atc_gps_lat: float = 0.0
    calc_atc_gps_lon: float = 0.0
    plane_gps_alt: int = 0
    plane_gps_lat: float = 0.0
    plane_gps_lon: float = 0.0

    # Control surfaces
    rudder_val: int = 0
    aileron_left_val: int = 0
    aileron_right_val: int = 0
    elevator_val: int = 0
    throttle_val: int = 0
    throttle_lock_val: int = 0
    servo_defaults: Tuple[int, ...] = (0,) * NUM_FEATS

    # Airplane status
    plane_altitude_level: TypeLevel = TypeLevel.GROUND
    plane_pitch_level: TypeLevel = TypeLevel.GROUND
    plane_air_speed_level: TypeLevel = TypeLevel.GROUND
    plane_roll_level: RollLevel = RollLevel.OK
    airplane_active_flight_phase: FlightPhase = FlightPhase.NONE
    control_mode: ControlMode = ControlMode.PAIRING
    throttle_lock: bool = False
    within_range: bool = False
    approaching_boundary: bool = False
    returning_home: bool = False
    is_waypoint_set: bool = False
    is_enroute_to_waypoint: bool = False
    is_circle_waypoint: bool = False
    imu_active: bool = False
    imu_fail: bool = False
    is_flying: bool = False
    airplane_gps_active: bool = False
    airplane_gps_fail: bool = False
    atc_gps_active: bool = False
    atc_gps_fail: bool = False
    engine_active: bool = False
    engine_fail: bool = False
    engine_stall: bool = False
    is_motor_spinning: bool = False
    airplane_current_gps_heading: int = 0
    airplane_current_gps_speed: int = 0

    # Flight parameters
    flight_start_time: Optional[float] = None
    flight_time_start: int = 0
    flight_time_end: int = 0
    fixed_plane_heading: int = 0
    fixed_plane_speed: int = 0
    fixed_plane_altitude: int = 0
    waypoint_lat: int = 0
    waypoint_lon: int = 0
    waypoint_alt: int = 0
    atc_pilot_distance_meters: int = 0
    atc_pilot_distance_meters_squared: int = 0

    # Operator display
    paired: bool = False
    ctlr_paired: bool = False
    plane_connected: bool = False

    def feature_values(self) -> Tuple[int, int, int, int, int]:
        """Current control-surface values: throttle, elevator, rudder, left and right aileron."""
        return (
            self.throttle_val,
            self.elevator_val,
            self.rudder_val,
            self.aileron_left_val,
            self.aileron_right_val,
        )