"""Switching the control mode and telling the aircraft about it."""

from __future__ import annotations

import logging
from typing import Optional

from groundcontrol.enums import ControlMode, EventType
from groundcontrol.packets import EventData8Packet, EventPacket, Packet
from groundcontrol.radio import send_to_plane
from groundcontrol.session import Session
from groundcontrol.workqueue import WorkQueue

logger = logging.getLogger(__name__)

EVENT_HEADER = "e"
HOLDING_ALTITUDE_METERS = 40
HOLDING_SPEED_KMH = 30

_ANNOUNCED = {
    ControlMode.MANUAL: EventType.CONTROL_MODE_CHANGE_MANUAL,
    ControlMode.ASSIST: EventType.CONTROL_MODE_CHANGE_ASSIST,
    ControlMode.TAXI: EventType.CONTROL_MODE_CHANGE_TAXI,
}


def _clear_fixed(session: Session) -> None:
    session.fixed_plane_heading = 0
    session.fixed_plane_altitude = 0
    session.fixed_plane_speed = 0


def set_control_mode(
    session: Session,
    mode: ControlMode,
    log=None,
    tx_queue: Optional[WorkQueue[Packet]] = None,
) -> bool:
    """Apply a control mode, log it and notify the aircraft.

    Returns True when the session is now in the requested mode. TAXI is
    refused while the aircraft is not flying; HOLDING requested on the
    ground still sends the holding parameters but keeps the current mode.
    """
    mode = ControlMode(mode)

    def record(event: EventType) -> None:
        if log is not None:
            log.insert_event(event)

    if mode in _ANNOUNCED:
        if mode is ControlMode.TAXI and not session.is_flying:
            logger.warning("Cannot set TAXI mode while not flying")
            return False
        event = _ANNOUNCED[mode]
        session.control_mode = mode
        _clear_fixed(session)
        record(event)
        send_to_plane(EventPacket(EVENT_HEADER, event), tx_queue)
        logger.info("Control mode set to %s", mode.name)
        return True

    if mode is ControlMode.HOLDING:
        if session.is_flying:
            session.control_mode = ControlMode.HOLDING
        session.fixed_plane_heading = 0
        session.fixed_plane_altitude = 1
        session.fixed_plane_speed = 1
        record(EventType.CONTROL_MODE_CHANGE_HOLDING)
        send_to_plane(EventPacket(EVENT_HEADER, EventType.CONTROL_MODE_CHANGE_HOLDING), tx_queue)
        send_to_plane(
            EventData8Packet(
                EVENT_HEADER, EventType.FIXED_ALTITUDE_DATA_CHANGE, HOLDING_ALTITUDE_METERS
            ),
            tx_queue,
        )
        send_to_plane(
            EventData8Packet(EVENT_HEADER, EventType.FIXED_SPEED_DATA_CHANGE, HOLDING_SPEED_KMH),
            tx_queue,
        )
        logger.info("Control mode set to HOLDING")
        return session.control_mode is ControlMode.HOLDING

    session.control_mode = mode
    return True