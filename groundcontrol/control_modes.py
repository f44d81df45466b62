"""Per-control-mode handling of controller buttons and stick input."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Mapping, Optional

from groundcontrol.enums import INT16_MAX, INT16_MIN, Button, ControlMode, ControllerInput
from groundcontrol.packets import ManualPacket, Packet
from groundcontrol.radio import send_to_plane
from groundcontrol.session import Session
from groundcontrol.session_control import set_control_mode
from groundcontrol.tools import map_range
from groundcontrol.workqueue import WorkQueue

logger = logging.getLogger(__name__)

MANUAL_HEADER = "m"
SERVO_MIN = 0
SERVO_MAX = 180
SERVO_CENTER = 90
TRIGGER_MIN = 0

_UINT8_MASK = 0xFF
_UINT32_MAX = 0xFFFFFFFF


def _servo(value: int, low: int, high: int, out_low: int = SERVO_MIN, out_high: int = SERVO_MAX) -> int:
    return map_range(value, low, high, out_low, out_high)


def manual_packet(axes: ControllerInput) -> ManualPacket:
    """Build the manual-control packet for the given stick and trigger readings.

    The right stick drives both flaperons: its X axis sets opposite aileron
    deflections and its Y axis adds a common flap offset around centre.
    Results are carried as 8-bit servo values and wrap when they fall
    outside that range.
    """
    throttle = _servo(axes.raw_throttle, TRIGGER_MIN, INT16_MAX)
    elevator = _servo(axes.raw_elevator, INT16_MIN, INT16_MAX)
    rudder = _servo(axes.raw_rudder, INT16_MIN, INT16_MAX)

    aileron_left = _servo(axes.raw_right_x, INT16_MIN, INT16_MAX) & _UINT8_MASK
    aileron_right = _servo(axes.raw_right_x, INT16_MIN, INT16_MAX, SERVO_MAX, SERVO_MIN) & _UINT8_MASK
    flap = _servo(axes.raw_right_y, INT16_MIN, INT16_MAX) & _UINT8_MASK

    left = (aileron_left + flap - SERVO_CENTER) & _UINT8_MASK
    right = (aileron_right + flap - SERVO_CENTER) & _UINT8_MASK

    return ManualPacket(
        MANUAL_HEADER,
        throttle & _UINT8_MASK,
        elevator & _UINT8_MASK,
        rudder & _UINT8_MASK,
        left,
        right,
    )


_BUTTON_LABELS: Mapping[int, str] = {
    int(Button.CROSS): "Cross button pressed",
    int(Button.CIRCLE): "Circle button pressed",
    int(Button.SQUARE): "Square button pressed",
    int(Button.TRIANGLE): "Triangle button pressed",
    int(Button.OPTIONS): "Options (START) button pressed",
    int(Button.SHARE): "Share (BACK) button pressed",
    int(Button.PS): "PS (GUIDE) button pressed",
    int(Button.L1): "L1 (LEFT BUMPER) button pressed",
    int(Button.R1): "R1 (RIGHT BUMPER) button pressed",
    int(Button.L3): "L3 (LEFT STICK) button pressed",
    int(Button.R3): "R3 (RIGHT STICK) button pressed",
    int(Button.SHARE | Button.OPTIONS): "Share + Options (Start + Back) combination pressed",
}


@dataclass(frozen=True)
class _ModeHandler:
    labels: Mapping[int, str]
    actions: Mapping[int, ControlMode] = field(default_factory=dict)
    ignore_empty: bool = False


_MANUAL = _ModeHandler(
    labels=_BUTTON_LABELS,
    actions={
        int(Button.CROSS): ControlMode.ASSIST,
        int(Button.CIRCLE): ControlMode.HOLDING,
    },
)

_PAIRING = _ModeHandler(
    labels={
        **_BUTTON_LABELS,
        int(Button.SQUARE | Button.CIRCLE): "Square + Circle combination pressed",
    },
    actions={int(Button.CIRCLE): ControlMode.MANUAL},
    ignore_empty=True,
)

_HANDLERS: Mapping[ControlMode, _ModeHandler] = {
    ControlMode.MANUAL: _MANUAL,
    ControlMode.PAIRING: _PAIRING,
}


class ControlModeDispatcher:
    """Routes controller input to the behaviour of the session's control mode."""

    def __init__(
        self,
        session: Session,
        log=None,
        tx_queue: Optional[WorkQueue[Packet]] = None,
    ) -> None:
        self.session = session
        self.log = log
        self.tx_queue = tx_queue

    def process_event(self, mask: int) -> bool:
        """Handle a button mask; True if the current mode recognised it."""
        mask = int(mask)
        if not 0 <= mask <= _UINT32_MAX:
            raise ValueError(f"button mask must fit in 32 unsigned bits, got {mask}")

        handler = _HANDLERS.get(self.session.control_mode)
        if handler is None:
            return False
        if handler.ignore_empty and mask == 0:
            return False
        if handler.ignore_empty:
            logger.debug("Button mask: %d", mask)

        label = handler.labels.get(mask)
        if label is None:
            logger.info("Unknown button combination")
            return False
        logger.info(label)

        target = handler.actions.get(mask)
        if target is not None:
            set_control_mode(self.session, target, self.log, self.tx_queue)
        return True

    def process_features(self, axes: ControllerInput) -> Optional[Packet]:
        """Turn stick input into a packet for the aircraft, if the mode sends one."""
        if self.session.control_mode is ControlMode.MANUAL:
            packet = manual_packet(axes)
            send_to_plane(packet, self.tx_queue)
            return packet
        return None