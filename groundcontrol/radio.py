"""Radio link constants and the outbound packet queue."""

from __future__ import annotations

from typing import Optional

from groundcontrol.packets import Packet
from groundcontrol.workqueue import WorkQueue

MAX_PACKET_SIZE = 32
EMERGENCY_TIMEOUT_MS = 3000

PIPES = (
    0x7878787878,
    0xB3B4B5B6F1,
    0xB3B4B5B6CD,
    0xB3B4B5B6A3,
    0xB3B4B5B60F,
    0xB3B4B5B605,
)

MAIN_PIPE = 0
AI_PIPE = 1
SERVO_PIPE = 2
IMU_PIPE = 3
MISC_PIPE = 4
LOG_PIPE = 5

RX_PKT_QUEUE_SIZE = 50
TX_PKT_QUEUE_SIZE = 20
TX_QUEUE_CAPACITY = 100

TX_QUEUE: WorkQueue[Packet] = WorkQueue(TX_QUEUE_CAPACITY)


def send_to_plane(packet: Packet, tx_queue: Optional[WorkQueue[Packet]] = None) -> None:
    """Queue a packet for transmission to the aircraft."""
    queue = TX_QUEUE if tx_queue is None else tx_queue
    queue.put(packet)


def pipe_address(pipe: int) -> int:
    """The 40-bit radio address of a numbered pipe."""
    if isinstance(pipe, bool) or not isinstance(pipe, int):
        raise TypeError(f"pipe must be an int, got {type(pipe).__name__}")
    if not 0 <= pipe < len(PIPES):
        raise ValueError(f"pipe must be in [0, {len(PIPES) - 1}], got {pipe}")
    return PIPES[pipe]