"""Wall-clock timestamps and a monotonic flight clock."""

from __future__ import annotations

import time
from typing import Callable

_UINT32_MASK = 0xFFFFFFFF


def timestamp() -> int:
    """Whole seconds since the Unix epoch, as an unsigned 32-bit value."""
    return int(time.time()) & _UINT32_MASK


class FlightClock:
    """Measures elapsed flight time in milliseconds on a monotonic clock.

    Until start() is called the reference point is the clock's own zero.
    """

    def __init__(self, clock: Callable[[], int] = time.monotonic_ns) -> None:
        self._clock = clock
        self._start_ns = 0

    def start(self) -> None:
        """Mark the current instant as the start of the flight."""
        self._start_ns = self._clock()

    def elapsed_ms(self) -> int:
        """Milliseconds since the flight started."""
        return (self._clock() - self._start_ns) // 1_000_000