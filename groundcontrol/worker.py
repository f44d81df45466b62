"""A thread that runs a setup step once and then a loop body repeatedly."""

from __future__ import annotations

import logging
import threading
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class LoopThread:
    """Run ``setup()`` once on a worker thread, then ``loop()`` until stopped.

    If ``setup()`` returns a false value the loop never runs.
    """

    def __init__(self, setup: Callable[[], bool], loop: Callable[[], None]) -> None:
        self._setup = setup
        self._loop = loop
        self._stop_requested = threading.Event()
        self._running = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def _run(self) -> None:
        if not self._setup():
            logger.warning("Setup function failed")
            return
        self._running.set()
        try:
            while not self._stop_requested.is_set():
                self._loop()
        finally:
            self._running.clear()

    def start(self) -> bool:
        """Start the worker; False if it is already running or cannot start."""
        if self._running.is_set():
            return False
        if self._thread is not None:
            if self._thread.is_alive():
                return False
            self._thread.join()
            self._thread = None
        self._stop_requested.clear()
        thread = threading.Thread(target=self._run, daemon=True)
        try:
            thread.start()
        except RuntimeError:
            return False
        self._thread = thread
        return True

    def stop(self) -> None:
        """Ask the loop to end and wait for the worker to finish."""
        self._stop_requested.set()
        thread = self._thread
        if thread is None or thread is threading.current_thread():
            return
        thread.join()
        self._thread = None
        logger.debug("Thread joined")

    def joinable(self) -> bool:
        """True while a started worker has not yet been joined."""
        return self._thread is not None