from __future__ import annotations

import logging
import threading
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class SessionTicker:
    """Cancellable periodic task driving the elapsed-time display.

    One ticker lives exactly as long as one CHECKED_IN period. ``cancel()`` is
    idempotent and may be called from any thread, including the tick itself.
    """

    def __init__(self, callback: Callable[[], None], *, interval: float = 1.0, name: str = "session-ticker"):
        if interval <= 0:
            raise ValueError("interval must be positive")
        self._callback = callback
        self._interval = float(interval)
        self._name = name
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive() and not self._stop.is_set()

    def start(self) -> None:
        if self._thread is not None:
            raise RuntimeError("ticker already started")
        self._thread = threading.Thread(target=self._run, name=self._name, daemon=True)
        self._thread.start()
        logger.debug("%s started (interval=%ss)", self._name, self._interval)

    def cancel(self) -> None:
        if self._stop.is_set():
            return
        self._stop.set()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout=self._interval * 2)
        logger.debug("%s cancelled", self._name)

    def _run(self) -> None:
        # Event.wait returns True once cancelled.
        while not self._stop.wait(self._interval):
            try:
                self._callback()
            except Exception:
                logger.exception("%s tick failed", self._name)
