"""Thread-safe single-slot handoff of avatar movement deltas."""
from __future__ import annotations

import threading


class MovementChannel:
    """Last-write-wins cell shared by the input thread and the tick thread.

    ``drain`` copies the pending delta but does not zero it: if the producer
    stops submitting, the same delta is applied again on every tick.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._dx = 0.0
        self._dy = 0.0

    def submit(self, dx: float, dy: float) -> None:
        with self._lock:
            self._dx = dx
            self._dy = dy

    def drain(self) -> tuple[float, float]:
        with self._lock:
            return self._dx, self._dy

    @property
    def pending(self) -> tuple[float, float]:
        return self.drain()
