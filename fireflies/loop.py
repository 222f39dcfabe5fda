"""GameLoop - fixed-rate driver that ticks a GameModel."""
from __future__ import annotations

import threading
import time
from typing import TYPE_CHECKING, Callable

from loguru import logger

from fireflies.config import DEFAULT_TPS
from fireflies.types import InvalidConfiguration

if TYPE_CHECKING:
    from fireflies.model import GameModel

Hook = Callable[["GameModel", int], None]


class GameLoop:
    def __init__(self, model: GameModel, tps: int = DEFAULT_TPS) -> None:
        if tps <= 0:
            raise InvalidConfiguration(f"tps must be positive, got {tps}")
        self._model = model
        self._tps = tps
        self._dt = 1.0 / tps
        self._tick_number = 0
        self._start_hooks: list[Hook] = []
        self._stop_hooks: list[Hook] = []
        self._stop = threading.Event()

    @property
    def model(self) -> GameModel:
        return self._model

    @property
    def tps(self) -> int:
        return self._tps

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def tick_number(self) -> int:
        return self._tick_number

    def on_start(self, hook: Hook) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Hook) -> None:
        self._stop_hooks.append(hook)

    def request_stop(self) -> None:
        """Ask the loop to exit before its next tick. Any thread.

        A request made before ``run`` or ``run_forever`` starts is honoured:
        the loop fires its hooks without ticking. The request is consumed
        once the stop hooks have run.
        """
        self._stop.set()

    def _should_stop(self) -> bool:
        return self._stop.is_set() or self._model.is_stopped()

    def _fire(self, hooks: list[Hook]) -> None:
        for hook in hooks:
            hook(self._model, self._tick_number)

    def _finish(self) -> None:
        self._fire(self._stop_hooks)
        self._stop.clear()

    def step(self) -> None:
        self._tick_number += 1
        self._model.update()

    def run(self, n: int) -> None:
        self._fire(self._start_hooks)
        for _ in range(n):
            if self._should_stop():
                break
            self.step()
        self._finish()

    def run_forever(self) -> None:
        logger.info(f"Game loop running at {self._tps} tps")
        self._fire(self._start_hooks)

        while not self._should_stop():
            start = time.monotonic()
            self.step()
            sleep_time = self._dt - (time.monotonic() - start)
            # Waiting on the event lets request_stop cut the pause short.
            if sleep_time > 0:
                self._stop.wait(sleep_time)

        logger.info(f"Game loop stopped at tick {self._tick_number}")
        self._finish()
