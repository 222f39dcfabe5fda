"""Autopilot -- drive the net from an input thread while the loop ticks.

Demonstrates:
- Building a seeded model from a GameConfig
- Submitting avatar movement from a separate producer thread
- Running the game loop on its own thread with run_forever
- Listening to captured / stung / scored events on the simulation thread

Run: python -m examples.autopilot
"""
from __future__ import annotations

import math
import threading
import time
from typing import Iterator

from fireflies import Captured, GameConfig, GameLoop, Stung, from_config

CONFIG = GameConfig(size=60.0, num_actors=25, tps=60, seed=2024)
RUN_SECONDS = 5.0
SWEEP_SPEED = 0.8


def sweep_deltas(size: float, speed: float) -> Iterator[tuple[float, float]]:
    """Yield (dx, dy) steps along a spiral out from the hole and back again."""
    centre = size / 2
    x = y = centre
    angle = 0.0
    radius = 0.0
    growing = True
    while True:
        angle += speed / max(radius, 4.0)
        radius += 0.05 if growing else -0.05
        if radius > centre * 0.9:
            growing = False
        elif radius <= 0.0:
            growing = True
        tx = centre + radius * math.cos(angle)
        ty = centre + radius * math.sin(angle)
        yield tx - x, ty - y
        x, y = tx, ty


def main() -> None:
    print("=== Autopilot ===\n")
    model = from_config(CONFIG)
    loop = GameLoop(model, tps=CONFIG.tps)
    counts = {"captured": 0, "stung": 0}

    def on_captured(event: Captured) -> None:
        counts["captured"] += 1

    def on_stung(event: Stung) -> None:
        counts["stung"] += 1
        print(f"  tick {loop.tick_number}: stung, {event.released} fireflies escaped")

    model.events.subscribe(Captured, on_captured)
    model.events.subscribe(Stung, on_stung)

    done = threading.Event()

    def pilot() -> None:
        # Resubmit every tick; the channel keeps the last delta otherwise.
        for dx, dy in sweep_deltas(CONFIG.size, SWEEP_SPEED):
            if done.is_set():
                break
            model.submit_avatar_movement(dx, dy)
            time.sleep(loop.dt)

    model.start()
    ticker = threading.Thread(target=loop.run_forever, name="game-loop")
    producer = threading.Thread(target=pilot, name="input")
    ticker.start()
    producer.start()

    ticker.join(timeout=RUN_SECONDS)
    loop.request_stop()
    done.set()
    ticker.join()
    producer.join()

    print(
        f"\nTicks: {loop.tick_number}  captured: {counts['captured']}  "
        f"stung: {counts['stung']}  scored: {model.score}/{model.num_actors}"
    )


if __name__ == "__main__":
    main()
