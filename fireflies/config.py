"""Game constants and the construction-time configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass

from fireflies.types import InvalidConfiguration

# --- Fixed physics ---
AVATAR_RADIUS = 6.0
ACTOR_RADIUS = 1.0
ACTOR_SPEED = 1.0
NUM_WASPS = 5
SCATTER_FACTOR = 3.0

# --- Defaults ---
DEFAULT_SIZE = 100.0
DEFAULT_NUM_ACTORS = 20
DEFAULT_TPS = 30


@dataclass(frozen=True)
class GameConfig:
    """Immutable parameters for one game session.

    Attributes:
        size: Side length of the square arena.
        num_actors: Population size; the last ``NUM_WASPS`` actors are wasps.
        tps: Ticks per second for the game loop.
        seed: Seed for population generation. ``None`` draws one from the OS.
    """

    size: float = DEFAULT_SIZE
    num_actors: int = DEFAULT_NUM_ACTORS
    tps: int = DEFAULT_TPS
    seed: int | None = None

    def validate(self) -> None:
        validate_arena(self.size, self.num_actors)
        if self.tps <= 0:
            raise InvalidConfiguration(f"tps must be positive, got {self.tps}")


def validate_arena(size: float, num_actors: int) -> None:
    if size <= 0:
        raise InvalidConfiguration(f"size must be positive, got {size}")
    if num_actors < NUM_WASPS:
        raise InvalidConfiguration(
            f"num_actors must be at least {NUM_WASPS}, got {num_actors}"
        )
