"""Actor - a movable circle with species and capture state."""
from __future__ import annotations

from dataclasses import dataclass

from fireflies.config import ACTOR_RADIUS, ACTOR_SPEED, AVATAR_RADIUS
from fireflies.types import ActorState, ActorView, Species


@dataclass
class Actor:
    """Position, velocity and radius of one arena entity.

    ``state`` replaces separate active/scored flags: an actor is active
    while FREE and scored once SCORED, so it can never be both.
    """

    x: float
    y: float
    vx: float = 0.0
    vy: float = 0.0
    radius: float = ACTOR_RADIUS
    speed: float = ACTOR_SPEED  # carried with the actor; the tick never reads it
    species: Species = Species.FIREFLY
    state: ActorState = ActorState.FREE

    @property
    def active(self) -> bool:
        return self.state is ActorState.FREE

    @property
    def scored(self) -> bool:
        return self.state is ActorState.SCORED

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    def step(self) -> None:
        self.x += self.vx
        self.y += self.vy

    def capture(self) -> None:
        self._transition(ActorState.FREE, ActorState.CAUGHT)

    def release(self) -> None:
        self._transition(ActorState.CAUGHT, ActorState.FREE)

    def deposit(self) -> None:
        self._transition(ActorState.CAUGHT, ActorState.SCORED)

    def _transition(self, expected: ActorState, target: ActorState) -> None:
        if self.state is not expected:
            raise ValueError(
                f"Cannot move {self.species.value} from {self.state.value} "
                f"to {target.value}"
            )
        self.state = target

    def view(self) -> ActorView:
        return ActorView(
            x=self.x,
            y=self.y,
            radius=self.radius,
            species=self.species,
            state=self.state,
        )


def make_avatar(size: float) -> Actor:
    return Actor(size / 2, size / 2, radius=AVATAR_RADIUS, species=Species.AVATAR)


def make_hole(size: float) -> Actor:
    # Nothing repositions the hole after construction.
    return Actor(size / 2, size / 2, radius=AVATAR_RADIUS, species=Species.HOLE)
