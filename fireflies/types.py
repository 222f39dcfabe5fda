"""Shared enums, errors and read-only views for the fireflies core."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Species(enum.Enum):
    FIREFLY = "firefly"
    WASP = "wasp"
    AVATAR = "avatar"
    HOLE = "hole"


class ActorState(enum.Enum):
    """Capture state of an actor. SCORED is terminal."""

    FREE = "free"
    CAUGHT = "caught"
    SCORED = "scored"


class InvalidConfiguration(ValueError):
    """Raised when a model, loop or config is built with unusable parameters."""


@dataclass(frozen=True, slots=True)
class ActorView:
    x: float
    y: float
    radius: float
    species: Species
    state: ActorState

    @property
    def active(self) -> bool:
        return self.state is ActorState.FREE

    @property
    def scored(self) -> bool:
        return self.state is ActorState.SCORED
