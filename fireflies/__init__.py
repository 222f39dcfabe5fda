"""fireflies - simulation core of a catch-the-fireflies arcade game."""
from __future__ import annotations

from fireflies.actor import Actor
from fireflies.arena import keep_on_board, reflect
from fireflies.channel import MovementChannel
from fireflies.collision import circles_intersect, intersects
from fireflies.config import GameConfig
from fireflies.events import Captured, EventDispatcher, GameOver, Scored, Stung
from fireflies.loop import GameLoop
from fireflies.model import GameModel, create, from_config
from fireflies.population import generate_population
from fireflies.types import ActorState, ActorView, InvalidConfiguration, Species

__all__ = [
    "Actor",
    "ActorState",
    "ActorView",
    "Captured",
    "EventDispatcher",
    "GameConfig",
    "GameLoop",
    "GameModel",
    "GameOver",
    "InvalidConfiguration",
    "MovementChannel",
    "Scored",
    "Species",
    "Stung",
    "circles_intersect",
    "create",
    "from_config",
    "generate_population",
    "intersects",
    "keep_on_board",
    "reflect",
]
