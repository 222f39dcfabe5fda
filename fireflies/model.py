"""GameModel - population, avatar, hole and the per-tick state machine."""
from __future__ import annotations

import os
import random
from typing import Any, Callable

from loguru import logger

from fireflies.actor import Actor, make_avatar, make_hole
from fireflies.arena import keep_on_board
from fireflies.channel import MovementChannel
from fireflies.collision import intersects
from fireflies.config import SCATTER_FACTOR, GameConfig, validate_arena
from fireflies.population import generate_population
from fireflies.events import Captured, EventDispatcher, GameOver, Scored, Stung
from fireflies.types import ActorState, ActorView, Species


class GameModel:
    """State of one game session.

    ``update`` must only be called from a single simulation thread.
    ``submit_avatar_movement`` may be called from any thread.
    """

    def __init__(
        self,
        size: float,
        num_actors: int,
        rng: random.Random | None = None,
        events: EventDispatcher | None = None,
        seed: int | None = None,
    ) -> None:
        validate_arena(size, num_actors)
        if rng is None:
            if seed is None:
                seed = int.from_bytes(os.urandom(8))
            rng = random.Random(seed)
        self._seed = seed

        self.size = size
        self.num_actors = num_actors
        self.actors: list[Actor] = generate_population(size, num_actors, rng)
        self.num_active = num_actors
        self.avatar = make_avatar(size)
        self.hole = make_hole(size)
        self.score = 0
        self.game_over = False
        self.paused = True

        self.events = events if events is not None else EventDispatcher()
        self._channel = MovementChannel()
        self._on_avatar_contact: dict[Species, Callable[[int, Actor], None]] = {
            Species.FIREFLY: self._capture,
            Species.WASP: self._sting,
        }

    @property
    def seed(self) -> int | None:
        return self._seed

    @property
    def channel(self) -> MovementChannel:
        return self._channel

    # --- Lifecycle ---

    def start(self) -> None:
        self.paused = False
        logger.info(f"Game started: {self.num_actors} actors, size {self.size}")

    def pause(self) -> None:
        self.paused = True

    def stop(self) -> None:
        if not self.game_over:
            logger.info(f"Game stopped with score {self.score}/{self.num_actors}")
        self.game_over = True

    def is_stopped(self) -> bool:
        return self.game_over

    # --- Input ---

    def submit_avatar_movement(self, dx: float, dy: float) -> None:
        self._channel.submit(dx, dy)

    # --- Tick ---

    def update(self) -> None:
        if self.paused or self.game_over:
            return

        dp = self._channel.drain()
        self.avatar.x += dp[0]
        self.avatar.y += dp[1]

        # Iterate by index: a sting mid-loop releases fireflies that are
        # then updated as free if they come later in the list.
        for i, actor in enumerate(self.actors):
            if actor.active:
                self._update_free(i, actor)
            else:
                self._update_caught(i, actor, dp)

        if self.score == self.num_actors:
            self.game_over = True
            logger.info(f"Game over: all {self.num_actors} actors scored")
            self.events.emit(GameOver(score=self.score))

        self.events.dispatch()

    def _update_free(self, index: int, actor: Actor) -> None:
        actor.step()
        keep_on_board(actor, self.size)
        if intersects(actor, self.avatar):
            handler = self._on_avatar_contact.get(actor.species)
            if handler is not None:
                handler(index, actor)
        if intersects(actor, self.hole):
            actor.vx = actor.x - self.avatar.x
            actor.vy = actor.y - self.avatar.y

    def _update_caught(
        self, index: int, actor: Actor, dp: tuple[float, float]
    ) -> None:
        # Caught and scored actors both ride along with the net.
        actor.x += dp[0]
        actor.y += dp[1]
        if (
            intersects(self.hole, self.avatar)
            and actor.species is Species.FIREFLY
            and actor.state is ActorState.CAUGHT
        ):
            actor.deposit()
            self.score += 1
            logger.debug(f"Actor {index} scored ({self.score}/{self.num_actors})")
            self.events.emit(Scored(index=index, score=self.score))

    def _capture(self, index: int, actor: Actor) -> None:
        actor.capture()
        self.num_active -= 1
        logger.debug(f"Actor {index} captured, {self.num_active} still free")
        self.events.emit(Captured(index=index))

    def _sting(self, index: int, actor: Actor) -> None:
        released = self.explode()
        logger.debug(f"Wasp {index} stung the net, released {released}")
        self.events.emit(Stung(index=index, released=released))

    def explode(self) -> int:
        """Release every caught, unscored firefly outward from the avatar.

        Returns the number of fireflies released.
        """
        released = 0
        for actor in self.actors:
            if actor.species is Species.FIREFLY and actor.state is ActorState.CAUGHT:
                actor.release()
                self.num_active += 1
                actor.vx = SCATTER_FACTOR * (actor.x - self.avatar.x)
                actor.vy = SCATTER_FACTOR * (actor.y - self.avatar.y)
                released += 1
        return released

    # --- Observers ---

    @property
    def avatar_position(self) -> tuple[float, float]:
        return self.avatar.position

    @property
    def hole_position(self) -> tuple[float, float]:
        return self.hole.position

    def actor_views(self) -> list[ActorView]:
        return [actor.view() for actor in self.actors]

    def snapshot(self) -> dict[str, Any]:
        """JSON-compatible view of the whole session for renderers and UIs."""
        return {
            "size": self.size,
            "num_actors": self.num_actors,
            "num_active": self.num_active,
            "score": self.score,
            "game_over": self.game_over,
            "paused": self.paused,
            "avatar": _actor_dict(self.avatar),
            "hole": _actor_dict(self.hole),
            "actors": [_actor_dict(actor) for actor in self.actors],
        }


def _actor_dict(actor: Actor) -> dict[str, Any]:
    return {
        "x": actor.x,
        "y": actor.y,
        "radius": actor.radius,
        "species": actor.species.value,
        "state": actor.state.value,
    }


def create(size: float, num_actors: int, seed: int | None = None) -> GameModel:
    return GameModel(size, num_actors, seed=seed)


def from_config(config: GameConfig) -> GameModel:
    config.validate()
    return GameModel(config.size, config.num_actors, seed=config.seed)
