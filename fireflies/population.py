"""Initial population of fireflies and wasps."""
from __future__ import annotations

import random

from fireflies.actor import Actor
from fireflies.config import ACTOR_RADIUS, ACTOR_SPEED, NUM_WASPS
from fireflies.types import Species


def generate_population(
    size: float, num_actors: int, rng: random.Random
) -> list[Actor]:
    """Scatter ``num_actors`` actors uniformly over ``[0, size)``.

    The last ``NUM_WASPS`` actors generated are wasps, every earlier one is a
    firefly. All start free and at rest; x is drawn before y for each actor,
    so a seeded ``rng`` reproduces the same population.
    """
    actors: list[Actor] = []
    first_wasp = num_actors - NUM_WASPS
    for i in range(num_actors):
        x = rng.random() * size
        y = rng.random() * size
        species = Species.WASP if i >= first_wasp else Species.FIREFLY
        actors.append(
            Actor(x, y, radius=ACTOR_RADIUS, speed=ACTOR_SPEED, species=species)
        )
    return actors
