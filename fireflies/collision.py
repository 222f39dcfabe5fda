"""Pure circle intersection tests."""
from __future__ import annotations

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fireflies.actor import Actor


def circles_intersect(
    pos_a: tuple[float, float],
    radius_a: float,
    pos_b: tuple[float, float],
    radius_b: float,
) -> bool:
    """True when the centre distance is strictly below the sum of radii."""
    dx = pos_a[0] - pos_b[0]
    dy = pos_a[1] - pos_b[1]
    return math.sqrt(dx * dx + dy * dy) < radius_a + radius_b


def intersects(a: Actor, b: Actor) -> bool:
    return circles_intersect(a.position, a.radius, b.position, b.radius)
