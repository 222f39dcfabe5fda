"""Arena bounds policy: mirror reflection off the square's walls."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fireflies.actor import Actor


def reflect(pos: float, vel: float, size: float) -> tuple[float, float]:
    """Reflect one axis back into ``[0, size]``. Returns (pos, vel)."""
    if pos < 0:
        return -pos, -vel
    if pos > size:
        return size - (pos - size), -vel
    return pos, vel


def keep_on_board(actor: Actor, size: float) -> None:
    """Bounce an actor that left the arena; x and y are handled independently."""
    actor.x, actor.vx = reflect(actor.x, actor.vx, size)
    actor.y, actor.vy = reflect(actor.y, actor.vy, size)
