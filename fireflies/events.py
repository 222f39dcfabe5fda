"""Typed game events, collected during a tick and dispatched at its end."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, TypeVar, Union


@dataclass(frozen=True, slots=True)
class Captured:
    """A free firefly touched the net."""

    index: int


@dataclass(frozen=True, slots=True)
class Stung:
    """A wasp touched the net and ``released`` fireflies escaped."""

    index: int
    released: int


@dataclass(frozen=True, slots=True)
class Scored:
    index: int
    score: int


@dataclass(frozen=True, slots=True)
class GameOver:
    score: int


GameEvent = Union[Captured, Stung, Scored, GameOver]
EVENT_TYPES: tuple[type, ...] = (Captured, Stung, Scored, GameOver)

E = TypeVar("E", Captured, Stung, Scored, GameOver)


class EventDispatcher:
    """Routes game events to listeners by event type.

    ``GameModel.update`` emits while it mutates state and dispatches once the
    tick is complete, so listeners always observe a consistent model. Events
    emitted by a listener are held for the next dispatch.
    """

    def __init__(self) -> None:
        self._listeners: dict[type, list[Callable]] = {t: [] for t in EVENT_TYPES}
        self._pending: list[GameEvent] = []
        self._last_tick: tuple[GameEvent, ...] = ()

    def subscribe(self, event_type: type[E], listener: Callable[[E], None]) -> None:
        self._listeners_for(event_type).append(listener)

    def unsubscribe(self, event_type: type[E], listener: Callable[[E], None]) -> None:
        listeners = self._listeners_for(event_type)
        if listener in listeners:
            listeners.remove(listener)

    def emit(self, event: GameEvent) -> None:
        if type(event) not in self._listeners:
            raise TypeError(f"Not a game event: {event!r}")
        self._pending.append(event)

    @property
    def pending(self) -> tuple[GameEvent, ...]:
        return tuple(self._pending)

    @property
    def last_tick(self) -> tuple[GameEvent, ...]:
        """Events delivered by the most recent dispatch, in emit order."""
        return self._last_tick

    def dispatch(self) -> tuple[GameEvent, ...]:
        delivered = tuple(self._pending)
        self._pending = []
        self._last_tick = delivered
        for event in delivered:
            for listener in list(self._listeners[type(event)]):
                listener(event)
        return delivered

    def _listeners_for(self, event_type: type) -> list[Callable]:
        listeners = self._listeners.get(event_type)
        if listeners is None:
            raise TypeError(f"Not a game event type: {event_type!r}")
        return listeners
