"""
Greedy - Game Trace Recorder

Keeps an ordered trace of game events and dispatches each one to any
subscribed callbacks. Used for diagnostics and replay inspection; it never
changes game semantics.
"""

from __future__ import annotations

import logging
from typing import Callable

from greedy.engine.base import Action, GameState
from greedy.engine.game import game_reducer
from greedy.events.events import EventPayload, GameEvent, classify_transition

logger = logging.getLogger(__name__)


class GameRecorder:
    """Records events for one game.

    Subscribers are invoked synchronously in subscription order. A
    subscriber that raises is logged and skipped; the remaining
    subscribers still receive the event.
    """

    def __init__(self) -> None:
        self._events: list[EventPayload] = []
        self._subscribers: list[Callable[[EventPayload], None]] = []

    def subscribe(self, on_event: Callable[[EventPayload], None]) -> None:
        """Register a callback receiving every recorded EventPayload."""
        if on_event in self._subscribers:
            logger.warning("Subscriber %r already registered", on_event)
            return
        self._subscribers.append(on_event)

    def unsubscribe(self, on_event: Callable[[EventPayload], None]) -> None:
        """Remove a previously registered callback."""
        if on_event in self._subscribers:
            self._subscribers.remove(on_event)

    def record(self, payload: EventPayload) -> None:
        """Append an event to the trace and dispatch it."""
        self._events.append(payload)
        logger.debug(
            "%s player=%s %s", payload.event.name, payload.player_id, payload.data
        )
        for on_event in list(self._subscribers):
            try:
                on_event(payload)
            except Exception:
                logger.exception("Error in subscriber for %s", payload.event.name)

    def game_started(self, state: GameState) -> None:
        """Record the roster of a freshly created game."""
        self.record(EventPayload(
            event=GameEvent.GAME_STARTED,
            data={
                "players": [
                    {"id": p.id, "name": p.name, "is_ai": p.is_ai, "ai_strategy": p.ai_strategy}
                    for p in state.players
                ],
                "target_score": state.target_score,
            },
        ))

    def dispatch(self, state: GameState, action: Action) -> GameState:
        """Apply `action` with game_reducer and record what it did."""
        new_state = game_reducer(state, action)
        for payload in classify_transition(state, new_state, action):
            self.record(payload)
        return new_state

    @property
    def events(self) -> list[EventPayload]:
        """Return a copy of the recorded trace."""
        return list(self._events)

    def events_of(self, event: GameEvent) -> list[EventPayload]:
        """Return recorded events of one type."""
        return [p for p in self._events if p.event == event]

    def reset(self) -> None:
        """Forget the recorded trace. Subscribers are kept."""
        self._events.clear()
