"""
Greedy Event Trace.

Event classification and recording of game actions and AI decisions.
"""

from greedy.events.events import EventPayload, GameEvent, classify_transition
from greedy.events.recorder import GameRecorder

__all__ = [
    "EventPayload",
    "GameEvent",
    "GameRecorder",
    "classify_transition",
]
