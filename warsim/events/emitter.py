"""
Game event bus for the War simulator.

Games announce when they start and end, and the driver announces progress
through a batch of seeds. Listeners register per event type and receive the
event's data dictionary.
"""

from collections import defaultdict
from typing import Any, Callable, Dict, Union
import logging
from enum import Enum

logger = logging.getLogger("warsim.events")


class EngineEventType(Enum):
    """Events emitted while simulating War."""

    # Sent by play_game: initial deck sizes, then the final score
    GAME_STARTED = "game_started"
    GAME_ENDED = "game_ended"

    # Sent by the driver: one per finished seed, then the batch summary
    SIMULATION_PROGRESS = "simulation_progress"
    SIMULATION_RESULT = "simulation_result"


class EventEmitter:
    """
    Dispatches War events to the listeners registered for them.

    Listeners run in registration order. One that raises is logged and
    skipped so the game keeps going.
    """

    def __init__(self):
        self._listeners = defaultdict(list)

    def on(
        self, event_type: Union[str, EngineEventType], callback: Callable
    ) -> Callable:
        """
        Register ``callback`` for ``event_type``.

        Returns:
            A function that removes the registration again
        """
        key = _event_key(event_type)
        self._listeners[key].append(callback)

        def unsubscribe():
            if callback in self._listeners[key]:
                self._listeners[key].remove(callback)

        return unsubscribe

    def emit(
        self, event_type: Union[str, EngineEventType], data: Dict[str, Any]
    ) -> None:
        key = _event_key(event_type)
        for callback in list(self._listeners.get(key, ())):
            try:
                callback(data)
            except Exception:
                logger.exception("Listener for %s failed", key)


def _event_key(event_type: Union[str, EngineEventType]) -> str:
    if isinstance(event_type, EngineEventType):
        return event_type.name
    return event_type


class EventBus:
    """Process-wide emitter shared by games and the driver."""

    _instance = None

    @classmethod
    def get_instance(cls) -> EventEmitter:
        if cls._instance is None:
            cls._instance = EventEmitter()
        return cls._instance
