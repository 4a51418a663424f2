"""
Tests for the War event bus and the events games and the driver send on it.
"""

import logging
import random

from unittest.mock import MagicMock, patch

from warsim.common.deck import Deck
from warsim.events import EventBus, EventEmitter, EngineEventType
from warsim.war import war
from warsim.war.state import GameState, Score
from warsim.war.transitions import new_game, play_game


def test_listener_receives_event_data():
    emitter = EventEmitter()
    listener = MagicMock()
    emitter.on(EngineEventType.GAME_ENDED, listener)

    emitter.emit(EngineEventType.GAME_ENDED, {"outcome": "TIED_AT", "value": 3})

    listener.assert_called_once_with({"outcome": "TIED_AT", "value": 3})


def test_event_name_and_enum_are_interchangeable():
    emitter = EventEmitter()
    listener = MagicMock()
    emitter.on("GAME_STARTED", listener)

    emitter.emit(EngineEventType.GAME_STARTED, {"moves": 0})

    listener.assert_called_once_with({"moves": 0})


def test_other_event_types_are_not_delivered():
    emitter = EventEmitter()
    listener = MagicMock()
    emitter.on(EngineEventType.GAME_ENDED, listener)

    emitter.emit(EngineEventType.SIMULATION_PROGRESS, {"seed": 1})

    listener.assert_not_called()


def test_unsubscribe_stops_delivery():
    emitter = EventEmitter()
    listener = MagicMock()
    unsubscribe = emitter.on(EngineEventType.GAME_ENDED, listener)

    unsubscribe()
    unsubscribe()
    emitter.emit(EngineEventType.GAME_ENDED, {})

    listener.assert_not_called()


def test_failing_listener_is_logged_and_skipped(caplog):
    emitter = EventEmitter()
    after = MagicMock()

    def broken(data):
        raise KeyError("score")

    emitter.on(EngineEventType.GAME_ENDED, broken)
    emitter.on(EngineEventType.GAME_ENDED, after)

    with caplog.at_level(logging.ERROR, logger="warsim.events"):
        emitter.emit(EngineEventType.GAME_ENDED, {"value": 1})

    after.assert_called_once_with({"value": 1})
    assert "Listener for GAME_ENDED failed" in caplog.text


def test_event_bus_is_shared():
    assert EventBus.get_instance() is EventBus.get_instance()


def test_game_events_arrive_in_order():
    received = []
    bus = EventBus.get_instance()
    bus.on(EngineEventType.GAME_STARTED, lambda data: received.append(("start", data)))
    bus.on(EngineEventType.GAME_ENDED, lambda data: received.append(("end", data)))

    score = play_game(GameState(computer=Deck([9, 8]), player=Deck([4, 7]), moves=0))

    assert score == Score.lose_after(2)
    assert received == [
        ("start", {"moves": 0, "computer_cards": 2, "player_cards": 2}),
        ("end", {**Score.lose_after(2).to_dict(), "moves": 2}),
    ]


def test_full_game_start_event_reports_half_decks(monkeypatch):
    monkeypatch.setattr("warsim.war.transitions.MAX_MOVES", 10)
    started = MagicMock()
    EventBus.get_instance().on(EngineEventType.GAME_STARTED, started)

    play_game(new_game(random.Random(2)))

    started.assert_called_once_with(
        {"moves": 0, "computer_cards": 3328, "player_cards": 3328}
    )


@patch("warsim.war.war.play_game", return_value=Score.finish_with(3000))
def test_driver_reports_progress_per_seed(mock_play):
    progress = []
    EventBus.get_instance().on(EngineEventType.SIMULATION_PROGRESS, progress.append)

    war.run_seeds([8, 9, 10], single_cpu=True)

    assert [p["seed"] for p in progress] == [8, 9, 10]
    assert [p["completed"] for p in progress] == [1, 2, 3]
    assert all(p["total"] == 3 for p in progress)
    assert progress[0]["outcome"] == "FINISH_WITH"
    assert progress[0]["score"] == Score.finish_with(3000).to_int()
