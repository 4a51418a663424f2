#!/usr/bin/env python3
"""
Example demonstrating the War state machine one round at a time.

This script plays a single seeded game, printing deck sizes every few hundred
moves, and listens for the lifecycle events the game emits.
"""

import argparse
import random

from warsim.events import EventBus, EngineEventType
from warsim.war.state import Done
from warsim.war.transitions import StateTransitionEngine, new_game, play_game


def main():
    parser = argparse.ArgumentParser(description="Step through one game of War.")
    parser.add_argument("-s", "--seed", type=int, default=1, help="seed (default: 1)")
    parser.add_argument(
        "-e",
        "--every",
        type=int,
        default=500,
        help="print deck sizes every N moves (default: 500)",
    )
    parser.add_argument(
        "-m",
        "--max_rounds",
        type=int,
        default=5000,
        help="stop stepping after this many rounds (default: 5000)",
    )
    args = parser.parse_args()

    # Set up event listeners
    event_bus = EventBus.get_instance()

    def on_game_ended(data):
        print(f"Game ended: {data['outcome']} ({data['value']}), score {data['score']}")

    event_bus.on(EngineEventType.GAME_ENDED, on_game_ended)

    # Step manually for a while
    state = new_game(random.Random(args.seed))
    print(f"Computer: {state.computer}, Player: {state.player}")

    for _ in range(args.max_rounds):
        result = StateTransitionEngine.step(state)
        if isinstance(result, Done):
            print(f"Finished while stepping: {result.score}")
            return
        state = result.state
        if state.moves % args.every == 0:
            print(
                f"Move {state.moves}: computer {state.computer.size}, "
                f"player {state.player.size}"
            )

    # Hand the rest of the game to play_game
    print(f"\nPlaying out the rest from move {state.moves}...")
    play_game(state)


if __name__ == "__main__":
    main()
