"""
This module is used to run simulations of War.

Each game is seeded independently, played to completion, and reported on one
line as ``seed: integer-score (score-detail)``.

- Parallel mode (default), where games are spread over every CPU.
- Single CPU mode (``--single_cpu``), where games run one after another.
- Summary mode (``--summary``), which prints aggregate statistics at the end.
- Visualization mode (``--vis``), which plots the score of every seed.

For example, ``warsim --start 1 --num_games 1000`` plays seeds 1 to 1000.
"""

import argparse
import cProfile
import io
import logging
import multiprocessing
import os
import pstats
import random
import sys
import time
from typing import Iterable, List, Optional, Tuple

import matplotlib.pyplot as plt

from warsim.events import EventBus, EngineEventType
from warsim.war.state import Score
from warsim.war.stats import SimulationStats
from warsim.war.transitions import new_game, play_game

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class ScoreGraph:
    def __init__(self, seeds):
        self.seeds = []
        self.scores = []

        self.fig, self.ax = plt.subplots()
        (self.line,) = self.ax.plot([], [], "b.")

        self.ax.set_xlim(min(seeds, default=0), max(seeds, default=1))
        self.ax.set_title("War Scores by Seed")
        self.ax.set_xlabel("Seed")
        self.ax.set_ylabel("Score")
        self.ax.grid(True)

    def update(self, seed, score):
        self.seeds.append(seed)
        self.scores.append(score)
        self.line.set_data(self.seeds, self.scores)

        y_min = min(self.scores)
        y_max = max(self.scores)
        margin = max((y_max - y_min) * 0.05, 1)
        self.ax.set_ylim(y_min - margin, y_max + margin)


def configure_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    """
    Set up the ``warsim`` logger for a command-line run.

    WARSIM_DISABLE_LOGGING raises the threshold to ERROR regardless of flags.
    """
    root = logging.getLogger("warsim")
    if os.environ.get("WARSIM_DISABLE_LOGGING", "").lower() in ("1", "true", "yes"):
        root.setLevel(logging.ERROR)
    else:
        root.setLevel(logging.DEBUG if verbose else logging.INFO)

    formatter = logging.Formatter(LOG_FORMAT)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(formatter)
        root.addHandler(handler)
    if log_file and not any(
        isinstance(h, logging.FileHandler)
        and h.baseFilename == os.path.abspath(log_file)
        for h in root.handlers
    ):
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)


def run_seed(seed: int) -> Tuple[int, Score]:
    """
    Play one game seeded with ``seed``, to be executed in a separate process.
    """
    rng = random.Random(seed)
    return seed, play_game(new_game(rng))


def run_seeds(seeds: Iterable[int], single_cpu: bool = False) -> List[Tuple[int, Score]]:
    """
    Play one game per seed and return ``(seed, score)`` pairs in seed order.

    Games share no state, so the result is the same with or without the pool.
    """
    seeds = list(seeds)

    if single_cpu:
        results = [run_seed(seed) for seed in seeds]
    else:
        with multiprocessing.Pool() as pool:
            results = pool.map(run_seed, seeds)

    event_bus = EventBus.get_instance()
    for index, (seed, score) in enumerate(results, start=1):
        event_bus.emit(
            EngineEventType.SIMULATION_PROGRESS,
            {"seed": seed, "completed": index, "total": len(seeds), **score.to_dict()},
        )
    return results


def format_result(seed: int, score: Score) -> str:
    """Render one run as ``seed: integer-score (score-detail)``."""
    return f"{seed}: {score.to_int()} ({score})"


def positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"{value} is not a positive integer")
    return number


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Run simulations of War.")
    parser.add_argument(
        "--start", type=int, default=1, help="first seed to play (default: 1)"
    )
    parser.add_argument(
        "--num_games",
        type=positive_int,
        default=1000,
        help="number of seeds to play, one game each (default: 1000)",
    )
    parser.add_argument(
        "--single_cpu",
        action="store_true",
        help="If provided, run the games on a single CPU instead of a process pool.",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print aggregate statistics after the per-seed results.",
    )
    parser.add_argument(
        "--vis",
        action="store_true",
        help="Plot the integer score of every seed.",
    )
    parser.add_argument(
        "--profile",
        action="store_true",
        help="Run with profiling to analyze performance.",
    )
    parser.add_argument(
        "--log_file",
        type=str,
        help="Also write log records to the specified file.",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log at DEBUG level."
    )
    return parser.parse_args(argv)


def main(argv=None):
    """
    Main function to run the simulation.

    Plays one game per seed, prints each result as it is collected, and
    optionally prints a summary, plots the scores, or profiles the run.
    """
    args = parse_args(argv)
    configure_logging(args.verbose, args.log_file)

    profiler = None
    if args.profile:
        profiler = cProfile.Profile()
        profiler.enable()

    seeds = range(args.start, args.start + args.num_games)
    logger.info("Playing %d games from seed %d", len(seeds), args.start)

    start_time = time.time()
    results = run_seeds(seeds, single_cpu=args.single_cpu)
    duration = time.time() - start_time

    stats = SimulationStats()
    graph = ScoreGraph(seeds) if args.vis else None
    for seed, score in results:
        print(format_result(seed, score))
        stats.update(score)
        if graph:
            graph.update(seed, score.to_int())

    logger.info("Finished %d games in %.2f seconds", len(results), duration)

    if args.summary:
        summary = stats.summary()
        EventBus.get_instance().emit(EngineEventType.SIMULATION_RESULT, summary)
        print("\nSimulation completed.")
        print(f"Games played: {summary['games_played']:,}")
        print(f"Player wins: {summary['player_wins']:,}")
        print(f"Player losses: {summary['player_losses']:,}")
        print(f"Capped games: {summary['capped']:,}")
        print(f"Ties: {summary['ties']:,}")
        print(f"Win Rate: {summary['win_rate']:.2%}")
        print(f"Mean score: {summary['mean_score']:,.2f}")
        print(f"Median score: {summary['median_score']:,.2f}")
        if summary["fastest_win"] is not None:
            print(f"Fastest win: {summary['fastest_win']:,} moves")
        print(f"\nDuration of simulation: {duration:.2f} seconds")

    if args.profile and profiler is not None:
        profiler.disable()
        s = io.StringIO()
        ps = pstats.Stats(profiler, stream=s).sort_stats("tottime")
        ps.print_stats()
        print(s.getvalue())

    if graph:
        plt.show()


if __name__ == "__main__":
    main()
