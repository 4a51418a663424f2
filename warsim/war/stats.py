"""
This module contains the SimulationStats class which is responsible for
tracking and summarizing the results of many War games.
"""

from typing import Any, Dict, List

import numpy as np

from warsim.war.state import Outcome, Score


class SimulationStats:
    """
    A class that holds the statistics of a batch of simulated games.
    """

    def __init__(self):
        """
        Initializes the SimulationStats with default values.
        """
        self.games_played = 0
        self.outcomes = {outcome: 0 for outcome in Outcome}
        self.scores: List[int] = []
        self.winning_moves: List[int] = []

    def update(self, score: Score):
        """Updates the statistics with the final score of one game."""
        self.games_played += 1
        self.outcomes[score.outcome] += 1
        self.scores.append(score.to_int())
        if score.outcome is Outcome.WIN_AFTER:
            self.winning_moves.append(score.value)

    def report(self) -> Dict[str, Any]:
        """
        Returns a dictionary containing the outcome counts.
        """
        return {
            "games_played": self.games_played,
            "player_wins": self.outcomes[Outcome.WIN_AFTER],
            "player_losses": self.outcomes[Outcome.LOSE_AFTER],
            "capped": self.outcomes[Outcome.FINISH_WITH],
            "ties": self.outcomes[Outcome.TIED_AT],
        }

    def summary(self) -> Dict[str, Any]:
        """
        Returns the outcome counts together with score distribution figures.

        :raises ValueError: If no games have been recorded
        """
        if not self.games_played:
            raise ValueError("No games have been recorded.")

        scores = np.array(self.scores)
        summary = self.report()
        summary["win_rate"] = summary["player_wins"] / self.games_played
        summary["mean_score"] = float(np.mean(scores))
        summary["median_score"] = float(np.median(scores))
        summary["min_score"] = int(np.min(scores))
        summary["max_score"] = int(np.max(scores))
        if self.winning_moves:
            moves = np.array(self.winning_moves)
            summary["mean_winning_moves"] = float(np.mean(moves))
            summary["fastest_win"] = int(np.min(moves))
        else:
            summary["mean_winning_moves"] = None
            summary["fastest_win"] = None
        return summary
