"""
Scoreboard System

Running [home, away] score used when condensing a scoring summary. Sides are
box-score positions (0 = home, 1 = away) rather than team ids, so a score can
be rebuilt from a serialized box score without the league's team registry.
"""

from enum import Enum
from typing import List, Optional


class ScoringType(Enum):
    """
    Scoring types as shown in the scoring summary column.

    Point values live in POINTS since a two-point conversion and a safety
    are both worth 2.
    """
    TOUCHDOWN = "TD"
    FIELD_GOAL = "FG"
    EXTRA_POINT = "XP"
    TWO_POINT_CONVERSION = "2P"


POINTS = {
    ScoringType.TOUCHDOWN: 6,
    ScoringType.FIELD_GOAL: 3,
    ScoringType.EXTRA_POINT: 1,
    ScoringType.TWO_POINT_CONVERSION: 2,
}


class RunningScore:
    """
    Running score for both sides of a game.

    Snapshots are independent copies so condensed rows never share state
    with the tally.
    """

    def __init__(self):
        self.scores: List[int] = [0, 0]

    def add_points(self, side: int, points: int) -> None:
        """
        Add points to a side's score

        Raises:
            ValueError: If side is not 0 or 1
        """
        if side not in (0, 1):
            raise ValueError(f"Invalid side: {side}. Must be 0 (home) or 1 (away).")
        self.scores[side] += points

    def snapshot(self) -> List[int]:
        """Copy of the current [home, away] score"""
        return list(self.scores)

    def is_tied(self) -> bool:
        return self.scores[0] == self.scores[1]

    def get_leading_side(self) -> Optional[int]:
        """Side currently ahead, or None if tied"""
        if self.is_tied():
            return None
        return 0 if self.scores[0] > self.scores[1] else 1

    def __str__(self) -> str:
        return f"{self.scores[0]}-{self.scores[1]}"

    def __repr__(self) -> str:
        return f"RunningScore(home={self.scores[0]}, away={self.scores[1]})"
