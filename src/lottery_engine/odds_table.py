"""Lottery odds table - percent chance of each seed landing each pick."""

from typing import Tuple

import pandas as pd

from src.lottery_engine.config import INTENSITY_BUCKETS

# Rows are seeds 1..14 (worst record first), columns are picks 1..14.
LOTTERY_ODDS: Tuple[Tuple[float, ...], ...] = (
    (14.0, 13.4, 12.7, 11.9, 47.9, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0),
    (14.0, 13.4, 12.8, 12.0, 27.8, 20.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0),
    (14.0, 13.4, 12.7, 12.0, 14.8, 26.0, 7.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0),
    (12.5, 12.2, 11.9, 11.5, 7.2, 25.8, 16.7, 2.2, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0),
    (10.5, 10.5, 10.6, 10.5, 2.2, 19.6, 26.8, 8.7, 0.6, 0.0, 0.0, 0.0, 0.0, 0.0),
    (9.0, 9.2, 9.4, 9.6, 0.0, 8.6, 29.8, 20.6, 3.7, 0.1, 0.0, 0.0, 0.0, 0.0),
    (7.5, 7.8, 8.1, 8.5, 0.0, 0.0, 19.7, 34.1, 12.9, 1.3, 0.0, 0.0, 0.0, 0.0),
    (6.0, 6.4, 6.8, 7.2, 0.0, 0.0, 0.0, 34.5, 32.1, 6.7, 0.4, 0.0, 0.0, 0.0),
    (4.5, 4.8, 5.2, 5.7, 0.0, 0.0, 0.0, 0.0, 50.7, 25.9, 3.0, 0.1, 0.0, 0.0),
    (3.0, 3.3, 3.6, 4.0, 0.0, 0.0, 0.0, 0.0, 0.0, 65.9, 19.0, 1.2, 0.0, 0.0),
    (2.0, 2.2, 2.5, 2.8, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 77.6, 12.6, 0.4, 0.0),
    (1.5, 1.7, 1.9, 2.1, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 86.1, 6.7, 0.1),
    (1.0, 1.1, 1.2, 1.4, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 92.9, 2.3),
    (0.5, 0.6, 0.6, 0.7, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 97.6),
)


class OddsTable:
    """Read-only access to the lottery odds matrix.

    Seeds and picks are both 1-based. Any combination outside the table
    (including seeds beyond 14 in larger leagues) has zero odds.
    """

    def __init__(self, odds: Tuple[Tuple[float, ...], ...] = LOTTERY_ODDS):
        self._odds = odds

    @property
    def size(self) -> int:
        return len(self._odds)

    def lookup(self, seed: int, pick: int) -> float:
        """Percent chance (0-100) that ``seed`` lands ``pick``."""
        if not 1 <= seed <= len(self._odds):
            return 0.0
        row = self._odds[seed - 1]
        if not 1 <= pick <= len(row):
            return 0.0
        return row[pick - 1]

    def row(self, seed: int) -> Tuple[float, ...]:
        """All pick odds for a seed, or an empty tuple if the seed has no row."""
        if not 1 <= seed <= len(self._odds):
            return ()
        return self._odds[seed - 1]

    @staticmethod
    def format_cell(value: float) -> str:
        """Format a percentage the way the odds chart shows it (e.g. '14.0%')."""
        return f"{value:.1f}%"

    @staticmethod
    def intensity(value: float) -> str:
        """Heat bucket for an odds chart cell."""
        if value == 0:
            return "none"
        for lower_bound, label in INTENSITY_BUCKETS:
            if value >= lower_bound:
                return label
        return "low"

    def to_dataframe(self) -> pd.DataFrame:
        """Odds matrix as a DataFrame indexed by seed, one column per pick."""
        df = pd.DataFrame(
            [list(row) for row in self._odds],
            columns=[f"pick_{i}" for i in range(1, len(self._odds[0]) + 1)],
        )
        df.index = pd.RangeIndex(1, len(self._odds) + 1, name="seed")
        return df


DEFAULT_ODDS_TABLE = OddsTable()

