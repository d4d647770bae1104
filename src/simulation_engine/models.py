"""Data models for the simulation engine."""

from dataclasses import dataclass

import pandas as pd


@dataclass
class OddsSimulationResult:
    """Empirical outcome of running many lottery draws over one seed list."""

    runs: int
    counts: pd.DataFrame  # index: seed number, columns: pick_1..pick_N
    frequencies: pd.DataFrame  # counts as percent of runs

    def frequency(self, seed: int, pick: int) -> float:
        """Observed percent of runs in which ``seed`` landed ``pick``."""
        return float(self.frequencies.at[seed, f"pick_{pick}"])
