"""Monte Carlo check of a draw engine against the odds table.

Runs the engine many times over a fixed seed list and tabulates how often
each seed landed each pick. With enough runs the pick 1 column converges on
the odds table (seed 1 takes pick 1 about 14.0% of the time). Picks 2-4 use
the table column as weights among the teams still undrawn, so they only
approximate the printed odds.
"""

import logging
from typing import List, Optional

import pandas as pd

from src.lottery_engine.config import LOTTERY_PICKS
from src.lottery_engine.draw_engine import LotteryDrawEngine
from src.lottery_engine.lottery_state import LotterySeed
from src.lottery_engine.odds_table import DEFAULT_ODDS_TABLE, OddsTable
from src.simulation_engine.config import DEFAULT_SIMULATION_RUNS
from src.simulation_engine.models import OddsSimulationResult

logger = logging.getLogger(__name__)


class OddsSimulator:
    """Tabulates seed -> pick outcomes over repeated draws.

    The simulator is stateless apart from the engine it drives.
    """

    def __init__(self, engine: Optional[LotteryDrawEngine] = None):
        self.engine = engine or LotteryDrawEngine()

    def simulate(
        self, seeds: List[LotterySeed], runs: int = DEFAULT_SIMULATION_RUNS
    ) -> OddsSimulationResult:
        """Run ``runs`` independent draws.

        Raises:
            ValueError: If ``runs`` is not positive or ``seeds`` is empty.
        """
        if runs <= 0:
            raise ValueError(f"runs must be positive, got {runs}")
        if not seeds:
            raise ValueError("Cannot simulate a lottery with no seeds")

        total = len(seeds)
        counts = [[0] * total for _ in range(total)]

        for _ in range(runs):
            result = self.engine.draw(seeds)
            for entry in result.entries:
                counts[entry.seed.seed_number - 1][entry.pick - 1] += 1

        index = pd.RangeIndex(1, total + 1, name="seed")
        columns = [f"pick_{i}" for i in range(1, total + 1)]
        counts_df = pd.DataFrame(counts, index=index, columns=columns)
        frequencies = (counts_df / runs * 100).round(2)

        logger.info(
            "Simulated %d draws over %d seeds (seed 1 -> pick 1: %.2f%%)",
            runs,
            total,
            frequencies.iat[0, 0],
        )
        return OddsSimulationResult(
            runs=runs, counts=counts_df, frequencies=frequencies
        )

    @staticmethod
    def compare_to_table(
        result: OddsSimulationResult,
        odds_table: OddsTable = DEFAULT_ODDS_TABLE,
        lottery_picks: int = LOTTERY_PICKS,
    ) -> pd.DataFrame:
        """Observed vs expected percent for every seed over the lottery picks.

        Returns DataFrame with columns:
            seed, pick, expected, observed, diff
        """
        rows = []
        total = len(result.frequencies)
        for seed in range(1, total + 1):
            for pick in range(1, min(lottery_picks, total) + 1):
                expected = odds_table.lookup(seed, pick)
                observed = result.frequency(seed, pick)
                rows.append(
                    {
                        "seed": seed,
                        "pick": pick,
                        "expected": expected,
                        "observed": observed,
                        "diff": round(observed - expected, 2),
                    }
                )
        return pd.DataFrame(rows, columns=["seed", "pick", "expected", "observed", "diff"])
