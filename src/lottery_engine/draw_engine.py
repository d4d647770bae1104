"""Lottery draw engine - weighted draw for the top picks, standings order after."""

import logging
import random
from typing import List, Optional

from src.lottery_engine.config import LOTTERY_PICKS
from src.lottery_engine.lottery_state import DrawEntry, DrawResult, LotterySeed
from src.lottery_engine.odds_table import DEFAULT_ODDS_TABLE, OddsTable

logger = logging.getLogger(__name__)


class LotteryDrawEngine:
    """Produces one draft order per call to :meth:`draw`.

    The first ``lottery_picks`` picks are drawn at random, weighted by the
    odds table. Weights are always looked up with the team's seed number
    in the full list, not its position among the teams still available.
    Remaining picks go to the undrawn teams in seed order.

    ``rng`` only needs a ``random()`` method returning a float in [0, 1),
    so tests can pass a scripted source.
    """

    def __init__(
        self,
        odds_table: OddsTable = DEFAULT_ODDS_TABLE,
        rng: Optional[random.Random] = None,
        lottery_picks: int = LOTTERY_PICKS,
    ):
        self.odds_table = odds_table
        self.rng = rng if rng is not None else random.Random()
        self.lottery_picks = lottery_picks

    def draw(self, seeds: List[LotterySeed]) -> DrawResult:
        """Run one lottery over a worst-first seed list.

        Returns:
            DrawResult with one entry per seed. Empty when ``seeds`` is empty.
        """
        if not seeds:
            logger.info("No seeds to draw; returning empty result")
            return DrawResult(entries=[], seeds=[])

        available = list(seeds)
        entries: List[DrawEntry] = []
        total = len(seeds)

        for pick in range(1, min(self.lottery_picks, total) + 1):
            selected = self._draw_pick(available, pick)
            entries.append(DrawEntry(pick=pick, seed=selected))
            available.remove(selected)
            logger.debug(
                "Lottery pick %d: seed %d (%s)",
                pick,
                selected.seed_number,
                selected.team.name,
            )

        # Non-lottery picks follow reverse standings among undrawn teams
        for seed in available:
            entries.append(DrawEntry(pick=len(entries) + 1, seed=seed))

        result = DrawResult(entries=entries, seeds=list(seeds))
        logger.info(
            "Lottery complete: %d picks, #1 -> %s (seed %d)",
            total,
            entries[0].team.name,
            entries[0].seed.seed_number,
        )
        return result

    def _draw_pick(self, available: List[LotterySeed], pick: int) -> LotterySeed:
        """Select one team for ``pick`` from the teams still available."""
        weights = [
            self.odds_table.lookup(seed.seed_number, pick) for seed in available
        ]
        total_weight = sum(weights)

        if total_weight <= 0:
            fallback = available[-1]
            logger.warning(
                "Zero total weight for pick %d; falling back to seed %d",
                pick,
                fallback.seed_number,
            )
            return fallback

        remaining = self.rng.random() * total_weight
        last_eligible = available[-1]
        for seed, weight in zip(available, weights):
            if weight <= 0:
                continue
            last_eligible = seed
            remaining -= weight
            if remaining <= 0:
                return seed

        # Float rounding can leave a sliver; the last weighted team absorbs it
        return last_eligible
