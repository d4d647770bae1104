"""Standings resolution - turns season standings plus overrides into a seed list."""

import logging
import math
from typing import Dict, Iterable, List, Mapping, Optional

from src.lottery_engine.lottery_state import (
    DraftOverride,
    LotterySeed,
    SeasonStanding,
    Team,
)

logger = logging.getLogger(__name__)


def sanitize_position(value) -> int:
    """Coerce an admin-entered position to an int, defaulting to 0.

    Accepts ints, floats and numeric strings ("7", " 7 ", "7.0").
    Anything else (None, NaN, "", "abc") becomes 0.
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return 0 if math.isnan(value) or math.isinf(value) else int(value)
    try:
        return int(float(str(value).strip()))
    except (ValueError, TypeError, OverflowError):
        return 0


def overrides_by_team(overrides: Iterable[DraftOverride]) -> Dict[str, int]:
    """Map team_id -> custom position (later rows win)."""
    return {o.team_id: sanitize_position(o.custom_position) for o in overrides}


class StandingsResolver:
    """Builds the lottery seed list for one season.

    Seeds are ordered by effective position descending, so the largest
    position number (worst record) becomes seed 1. Teams sharing an
    effective position keep their input order.
    """

    def __init__(self, teams: Optional[Iterable[Team]] = None):
        self.teams: Optional[Dict[str, Team]] = (
            {team.id: team for team in teams} if teams is not None else None
        )

    def resolve(
        self,
        standings: Iterable[SeasonStanding],
        overrides: Optional[Mapping[str, int]] = None,
        season_id: Optional[str] = None,
    ) -> List[LotterySeed]:
        """Resolve standings into an ordered seed list.

        Args:
            standings: Standings rows, in fetch order.
            overrides: team_id -> custom position. Values must already be
                sanitized ints (see :func:`sanitize_position`).
            season_id: If given, rows from other seasons are ignored.

        Returns:
            Seeds worst-first. Empty if there are no usable standings.
        """
        overrides = overrides or {}

        candidates = []
        for standing in standings:
            if season_id is not None and standing.season_id != season_id:
                continue

            team = self._find_team(standing.team_id)
            if team is None:
                logger.warning(
                    "Dropping standings row for unknown team %s (season %s)",
                    standing.team_id,
                    standing.season_id,
                )
                continue

            effective = overrides.get(standing.team_id, standing.position)
            candidates.append((team, standing, effective))

        # sorted() is stable, so ties keep fetch order
        ordered = sorted(candidates, key=lambda c: c[2] or 0, reverse=True)

        seeds = [
            LotterySeed(
                team=team,
                seed_number=i,
                original_position=standing.position,
                effective_position=effective,
                wins=standing.wins,
                losses=standing.losses,
            )
            for i, (team, standing, effective) in enumerate(ordered, start=1)
        ]

        overridden = sum(1 for s in seeds if s.is_overridden)
        logger.info(
            "Resolved %d lottery seeds (%d overridden)", len(seeds), overridden
        )
        return seeds

    def _find_team(self, team_id: str) -> Optional[Team]:
        """Look up a team, or build a placeholder when no directory was given."""
        if self.teams is None:
            return Team(id=team_id, name=str(team_id))
        return self.teams.get(team_id)
