"""Lottery session - orchestrates season selection, overrides and simulations."""

import logging
from typing import Callable, Dict, List, Optional

from src.lottery_engine.draw_engine import LotteryDrawEngine
from src.lottery_engine.errors import LotteryError, StoreError
from src.lottery_engine.lottery_state import LotterySeed, Season, Team
from src.lottery_engine.odds_table import DEFAULT_ODDS_TABLE, OddsTable
from src.lottery_engine.override_store import OverrideStore
from src.lottery_engine.reveal_sequencer import CelebrationCallback, RevealSequencer
from src.lottery_engine.standings_resolver import (
    StandingsResolver,
    overrides_by_team,
    sanitize_position,
)

logger = logging.getLogger(__name__)


class LotterySession:
    """Main controller behind the draft lottery screen.

    Coordinates the league store (seasons, teams, standings), the
    OverrideStore (admin positions), StandingsResolver (seed order) and
    LotteryDrawEngine / RevealSequencer (simulations).

    Standings and overrides are fetched once per season selection and
    treated as a stable snapshot until the next selection or override
    save/reset. A failed fetch or write leaves the previous snapshot,
    seeds and edit state untouched.
    """

    def __init__(
        self,
        league_store,
        override_store: OverrideStore,
        engine: Optional[LotteryDrawEngine] = None,
        odds_table: OddsTable = DEFAULT_ODDS_TABLE,
    ):
        self.league_store = league_store
        self.override_store = override_store
        self.odds_table = odds_table
        self.engine = engine or LotteryDrawEngine(odds_table=odds_table)

        self.seasons: List[Season] = []
        self.teams: List[Team] = []
        self.selected_season_id: Optional[str] = None
        self.standings = []
        self.overrides: Dict[str, int] = {}
        self.seeds: List[LotterySeed] = []

        self.edit_mode = False
        self.local_positions: Dict[str, int] = {}

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load(self) -> Optional[str]:
        """Fetch seasons and teams, then select the most recent season.

        Returns:
            The selected season ID, or None if the league has no seasons.
        """
        seasons = self._call_store(self.league_store.fetch_seasons)
        teams = self._call_store(self.league_store.fetch_teams)
        self.seasons = seasons
        self.teams = teams

        logger.info("Loaded %d seasons and %d teams", len(seasons), len(teams))

        if not self.seasons:
            return None
        if self.selected_season_id is None:
            self.select_season(self.sorted_seasons()[0].id)
        return self.selected_season_id

    def sorted_seasons(self) -> List[Season]:
        """Seasons, most recent year first."""
        return sorted(self.seasons, key=lambda s: s.year, reverse=True)

    def select_season(self, season_id: str) -> List[LotterySeed]:
        """Switch to a season, fetching a fresh standings/overrides snapshot.

        Raises:
            StoreError: If either fetch fails (previous season stays selected).
        """
        standings = self._call_store(self.league_store.fetch_standings, season_id)
        overrides = overrides_by_team(
            self._call_store(self.override_store.fetch_overrides, season_id)
        )

        self.selected_season_id = season_id
        self.standings = standings
        self.overrides = overrides
        self.edit_mode = False
        self._resolve()

        logger.info(
            "Selected season %s: %d seeds, %d overrides",
            season_id,
            len(self.seeds),
            len(self.overrides),
        )
        return self.seeds

    def _resolve(self) -> None:
        resolver = StandingsResolver(self.teams)
        self.seeds = resolver.resolve(
            self.standings, self.overrides, season_id=self.selected_season_id
        )
        self.local_positions = {
            seed.team_id: seed.effective_position or 0 for seed in self.seeds
        }

    # ------------------------------------------------------------------
    # Odds board
    # ------------------------------------------------------------------

    def odds_board(self) -> List[Dict]:
        """One row per odds-table seed, joined with the team holding it.

        Rows beyond the number of teams have ``team`` set to None.
        """
        board = []
        for seed_number in range(1, self.odds_table.size + 1):
            seed = self.seeds[seed_number - 1] if seed_number <= len(self.seeds) else None
            odds = self.odds_table.row(seed_number)
            board.append(
                {
                    "seed": seed_number,
                    "team": seed.team if seed else None,
                    "record": seed.record_label if seed else None,
                    "position": seed.effective_position if seed else None,
                    "is_overridden": seed.is_overridden if seed else False,
                    "odds": [self.odds_table.format_cell(v) for v in odds],
                    "intensity": [self.odds_table.intensity(v) for v in odds],
                }
            )
        return board

    # ------------------------------------------------------------------
    # Override editing
    # ------------------------------------------------------------------

    def begin_edit(self) -> None:
        self.edit_mode = True

    def cancel_edit(self) -> None:
        """Leave edit mode, discarding unsaved positions."""
        self.edit_mode = False
        self.local_positions = {
            seed.team_id: seed.effective_position or 0 for seed in self.seeds
        }

    def set_local_position(self, team_id: str, value) -> int:
        """Stage a position edit; junk input is stored as 0."""
        if not self.edit_mode:
            raise LotteryError("Not in edit mode")
        position = sanitize_position(value)
        self.local_positions[team_id] = position
        return position

    def save_overrides(self) -> List[LotterySeed]:
        """Persist every staged position as an override for the season.

        Raises:
            LotteryError: If no season is selected.
            StoreError: If a write or the follow-up fetch fails.
        """
        season_id = self._require_season()
        for team_id, position in self.local_positions.items():
            self._call_store(
                self.override_store.upsert_override, season_id, team_id, position
            )
        logger.info(
            "Saved %d overrides for season %s", len(self.local_positions), season_id
        )
        self._refresh_overrides(season_id)
        self.edit_mode = False
        return self.seeds

    def reset_overrides(self) -> List[LotterySeed]:
        """Delete all overrides for the season and fall back to raw standings."""
        season_id = self._require_season()
        self._call_store(self.override_store.clear_overrides, season_id)
        logger.info("Reset overrides for season %s", season_id)
        self._refresh_overrides(season_id)
        self.edit_mode = False
        return self.seeds

    def _refresh_overrides(self, season_id: str) -> None:
        overrides = overrides_by_team(
            self._call_store(self.override_store.fetch_overrides, season_id)
        )
        self.overrides = overrides
        self._resolve()

    # ------------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------------

    def start_simulation(
        self, on_celebrate: Optional[CelebrationCallback] = None
    ) -> RevealSequencer:
        """Draw a lottery for the current seeds and wrap it for revealing.

        Raises:
            LotteryError: If the season has no seeds to draw.
        """
        if not self.seeds:
            raise LotteryError(
                f"No standings for season {self.selected_season_id}; cannot draw"
            )
        return RevealSequencer(self.engine, self.seeds, on_celebrate=on_celebrate)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _require_season(self) -> str:
        if self.selected_season_id is None:
            raise LotteryError("No season selected")
        return self.selected_season_id

    def _call_store(self, func: Callable, *args):
        """Call a store operation, surfacing any failure as StoreError."""
        try:
            return func(*args)
        except StoreError:
            raise
        except Exception as e:
            name = getattr(func, "__name__", "store call")
            season_id = args[0] if args else None
            logger.warning("Store call %s failed: %s", name, e)
            raise StoreError(f"{name} failed: {e}", season_id=season_id) from e
