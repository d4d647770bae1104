"""Read-only league store backed by CSV exports."""

import logging
from pathlib import Path
from typing import Dict, List, Optional

import pandas as pd

from src.lottery_engine.errors import StoreError
from src.lottery_engine.lottery_state import Season, SeasonStanding, Team
from src.standings_pipeline.cleaning import StandingsCleaner
from src.standings_pipeline.ingestion import IngestionError, LeagueCsvIngester

logger = logging.getLogger(__name__)


class CsvLeagueStore:
    """Serves seasons, teams and standings from a directory of CSV exports.

    Files are read and cleaned once, on first access. Call :meth:`reload`
    to pick up changes on disk.
    """

    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)
        self._tables: Optional[Dict[str, pd.DataFrame]] = None

    def reload(self) -> None:
        self._tables = None

    def _load(self) -> Dict[str, pd.DataFrame]:
        if self._tables is None:
            try:
                raw = LeagueCsvIngester(self.data_dir).read_all()
            except IngestionError as e:
                raise StoreError(f"Could not load league data: {e}") from e
            self._tables = StandingsCleaner().clean_all(raw)
        return self._tables

    def fetch_seasons(self) -> List[Season]:
        df = self._load()["seasons"]
        return [
            Season(id=row["id"], year=row["year"], name=row["name"] or None)
            for _, row in df.iterrows()
        ]

    def fetch_teams(self) -> List[Team]:
        df = self._load()["teams"]
        return [
            Team(id=row["id"], name=row["name"], logo_url=row["logo_url"] or None)
            for _, row in df.iterrows()
        ]

    def fetch_standings(self, season_id: str) -> List[SeasonStanding]:
        """Standings rows for one season, in file order."""
        df = self._load()["standings"]
        season_df = df[df["season_id"] == str(season_id)]
        if season_df.empty:
            logger.info("No standings found for season %s", season_id)
        return [
            SeasonStanding(
                season_id=row["season_id"],
                team_id=row["team_id"],
                wins=int(row["wins"]),
                losses=int(row["losses"]),
                position=int(row["position"]),
            )
            for _, row in season_df.iterrows()
        ]
