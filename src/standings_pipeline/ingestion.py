"""CSV ingestion for league exports (seasons, teams, standings).

Each table of the hosted store is exported as its own CSV. Everything is
read as text so IDs keep their exact form; numeric cleanup happens in
:mod:`src.standings_pipeline.cleaning`.
"""

import logging
from pathlib import Path

import pandas as pd

from src.standings_pipeline.config import (
    FILE_PATTERNS,
    SEASON_COLUMNS,
    STANDING_COLUMNS,
    TEAM_COLUMNS,
)

logger = logging.getLogger(__name__)


class IngestionError(Exception):
    """Raised when CSV ingestion fails."""


class LeagueCsvIngester:
    """Reads league CSV exports into raw string DataFrames."""

    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)

    def _resolve_path(self, file_key: str) -> Path:
        """Build the full file path for a given file key, raising if missing."""
        filepath = self.data_dir / FILE_PATTERNS[file_key]
        if not filepath.exists():
            raise FileNotFoundError(f"Expected file not found: {filepath}")
        return filepath

    def _read(self, file_key: str, required: list[str]) -> pd.DataFrame:
        """Read one export as text, normalizing header names."""
        filepath = self._resolve_path(file_key)
        logger.info("Reading %s: %s", file_key, filepath.name)

        df = pd.read_csv(filepath, dtype=str, keep_default_na=False)
        df.columns = [str(c).strip().lower() for c in df.columns]

        missing = [c for c in required if c not in df.columns]
        if missing:
            raise ValueError(f"{filepath.name} is missing columns: {missing}")

        return df

    def read_seasons(self) -> pd.DataFrame:
        """Read seasons.csv.

        Returns DataFrame with columns: id, year, name
        """
        df = self._read("seasons", ["id", "year"])
        if "name" not in df.columns:
            df = df.assign(name="")
        df = df[SEASON_COLUMNS]
        logger.info("Loaded %d seasons", len(df))
        return df

    def read_teams(self) -> pd.DataFrame:
        """Read teams.csv.

        Returns DataFrame with columns: id, name, logo_url
        """
        df = self._read("teams", ["id", "name"])
        if "logo_url" not in df.columns:
            df = df.assign(logo_url="")
        df = df[TEAM_COLUMNS]
        logger.info("Loaded %d teams", len(df))
        return df

    def read_standings(self) -> pd.DataFrame:
        """Read standings.csv.

        Returns DataFrame with columns:
            season_id, team_id, wins, losses, position
        """
        df = self._read("standings", STANDING_COLUMNS)[STANDING_COLUMNS]
        logger.info("Loaded %d standings rows", len(df))
        return df

    def read_all(self) -> dict[str, pd.DataFrame]:
        """Read all three CSV files and return them as a dict.

        Returns:
            dict with keys: 'seasons', 'teams', 'standings'

        Raises:
            IngestionError: if any file cannot be read.
        """
        try:
            return {
                "seasons": self.read_seasons(),
                "teams": self.read_teams(),
                "standings": self.read_standings(),
            }
        except Exception as e:
            raise IngestionError(f"Failed to read CSV files: {e}") from e
