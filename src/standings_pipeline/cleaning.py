"""Data cleaning for league CSV exports.

- Strip whitespace from every text cell
- Drop rows with no ID (and standings rows with no season/team)
- Parse wins/losses/position to ints ("12", "12.0", " 1,2 " -> 12)
- Drop duplicate standings rows for the same season/team
"""

import logging

import pandas as pd

from src.standings_pipeline.config import STANDING_NUMERIC_COLUMNS

logger = logging.getLogger(__name__)


def _parse_int(value) -> int:
    """Parse an integer cell, returning 0 for blanks and junk."""
    if value is None or value is pd.NA:
        return 0
    if isinstance(value, float) and pd.isna(value):
        return 0
    s = str(value).replace(",", "").strip().strip('"')
    if not s:
        return 0
    try:
        return int(float(s))
    except ValueError:
        return 0


class StandingsCleaner:
    """Cleans raw league DataFrames from :class:`LeagueCsvIngester`."""

    @staticmethod
    def _strip_strings(df: pd.DataFrame) -> pd.DataFrame:
        df = df.copy()
        for col in df.columns:
            df[col] = df[col].fillna("").astype(str).str.strip().str.strip('"')
        return df

    @staticmethod
    def _drop_blank(df: pd.DataFrame, columns: list[str], label: str) -> pd.DataFrame:
        mask = pd.Series(True, index=df.index)
        for col in columns:
            mask &= df[col] != ""
        dropped = int((~mask).sum())
        if dropped:
            logger.warning("Dropping %d %s rows with blank %s", dropped, label, columns)
        return df[mask].reset_index(drop=True)

    def clean_seasons(self, df: pd.DataFrame) -> pd.DataFrame:
        df = self._strip_strings(df)
        return self._drop_blank(df, ["id"], "season")

    def clean_teams(self, df: pd.DataFrame) -> pd.DataFrame:
        df = self._strip_strings(df)
        df = self._drop_blank(df, ["id"], "team")
        duplicated = df["id"].duplicated(keep="first")
        if duplicated.any():
            logger.warning(
                "Dropping %d duplicate team IDs: %s",
                int(duplicated.sum()),
                df.loc[duplicated, "id"].tolist(),
            )
            df = df[~duplicated].reset_index(drop=True)
        return df

    def clean_standings(self, df: pd.DataFrame) -> pd.DataFrame:
        """Clean standings while keeping file order (it breaks seed ties)."""
        df = self._strip_strings(df)
        df = self._drop_blank(df, ["season_id", "team_id"], "standings")

        for col in STANDING_NUMERIC_COLUMNS:
            df[col] = df[col].apply(_parse_int).astype(int)

        duplicated = df.duplicated(subset=["season_id", "team_id"], keep="first")
        if duplicated.any():
            logger.warning(
                "Dropping %d duplicate standings rows", int(duplicated.sum())
            )
            df = df[~duplicated].reset_index(drop=True)

        return df

    def clean_all(self, raw: dict[str, pd.DataFrame]) -> dict[str, pd.DataFrame]:
        """Clean every table returned by ``LeagueCsvIngester.read_all``."""
        cleaned = {
            "seasons": self.clean_seasons(raw["seasons"]),
            "teams": self.clean_teams(raw["teams"]),
            "standings": self.clean_standings(raw["standings"]),
        }
        logger.info(
            "Cleaned: %d seasons, %d teams, %d standings rows",
            len(cleaned["seasons"]),
            len(cleaned["teams"]),
            len(cleaned["standings"]),
        )
        return cleaned
