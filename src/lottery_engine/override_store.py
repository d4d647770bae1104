"""Override persistence - admin-entered custom lottery positions per season."""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional

from src.lottery_engine.config import OVERRIDES_DIR
from src.lottery_engine.errors import StoreError
from src.lottery_engine.lottery_state import DraftOverride
from src.lottery_engine.standings_resolver import sanitize_position

logger = logging.getLogger(__name__)


class OverrideStore:
    """Interface for stores holding one custom position per (season, team)."""

    def fetch_overrides(self, season_id: str) -> List[DraftOverride]:
        raise NotImplementedError

    def upsert_override(self, season_id: str, team_id: str, position) -> None:
        raise NotImplementedError

    def clear_overrides(self, season_id: str) -> None:
        raise NotImplementedError


class InMemoryOverrideStore(OverrideStore):
    """Dict-backed store; nothing survives the process."""

    def __init__(self):
        self._overrides: Dict[str, Dict[str, int]] = {}

    def fetch_overrides(self, season_id: str) -> List[DraftOverride]:
        return [
            DraftOverride(season_id=season_id, team_id=team_id, custom_position=pos)
            for team_id, pos in self._overrides.get(season_id, {}).items()
        ]

    def upsert_override(self, season_id: str, team_id: str, position) -> None:
        self._overrides.setdefault(season_id, {})[team_id] = sanitize_position(
            position
        )

    def clear_overrides(self, season_id: str) -> None:
        self._overrides.pop(season_id, None)


class JsonOverrideStore(OverrideStore):
    """Stores each season's overrides in ``overrides_{season_id}.json``."""

    def __init__(self, storage_dir: Optional[Path] = None):
        self.storage_dir = storage_dir or OVERRIDES_DIR
        self.storage_dir.mkdir(parents=True, exist_ok=True)

    def fetch_overrides(self, season_id: str) -> List[DraftOverride]:
        """Load overrides for a season.

        Returns:
            List of overrides; empty if the season has none saved.

        Raises:
            StoreError: If the file exists but cannot be read or parsed.
        """
        data = self._read(season_id)
        try:
            return [
                DraftOverride(
                    season_id=season_id,
                    team_id=str(row["team_id"]),
                    custom_position=sanitize_position(row.get("custom_position")),
                )
                for row in data.get("overrides", [])
            ]
        except (KeyError, TypeError, AttributeError) as e:
            raise StoreError(
                f"Malformed override file for season {season_id}: {e}",
                season_id=season_id,
            ) from e

    def upsert_override(self, season_id: str, team_id: str, position) -> None:
        """Insert or replace the custom position for one team."""
        current = {o.team_id: o.custom_position for o in self.fetch_overrides(season_id)}
        current[str(team_id)] = sanitize_position(position)
        self._write(season_id, current)
        logger.info(
            "Saved override for season %s: team %s -> position %d",
            season_id,
            team_id,
            current[str(team_id)],
        )

    def clear_overrides(self, season_id: str) -> None:
        """Delete every override for a season."""
        filepath = self._path(season_id)
        if not filepath.exists():
            return
        try:
            filepath.unlink()
        except OSError as e:
            raise StoreError(
                f"Could not clear overrides for season {season_id}: {e}",
                season_id=season_id,
            ) from e
        logger.info("Cleared overrides for season %s", season_id)

    def list_seasons(self) -> List[str]:
        """Season IDs that currently have saved overrides."""
        prefix = "overrides_"
        return sorted(
            p.stem[len(prefix):] for p in self.storage_dir.glob(f"{prefix}*.json")
        )

    def _path(self, season_id: str) -> Path:
        return self.storage_dir / f"overrides_{season_id}.json"

    def _read(self, season_id: str) -> Dict:
        filepath = self._path(season_id)
        if not filepath.exists():
            return {}
        try:
            with open(filepath, "r", encoding="utf-8") as f:
                return json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Corrupt override file %s: %s", filepath, e)
            raise StoreError(
                f"Could not read overrides for season {season_id}: {e}",
                season_id=season_id,
            ) from e

    def _write(self, season_id: str, overrides: Dict[str, int]) -> None:
        filepath = self._path(season_id)
        payload = {
            "season_id": season_id,
            "updated_at": datetime.now().isoformat(),
            "overrides": [
                {"team_id": team_id, "custom_position": pos}
                for team_id, pos in overrides.items()
            ],
        }
        try:
            with open(filepath, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2)
        except OSError as e:
            raise StoreError(
                f"Could not save overrides for season {season_id}: {e}",
                season_id=season_id,
            ) from e
