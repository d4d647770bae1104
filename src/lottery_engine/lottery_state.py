"""Lottery data models - league records read from the store and derived draw state."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass(frozen=True)
class Season:
    """A league season."""

    id: str
    year: str
    name: Optional[str] = None

    @property
    def label(self) -> str:
        """Display label (name when set, otherwise the year)."""
        return self.name or self.year


@dataclass(frozen=True)
class Team:
    """A league franchise."""

    id: str
    name: str
    logo_url: Optional[str] = None


@dataclass(frozen=True)
class SeasonStanding:
    """Final standings row for one team in one season (position 1 = best)."""

    season_id: str
    team_id: str
    wins: int
    losses: int
    position: Optional[int]


@dataclass(frozen=True)
class DraftOverride:
    """Admin-entered replacement for a team's standings position."""

    season_id: str
    team_id: str
    custom_position: int


@dataclass(frozen=True)
class LotterySeed:
    """A team's place in the lottery pool.

    ``seed_number`` is 1-based within the full resolved list, so seed 1 is
    the worst record and carries the best odds at pick 1.
    """

    team: Team
    seed_number: int
    original_position: Optional[int]
    effective_position: Optional[int]
    wins: int = 0
    losses: int = 0

    @property
    def team_id(self) -> str:
        return self.team.id

    @property
    def is_overridden(self) -> bool:
        return self.effective_position != self.original_position

    @property
    def record_label(self) -> str:
        return f"{self.wins}-{self.losses}"


@dataclass(frozen=True)
class DrawEntry:
    """One assigned draft slot."""

    pick: int
    seed: LotterySeed

    @property
    def team(self) -> Team:
        return self.seed.team


@dataclass
class DrawResult:
    """Complete draft order produced by one lottery draw."""

    entries: List[DrawEntry] = field(default_factory=list)
    seeds: List[LotterySeed] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def total(self) -> int:
        return len(self.entries)

    def get_entry(self, pick: int) -> Optional[DrawEntry]:
        """Get the entry for a pick number (1-based)."""
        if 1 <= pick <= len(self.entries):
            return self.entries[pick - 1]
        return None

    def team_order(self) -> List[str]:
        """Team IDs in pick order."""
        return [entry.team.id for entry in self.entries]

    def pick_for_team(self, team_id: str) -> Optional[int]:
        """Pick number a team received, or None if not in the draw."""
        for entry in self.entries:
            if entry.team.id == team_id:
                return entry.pick
        return None

    def to_dict(self) -> Dict:
        """JSON-serializable view of the draw."""
        return {
            "total_picks": len(self.entries),
            "picks": [
                {
                    "pick": entry.pick,
                    "team_id": entry.team.id,
                    "team_name": entry.team.name,
                    "seed": entry.seed.seed_number,
                    "record": entry.seed.record_label,
                }
                for entry in self.entries
            ],
        }
