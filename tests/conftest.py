"""Shared fixtures for the draft lottery test suite."""

import textwrap

import pytest

from src.lottery_engine.lottery_state import Season, SeasonStanding, Team
from src.lottery_engine.override_store import InMemoryOverrideStore
from src.lottery_engine.standings_resolver import StandingsResolver


# ------------------------------------------------------------------
# Random sources
# ------------------------------------------------------------------

class ScriptedRandom:
    """Stand-in for random.Random that replays fixed values.

    The last value repeats once the script runs out, so
    ``ScriptedRandom([0.0])`` always returns 0.0.
    """

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def random(self):
        self.calls += 1
        if len(self.values) > 1:
            return self.values.pop(0)
        return self.values[0]


# Selects the last weighted team in the available list
ALWAYS_LAST = 0.999999
# Selects the first weighted team in the available list
ALWAYS_FIRST = 0.0


# ------------------------------------------------------------------
# League factories – cheap to construct, no I/O
# ------------------------------------------------------------------

def make_teams(n):
    return [Team(id=f"t{i}", name=f"Team {i}") for i in range(1, n + 1)]


def make_standings(n, season_id="s1"):
    """Standings for ``n`` teams where team ``t{i}`` finished in position ``i``."""
    return [
        SeasonStanding(
            season_id=season_id,
            team_id=f"t{i}",
            wins=n - i,
            losses=i - 1,
            position=i,
        )
        for i in range(1, n + 1)
    ]


def make_seeds(n, overrides=None):
    """Resolved seeds for ``n`` teams; seed 1 is team ``t{n}`` (worst record)."""
    resolver = StandingsResolver(make_teams(n))
    return resolver.resolve(make_standings(n), overrides)


class FakeLeagueStore:
    """In-memory league store with switchable failures."""

    def __init__(self, seasons=None, teams=None, standings=None):
        self.seasons = seasons or []
        self.teams = teams or []
        self.standings = standings or []
        self.fail = False
        self.standings_fetches = 0

    def fetch_seasons(self):
        if self.fail:
            raise ConnectionError("league store unavailable")
        return list(self.seasons)

    def fetch_teams(self):
        if self.fail:
            raise ConnectionError("league store unavailable")
        return list(self.teams)

    def fetch_standings(self, season_id):
        if self.fail:
            raise ConnectionError("league store unavailable")
        self.standings_fetches += 1
        return [s for s in self.standings if s.season_id == season_id]


class FailingOverrideStore(InMemoryOverrideStore):
    """Override store whose calls can be made to fail on demand."""

    def __init__(self):
        super().__init__()
        self.fail_reads = False
        self.fail_writes = False

    def fetch_overrides(self, season_id):
        if self.fail_reads:
            raise OSError("override store unavailable")
        return super().fetch_overrides(season_id)

    def upsert_override(self, season_id, team_id, position):
        if self.fail_writes:
            raise OSError("override store unavailable")
        super().upsert_override(season_id, team_id, position)

    def clear_overrides(self, season_id):
        if self.fail_writes:
            raise OSError("override store unavailable")
        super().clear_overrides(season_id)


@pytest.fixture
def league_store():
    """Two seasons: 2024 with six teams, 2023 with four."""
    teams = make_teams(6)
    standings = make_standings(6, season_id="s2024") + make_standings(
        4, season_id="s2023"
    )
    seasons = [
        Season(id="s2023", year="2023"),
        Season(id="s2024", year="2024", name="Temporada 2024"),
    ]
    return FakeLeagueStore(seasons=seasons, teams=teams, standings=standings)


@pytest.fixture
def override_store():
    return FailingOverrideStore()


# ------------------------------------------------------------------
# CSV exports
# ------------------------------------------------------------------

@pytest.fixture
def csv_dir(tmp_path):
    """Directory holding a small, slightly messy league export."""
    data_dir = tmp_path / "raw"
    data_dir.mkdir()
    (data_dir / "seasons.csv").write_text(textwrap.dedent("""\
        id,year,name
        s2023,2023,
        s2024,2024,Temporada 2024
    """))
    (data_dir / "teams.csv").write_text(textwrap.dedent("""\
        id,name,logo_url
        t1,Team 1,https://example.com/t1.png
        t2,Team 2,
        t3, Team 3 ,
        t4,Team 4,
        t5,Team 5,
    """))
    (data_dir / "standings.csv").write_text(textwrap.dedent("""\
        season_id,team_id,wins,losses,position
        s2024,t1,10,2,1
        s2024,t2,8,4,2
        s2024,t3,6,6,3
        s2024,t4,4,8,4
        s2024,t5,2,10,5
        s2023,t1,3,9,4
        s2023,t2,9,3,1
        s2023,t3,7,5,2
        s2023,t4,5,7,3
    """))
    return data_dir
