from src.lottery_engine.draw_engine import LotteryDrawEngine
from src.lottery_engine.errors import LotteryError, StoreError
from src.lottery_engine.lottery_session import LotterySession
from src.lottery_engine.lottery_state import (
    DraftOverride,
    DrawEntry,
    DrawResult,
    LotterySeed,
    Season,
    SeasonStanding,
    Team,
)
from src.lottery_engine.odds_table import DEFAULT_ODDS_TABLE, LOTTERY_ODDS, OddsTable
from src.lottery_engine.override_store import (
    InMemoryOverrideStore,
    JsonOverrideStore,
    OverrideStore,
)
from src.lottery_engine.reveal_sequencer import RevealSequencer
from src.lottery_engine.standings_resolver import StandingsResolver, sanitize_position

__all__ = [
    "DEFAULT_ODDS_TABLE",
    "DraftOverride",
    "DrawEntry",
    "DrawResult",
    "InMemoryOverrideStore",
    "JsonOverrideStore",
    "LOTTERY_ODDS",
    "LotteryDrawEngine",
    "LotteryError",
    "LotterySeed",
    "LotterySession",
    "OddsTable",
    "OverrideStore",
    "RevealSequencer",
    "Season",
    "SeasonStanding",
    "StandingsResolver",
    "StoreError",
    "Team",
    "sanitize_position",
]
