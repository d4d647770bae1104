"""Reveal sequencer - user-paced disclosure of a computed draw, last pick first."""

import logging
from typing import Callable, List, Optional

from src.lottery_engine.config import CELEBRATION_PICK_THRESHOLD
from src.lottery_engine.draw_engine import LotteryDrawEngine
from src.lottery_engine.lottery_state import DrawEntry, DrawResult, LotterySeed

logger = logging.getLogger(__name__)

CelebrationCallback = Callable[[Optional[DrawEntry]], None]


class RevealSequencer:
    """Stateful wrapper around a DrawResult.

    Picks are revealed from the highest pick number down to pick 1.
    ``revealed`` only grows, except on :meth:`restart`, which draws a
    brand-new result.

    ``on_celebrate`` is called with the entry each time a top pick
    (pick <= 3) is revealed, and once with ``None`` when the sequence is
    skipped to the end.
    """

    NOT_STARTED = "not_started"
    REVEALING = "revealing"
    COMPLETE = "complete"

    def __init__(
        self,
        engine: LotteryDrawEngine,
        seeds: List[LotterySeed],
        on_celebrate: Optional[CelebrationCallback] = None,
        result: Optional[DrawResult] = None,
    ):
        self.engine = engine
        self.seeds = list(seeds)
        self.on_celebrate = on_celebrate
        self.result = result if result is not None else engine.draw(self.seeds)
        self.revealed = 0

    @property
    def total(self) -> int:
        return len(self.result)

    @property
    def state(self) -> str:
        if self.revealed == 0:
            return self.NOT_STARTED
        if self.revealed < self.total:
            return self.REVEALING
        return self.COMPLETE

    @property
    def is_complete(self) -> bool:
        """Whether every pick has been revealed (trivially true for an empty draw)."""
        return self.revealed >= self.total

    @property
    def next_pick_number(self) -> int:
        """Pick number the next reveal will show (0 once complete)."""
        return self.total - self.revealed

    @property
    def visible_results(self) -> List[DrawEntry]:
        """Revealed entries, ascending by pick (most recent reveal first)."""
        cutoff = self.total - self.revealed
        return [entry for entry in self.result.entries if entry.pick > cutoff]

    def reveal_next(self) -> Optional[DrawEntry]:
        """Reveal the next pick.

        Returns:
            The newly revealed entry, or None if nothing was left to reveal.
        """
        if self.revealed >= self.total:
            return None

        pick_number = self.total - self.revealed
        self.revealed += 1
        entry = self.result.get_entry(pick_number)

        logger.info(
            "Revealed pick %d: %s (%d/%d)",
            pick_number,
            entry.team.name,
            self.revealed,
            self.total,
        )

        if pick_number <= CELEBRATION_PICK_THRESHOLD:
            self._celebrate(entry)

        return entry

    def skip_to_end(self) -> None:
        """Reveal every remaining pick at once."""
        if self.is_complete:
            return

        self.revealed = self.total
        logger.info("Skipped to end of reveal (%d picks)", self.total)
        self._celebrate(None)

    def restart(self) -> DrawResult:
        """Discard the current draw, run a fresh one and start over."""
        self.result = self.engine.draw(self.seeds)
        self.revealed = 0
        logger.info("Lottery restarted with a new draw")
        return self.result

    def _celebrate(self, entry: Optional[DrawEntry]) -> None:
        if self.on_celebrate is not None:
            self.on_celebrate(entry)
