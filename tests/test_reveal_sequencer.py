"""Tests for the reveal sequencer - stepwise disclosure of a draw."""

import random

import pytest

from src.lottery_engine.draw_engine import LotteryDrawEngine
from src.lottery_engine.lottery_state import DrawResult
from src.lottery_engine.reveal_sequencer import RevealSequencer

from conftest import ALWAYS_FIRST, ScriptedRandom, make_seeds


# ── Helpers ──────────────────────────────────────────────────────────


def _make_sequencer(n=6, rng=None, celebrations=None):
    engine = LotteryDrawEngine(rng=rng or random.Random(n))
    on_celebrate = celebrations.append if celebrations is not None else None
    return RevealSequencer(engine, make_seeds(n), on_celebrate=on_celebrate)


# ── Init ─────────────────────────────────────────────────────────────


class TestRevealSequencerInit:
    def test_draws_on_creation(self):
        seq = _make_sequencer(5)
        assert isinstance(seq.result, DrawResult)
        assert seq.total == 5

    def test_starts_not_started(self):
        seq = _make_sequencer(5)
        assert seq.revealed == 0
        assert seq.state == RevealSequencer.NOT_STARTED
        assert seq.visible_results == []
        assert seq.next_pick_number == 5

    def test_accepts_precomputed_result(self):
        engine = LotteryDrawEngine(rng=random.Random(1))
        seeds = make_seeds(4)
        result = engine.draw(seeds)
        seq = RevealSequencer(engine, seeds, result=result)
        assert seq.result is result


# ── reveal_next ──────────────────────────────────────────────────────


class TestRevealNext:
    def test_reveals_from_last_pick_down(self):
        seq = _make_sequencer(5)
        picks = [seq.reveal_next().pick for _ in range(5)]
        assert picks == [5, 4, 3, 2, 1]

    def test_state_progression_is_monotonic(self):
        seq = _make_sequencer(4)
        states = [seq.state]
        counts = [seq.revealed]
        for _ in range(4):
            seq.reveal_next()
            states.append(seq.state)
            counts.append(seq.revealed)

        assert states == [
            RevealSequencer.NOT_STARTED,
            RevealSequencer.REVEALING,
            RevealSequencer.REVEALING,
            RevealSequencer.REVEALING,
            RevealSequencer.COMPLETE,
        ]
        assert counts == sorted(counts)
        assert seq.is_complete

    def test_extra_call_is_noop(self):
        seq = _make_sequencer(3)
        for _ in range(3):
            seq.reveal_next()
        assert seq.reveal_next() is None
        assert seq.revealed == 3
        assert seq.state == RevealSequencer.COMPLETE

    def test_returns_matching_entry(self):
        seq = _make_sequencer(6)
        entry = seq.reveal_next()
        assert entry is seq.result.get_entry(6)

    def test_empty_draw_is_noop(self):
        engine = LotteryDrawEngine(rng=random.Random(1))
        seq = RevealSequencer(engine, [])
        assert seq.total == 0
        assert seq.reveal_next() is None
        assert seq.revealed == 0
        assert seq.is_complete


# ── Visible results ──────────────────────────────────────────────────


class TestVisibleResults:
    def test_ascending_pick_order(self):
        seq = _make_sequencer(6)
        for _ in range(3):
            seq.reveal_next()
        assert [e.pick for e in seq.visible_results] == [4, 5, 6]

    def test_most_recent_reveal_first(self):
        seq = _make_sequencer(6)
        seq.reveal_next()
        latest = seq.reveal_next()
        assert seq.visible_results[0] is latest

    def test_next_pick_number_counts_down(self):
        seq = _make_sequencer(4)
        seq.reveal_next()
        assert seq.next_pick_number == 3
        seq.skip_to_end()
        assert seq.next_pick_number == 0


# ── skip_to_end ──────────────────────────────────────────────────────


class TestSkipToEnd:
    @pytest.mark.parametrize("revealed_first", [0, 1, 3])
    def test_completes_from_any_state(self, revealed_first):
        seq = _make_sequencer(5)
        for _ in range(revealed_first):
            seq.reveal_next()
        seq.skip_to_end()
        assert seq.revealed == seq.total
        assert seq.state == RevealSequencer.COMPLETE
        assert [e.pick for e in seq.visible_results] == [1, 2, 3, 4, 5]

    def test_idempotent(self):
        celebrations = []
        seq = _make_sequencer(5, celebrations=celebrations)
        seq.skip_to_end()
        seq.skip_to_end()
        assert seq.revealed == 5
        assert celebrations == [None]


# ── restart ──────────────────────────────────────────────────────────


class TestRestart:
    def test_returns_to_not_started_with_new_result(self):
        seq = _make_sequencer(8)
        seq.skip_to_end()
        previous = seq.result

        new_result = seq.restart()

        assert seq.state == RevealSequencer.NOT_STARTED
        assert seq.revealed == 0
        assert seq.result is new_result
        assert new_result is not previous
        assert len(new_result) == 8

    def test_allowed_mid_reveal(self):
        seq = _make_sequencer(6)
        seq.reveal_next()
        seq.reveal_next()
        seq.restart()
        assert seq.revealed == 0

    def test_new_orders_over_repeated_restarts(self):
        seq = _make_sequencer(14, rng=random.Random(5))
        orders = {tuple(seq.result.team_order())}
        for _ in range(20):
            seq.skip_to_end()
            seq.restart()
            orders.add(tuple(seq.result.team_order()))
        assert len(orders) > 1


# ── Celebration cue ──────────────────────────────────────────────────


class TestCelebration:
    def test_only_top_three_reveals_celebrate(self):
        celebrations = []
        seq = _make_sequencer(6, celebrations=celebrations)
        for _ in range(6):
            seq.reveal_next()
        assert [e.pick for e in celebrations] == [3, 2, 1]

    def test_three_team_scenario(self):
        celebrations = []
        seq = _make_sequencer(
            3, rng=ScriptedRandom([ALWAYS_FIRST]), celebrations=celebrations
        )
        teams = {s.team_id for s in seq.seeds}
        assert set(seq.result.team_order()) == teams
        assert len(seq.result) == 3

        revealed = [seq.reveal_next() for _ in range(3)]

        assert [e.pick for e in revealed] == [3, 2, 1]
        assert celebrations == revealed
        assert seq.state == RevealSequencer.COMPLETE

    def test_no_callback_is_fine(self):
        seq = _make_sequencer(3)
        seq.reveal_next()
        seq.skip_to_end()
        assert seq.is_complete
