"""Tests for sample-size weighting functions."""
import math

import pytest

from botlane_prio.models.matchups import MatchupValue
from botlane_prio.services.scorers.confidence import (
    GAME_CONFIDENCE_DECAY,
    combine_matchup_values,
    confidence_margin,
    signal_breakdown,
    weighted_delta,
)


class TestWeightedDelta:
    def test_absent_value_is_zero(self):
        assert weighted_delta(None) == 0.0

    def test_zero_games_is_zero(self):
        assert weighted_delta(MatchupValue(delta=5.0, games=0)) == 0.0

    def test_approaches_delta_with_many_games(self):
        assert weighted_delta(MatchupValue(delta=3.0, games=100_000)) == pytest.approx(3.0)

    def test_decay_constant_gives_63_percent(self):
        value = MatchupValue(delta=10.0, games=GAME_CONFIDENCE_DECAY)
        assert weighted_delta(value) == pytest.approx(10.0 * (1 - math.exp(-1)))

    def test_two_thousand_games(self):
        """4.0 delta over 2000 games keeps ~86% of its weight."""
        assert weighted_delta(MatchupValue(delta=4.0, games=2000)) == pytest.approx(3.459, abs=1e-3)

    def test_negative_delta_keeps_sign(self):
        assert weighted_delta(MatchupValue(delta=-2.0, games=500)) < 0


class TestConfidenceMargin:
    def test_absent_value(self):
        assert confidence_margin(None) is None

    def test_zero_games(self):
        assert confidence_margin(MatchupValue(delta=1.0, games=0)) is None

    def test_even_matchup(self):
        # p = 0.5, se = sqrt(0.25 / 100) = 0.05
        assert confidence_margin(MatchupValue(delta=0.0, games=100)) == pytest.approx(9.8)

    def test_win_rate_is_clamped(self):
        assert confidence_margin(MatchupValue(delta=80.0, games=50)) == pytest.approx(0.0)

    def test_shrinks_with_more_games(self):
        small = confidence_margin(MatchupValue(delta=2.0, games=100))
        large = confidence_margin(MatchupValue(delta=2.0, games=10_000))
        assert large < small


class TestCombineMatchupValues:
    def test_empty(self):
        assert combine_matchup_values([]) is None

    def test_games_weighted_average(self):
        combined = combine_matchup_values([
            MatchupValue(delta=2.0, games=1000),
            MatchupValue(delta=4.0, games=3000),
        ])
        assert combined.delta == pytest.approx(3.5)
        assert combined.games == 4000

    def test_zero_games_uses_plain_mean(self):
        combined = combine_matchup_values([
            MatchupValue(delta=1.0, games=0),
            MatchupValue(delta=3.0, games=0),
        ])
        assert combined.delta == pytest.approx(2.0)
        assert combined.games == 0

    def test_single_value_unchanged(self):
        value = MatchupValue(delta=-1.5, games=700)
        assert combine_matchup_values([value]) == value

    def test_zero_game_source_does_not_pull_average(self):
        combined = combine_matchup_values([
            MatchupValue(delta=10.0, games=0),
            MatchupValue(delta=2.0, games=500),
        ])
        assert combined.delta == pytest.approx(2.0)


def test_signal_breakdown():
    breakdown = signal_breakdown(MatchupValue(delta=1.0, games=0))
    assert breakdown.delta == 1.0
    assert breakdown.confidence is None
    assert breakdown.games == 0
