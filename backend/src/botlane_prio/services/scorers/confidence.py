"""Sample-size aware weighting of matchup deltas.

All functions are pure and total: absent values (``None``) are "no signal"
and never raise.
"""
import math
from typing import Iterable, Optional

from botlane_prio.models.matchups import MatchupValue
from botlane_prio.models.recommendations import SignalBreakdown

# Games at which a delta counts for ~63% (1 - 1/e) of its face value
GAME_CONFIDENCE_DECAY = 1000

# z-score for a two-sided 95% interval
CONFIDENCE_Z_95 = 1.96


def weighted_delta(value: Optional[MatchupValue]) -> float:
    """Delta discounted toward neutral by how few games back it.

    ``delta * (1 - e^(-games / GAME_CONFIDENCE_DECAY))``. Zero-game values
    contribute nothing without being treated as missing.
    """
    if value is None:
        return 0.0
    games = max(0, value.games)
    confidence = 1 - math.exp(-games / GAME_CONFIDENCE_DECAY)
    return value.delta * confidence


def confidence_margin(value: Optional[MatchupValue]) -> float | None:
    """95% margin of error for a delta, in percentage points.

    Treats the delta as a shift from a 50% baseline win rate and uses the
    binomial standard error at that win rate. Display approximation only.

    Returns:
        Margin in percentage points, or None when there is no value or no games
    """
    if value is None:
        return None
    games = max(0, value.games)
    if not games:
        return None
    winrate = min(1.0, max(0.0, 0.5 + value.delta / 100))
    standard_error = math.sqrt((winrate * (1 - winrate)) / games)
    return CONFIDENCE_Z_95 * standard_error * 100


def combine_matchup_values(values: Iterable[MatchupValue]) -> MatchupValue | None:
    """Merge independent reports of the same signal.

    Games-weighted mean of the deltas with the games summed; when no source
    has games, the plain mean with ``games=0``.

    Returns:
        Combined value, or None when ``values`` is empty
    """
    values = list(values)
    if not values:
        return None

    total_games = sum(max(0, value.games) for value in values)
    if total_games > 0:
        delta = sum(value.delta * max(0, value.games) for value in values) / total_games
        return MatchupValue(delta=delta, games=total_games)

    return MatchupValue(delta=sum(value.delta for value in values) / len(values), games=0)


def signal_breakdown(value: MatchupValue) -> SignalBreakdown:
    """Display form of a combined signal."""
    return SignalBreakdown(
        delta=value.delta,
        confidence=confidence_margin(value),
        games=value.games,
    )
