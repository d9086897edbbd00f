"""Core scoring components for recommendation engine."""
from botlane_prio.services.scorers.bot_lane_scorer import BotLaneScorer
from botlane_prio.services.scorers.confidence import (
    combine_matchup_values,
    confidence_margin,
    weighted_delta,
)
from botlane_prio.services.scorers.score_normalizer import normalize_scores, rank_candidates
from botlane_prio.services.scorers.support_scorer import THREAT_COUNTERS, SupportScorer

__all__ = [
    "BotLaneScorer",
    "SupportScorer",
    "THREAT_COUNTERS",
    "combine_matchup_values",
    "confidence_margin",
    "weighted_delta",
    "normalize_scores",
    "rank_candidates",
]
