"""Min-max normalization of raw candidate scores into a 20-100 display range."""
import math

from botlane_prio.models.recommendations import CandidateScore

NEUTRAL_SCORE = 50
MIN_DISPLAY_SCORE = 20
MAX_DISPLAY_SCORE = 100


def normalize_scores(candidates: list[CandidateScore], all_blind: bool) -> None:
    """Set ``score`` on every candidate from its ``raw_score``.

    Only candidates with data define the min/max spread. Candidates without
    data, every candidate in a full blind pick, and every candidate when all
    data-bearing raw scores tie get the neutral score.
    """
    raw_with_data = [c.raw_score for c in candidates if c.has_data]
    min_raw = min(raw_with_data, default=0.0)
    max_raw = max(raw_with_data, default=0.0)

    for candidate in candidates:
        if all_blind or not candidate.has_data or max_raw == min_raw:
            candidate.score = NEUTRAL_SCORE
            continue
        spread = MAX_DISPLAY_SCORE - MIN_DISPLAY_SCORE
        normalized = MIN_DISPLAY_SCORE + (candidate.raw_score - min_raw) / (max_raw - min_raw) * spread
        # Round half up for display, not banker's rounding
        candidate.score = int(math.floor(normalized + 0.5))


def rank_candidates(
    candidates: list[CandidateScore],
    all_blind: bool,
    exclude_id: str | None = None,
) -> list[CandidateScore]:
    """Normalize, drop the already-chosen ally pick, and sort by score.

    The sort is stable, so ties keep the candidate pool order.
    """
    normalize_scores(candidates, all_blind)
    ranked = [c for c in candidates if exclude_id is None or c.champion_id != exclude_id]
    ranked.sort(key=lambda c: -c.score)
    return ranked
