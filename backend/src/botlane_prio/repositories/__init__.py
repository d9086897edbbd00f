"""Data access for matchup statistics and saved drafts."""

from botlane_prio.repositories.draft_repository import DraftRepository
from botlane_prio.repositories.matchup_repository import MatchupRepository

__all__ = [
    "DraftRepository",
    "MatchupRepository",
]
