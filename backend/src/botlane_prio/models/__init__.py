"""Data models for Bot Lane Prio."""

from botlane_prio.models.champions import Champion, SupportChampion, SupportType, ThreatType
from botlane_prio.models.drafts import Draft
from botlane_prio.models.filters import BotLaneFilters, SupportFilters
from botlane_prio.models.matchups import (
    BotLanerMatchupData,
    MatchupValue,
    SupportMatchupData,
)
from botlane_prio.models.recommendations import (
    CandidateScore,
    ScoreBreakdown,
    SignalBreakdown,
)

__all__ = [
    "Champion",
    "SupportChampion",
    "SupportType",
    "ThreatType",
    "Draft",
    "BotLaneFilters",
    "SupportFilters",
    "BotLanerMatchupData",
    "MatchupValue",
    "SupportMatchupData",
    "CandidateScore",
    "ScoreBreakdown",
    "SignalBreakdown",
]
