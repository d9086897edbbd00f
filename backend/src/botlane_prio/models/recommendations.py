"""Recommendation models for candidate scoring."""

from dataclasses import asdict, dataclass, field

from botlane_prio.models.champions import ThreatType


@dataclass
class SignalBreakdown:
    """A single statistical signal that contributed to a score."""

    delta: float
    confidence: float | None  # 95% margin in percentage points, None without games
    games: int


@dataclass
class ScoreBreakdown:
    """Which signals contributed to a candidate's score.

    ``*_missing`` flags are only set when the corresponding filter was
    selected but no data exists for it, so callers can tell "no effect"
    apart from "no information".
    """

    synergy: SignalBreakdown | None = None
    ally_missing: bool = False
    vs_enemy_support: SignalBreakdown | None = None
    enemy_support_missing: bool = False
    vs_enemy_bottom: SignalBreakdown | None = None
    enemy_bottom_missing: bool = False
    threat_bonus: float | None = None
    ally_name: str | None = None
    enemy_support_name: str | None = None
    enemy_bottom_name: str | None = None
    threat_type: ThreatType | None = None


@dataclass
class CandidateScore:
    """Score for one candidate in a single scoring pass."""

    champion_id: str
    champion_name: str
    raw_score: float = 0.0
    has_data: bool = False
    score: int = 50  # Normalized 0-100 display score
    breakdown: ScoreBreakdown = field(default_factory=ScoreBreakdown)

    def to_dict(self) -> dict:
        """Serialize to dictionary for JSON response."""
        breakdown = asdict(self.breakdown)
        if self.breakdown.threat_type is not None:
            breakdown["threat_type"] = self.breakdown.threat_type.value
        return {
            "id": self.champion_id,
            "name": self.champion_name,
            "score": self.score,
            "raw_score": round(self.raw_score, 4),
            "has_data": self.has_data,
            "breakdown": breakdown,
        }
