"""Pick recommendation engine combining catalog, matchup data and scorers."""
import logging
from pathlib import Path
from typing import Optional

from botlane_prio.models.champions import ThreatType
from botlane_prio.models.drafts import Draft
from botlane_prio.models.filters import BotLaneFilters, SupportFilters
from botlane_prio.repositories.matchup_repository import MatchupRepository
from botlane_prio.services.champion_catalog import ChampionCatalog
from botlane_prio.services.scorers import BotLaneScorer, SupportScorer

logger = logging.getLogger(__name__)


class PickRecommendationEngine:
    """Generates ranked ADC and support recommendations.

    Holds only read-only state, so one instance is shared by all requests.
    """

    def __init__(self, catalog: ChampionCatalog, repository: MatchupRepository):
        self.catalog = catalog
        self.repository = repository
        self.bot_lane_scorer = BotLaneScorer(catalog, repository)
        self.support_scorer = SupportScorer(catalog, repository)

    @classmethod
    def from_knowledge_dir(cls, knowledge_dir: Optional[Path] = None) -> "PickRecommendationEngine":
        """Load champions and matchup statistics from the knowledge directory."""
        catalog = ChampionCatalog.from_knowledge_dir(knowledge_dir)
        repository = MatchupRepository.from_knowledge_dir(
            catalog.normalizer, catalog.bot_laner_names, knowledge_dir
        )
        return cls(catalog, repository)

    def get_bot_lane_recommendations(
        self,
        filters: BotLaneFilters,
        limit: int | None = None,
    ) -> list[dict]:
        """Rank ADCs for the given selections.

        Args:
            filters: Ally support, enemy support, enemy bot-laner and threat selections
            limit: Maximum recommendations to return (all when None)

        Returns:
            List of dicts with id, name, score, raw_score, has_data and breakdown
        """
        ranked = self.bot_lane_scorer.score(filters)
        return [candidate.to_dict() for candidate in ranked[:limit]]

    def get_support_recommendations(
        self,
        filters: SupportFilters,
        limit: int | None = None,
    ) -> list[dict]:
        """Rank supports for the given selections."""
        ranked = self.support_scorer.score(filters)
        return [candidate.to_dict() for candidate in ranked[:limit]]

    def filters_from_draft(self, draft: Draft) -> BotLaneFilters:
        """Rebuild bot-lane filter selections from a saved draft.

        Drafts store display names; names that no longer resolve to a known
        champion are dropped rather than failing the whole draft.
        """
        ally = self.catalog.find_support(draft.ally_support)
        enemy_support = self.catalog.find_support(draft.enemy_support)
        enemy_bottom = self.catalog.find_bot_laner(draft.enemy_adc)

        threat = None
        if draft.enemy_threat:
            try:
                threat = ThreatType(draft.enemy_threat)
            except ValueError:
                logger.warning(f"Draft {draft.id} has unknown threat type: {draft.enemy_threat}")

        return (
            BotLaneFilters(
                enemy_bottom=enemy_bottom.id if enemy_bottom else None,
                threat=threat,
            )
            .select_ally_support(ally.id if ally else None)
            .select_enemy_support(enemy_support.id if enemy_support else None)
        )
