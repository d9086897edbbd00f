"""ADC recommendations from synergy and counter matchup data."""
import logging

from botlane_prio.models.champions import Champion, SupportChampion, ThreatType
from botlane_prio.models.filters import BotLaneFilters
from botlane_prio.models.recommendations import CandidateScore, ScoreBreakdown
from botlane_prio.repositories.matchup_repository import MatchupRepository
from botlane_prio.services.champion_catalog import ChampionCatalog
from botlane_prio.services.scorers.confidence import (
    combine_matchup_values,
    signal_breakdown,
    weighted_delta,
)
from botlane_prio.services.scorers.score_normalizer import rank_candidates

logger = logging.getLogger(__name__)


class BotLaneScorer:
    """Ranks the ADC pool against the current filter selections."""

    # Ally synergy dominates; lane opponents refine the ranking
    SYNERGY_WEIGHT = 2.0
    ENEMY_SUPPORT_WEIGHT = 0.5
    ENEMY_BOTTOM_WEIGHT = 0.2
    THREAT_BONUS = 2.0

    def __init__(self, catalog: ChampionCatalog, repository: MatchupRepository):
        self.catalog = catalog
        self.repository = repository

    def score(self, filters: BotLaneFilters) -> list[CandidateScore]:
        """Score every ADC and return them best first.

        Selections that do not resolve to a known champion are treated as
        blind for that slot.
        """
        ally = self._resolve_support(filters.ally_support, "ally support")
        enemy_support = self._resolve_support(filters.enemy_support, "enemy support")
        enemy_bottom = self.catalog.find_bot_laner(filters.enemy_bottom)
        if filters.enemy_bottom and enemy_bottom is None:
            logger.warning(f"Unknown enemy bot-laner selection: {filters.enemy_bottom}")

        candidates = [
            self._score_candidate(champ, ally, enemy_support, enemy_bottom, filters.threat)
            for champ in self.catalog.adcs
        ]
        all_blind = not (ally or enemy_support or enemy_bottom or filters.threat)
        return rank_candidates(candidates, all_blind, exclude_id=ally.id if ally else None)

    def _resolve_support(self, value: str | None, slot: str) -> SupportChampion | None:
        support = self.catalog.find_support(value)
        if value and support is None:
            logger.warning(f"Unknown {slot} selection: {value}")
        return support

    def _score_candidate(
        self,
        champ: Champion,
        ally: SupportChampion | None,
        enemy_support: SupportChampion | None,
        enemy_bottom: Champion | None,
        threat: ThreatType | None,
    ) -> CandidateScore:
        matchup = self.repository.get_bot_laner(champ.name)
        breakdown = ScoreBreakdown(
            ally_name=ally.name if ally else None,
            enemy_support_name=enemy_support.name if enemy_support else None,
            enemy_bottom_name=enemy_bottom.name if enemy_bottom else None,
            threat_type=threat,
        )
        result = CandidateScore(
            champion_id=champ.id,
            champion_name=champ.name,
            has_data=matchup is not None,
            breakdown=breakdown,
        )

        # Ally support synergy: our record with them, and theirs with us
        if ally:
            support_matchup = self.repository.get_support(ally.name)
            synergy = combine_matchup_values(
                value
                for value in (
                    matchup.synergy.get(ally.name) if matchup else None,
                    support_matchup.synergy_bottom.get(champ.name) if support_matchup else None,
                )
                if value is not None
            )
            if synergy is not None:
                breakdown.synergy = signal_breakdown(synergy)
                result.raw_score += weighted_delta(synergy) * self.SYNERGY_WEIGHT
                result.has_data = True
            else:
                breakdown.ally_missing = True

        # Enemy support: our counter record, plus their record against us negated
        if enemy_support:
            support_matchup = self.repository.get_support(enemy_support.name)
            mirror = support_matchup.vs_bottom.get(champ.name) if support_matchup else None
            vs_support = combine_matchup_values(
                value
                for value in (
                    matchup.counters.get(enemy_support.name) if matchup else None,
                    mirror.negated() if mirror else None,
                )
                if value is not None
            )
            if vs_support is not None:
                breakdown.vs_enemy_support = signal_breakdown(vs_support)
                result.raw_score += weighted_delta(vs_support) * self.ENEMY_SUPPORT_WEIGHT
                result.has_data = True
            else:
                breakdown.enemy_support_missing = True

        # Enemy bot-laner: symmetric lane matchup
        if enemy_bottom:
            enemy_matchup = self.repository.get_bot_laner(enemy_bottom.name)
            mirror = enemy_matchup.enemy_bottom.get(champ.name) if enemy_matchup else None
            vs_bottom = combine_matchup_values(
                value
                for value in (
                    matchup.enemy_bottom.get(enemy_bottom.name) if matchup else None,
                    mirror.negated() if mirror else None,
                )
                if value is not None
            )
            if vs_bottom is not None:
                breakdown.vs_enemy_bottom = signal_breakdown(vs_bottom)
                result.raw_score += weighted_delta(vs_bottom) * self.ENEMY_BOTTOM_WEIGHT
                result.has_data = True
            else:
                breakdown.enemy_bottom_missing = True

        if threat and threat in champ.counters:
            breakdown.threat_bonus = self.THREAT_BONUS
            result.raw_score += self.THREAT_BONUS
            result.has_data = True

        return result
