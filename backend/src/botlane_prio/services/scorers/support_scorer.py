"""Support recommendations, the bot-lane scorer with roles swapped."""
import logging

from botlane_prio.models.champions import Champion, SupportChampion, SupportType, ThreatType
from botlane_prio.models.filters import SupportFilters
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

# Support archetypes that hold up against each enemy composition
THREAT_COUNTERS: dict[ThreatType, frozenset[SupportType]] = {
    ThreatType.ASSASSIN: frozenset({SupportType.ENCHANTER}),  # Shields and heals peel divers
    ThreatType.TANK: frozenset({SupportType.POKE}),
    ThreatType.POKE: frozenset({SupportType.ENGAGE}),  # Close the gap on poke comps
}


class SupportScorer:
    """Ranks the support pool against the current filter selections."""

    SYNERGY_WEIGHT = 2.0
    ENEMY_BOTTOM_WEIGHT = 1.5  # Enemy bot-laner is the primary lane signal for supports
    ENEMY_SUPPORT_WEIGHT = 1.0
    THREAT_BONUS = 2.0

    def __init__(self, catalog: ChampionCatalog, repository: MatchupRepository):
        self.catalog = catalog
        self.repository = repository

    def score(self, filters: SupportFilters) -> list[CandidateScore]:
        """Score every support and return them best first."""
        ally = self.catalog.find_adc(filters.ally_adc)
        if filters.ally_adc and ally is None:
            logger.warning(f"Unknown ally ADC selection: {filters.ally_adc}")
        enemy_support = self.catalog.find_support(filters.enemy_support)
        if filters.enemy_support and enemy_support is None:
            logger.warning(f"Unknown enemy support selection: {filters.enemy_support}")
        enemy_bottom = self.catalog.find_bot_laner(filters.enemy_bottom)
        if filters.enemy_bottom and enemy_bottom is None:
            logger.warning(f"Unknown enemy bot-laner selection: {filters.enemy_bottom}")

        candidates = [
            self._score_candidate(supp, ally, enemy_support, enemy_bottom, filters.threat)
            for supp in self.catalog.supports
        ]
        all_blind = not (ally or enemy_support or enemy_bottom or filters.threat)
        return rank_candidates(candidates, all_blind, exclude_id=ally.id if ally else None)

    def _score_candidate(
        self,
        supp: SupportChampion,
        ally: Champion | None,
        enemy_support: SupportChampion | None,
        enemy_bottom: Champion | None,
        threat: ThreatType | None,
    ) -> CandidateScore:
        matchup = self.repository.get_support(supp.name)
        breakdown = ScoreBreakdown(
            ally_name=ally.name if ally else None,
            enemy_support_name=enemy_support.name if enemy_support else None,
            enemy_bottom_name=enemy_bottom.name if enemy_bottom else None,
            threat_type=threat,
        )
        result = CandidateScore(
            champion_id=supp.id,
            champion_name=supp.name,
            breakdown=breakdown,
        )

        if ally:
            adc_matchup = self.repository.get_bot_laner(ally.name)
            synergy = combine_matchup_values(
                value
                for value in (
                    adc_matchup.synergy.get(supp.name) if adc_matchup else None,
                    matchup.synergy_bottom.get(ally.name) if matchup else None,
                )
                if value is not None
            )
            if synergy is not None:
                breakdown.synergy = signal_breakdown(synergy)
                result.raw_score += weighted_delta(synergy) * self.SYNERGY_WEIGHT
                result.has_data = True
            else:
                breakdown.ally_missing = True

        # Enemy bot-laner's counter record is from their side: good for them is bad for us
        if enemy_bottom:
            enemy_matchup = self.repository.get_bot_laner(enemy_bottom.name)
            mirror = enemy_matchup.counters.get(supp.name) if enemy_matchup else None
            vs_bottom = combine_matchup_values(
                value
                for value in (
                    matchup.vs_bottom.get(enemy_bottom.name) if matchup else None,
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

        if enemy_support:
            enemy_matchup = self.repository.get_support(enemy_support.name)
            mirror = enemy_matchup.vs_support.get(supp.name) if enemy_matchup else None
            vs_support = combine_matchup_values(
                value
                for value in (
                    matchup.vs_support.get(enemy_support.name) if matchup else None,
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

        if threat and supp.type in THREAT_COUNTERS[threat]:
            breakdown.threat_bonus = self.THREAT_BONUS
            result.raw_score += self.THREAT_BONUS
            result.has_data = True

        return result
