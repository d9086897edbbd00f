"""Tests for PickRecommendationEngine."""
from datetime import datetime
from pathlib import Path

import pytest

from botlane_prio.models.champions import ThreatType
from botlane_prio.models.drafts import Draft
from botlane_prio.models.filters import BotLaneFilters, SupportFilters
from botlane_prio.services.pick_recommendation_engine import PickRecommendationEngine

KNOWLEDGE_DIR = Path(__file__).parents[2] / "knowledge"


def _draft(**fields) -> Draft:
    now = datetime(2024, 1, 1)
    return Draft(id="d1", name="Test", adc_champion="Jinx", created_at=now, updated_at=now, **fields)


class TestRecommendations:
    def test_bot_lane_result_shape(self, engine):
        results = engine.get_bot_lane_recommendations(BotLaneFilters(ally_support="leona"))
        top = results[0]
        assert top["id"] == "kaisa"
        assert top["name"] == "Kai'Sa"
        assert top["score"] == 100
        assert top["has_data"] is True
        assert top["breakdown"]["synergy"]["games"] == 2000
        assert top["breakdown"]["synergy"]["confidence"] is not None
        assert top["breakdown"]["ally_name"] == "Leona"

    def test_limit(self, engine):
        results = engine.get_bot_lane_recommendations(BotLaneFilters(), limit=2)
        assert len(results) == 2

    def test_threat_serialized_as_value(self, engine):
        results = engine.get_support_recommendations(SupportFilters(threat=ThreatType.POKE))
        assert results[0]["id"] == "leona"
        assert results[0]["breakdown"]["threat_type"] == "poke"

    def test_scores_are_bounded(self, engine):
        results = engine.get_support_recommendations(
            SupportFilters(ally_adc="jinx", enemy_bottom="kaisa", enemy_support="leona")
        )
        assert all(0 <= r["score"] <= 100 for r in results)


class TestFiltersFromDraft:
    def test_names_resolve_to_ids(self, engine):
        filters = engine.filters_from_draft(
            _draft(ally_support="Leona", enemy_support="Lulu", enemy_adc="Kai'Sa", enemy_threat="tank")
        )
        assert filters == BotLaneFilters(
            ally_support="leona", enemy_support="lulu", enemy_bottom="kaisa", threat=ThreatType.TANK
        )

    def test_same_support_on_both_sides_keeps_enemy(self, engine):
        filters = engine.filters_from_draft(_draft(ally_support="Lulu", enemy_support="Lulu"))
        assert filters.ally_support is None
        assert filters.enemy_support == "lulu"

    def test_unknown_values_are_dropped(self, engine):
        filters = engine.filters_from_draft(
            _draft(ally_support="Nobody", enemy_adc="Nobody", enemy_threat="splitpush")
        )
        assert filters == BotLaneFilters()


class TestShippedKnowledge:
    @pytest.fixture
    def shipped_engine(self):
        return PickRecommendationEngine.from_knowledge_dir(KNOWLEDGE_DIR)

    def test_loads_catalog(self, shipped_engine):
        assert len(shipped_engine.catalog.adcs) > 0
        assert len(shipped_engine.catalog.supports) > 0
        assert shipped_engine.repository.get_bot_laner("Kai'Sa") is not None

    def test_blind_pick_is_neutral(self, shipped_engine):
        results = shipped_engine.get_bot_lane_recommendations(BotLaneFilters())
        assert len(results) == len(shipped_engine.catalog.adcs)
        assert {r["score"] for r in results} == {50}

    def test_ally_selection_spreads_scores(self, shipped_engine):
        results = shipped_engine.get_bot_lane_recommendations(BotLaneFilters(ally_support="leona"))
        scores = [r["score"] for r in results]
        assert scores == sorted(scores, reverse=True)
        assert all(0 <= s <= 100 for s in scores)

    def test_missing_directory_gives_empty_engine(self, tmp_path):
        engine = PickRecommendationEngine.from_knowledge_dir(tmp_path)
        assert engine.get_bot_lane_recommendations(BotLaneFilters(ally_support="leona")) == []
