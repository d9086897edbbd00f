"""Business logic services."""

from botlane_prio.services.champion_catalog import ChampionCatalog
from botlane_prio.services.pick_recommendation_engine import PickRecommendationEngine

__all__ = [
    "ChampionCatalog",
    "PickRecommendationEngine",
]
