"""Shared fixtures: a small champion pool and matchup feed."""
import pytest

from botlane_prio.repositories.matchup_repository import MatchupRepository
from botlane_prio.services.champion_catalog import ChampionCatalog
from botlane_prio.services.pick_recommendation_engine import PickRecommendationEngine

CHAMPIONS = {
    "adcs": [
        {"id": "kaisa", "name": "Kai'Sa", "counters": ["assassin", "tank"]},
        {"id": "jinx", "name": "Jinx", "counters": ["tank"]},
        {"id": "ezreal", "name": "Ezreal", "counters": ["assassin"]},
        {"id": "senna", "name": "Senna", "counters": ["tank"]},
        {"id": "missfortune", "name": "Miss Fortune", "counters": ["poke"]},
    ],
    "mage_bot_laners": [
        {"id": "syndra", "name": "Syndra", "counters": ["assassin"]},
    ],
    "supports": [
        {"id": "leona", "name": "Leona", "type": "engage"},
        {"id": "lulu", "name": "Lulu", "type": "enchanter"},
        {"id": "lux", "name": "Lux", "type": "poke"},
        {"id": "senna", "name": "Senna", "type": "poke"},
        {"id": "renata", "name": "Renata Glasc", "type": "enchanter"},
    ],
}

MATCHUP_FEED = {
    "bottom": {
        "kaisa": {
            "counters": {
                "support": [
                    {"opponent": "lulu", "delta": -1.5, "games": 1500},
                    {"opponent": "syndra", "delta": 2.0, "games": 400},
                ],
                "bottom": [
                    {"opponent": "jinx", "delta": -0.6, "games": 2700},
                ],
            },
            "synergy": {
                "support": [
                    {"ally": "leona", "delta": 4.0, "games": 2000},
                ],
            },
        },
        "jinx": {
            "counters": {
                "bottom": [
                    {"opponent": "Kai'Sa", "delta": 0.6, "games": 2700},
                ],
            },
            "synergy": {
                "support": [
                    {"ally": "lulu", "delta": 3.0, "games": 2500},
                ],
            },
        },
        "ezreal": {
            "synergy": {
                "support": [
                    {"ally": "lux", "delta": 1.0},
                ],
            },
        },
    },
    "support": {
        "lulu": {
            "counters": {
                "support": [
                    {"opponent": "leona", "delta": 1.2, "games": 2100},
                ],
                "bottom": [
                    {"opponent": "kaisa", "delta": 1.5, "games": 1500},
                ],
            },
            "synergy": {
                "bottom": [
                    {"ally": "jinx", "delta": 3.0, "games": 2500},
                ],
            },
        },
        "leona": {
            "counters": {
                "support": [
                    {"opponent": "lulu", "delta": -1.2, "games": 2100},
                ],
            },
        },
    },
}


@pytest.fixture
def catalog():
    return ChampionCatalog.from_dict(CHAMPIONS)


@pytest.fixture
def repository(catalog):
    return MatchupRepository.build(MATCHUP_FEED, catalog.normalizer, catalog.bot_laner_names)


@pytest.fixture
def engine(catalog, repository):
    return PickRecommendationEngine(catalog, repository)
