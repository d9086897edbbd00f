"""Matchup statistics models.

All matchup data is loaded once at startup and shared read-only between
requests, so every model here is frozen and exposes mappings through
``MappingProxyType`` views.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

EMPTY_MAPPING: Mapping = MappingProxyType({})


@dataclass(frozen=True)
class MatchupValue:
    """One observed win-rate delta and the games backing it."""

    delta: float  # Percentage points, relative to a 50% baseline
    games: int = 0

    def negated(self) -> "MatchupValue":
        """Same sample seen from the opponent's side."""
        return MatchupValue(delta=-self.delta, games=self.games)


@dataclass(frozen=True)
class BotLanerMatchupData:
    """Matchup lookups for a single bot-laner."""

    counters: Mapping[str, MatchupValue] = field(default_factory=lambda: EMPTY_MAPPING)  # vs enemy support
    synergy: Mapping[str, MatchupValue] = field(default_factory=lambda: EMPTY_MAPPING)  # with ally support
    enemy_bottom: Mapping[str, MatchupValue] = field(default_factory=lambda: EMPTY_MAPPING)  # vs enemy bot-laner


@dataclass(frozen=True)
class SupportMatchupData:
    """Matchup lookups for a single support."""

    vs_support: Mapping[str, MatchupValue] = field(default_factory=lambda: EMPTY_MAPPING)
    vs_bottom: Mapping[str, MatchupValue] = field(default_factory=lambda: EMPTY_MAPPING)
    synergy_bottom: Mapping[str, MatchupValue] = field(default_factory=lambda: EMPTY_MAPPING)
