"""User filter selections for a scoring pass.

Every selection is optional; an unset selection is a blind pick for that
slot. Values are champion ids (names and aliases are accepted too and
resolved by the scorers). Ally and enemy support are compared by lookup
key, so "Leona" and "leona" count as the same champion.
"""

from dataclasses import dataclass, replace

from botlane_prio.models.champions import ThreatType
from botlane_prio.utils.name_normalizer import normalize_key


def _same_champion(a: str | None, b: str | None) -> bool:
    return bool(a and b) and normalize_key(a) == normalize_key(b)


@dataclass(frozen=True)
class BotLaneFilters:
    """Selections when picking an ADC."""

    ally_support: str | None = None
    enemy_support: str | None = None
    enemy_bottom: str | None = None
    threat: ThreatType | None = None

    def select_ally_support(self, champion_id: str | None) -> "BotLaneFilters":
        """Select an ally support, clearing the enemy support if it is the same champion."""
        enemy_support = self.enemy_support
        if _same_champion(champion_id, enemy_support):
            enemy_support = None
        return replace(self, ally_support=champion_id, enemy_support=enemy_support)

    def select_enemy_support(self, champion_id: str | None) -> "BotLaneFilters":
        """Select an enemy support, clearing the ally support if it is the same champion."""
        ally_support = self.ally_support
        if _same_champion(champion_id, ally_support):
            ally_support = None
        return replace(self, enemy_support=champion_id, ally_support=ally_support)


@dataclass(frozen=True)
class SupportFilters:
    """Selections when picking a support."""

    ally_adc: str | None = None
    enemy_support: str | None = None
    enemy_bottom: str | None = None
    threat: ThreatType | None = None
