"""Read-only matchup statistics built from the raw statistics feed."""

import json
import logging
import math
from dataclasses import dataclass, field
from numbers import Real
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Optional

from botlane_prio.models.matchups import (
    EMPTY_MAPPING,
    BotLanerMatchupData,
    MatchupValue,
    SupportMatchupData,
)
from botlane_prio.utils.name_normalizer import NameNormalizer

logger = logging.getLogger(__name__)


@dataclass
class _BuildStats:
    """Counts of what was kept and dropped while building."""

    records: int = 0
    skipped: int = 0
    malformed_sections: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class MatchupRepository:
    """Bot-laner and support matchup lookups keyed by canonical name.

    Built once at startup and never mutated afterwards; pass it explicitly to
    whatever needs it.
    """

    bot_laners: Mapping[str, BotLanerMatchupData] = field(default_factory=lambda: EMPTY_MAPPING)
    supports: Mapping[str, SupportMatchupData] = field(default_factory=lambda: EMPTY_MAPPING)

    def get_bot_laner(self, name: str | None) -> BotLanerMatchupData | None:
        return self.bot_laners.get(name) if name else None

    def get_support(self, name: str | None) -> SupportMatchupData | None:
        return self.supports.get(name) if name else None

    @classmethod
    def from_knowledge_dir(
        cls,
        normalizer: NameNormalizer,
        bot_laner_names: frozenset[str],
        knowledge_dir: Optional[Path] = None,
    ) -> "MatchupRepository":
        """Load matchup_stats.json and build the repository.

        A missing file gives an empty repository: every candidate then scores
        as "no data" instead of the service failing to start.
        """
        if knowledge_dir is None:
            knowledge_dir = Path(__file__).parents[4] / "knowledge"
        path = knowledge_dir / "matchup_stats.json"
        if not path.exists():
            logger.warning(f"matchup_stats.json not found at {path}")
            return cls()

        with open(path) as f:
            raw_stats = json.load(f)
        return cls.build(raw_stats, normalizer, bot_laner_names)

    @classmethod
    def build(
        cls,
        raw_stats: Any,
        normalizer: NameNormalizer,
        bot_laner_names: frozenset[str] = frozenset(),
    ) -> "MatchupRepository":
        """Transform the raw nested feed into lookup maps.

        Args:
            raw_stats: Parsed feed with ``bottom`` and ``support`` sections
            normalizer: Resolves feed names to canonical names
            bot_laner_names: Canonical names of known bot-laners, used to infer
                bottom-vs-bottom data from counter-vs-support records

        Returns:
            Repository with one entry per well-formed champion entry
        """
        stats = _BuildStats()
        if not isinstance(raw_stats, dict):
            logger.warning(f"Matchup feed is not an object ({type(raw_stats).__name__}), ignoring")
            return cls()

        bot_laners: dict[str, BotLanerMatchupData] = {}
        for raw_name, entry in _section(raw_stats, "bottom", stats).items():
            if not isinstance(entry, dict):
                stats.skipped += 1
                continue
            enemy_bottom: dict[str, MatchupValue] = {}
            counters = _records(
                entry, "counters", "support", "opponent", normalizer, stats,
                inferred_bottom=enemy_bottom, bot_laner_names=bot_laner_names,
            )
            # Explicit bottom-vs-bottom records always replace inferred ones
            enemy_bottom.update(_records(entry, "counters", "bottom", "opponent", normalizer, stats))
            synergy = _records(entry, "synergy", "support", "ally", normalizer, stats)
            bot_laners[normalizer.normalize(raw_name)] = BotLanerMatchupData(
                counters=MappingProxyType(counters),
                synergy=MappingProxyType(synergy),
                enemy_bottom=MappingProxyType(enemy_bottom),
            )

        supports: dict[str, SupportMatchupData] = {}
        for raw_name, entry in _section(raw_stats, "support", stats).items():
            if not isinstance(entry, dict):
                stats.skipped += 1
                continue
            vs_bottom: dict[str, MatchupValue] = {}
            vs_support = _records(
                entry, "counters", "support", "opponent", normalizer, stats,
                inferred_bottom=vs_bottom, bot_laner_names=bot_laner_names,
            )
            vs_bottom.update(_records(entry, "counters", "bottom", "opponent", normalizer, stats))
            synergy_bottom = _records(entry, "synergy", "bottom", "ally", normalizer, stats)
            supports[normalizer.normalize(raw_name)] = SupportMatchupData(
                vs_support=MappingProxyType(vs_support),
                vs_bottom=MappingProxyType(vs_bottom),
                synergy_bottom=MappingProxyType(synergy_bottom),
            )

        if stats.malformed_sections:
            logger.warning(f"Malformed matchup sections treated as empty: {stats.malformed_sections}")
        if stats.skipped:
            logger.warning(f"Skipped {stats.skipped} malformed matchup records")
        logger.info(
            f"MatchupRepository: {len(bot_laners)} bot-laners, {len(supports)} supports, "
            f"{stats.records} records"
        )
        return cls(bot_laners=MappingProxyType(bot_laners), supports=MappingProxyType(supports))


def _section(raw_stats: dict, key: str, stats: _BuildStats) -> dict:
    section = raw_stats.get(key)
    if isinstance(section, dict):
        return section
    stats.malformed_sections.append(key)
    return {}


def _records(
    entry: dict,
    group: str,
    role: str,
    name_key: str,
    normalizer: NameNormalizer,
    stats: _BuildStats,
    inferred_bottom: dict[str, MatchupValue] | None = None,
    bot_laner_names: frozenset[str] = frozenset(),
) -> dict[str, MatchupValue]:
    """Collect ``entry[group][role]`` records into a name -> MatchupValue map.

    Records without a usable name or a numeric ``delta`` are dropped whole.
    Later records for the same name replace earlier ones.

    When ``inferred_bottom`` is given, records whose name is a known
    bot-laner also seed it (first record wins). Feeds list some champions
    among the counter-vs-support records because they are played in both
    roles, which makes this a noisy signal.
    """
    group_data = entry.get(group)
    records = group_data.get(role) if isinstance(group_data, dict) else None
    if records is None:
        return {}
    if not isinstance(records, list):
        stats.skipped += 1
        return {}

    other_key = "ally" if name_key == "opponent" else "opponent"
    result: dict[str, MatchupValue] = {}
    for record in records:
        if not isinstance(record, dict):
            stats.skipped += 1
            continue
        name = normalizer.normalize(record.get(name_key) or record.get(other_key) or "")
        value = _parse_value(record)
        if not name or value is None:
            stats.skipped += 1
            continue
        result[name] = value
        stats.records += 1
        if inferred_bottom is not None and name in bot_laner_names:
            inferred_bottom.setdefault(name, value)
    return result


def _is_number(value: Any) -> bool:
    # json.load accepts NaN and Infinity literals
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)


def _parse_value(record: dict) -> MatchupValue | None:
    delta = record.get("delta")
    if not _is_number(delta):
        return None
    games = record.get("games")
    if not _is_number(games):
        games = 0
    return MatchupValue(delta=float(delta), games=max(0, int(games)))

