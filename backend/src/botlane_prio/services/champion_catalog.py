"""Static champion reference data for the bot lane."""
import json
import logging
from pathlib import Path
from typing import Iterable, Optional, TypeVar

from botlane_prio.models.champions import Champion, SupportChampion, SupportType, ThreatType
from botlane_prio.utils.name_normalizer import NameNormalizer, normalize_key

logger = logging.getLogger(__name__)

T = TypeVar("T", Champion, SupportChampion)


class ChampionCatalog:
    """Candidate pools: ADCs, supports, and every champion played bot lane."""

    def __init__(
        self,
        adcs: Iterable[Champion] = (),
        supports: Iterable[SupportChampion] = (),
        mage_bot_laners: Iterable[Champion] = (),
    ):
        self.adcs: tuple[Champion, ...] = tuple(adcs)
        self.supports: tuple[SupportChampion, ...] = tuple(supports)
        # Bot-laners include mage bots (Syndra, Ziggs, ...) on top of the ADC pool
        self.bot_laners: tuple[Champion, ...] = self.adcs + tuple(mage_bot_laners)
        self.normalizer = NameNormalizer([*self.bot_laners, *self.supports])

    @classmethod
    def from_knowledge_dir(cls, knowledge_dir: Optional[Path] = None) -> "ChampionCatalog":
        """Load champions.json from the knowledge directory."""
        if knowledge_dir is None:
            knowledge_dir = Path(__file__).parents[4] / "knowledge"
        path = knowledge_dir / "champions.json"
        if not path.exists():
            logger.warning(f"champions.json not found at {path}")
            return cls()

        with open(path) as f:
            data = json.load(f)
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict) -> "ChampionCatalog":
        catalog = cls(
            adcs=[_parse_champion(entry) for entry in data.get("adcs", [])],
            supports=[_parse_support(entry) for entry in data.get("supports", [])],
            mage_bot_laners=[_parse_champion(entry) for entry in data.get("mage_bot_laners", [])],
        )
        logger.info(
            f"ChampionCatalog: {len(catalog.adcs)} ADCs, {len(catalog.supports)} supports, "
            f"{len(catalog.bot_laners)} bot-laners"
        )
        return catalog

    @property
    def bot_laner_names(self) -> frozenset[str]:
        """Canonical names of every bot-laner."""
        return frozenset(self.normalizer.normalize(champ.name) for champ in self.bot_laners)

    def find_adc(self, value: str | None) -> Champion | None:
        return self._find(self.adcs, value)

    def find_support(self, value: str | None) -> SupportChampion | None:
        return self._find(self.supports, value)

    def find_bot_laner(self, value: str | None) -> Champion | None:
        return self._find(self.bot_laners, value)

    def _find(self, pool: tuple[T, ...], value: str | None) -> T | None:
        """Find a champion in ``pool`` by id, display name or known alias."""
        if not value:
            return None
        key = normalize_key(value)
        canonical = self.normalizer.normalize(value)
        for champ in pool:
            if normalize_key(champ.id) == key or champ.name == canonical:
                return champ
        return None

    def to_dict(self) -> dict:
        return {
            "adcs": [champ.to_dict() for champ in self.adcs],
            "supports": [champ.to_dict() for champ in self.supports],
            "bot_laners": [champ.to_dict() for champ in self.bot_laners],
        }


def _parse_champion(entry: dict) -> Champion:
    return Champion(
        id=entry["id"],
        name=entry["name"],
        title=entry.get("title", ""),
        difficulty=entry.get("difficulty", "Medium"),
        counters=tuple(ThreatType(tag) for tag in entry.get("counters", [])),
        synergies=tuple(SupportType(tag) for tag in entry.get("synergies", [])),
    )


def _parse_support(entry: dict) -> SupportChampion:
    return SupportChampion(
        id=entry["id"],
        name=entry["name"],
        type=SupportType(entry["type"]),
        title=entry.get("title", ""),
        difficulty=entry.get("difficulty", "Medium"),
    )
