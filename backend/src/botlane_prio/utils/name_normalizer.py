"""Champion name normalization.

Statistics feeds identify champions by whatever slug or display name the
source happened to use ("kaisa", "Kai'Sa", "KAI SA", "renata"). Every matchup
map in the service is keyed by the canonical display name instead, so all
feed names go through ``NameNormalizer.normalize`` first.
"""

import re
from typing import Iterable, Protocol

# Characters ignored when comparing names: apostrophes (straight and typographic),
# whitespace and hyphens
_IGNORED_CHARS = re.compile(r"['’\s-]")

# Hand-curated aliases seen in scraped feeds, keyed by normalized form
MANUAL_ALIASES: dict[str, str] = {
    "renata": "Renata Glasc",
    "renataglasc": "Renata Glasc",
    "tahmkench": "Tahm Kench",
    "tahm": "Tahm Kench",
    "tk": "Tahm Kench",
    "missfortune": "Miss Fortune",
    "mf": "Miss Fortune",
    "kogmaw": "Kog'Maw",
    "kog": "Kog'Maw",
    "velkoz": "Vel'Koz",
    "kaisa": "Kai'Sa",
    "ez": "Ezreal",
    "cait": "Caitlyn",
    "blitz": "Blitzcrank",
    "naut": "Nautilus",
}


class NamedChampion(Protocol):
    id: str
    name: str


def normalize_key(name: str) -> str:
    """Reduce a name to its case- and punctuation-insensitive lookup key.

    Examples:
        >>> normalize_key("Kog'Maw")
        'kogmaw'
        >>> normalize_key("KOG MAW")
        'kogmaw'
    """
    return _IGNORED_CHARS.sub("", name.lower())


class NameNormalizer:
    """Maps free-form champion identifiers to canonical names."""

    def __init__(
        self,
        champions: Iterable[NamedChampion] = (),
        aliases: dict[str, str] | None = None,
    ):
        self._lookup: dict[str, str] = {}

        # Aliases first so a champion's own id and name always win
        for alias, canonical in (MANUAL_ALIASES if aliases is None else aliases).items():
            self._lookup[normalize_key(alias)] = canonical

        for champion in champions:
            self._lookup[normalize_key(champion.id)] = champion.name
            self._lookup[normalize_key(champion.name)] = champion.name

        # Canonical names must resolve to themselves for normalize() to be idempotent
        for canonical in set(self._lookup.values()):
            self._lookup[normalize_key(canonical)] = canonical

    def normalize(self, name: str | None) -> str:
        """Return the canonical name, or the input unchanged when unknown.

        Args:
            name: Identifier, slug or display name from any source

        Returns:
            Canonical champion name; ``""`` for empty input
        """
        if not name:
            return ""
        return self._lookup.get(normalize_key(name), name)
