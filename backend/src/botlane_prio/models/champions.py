"""Static champion reference models."""

from dataclasses import dataclass
from enum import Enum


class ThreatType(str, Enum):
    """Enemy team composition archetypes a pick can be favored against."""

    ASSASSIN = "assassin"
    TANK = "tank"
    POKE = "poke"


class SupportType(str, Enum):
    """Support archetypes."""

    ENCHANTER = "enchanter"
    ENGAGE = "engage"
    POKE = "poke"
    WARDEN = "warden"


@dataclass(frozen=True)
class Champion:
    """A bot-lane carry (ADC or mage bot-laner)."""

    id: str
    name: str
    title: str = ""
    difficulty: str = "Medium"
    counters: tuple[ThreatType, ...] = ()  # Composition threats this pick is favored against
    synergies: tuple[SupportType, ...] = ()  # Support archetypes it pairs well with

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "title": self.title,
            "difficulty": self.difficulty,
            "counters": [threat.value for threat in self.counters],
            "synergies": [support_type.value for support_type in self.synergies],
        }


@dataclass(frozen=True)
class SupportChampion:
    """A support pick."""

    id: str
    name: str
    type: SupportType
    title: str = ""
    difficulty: str = "Medium"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "title": self.title,
            "difficulty": self.difficulty,
            "type": self.type.value,
        }
