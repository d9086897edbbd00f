"""Saved draft configuration model."""

from dataclasses import asdict, dataclass
from datetime import datetime

# Columns a client may set; id and timestamps are assigned by the repository
DRAFT_FIELDS = (
    "name",
    "adc_champion",
    "ally_support",
    "enemy_adc",
    "enemy_support",
    "enemy_threat",
    "notes",
)
REQUIRED_DRAFT_FIELDS = ("name", "adc_champion")


@dataclass
class Draft:
    """A saved bot-lane draft."""

    id: str
    name: str
    adc_champion: str
    created_at: datetime
    updated_at: datetime
    ally_support: str | None = None
    enemy_adc: str | None = None
    enemy_support: str | None = None
    enemy_threat: str | None = None
    notes: str | None = None

    def to_dict(self) -> dict:
        data = asdict(self)
        data["created_at"] = self.created_at.isoformat()
        data["updated_at"] = self.updated_at.isoformat()
        return data
