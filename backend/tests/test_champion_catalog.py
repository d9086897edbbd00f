"""Tests for ChampionCatalog."""
import json

import pytest

from botlane_prio.models.champions import SupportType, ThreatType
from botlane_prio.services.champion_catalog import ChampionCatalog


def test_pools(catalog):
    assert len(catalog.adcs) == 5
    assert len(catalog.supports) == 5
    assert [c.id for c in catalog.bot_laners][-1] == "syndra"
    assert catalog.bot_laner_names == {"Kai'Sa", "Jinx", "Ezreal", "Senna", "Miss Fortune", "Syndra"}


def test_parsed_tags(catalog):
    kaisa = catalog.find_adc("kaisa")
    assert kaisa.counters == (ThreatType.ASSASSIN, ThreatType.TANK)
    assert catalog.find_support("lulu").type == SupportType.ENCHANTER


@pytest.mark.parametrize("value", ["renata", "Renata Glasc", "RENATA GLASC", "renataglasc"])
def test_find_support_by_alias_or_name(catalog, value):
    assert catalog.find_support(value).id == "renata"


def test_find_respects_pool(catalog):
    assert catalog.find_adc("syndra") is None
    assert catalog.find_bot_laner("syndra").name == "Syndra"
    assert catalog.find_adc("leona") is None
    assert catalog.find_adc("") is None
    assert catalog.find_adc(None) is None


def test_champion_in_two_pools(catalog):
    assert catalog.find_adc("senna").counters == (ThreatType.TANK,)
    assert catalog.find_support("senna").type == SupportType.POKE


def test_from_knowledge_dir(tmp_path):
    (tmp_path / "champions.json").write_text(json.dumps({
        "adcs": [{"id": "jinx", "name": "Jinx", "counters": ["tank"]}],
        "supports": [{"id": "lulu", "name": "Lulu", "type": "enchanter"}],
    }))
    catalog = ChampionCatalog.from_knowledge_dir(tmp_path)
    assert catalog.find_adc("Jinx").id == "jinx"
    assert catalog.bot_laners == catalog.adcs


def test_missing_file_gives_empty_catalog(tmp_path):
    catalog = ChampionCatalog.from_knowledge_dir(tmp_path)
    assert catalog.adcs == ()
    assert catalog.supports == ()


def test_to_dict(catalog):
    data = catalog.to_dict()
    assert data["adcs"][0]["name"] == "Kai'Sa"
    assert data["adcs"][0]["counters"] == ["assassin", "tank"]
    assert data["supports"][1]["type"] == "enchanter"
