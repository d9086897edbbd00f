"""Tests for champion name normalization."""
import pytest

from botlane_prio.models.champions import Champion, SupportChampion, SupportType
from botlane_prio.utils.name_normalizer import NameNormalizer, normalize_key


@pytest.fixture
def normalizer():
    return NameNormalizer([
        Champion(id="kogmaw", name="Kog'Maw"),
        Champion(id="kaisa", name="Kai'Sa"),
        Champion(id="missfortune", name="Miss Fortune"),
        SupportChampion(id="renata", name="Renata Glasc", type=SupportType.ENCHANTER),
        SupportChampion(id="tahmkench", name="Tahm Kench", type=SupportType.WARDEN),
    ])


def test_normalize_key_strips_case_and_punctuation():
    assert normalize_key("Kog'Maw") == "kogmaw"
    assert normalize_key("KOG MAW") == "kogmaw"
    assert normalize_key("Kog-Maw") == "kogmaw"
    assert normalize_key("Kog’Maw") == "kogmaw"


def test_case_and_punctuation_insensitive(normalizer):
    assert normalizer.normalize("Kog'Maw") == normalizer.normalize("kogmaw") == normalizer.normalize("KOG MAW")
    assert normalizer.normalize("kogmaw") == "Kog'Maw"


def test_id_and_display_name_resolve(normalizer):
    assert normalizer.normalize("missfortune") == "Miss Fortune"
    assert normalizer.normalize("miss fortune") == "Miss Fortune"
    assert normalizer.normalize("renata glasc") == "Renata Glasc"


def test_manual_aliases(normalizer):
    """Curated nicknames map to multi-word canonical names."""
    assert normalizer.normalize("renata") == "Renata Glasc"
    assert normalizer.normalize("TK") == "Tahm Kench"
    assert normalizer.normalize("mf") == "Miss Fortune"


def test_unknown_name_returned_unchanged(normalizer):
    assert normalizer.normalize("Amumu") == "Amumu"
    assert normalizer.normalize("") == ""
    assert normalizer.normalize(None) == ""


@pytest.mark.parametrize("raw", ["kaisa", "KAI SA", "Kai'Sa", "Amumu", "renata", "tk", ""])
def test_normalize_is_idempotent(normalizer, raw):
    once = normalizer.normalize(raw)
    assert normalizer.normalize(once) == once


def test_champion_names_win_over_aliases():
    """A custom alias can never redirect a champion's own name."""
    normalizer = NameNormalizer(
        [Champion(id="ezreal", name="Ezreal")],
        aliases={"ezreal": "Someone Else"},
    )
    assert normalizer.normalize("Ezreal") == "Ezreal"
