import dataclasses

import pytest

from spotify_wizardry.houses import (
    House,
    HOUSE_DETAILS,
    HOUSE_ORDER,
    all_house_details,
    get_house_details,
    house_names,
)


def test_canonical_order():
    assert house_names() == ["Auralis", "Nocturne", "Virtuo", "Folklore"]
    assert tuple(HOUSE_DETAILS) == HOUSE_ORDER


def test_keywords_are_lowercase():
    for info in HOUSE_DETAILS.values():
        assert info.genres
        assert all(keyword == keyword.lower() for keyword in info.genres)


def test_catalog_is_read_only():
    with pytest.raises(TypeError):
        HOUSE_DETAILS[House.AURALIS] = HOUSE_DETAILS[House.NOCTURNE]
    with pytest.raises(dataclasses.FrozenInstanceError):
        HOUSE_DETAILS[House.AURALIS].description = "changed"


def test_house_is_str_valued():
    assert House.VIRTUO == "Virtuo"
    assert str(House.FOLKLORE) == "Folklore"


def test_get_house_details():
    assert get_house_details(House.NOCTURNE) is HOUSE_DETAILS[House.NOCTURNE]
    assert get_house_details(" virtuo ") is HOUSE_DETAILS[House.VIRTUO]
    with pytest.raises(ValueError):
        get_house_details("Hufflepuff")


def test_all_house_details_payload():
    details = all_house_details()
    assert list(details) == house_names()
    auralis = details["Auralis"]
    assert auralis["genres"] == ["edm", "dance", "pop", "rock", "hip hop"]
    assert auralis["famousMusicians"][0] == "David Guetta"
    assert set(auralis) == {"genres", "description", "traits", "musicPersonality", "famousMusicians"}

    # Callers get copies, not the catalog itself
    auralis["traits"].append("Loud")
    assert "Loud" not in HOUSE_DETAILS[House.AURALIS].traits
