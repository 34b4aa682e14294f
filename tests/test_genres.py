import pytest

from spotify_wizardry.genres import (
    collect_genres,
    normalize_time_range,
    summarize_artist,
    validate_genres,
)


def test_validate_genres_accepts_strings():
    assert validate_genres(["pop", "rock"]) == ["pop", "rock"]
    assert validate_genres(("jazz",)) == ["jazz"]
    assert validate_genres([]) == []


@pytest.mark.parametrize("value", [None, "pop", {"genres": ["pop"]}, ["pop", 3], [None]])
def test_validate_genres_rejects_malformed(value):
    with pytest.raises(TypeError, match="array of strings"):
        validate_genres(value)


def test_collect_genres_dedupes_in_first_seen_order(top_artists):
    assert collect_genres(top_artists) == [
        "indie folk",
        "chamber pop",
        "melancholia",
        "indie pop",
        "la indie",
    ]


def test_collect_genres_empty():
    assert collect_genres([]) == []
    assert collect_genres([{"name": "No Genres"}]) == []


@pytest.mark.parametrize("value,expected", [
    ("short_term", "short_term"),
    ("medium_term", "medium_term"),
    ("long_term", "long_term"),
    ("forever", "long_term"),
    (None, "long_term"),
])
def test_normalize_time_range(value, expected):
    assert normalize_time_range(value) == expected


def test_summarize_artist(make_artist):
    artist = make_artist("Bob Dylan", ["folk"], image="https://img/bd.jpg", url="https://open/bd")
    assert summarize_artist(artist) == {
        "name": "Bob Dylan",
        "spotifyUrl": "https://open/bd",
        "image": "https://img/bd.jpg",
        "genres": ["folk"],
    }


def test_summarize_artist_missing_fields():
    assert summarize_artist({"name": "Solo"}) == {
        "name": "Solo",
        "spotifyUrl": None,
        "image": None,
        "genres": [],
    }
