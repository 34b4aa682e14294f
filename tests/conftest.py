"""Test configuration and fixtures."""

import pytest


def _artist(name, genres, image=None, url=None):
    """Build a minimal Spotify artist object."""
    return {
        "name": name,
        "genres": genres,
        "images": [{"url": image}] if image else [],
        "external_urls": {"spotify": url} if url else {},
    }


class FakeSpotify:
    """Stand-in for spotipy.Spotify that records calls and returns canned payloads."""

    def __init__(self, top_artists=None, top_tracks=None, search_results=None, search_error=None):
        self.top_artists = top_artists or []
        self.top_tracks = top_tracks or []
        self.search_results = search_results or {}
        self.search_error = search_error
        self.calls = []

    def current_user_top_artists(self, limit=20, offset=0, time_range="medium_term"):
        self.calls.append(("top_artists", limit, time_range))
        return {"items": self.top_artists[:limit]}

    def current_user_top_tracks(self, limit=20, offset=0, time_range="medium_term"):
        self.calls.append(("top_tracks", limit, time_range))
        return {"items": self.top_tracks[:limit]}

    def search(self, q, limit=10, offset=0, type="track", market=None):
        self.calls.append(("search", q, type))
        if self.search_error is not None:
            raise self.search_error
        for name, artist in self.search_results.items():
            if name in q:
                return {"artists": {"items": [artist]}}
        return {"artists": {"items": []}}


@pytest.fixture
def make_artist():
    return _artist


@pytest.fixture
def top_artists():
    return [
        _artist("Fleet Foxes", ["indie folk", "chamber pop"], image="https://i.scdn.co/ff.jpg",
                url="https://open.spotify.com/artist/ff"),
        _artist("Bon Iver", ["indie folk", "melancholia"]),
        _artist("Phoebe Bridgers", ["indie pop", "la indie"]),
        _artist("Unknown Act", None),
    ]


@pytest.fixture
def fake_spotify(top_artists):
    return FakeSpotify(
        top_artists=top_artists,
        top_tracks=[{"name": "Mykonos"}, {"name": "Holocene"}],
        search_results={
            "Bob Dylan": _artist("Bob Dylan", ["folk"], image="https://i.scdn.co/bd.jpg",
                                 url="https://open.spotify.com/artist/bd"),
        },
    )
