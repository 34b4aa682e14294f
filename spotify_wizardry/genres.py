"""
Genre Input Helpers
===================

Everything between the Spotify payloads and the scorer:
validating untrusted genre lists, collecting genres from top artists,
and normalising the requested time range.
"""

from typing import Any, Dict, Iterable, List, Optional

from .config import TIME_RANGES, DEFAULT_TIME_RANGE


def validate_genres(value: Any) -> List[str]:
    """
    Check that a decoded request/file body is a list of genre strings.

    Args:
        value: Decoded JSON value

    Returns:
        The genres as a new list

    Raises:
        TypeError: If value is not a list/tuple of strings
    """
    if not isinstance(value, (list, tuple)):
        raise TypeError("Genres must be an array of strings.")
    if not all(isinstance(genre, str) for genre in value):
        raise TypeError("Genres must be an array of strings.")
    return list(value)


def collect_genres(artists: Iterable[Dict]) -> List[str]:
    """
    Union of the artists' genres, de-duplicated in first-seen order.

    Args:
        artists: Spotify artist objects (each with a "genres" list)

    Returns:
        Unique genre strings
    """
    seen = set()
    genres = []
    for artist in artists:
        for genre in artist.get("genres") or []:
            if genre not in seen:
                seen.add(genre)
                genres.append(genre)
    return genres


def normalize_time_range(time_range: Optional[str]) -> str:
    """Fall back to long_term for anything Spotify would not accept."""
    if time_range in TIME_RANGES:
        return time_range
    return DEFAULT_TIME_RANGE


def summarize_artist(artist: Dict) -> Dict:
    """Reduce a Spotify artist object to the fields the web client shows."""
    images = artist.get("images") or []
    external_urls = artist.get("external_urls") or {}
    return {
        "name": artist.get("name", ""),
        "spotifyUrl": external_urls.get("spotify"),
        "image": images[0].get("url") if images else None,
        "genres": list(artist.get("genres") or []),
    }
