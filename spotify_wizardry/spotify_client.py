"""
Spotify API Client Wrapper
==========================

Reads a listener's listening profile with an access token issued elsewhere:
- Top artists and top tracks for a time range
- Wrapped-style summaries
- Exemplar musician lookups for the house catalog
- Sorting the listener into a house
"""

import logging
import os
import time
from typing import Dict, List, Optional

import spotipy

from .config import (
    MIN_REQUEST_INTERVAL,
    SPOTIFY_ACCESS_TOKEN,
    TOP_ARTISTS_LIMIT,
    WRAPPED_LIMIT,
    DEFAULT_TIME_RANGE,
)
from .genres import collect_genres, normalize_time_range, summarize_artist
from .houses import all_house_details
from .scoring import classify

logger = logging.getLogger(__name__)


class SpotifyClient:
    """
    Wrapper around Spotipy for a single listener.

    Attributes:
        sp: Spotipy client instance
    """

    def __init__(
        self,
        access_token: Optional[str] = None,
        sp: Optional[spotipy.Spotify] = None,
        min_request_interval: float = MIN_REQUEST_INTERVAL,
    ):
        """
        Initialize Spotify client.

        Args:
            access_token: User access token (falls back to SPOTIFY_ACCESS_TOKEN)
            sp: Pre-built Spotipy client, used instead of a token
            min_request_interval: Minimum seconds between requests

        Raises:
            ValueError: If neither a client nor a token is available
        """
        if sp is None:
            # Read the environment at runtime (not import time)
            token = access_token or os.environ.get("SPOTIFY_ACCESS_TOKEN") or SPOTIFY_ACCESS_TOKEN
            if not token:
                raise ValueError("Missing Spotify access token.")
            sp = spotipy.Spotify(auth=token)
        self.sp = sp

        # Request throttling
        self._last_request_time = 0.0
        self._min_request_interval = min_request_interval

    def _throttle(self):
        """Ensure minimum time between requests."""
        elapsed = time.time() - self._last_request_time
        if elapsed < self._min_request_interval:
            time.sleep(self._min_request_interval - elapsed)
        self._last_request_time = time.time()

    # =========================================================================
    # LISTENING PROFILE
    # =========================================================================

    def get_top_artists(
        self,
        limit: int = TOP_ARTISTS_LIMIT,
        time_range: str = DEFAULT_TIME_RANGE,
    ) -> List[Dict]:
        """
        Fetch the listener's top artists.

        Args:
            limit: Maximum artists to return
            time_range: short_term, medium_term or long_term

        Returns:
            List of artist dictionaries
        """
        time_range = normalize_time_range(time_range)
        logger.debug("Fetching top %d artists (%s)", limit, time_range)

        self._throttle()
        result = self.sp.current_user_top_artists(limit=limit, time_range=time_range)
        return (result or {}).get("items") or []

    def get_top_tracks(
        self,
        limit: int = WRAPPED_LIMIT,
        time_range: str = DEFAULT_TIME_RANGE,
    ) -> List[Dict]:
        """
        Fetch the listener's top tracks.

        Args:
            limit: Maximum tracks to return
            time_range: short_term, medium_term or long_term

        Returns:
            List of track dictionaries
        """
        time_range = normalize_time_range(time_range)
        logger.debug("Fetching top %d tracks (%s)", limit, time_range)

        self._throttle()
        result = self.sp.current_user_top_tracks(limit=limit, time_range=time_range)
        return (result or {}).get("items") or []

    def get_wrapped(self, time_range: str = DEFAULT_TIME_RANGE) -> Dict[str, List[Dict]]:
        """Top tracks and top artists for the wrapped view."""
        return {
            "tracks": self.get_top_tracks(limit=WRAPPED_LIMIT, time_range=time_range),
            "artists": self.get_top_artists(limit=WRAPPED_LIMIT, time_range=time_range),
        }

    def sort_house(self, time_range: str = DEFAULT_TIME_RANGE) -> Dict:
        """
        Sort the listener into a house from their top artists' genres.

        Returns:
            Genres, top artists and the full house sort result in one dict
        """
        artists = self.get_top_artists(limit=TOP_ARTISTS_LIMIT, time_range=time_range)
        genres = collect_genres(artists)
        result = classify(genres)

        logger.info(
            "Sorted listener into %s from %d genres of %d artists",
            result.house.value, len(genres), len(artists),
        )

        return {
            "genres": genres,
            "topArtists": [summarize_artist(artist) for artist in artists],
            **result.to_dict(),
        }

    # =========================================================================
    # HOUSE ENRICHMENT
    # =========================================================================

    def find_musician(self, name: str) -> Dict:
        """
        Look up an exemplar musician by name.

        Args:
            name: Artist name to search

        Returns:
            Dict with name, image and spotifyUrl (None when not found)
        """
        self._throttle()
        result = self.sp.search(q=f'artist:"{name}"', type="artist", limit=1)
        items = (result or {}).get("artists", {}).get("items") or []
        if not items:
            logger.debug("No Spotify artist found for %r", name)
            return {"name": name, "image": None, "spotifyUrl": None}

        artist = summarize_artist(items[0])
        return {"name": name, "image": artist["image"], "spotifyUrl": artist["spotifyUrl"]}

    def house_details_with_images(self) -> Dict[str, Dict]:
        """
        House catalog with each famous musician resolved to image and link.

        A failed lookup is logged and leaves that musician with name only.
        """
        details = all_house_details()

        for house_name, info in details.items():
            musicians = []
            for name in info["famousMusicians"]:
                try:
                    musicians.append(self.find_musician(name))
                except spotipy.SpotifyException as e:
                    logger.warning("Lookup failed for %s (%s): %s", name, house_name, e)
                    musicians.append({"name": name, "image": None, "spotifyUrl": None})
            info["famousMusicians"] = musicians

        return details
