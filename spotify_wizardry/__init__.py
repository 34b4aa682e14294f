"""
Spotify Wizardry - Music Taste House Sorter
===========================================

Sorts a listener into one of four houses (Auralis, Nocturne, Virtuo,
Folklore) from the genres of their top Spotify artists.

Modules:
    - config: Configuration and constants
    - houses: The house catalog
    - scoring: House scoring engine
    - genres: Genre input helpers
    - spotify_client: Spotify API wrapper
    - logging_utils: Logging setup
    - cli: Command-line interface
"""

from .houses import House, HouseInfo, HOUSE_ORDER, HOUSE_DETAILS
from .scoring import HouseSortResult, classify

__version__ = "1.0.0"
__author__ = "Spotify Wizardry Team"

__all__ = [
    "House",
    "HouseInfo",
    "HOUSE_ORDER",
    "HOUSE_DETAILS",
    "HouseSortResult",
    "classify",
]
