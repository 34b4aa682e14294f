"""
Configuration and constants for the Spotify Wizardry house sorter.
"""
import os
from dataclasses import dataclass
from typing import Tuple

# =============================================================================
# SPOTIFY API CONFIGURATION
# =============================================================================
# Token issued by the web layer's OAuth flow; this package never exchanges codes.
SPOTIFY_ACCESS_TOKEN = os.environ.get("SPOTIFY_ACCESS_TOKEN", "")

TIME_RANGES: Tuple[str, ...] = ("short_term", "medium_term", "long_term")
DEFAULT_TIME_RANGE = "long_term"

# Number of top artists whose genres feed the sorter
TOP_ARTISTS_LIMIT = 20

# Number of tracks/artists in the wrapped summary
WRAPPED_LIMIT = 10

MIN_REQUEST_INTERVAL = 0.05  # seconds between API requests

# =============================================================================
# LOGGING
# =============================================================================
LOG_LEVEL = os.environ.get("LOG_LEVEL", "WARNING")
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# =============================================================================
# COMPATIBILITY WEIGHTS
# =============================================================================
@dataclass(frozen=True)
class CompatibilityWeights:
    """Weights for blending keyword overlap with a house's share of the taste."""
    keyword_overlap: float = 0.7
    house_share: float = 0.3

DEFAULT_COMPATIBILITY_WEIGHTS = CompatibilityWeights()

# =============================================================================
# OUTPUT CONFIGURATION
# =============================================================================
OUTPUT_FORMATS: Tuple[str, ...] = ("json", "simple")
JSON_INDENT = 2
