"""
House Scoring Engine
====================

Sorts a listener into a house from the genres of their top artists.

Mathematical Formulation:
-------------------------

For input genres g_1..g_n and house keywords K_h:

    raw_h        = |{ i : ∃ k ∈ K_h, k ⊆ lower(g_i) }|
    winner W     = first house in HOUSE_ORDER with the strictly highest raw_h
    match        = round(raw_W / n × 100)                 (0 when n = 0)
    pct_h        = round(raw_h / n × 100)                 (0 when n = 0)
    norm_h       = round(raw_h / Σ raw × 100)             (all but the last house)
    norm_last    = 100 - Σ norm_h                         (0 everywhere when Σ raw = 0)
    compat_h     = round((0.7 × J(K_W, K_h) + 0.3 × norm_h / 100) × match / 100 × 100)

where J is the Jaccard index and round() is round-half-up.

The last house in canonical order absorbs the whole rounding remainder, so it
can end up with a small non-zero (even negative) share it did not earn. That
matches the output of the original web service and is kept as-is.
"""

import json
import logging
import math
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Sequence, Tuple

from .config import CompatibilityWeights, DEFAULT_COMPATIBILITY_WEIGHTS, JSON_INDENT
from .houses import House, HOUSE_DETAILS, HOUSE_ORDER

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative values (Python's round() is banker's)."""
    return int(math.floor(value + 0.5))


def _empty_scores() -> Dict[House, int]:
    return {house: 0 for house in HOUSE_ORDER}


@dataclass
class HouseSortResult:
    """Complete outcome of sorting one listener."""
    house: House
    description: str
    traits: List[str]
    music_personality: str
    famous_musicians: List[str]
    match_score: int

    # Per-house maps, always holding all four houses
    house_percentages: Dict[House, int] = field(default_factory=_empty_scores)
    compatibility: Dict[House, int] = field(default_factory=_empty_scores)
    normalized_percentages: Dict[House, int] = field(default_factory=_empty_scores)
    raw_scores: Dict[House, int] = field(default_factory=_empty_scores)

    def to_dict(self) -> Dict:
        """Convert to the camel-cased dictionary the web client consumes."""
        def by_name(scores: Dict[House, int]) -> Dict[str, int]:
            return {house.value: scores[house] for house in HOUSE_ORDER}

        return {
            "house": self.house.value,
            "description": self.description,
            "traits": list(self.traits),
            "musicPersonality": self.music_personality,
            "famousMusicians": list(self.famous_musicians),
            "matchScore": self.match_score,
            "housePercentages": by_name(self.house_percentages),
            "compatibility": by_name(self.compatibility),
            "normalizedPercentages": by_name(self.normalized_percentages),
            "rawScores": by_name(self.raw_scores),
        }

    def to_json(self, indent: int = JSON_INDENT) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)


# =============================================================================
# SCORING STEPS
# =============================================================================

def count_house_votes(genres: Sequence[str]) -> Dict[House, int]:
    """
    Count, per house, how many input genres contain one of its keywords.

    A genre votes at most once per house but may vote for several houses
    ("indie-rock" counts for both Auralis and Folklore).
    """
    scores = _empty_scores()

    for genre in genres:
        genre_lower = genre.lower()
        for house in HOUSE_ORDER:
            if any(keyword in genre_lower for keyword in HOUSE_DETAILS[house].genres):
                scores[house] += 1

    return scores


def pick_winner(scores: Dict[House, int]) -> Tuple[House, int]:
    """Highest score wins; ties go to the earlier house in HOUSE_ORDER."""
    winner = HOUSE_ORDER[0]
    max_score = -1
    for house in HOUSE_ORDER:
        if scores[house] > max_score:
            max_score = scores[house]
            winner = house
    return winner, max_score


def raw_percentages(scores: Dict[House, int], genre_count: int) -> Dict[House, int]:
    """Each house's score as a share of the input genres (need not sum to 100)."""
    percentages = _empty_scores()
    if genre_count > 0:
        for house in HOUSE_ORDER:
            percentages[house] = round_half_up(scores[house] / genre_count * 100)
    return percentages


def normalize_percentages(scores: Dict[House, int]) -> Dict[House, int]:
    """
    Spread 100 points across houses proportionally to their scores.

    The last house in HOUSE_ORDER takes whatever is left after rounding the
    others, so the values sum to exactly 100. All zeros when nothing matched.
    """
    normalized = _empty_scores()
    total = sum(scores.values())
    if total <= 0:
        return normalized

    running = 0
    for house in HOUSE_ORDER[:-1]:
        value = round_half_up(scores[house] / total * 100)
        normalized[house] = value
        running += value
    normalized[HOUSE_ORDER[-1]] = 100 - running

    return normalized


def keyword_overlap(first: House, second: House) -> float:
    """Jaccard index of two houses' keyword sets."""
    first_keywords: FrozenSet[str] = frozenset(g.lower() for g in HOUSE_DETAILS[first].genres)
    second_keywords: FrozenSet[str] = frozenset(g.lower() for g in HOUSE_DETAILS[second].genres)

    union = first_keywords | second_keywords
    if not union:
        return 0.0
    return len(first_keywords & second_keywords) / len(union)


def compute_compatibility(
    winner: House,
    normalized: Dict[House, int],
    match_score: int,
    weights: CompatibilityWeights = DEFAULT_COMPATIBILITY_WEIGHTS,
) -> Dict[House, int]:
    """
    Compatibility of the winning house with every house, itself included.

    Blends keyword overlap with the house's share of the listener's taste,
    then scales by the match score so a weak match yields weak compatibility.
    """
    compatibility = _empty_scores()

    for house in HOUSE_ORDER:
        overlap = keyword_overlap(winner, house)
        share = normalized[house] / 100

        raw_similarity = (weights.keyword_overlap * overlap) + (weights.house_share * share)
        scaled = raw_similarity * (match_score / 100)
        compatibility[house] = round_half_up(scaled * 100)

    return compatibility


# =============================================================================
# ENTRY POINT
# =============================================================================

def classify(
    genres: Sequence[str],
    weights: CompatibilityWeights = DEFAULT_COMPATIBILITY_WEIGHTS,
) -> HouseSortResult:
    """
    Sort a listener into a house.

    Args:
        genres: Genre strings, e.g. collected from the listener's top artists.
            Duplicates, mixed case and unknown genres are all fine.
        weights: Blend used for compatibility scores

    Returns:
        HouseSortResult for the winning house. Never raises for a sequence
        of strings, including an empty one.
    """
    genre_count = len(genres)
    scores = count_house_votes(genres)
    winner, max_score = pick_winner(scores)

    match_score = round_half_up(max_score / genre_count * 100) if genre_count > 0 else 0
    normalized = normalize_percentages(scores)

    logger.debug(
        "Sorted %d genres into %s (match %d%%), raw scores: %s",
        genre_count,
        winner.value,
        match_score,
        {house.value: scores[house] for house in HOUSE_ORDER},
    )

    info = HOUSE_DETAILS[winner]
    return HouseSortResult(
        house=winner,
        description=info.description,
        traits=list(info.traits),
        music_personality=info.music_personality,
        famous_musicians=list(info.famous_musicians),
        match_score=match_score,
        house_percentages=raw_percentages(scores, genre_count),
        compatibility=compute_compatibility(winner, normalized, match_score, weights),
        normalized_percentages=normalized,
        raw_scores=dict(scores),
    )
