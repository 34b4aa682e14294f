"""
House Catalog
=============

The four fixed houses and their reference data. Every listener is sorted
into exactly one of them.

Each house carries:
    - genres: lowercase keywords matched as substrings of Spotify genres
    - description, traits, music_personality: presentation text
    - famous_musicians: exemplar artist names

HOUSE_ORDER is the canonical ordering used wherever order matters
(tie-breaks, remainder absorption, output maps).
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple, Union


class House(str, Enum):
    """The closed set of houses."""
    AURALIS = "Auralis"
    NOCTURNE = "Nocturne"
    VIRTUO = "Virtuo"
    FOLKLORE = "Folklore"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class HouseInfo:
    """Static reference data for one house."""
    genres: Tuple[str, ...]
    description: str
    traits: Tuple[str, ...]
    music_personality: str
    famous_musicians: Tuple[str, ...]

    def to_dict(self) -> Dict:
        """Camel-cased payload, as served to the web client."""
        return {
            "genres": list(self.genres),
            "description": self.description,
            "traits": list(self.traits),
            "musicPersonality": self.music_personality,
            "famousMusicians": list(self.famous_musicians),
        }


HOUSE_ORDER: Tuple[House, ...] = (
    House.AURALIS,
    House.NOCTURNE,
    House.VIRTUO,
    House.FOLKLORE,
)

# =============================================================================
# CATALOG
# =============================================================================
HOUSE_DETAILS: Mapping[House, HouseInfo] = MappingProxyType({
    House.AURALIS: HouseInfo(
        genres=("edm", "dance", "pop", "rock", "hip hop"),
        description=(
            "The House of Energy and Innovation. Auralis wizards are drawn to "
            "powerful, upbeat rhythms and cutting-edge sounds. Their music taste "
            "reflects their bold, adventurous spirit and their ability to "
            "energize those around them."
        ),
        traits=("Energetic", "Bold", "Trendsetting", "Dynamic"),
        music_personality=(
            "You're someone who lives for the beat, finding magic in modern "
            "sounds and powerful rhythms. Music is your energy source, and "
            "you're always ready to discover the next big sound."
        ),
        famous_musicians=("David Guetta", "Lady Gaga", "The Weeknd", "Dua Lipa"),
    ),
    House.NOCTURNE: HouseInfo(
        genres=("ambient", "lo-fi", "alternative", "r&b", "soul"),
        description=(
            "The House of Depth and Mystery. Nocturne wizards appreciate the "
            "subtle complexities in music, finding power in atmospheric sounds "
            "and emotional depth. They see beauty in the shadows of sound."
        ),
        traits=("Introspective", "Deep", "Atmospheric", "Emotional"),
        music_personality=(
            "Your connection to music is profound and personal. You appreciate "
            "the subtle layers in songs, finding meaning in the spaces between "
            "notes. Your playlist is a journey through emotions and moods."
        ),
        famous_musicians=("Billie Eilish", "Frank Ocean", "Lana Del Rey", "James Blake"),
    ),
    House.VIRTUO: HouseInfo(
        genres=("classical", "jazz", "prog rock", "experimental"),
        description=(
            "The House of Mastery and Innovation. Virtuo wizards seek out "
            "musical complexity and technical excellence. They are the scholars "
            "of sound, appreciating both tradition and experimentation."
        ),
        traits=("Intellectual", "Sophisticated", "Experimental", "Technical"),
        music_personality=(
            "You're a true connoisseur of musical craftsmanship. Your "
            "appreciation for complex compositions and technical skill shows a "
            "mind that seeks to understand the deeper structures of music."
        ),
        famous_musicians=("Miles Davis", "Ludwig van Beethoven", "Dream Theater", "Herbie Hancock"),
    ),
    House.FOLKLORE: HouseInfo(
        genres=("folk", "indie", "country", "acoustic", "singer-songwriter"),
        description=(
            "The House of Story and Tradition. Folklore wizards value "
            "authenticity and narrative in music. They are the keepers of "
            "musical tradition, finding magic in honest, heartfelt expressions."
        ),
        traits=("Authentic", "Grounded", "Storytelling", "Harmonious"),
        music_personality=(
            "You're drawn to the storytelling power of music. Your taste "
            "reflects a love for authentic expression and traditional craft, "
            "valuing the human stories behind every song."
        ),
        famous_musicians=("Bob Dylan", "Taylor Swift", "Fleet Foxes", "Joni Mitchell"),
    ),
})


def get_house_details(house: Union[House, str]) -> HouseInfo:
    """
    Look up a house by enum member or name.

    Args:
        house: House member or case-insensitive house name

    Returns:
        The house's catalog entry

    Raises:
        ValueError: If the name is not one of the four houses
    """
    if isinstance(house, House):
        return HOUSE_DETAILS[house]

    for member in HOUSE_ORDER:
        if member.value.lower() == str(house).strip().lower():
            return HOUSE_DETAILS[member]

    raise ValueError(f"Unknown house: {house!r}")


def all_house_details() -> Dict[str, Dict]:
    """Whole catalog as plain dicts keyed by house name, in canonical order."""
    return {house.value: HOUSE_DETAILS[house].to_dict() for house in HOUSE_ORDER}


def house_names() -> List[str]:
    """House names in canonical order."""
    return [house.value for house in HOUSE_ORDER]
