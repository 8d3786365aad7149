#!/usr/bin/env python3
# dj/request_parser.py - keyword parser for listener requests ("jaren 80", "meer rock", ...)

import logging
import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from pydantic import BaseModel

logger = logging.getLogger(__name__)

DEFAULT_EXPIRES_AFTER_TRACKS = 5


class YearRange(BaseModel):
    min: int
    max: int


class EnergyRange(BaseModel):
    min: float
    max: float


class DJRequest(BaseModel):
    type: str
    label: str
    year_range: Optional[YearRange] = None
    genre_boost: Optional[List[str]] = None
    energy_range: Optional[EnergyRange] = None
    artist_search: Optional[str] = None
    expires_after_tracks: int = DEFAULT_EXPIRES_AFTER_TRACKS


DECADE_PATTERNS: List[Tuple[str, int, int, str]] = [
    (r"jaren\s*60|60s|sixties|zestig", 1960, 1969, "Jaren 60"),
    (r"jaren\s*70|70s|seventies|zeventig", 1970, 1979, "Jaren 70"),
    (r"jaren\s*80|80s|eighties|tachtig", 1980, 1989, "Jaren 80"),
    (r"jaren\s*90|90s|nineties|negentig", 1990, 1999, "Jaren 90"),
    (r"jaren\s*00|00s|2000", 2000, 2009, "Jaren 00"),
    (r"jaren\s*10|10s|2010", 2010, 2019, "Jaren 10"),
    (r"jaren\s*20|20s|twintig|2020", 2020, 2029, "Jaren 20"),
]

GENRE_PATTERNS: List[Tuple[str, List[str], str]] = [
    (r"\brock\b", ["rock", "alternative rock", "classic rock"], "Rock"),
    (r"\bjazz\b", ["jazz", "smooth jazz", "jazz fusion"], "Jazz"),
    (r"\bpop\b", ["pop", "synth-pop", "indie pop"], "Pop"),
    (r"\bhip\s*hop\b|\brap\b", ["hip hop", "rap", "trap"], "Hip-Hop"),
    (r"\bdance\b|\bedm\b|\belectro", ["dance", "edm", "electronic", "house"], "Dance"),
    (r"\bhouse\b", ["house", "deep house", "tech house"], "House"),
    (r"\bklassiek\b|\bclassic", ["classical", "orchestral"], "Klassiek"),
    (r"\bsoul\b|\br&b\b|\brnb\b", ["soul", "r&b", "neo soul"], "Soul/R&B"),
    (r"\breggae\b", ["reggae", "dancehall"], "Reggae"),
    (r"\bcountry\b", ["country", "americana"], "Country"),
    (r"\bmetal\b|\bheavy\b", ["metal", "heavy metal", "metalcore"], "Metal"),
    (r"\bpunk\b", ["punk", "punk rock", "pop punk"], "Punk"),
    (r"\bindie\b", ["indie", "indie rock", "indie pop"], "Indie"),
    (r"\bfunk\b", ["funk", "disco funk"], "Funk"),
    (r"\bblues\b", ["blues", "electric blues"], "Blues"),
    (r"\blatin\b|\bsalsa\b|\breggaeton", ["latin", "reggaeton", "salsa"], "Latin"),
    (r"\bnederlands\b|\bhollands\b|\bnl\b", ["dutch pop", "nederlandstalig", "levenslied"], "Nederlands"),
]

MOOD_PATTERNS: List[Tuple[str, float, float, str]] = [
    (r"\brustig|\bcalm\b|\brelax\b|\bchill\b|\bontspannen", 0.0, 0.4, "Rustige muziek"),
    (r"\bslapen\b|\bslaap\b|\bsleep", 0.0, 0.3, "Slaapliedjes"),
    (r"\bfeest|\bparty\b|\bknallen\b|\bharden", 0.7, 1.0, "Feestmuziek"),
    (r"\benergiek\b|\benergie\b|\bupbeat\b|\bvrolijk", 0.6, 1.0, "Energieke muziek"),
    (r"\bromantisch\b|\bliefde\b|\blove\b|\bromantic", 0.2, 0.6, "Romantische muziek"),
    (r"\bverdrietig\b|\bsad\b|\bmelancholisch", 0.1, 0.4, "Melancholische muziek"),
    (r"\bfocus\b|\bstuderen\b|\bwerk\b|\bconcentr", 0.2, 0.5, "Focus muziek"),
    (r"\bsport\b|\bworkout\b|\bgym\b|\bhardlopen", 0.8, 1.0, "Workout muziek"),
]

DISCOVERY_PATTERN = r"\bnieuws?\b|\bontdek\b|\bonbekend\b|\bverras"
ARTIST_PATTERN = r"(?:meer\s+(?:van\s+)?|draai\s+(?:eens\s+)?|speel\s+(?:eens\s+)?)(.+)"


@dataclass(frozen=True)
class QuickChip:
    label: str
    query: str


QUICK_CHIPS = [
    QuickChip("Jaren 80", "jaren 80"),
    QuickChip("Meer rock", "rock"),
    QuickChip("Rustig", "rustige muziek"),
    QuickChip("Feest!", "feestmuziek"),
    QuickChip("Iets nieuws", "iets nieuws"),
    QuickChip("Focus", "focus muziek"),
]


def parse_dj_request(text: str) -> Optional[DJRequest]:
    """Turn free-form listener input into a music steering request, or None."""
    text = (text or "").strip().lower()
    if len(text) < 2:
        return None

    labels: List[str] = []
    year_range = None
    genre_boost = None
    energy_range = None
    artist_search = None

    for pattern, low, high, label in DECADE_PATTERNS:
        if re.search(pattern, text):
            year_range = YearRange(min=low, max=high)
            labels.append(label)
            break

    for pattern, genres, label in GENRE_PATTERNS:
        if re.search(pattern, text):
            genre_boost = list(genres)
            labels.append(label)
            break

    for pattern, low, high, label in MOOD_PATTERNS:
        if re.search(pattern, text):
            energy_range = EnergyRange(min=low, max=high)
            labels.append(label)
            break

    if re.search(DISCOVERY_PATTERN, text):
        energy_range = energy_range or EnergyRange(min=0.0, max=1.0)
        labels.append("Nieuwe ontdekkingen")

    if not labels:
        artist_match = re.search(ARTIST_PATTERN, text)
        if artist_match and len(artist_match.group(1).strip()) > 1:
            artist_search = artist_match.group(1).strip()
            labels.append(artist_search)

    if not labels:
        logger.debug(f"No request pattern matched: {text}")
        return None

    if year_range and not genre_boost and not energy_range:
        request_type = "decade"
    elif genre_boost and not year_range and not energy_range:
        request_type = "genre"
    elif energy_range and not year_range and not genre_boost:
        request_type = "mood"
    elif artist_search:
        request_type = "artist"
    else:
        request_type = "mixed"

    return DJRequest(
        type=request_type,
        label=" + ".join(labels),
        year_range=year_range,
        genre_boost=genre_boost,
        energy_range=energy_range,
        artist_search=artist_search
    )
