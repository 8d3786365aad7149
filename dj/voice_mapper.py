import random
from dataclasses import dataclass
from typing import Optional

from models.station import StationProfile
from util.randomizer import pick

DEFAULT_TTS_VOLUME = 0.9


@dataclass(frozen=True)
class VoiceConfig:
    voice: str
    rate: str
    pitch: str
    tts_volume: float = DEFAULT_TTS_VOLUME


def get_voice_config(station: StationProfile) -> VoiceConfig:
    return VoiceConfig(
        voice=station.dj.voice,
        rate=station.dj.rate,
        pitch=station.dj.pitch
    )


def get_dj_name(station: StationProfile) -> str:
    return station.dj.name


def get_interjection(station: StationProfile, rng: Optional[random.Random] = None) -> str:
    if not station.dj.interjections:
        return ""
    return pick(station.dj.interjections, rng)
