from datetime import datetime
from typing import List, Optional, Tuple

from models.station import StationProfile

# Tuesday, so no holiday line sneaks into intros
MORNING = datetime(2024, 3, 12, 8, 30)
AFTERNOON = datetime(2024, 3, 12, 14, 5)
EVENING = datetime(2024, 3, 12, 19, 45)
NIGHT = datetime(2024, 3, 12, 2, 15)
ALL_BUCKETS = [MORNING, AFTERNOON, EVENING, NIGHT]


def fixed_clock(moment: datetime):
    return lambda: moment


def make_station(station_id: str = "test", tone: str = "smooth", talkativeness: float = 0.5,
                 weights: Optional[dict] = None) -> StationProfile:
    return StationProfile.from_dict({
        "id": station_id,
        "label": f"{station_id.title()} FM",
        "tagline": "Alleen de beste muziek",
        "dj": {
            "name": "DJ Test",
            "voice": "nl-NL-ColetteNeural",
            "tone": tone,
            "talkativeness": talkativeness,
            "interjections": ["Top!"],
        },
        "segment_weights": weights if weights is not None else {"song_intro": 1.0},
    })


class FakeVolumeSetter:
    def __init__(self, fail_on: Tuple[int, ...] = ()):
        self.calls: List[int] = []
        self.fail_on = fail_on

    async def set_volume(self, access_token, device_id, percent):
        self.calls.append(percent)
        if len(self.calls) in self.fail_on:
            raise RuntimeError("device unreachable")


class FakeSpeech:
    def __init__(self, fail: bool = False, on_speak=None):
        self.spoken: List[Tuple[str, float, Optional[str]]] = []
        self.preloaded: List[str] = []
        self.stopped = 0
        self.fail = fail
        self.on_speak = on_speak

    async def speak(self, text, volume=0.9, voice=None, rate=None, pitch=None):
        self.spoken.append((text, volume, voice))
        if self.on_speak:
            await self.on_speak(text)
        if self.fail:
            raise RuntimeError("speech exploded")

    def stop_speaking(self):
        self.stopped += 1

    async def preload(self, text, voice=None, rate=None, pitch=None):
        self.preloaded.append(text)


async def no_sleep(seconds):
    return None
