#!/usr/bin/env python3
from dataclasses import dataclass, field
from typing import Dict, Any, List

from cnst.dj_tone import DJTone
from cnst.segment_type import SegmentType
from cnst.time_of_day import TimeOfDay

MIN_TALKATIVENESS = 0.3
MAX_TALKATIVENESS = 1.0


@dataclass(frozen=True)
class StationShow:
    name: str
    tagline: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'StationShow':
        return cls(
            name=data.get("name", ""),
            tagline=data.get("tagline", "")
        )


@dataclass(frozen=True)
class DJProfile:
    name: str
    voice: str
    tone: DJTone
    talkativeness: float
    interjections: List[str] = field(default_factory=list)
    rate: str = "default"
    pitch: str = "default"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DJProfile':
        talkativeness = float(data.get("talkativeness", 0.5))
        talkativeness = min(MAX_TALKATIVENESS, max(MIN_TALKATIVENESS, talkativeness))
        return cls(
            name=data.get("name", "DJ"),
            voice=data.get("voice", "nl-NL-FennaNeural"),
            tone=DJTone.from_value(data.get("tone", "warm")),
            talkativeness=talkativeness,
            interjections=list(data.get("interjections", [])),
            rate=data.get("rate", "default"),
            pitch=data.get("pitch", "default")
        )


@dataclass(frozen=True)
class StationProfile:
    id: str
    label: str
    dj: DJProfile
    tagline: str = ""
    frequency: str = ""
    color: str = ""
    icon: str = ""
    shows: Dict[TimeOfDay, StationShow] = field(default_factory=dict)
    segment_weights: Dict[SegmentType, float] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'StationProfile':
        shows = {}
        for key, show_data in (data.get("shows") or {}).items():
            try:
                shows[TimeOfDay(key)] = StationShow.from_dict(show_data or {})
            except ValueError:
                continue

        weights = {}
        for key, weight in (data.get("segment_weights") or {}).items():
            try:
                weights[SegmentType.from_value(key)] = float(weight or 0.0)
            except (TypeError, ValueError):
                continue

        return cls(
            id=data.get("id", ""),
            label=data.get("label", ""),
            dj=DJProfile.from_dict(data.get("dj") or {}),
            tagline=data.get("tagline", ""),
            frequency=str(data.get("frequency", "")),
            color=data.get("color", ""),
            icon=data.get("icon", ""),
            shows=shows,
            segment_weights=weights
        )

    def weight(self, segment_type: SegmentType) -> float:
        return self.segment_weights.get(segment_type, 0.0)

    def show_for(self, time_of_day: TimeOfDay) -> StationShow:
        return self.shows.get(time_of_day) or StationShow(name=self.label, tagline=self.tagline)
