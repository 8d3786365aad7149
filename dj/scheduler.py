#!/usr/bin/env python3
# dj/scheduler.py - decides when the DJ talks and what kind of segment it plays

import logging
import random
from collections import deque
from datetime import datetime
from typing import Callable, Deque, List, Optional, Tuple

from cnst.dj_tone import DJTone
from cnst.segment_type import SegmentType
from cnst.time_of_day import TimeOfDay, get_time_of_day
from core.station_catalog import StationCatalog
from models.station import StationProfile
from util.randomizer import round_half_up, weighted_first_fit

# Policy constants. Tunable, kept at their historical values.
RECENT_WINDOW = 6
MIN_SONGS_BETWEEN = 2
MORNING_BOOST = 1.5
NIGHT_REDUCTION = 0.5
FULL_SEGMENT_BOOST = 1.2
WEATHER_FULL_MIN_SONGS = 5
NEWS_FULL_MIN_SONGS = 6
BETWEEN_WEIGHT = 0.1
JINGLE_CHANCE_ENERGETIC = 0.45
JINGLE_CHANCE_DEFAULT = 0.25

TIME_OF_DAY_MODIFIER = {
    TimeOfDay.MORNING: -1,
    TimeOfDay.NIGHT: 2,
}


class Scheduler:
    """Owns the anti-repeat window for one listening session."""

    def __init__(self, catalog: StationCatalog, rng: Optional[random.Random] = None,
                 clock: Optional[Callable[[], datetime]] = None):
        self.catalog = catalog
        self.rng = rng or random.Random()
        self.clock = clock or datetime.now
        self.logger = logging.getLogger(__name__)
        self._recent: Deque[SegmentType] = deque(maxlen=RECENT_WINDOW)

    @property
    def recent_segments(self) -> Tuple[SegmentType, ...]:
        return tuple(self._recent)

    def reset(self) -> None:
        self._recent.clear()
        self.logger.debug("Scheduler history cleared")

    def interval_bounds(self, station_id: str) -> Tuple[int, int]:
        station = self.catalog.get(station_id)
        quietness = 1.0 - station.dj.talkativeness

        base_min = round_half_up(2 + quietness * 4)
        base_max = round_half_up(4 + quietness * 5)
        modifier = TIME_OF_DAY_MODIFIER.get(self._time_of_day(), 0)

        low = max(MIN_SONGS_BETWEEN, base_min + modifier)
        high = max(low + 1, base_max + modifier)
        return low, high

    def get_songs_until_announcement(self, station_id: str) -> int:
        low, high = self.interval_bounds(station_id)
        songs = self.rng.randint(low, high)
        self.logger.debug(f"Station {station_id}: next announcement in {songs} songs (range {low}-{high})")
        return songs

    def pick_announcement_type(self, station_id: str, songs_since_announcement: int,
                               has_weather: bool, has_news: bool) -> SegmentType:
        station = self.catalog.get(station_id)
        candidates = self._build_candidates(station, songs_since_announcement, has_weather, has_news)

        choice = weighted_first_fit(candidates, self.rng)
        if choice is None:
            choice = SegmentType.BETWEEN

        self._recent.append(choice)
        self.logger.info(f"Station {station.id}: picked {choice} from {len(candidates)} candidates")
        return choice

    def should_prepend_jingle(self, primary_type: SegmentType, station_id: str) -> bool:
        if primary_type in (SegmentType.STATION_ID, SegmentType.JINGLE):
            return False
        station = self.catalog.get(station_id)
        jingle_chance = JINGLE_CHANCE_ENERGETIC if station.dj.tone == DJTone.ENERGETIC else JINGLE_CHANCE_DEFAULT
        return self.rng.random() < jingle_chance

    def _build_candidates(self, station: StationProfile, songs_since: int,
                          has_weather: bool, has_news: bool) -> List[Tuple[SegmentType, float]]:
        time_of_day = self._time_of_day()
        morning = MORNING_BOOST if time_of_day == TimeOfDay.MORNING else 1.0
        night = NIGHT_REDUCTION if time_of_day == TimeOfDay.NIGHT else 1.0
        weather_weight = station.weight(SegmentType.WEATHER)
        news_weight = station.weight(SegmentType.NEWS)

        candidates: List[Tuple[SegmentType, float]] = []

        def add(segment_type: SegmentType, weight: float, eligible: bool = True):
            if eligible and weight > 0:
                candidates.append((segment_type, weight))

        add(SegmentType.WEATHER_FULL, weather_weight * morning * FULL_SEGMENT_BOOST,
            has_weather and songs_since >= WEATHER_FULL_MIN_SONGS
            and self._is_fresh(SegmentType.WEATHER_FULL) and self._is_fresh(SegmentType.WEATHER))
        add(SegmentType.WEATHER, weather_weight * morning,
            has_weather and self._is_fresh(SegmentType.WEATHER))

        add(SegmentType.NEWS_FULL, news_weight * morning * FULL_SEGMENT_BOOST,
            has_news and songs_since >= NEWS_FULL_MIN_SONGS
            and self._is_fresh(SegmentType.NEWS_FULL) and self._is_fresh(SegmentType.NEWS))
        add(SegmentType.NEWS, news_weight * morning,
            has_news and self._is_fresh(SegmentType.NEWS))

        add(SegmentType.FUN_FACT, station.weight(SegmentType.FUN_FACT) * night,
            self._is_fresh(SegmentType.FUN_FACT))
        add(SegmentType.STATION_ID, station.weight(SegmentType.STATION_ID),
            self._is_fresh(SegmentType.STATION_ID))
        add(SegmentType.SONG_INTRO, station.weight(SegmentType.SONG_INTRO))
        add(SegmentType.JINGLE, station.weight(SegmentType.JINGLE),
            self._is_fresh(SegmentType.JINGLE))
        add(SegmentType.TIME, station.weight(SegmentType.TIME))
        add(SegmentType.BETWEEN, BETWEEN_WEIGHT)

        return candidates

    def _is_fresh(self, segment_type: SegmentType) -> bool:
        return segment_type not in self._recent

    def _time_of_day(self) -> TimeOfDay:
        return get_time_of_day(self.clock())
