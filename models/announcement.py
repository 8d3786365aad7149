#!/usr/bin/env python3
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Any, List, Optional

from cnst.time_of_day import TimeOfDay, get_time_of_day
from models.track import Track, WeatherSnapshot, NewsItem

MAX_TOP_ARTISTS = 5


@dataclass
class UserDJContext:
    name: Optional[str] = None
    top_artists: List[str] = field(default_factory=list)
    visit_count: int = 1
    is_returning_user: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "top_artists": list(self.top_artists),
            "visit_count": self.visit_count,
            "is_returning_user": self.is_returning_user
        }


@dataclass
class AnnouncementContext:
    station_id: str
    time_of_day: TimeOfDay
    now: datetime
    previous_track: Optional[Track] = None
    next_track: Optional[Track] = None
    weather: Optional[WeatherSnapshot] = None
    news: List[NewsItem] = field(default_factory=list)
    user: Optional[UserDJContext] = None

    @classmethod
    def build(cls, station_id: str, now: Optional[datetime] = None,
              previous_track: Optional[Track] = None, next_track: Optional[Track] = None,
              weather: Optional[WeatherSnapshot] = None, news: Optional[List[NewsItem]] = None,
              user: Optional[UserDJContext] = None) -> 'AnnouncementContext':
        now = now or datetime.now()
        return cls(
            station_id=station_id,
            time_of_day=get_time_of_day(now),
            now=now,
            previous_track=previous_track,
            next_track=next_track,
            weather=weather,
            news=list(news or []),
            user=user
        )

    @property
    def has_weather(self) -> bool:
        return self.weather is not None

    @property
    def has_news(self) -> bool:
        return len(self.news) > 0
