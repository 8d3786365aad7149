from enum import Enum


class SegmentType(Enum):
    INTRO = "intro"
    BETWEEN = "between"
    WEATHER = "weather"
    WEATHER_FULL = "weather_full"
    NEWS = "news"
    NEWS_FULL = "news_full"
    TIME = "time"
    OUTRO = "outro"
    STATION_ID = "station_id"
    FUN_FACT = "fun_fact"
    SONG_INTRO = "song_intro"
    JINGLE = "jingle"

    @classmethod
    def from_value(cls, value: str):
        for segment_type in cls:
            if segment_type.value == value:
                return segment_type
        raise ValueError(f"Unknown segment type: {value}")

    def __str__(self):
        return self.value
