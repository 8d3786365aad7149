from datetime import datetime
from enum import Enum
from typing import Optional


class TimeOfDay(Enum):
    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"
    NIGHT = "night"

    def __str__(self):
        return self.value


GREETINGS = {
    TimeOfDay.MORNING: "Goedemorgen",
    TimeOfDay.AFTERNOON: "Goedemiddag",
    TimeOfDay.EVENING: "Goedenavond",
    TimeOfDay.NIGHT: "Goedenacht",
}


def get_time_of_day(now: Optional[datetime] = None) -> TimeOfDay:
    hour = (now or datetime.now()).hour
    if 6 <= hour < 12:
        return TimeOfDay.MORNING
    if 12 <= hour < 18:
        return TimeOfDay.AFTERNOON
    if 18 <= hour < 22:
        return TimeOfDay.EVENING
    return TimeOfDay.NIGHT


def get_greeting(now: Optional[datetime] = None) -> str:
    return GREETINGS[get_time_of_day(now)]
