import random
from datetime import date, datetime

import pytest

from cnst.dj_tone import DJTone
from cnst.time_of_day import TimeOfDay, get_greeting, get_time_of_day
from dj.phrase_banks.era_context import AVAILABLE_DECADES, DEFAULT_DECADE, get_era_context, get_era_fun_fact
from dj.phrase_banks.genre_facts import GENRE_FUN_FACTS, get_genre_facts
from dj.phrase_banks.holidays import EASTER, easter_sunday, get_holiday, get_holiday_line
from dj.phrase_banks.time_advice import translate_weather
from dj.phrase_banks.tone_phrases import FILLER, FUN_FACT, STATION_ID, TRANSITION, get_phrases


@pytest.mark.parametrize("hour,expected", [
    (5, TimeOfDay.NIGHT), (6, TimeOfDay.MORNING), (11, TimeOfDay.MORNING), (12, TimeOfDay.AFTERNOON),
    (17, TimeOfDay.AFTERNOON), (18, TimeOfDay.EVENING), (21, TimeOfDay.EVENING), (22, TimeOfDay.NIGHT),
    (0, TimeOfDay.NIGHT),
])
def test_time_of_day_buckets(hour, expected):
    assert get_time_of_day(datetime(2024, 3, 12, hour, 0)) == expected


def test_greeting_follows_bucket():
    assert get_greeting(datetime(2024, 3, 12, 9, 0)) == "Goedemorgen"
    assert get_greeting(datetime(2024, 3, 12, 23, 0)) == "Goedenacht"


@pytest.mark.parametrize("year,expected", [
    (2019, date(2019, 4, 21)), (2024, date(2024, 3, 31)), (2025, date(2025, 4, 20)), (2038, date(2038, 4, 25)),
])
def test_easter_sunday(year, expected):
    assert easter_sunday(year) == expected


def test_fixed_and_moving_holidays():
    assert get_holiday(date(2024, 4, 27)).name == "Koningsdag"
    assert get_holiday(date(2024, 3, 31)) is EASTER
    assert get_holiday(date(2024, 3, 12)) is None


def test_holiday_line_comes_from_the_holiday():
    line = get_holiday_line(date(2024, 12, 25), random.Random(1))
    assert line in get_holiday(date(2024, 12, 25)).dj_lines
    assert get_holiday_line(date(2024, 3, 12), random.Random(1)) is None


def test_era_contexts_cover_every_decade():
    for decade in AVAILABLE_DECADES:
        era = get_era_context(decade)
        assert era.decade == decade
        assert era.intros and era.transitions and era.fun_facts


def test_unknown_decade_uses_default():
    assert get_era_context(1850) is get_era_context(DEFAULT_DECADE)
    assert get_era_fun_fact(1850, random.Random(2)) in get_era_context(DEFAULT_DECADE).fun_facts


def test_genre_facts_fall_back_to_default():
    assert get_genre_facts("jazz") == GENRE_FUN_FACTS["jazz"]
    assert get_genre_facts("polka") == GENRE_FUN_FACTS["default"]


@pytest.mark.parametrize("tone", list(DJTone))
def test_every_tone_has_every_phrase_kind(tone):
    for kind in (FILLER, TRANSITION, STATION_ID, FUN_FACT):
        assert get_phrases(tone, kind)
    for template in get_phrases(tone, STATION_ID):
        assert "{station}" in template


def test_weather_translation():
    assert translate_weather("light rain") != "light rain"
    assert translate_weather("volcanic ash") == "volcanic ash"
