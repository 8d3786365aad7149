import random

import pytest

from cnst.segment_type import SegmentType
from core.station_catalog import StationCatalog
from dj.scheduler import RECENT_WINDOW, Scheduler
from tests.support import ALL_BUCKETS, AFTERNOON, NIGHT, fixed_clock, make_station

WINDOW_GATED = {
    SegmentType.WEATHER, SegmentType.WEATHER_FULL, SegmentType.NEWS, SegmentType.NEWS_FULL,
    SegmentType.FUN_FACT, SegmentType.STATION_ID, SegmentType.JINGLE,
}


class OverflowRandom(random.Random):
    """Rolls just past the total weight so the cumulative scan never lands."""

    def random(self):
        return 1.0000001


@pytest.mark.parametrize("moment", ALL_BUCKETS)
def test_interval_bounds_hold_for_every_station(catalog, moment):
    scheduler = Scheduler(catalog, rng=random.Random(1), clock=fixed_clock(moment))
    for station in catalog:
        low, high = scheduler.interval_bounds(station.id)
        assert low >= 2
        assert high >= low + 1
        for _ in range(20):
            assert low <= scheduler.get_songs_until_announcement(station.id) <= high


def test_news_station_at_night_waits_seven_to_ten_songs(catalog):
    scheduler = Scheduler(catalog, rng=random.Random(3), clock=fixed_clock(NIGHT))
    assert scheduler.interval_bounds("news") == (7, 10)


def test_unknown_station_falls_back_to_default(catalog):
    scheduler = Scheduler(catalog, rng=random.Random(3), clock=fixed_clock(AFTERNOON))
    assert scheduler.interval_bounds("does-not-exist") == scheduler.interval_bounds(catalog.default.id)


@pytest.mark.parametrize("moment", ALL_BUCKETS)
def test_window_gated_types_never_repeat_within_window(catalog, moment):
    scheduler = Scheduler(catalog, rng=random.Random(42), clock=fixed_clock(moment))
    for station in catalog:
        scheduler.reset()
        for songs_since in range(300):
            recent = scheduler.recent_segments
            choice = scheduler.pick_announcement_type(station.id, songs_since % 10, True, True)
            if choice in WINDOW_GATED:
                assert choice not in recent
            if choice == SegmentType.WEATHER_FULL:
                assert SegmentType.WEATHER not in recent
            if choice == SegmentType.NEWS_FULL:
                assert SegmentType.NEWS not in recent


def test_history_is_bounded_and_reset_clears_it(catalog):
    scheduler = Scheduler(catalog, rng=random.Random(7), clock=fixed_clock(AFTERNOON))
    for _ in range(20):
        scheduler.pick_announcement_type("pop", 3, True, True)
        assert len(scheduler.recent_segments) <= RECENT_WINDOW

    assert len(scheduler.recent_segments) == RECENT_WINDOW
    scheduler.reset()
    assert scheduler.recent_segments == ()


def test_full_segments_need_enough_songs(catalog):
    scheduler = Scheduler(catalog, rng=random.Random(11), clock=fixed_clock(AFTERNOON))
    for _ in range(300):
        scheduler.reset()
        weather_choice = scheduler.pick_announcement_type("news", 4, True, False)
        scheduler.reset()
        news_choice = scheduler.pick_announcement_type("news", 5, False, True)
        assert weather_choice != SegmentType.WEATHER_FULL
        assert news_choice != SegmentType.NEWS_FULL


def test_full_segments_become_possible_once_due(catalog):
    scheduler = Scheduler(catalog, rng=random.Random(5), clock=fixed_clock(AFTERNOON))
    seen = set()
    for _ in range(500):
        scheduler.reset()
        seen.add(scheduler.pick_announcement_type("news", 6, True, True))
    assert SegmentType.WEATHER_FULL in seen
    assert SegmentType.NEWS_FULL in seen


def test_weather_and_news_need_data(catalog):
    scheduler = Scheduler(catalog, rng=random.Random(9), clock=fixed_clock(AFTERNOON))
    data_types = {SegmentType.WEATHER, SegmentType.WEATHER_FULL, SegmentType.NEWS, SegmentType.NEWS_FULL}
    for _ in range(300):
        scheduler.reset()
        assert scheduler.pick_announcement_type("news", 8, False, False) not in data_types


def test_zero_weight_types_are_never_chosen():
    catalog = StationCatalog([make_station(weights={"song_intro": 1.0, "time": 0})])
    scheduler = Scheduler(catalog, rng=random.Random(2), clock=fixed_clock(AFTERNOON))
    choices = {scheduler.pick_announcement_type("test", 10, True, True) for _ in range(200)}
    assert choices <= {SegmentType.SONG_INTRO, SegmentType.BETWEEN}


def test_float_fall_through_records_between(catalog):
    scheduler = Scheduler(catalog, rng=OverflowRandom(), clock=fixed_clock(AFTERNOON))
    assert scheduler.pick_announcement_type("pop", 2, False, False) == SegmentType.BETWEEN
    assert scheduler.recent_segments == (SegmentType.BETWEEN,)


@pytest.mark.parametrize("primary", [SegmentType.STATION_ID, SegmentType.JINGLE])
def test_no_jingle_before_station_id_or_jingle(catalog, primary):
    rng = random.Random(13)
    scheduler = Scheduler(catalog, rng=rng, clock=fixed_clock(AFTERNOON))
    state = rng.getstate()
    assert scheduler.should_prepend_jingle(primary, "pop") is False
    assert rng.getstate() == state


def test_energetic_stations_prepend_jingles_more_often(catalog):
    scheduler = Scheduler(catalog, rng=random.Random(21), clock=fixed_clock(AFTERNOON))
    energetic = sum(scheduler.should_prepend_jingle(SegmentType.NEWS, "pop") for _ in range(2000))
    smooth = sum(scheduler.should_prepend_jingle(SegmentType.NEWS, "jazz") for _ in range(2000))
    assert energetic > smooth
