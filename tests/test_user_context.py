import json
from datetime import datetime

from dj.user_context import LAST_VISIT_KEY, TASTE_PROFILE_KEY, VISIT_COUNT_KEY, UserContextBuilder
from repos.user_store import JsonFileStore, KeyValueStore, MemoryStore
from tests.support import fixed_clock

NOW = datetime(2024, 3, 12, 14, 5)


class BrokenStore(KeyValueStore):
    def get(self, key):
        raise OSError("disk gone")

    def set(self, key, value):
        raise OSError("disk gone")


class FailFirstTimestampStore(MemoryStore):
    def __init__(self):
        super().__init__()
        self.failed = False

    def set(self, key, value):
        if key == LAST_VISIT_KEY and not self.failed:
            self.failed = True
            raise OSError("write failed")
        super().set(key, value)


def test_first_visit_is_not_returning():
    store = MemoryStore()
    context = UserContextBuilder(store, clock=fixed_clock(NOW)).build()

    assert context.visit_count == 1
    assert context.is_returning_user is False
    assert store.get(VISIT_COUNT_KEY) == "1"
    assert store.get(LAST_VISIT_KEY) == NOW.isoformat()


def test_returning_listener_gets_incremented_count():
    store = MemoryStore({VISIT_COUNT_KEY: "4", LAST_VISIT_KEY: "2024-03-10T20:00:00"})
    context = UserContextBuilder(store, clock=fixed_clock(NOW)).build("Sanne")

    assert context.visit_count == 5
    assert context.is_returning_user is True
    assert context.name == "Sanne"


def test_counter_only_increments_once_per_session():
    store = MemoryStore()
    builder = UserContextBuilder(store, clock=fixed_clock(NOW))
    builder.build()
    second = builder.build()

    assert second.visit_count == 1
    assert store.get(VISIT_COUNT_KEY) == "1"

    next_session = UserContextBuilder(store, clock=fixed_clock(NOW)).build()
    assert next_session.visit_count == 2
    assert next_session.is_returning_user is True


def test_count_without_timestamp_is_not_returning():
    store = MemoryStore({VISIT_COUNT_KEY: "2"})
    assert UserContextBuilder(store).build().is_returning_user is False


def test_top_artists_capped_at_five():
    taste = {"likedArtistNames": ["A", "B", "C", "D", "E", "F", "G"]}
    store = MemoryStore({TASTE_PROFILE_KEY: json.dumps(taste)})
    assert UserContextBuilder(store).build().top_artists == ["A", "B", "C", "D", "E"]


def test_corrupt_taste_profile_gives_no_artists():
    store = MemoryStore({TASTE_PROFILE_KEY: "{not json"})
    assert UserContextBuilder(store).build().top_artists == []

    store = MemoryStore({TASTE_PROFILE_KEY: json.dumps({"likedArtistNames": "Queen"})})
    assert UserContextBuilder(store).build().top_artists == []


def test_store_errors_degrade_to_first_visit():
    context = UserContextBuilder(BrokenStore()).build("Sanne")
    assert context.visit_count == 1
    assert context.is_returning_user is False
    assert context.top_artists == []


def test_json_file_store_persists_between_instances(tmp_path):
    path = tmp_path / "nested" / "store.json"
    JsonFileStore(path).set("greeting", "hallo")
    assert JsonFileStore(path).get("greeting") == "hallo"
    assert JsonFileStore(path).get("missing") is None


def test_json_file_store_feeds_visit_counter(tmp_path):
    store = JsonFileStore(tmp_path / "store.json")
    UserContextBuilder(store, clock=fixed_clock(NOW)).build()
    context = UserContextBuilder(store, clock=fixed_clock(NOW)).build()
    assert context.visit_count == 2
    assert context.is_returning_user is True


def test_corrupt_json_file_treated_as_new_listener(tmp_path):
    path = tmp_path / "store.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")
    context = UserContextBuilder(JsonFileStore(path)).build()
    assert context.visit_count == 1
    assert context.is_returning_user is False


def test_failed_timestamp_write_still_counts_once():
    store = FailFirstTimestampStore()
    builder = UserContextBuilder(store, clock=fixed_clock(NOW))

    first = builder.build()
    second = builder.build()

    assert first.visit_count == 1
    assert second.visit_count == 1
    assert store.get(VISIT_COUNT_KEY) == "1"
    assert store.failed is True
