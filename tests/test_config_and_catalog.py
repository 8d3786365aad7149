import logging

import pytest
import yaml

from cnst.dj_tone import DJTone
from cnst.segment_type import SegmentType
from cnst.time_of_day import TimeOfDay
from core.config import deep_merge, get_merged_config, get_section, get_value, load_config
from core.logging_config import parse_level
from core.station_catalog import StationCatalog
from models.station import StationProfile


def test_load_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "nope.yaml"))


def test_load_config_invalid_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("tts: [unclosed", encoding="utf-8")
    with pytest.raises(yaml.YAMLError):
        load_config(str(path))


def test_environment_overlay_and_secrets(tmp_path, monkeypatch):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("tts:\n  engine: http\n  elevenlabs:\n    api_key:\ncoordinator:\n  fade_in_ms: 600\n",
                           encoding="utf-8")
    env_dir = tmp_path / "config" / "environments"
    env_dir.mkdir(parents=True)
    (env_dir / "staging.yaml").write_text("coordinator:\n  fade_in_ms: 300\n", encoding="utf-8")

    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("ELEVENLABS_API_KEY", "from-env")
    monkeypatch.setenv("SPOTIFY_ACCESS_TOKEN", "spotify-token")

    config = get_merged_config(str(config_path), "staging")

    assert get_value(config, "coordinator.fade_in_ms") == 300
    assert get_value(config, "tts.engine") == "http"
    assert get_value(config, "tts.elevenlabs.api_key") == "from-env"
    assert get_section(config, "spotify")["access_token"] == "spotify-token"
    assert get_value(config, "tts.missing.key", "fallback") == "fallback"


def test_deep_merge_keeps_untouched_keys():
    merged = deep_merge({"a": {"b": 1, "c": 2}}, {"a": {"c": 3}})
    assert merged == {"a": {"b": 1, "c": 3}}


def test_catalog_loads_all_stations(catalog):
    assert len(catalog) == 11
    assert "news" in catalog
    assert catalog.default.id == "pop"


def test_station_profiles_parse(catalog):
    pop = catalog.get("pop")
    assert pop.dj.tone == DJTone.ENERGETIC
    assert pop.show_for(TimeOfDay.MORNING).name == "De Ochtend Show"
    assert pop.weight(SegmentType.WEATHER) == pytest.approx(0.2)
    assert pop.weight(SegmentType.OUTRO) == 0.0


def test_talkativeness_is_clamped():
    quiet = StationProfile.from_dict({"id": "q", "label": "Q", "dj": {"talkativeness": 0.05}})
    loud = StationProfile.from_dict({"id": "l", "label": "L", "dj": {"talkativeness": 3}})
    assert quiet.dj.talkativeness == 0.3
    assert loud.dj.talkativeness == 1.0


def test_unknown_weights_are_ignored():
    station = StationProfile.from_dict({"id": "x", "label": "X", "segment_weights": {"polka": 1, "time": 0.5}})
    assert station.segment_weights == {SegmentType.TIME: 0.5}


def test_empty_catalog_is_rejected():
    with pytest.raises(ValueError):
        StationCatalog([])


@pytest.mark.parametrize("name,expected", [
    ("debug", logging.DEBUG), ("WARNING", logging.WARNING), (None, logging.INFO), ("loud", logging.INFO),
])
def test_log_level_names(name, expected):
    assert parse_level(name, logging.INFO) == expected
