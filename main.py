#!/usr/bin/env python3
import argparse
import asyncio
import logging
import random

from cnst.segment_type import SegmentType
from core.audio_coordinator import AudioCoordinator, PlaybackTarget, Segment, SegmentOptions
from core.config import get_merged_config, get_section, get_value
from core.logging_config import setup_logging
from core.station_catalog import StationCatalog
from api.spotify_client import SpotifyPlayerClient
from dj.scheduler import Scheduler
from dj.script_generator import ScriptGenerator
from dj.user_context import UserContextBuilder
from dj.voice_mapper import get_voice_config
from models.announcement import AnnouncementContext
from models.track import Track
from repos.user_store import JsonFileStore
from tts.local_voice import Pyttsx3Voice
from tts.pygame_player import PygamePlayer
from tts.speech_client import SpeechClient
from tts.tts_factory import TTSEngineFactory


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Speak one DJ announcement for a station")
    parser.add_argument("--config", default="config.yaml", help="path to config.yaml")
    parser.add_argument("--env", default=None, help="environment overlay name (defaults to DJ_AGENT_ENV)")
    parser.add_argument("--station", default=None, help="station id")
    parser.add_argument("--segment", default=None, help="segment type; picked by the scheduler when omitted")
    parser.add_argument("--next-title", default=None)
    parser.add_argument("--next-artist", default=None)
    parser.add_argument("--user-name", default=None)
    parser.add_argument("--volume", type=float, default=0.7, help="current music volume 0-1")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--dry-run", action="store_true", help="print the script without speaking it")
    parser.add_argument("--list-stations", action="store_true")
    return parser.parse_args(argv)


async def async_main(args) -> int:
    config = get_merged_config(args.config, args.env)
    setup_logging(get_section(config, "logging"))
    logger = logging.getLogger(__name__)

    catalog = StationCatalog.from_yaml(config.get("stations_file"))
    if args.list_stations:
        for station in catalog:
            print(f"{station.id:<12} {station.frequency:>6}  {station.label} ({station.dj.name})")
        return 0

    rng = random.Random(args.seed)
    station = catalog.get(args.station)
    scheduler = Scheduler(catalog, rng=rng)
    generator = ScriptGenerator(catalog, rng=rng)
    user_context = UserContextBuilder(JsonFileStore(get_value(config, "user_store.path", "data/user_store.json")))

    next_track = None
    if args.next_title:
        next_track = Track(id="cli", title=args.next_title, artist=args.next_artist or "onbekend")

    if args.segment:
        segment_type = SegmentType.from_value(args.segment)
    else:
        segment_type = scheduler.pick_announcement_type(station.id, 0, False, False)

    context = AnnouncementContext.build(
        station_id=station.id,
        next_track=next_track,
        user=user_context.build(args.user_name)
    )
    texts = generator.generate_multi_segment(station.id, segment_type, context, scheduler)
    for text in texts:
        print(text)

    if args.dry_run:
        return 0

    tts_cfg = get_section(config, "tts")
    engine = TTSEngineFactory.create_engine(tts_cfg.get("engine", "http"), tts_cfg)
    speech = SpeechClient(
        engine=engine,
        player=PygamePlayer(),
        fallback=Pyttsx3Voice(language_prefix=tts_cfg.get("fallback_language", "nl")),
        default_voice=station.dj.voice,
        cache_ttl_seconds=float(tts_cfg.get("cache_ttl_seconds", 1200)),
        cache_max_entries=int(tts_cfg.get("cache_max_entries", 50))
    )

    voice = get_voice_config(station)
    spotify_cfg = get_section(config, "spotify")
    if not spotify_cfg.get("access_token"):
        logger.info("No Spotify access token configured, speaking without ducking")
        for text in texts:
            await speech.speak(text, voice.tts_volume, voice.voice, voice.rate, voice.pitch)
        return 0

    coordinator = AudioCoordinator(
        volume_setter=SpotifyPlayerClient(
            base_url=spotify_cfg.get("api_base_url", "https://api.spotify.com/v1"),
            api_timeout=spotify_cfg.get("api_timeout")
        ),
        speech=speech,
        default_options=SegmentOptions(**get_section(config, "coordinator"))
    )
    target = PlaybackTarget(access_token=spotify_cfg["access_token"], device_id=spotify_cfg.get("device_id"))
    await coordinator.play_segments(
        [Segment(text) for text in texts],
        target,
        args.volume,
        SegmentOptions(voice=voice.voice, rate=voice.rate, pitch=voice.pitch, tts_volume=voice.tts_volume)
    )
    logger.info(f"Announcement finished on {station.id}")
    return 0


def main(argv=None):
    args = parse_args(argv)
    try:
        return asyncio.run(async_main(args))
    except KeyboardInterrupt:
        return 130
    except (FileNotFoundError, ValueError) as e:
        logging.error(f"Failed to run DJ announcement: {e}")
        return 1


if __name__ == "__main__":
    exit_code = main()
    exit(exit_code)
