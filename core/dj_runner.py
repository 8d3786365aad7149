import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, List, Optional

from cnst.dj_frequency import DJFrequency
from cnst.segment_type import SegmentType
from core.audio_coordinator import AudioCoordinator, PlaybackTarget, Segment, SegmentOptions
from core.station_catalog import StationCatalog
from dj.request_parser import DJRequest, parse_dj_request
from dj.scheduler import Scheduler
from dj.script_generator import ScriptGenerator
from dj.user_context import UserContextBuilder
from dj.voice_mapper import get_voice_config
from models.announcement import AnnouncementContext
from models.track import NewsItem, Track, WeatherSnapshot

LOW_FREQUENCY_EXTRA_SONGS = 2
HIGH_FREQUENCY_FEWER_SONGS = 1


@dataclass
class PreparedAnnouncement:
    segment_type: SegmentType
    texts: List[str]
    next_track: Optional[Track] = None


class DJRunner:
    """
    Called by the playback loop once per track boundary; decides whether the
    DJ talks and drives the coordinator when it does.
    """

    def __init__(self, catalog: StationCatalog, scheduler: Scheduler, generator: ScriptGenerator,
                 coordinator: AudioCoordinator, user_context: UserContextBuilder,
                 station_id: Optional[str] = None, frequency: DJFrequency = DJFrequency.NORMAL,
                 user_name: Optional[str] = None, clock: Optional[Callable[[], datetime]] = None):
        self.logger = logging.getLogger(__name__)
        self.catalog = catalog
        self.scheduler = scheduler
        self.generator = generator
        self.coordinator = coordinator
        self.user_context = user_context
        self.station_id = catalog.get(station_id).id
        self.frequency = frequency
        self.user_name = user_name
        self.clock = clock or datetime.now

        self.weather: Optional[WeatherSnapshot] = None
        self.news: List[NewsItem] = []
        self.current_track: Optional[Track] = None
        self.songs_until_announcement = 0
        self.songs_since_announcement = 0
        self.active_request: Optional[DJRequest] = None
        self._request_tracks_left = 0
        self._prepared: Optional[PreparedAnnouncement] = None

    def update_live_data(self, weather: Optional[WeatherSnapshot] = None,
                         news: Optional[List[NewsItem]] = None) -> None:
        self.weather = weather
        self.news = list(news or [])

    def next_interval(self) -> int:
        songs = self.scheduler.get_songs_until_announcement(self.station_id)
        if self.frequency == DJFrequency.LOW:
            songs += LOW_FREQUENCY_EXTRA_SONGS
        elif self.frequency == DJFrequency.HIGH:
            songs = max(1, songs - HIGH_FREQUENCY_FEWER_SONGS)
        return songs

    def build_context(self, previous_track: Optional[Track] = None,
                      next_track: Optional[Track] = None) -> AnnouncementContext:
        return AnnouncementContext.build(
            station_id=self.station_id,
            now=self.clock(),
            previous_track=previous_track,
            next_track=next_track,
            weather=self.weather,
            news=self.news,
            user=self.user_context.build(self.user_name)
        )

    def segment_options(self) -> SegmentOptions:
        voice = get_voice_config(self.catalog.get(self.station_id))
        return SegmentOptions(voice=voice.voice, rate=voice.rate, pitch=voice.pitch, tts_volume=voice.tts_volume)

    async def start(self, first_track: Track) -> str:
        self.logger.info(f"Starting DJ on {self.station_id} with {first_track.title}")
        script = self.generator.generate(self.station_id, SegmentType.INTRO, self.build_context(next_track=first_track))

        voice = get_voice_config(self.catalog.get(self.station_id))
        # nothing plays yet, so there is no music to duck
        await self.coordinator.speech.speak(script, voice.tts_volume, voice.voice, voice.rate, voice.pitch)

        self.current_track = first_track
        self.songs_until_announcement = self.next_interval()
        self.songs_since_announcement = 0
        return script

    async def on_track_boundary(self, next_track: Track, target: PlaybackTarget, current_volume: float,
                                upcoming_track: Optional[Track] = None) -> Optional[SegmentType]:
        """
        ``upcoming_track`` is the track queued after ``next_track``, when the
        caller knows it; it lets the announcement prepared ahead of time name it.
        """
        announced = None

        if self.songs_until_announcement <= 0:
            announcement = self._take_announcement(next_track)
            announced = announcement.segment_type
            texts = announcement.texts
            await self.coordinator.play_segments(
                [Segment(text) for text in texts], target, current_volume, self.segment_options()
            )
            self.songs_until_announcement = self.next_interval()
            self.songs_since_announcement = 0
        else:
            self.songs_until_announcement -= 1
            self.songs_since_announcement += 1

        self._count_down_request()
        self.current_track = next_track
        if self.songs_until_announcement <= 0:
            await self._prepare_announcement(next_track, upcoming_track)
        return announced

    async def switch_station(self, station_id: str, first_track: Track, target: PlaybackTarget,
                             current_volume: float) -> None:
        await self._interrupt()
        self.scheduler.reset()
        self._prepared = None
        self.station_id = self.catalog.get(station_id).id
        self.active_request = None
        self._request_tracks_left = 0
        self.logger.info(f"Switched to station {self.station_id}")

        context = self.build_context(next_track=first_track)
        segments = [
            Segment(self.generator.generate(self.station_id, SegmentType.STATION_ID, context)),
            Segment(self.generator.generate(self.station_id, SegmentType.BETWEEN, context)),
        ]
        await self.coordinator.play_segments(segments, target, current_volume, self.segment_options())

        self.current_track = first_track
        self.songs_until_announcement = self.next_interval()
        self.songs_since_announcement = 0

    async def time_machine(self, decade: Optional[int], next_track: Optional[Track], target: PlaybackTarget,
                           current_volume: float) -> str:
        await self._interrupt()
        context = self.build_context(previous_track=self.current_track, next_track=next_track)
        script = self.generator.generate_time_machine(self.station_id, decade, context)
        await self.coordinator.play_segments([Segment(script)], target, current_volume, self.segment_options())
        if next_track:
            self.current_track = next_track
        return script

    async def handle_request(self, text: str, target: PlaybackTarget, current_volume: float,
                             next_track: Optional[Track] = None) -> Optional[DJRequest]:
        request = parse_dj_request(text)
        if request is None:
            self.logger.info(f"Could not interpret request: {text}")
            return None

        self.active_request = request
        self._request_tracks_left = request.expires_after_tracks

        context = self.build_context(previous_track=self.current_track, next_track=next_track)
        script = self.generator.generate_request_ack(self.station_id, request, context)
        await self.coordinator.play_segments([Segment(script)], target, current_volume, self.segment_options())
        return request

    def skip(self) -> None:
        self.coordinator.stop()

    def _count_down_request(self) -> None:
        if self.active_request is None:
            return
        self._request_tracks_left -= 1
        if self._request_tracks_left <= 0:
            self.logger.info(f"Request '{self.active_request.label}' expired")
            self.active_request = None

    async def _interrupt(self) -> None:
        # a stopped envelope still fades the music back up; wait for it before ducking again
        self.coordinator.stop()
        await self.coordinator.wait_idle()

    async def _prepare_announcement(self, now_playing: Track, upcoming_track: Optional[Track]) -> None:
        segment_type = self.scheduler.pick_announcement_type(
            self.station_id, self.songs_since_announcement, self.weather is not None, len(self.news) > 0
        )
        context = self.build_context(previous_track=now_playing, next_track=upcoming_track)
        texts = self.generator.generate_multi_segment(self.station_id, segment_type, context, self.scheduler)
        self._prepared = PreparedAnnouncement(segment_type, texts, upcoming_track)

        voice = get_voice_config(self.catalog.get(self.station_id))
        for text in texts:
            await self.coordinator.preload_segment(text, voice.voice, voice.rate, voice.pitch)

    def _take_announcement(self, next_track: Track) -> PreparedAnnouncement:
        prepared, self._prepared = self._prepared, None
        if prepared is not None and (prepared.next_track is None or prepared.next_track.id == next_track.id):
            return prepared

        if prepared is not None:
            # queue changed since preparing; keep the picked type, rewrite the script
            self.logger.debug(f"Queue changed, rewriting prepared {prepared.segment_type} announcement")
            segment_type = prepared.segment_type
        else:
            segment_type = self.scheduler.pick_announcement_type(
                self.station_id, self.songs_since_announcement, self.weather is not None, len(self.news) > 0
            )
        context = self.build_context(previous_track=self.current_track, next_track=next_track)
        texts = self.generator.generate_multi_segment(self.station_id, segment_type, context, self.scheduler)
        return PreparedAnnouncement(segment_type, texts, next_track)
