#!/usr/bin/env python3
# dj/script_generator.py - per-station, tone-aware DJ scripts

import logging
import random
from datetime import date
from typing import Callable, Dict, List, Optional

from cnst.segment_type import SegmentType
from cnst.time_of_day import GREETINGS
from core.station_catalog import StationCatalog
from dj.phrase_banks.era_context import get_era_fun_fact, get_era_intro, get_era_transition
from dj.phrase_banks.genre_facts import get_genre_facts
from dj.phrase_banks.holidays import get_holiday_line
from dj.phrase_banks.time_advice import PART_OF_DAY_WORD, TIME_ADVICE, translate_weather
from dj.phrase_banks.tone_phrases import (
    CHATTY_TONES, FILLER, FUN_FACT, SPOKEN_FILLERS, STATION_ID, TRANSITION, get_phrases
)
from dj.request_parser import DJRequest
from dj.voice_mapper import get_dj_name, get_interjection
from models.announcement import AnnouncementContext
from models.station import StationProfile
from models.track import Track
from util.randomizer import chance, pick, round_half_up

INTRO_FACT_CHANCE = 0.2
BETWEEN_TIME_CHANCE = 0.3
BETWEEN_FACT_CHANCE = 0.15
FAVOURITE_ARTIST_CHANCE = 0.1
HUMANIZE_CHANCE = 0.2
WINDY_KMH = 10
NEWS_ORDINALS = ["Eerste bericht", "Verder in het nieuws", "En tot slot"]

HolidayLookup = Callable[[date, random.Random], Optional[str]]


class ScriptGenerator:
    """
    Fills phrase templates with live data.

    All randomness goes through the injected random.Random, and wall-clock
    values come from the AnnouncementContext, so a fixed seed and a fixed
    context give the same text every time.
    """

    def __init__(self, catalog: StationCatalog, rng: Optional[random.Random] = None,
                 holiday_lookup: Optional[HolidayLookup] = None):
        self.catalog = catalog
        self.rng = rng or random.Random()
        self.holiday_lookup = holiday_lookup or get_holiday_line
        self.logger = logging.getLogger(__name__)
        self._builders: Dict[SegmentType, Callable[[StationProfile, AnnouncementContext], Optional[List[str]]]] = {
            SegmentType.INTRO: self._intro,
            SegmentType.BETWEEN: self._between,
            SegmentType.WEATHER: self._weather,
            SegmentType.WEATHER_FULL: self._weather_full,
            SegmentType.NEWS: self._news,
            SegmentType.NEWS_FULL: self._news_full,
            SegmentType.TIME: self._time,
            SegmentType.STATION_ID: self._station_id,
            SegmentType.FUN_FACT: self._fun_fact,
            SegmentType.SONG_INTRO: self._song_intro,
            SegmentType.JINGLE: self._jingle,
            SegmentType.OUTRO: self._outro,
        }

    def generate(self, station_id: str, segment_type: SegmentType, context: AnnouncementContext) -> str:
        station = self.catalog.get(station_id)
        builder = self._builders.get(segment_type)

        parts = None
        if builder:
            try:
                parts = builder(station, context)
            except (KeyError, IndexError, ValueError) as e:
                # KeyError also covers a phrase template with an unknown placeholder
                self.logger.warning(f"Script template for {segment_type} failed on {station.id}: {e}")
                parts = None

        if not parts:
            self.logger.debug(f"{segment_type} on {station.id} lacks data, using generic script")
            parts = self._generic(station, context)

        return self._humanize(" ".join(parts), station)

    def generate_multi_segment(self, station_id: str, primary_type: SegmentType,
                               context: AnnouncementContext, scheduler) -> List[str]:
        segments = []
        if scheduler.should_prepend_jingle(primary_type, station_id):
            segments.append(self.generate(station_id, SegmentType.JINGLE, context))
        segments.append(self.generate(station_id, primary_type, context))
        return segments

    def generate_time_machine(self, station_id: str, decade: Optional[int], context: AnnouncementContext) -> str:
        station = self.catalog.get(station_id)
        if decade is None:
            parts = [f"We zijn terug in het heden op {station.label}!"]
        else:
            parts = [get_era_intro(decade, self.rng), get_era_fun_fact(decade, self.rng)]
            if context.next_track:
                parts.append(f"{get_era_transition(decade, self.rng)} {self._track_line(context.next_track)}.")
        return " ".join(parts)

    def generate_request_ack(self, station_id: str, request: DJRequest, context: AnnouncementContext) -> str:
        station = self.catalog.get(station_id)
        opener = "Komt eraan" if not context.user or not context.user.name else f"Komt eraan, {context.user.name}"
        return (
            f"{opener}! Jouw verzoek: {request.label}. "
            f"De komende {request.expires_after_tracks} nummers op {station.label} staan in het teken daarvan."
        )

    # -- segment builders ---------------------------------------------------

    def _intro(self, station: StationProfile, ctx: AnnouncementContext) -> List[str]:
        show = station.show_for(ctx.time_of_day)
        parts = [
            f"{GREETINGS[ctx.time_of_day]}! Je luistert naar {show.name} op {station.label} met {get_dj_name(station)}.",
            f"Het is {self._clock(ctx)} en we hebben weer geweldige muziek voor je klaarstaan.",
            pick(TIME_ADVICE[ctx.time_of_day], self.rng),
        ]

        personal = self._personal_greeting(ctx)
        if personal:
            parts.append(personal)

        holiday_line = self.holiday_lookup(ctx.now.date(), self.rng)
        if holiday_line:
            parts.append(holiday_line)

        if chance(INTRO_FACT_CHANCE, self.rng):
            parts.append(f"Even een leuk weetje tussendoor: {pick(get_genre_facts(station.id), self.rng)}")

        if ctx.next_track:
            parts.append(f"We beginnen met {self._track_line(ctx.next_track)}. {get_interjection(station, self.rng)}".strip())
        return parts

    def _between(self, station: StationProfile, ctx: AnnouncementContext) -> List[str]:
        parts = []
        if ctx.previous_track:
            parts.append(f"{self._phrase(station, FILLER)} Dat was {self._track_line(ctx.previous_track)}.")

        if chance(BETWEEN_TIME_CHANCE, self.rng):
            parts.append(f"Het is inmiddels {self._clock(ctx)} op {station.label}.")

        if chance(BETWEEN_FACT_CHANCE, self.rng):
            parts.append(f"Wist je dat trouwens? {pick(get_genre_facts(station.id), self.rng)}")

        favourite = self._favourite_artist_line(ctx)
        if favourite:
            parts.append(favourite)

        if ctx.next_track:
            parts.append(f"{self._phrase(station, TRANSITION)} {ctx.next_track.title}, van {ctx.next_track.artist}.")
        return parts

    def _weather(self, station: StationProfile, ctx: AnnouncementContext) -> Optional[List[str]]:
        weather = ctx.weather
        if not weather:
            return None

        parts = []
        if ctx.previous_track:
            parts.append(f"Dat was {self._track_line(ctx.previous_track)}.")
        parts.append("Even het weer.")
        parts.append(
            f"Het is momenteel {round_half_up(weather.temp)} graden in {weather.city}. "
            f"{translate_weather(weather.description)}."
        )
        if weather.wind_speed > WINDY_KMH:
            parts.append(
                f"Het waait behoorlijk met windsnelheden rond de {round_half_up(weather.wind_speed)} kilometer per uur."
            )
        if ctx.next_track:
            parts.append(f"Maar eerst, {self._phrase(station, TRANSITION).lower()} {self._track_line(ctx.next_track)}.")
        return parts

    def _weather_full(self, station: StationProfile, ctx: AnnouncementContext) -> Optional[List[str]]:
        weather = ctx.weather
        if not weather:
            return None

        temp = round_half_up(weather.temp)
        parts = [
            "Tijd voor het weerbericht.",
            f"Het weerbericht voor {weather.city} en omgeving.",
            f"Het is momenteel {temp} graden, en het voelt als {round_half_up(weather.feels_like)} graden.",
            f"{translate_weather(weather.description)}.",
            f"De luchtvochtigheid is {weather.humidity} procent.",
        ]
        if weather.wind_speed > 0:
            parts.append(f"De wind waait met {round_half_up(weather.wind_speed)} kilometer per uur.")

        if temp < 5:
            parts.append("Trek je warme jas aan vandaag!")
        elif temp > 25:
            parts.append("Vergeet je zonnebrand niet!")
        elif "rain" in weather.description.lower():
            parts.append("Neem een paraplu mee voor de zekerheid!")

        parts.append("Dat was het weerbericht.")
        return parts

    def _news(self, station: StationProfile, ctx: AnnouncementContext) -> Optional[List[str]]:
        if not ctx.news:
            return None

        parts = []
        if ctx.previous_track:
            parts.append(f"{self._phrase(station, FILLER)} Dat was {ctx.previous_track.title}.")
        parts.append("Even het laatste nieuws.")

        article = pick(ctx.news, self.rng)
        parts.append(f"{article.title.rstrip('.')}.")
        summary = _first_sentences(article.description, 1)
        if summary:
            parts.append(f"{summary}.")

        if ctx.next_track:
            parts.append(
                f"En we gaan verder met muziek. {self._phrase(station, TRANSITION)} {self._track_line(ctx.next_track)}."
            )
        return parts

    def _news_full(self, station: StationProfile, ctx: AnnouncementContext) -> Optional[List[str]]:
        if not ctx.news:
            return None

        parts = [
            "Het is tijd voor het nieuws.",
            f"Het nieuws van {self._clock(ctx)} op {station.label}.",
        ]
        for idx, article in enumerate(ctx.news[:3]):
            parts.append(f"{NEWS_ORDINALS[idx]}: {article.title.rstrip('.')}.")
            summary = _first_sentences(article.description, 2)
            if summary:
                parts.append(f"{summary}.")
        parts.append(f"Dat was het nieuws op {station.label}.")
        return parts

    def _time(self, station: StationProfile, ctx: AnnouncementContext) -> List[str]:
        parts = [
            f"Het is {self._clock(ctx)} op {station.label}. {self._phrase(station, FILLER)}",
            pick(TIME_ADVICE[ctx.time_of_day], self.rng),
        ]
        if ctx.next_track:
            parts.append(f"{self._phrase(station, TRANSITION)} {self._track_line(ctx.next_track)}.")
        return parts

    def _station_id(self, station: StationProfile, ctx: AnnouncementContext) -> List[str]:
        return [self._phrase(station, STATION_ID, station=station.label)]

    def _fun_fact(self, station: StationProfile, ctx: AnnouncementContext) -> List[str]:
        parts = [self._phrase(station, FUN_FACT), pick(get_genre_facts(station.id), self.rng)]
        if ctx.next_track:
            parts.append(
                f"Maar we gaan weer verder met muziek! {self._phrase(station, TRANSITION)} {self._track_line(ctx.next_track)}."
            )
        return parts

    def _song_intro(self, station: StationProfile, ctx: AnnouncementContext) -> Optional[List[str]]:
        track = ctx.next_track
        if not track:
            return None

        intros = [
            f"Hier is ie dan, {track.artist} met {track.title}!",
            f"{self._phrase(station, FILLER)} {track.artist}, {track.title}!",
            f"Dit nummer doet het geweldig, hier is {track.artist} met {track.title}!",
        ]
        if track.album:
            intros.append(
                f"En nu, speciaal voor jullie, {self._track_line(track)}. Van het album {track.album}. "
                f"{get_interjection(station, self.rng)}".strip()
            )
        return [pick(intros, self.rng)]

    def _jingle(self, station: StationProfile, ctx: AnnouncementContext) -> List[str]:
        jingles = [
            f"{station.label}!",
            f"Non-stop muziek op {station.label}!",
            f"{station.label}, altijd aan!",
        ]
        if station.tagline:
            jingles.append(f"{station.label}, {station.tagline.lower()}")
        return [pick(jingles, self.rng)]

    def _outro(self, station: StationProfile, ctx: AnnouncementContext) -> List[str]:
        part_of_day = PART_OF_DAY_WORD[ctx.time_of_day]
        return [
            f"Dat was het weer voor nu op {station.label}. Bedankt voor het luisteren en tot de volgende keer! "
            f"{get_dj_name(station)} wenst je een fijne {part_of_day}!"
        ]

    def _generic(self, station: StationProfile, ctx: AnnouncementContext) -> List[str]:
        parts = [f"Je luistert naar {station.label}."]
        if ctx.next_track:
            parts.append(f"Hier is {self._track_line(ctx.next_track)}.")
        return parts

    # -- helpers --------------------------------------------------------------

    def _phrase(self, profile: StationProfile, kind: str, **values) -> str:
        """Fill a phrase template; track and news text passed in values is never parsed as a template."""
        template = pick(get_phrases(profile.dj.tone, kind), self.rng)
        return template.format(**values)

    def _personal_greeting(self, ctx: AnnouncementContext) -> Optional[str]:
        user = ctx.user
        if not user:
            return None
        if user.is_returning_user:
            name = f", {user.name}" if user.name else ""
            return f"Welkom terug{name}! Fijn dat je er weer bij bent."
        if user.name:
            return f"Welkom, {user.name}! Leuk dat je voor het eerst afstemt."
        return None

    def _favourite_artist_line(self, ctx: AnnouncementContext) -> Optional[str]:
        user = ctx.user
        if not user or not user.top_artists:
            return None
        if not chance(FAVOURITE_ARTIST_CHANCE, self.rng):
            return None
        return f"En ik weet dat je van {pick(user.top_artists, self.rng)} houdt, dus blijf luisteren!"

    def _humanize(self, text: str, station: StationProfile) -> str:
        if station.dj.tone not in CHATTY_TONES:
            return text

        sentences = text.split(". ")
        for idx in range(1, len(sentences)):
            sentence = sentences[idx]
            if sentence and chance(HUMANIZE_CHANCE, self.rng):
                filler = pick(SPOKEN_FILLERS, self.rng)
                sentences[idx] = f"{filler.capitalize()}, {sentence[0].lower()}{sentence[1:]}"
        return ". ".join(sentences)

    @staticmethod
    def _clock(ctx: AnnouncementContext) -> str:
        return ctx.now.strftime("%H:%M")

    @staticmethod
    def _track_line(track: Track) -> str:
        return f"{track.title} van {track.artist}"


def _first_sentences(text: str, count: int) -> str:
    if not text:
        return ""
    return ".".join(text.split(".")[:count]).strip()


