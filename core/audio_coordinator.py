#!/usr/bin/env python3
# core/audio_coordinator.py - ducks the music, speaks, then restores the volume

import asyncio
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional, Sequence

from pydantic import BaseModel, Field

from util.randomizer import round_half_up

FADE_STEPS = 5
PRE_SPEECH_PAUSE_MS = 200
POST_SPEECH_PAUSE_MS = 300
BETWEEN_SEGMENTS_PAUSE_MS = 400


class SegmentOptions(BaseModel):
    duck_volume: float = Field(default=0.08, ge=0.0, le=1.0)
    fade_in_ms: int = Field(default=600, ge=0)
    fade_out_ms: int = Field(default=600, ge=0)
    voice: Optional[str] = None
    tts_volume: float = Field(default=0.9, ge=0.0, le=1.0)
    rate: Optional[str] = None
    pitch: Optional[str] = None

    def merged(self, override: Optional['SegmentOptions']) -> 'SegmentOptions':
        """Values explicitly set on the override win."""
        if override is None:
            return self
        return self.model_copy(update=override.model_dump(exclude_unset=True))


@dataclass(frozen=True)
class PlaybackTarget:
    access_token: str
    device_id: Optional[str] = None


@dataclass(frozen=True)
class Segment:
    text: str
    options: Optional[SegmentOptions] = None


def _to_percent(volume: float) -> int:
    return max(0, min(100, round_half_up(volume * 100)))


class AudioCoordinator:
    """
    Runs one speech envelope at a time: fade the music down, speak, fade it
    back up. A second envelope requested while one is running is dropped.
    """

    def __init__(self, volume_setter, speech, sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
                 default_options: Optional[SegmentOptions] = None):
        self.volume_setter = volume_setter
        self.speech = speech
        self._sleep = sleep
        self.default_options = default_options or SegmentOptions()
        self.logger = logging.getLogger(__name__)
        self._busy = False
        self._abort: Optional[asyncio.Event] = None
        self._running = 0
        self._idle = asyncio.Event()
        self._idle.set()

    @property
    def busy(self) -> bool:
        return self._busy

    async def wait_idle(self) -> None:
        """Wait until every envelope, including a stopped one still restoring, has finished."""
        await self._idle.wait()

    async def fade_volume(self, target: PlaybackTarget, from_percent: int, to_percent: int,
                          duration_ms: float, abort: Optional[asyncio.Event] = None) -> None:
        step_seconds = duration_ms / FADE_STEPS / 1000

        for step in range(1, FADE_STEPS + 1):
            if abort is not None and abort.is_set():
                self.logger.debug(f"Fade aborted before step {step}")
                return

            volume = round_half_up(from_percent + (to_percent - from_percent) * step / FADE_STEPS)
            volume = max(0, min(100, volume))
            try:
                await self.volume_setter.set_volume(target.access_token, target.device_id, volume)
            except Exception as e:
                self.logger.warning(f"Volume step {step} to {volume}% failed: {e}")

            if step < FADE_STEPS:
                await self._sleep(step_seconds)

    async def play_segment(self, text: str, target: PlaybackTarget, current_volume: float,
                           options: Optional[SegmentOptions] = None) -> None:
        if self._busy:
            self.logger.debug("Coordinator busy, dropping segment")
            return

        abort = self._begin()
        opts = self.default_options.merged(options)
        current_percent = _to_percent(current_volume)
        duck_percent = _to_percent(opts.duck_volume)

        try:
            await self.fade_volume(target, current_percent, duck_percent, opts.fade_in_ms, abort)
            await self._pause(PRE_SPEECH_PAUSE_MS)

            if not abort.is_set():
                await self.speech.speak(text, opts.tts_volume, opts.voice, opts.rate, opts.pitch)

            await self._pause(POST_SPEECH_PAUSE_MS)
            await self.fade_volume(target, duck_percent, current_percent, opts.fade_out_ms)
        except Exception as e:
            self.logger.error(f"Segment playback error: {e}", exc_info=True)
            await self._restore(target, current_percent)
        finally:
            self._finish(abort)

    async def play_segments(self, segments: Sequence[Segment], target: PlaybackTarget, current_volume: float,
                            global_options: Optional[SegmentOptions] = None) -> None:
        if not segments:
            return
        if self._busy:
            self.logger.debug("Coordinator busy, dropping segment sequence")
            return

        abort = self._begin()
        base = self.default_options.merged(global_options)
        current_percent = _to_percent(current_volume)
        duck_percent = _to_percent(base.duck_volume)

        try:
            await self.fade_volume(target, current_percent, duck_percent, base.fade_in_ms, abort)
            await self._pause(PRE_SPEECH_PAUSE_MS)

            for idx, segment in enumerate(segments):
                if abort.is_set():
                    self.logger.info(f"Segment sequence stopped after {idx} of {len(segments)}")
                    break

                opts = base.merged(segment.options)
                await self.speech.speak(segment.text, opts.tts_volume, opts.voice, opts.rate, opts.pitch)

                if idx < len(segments) - 1:
                    await self._pause(BETWEEN_SEGMENTS_PAUSE_MS)

            await self._pause(POST_SPEECH_PAUSE_MS)
            # restore runs even after stop() so the music never stays ducked
            await self.fade_volume(target, duck_percent, current_percent, base.fade_out_ms)
        except Exception as e:
            self.logger.error(f"Multi-segment playback error: {e}", exc_info=True)
            await self._restore(target, current_percent)
        finally:
            self._finish(abort)

    async def preload_segment(self, text: str, voice: Optional[str] = None,
                              rate: Optional[str] = None, pitch: Optional[str] = None) -> None:
        try:
            await self.speech.preload(text, voice, rate, pitch)
        except Exception as e:
            self.logger.debug(f"Preload failed: {e}")

    def stop(self) -> None:
        if self._abort is not None:
            self._abort.set()
            self._abort = None
        self.speech.stop_speaking()
        self._busy = False

    def _begin(self) -> asyncio.Event:
        self._busy = True
        self._running += 1
        self._idle.clear()
        self._abort = asyncio.Event()
        return self._abort

    def _finish(self, abort: asyncio.Event) -> None:
        self._running -= 1
        if self._running == 0:
            self._idle.set()
        # a stop() followed by a new envelope hands ownership to that envelope
        if self._abort is abort:
            self._abort = None
            self._busy = False

    async def _pause(self, ms: int) -> None:
        await self._sleep(ms / 1000)

    async def _restore(self, target: PlaybackTarget, percent: int) -> None:
        try:
            await self.volume_setter.set_volume(target.access_token, target.device_id, percent)
        except Exception as e:
            self.logger.warning(f"Could not restore volume to {percent}%: {e}")
