#!/usr/bin/env python3
# tts/speech_client.py - cached TTS playback with a fallback chain

import logging
import time
from collections import OrderedDict
from typing import Callable, Optional, Sequence, Tuple

from tts.audio_player import AudioPlayer, LocalVoice
from tts.speech_strategies import (
    DEFAULT_CHAIN, SpeechOutcome, SpeechRequest, SpeechStrategy, SpeechSynthesisError
)
from tts.tts_engine import TTSEngine

DEFAULT_VOICE = "nl-NL-FennaNeural"
CACHE_TTL_SECONDS = 20 * 60
CACHE_MAX_ENTRIES = 50
CACHE_KEY_PREFIX_LENGTH = 100


def cache_key(text: str, voice: str, rate: Optional[str] = None, pitch: Optional[str] = None) -> str:
    return f"{voice}:{rate or ''}:{pitch or ''}:{text[:CACHE_KEY_PREFIX_LENGTH]}:{len(text)}"


class SpeechClient:
    """
    Speaks DJ lines through a TTS engine.

    A playback token increases on every speak() and stop_speaking(); a call
    whose token is no longer current never reaches the speakers.
    """

    def __init__(self, engine: TTSEngine, player: AudioPlayer, fallback: Optional[LocalVoice] = None,
                 default_voice: str = DEFAULT_VOICE, cache_ttl_seconds: float = CACHE_TTL_SECONDS,
                 cache_max_entries: int = CACHE_MAX_ENTRIES, clock: Callable[[], float] = time.monotonic,
                 strategies: Sequence[SpeechStrategy] = DEFAULT_CHAIN):
        self.engine = engine
        self.player = player
        self.fallback = fallback
        self.default_voice = default_voice
        self.cache_ttl_seconds = cache_ttl_seconds
        self.cache_max_entries = cache_max_entries
        self.clock = clock
        self.strategies = list(strategies)
        self.logger = logging.getLogger(__name__)
        self._cache: "OrderedDict[str, Tuple[bytes, float]]" = OrderedDict()
        self._token = 0

    @property
    def cache_size(self) -> int:
        return len(self._cache)

    def is_superseded(self, token: int) -> bool:
        return token != self._token

    async def speak(self, text: str, volume: float = 0.9, voice: Optional[str] = None,
                    rate: Optional[str] = None, pitch: Optional[str] = None) -> None:
        self._token += 1
        token = self._token
        self._halt_output()

        request = SpeechRequest(
            text=text,
            volume=max(0.0, min(1.0, volume)),
            voice=voice or self.default_voice,
            rate=rate,
            pitch=pitch,
            token=token
        )

        for strategy in self.strategies:
            try:
                outcome = await strategy.attempt(request, self)
            except Exception as e:
                self.logger.error(f"Speech strategy {strategy.name} crashed: {e}", exc_info=True)
                outcome = SpeechOutcome.TRY_NEXT

            if outcome is SpeechOutcome.TRY_NEXT:
                continue
            self.logger.debug(f"Speech request {token} finished via {strategy.name}: {outcome.value}")
            return

    def stop_speaking(self) -> None:
        self._token += 1
        self._halt_output()

    def is_speaking(self) -> bool:
        if self.player.is_playing():
            return True
        return bool(self.fallback and self.fallback.is_speaking())

    async def preload(self, text: str, voice: Optional[str] = None,
                      rate: Optional[str] = None, pitch: Optional[str] = None) -> None:
        try:
            await self.fetch_audio(text, voice or self.default_voice, rate, pitch)
        except SpeechSynthesisError as e:
            self.logger.debug(f"Preload failed: {e}")

    async def fetch_audio(self, text: str, voice: Optional[str] = None,
                          rate: Optional[str] = None, pitch: Optional[str] = None) -> bytes:
        voice = voice or self.default_voice
        key = cache_key(text, voice, rate, pitch)

        self._evict_expired()
        cached = self._cache.get(key)
        if cached:
            self.logger.debug(f"TTS cache hit for {key[:60]}")
            return cached[0]

        audio, message = await self.engine.generate_speech(text, voice, rate=rate, pitch=pitch)
        if not audio:
            raise SpeechSynthesisError(message)

        self._cache[key] = (audio, self.clock())
        while len(self._cache) > self.cache_max_entries:
            self._cache.popitem(last=False)
        return audio

    def clear_cache(self) -> None:
        self._cache.clear()

    def _evict_expired(self) -> None:
        now = self.clock()
        expired = [key for key, (_, stored_at) in self._cache.items() if now - stored_at > self.cache_ttl_seconds]
        for key in expired:
            del self._cache[key]

    def _halt_output(self) -> None:
        self.player.stop()
        if self.fallback:
            self.fallback.stop()
