"""
Speech playback through the pygame mixer.

Clips are loaded from memory, so synthesized audio never touches the disk.
Playback is polled from the event loop instead of blocking it.
"""

import asyncio
import io
import logging
import os
import time

import pygame

from tts.audio_player import AudioPlaybackError, AudioPlayer

logger = logging.getLogger(__name__)


class PygamePlayer(AudioPlayer):
    """
    AudioPlayer backed by pygame.mixer.music.

    Attributes:
        TICK_RATE (int): Polls per second while a clip is playing
        MAX_CLIP_SECONDS (int): Safety limit for a single spoken clip
    """

    TICK_RATE = 20
    MAX_CLIP_SECONDS = 300

    def __init__(self, frequency: int = 44100, buffer_size: int = 2048) -> None:
        # headless hosts (servers, WSL) have no display for SDL
        if 'DISPLAY' not in os.environ:
            os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')

        self.frequency = frequency
        self.buffer_size = buffer_size
        self._stopped = False

    def _ensure_mixer(self) -> None:
        if pygame.mixer.get_init():
            return
        try:
            pygame.mixer.pre_init(frequency=self.frequency, buffer=self.buffer_size)
            pygame.mixer.init()
            logger.info("Speech mixer initialized")
        except pygame.error as e:
            raise AudioPlaybackError(f"Failed to initialize audio mixer: {e}") from e

    async def play(self, audio: bytes, volume: float) -> None:
        if not audio:
            raise AudioPlaybackError("Audio clip is empty")

        self._ensure_mixer()
        self._stopped = False
        try:
            pygame.mixer.music.load(io.BytesIO(audio))
            pygame.mixer.music.set_volume(max(0.0, min(1.0, volume)))
            pygame.mixer.music.play()
        except pygame.error as e:
            raise AudioPlaybackError(f"Error playing speech clip: {e}") from e

        logger.debug(f"Playing speech clip ({len(audio)} bytes) at volume {volume:.2f}")
        start_time = time.monotonic()
        while not self._stopped and pygame.mixer.music.get_busy():
            if time.monotonic() - start_time > self.MAX_CLIP_SECONDS:
                logger.warning(f"Speech clip exceeded {self.MAX_CLIP_SECONDS}s, stopping")
                self.stop()
                break
            await asyncio.sleep(1 / self.TICK_RATE)

    def stop(self) -> None:
        self._stopped = True
        if not pygame.mixer.get_init():
            return
        try:
            pygame.mixer.music.stop()
        except pygame.error as e:
            logger.error(f"Error stopping speech playback: {e}")

    def is_playing(self) -> bool:
        if not pygame.mixer.get_init():
            return False
        try:
            return bool(pygame.mixer.music.get_busy())
        except pygame.error:
            return False
