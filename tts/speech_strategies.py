import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from tts.audio_player import AudioPlaybackError

logger = logging.getLogger(__name__)


class SpeechSynthesisError(Exception):
    pass


class SpeechOutcome(Enum):
    PLAYED = "played"
    SUPERSEDED = "superseded"
    TRY_NEXT = "try_next"


@dataclass(frozen=True)
class SpeechRequest:
    text: str
    volume: float
    voice: str
    rate: Optional[str]
    pitch: Optional[str]
    token: int


class SpeechStrategy(ABC):
    name = "strategy"

    @abstractmethod
    async def attempt(self, request: SpeechRequest, client) -> SpeechOutcome:
        pass


class NetworkSpeech(SpeechStrategy):
    name = "network"

    async def attempt(self, request: SpeechRequest, client) -> SpeechOutcome:
        try:
            audio = await client.fetch_audio(request.text, request.voice, request.rate, request.pitch)
        except SpeechSynthesisError as e:
            logger.warning(f"Network TTS failed, trying local voice: {e}")
            return SpeechOutcome.TRY_NEXT

        if client.is_superseded(request.token):
            logger.debug(f"Speech request {request.token} superseded before playback")
            return SpeechOutcome.SUPERSEDED

        try:
            await client.player.play(audio, request.volume)
        except AudioPlaybackError as e:
            if client.is_superseded(request.token):
                return SpeechOutcome.SUPERSEDED
            logger.warning(f"TTS audio playback error, falling back to local voice: {e}")
            return SpeechOutcome.TRY_NEXT
        return SpeechOutcome.PLAYED


class LocalVoiceSpeech(SpeechStrategy):
    name = "local_voice"

    async def attempt(self, request: SpeechRequest, client) -> SpeechOutcome:
        if client.fallback is None:
            return SpeechOutcome.TRY_NEXT
        if client.is_superseded(request.token):
            return SpeechOutcome.SUPERSEDED

        spoken = await client.fallback.speak(request.text, request.volume)
        return SpeechOutcome.PLAYED if spoken else SpeechOutcome.TRY_NEXT


class SilentSpeech(SpeechStrategy):
    name = "silent"

    async def attempt(self, request: SpeechRequest, client) -> SpeechOutcome:
        logger.info(f"No speech output available, skipping announcement: {request.text[:60]}")
        return SpeechOutcome.PLAYED


DEFAULT_CHAIN = (NetworkSpeech(), LocalVoiceSpeech(), SilentSpeech())
