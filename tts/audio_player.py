from abc import ABC, abstractmethod


class AudioPlaybackError(Exception):
    pass


class AudioPlayer(ABC):
    """Plays one synthesized clip at a time."""

    @abstractmethod
    async def play(self, audio: bytes, volume: float) -> None:
        """Resolve when the clip ends or is stopped; raise AudioPlaybackError if it cannot play."""

    @abstractmethod
    def stop(self) -> None:
        pass

    @abstractmethod
    def is_playing(self) -> bool:
        pass


class LocalVoice(ABC):
    """Platform speech synthesizer used when network TTS is unavailable."""

    @abstractmethod
    async def speak(self, text: str, volume: float) -> bool:
        """Return False when no suitable voice exists."""

    @abstractmethod
    def stop(self) -> None:
        pass

    @abstractmethod
    def is_speaking(self) -> bool:
        pass
