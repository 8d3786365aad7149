import asyncio
import logging
from typing import Optional

import pyttsx3

from tts.audio_player import LocalVoice


class Pyttsx3Voice(LocalVoice):
    """Offline platform voice, matched by language prefix (nl by default)."""

    def __init__(self, language_prefix: str = "nl", rate: int = 170):
        self.language_prefix = language_prefix.lower()
        self.rate = rate
        self.logger = logging.getLogger(__name__)
        self._engine = None
        self._voice_id: Optional[str] = None
        self._speaking = False

    def _get_engine(self):
        if self._engine is None:
            self._engine = pyttsx3.init()
            self._voice_id = self._find_voice(self._engine)
        return self._engine

    def _find_voice(self, engine) -> Optional[str]:
        for voice in engine.getProperty('voices'):
            languages = [
                lang.decode('utf-8', 'ignore') if isinstance(lang, bytes) else str(lang)
                for lang in (voice.languages or [])
            ]
            tags = [lang.lstrip('\x05').lower() for lang in languages] + [voice.id.lower()]
            if any(tag.startswith(self.language_prefix) or f"{self.language_prefix}-" in tag for tag in tags):
                self.logger.info(f"Local voice fallback using {voice.name}")
                return voice.id
        self.logger.warning(f"No local voice found for language '{self.language_prefix}'")
        return None

    def _speak_blocking(self, text: str, volume: float) -> bool:
        engine = self._get_engine()
        if not self._voice_id:
            return False
        engine.setProperty('voice', self._voice_id)
        engine.setProperty('rate', self.rate)
        engine.setProperty('volume', max(0.0, min(1.0, volume)))
        engine.say(text)
        engine.runAndWait()
        return True

    async def speak(self, text: str, volume: float) -> bool:
        self._speaking = True
        try:
            return await asyncio.to_thread(self._speak_blocking, text, volume)
        except (RuntimeError, OSError) as e:
            self.logger.warning(f"Local voice failed: {e}")
            return False
        finally:
            self._speaking = False

    def stop(self) -> None:
        if self._engine is not None and self._speaking:
            self._engine.stop()

    def is_speaking(self) -> bool:
        return self._speaking
