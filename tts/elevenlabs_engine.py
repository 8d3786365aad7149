import asyncio
import logging
import re
from typing import Optional, Tuple

from elevenlabs.client import ElevenLabs

from tts.tts_engine import TTSEngine

MAX_TEXT_LENGTH = 1000
TAG_PATTERN = re.compile(r"<[^>]+>")


class ElevenLabsTTSEngine(TTSEngine):
    def __init__(self, api_key: str, model_id: str = "eleven_multilingual_v2",
                 voice_overrides: Optional[dict] = None):
        if not api_key:
            raise ValueError("ElevenLabs API key is required")
        self.client = ElevenLabs(api_key=api_key)
        self.model_id = model_id
        self.voice_overrides = voice_overrides or {}
        self.logger = logging.getLogger(__name__)

    async def generate_speech(self, text: str, voice_id: str, rate: Optional[str] = None,
                              pitch: Optional[str] = None) -> Tuple[Optional[bytes], str]:
        if not text:
            return None, "No text provided for TTS"

        if not voice_id:
            self.logger.error("Missing voice_id for TTS generation")
            return None, "Missing voice_id for TTS generation"

        # ElevenLabs reads plain text; station voice names map to ElevenLabs voice ids
        plain_text = TAG_PATTERN.sub("", text).strip()
        resolved_voice = self.voice_overrides.get(voice_id, voice_id)

        if len(plain_text) > MAX_TEXT_LENGTH - 20:
            self.logger.warning(f"TTS text length approaching limit: {len(plain_text)} chars")

        try:
            self.logger.info(f"ElevenLabs TTS using voice={resolved_voice} model={self.model_id}")

            def _convert() -> bytes:
                audio_stream = self.client.text_to_speech.convert(
                    voice_id=resolved_voice,
                    text=plain_text[:MAX_TEXT_LENGTH],
                    model_id=self.model_id,
                    output_format="mp3_44100_128",
                    language_code="nl"
                )
                return b''.join(audio_stream)

            audio_data = await asyncio.to_thread(_convert)

            if audio_data:
                self.logger.info("TTS generation successful")
                return audio_data, f"Generated TTS using voice: {resolved_voice}"
            else:
                return None, "TTS conversion resulted in empty audio"

        except Exception as e:
            self.logger.error(f"TTS generation failed: {e}")
            return None, f"TTS generation failed: {str(e)}"
