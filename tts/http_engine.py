import logging
from typing import Optional, Tuple

import httpx

from tts.ssml import has_ssml_markup, to_ssml
from tts.tts_engine import TTSEngine

MAX_TEXT_LENGTH = 2000


class HttpTTSEngine(TTSEngine):
    """Posts {text, voice, rate, pitch, ssml} to a synthesis endpoint and reads back mp3 bytes."""

    def __init__(self, endpoint: str, api_key: Optional[str] = None, timeout: float = 20.0,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        if not endpoint:
            raise ValueError("HTTP TTS endpoint is required")
        self.endpoint = endpoint
        self.api_key = api_key
        self.timeout = timeout
        self.transport = transport
        self.logger = logging.getLogger(__name__)

    def _get_headers(self):
        headers = {'Content-Type': 'application/json', 'Accept': 'audio/mpeg'}
        if self.api_key:
            headers['Authorization'] = f'Bearer {self.api_key}'
        return headers

    def build_payload(self, text: str, voice_id: str, rate: Optional[str], pitch: Optional[str]):
        if has_ssml_markup(text):
            body = text
        else:
            body = to_ssml(text, rate=rate, pitch=pitch)
        return {
            "text": body,
            "voice": voice_id,
            "rate": rate or "default",
            "pitch": pitch or "default",
            "ssml": True
        }

    async def generate_speech(self, text: str, voice_id: str, rate: Optional[str] = None,
                              pitch: Optional[str] = None) -> Tuple[Optional[bytes], str]:
        if not text or not text.strip():
            return None, "No text provided for TTS"

        if not voice_id:
            self.logger.error("Missing voice_id for TTS generation")
            return None, "Missing voice_id for TTS generation"

        if len(text) > MAX_TEXT_LENGTH:
            self.logger.warning(f"TTS text too long: {len(text)} chars")
            return None, f"Text too long (max {MAX_TEXT_LENGTH} chars)"

        payload = self.build_payload(text, voice_id, rate, pitch)
        try:
            async with httpx.AsyncClient(timeout=httpx.Timeout(self.timeout), transport=self.transport) as client:
                response = await client.post(self.endpoint, headers=self._get_headers(), json=payload)
                response.raise_for_status()
                audio_data = response.content
        except httpx.HTTPError as e:
            self.logger.error(f"HTTP TTS request to {self.endpoint} failed: {e}")
            return None, f"HTTP TTS request failed: {str(e)}"

        if not audio_data:
            return None, "TTS conversion resulted in empty audio"

        self.logger.info(f"HTTP TTS generated {len(audio_data)} bytes using voice: {voice_id}")
        return audio_data, f"Generated TTS using voice: {voice_id}"
