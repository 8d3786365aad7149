import asyncio
import logging
import os
from typing import Optional, Tuple

from google.cloud import texttospeech_v1beta1 as texttospeech
from google.cloud.texttospeech_v1beta1.types import VoiceSelectionParams, AudioConfig, SynthesisInput

from tts.ssml import to_ssml
from tts.tts_engine import TTSEngine

MAX_SSML_LENGTH = 5000


class GCPTTSEngine(TTSEngine):
    def __init__(self, credentials_path: str, language_code: str = "nl-NL"):
        if not credentials_path:
            raise ValueError("GCP TTS credentials_path is required")

        if not os.path.exists(credentials_path):
            raise FileNotFoundError(f"GCP TTS credentials file not found: {credentials_path}")

        self.client = texttospeech.TextToSpeechClient.from_service_account_json(credentials_path)
        self.language_code = language_code
        self.logger = logging.getLogger(__name__)

    def _language_for(self, voice_id: str) -> str:
        # Cloud voice names start with their locale, e.g. nl-NL-Wavenet-B
        parts = voice_id.split("-")
        if len(parts) > 2 and len(parts[0]) == 2:
            return f"{parts[0]}-{parts[1]}"
        return self.language_code

    async def generate_speech(self, text: str, voice_id: str, rate: Optional[str] = None,
                              pitch: Optional[str] = None) -> Tuple[Optional[bytes], str]:
        if not text:
            return None, "No text provided for TTS"

        if not voice_id:
            self.logger.error("Missing voice_id for TTS generation")
            return None, "Missing voice_id for TTS generation"

        # voice selection goes through VoiceSelectionParams, so the envelope carries prosody only
        ssml = to_ssml(text, rate=rate, pitch=pitch)
        if len(ssml) > MAX_SSML_LENGTH:
            self.logger.warning(f"SSML too long for GCP TTS: {len(ssml)} chars")
            return None, f"SSML too long (max {MAX_SSML_LENGTH} chars)"

        language_code = self._language_for(voice_id)
        try:
            voice_params = VoiceSelectionParams(language_code=language_code, name=voice_id)
            audio_config = AudioConfig(audio_encoding=texttospeech.AudioEncoding.MP3)
            self.logger.debug(f"GCP TTS voice={voice_id} lang={language_code} ssml={len(ssml)} chars")

            response = await asyncio.to_thread(
                self.client.synthesize_speech,
                input=SynthesisInput(ssml=ssml),
                voice=voice_params,
                audio_config=audio_config
            )

            if response.audio_content:
                return response.audio_content, f"Generated TTS using voice: {voice_id}"
            return None, "GCP TTS returned empty audio"

        except Exception as e:
            self.logger.error(f"GCP TTS generation failed: {e}")
            return None, f"GCP TTS generation failed: {str(e)}"
