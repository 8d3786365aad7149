import logging
from typing import Dict, Any

from tts.tts_engine import TTSEngine
from tts.http_engine import HttpTTSEngine
from tts.elevenlabs_engine import ElevenLabsTTSEngine
from tts.gcp_engine import GCPTTSEngine

SUPPORTED_ENGINES = ("http", "elevenlabs", "google")


class TTSEngineFactory:
    _logger = logging.getLogger(__name__)

    @staticmethod
    def _required(config: Dict[str, Any], section: str, key: str) -> Dict[str, Any]:
        """Return the engine section, failing when it or its mandatory key is missing."""
        engine_config = config.get(section)
        if not engine_config:
            TTSEngineFactory._logger.error(f"tts.{section} section is missing")
            raise ValueError(f"tts.{section} configuration is required")
        if not engine_config.get(key):
            TTSEngineFactory._logger.error(f"tts.{section}.{key} is missing")
            raise ValueError(f"tts.{section}.{key} is required")
        return engine_config

    @staticmethod
    def create_engine(tts_engine_type: str, config: Dict[str, Any]) -> TTSEngine:
        if not tts_engine_type:
            TTSEngineFactory._logger.error("tts engine type is missing or empty")
            raise ValueError("tts engine type is required and cannot be empty")

        engine_type = tts_engine_type.lower()

        if engine_type == "http":
            http_config = TTSEngineFactory._required(config, "http_tts", "endpoint")
            TTSEngineFactory._logger.info(f"Using HTTP TTS at {http_config['endpoint']}")
            return HttpTTSEngine(
                endpoint=http_config["endpoint"],
                api_key=http_config.get("api_key"),
                timeout=float(http_config.get("timeout", 20.0))
            )

        if engine_type == "elevenlabs":
            elevenlabs_config = TTSEngineFactory._required(config, "elevenlabs", "api_key")
            TTSEngineFactory._logger.info("Using ElevenLabs TTS")
            return ElevenLabsTTSEngine(
                api_key=elevenlabs_config["api_key"],
                model_id=elevenlabs_config.get("model_id", "eleven_multilingual_v2"),
                voice_overrides=elevenlabs_config.get("voices")
            )

        if engine_type == "google":
            google_config = TTSEngineFactory._required(config, "google_tts", "credentials_path")
            TTSEngineFactory._logger.info("Using Google Cloud TTS")
            return GCPTTSEngine(
                credentials_path=google_config["credentials_path"],
                language_code=google_config.get("language_code", "nl-NL")
            )

        TTSEngineFactory._logger.error(f"Unknown TTS engine type: {tts_engine_type}")
        raise ValueError(f"Unknown TTS engine type: {tts_engine_type}. Supported: {', '.join(SUPPORTED_ENGINES)}")
