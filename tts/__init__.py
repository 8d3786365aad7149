from tts.tts_engine import TTSEngine
from tts.http_engine import HttpTTSEngine
from tts.elevenlabs_engine import ElevenLabsTTSEngine
from tts.gcp_engine import GCPTTSEngine
from tts.speech_client import SpeechClient
from tts.speech_strategies import SpeechSynthesisError

__all__ = [
    "TTSEngine",
    "HttpTTSEngine",
    "ElevenLabsTTSEngine",
    "GCPTTSEngine",
    "SpeechClient",
    "SpeechSynthesisError",
]
