import json

import httpx
import pytest

from tts.http_engine import HttpTTSEngine
from tts.ssml import has_ssml_markup, to_ssml
from tts.tts_factory import TTSEngineFactory


def test_plain_text_gets_pause_tags():
    ssml = to_ssml("Hallo, dit is Pop FM. Luister: muziek... Toch?")
    assert ssml.startswith("<speak>") and ssml.endswith("</speak>")
    assert 'Hallo,<break time="150ms"/>' in ssml
    assert 'FM.<break time="350ms"/>' in ssml
    assert 'Luister:<break time="200ms"/>' in ssml
    assert 'muziek...<break time="500ms"/>' in ssml
    assert 'Toch?<break time="350ms"/>' in ssml


def test_ssml_escapes_xml():
    ssml = to_ssml("R&B <live>")
    assert "R&amp;B &lt;live&gt;" in ssml


def test_prosody_only_for_non_default_values():
    assert "<prosody" not in to_ssml("Hallo", rate="default", pitch="default")
    wrapped = to_ssml("Hallo", voice="nl-NL-FennaNeural", rate="+5%", pitch="-2Hz")
    assert '<voice name="nl-NL-FennaNeural"><prosody rate="+5%" pitch="-2Hz">' in wrapped


def test_existing_markup_passes_through():
    text = 'Hallo <break time="1s"/> daar'
    assert has_ssml_markup(text)
    assert to_ssml(text) == text


@pytest.mark.asyncio
async def test_http_engine_posts_ssml_payload():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["body"] = json.loads(request.content)
        seen["auth"] = request.headers.get("Authorization")
        return httpx.Response(200, content=b"ID3audio")

    engine = HttpTTSEngine("http://tts.local/api/tts", api_key="secret", transport=httpx.MockTransport(handler))
    audio, message = await engine.generate_speech("Hallo daar.", "nl-NL-FennaNeural", rate="+5%")

    assert audio == b"ID3audio"
    assert seen["auth"] == "Bearer secret"
    assert seen["body"]["voice"] == "nl-NL-FennaNeural"
    assert seen["body"]["rate"] == "+5%"
    assert seen["body"]["pitch"] == "default"
    assert seen["body"]["ssml"] is True
    assert seen["body"]["text"].startswith("<speak>")


@pytest.mark.asyncio
async def test_http_engine_returns_reason_on_error():
    transport = httpx.MockTransport(lambda request: httpx.Response(503, json={"error": "TTS_CIRCUIT_OPEN"}))
    engine = HttpTTSEngine("http://tts.local/api/tts", transport=transport)
    audio, message = await engine.generate_speech("Hallo", "nl-NL-FennaNeural")
    assert audio is None
    assert "failed" in message


@pytest.mark.asyncio
async def test_http_engine_rejects_empty_and_oversized_text():
    engine = HttpTTSEngine("http://tts.local/api/tts", transport=httpx.MockTransport(lambda r: httpx.Response(200)))
    assert (await engine.generate_speech("  ", "voice"))[0] is None
    assert (await engine.generate_speech("a" * 2001, "voice"))[0] is None
    assert (await engine.generate_speech("Hallo", ""))[0] is None


def test_factory_builds_http_engine():
    engine = TTSEngineFactory.create_engine("HTTP", {"http_tts": {"endpoint": "http://tts.local/api/tts"}})
    assert isinstance(engine, HttpTTSEngine)


@pytest.mark.parametrize("engine_type,config", [
    ("", {}),
    ("http", {}),
    ("http", {"http_tts": {}}),
    ("elevenlabs", {"elevenlabs": {"api_key": None}}),
    ("google", {"google_tts": {}}),
    ("modelslab", {}),
])
def test_factory_rejects_bad_config(engine_type, config):
    with pytest.raises(ValueError):
        TTSEngineFactory.create_engine(engine_type, config)
