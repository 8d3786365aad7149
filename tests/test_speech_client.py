import asyncio
from typing import List, Optional, Tuple

import pytest

from tts.audio_player import AudioPlaybackError, AudioPlayer, LocalVoice
from tts.speech_client import SpeechClient, SpeechSynthesisError, cache_key
from tts.tts_engine import TTSEngine


class FakeEngine(TTSEngine):
    def __init__(self, audio: Optional[bytes] = b"mp3-bytes"):
        self.audio = audio
        self.calls: List[Tuple[str, str, Optional[str], Optional[str]]] = []
        self.gates = {}

    async def generate_speech(self, text, voice_id, rate=None, pitch=None):
        self.calls.append((text, voice_id, rate, pitch))
        gate = self.gates.get(text)
        if gate:
            await gate.wait()
        if self.audio is None:
            return None, "provider down"
        return self.audio + text.encode("utf-8"), "ok"


class FakePlayer(AudioPlayer):
    def __init__(self, fail: bool = False):
        self.played: List[Tuple[bytes, float]] = []
        self.stops = 0
        self.fail = fail

    async def play(self, audio, volume):
        if self.fail:
            raise AudioPlaybackError("decoder error")
        self.played.append((audio, volume))

    def stop(self):
        self.stops += 1

    def is_playing(self):
        return False


class FakeLocalVoice(LocalVoice):
    def __init__(self, available: bool = True):
        self.available = available
        self.spoken: List[str] = []

    async def speak(self, text, volume):
        if not self.available:
            return False
        self.spoken.append(text)
        return True

    def stop(self):
        pass

    def is_speaking(self):
        return False


class ManualClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def test_cache_key_uses_prefix_and_length():
    text = "x" * 150
    assert cache_key(text, "nl-NL-FennaNeural", "+5%", None) == f"nl-NL-FennaNeural:+5%::{'x' * 100}:150"


@pytest.mark.asyncio
async def test_speak_plays_synthesized_audio_with_clamped_volume():
    engine, player = FakeEngine(), FakePlayer()
    client = SpeechClient(engine, player)

    await client.speak("Hallo", volume=1.7, voice="nl-NL-MaartenNeural", rate="+5%")

    assert engine.calls == [("Hallo", "nl-NL-MaartenNeural", "+5%", None)]
    assert player.played == [(b"mp3-bytesHallo", 1.0)]


@pytest.mark.asyncio
async def test_default_voice_used_when_none_given():
    engine = FakeEngine()
    client = SpeechClient(engine, FakePlayer(), default_voice="nl-NL-ColetteNeural")
    await client.speak("Hallo")
    assert engine.calls[0][1] == "nl-NL-ColetteNeural"


@pytest.mark.asyncio
async def test_cache_hit_skips_engine():
    engine = FakeEngine()
    client = SpeechClient(engine, FakePlayer())
    await client.preload("Straks het weer")
    await client.speak("Straks het weer")
    assert len(engine.calls) == 1


@pytest.mark.asyncio
async def test_cache_entries_expire():
    clock = ManualClock()
    engine = FakeEngine()
    client = SpeechClient(engine, FakePlayer(), clock=clock)

    await client.fetch_audio("Hallo")
    clock.now = 20 * 60 - 1
    await client.fetch_audio("Hallo")
    assert len(engine.calls) == 1

    clock.now = 20 * 60 + 1
    await client.fetch_audio("Hallo")
    assert len(engine.calls) == 2


@pytest.mark.asyncio
async def test_cache_evicts_oldest_beyond_limit():
    engine = FakeEngine()
    client = SpeechClient(engine, FakePlayer(), cache_max_entries=50)
    for idx in range(51):
        await client.fetch_audio(f"zin {idx}")
    assert client.cache_size == 50

    await client.fetch_audio("zin 0")
    assert len(engine.calls) == 52
    await client.fetch_audio("zin 50")
    assert len(engine.calls) == 52


@pytest.mark.asyncio
async def test_fetch_audio_raises_when_engine_returns_nothing():
    client = SpeechClient(FakeEngine(audio=None), FakePlayer())
    with pytest.raises(SpeechSynthesisError):
        await client.fetch_audio("Hallo")


@pytest.mark.asyncio
async def test_superseded_speak_never_plays():
    engine, player = FakeEngine(), FakePlayer()
    gate = asyncio.Event()
    engine.gates["Eerste"] = gate
    client = SpeechClient(engine, player)

    first = asyncio.create_task(client.speak("Eerste"))
    await asyncio.sleep(0)
    await client.speak("Tweede")
    gate.set()
    await first

    assert [audio for audio, _ in player.played] == [b"mp3-bytesTweede"]


@pytest.mark.asyncio
async def test_stop_speaking_supersedes_pending_fetch():
    engine, player = FakeEngine(), FakePlayer()
    gate = asyncio.Event()
    engine.gates["Hallo"] = gate
    client = SpeechClient(engine, player)

    task = asyncio.create_task(client.speak("Hallo"))
    await asyncio.sleep(0)
    client.stop_speaking()
    gate.set()
    await task

    assert player.played == []


@pytest.mark.asyncio
async def test_provider_failure_falls_back_to_local_voice():
    local = FakeLocalVoice()
    client = SpeechClient(FakeEngine(audio=None), FakePlayer(), fallback=local)
    await client.speak("Hallo")
    assert local.spoken == ["Hallo"]


@pytest.mark.asyncio
async def test_playback_error_falls_back_to_local_voice():
    local = FakeLocalVoice()
    client = SpeechClient(FakeEngine(), FakePlayer(fail=True), fallback=local)
    await client.speak("Hallo")
    assert local.spoken == ["Hallo"]


@pytest.mark.asyncio
async def test_no_fallback_resolves_silently():
    client = SpeechClient(FakeEngine(audio=None), FakePlayer(), fallback=FakeLocalVoice(available=False))
    await client.speak("Hallo")

    client_without_fallback = SpeechClient(FakeEngine(audio=None), FakePlayer())
    await client_without_fallback.speak("Hallo")


@pytest.mark.asyncio
async def test_preload_swallows_failures():
    client = SpeechClient(FakeEngine(audio=None), FakePlayer())
    await client.preload("Hallo")
    assert client.cache_size == 0
