import pytest

from app.practice import speech


class _QuotaError(Exception):
    code = "insufficient_quota"


@pytest.mark.asyncio
async def test_transcribe_requires_api_key(offline_agent):
    with pytest.raises(speech.SpeechUnavailableError):
        await speech.transcribe_audio("answer.webm", b"\x00\x01")


@pytest.mark.asyncio
async def test_transcribe_returns_text(live_agent, monkeypatch: pytest.MonkeyPatch):
    captured = {}

    class _Result:
        text = "  I led the migration.  "

    async def _fake_create(*args, **kwargs):
        captured.update(kwargs)
        return _Result()

    monkeypatch.setattr(live_agent.client.audio.transcriptions, "create", _fake_create)

    text = await speech.transcribe_audio("answer.webm", b"audio-bytes")

    assert text == "I led the migration."
    assert captured["model"] == speech.TRANSCRIBE_MODEL
    assert captured["file"] == ("answer.webm", b"audio-bytes")


@pytest.mark.asyncio
async def test_transcribe_quota_maps_to_429(live_agent, monkeypatch: pytest.MonkeyPatch):
    async def _quota(*args, **kwargs):
        raise _QuotaError("quota")

    monkeypatch.setattr(live_agent.client.audio.transcriptions, "create", _quota)

    with pytest.raises(speech.SpeechQuotaError) as info:
        await speech.transcribe_audio("answer.webm", b"audio-bytes")

    assert info.value.status_code == 429


@pytest.mark.asyncio
async def test_synthesize_rejects_blank_text(live_agent):
    with pytest.raises(ValueError):
        await speech.synthesize_speech("   ")


@pytest.mark.asyncio
async def test_synthesize_returns_mp3_bytes(live_agent, monkeypatch: pytest.MonkeyPatch):
    captured = {}

    class _Audio:
        content = b"ID3fake"

    async def _fake_create(*args, **kwargs):
        captured.update(kwargs)
        return _Audio()

    monkeypatch.setattr(live_agent.client.audio.speech, "create", _fake_create)

    audio = await speech.synthesize_speech("Tell me about yourself.")

    assert audio == b"ID3fake"
    assert captured["voice"] == speech.TTS_VOICE
    assert captured["response_format"] == "mp3"


@pytest.mark.asyncio
async def test_synthesize_other_errors_raise_speech_error(live_agent, monkeypatch: pytest.MonkeyPatch):
    async def _boom(*args, **kwargs):
        raise RuntimeError("network down")

    monkeypatch.setattr(live_agent.client.audio.speech, "create", _boom)

    with pytest.raises(speech.SpeechError) as info:
        await speech.synthesize_speech("hello")

    assert not isinstance(info.value, speech.SpeechQuotaError)
