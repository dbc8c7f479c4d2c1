import logging

from app.practice import agent
from core.config import TRANSCRIBE_MODEL, TTS_MODEL, TTS_VOICE

logger = logging.getLogger("app.practice.speech")


class SpeechError(RuntimeError):
    status_code = 500


class SpeechUnavailableError(SpeechError):
    status_code = 500


class SpeechQuotaError(SpeechError):
    status_code = 429


async def transcribe_audio(filename: str, audio_bytes: bytes) -> str:
    """Speech-to-text for a recorded answer; the candidate can always type instead."""
    if not agent.OPENAI_API_KEY or agent.client is None:
        raise SpeechUnavailableError("Speech input is not available because the OpenAI API key is not configured.")
    if not audio_bytes:
        raise ValueError("Missing audio file")

    try:
        result = await agent.client.audio.transcriptions.create(
            model=TRANSCRIBE_MODEL,
            file=(filename or "answer.webm", audio_bytes),
        )
    except Exception as exc:
        if agent.is_quota_error(exc):
            raise SpeechQuotaError(
                "Speech input is temporarily unavailable because the OpenAI account is out of quota. "
                "You can still type your answers."
            ) from exc
        logger.warning("transcription failed | model=%s err=%s", TRANSCRIBE_MODEL, exc)
        raise SpeechError("There was a problem transcribing that audio.") from exc

    text = str(getattr(result, "text", "") or "").strip()
    if not text:
        raise SpeechError("Unable to transcribe audio. Please try again.")
    return text


async def synthesize_speech(text: str) -> bytes:
    """Render an interviewer reply as MP3 audio."""
    spoken = str(text or "").strip()
    if not spoken:
        raise ValueError("Missing text for TTS")
    if not agent.OPENAI_API_KEY or agent.client is None:
        raise SpeechUnavailableError("TTS is not configured")

    try:
        response = await agent.client.audio.speech.create(
            model=TTS_MODEL,
            voice=TTS_VOICE,
            input=spoken,
            response_format="mp3",
        )
    except Exception as exc:
        if agent.is_quota_error(exc):
            raise SpeechQuotaError("Speech audio is unavailable because the OpenAI account is out of quota.") from exc
        logger.warning("speech synthesis failed | model=%s err=%s", TTS_MODEL, exc)
        raise SpeechError("Unable to generate speech audio") from exc

    return response.content
