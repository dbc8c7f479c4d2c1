import os
from pathlib import Path
from dotenv import load_dotenv

_BACKEND_ROOT = Path(__file__).resolve().parents[1]
_BACKEND_ENV_PATH = _BACKEND_ROOT / ".env"
load_dotenv(dotenv_path=_BACKEND_ENV_PATH, override=True)


def _env_str(name: str, default: str = "") -> str:
    return str(os.getenv(name) or default).strip()


def _env_float(name: str, default: float) -> float:
    try:
        return float(_env_str(name) or default)
    except ValueError:
        return default


def _env_int(name: str, default: int) -> int:
    try:
        return int(_env_str(name) or default)
    except ValueError:
        return default


OPENAI_API_KEY = _env_str("OPENAI_API_KEY")
QA_MODE = os.getenv("QA_MODE", "false").lower() == "true"

# Practice interview agent
PRACTICE_MODEL = _env_str("PRACTICE_MODEL", "gpt-4o-mini")
PRACTICE_TEMPERATURE = max(0.0, min(2.0, _env_float("PRACTICE_TEMPERATURE", 0.6)))
PRACTICE_HISTORY_WINDOW = max(1, _env_int("PRACTICE_HISTORY_WINDOW", 8))
PRACTICE_TIMEOUT_SEC = max(2.0, _env_float("PRACTICE_TIMEOUT_SEC", 20.0))
PRACTICE_RETRIES = max(0, _env_int("PRACTICE_RETRIES", 1))
PRACTICE_SESSION_TTL_SEC = max(60.0, _env_float("PRACTICE_SESSION_TTL_SEC", 3600.0))

# Speech
TRANSCRIBE_MODEL = _env_str("TRANSCRIBE_MODEL", "whisper-1")
TTS_MODEL = _env_str("TTS_MODEL", "tts-1")
TTS_VOICE = _env_str("TTS_VOICE", "alloy")

# Candidate profile / resume
PROFILE_CONTEXT_CHARS = max(200, _env_int("PROFILE_CONTEXT_CHARS", 1400))
RESUME_CONTEXT_CHARS = max(500, _env_int("RESUME_CONTEXT_CHARS", 4000))
