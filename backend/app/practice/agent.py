import asyncio
import logging
from typing import Optional

from openai import AsyncOpenAI

from app.practice.models import InterviewContext, coerce_history
from app.practice.prompts import build_system_prompt, split_completion
from app.practice.scripted import generate_scripted_reply
from app.schemas import CandidateProfile, PracticeInterviewRequest, PracticeReply
from core.config import (
    OPENAI_API_KEY,
    PRACTICE_HISTORY_WINDOW,
    PRACTICE_MODEL,
    PRACTICE_RETRIES,
    PRACTICE_TEMPERATURE,
    PRACTICE_TIMEOUT_SEC,
    QA_MODE,
)
from core.logger import log_event

logger = logging.getLogger("app.practice.agent")

# Only built when a key is configured; without one every reply is scripted.
client = AsyncOpenAI(api_key=OPENAI_API_KEY) if OPENAI_API_KEY else None

QUOTA_ERROR_CODE = "insufficient_quota"
QUOTA_ERROR_PHRASE = "exceeded your current quota"


class PracticeAgentError(RuntimeError):
    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def is_quota_error(exc: BaseException | None) -> bool:
    if exc is None:
        return False
    code = getattr(exc, "code", None)
    if code == QUOTA_ERROR_CODE:
        return True

    body = getattr(exc, "body", None)
    if isinstance(body, dict):
        error = body.get("error") if isinstance(body.get("error"), dict) else body
        if error.get("code") == QUOTA_ERROR_CODE:
            return True

    message = str(getattr(exc, "message", None) or exc or "")
    return QUOTA_ERROR_PHRASE in message.lower()


def _build_messages(request: PracticeInterviewRequest, profile: Optional[CandidateProfile]) -> list[dict]:
    messages = [
        {"role": "system", "content": build_system_prompt(request.role_title, request.company, profile)},
    ]
    for turn in coerce_history(request.history)[-PRACTICE_HISTORY_WINDOW:]:
        messages.append(turn.to_dict())

    safe_message = str(request.message or "").strip()
    if safe_message:
        messages.append({"role": "user", "content": safe_message})
    return messages


async def _create_completion_with_retry(messages: list[dict], model: str, timeout_sec: float, retries: int):
    last_error: Exception | None = None
    for attempt in range(max(1, retries + 1)):
        try:
            return await asyncio.wait_for(
                client.chat.completions.create(
                    model=model,
                    messages=messages,
                    temperature=PRACTICE_TEMPERATURE,
                ),
                timeout=timeout_sec,
            )
        except asyncio.TimeoutError as exc:
            last_error = exc
            logger.warning("practice LLM timeout | model=%s attempt=%s", model, attempt + 1)
        except Exception as exc:
            if is_quota_error(exc):
                raise
            last_error = exc
            logger.warning("practice LLM failure | model=%s attempt=%s err=%s", model, attempt + 1, exc)

        if attempt < retries:
            await asyncio.sleep(0.4 * (attempt + 1))

    raise RuntimeError(f"LLM request failed after retries: {last_error}") from last_error


def _scripted(request: PracticeInterviewRequest, reason: str, session_id: str = "") -> PracticeReply:
    log_event("practice_agent", "scripted_fallback", session_id, reason=reason)
    context = InterviewContext(
        role_title=request.role_title,
        company=request.company,
        message=str(request.message or ""),
    )
    reply = generate_scripted_reply(context, request.history)
    return PracticeReply(reply=reply, source="scripted", completed=False, display_text=reply)


async def generate_practice_reply(
    request: PracticeInterviewRequest,
    profile: Optional[CandidateProfile] = None,
    session_id: str = "",
) -> PracticeReply:
    """
    Produce the interviewer's next turn.

    Uses the live model when a key is configured, and drops to the scripted
    interview when there is no key, QA mode is on, or the account is out of
    quota. Other provider failures raise PracticeAgentError.
    """
    if QA_MODE:
        return _scripted(request, "qa_mode", session_id)
    if not OPENAI_API_KEY or client is None:
        return _scripted(request, "no_api_key", session_id)

    messages = _build_messages(request, profile)

    try:
        response = await _create_completion_with_retry(
            messages=messages,
            model=PRACTICE_MODEL,
            timeout_sec=PRACTICE_TIMEOUT_SEC,
            retries=PRACTICE_RETRIES,
        )
    except Exception as exc:
        if is_quota_error(exc):
            return _scripted(request, QUOTA_ERROR_CODE, session_id)
        logger.warning("practice agent error | model=%s err=%s", PRACTICE_MODEL, exc)
        raise PracticeAgentError(
            "There was a problem talking to the interview agent. Please check your OpenAI API key and try again."
        ) from exc

    choices = getattr(response, "choices", None) or []
    content = ""
    if choices:
        content = str(getattr(choices[0].message, "content", "") or "")
    if not content.strip():
        logger.warning("practice agent empty completion | model=%s", PRACTICE_MODEL)
        raise PracticeAgentError("The interview agent was unable to respond. Please try again.")

    display_text, completed = split_completion(content)
    log_event("practice_agent", "llm_reply", session_id, model=PRACTICE_MODEL, completed=completed, reply=content)
    return PracticeReply(reply=content, source="llm", completed=completed, display_text=display_text)
