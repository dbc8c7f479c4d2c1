from app.practice.agent import generate_practice_reply
from app.practice.models import TurnRole
from app.practice.prompts import build_kickoff_message, extract_feedback_notes
from app.practice.scripted import CLOSING_MESSAGE
from app.practice.session import (
    append_turn,
    cleanup_inactive,
    close_session,
    create_session,
    get_history,
    mark_completed,
    require_session,
)
from app.schemas import CandidateProfile, PracticeInterviewRequest
from core.config import PRACTICE_SESSION_TTL_SEC
from core.logger import log_event


class PracticeInterviewEngine:
    """
    Caller side of the practice interview: owns each session's transcript,
    forwards it to the agent on every turn and records the agent's reply.
    """

    async def start(
        self,
        user_id: str,
        role_title: str | None,
        company: str | None = None,
        profile: CandidateProfile | None = None,
    ) -> tuple[str, dict]:
        removed = cleanup_inactive(PRACTICE_SESSION_TTL_SEC)
        if removed:
            log_event("practice_engine", "sessions_expired", "", removed=removed)

        session_id = create_session(user_id, role_title, company=company, profile=profile)
        log_event("practice_engine", "session_started", session_id, user_id=user_id)

        # The kickoff prompt is sent to the agent but never shown in the transcript.
        result = await self._exchange(session_id, user_id, build_kickoff_message(role_title, company))
        return session_id, result

    async def submit_answer(self, session_id: str, user_id: str, answer: str) -> dict:
        session = require_session(session_id, user_id)
        if session.get("closed"):
            raise ValueError("Practice interview already finished")

        trimmed = str(answer or "").strip()
        if not trimmed:
            raise ValueError("Answer must not be empty")

        append_turn(session_id, TurnRole.USER, trimmed)
        return await self._exchange(session_id, user_id, trimmed)

    async def _exchange(self, session_id: str, user_id: str, message: str) -> dict:
        session = require_session(session_id, user_id)
        request = PracticeInterviewRequest(
            role_title=session.get("role_title"),
            company=session.get("company"),
            message=message,
            history=[turn.to_dict() for turn in get_history(session_id)],
        )

        result = await generate_practice_reply(request, profile=session.get("profile"), session_id=session_id)
        append_turn(session_id, TurnRole.ASSISTANT, result.display_text)

        notes = None
        done = result.completed or (result.source == "scripted" and result.reply == CLOSING_MESSAGE)
        if done:
            if result.completed:
                notes = extract_feedback_notes(result.display_text)
            mark_completed(session_id, notes)
            close_session(session_id)
            log_event("practice_engine", "session_completed", session_id, source=result.source, notes=notes)

        return {
            "done": done,
            "reply": result.display_text,
            "source": result.source,
            "notes": notes,
        }
