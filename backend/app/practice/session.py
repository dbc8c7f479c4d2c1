import threading
import time
import uuid

from app.practice.models import Turn, TurnRole
from app.practice.prompts import STATIC_GREETING
from app.schemas import CandidateProfile

_lock = threading.Lock()
sessions: dict[str, dict] = {}


class PracticeSessionNotFound(KeyError):
    pass


def create_session(
    user_id: str,
    role_title: str | None,
    company: str | None = None,
    profile: CandidateProfile | None = None,
) -> str:
    session_id = str(uuid.uuid4())
    now_ts = time.time()

    with _lock:
        sessions[session_id] = {
            "user_id": user_id,
            "role_title": role_title,
            "company": company,
            "profile": profile,
            # The client shows this greeting before any request is made.
            "history": [Turn(role=TurnRole.ASSISTANT, content=STATIC_GREETING)],
            "notes": None,
            "completed": False,
            "closed": False,
            "created_at": now_ts,
            "updated_at": now_ts,
        }

    return session_id


def get_session(session_id: str) -> dict | None:
    with _lock:
        return sessions.get(session_id)


def require_session(session_id: str, user_id: str) -> dict:
    session = get_session(session_id)
    if not session:
        raise PracticeSessionNotFound(session_id)
    if session.get("user_id") != user_id:
        raise PermissionError("Forbidden")
    return session


def get_history(session_id: str) -> list[Turn]:
    with _lock:
        session = sessions.get(session_id)
        if not session:
            raise PracticeSessionNotFound(session_id)
        return list(session["history"])


def append_turn(session_id: str, role: TurnRole, content: str) -> Turn:
    turn = Turn(role=role, content=str(content or ""))
    with _lock:
        session = sessions.get(session_id)
        if not session:
            raise PracticeSessionNotFound(session_id)
        session["history"] = [*session["history"], turn]
        session["updated_at"] = time.time()
    return turn


def mark_completed(session_id: str, notes: str | None) -> None:
    with _lock:
        session = sessions[session_id]
        session["completed"] = True
        session["notes"] = notes
        session["updated_at"] = time.time()


def close_session(session_id: str) -> None:
    with _lock:
        sessions[session_id]["closed"] = True


def cleanup_inactive(ttl_sec: float) -> int:
    cutoff = time.time() - max(30.0, float(ttl_sec))
    with _lock:
        stale = [sid for sid, item in sessions.items() if float(item.get("updated_at") or 0.0) < cutoff]
        for sid in stale:
            sessions.pop(sid, None)
    return len(stale)
