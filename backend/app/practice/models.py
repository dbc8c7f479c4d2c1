from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Optional


class TurnRole(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


class ScriptStage(str, Enum):
    BEGINNING = "beginning"
    IN_PROGRESS = "in_progress"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class Turn:
    """
    One message in the practice transcript.
    The caller owns the ordered sequence and appends to it.
    """
    role: TurnRole
    content: str = ""

    def to_dict(self) -> dict:
        return {"role": self.role.value, "content": self.content}


@dataclass(frozen=True)
class InterviewContext:
    role_title: Optional[str] = None
    company: Optional[str] = None
    message: str = ""


@dataclass(frozen=True)
class StageDecision:
    stage: ScriptStage
    question_index: Optional[int]
    assistant_turns: int


def coerce_turn(item: Any) -> Optional[Turn]:
    if isinstance(item, Turn):
        return item

    if isinstance(item, dict):
        raw_role = item.get("role")
        raw_content = item.get("content")
    else:
        raw_role = getattr(item, "role", None)
        raw_content = getattr(item, "content", None)

    if isinstance(raw_role, Enum):
        raw_role = raw_role.value
    role = str(raw_role or "")
    if role not in {TurnRole.USER.value, TurnRole.ASSISTANT.value}:
        return None

    return Turn(role=TurnRole(role), content=str(raw_content or ""))


def coerce_history(items: Optional[Iterable[Any]]) -> list[Turn]:
    """
    Normalize caller-supplied history (Turn objects, dicts or pydantic
    models) into a fresh list of Turn. Roles must be exactly "user" or
    "assistant"; anything else is dropped.
    """
    turns: list[Turn] = []
    for item in items or []:
        turn = coerce_turn(item)
        if turn is not None:
            turns.append(turn)
    return turns
