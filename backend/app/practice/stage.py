from typing import Iterable

from app.practice.models import ScriptStage, StageDecision, Turn, TurnRole
from app.practice.questions import QUESTION_COUNT

KICKOFF_PHRASE = "start a new practice interview now"


def count_assistant_turns(history: Iterable[Turn]) -> int:
    return sum(1 for turn in history if turn.role == TurnRole.ASSISTANT)


def is_kickoff(message: str) -> bool:
    return KICKOFF_PHRASE in str(message or "").strip().lower()


def resolve_stage(history: Iterable[Turn], message: str) -> StageDecision:
    """
    Work out where the scripted interview is from the transcript alone.

    The greeting the client renders before the first request already counts
    as one assistant turn, so the question index trails the count by one.
    """
    assistant_turns = count_assistant_turns(history)
    safe_message = str(message or "").strip()

    if is_kickoff(safe_message) or assistant_turns <= 1 or not safe_message:
        return StageDecision(stage=ScriptStage.BEGINNING, question_index=0, assistant_turns=assistant_turns)

    stage = max(0, assistant_turns - 1)
    if stage >= QUESTION_COUNT:
        return StageDecision(stage=ScriptStage.EXHAUSTED, question_index=None, assistant_turns=assistant_turns)

    return StageDecision(stage=ScriptStage.IN_PROGRESS, question_index=stage, assistant_turns=assistant_turns)
