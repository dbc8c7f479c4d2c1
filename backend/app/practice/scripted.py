from typing import Any, Iterable, Optional

from app.practice.acknowledgments import build_acknowledgment
from app.practice.models import InterviewContext, ScriptStage, coerce_history
from app.practice.questions import render_question
from app.practice.stage import resolve_stage

OPENING_PREFIX = "Great, let us get started. "

CLOSING_MESSAGE = (
    "Thanks for walking through those questions with me. "
    "That concludes this practice interview for now. "
    "If you would like to keep practicing, you can start a new interview when you are ready."
)


def generate_scripted_reply(context: InterviewContext, history: Optional[Iterable[Any]] = None) -> str:
    """
    Deterministic stand-in for the live interviewer.

    Pure function of (context, history): no state is kept between calls and
    neither argument is modified.
    """
    turns = coerce_history(history)
    message = str(context.message or "").strip()
    decision = resolve_stage(turns, message)

    if decision.stage == ScriptStage.BEGINNING:
        return OPENING_PREFIX + render_question(0, context.role_title, context.company)

    if decision.stage == ScriptStage.EXHAUSTED:
        return CLOSING_MESSAGE

    question = render_question(decision.question_index, context.role_title, context.company)
    ack = build_acknowledgment(message, decision.assistant_turns)
    return f"{ack} {question}"
