from app.practice.models import InterviewContext, ScriptStage, StageDecision, Turn, TurnRole
from app.practice.scripted import CLOSING_MESSAGE, OPENING_PREFIX, generate_scripted_reply
from app.practice.stage import resolve_stage

__all__ = [
    "InterviewContext",
    "ScriptStage",
    "StageDecision",
    "Turn",
    "TurnRole",
    "CLOSING_MESSAGE",
    "OPENING_PREFIX",
    "generate_scripted_reply",
    "resolve_stage",
]
