from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class HistoryItem(BaseModel):
    role: str
    content: str = ""


class PracticeInterviewRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    role_id: str | None = Field(default=None, alias="roleId")
    role_title: str | None = Field(default=None, alias="roleTitle")
    company: str | None = None
    message: str | None = None
    history: list[HistoryItem] = Field(default_factory=list)


class PracticeReply(BaseModel):
    reply: str
    source: Literal["llm", "scripted"]
    completed: bool = False
    display_text: str = ""


class CandidateProfile(BaseModel):
    full_name: str
    headline: str | None = None
    current_role: str | None = None
    company: str | None = None
    years_experience: int | None = None
    location: str | None = None
    summary: str | None = None
    extra_context: str | None = None


class ProfileSuggestions(BaseModel):
    full_name: str | None = None
    headline: str | None = None
    current_role: str | None = None
    company: str | None = None
    years_experience: int | None = None
    location: str | None = None
    summary: str | None = None
    extra_context: str = ""
