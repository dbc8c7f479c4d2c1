import pytest

from app.practice.prompts import COMPLETION_TOKEN
from app.practice.scripted import OPENING_PREFIX
from app.schemas import CandidateProfile, PracticeInterviewRequest


class _Msg:
    def __init__(self, content):
        self.content = content


class _Choice:
    def __init__(self, content):
        self.message = _Msg(content)


class _Response:
    def __init__(self, content):
        self.choices = [_Choice(content)]


class _QuotaError(Exception):
    code = "insufficient_quota"


def _request(**overrides) -> PracticeInterviewRequest:
    payload = {
        "roleTitle": "Backend Engineer",
        "company": "Acme",
        "message": "",
        "history": [{"role": "assistant", "content": "Hi, I am your AI interviewer."}],
    }
    payload.update(overrides)
    return PracticeInterviewRequest.model_validate(payload)


@pytest.mark.asyncio
async def test_missing_key_uses_scripted_interview(offline_agent):
    assert offline_agent.client is None

    result = await offline_agent.generate_practice_reply(_request())

    assert result.source == "scripted"
    assert result.reply.startswith(OPENING_PREFIX)
    assert "Backend Engineer at Acme" in result.reply


@pytest.mark.asyncio
async def test_qa_mode_forces_scripted_interview(live_agent, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(live_agent, "QA_MODE", True)

    result = await live_agent.generate_practice_reply(_request())

    assert result.source == "scripted"


@pytest.mark.asyncio
async def test_live_reply_forwards_prompt_history_and_message(live_agent, monkeypatch: pytest.MonkeyPatch):
    captured = {}

    async def _fake_create(*args, **kwargs):
        captured.update(kwargs)
        return _Response("Nice to meet you. What drew you to backend work?")

    monkeypatch.setattr(live_agent.client.chat.completions, "create", _fake_create)
    monkeypatch.setattr(live_agent, "PRACTICE_HISTORY_WINDOW", 2)

    history = [{"role": "assistant" if idx % 2 == 0 else "user", "content": f"turn {idx}"} for idx in range(5)]
    profile = CandidateProfile(full_name="Ada Lovelace", current_role="Engineer", company="Analytical Co")

    result = await live_agent.generate_practice_reply(
        _request(message="  I build APIs.  ", history=history),
        profile=profile,
    )

    assert result.source == "llm"
    assert result.completed is False
    messages = captured["messages"]
    assert messages[0]["role"] == "system"
    assert "Role title: Backend Engineer" in messages[0]["content"]
    assert "Current role: Engineer at Analytical Co" in messages[0]["content"]
    assert [m["content"] for m in messages[1:3]] == ["turn 3", "turn 4"]
    assert messages[-1] == {"role": "user", "content": "I build APIs."}


@pytest.mark.asyncio
async def test_completion_token_is_detected_and_stripped(live_agent, monkeypatch: pytest.MonkeyPatch):
    async def _fake_create(*args, **kwargs):
        return _Response(f"Thanks for your time.\n\nFeedback summary:\n- Solid.\n{COMPLETION_TOKEN}\n")

    monkeypatch.setattr(live_agent.client.chat.completions, "create", _fake_create)

    result = await live_agent.generate_practice_reply(_request(message="That is all."))

    assert result.completed is True
    assert COMPLETION_TOKEN in result.reply
    assert COMPLETION_TOKEN not in result.display_text
    assert result.display_text.endswith("- Solid.")


@pytest.mark.asyncio
async def test_quota_error_falls_back_to_script(live_agent, monkeypatch: pytest.MonkeyPatch):
    calls = []

    async def _quota(*args, **kwargs):
        calls.append(1)
        raise _QuotaError("You exceeded your current quota")

    monkeypatch.setattr(live_agent.client.chat.completions, "create", _quota)
    monkeypatch.setattr(live_agent, "PRACTICE_RETRIES", 3)

    result = await live_agent.generate_practice_reply(_request())

    assert result.source == "scripted"
    assert len(calls) == 1


def test_quota_message_without_code_is_recognised(live_agent):
    assert live_agent.is_quota_error(RuntimeError("You have exceeded your current quota, please check your plan"))
    assert not live_agent.is_quota_error(RuntimeError("invalid api key"))


@pytest.mark.asyncio
async def test_other_failures_raise_agent_error(live_agent, monkeypatch: pytest.MonkeyPatch):
    async def _boom(*args, **kwargs):
        raise RuntimeError("invalid api key")

    monkeypatch.setattr(live_agent.client.chat.completions, "create", _boom)

    with pytest.raises(live_agent.PracticeAgentError) as info:
        await live_agent.generate_practice_reply(_request(message="hi"))

    assert info.value.status_code == 500


@pytest.mark.asyncio
async def test_empty_completion_raises_agent_error(live_agent, monkeypatch: pytest.MonkeyPatch):
    async def _empty(*args, **kwargs):
        return _Response("   ")

    monkeypatch.setattr(live_agent.client.chat.completions, "create", _empty)

    with pytest.raises(live_agent.PracticeAgentError):
        await live_agent.generate_practice_reply(_request(message="hi"))
