import sys
from pathlib import Path

import pytest
from openai import AsyncOpenAI


ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture(autouse=True)
def _test_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("ENV", "development")
    monkeypatch.setenv("QA_MODE", "false")


@pytest.fixture
def live_agent(monkeypatch: pytest.MonkeyPatch):
    from app.practice import agent

    monkeypatch.setattr(agent, "QA_MODE", False)
    monkeypatch.setattr(agent, "OPENAI_API_KEY", "test-key")
    monkeypatch.setattr(agent, "client", AsyncOpenAI(api_key="test-key"))
    monkeypatch.setattr(agent, "PRACTICE_RETRIES", 0)
    return agent


@pytest.fixture
def offline_agent(monkeypatch: pytest.MonkeyPatch):
    from app.practice import agent

    monkeypatch.setattr(agent, "QA_MODE", False)
    monkeypatch.setattr(agent, "OPENAI_API_KEY", "")
    monkeypatch.setattr(agent, "client", None)
    return agent
