"""
Shared fixtures: test settings, sample question sets, fake OpenRouter client.
"""

import json
from types import SimpleNamespace

import httpx
import pytest

from app.core.config import Settings

OPENROUTER_URL = "https://openrouter.ai/api/v1/chat/completions"


def make_question(n: int = 1, **overrides) -> dict:
    item = {
        "question": f"Question {n}: Who founded the Maurya Empire?",
        "options": ["Ashoka", "Chandragupta Maurya", "Bindusara", "Harsha"],
        "correct": 1,
        "explanation": "Chandragupta Maurya founded the empire around 322 BCE.",
    }
    item.update(overrides)
    return item


def make_question_set(count: int = 5) -> list[dict]:
    return [make_question(i + 1) for i in range(count)]


def chat_response(content):
    """Shape of an openai chat completion as far as the generator reads it."""
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


def api_request() -> httpx.Request:
    return httpx.Request("POST", OPENROUTER_URL)


class FakeCompletions:
    """`chat.completions.create` stand-in. Outcomes are keyed by model name; exceptions are raised."""

    def __init__(self, outcomes: dict) -> None:
        self.outcomes = outcomes
        self.calls: list[dict] = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        outcome = self.outcomes[kwargs["model"]]
        if isinstance(outcome, Exception):
            raise outcome
        return chat_response(outcome)


class FakeOpenRouterClient:
    def __init__(self, outcomes: dict) -> None:
        self.completions = FakeCompletions(outcomes)
        self.chat = SimpleNamespace(completions=self.completions)

    @property
    def called_models(self) -> list[str]:
        return [c["model"] for c in self.completions.calls]


@pytest.fixture
def test_settings():
    return Settings(
        _env_file=None,
        OPENROUTER_API_KEY="test-key",
        OPENROUTER_MODELS=["m1", "m2"],
        REQUEST_TIMEOUT=5.0,
        QUESTION_COUNT=5,
        TOPIC_MAX_LENGTH=200,
    )


@pytest.fixture
def valid_questions():
    return make_question_set(5)


@pytest.fixture
def valid_questions_json(valid_questions):
    return json.dumps(valid_questions)
