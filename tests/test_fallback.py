"""
Model fallback loop with injected attempt callables (no network).
"""

import asyncio

import pytest

from app.core.errors import (
    AttemptTimeoutError,
    ExtractionError,
    SchemaError,
    SchemaViolation,
    TransportError,
)
from app.quiz.fallback import Exhausted, Succeeded, run_fallback
from app.schema.quiz import QuizQuestionItem
from tests.conftest import make_question_set


@pytest.fixture
def questions():
    return [QuizQuestionItem(**q) for q in make_question_set(5)]


def scripted(outcomes):
    """attempt(model) that raises or returns per model and records call order."""
    calls = []

    async def attempt(model):
        calls.append(model)
        outcome = outcomes[model]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    attempt.calls = calls
    return attempt


def test_first_model_success_stops_the_loop(questions):
    attempt = scripted({"m1": questions, "m2": questions})
    outcome = asyncio.run(run_fallback(["m1", "m2"], attempt))
    assert isinstance(outcome, Succeeded)
    assert outcome.model == "m1"
    assert outcome.failures == []
    assert attempt.calls == ["m1"]


def test_timeout_then_success_uses_second_model(questions):
    timeout = AttemptTimeoutError(5.0)
    attempt = scripted({"m1": timeout, "m2": questions})
    outcome = asyncio.run(run_fallback(["m1", "m2"], attempt))
    assert isinstance(outcome, Succeeded)
    assert outcome.model == "m2"
    assert outcome.questions == questions
    assert [f.model for f in outcome.failures] == ["m1"]
    assert outcome.failures[0].error is timeout


def test_all_models_malformed_reports_last_error():
    first = ExtractionError("Invalid JSON from AI")
    last = ExtractionError("Invalid JSON from AI")
    attempt = scripted({"m1": first, "m2": last})
    outcome = asyncio.run(run_fallback(["m1", "m2"], attempt))
    assert isinstance(outcome, Exhausted)
    assert outcome.last_error is last
    assert outcome.last_error.message == "Invalid JSON from AI"
    assert len(outcome.failures) == 2


def test_every_failure_kind_advances_to_next_model(questions):
    attempt = scripted(
        {
            "timeout": AttemptTimeoutError(5.0),
            "status": TransportError("API error 503", status_code=503),
            "empty": TransportError("Empty response"),
            "json": ExtractionError("Invalid JSON from AI"),
            "schema": SchemaError(SchemaViolation.WRONG_COUNT, "Expected 5 questions, got 3"),
            "good": questions,
        }
    )
    models = ["timeout", "status", "empty", "json", "schema", "good"]
    outcome = asyncio.run(run_fallback(models, attempt))
    assert isinstance(outcome, Succeeded)
    assert outcome.model == "good"
    assert attempt.calls == models


def test_mixed_failures_surface_the_last_one():
    attempt = scripted(
        {
            "m1": TransportError("API error 500", status_code=500),
            "m2": AttemptTimeoutError(5.0),
        }
    )
    outcome = asyncio.run(run_fallback(["m1", "m2"], attempt))
    assert isinstance(outcome, Exhausted)
    assert isinstance(outcome.last_error, AttemptTimeoutError)
    assert outcome.last_error.message == "Request timeout (5s)"


def test_empty_model_list_is_exhausted():
    outcome = asyncio.run(run_fallback([], scripted({})))
    assert isinstance(outcome, Exhausted)
    assert outcome.last_error.message == "All AI models failed. Please try again."


def test_programming_errors_propagate():
    attempt = scripted({"m1": KeyError("choices"), "m2": []})
    with pytest.raises(KeyError):
        asyncio.run(run_fallback(["m1", "m2"], attempt))
