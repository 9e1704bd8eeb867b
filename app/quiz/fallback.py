"""
Model fallback: try each model in order until one yields a valid question set.

The loop knows nothing about HTTP. Callers inject `attempt(model)`, which
returns validated questions or raises QuizGenerationError; any such error
moves on to the next model.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Sequence

from app.core.errors import QuizGenerationError, TransportError
from app.schema.quiz import QuizQuestionItem

logger = logging.getLogger(__name__)

Attempt = Callable[[str], Awaitable[list[QuizQuestionItem]]]


@dataclass(frozen=True)
class AttemptFailure:
    model: str
    error: QuizGenerationError


@dataclass(frozen=True)
class Succeeded:
    questions: list[QuizQuestionItem]
    model: str
    failures: list[AttemptFailure] = field(default_factory=list)


@dataclass(frozen=True)
class Exhausted:
    last_error: QuizGenerationError
    failures: list[AttemptFailure] = field(default_factory=list)


FallbackOutcome = Succeeded | Exhausted


async def run_fallback(models: Sequence[str], attempt: Attempt) -> FallbackOutcome:
    """Await `attempt` per model, one at a time; stop at the first success."""
    failures: list[AttemptFailure] = []
    total = len(models)
    for position, model in enumerate(models, 1):
        logger.info("Trying model=%s (%d/%d)", model, position, total)
        try:
            questions = await attempt(model)
        except QuizGenerationError as exc:
            logger.warning("Model failed model=%s reason=%s", model, exc.message)
            failures.append(AttemptFailure(model=model, error=exc))
            continue
        logger.info("Model succeeded model=%s questions=%d", model, len(questions))
        return Succeeded(questions=questions, model=model, failures=failures)

    if failures:
        return Exhausted(last_error=failures[-1].error, failures=failures)
    return Exhausted(last_error=TransportError("All AI models failed. Please try again."))
