"""
Question-set validation: exact count, then each record in order.
Fail-fast: only the first violation is reported.
"""

import logging
from typing import Any

from app.core.errors import SchemaError, SchemaViolation
from app.schema.quiz import QuizQuestionItem

logger = logging.getLogger(__name__)

OPTION_COUNT = 4


def _is_non_empty_str(value: Any) -> bool:
    return isinstance(value, str) and bool(value)


def _valid_options(value: Any) -> bool:
    return (
        isinstance(value, list)
        and len(value) == OPTION_COUNT
        and all(isinstance(opt, str) for opt in value)
    )


def _valid_correct(value: Any) -> bool:
    # bool is an int subclass; True/False are not indexes
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return 0 <= value < OPTION_COUNT


def validate_question(item: Any, index: int) -> QuizQuestionItem:
    """Check one record. `index` is 0-based; messages are 1-based."""
    label = f"Question {index + 1}"
    if not isinstance(item, dict) or not _is_non_empty_str(item.get("question")):
        raise SchemaError(SchemaViolation.INVALID_QUESTION, f"{label}: Invalid question", index)
    if not _valid_options(item.get("options")):
        raise SchemaError(SchemaViolation.INVALID_OPTIONS, f"{label}: Must have {OPTION_COUNT} options", index)
    if not _valid_correct(item.get("correct")):
        raise SchemaError(SchemaViolation.INVALID_CORRECT_INDEX, f"{label}: Invalid correct index", index)
    if not _is_non_empty_str(item.get("explanation")):
        raise SchemaError(SchemaViolation.INVALID_EXPLANATION, f"{label}: Invalid explanation", index)
    return QuizQuestionItem(
        question=item["question"],
        options=item["options"],
        correct=item["correct"],
        explanation=item["explanation"],
    )


def validate_questions(parsed: Any, expected_count: int = 5) -> list[QuizQuestionItem]:
    """Validate a parsed question set and return it as QuizQuestionItem models."""
    if not isinstance(parsed, list):
        raise SchemaError(SchemaViolation.NOT_AN_ARRAY, "Questions must be an array")
    if len(parsed) != expected_count:
        raise SchemaError(
            SchemaViolation.WRONG_COUNT,
            f"Expected {expected_count} questions, got {len(parsed)}",
        )
    questions = [validate_question(item, i) for i, item in enumerate(parsed)]
    logger.debug("Question set valid (%d questions)", len(questions))
    return questions
