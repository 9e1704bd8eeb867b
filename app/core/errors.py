"""
Error taxonomy for quiz generation.

Every failure carries its kind as a type, so the HTTP layer maps errors to
status codes without inspecting messages.
"""

from enum import Enum


class QuizGenerationError(Exception):
    """Base class. `message` is safe to return to API callers."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class TopicRejection(str, Enum):
    MISSING_OR_WRONG_TYPE = "missing_or_wrong_type"
    TOO_SHORT = "too_short"
    TOO_LONG = "too_long"
    INVALID_CHARACTERS = "invalid_characters"


class TopicValidationError(QuizGenerationError):
    def __init__(self, reason: TopicRejection, message: str) -> None:
        super().__init__(message)
        self.reason = reason


class ExtractionError(QuizGenerationError):
    """No parseable JSON in the model output."""


class SchemaViolation(str, Enum):
    NOT_AN_ARRAY = "not_an_array"
    WRONG_COUNT = "wrong_count"
    INVALID_QUESTION = "invalid_question"
    INVALID_OPTIONS = "invalid_options"
    INVALID_CORRECT_INDEX = "invalid_correct_index"
    INVALID_EXPLANATION = "invalid_explanation"


class SchemaError(QuizGenerationError):
    """Parsed JSON does not match the question-set schema. `index` is 0-based."""

    def __init__(self, kind: SchemaViolation, message: str, index: int | None = None) -> None:
        super().__init__(message)
        self.kind = kind
        self.index = index


class TransportError(QuizGenerationError):
    """Non-2xx response, connection failure, or empty content from the API."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class RateLimitError(TransportError):
    def __init__(self, message: str = "API error 429") -> None:
        super().__init__(message, status_code=429)


class AttemptTimeoutError(QuizGenerationError):
    def __init__(self, timeout: float) -> None:
        super().__init__(f"Request timeout ({timeout:g}s)")
        self.timeout = timeout


class ConfigurationError(QuizGenerationError):
    pass


def status_for_error(error: QuizGenerationError) -> int:
    """HTTP status for a generation failure."""
    if isinstance(error, TopicValidationError):
        return 400
    if isinstance(error, AttemptTimeoutError):
        return 504
    if isinstance(error, RateLimitError):
        return 429
    return 500
