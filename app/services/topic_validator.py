"""
Topic validation: trim, length bounds, allow-listed characters only.
"""

import re
from typing import Any

from app.core.errors import TopicRejection, TopicValidationError

MIN_TOPIC_LENGTH = 3
DEFAULT_MAX_TOPIC_LENGTH = 200

# ECMAScript whitespace. Python's str.strip() and \s also cover \x1c-\x1f and \x85.
_WHITESPACE = (
    " \t\n\v\f\r\u00a0\u1680"
    + "".join(chr(c) for c in range(0x2000, 0x200B))
    + "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

_TOPIC_PATTERN = re.compile("[a-zA-Z0-9" + re.escape(_WHITESPACE) + r"\-,.'&()]+")


def validate_topic(value: Any, max_length: int = DEFAULT_MAX_TOPIC_LENGTH) -> str:
    """Return the trimmed topic or raise TopicValidationError."""
    if not value or not isinstance(value, str):
        raise TopicValidationError(
            TopicRejection.MISSING_OR_WRONG_TYPE,
            "Topic is required and must be a string",
        )

    topic = value.strip(_WHITESPACE)
    if len(topic) < MIN_TOPIC_LENGTH:
        raise TopicValidationError(
            TopicRejection.TOO_SHORT,
            f"Topic must be at least {MIN_TOPIC_LENGTH} characters long",
        )
    if len(topic) > max_length:
        raise TopicValidationError(
            TopicRejection.TOO_LONG,
            f"Topic must be less than {max_length} characters",
        )
    if not _TOPIC_PATTERN.fullmatch(topic):
        raise TopicValidationError(
            TopicRejection.INVALID_CHARACTERS,
            "Topic contains invalid characters",
        )
    return topic
