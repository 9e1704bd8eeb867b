"""
JSON extraction from raw model output.
Order: whole text → fenced code block → first greedy [...] / {...} span.
"""

import json
import logging
import re
from typing import Any

from app.core.errors import ExtractionError

logger = logging.getLogger(__name__)

_FENCED_BLOCK = re.compile(r"```(?:json)?\s*([\[{][\s\S]*?[\]}])\s*```", re.IGNORECASE)
_ARRAY_SPAN = re.compile(r"(\[[\s\S]*\])")
_OBJECT_SPAN = re.compile(r"(\{[\s\S]*\})")


def _try_parse(text: str) -> tuple[bool, Any]:
    try:
        return True, json.loads(text)
    except ValueError:
        return False, None


def extract_json(text: Any) -> Any:
    """Parse JSON out of model output. Raises ExtractionError when nothing parses."""
    if not isinstance(text, str):
        raise ExtractionError("Invalid JSON from AI")

    ok, value = _try_parse(text)
    if ok:
        return value

    fenced = _FENCED_BLOCK.search(text)
    if fenced:
        ok, value = _try_parse(fenced.group(1))
        if ok:
            logger.debug("JSON extracted from fenced block")
            return value

    # Only the single greedy match per pattern is tried.
    for pattern in (_ARRAY_SPAN, _OBJECT_SPAN):
        match = pattern.search(text)
        if match:
            ok, value = _try_parse(match.group(1))
            if ok:
                logger.debug("JSON extracted from bracketed span")
                return value

    raise ExtractionError("Invalid JSON from AI")
