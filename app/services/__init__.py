from app.services.extractors import extract_json
from app.services.quiz_validator import validate_questions
from app.services.topic_validator import validate_topic

__all__ = [
    "extract_json",
    "validate_questions",
    "validate_topic",
]
