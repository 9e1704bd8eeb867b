"""
Quiz question schema.
- question, exactly 4 options, correct option index (0~3), explanation.
"""

from pydantic import BaseModel, Field


class QuizQuestionItem(BaseModel):
    """One question: text, 4 options, correct option index (0~3), explanation."""

    question: str = Field(..., min_length=1, description="Question text")
    options: list[str] = Field(..., min_length=4, max_length=4, description="Options in display order")
    correct: int = Field(..., ge=0, le=3, description="Index of the correct option (0~3)")
    explanation: str = Field(..., min_length=1, description="Brief explanation of the answer")


class QuizResult(BaseModel):
    """Validated question set plus the model that produced it."""

    questions: list[QuizQuestionItem]
    model: str
    failed_models: list[str] = Field(default_factory=list, description="Models tried before success, in order")
