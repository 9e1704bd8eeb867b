"""
API request/response schemas.
"""

from typing import Any

from pydantic import BaseModel, Field

from app.schema.quiz import QuizQuestionItem


class QuizGenerateRequest(BaseModel):
    """Quiz generation request. `topic` is checked by the topic validator, not here."""

    topic: Any = Field(None, description="Quiz topic, 3~200 characters")


class QuizGenerateResponse(BaseModel):
    success: bool = True
    topic: str = Field(..., description="Normalized (trimmed) topic")
    total: int = Field(..., description="Number of questions")
    questions: list[QuizQuestionItem]


class ErrorResponse(BaseModel):
    success: bool = False
    error: str


class StatusResponse(BaseModel):
    """Health/status body for GET /."""

    status: str = "online"
    service: str
    questions_per_request: int
    timestamp: str = Field(..., description="ISO-8601 UTC")
