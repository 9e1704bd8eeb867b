"""
FastAPI app: service status and topic-based quiz generation.
"""

import logging
import time
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.schemas import (
    ErrorResponse,
    QuizGenerateRequest,
    QuizGenerateResponse,
    StatusResponse,
)
from app.core.config import Settings, settings as default_settings
from app.core.errors import QuizGenerationError, TopicValidationError, status_for_error
from app.quiz.generator import QuizGenerator
from app.services.topic_validator import validate_topic

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


def create_app(settings: Settings | None = None, generator: QuizGenerator | None = None) -> FastAPI:
    settings = settings or default_settings
    generator = generator or QuizGenerator(settings)

    app = FastAPI(
        title="SSC Quiz Generator API",
        description="Topic in, validated multiple-choice quiz out (OpenRouter with model fallback)",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        # unknown path or unsupported method on a known path
        if exc.status_code in (404, 405):
            return _error(404, "Endpoint not found")
        return _error(exc.status_code, str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.info("Rejected request body: %s", exc.errors())
        return _error(400, "Invalid JSON body")

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return _error(500, "Internal server error")

    @app.get("/", response_model=StatusResponse, summary="Service status")
    def status() -> StatusResponse:
        return StatusResponse(
            service=settings.PROJECT_NAME,
            questions_per_request=settings.QUESTION_COUNT,
            timestamp=datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z"),
        )

    @app.post(
        "/generate",
        response_model=QuizGenerateResponse,
        responses={400: {"model": ErrorResponse}, 429: {"model": ErrorResponse},
                   500: {"model": ErrorResponse}, 504: {"model": ErrorResponse}},
        summary="Generate quiz",
        description="Validate the topic, then try each configured model in order until one returns a valid question set.",
    )
    async def generate_quiz(body: QuizGenerateRequest | None = None):
        started = time.perf_counter()
        logger.info("Generate quiz request")
        try:
            topic = validate_topic(body.topic if body else None, settings.TOPIC_MAX_LENGTH)
            logger.info("Topic accepted topic=%r", topic)
            result = await generator.generate(topic)
        except TopicValidationError as e:
            logger.info("Topic rejected reason=%s", e.reason.value)
            return _error(400, e.message)
        except QuizGenerationError as e:
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.error("Quiz generation failed: %s (%.0fms)", e.message, elapsed_ms)
            return _error(status_for_error(e), e.message or "Failed to generate questions")
        except Exception:
            logger.exception("Quiz generation crashed")
            return _error(500, "Internal server error")

        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "Quiz generated questions=%d model=%s (%.0fms)",
            len(result.questions),
            result.model,
            elapsed_ms,
        )
        return QuizGenerateResponse(topic=topic, total=len(result.questions), questions=result.questions)

    return app


app = create_app()
