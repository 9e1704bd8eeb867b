"""
Topic-based quiz generation through OpenRouter with model fallback.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx
import openai
from openai import AsyncOpenAI

from app.core.config import Settings, settings as default_settings
from app.core.errors import (
    AttemptTimeoutError,
    ConfigurationError,
    RateLimitError,
    TransportError,
)
from app.quiz.fallback import Exhausted, run_fallback
from app.schema.quiz import QuizQuestionItem, QuizResult
from app.services.extractors import extract_json
from app.services.quiz_validator import validate_questions

logger = logging.getLogger(__name__)


def build_prompt(topic: str, count: int) -> str:
    return f"""
Generate EXACTLY {count} SSC exam multiple choice questions.

Topic: {topic}

Rules:
- SSC CGL/CHSL/GD difficulty level
- Factual and exam-oriented
- Each question has exactly 4 options
- One correct answer (index 0-3)
- Brief explanation (1-2 sentences)

Return ONLY a JSON array in this exact format:
[
  {{
    "question": "Question text here?",
    "options": ["Option A", "Option B", "Option C", "Option D"],
    "correct": 0,
    "explanation": "Brief explanation."
  }}
]

Generate {count} questions now. Return only the JSON array, no other text.
""".strip()


class QuizGenerator:
    def __init__(
        self,
        settings: Settings | None = None,
        client: Any | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.settings = settings or default_settings
        self._client = client
        self._http_client = http_client

    @property
    def client(self) -> Any:
        if self._client is None:
            self._client = AsyncOpenAI(
                api_key=self.settings.OPENROUTER_API_KEY,
                base_url=self.settings.OPENROUTER_BASE_URL,
                timeout=self.settings.REQUEST_TIMEOUT,
                max_retries=0,
                default_headers={
                    "HTTP-Referer": self.settings.OPENROUTER_HTTP_REFERER,
                    "X-Title": self.settings.OPENROUTER_TITLE,
                },
                http_client=self._http_client,
            )
        return self._client

    async def generate(self, topic: str, models: list[str] | None = None) -> QuizResult:
        """
        Generate a validated question set for an already-validated topic.
        Raises ConfigurationError before any call when the API key is missing,
        otherwise the last model's error when every model fails.
        """
        if not self.settings.api_key_configured:
            raise ConfigurationError("OPENROUTER_API_KEY not configured")

        prompt = build_prompt(topic, self.settings.QUESTION_COUNT)

        async def attempt(model: str) -> list[QuizQuestionItem]:
            content = await self._call_llm(model, prompt)
            parsed = extract_json(content)
            return validate_questions(parsed, self.settings.QUESTION_COUNT)

        outcome = await run_fallback(models or self.settings.OPENROUTER_MODELS, attempt)
        if isinstance(outcome, Exhausted):
            logger.error(
                "All models failed topic=%r attempts=%d last_error=%s",
                topic,
                len(outcome.failures),
                outcome.last_error.message,
            )
            raise outcome.last_error
        return QuizResult(
            questions=outcome.questions,
            model=outcome.model,
            failed_models=[f.model for f in outcome.failures],
        )

    async def _call_llm(self, model: str, prompt: str) -> str:
        # httpx timeouts are per read; the deadline bounds the whole call
        try:
            response = await asyncio.wait_for(
                self.client.chat.completions.create(
                    model=model,
                    messages=[{"role": "user", "content": prompt}],
                    temperature=self.settings.OPENROUTER_TEMPERATURE,
                    max_tokens=self.settings.OPENROUTER_MAX_TOKENS,
                ),
                timeout=self.settings.REQUEST_TIMEOUT,
            )
        except (asyncio.TimeoutError, openai.APITimeoutError) as exc:
            raise AttemptTimeoutError(self.settings.REQUEST_TIMEOUT) from exc
        except openai.RateLimitError as exc:
            raise RateLimitError() from exc
        except openai.APIStatusError as exc:
            raise TransportError(f"API error {exc.status_code}", status_code=exc.status_code) from exc
        except openai.APIConnectionError as exc:
            raise TransportError(f"Connection error: {exc}") from exc
        except (openai.APIError, ValueError) as exc:
            # 200 with a truncated or non-JSON body
            raise TransportError("Invalid response from API") from exc

        choices = getattr(response, "choices", None) or []
        message = getattr(choices[0], "message", None) if choices else None
        content = getattr(message, "content", None)
        if not content:
            raise TransportError("Empty response")
        return content
