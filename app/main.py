"""
Quiz generation CLI.
Run: python -m app.main --topic "Indian History" --pretty
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from app.core.config import settings
from app.core.errors import QuizGenerationError, TopicValidationError
from app.quiz.generator import QuizGenerator
from app.services.topic_validator import validate_topic


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate an SSC multiple-choice quiz for a topic.")
    parser.add_argument("-t", "--topic", required=True, help="Quiz topic (3~200 characters)")
    parser.add_argument("--output", help="Path to write the result JSON (stdout if omitted)")
    parser.add_argument(
        "--count",
        type=int,
        help=f"Number of questions (default: {settings.QUESTION_COUNT})",
    )
    parser.add_argument(
        "--model",
        action="append",
        dest="models",
        help="Model to try; repeat to set the fallback order (default: OPENROUTER_MODELS)",
    )
    parser.add_argument("--pretty", action="store_true", help="Indent the JSON output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log each model attempt to stderr")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )

    cfg = settings
    if args.count is not None:
        if args.count < 1:
            parser.error("--count must be at least 1")
        cfg = settings.model_copy(update={"QUESTION_COUNT": args.count})

    try:
        topic = validate_topic(args.topic, cfg.TOPIC_MAX_LENGTH)
    except TopicValidationError as exc:
        print(f"Invalid topic: {exc.message}", file=sys.stderr)
        return 1

    generator = QuizGenerator(cfg)
    try:
        result = asyncio.run(generator.generate(topic, models=args.models))
    except QuizGenerationError as exc:
        print(f"Quiz generation failed: {exc.message}", file=sys.stderr)
        return 2

    output = json.dumps(
        {
            "topic": topic,
            "total": len(result.questions),
            "model": result.model,
            "questions": [q.model_dump() for q in result.questions],
        },
        ensure_ascii=False,
        indent=2 if args.pretty else None,
    )

    if args.output:
        Path(args.output).write_text(output, encoding="utf-8")
    else:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
