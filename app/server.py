"""
HTTP server entry point.
Run: python -m app.server
"""

import logging
import sys

import uvicorn

from app.api.main import app
from app.core.config import settings

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    stream=sys.stderr,
)
logger = logging.getLogger(__name__)


def main() -> None:
    logger.info("Server starting on %s:%s", settings.HOST, settings.PORT)
    logger.info("API key: %s", "configured" if settings.api_key_configured else "MISSING")
    logger.info("Timeout: %gs per model, models=%s", settings.REQUEST_TIMEOUT, ", ".join(settings.OPENROUTER_MODELS))
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
