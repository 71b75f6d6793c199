"""Application configuration helpers for the CLI and the API."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    facts_path: str = ""


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings from environment variables (and .env) with defaults."""
    load_dotenv()

    log_level = os.getenv("FACT_COMPLIANCE_LOG_LEVEL", "INFO").strip().upper()
    facts_path = os.getenv("FACT_COMPLIANCE_FACTS_PATH", "").strip()

    if not isinstance(logging.getLevelName(log_level), int):
        logger.warning("Unknown FACT_COMPLIANCE_LOG_LEVEL %r; falling back to INFO.", log_level)
        log_level = "INFO"

    return Settings(log_level=log_level, facts_path=facts_path)


def configure_logging(settings: Settings | None = None) -> None:
    """Attach a stderr handler at the configured level (outer surfaces only)."""
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level, format=_LOG_FORMAT)
