"""Environment-driven settings and logging setup."""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

LOGGER_NAME = "therapy_journal"
LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    api_key: Optional[str] = None
    model_name: str = "gemini-2.5-flash"
    temperature: float = 0.7
    max_tokens: int = 150
    rate_limit_seconds: float = 1.0
    log_level: str = "INFO"


def _env_number(name: str, default, cast):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw)
    except ValueError:
        logger.warning("Ignoring malformed %s=%r, using %s", name, raw, default)
        return default


def load_settings(dotenv: bool = True) -> Settings:
    if dotenv:
        load_dotenv(find_dotenv(usecwd=True))
    defaults = Settings()
    return Settings(
        api_key=os.getenv("GEMINI_API_KEY") or None,
        model_name=os.getenv("GEMINI_MODEL") or defaults.model_name,
        temperature=_env_number("CHAT_TEMPERATURE", defaults.temperature, float),
        max_tokens=_env_number("CHAT_MAX_TOKENS", defaults.max_tokens, int),
        rate_limit_seconds=_env_number(
            "CHAT_RATE_LIMIT_SECONDS", defaults.rate_limit_seconds, float
        ),
        log_level=(os.getenv("LOG_LEVEL") or defaults.log_level).upper(),
    )


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach one stream handler to the package logger; safe to call on every rerun."""
    root = logging.getLogger(LOGGER_NAME)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    return root
