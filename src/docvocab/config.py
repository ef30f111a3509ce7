"""Environment-driven settings for document extraction and vocabulary mining."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

LOGGER = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.openai.com/v1/chat/completions"
DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_MAX_TOKENS = 4096
DEFAULT_MAX_INPUT_CHARS = 60_000
DEFAULT_TIMEOUT_SECONDS = 120.0
DEFAULT_PROMPT_VERSION = "v1"
DEFAULT_PDFTOTEXT_BINARY = "pdftotext"


@dataclass(slots=True, frozen=True)
class Settings:
    """Resolved configuration shared by the extractor and the vocabulary miner."""

    api_url: str = DEFAULT_API_URL
    model: str = DEFAULT_MODEL
    max_tokens: int = DEFAULT_MAX_TOKENS
    max_input_chars: int = DEFAULT_MAX_INPUT_CHARS
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    prompt_version: str = DEFAULT_PROMPT_VERSION
    pdftotext_binary: str = DEFAULT_PDFTOTEXT_BINARY


def _env_str(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        parsed = int(value)
    except ValueError:
        LOGGER.warning("Ignoring invalid integer for %s: %r", name, value)
        return default
    if parsed <= 0:
        LOGGER.warning("Ignoring non-positive value for %s: %r", name, value)
        return default
    return parsed


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        parsed = float(value)
    except ValueError:
        LOGGER.warning("Ignoring invalid number for %s: %r", name, value)
        return default
    if parsed <= 0:
        LOGGER.warning("Ignoring non-positive value for %s: %r", name, value)
        return default
    return parsed


def load_settings() -> Settings:
    """Build :class:`Settings` from the current process environment."""

    return Settings(
        api_url=_env_str("DOCVOCAB_API_URL", DEFAULT_API_URL),
        model=_env_str("DOCVOCAB_MODEL", DEFAULT_MODEL),
        max_tokens=_env_int("DOCVOCAB_MAX_TOKENS", DEFAULT_MAX_TOKENS),
        max_input_chars=_env_int("DOCVOCAB_MAX_INPUT_CHARS", DEFAULT_MAX_INPUT_CHARS),
        timeout_seconds=_env_float("DOCVOCAB_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS),
        prompt_version=_env_str("DOCVOCAB_PROMPT_VERSION", DEFAULT_PROMPT_VERSION),
        pdftotext_binary=_env_str("PDFTOTEXT_BINARY", DEFAULT_PDFTOTEXT_BINARY),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return process-wide settings, read from the environment once."""

    return load_settings()


def resolve_settings(settings: Optional[Settings] = None) -> Settings:
    return settings if settings is not None else get_settings()


__all__ = ["Settings", "get_settings", "load_settings", "resolve_settings"]
