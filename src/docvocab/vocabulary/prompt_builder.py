"""Utilities for constructing the vocabulary extraction request."""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from .models import ChatCompletionRequest, ChatMessage

_PROMPTS_DIR = Path(__file__).resolve().parents[1] / "prompts" / "vocabulary"

USER_PROMPT_PREFIX = "Extract domain-specific terms from this document:\n\n"


def _load_template(path: Path) -> str:
    """Read and trim the contents of a template file."""
    return path.read_text(encoding="utf-8").strip()


@lru_cache(maxsize=None)
def load_system_prompt(version: str) -> str:
    """Return the system prompt stored under ``prompts/vocabulary/<version>``."""

    path = _PROMPTS_DIR / version / "system.txt"
    if not path.is_file():
        raise FileNotFoundError(f"Unknown vocabulary prompt version: {version}")
    return _load_template(path)


def truncate_text(text: str, max_chars: int) -> str:
    """Cut ``text`` to at most ``max_chars`` characters, ignoring word boundaries."""

    if len(text) > max_chars:
        return text[:max_chars]
    return text


def build_request(
    text: str,
    *,
    model: str,
    max_tokens: int,
    max_input_chars: int,
    prompt_version: str,
) -> ChatCompletionRequest:
    """Compose the two-message chat request for ``text``."""

    truncated = truncate_text(text, max_input_chars)
    return ChatCompletionRequest(
        model=model,
        max_tokens=max_tokens,
        messages=[
            ChatMessage(role="system", content=load_system_prompt(prompt_version)),
            ChatMessage(role="user", content=f"{USER_PROMPT_PREFIX}{truncated}"),
        ],
    )


__all__ = ["USER_PROMPT_PREFIX", "build_request", "load_system_prompt", "truncate_text"]
