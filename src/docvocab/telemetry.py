"""Centralised observability helpers for structured lifecycle logging."""

from __future__ import annotations

import logging
import os
import platform
import shutil
import sys
import time
import traceback
from contextlib import contextmanager
from typing import Any, Iterator, Optional

LOGGER = logging.getLogger("docvocab.telemetry")

# Credentials are never part of this list.
_ENV_KEYS_TO_LOG: tuple[str, ...] = (
    "DOCVOCAB_API_URL",
    "DOCVOCAB_MODEL",
    "DOCVOCAB_MAX_TOKENS",
    "DOCVOCAB_MAX_INPUT_CHARS",
    "DOCVOCAB_TIMEOUT_SECONDS",
    "DOCVOCAB_PROMPT_VERSION",
    "PDFTOTEXT_BINARY",
    "LOG_LEVEL",
)


def _format_exception(error: BaseException) -> str:
    return "".join(traceback.format_exception(error.__class__, error, error.__traceback__))


def log_event(
    logger: Optional[logging.Logger],
    step: str,
    *,
    level: str = "info",
    duration_ms: float | None = None,
    exc: BaseException | str | None = None,
    details: dict[str, Any] | None = None,
    extra: dict[str, Any] | None = None,
    **payload: Any,
) -> None:
    """Emit a structured log event with the agreed-upon schema."""

    logger = logger or LOGGER
    event: dict[str, Any] = {"step": step, "module": logger.name}
    if duration_ms is not None:
        event["duration_ms"] = round(duration_ms, 3)
    if details is not None:
        event["details"] = details
    if extra:
        event.update(extra)
    event.update(payload)

    exc_info = None
    if exc is not None:
        if isinstance(exc, BaseException):
            event["exc"] = _format_exception(exc)
            exc_info = (exc.__class__, exc, exc.__traceback__)
        else:
            event["exc"] = str(exc)

    log_method = getattr(logger, level.lower(), logger.info)
    log_method(event, exc_info=exc_info)


def emit_app_startup_event(*, pdftotext_binary: str) -> None:
    env_values = {key: os.getenv(key) for key in _ENV_KEYS_TO_LOG if os.getenv(key) is not None}
    details = {
        "env": env_values,
        "python": sys.version.split()[0],
        "platform": platform.platform(),
        "pdftotext": shutil.which(pdftotext_binary),
    }
    log_event(LOGGER, "app.startup", details=details, extra={"pid": os.getpid()})


def emit_vocabulary_request(*, model: str, input_chars: int, sent_chars: int, max_tokens: int) -> None:
    details = {
        "model": model,
        "input_chars": input_chars,
        "sent_chars": sent_chars,
        "truncated": sent_chars < input_chars,
        "max_tokens": max_tokens,
    }
    log_event(LOGGER, "vocabulary.request", details=details)


def emit_vocabulary_result(
    *,
    model: str,
    duration_ms: float,
    categories: int,
    terms: int,
) -> None:
    details = {
        "model": model,
        "categories": categories,
        "terms": terms,
    }
    log_event(LOGGER, "vocabulary.result", duration_ms=duration_ms, details=details)


def emit_vocabulary_error(
    *,
    model: str,
    error: BaseException,
    duration_ms: float,
    status_code: int | None = None,
) -> None:
    details: dict[str, Any] = {"model": model, "error_type": error.__class__.__name__}
    if status_code is not None:
        details["status_code"] = status_code
    log_event(
        LOGGER,
        "vocabulary.error",
        level="warning",
        duration_ms=duration_ms,
        details=details,
        exc=str(error),
    )


@contextmanager
def traced_duration(
    step: str, *, logger: Optional[logging.Logger] = None, **fields: Any
) -> Iterator[dict[str, Any]]:
    """Log start, error and completion of a step.

    The yielded dict is the event details; keys added to it inside the block
    appear on the completion and error events.
    """

    start = time.perf_counter()
    log_event(logger or LOGGER, f"{step}.start", details=dict(fields))
    try:
        yield fields
    except Exception as error:
        log_event(logger or LOGGER, f"{step}.error", level="warning", details=dict(fields), exc=str(error))
        raise
    finally:
        end = time.perf_counter()
        log_event(
            logger or LOGGER,
            f"{step}.complete",
            duration_ms=(end - start) * 1000.0,
            details=dict(fields),
        )


__all__ = [
    "emit_app_startup_event",
    "emit_vocabulary_error",
    "emit_vocabulary_request",
    "emit_vocabulary_result",
    "log_event",
    "traced_duration",
]
