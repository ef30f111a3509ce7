from __future__ import annotations

import pytest

from docvocab.config import get_settings, load_settings


def test_defaults_match_documented_values() -> None:
    settings = load_settings()

    assert settings.api_url == "https://api.openai.com/v1/chat/completions"
    assert settings.model == "gpt-4o-mini"
    assert settings.max_tokens == 4096
    assert settings.max_input_chars == 60_000
    assert settings.prompt_version == "v1"
    assert settings.pdftotext_binary == "pdftotext"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DOCVOCAB_MODEL", "gpt-4o")
    monkeypatch.setenv("DOCVOCAB_MAX_INPUT_CHARS", "1000")
    monkeypatch.setenv("DOCVOCAB_TIMEOUT_SECONDS", "12.5")
    monkeypatch.setenv("PDFTOTEXT_BINARY", "/usr/local/bin/pdftotext")

    settings = load_settings()

    assert settings.model == "gpt-4o"
    assert settings.max_input_chars == 1000
    assert settings.timeout_seconds == 12.5
    assert settings.pdftotext_binary == "/usr/local/bin/pdftotext"


@pytest.mark.parametrize("value", ("many", "-5", "0"))
def test_invalid_numbers_fall_back_to_defaults(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    monkeypatch.setenv("DOCVOCAB_MAX_TOKENS", value)
    monkeypatch.setenv("DOCVOCAB_TIMEOUT_SECONDS", value)

    settings = load_settings()

    assert settings.max_tokens == 4096
    assert settings.timeout_seconds == 120.0


def test_get_settings_is_cached(monkeypatch: pytest.MonkeyPatch) -> None:
    first = get_settings()
    monkeypatch.setenv("DOCVOCAB_MODEL", "other-model")

    assert get_settings() is first
    get_settings.cache_clear()
    assert get_settings().model == "other-model"
