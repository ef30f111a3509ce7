"""Shared fixtures for extraction and vocabulary tests."""
from __future__ import annotations

from pathlib import Path
from typing import Iterator, List

import pytest

from docvocab.config import Settings, get_settings


class FakePdfTool:
    """Stand-in for ``pdftotext`` that records the paths it was asked to read."""

    def __init__(self, text: str = "", error: Exception | None = None) -> None:
        self.text = text
        self.error = error
        self.calls: List[Path] = []

    def run(self, path: Path) -> str:
        self.calls.append(path)
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture(autouse=True)
def _reset_settings_cache(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in (
        "DOCVOCAB_API_URL",
        "DOCVOCAB_MODEL",
        "DOCVOCAB_MAX_TOKENS",
        "DOCVOCAB_MAX_INPUT_CHARS",
        "DOCVOCAB_TIMEOUT_SECONDS",
        "DOCVOCAB_PROMPT_VERSION",
        "PDFTOTEXT_BINARY",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def fake_pdf_tool() -> FakePdfTool:
    return FakePdfTool(text="Quarterly Report\n\n\x0cPage two\n")


@pytest.fixture
def docx_path(tmp_path: Path) -> Path:
    docx_mod = pytest.importorskip("docx", reason="python-docx is required for DOCX tests")
    document = docx_mod.Document()
    document.add_paragraph("Cardiology Follow-up")
    paragraph = document.add_paragraph()
    paragraph.add_run("Ator")
    paragraph.add_run("vastatin 40 mg")
    document.add_paragraph()
    document.add_table(rows=1, cols=1).cell(0, 0).text = "Table cell"
    document.add_paragraph("LDL-C")
    path = tmp_path / "note.docx"
    document.save(path)
    return path
