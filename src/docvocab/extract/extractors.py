"""Extractors for supported document types."""
from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from docx import Document
from docx.oxml.ns import qn

from docvocab.errors import DocumentParseError, DocumentReadError

from .pdf_tool import PdfTextTool, PdfToTextTool

if TYPE_CHECKING:  # pragma: no cover - import for type checking only
    from docx.document import Document as DocxDocument

LOGGER = logging.getLogger(__name__)


def _read_bytes(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as exc:
        raise DocumentReadError(f"Failed to read file: {exc}", cause=exc) from exc


class TextExtractor:
    """Return plaintext and markdown documents verbatim."""

    def extract(self, path: Path) -> str:
        data = _read_bytes(path)
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DocumentReadError(f"Failed to read file: {exc}", cause=exc) from exc


class DocxExtractor:
    """Extract text from Microsoft Word documents.

    Only top-level paragraphs are visited. Within a paragraph the text fragments
    (`w:t`) of every run are concatenated, and each paragraph is terminated with
    a newline, empty ones included. Breaks and tabs inside runs, content outside
    runs (hyperlinks, fields, embedded objects) and tables are skipped.
    """

    def extract(self, path: Path) -> str:
        document = self._load_document(_read_bytes(path))
        parts: list[str] = []
        for paragraph in document.paragraphs:
            for run in paragraph.runs:
                parts.extend(fragment.text or "" for fragment in run._r.findall(qn("w:t")))
            parts.append("\n")
        return "".join(parts)

    def _load_document(self, data: bytes) -> "DocxDocument":
        try:
            return Document(io.BytesIO(data))
        except Exception as exc:
            LOGGER.warning("python-docx failed to parse DOCX content: %s", exc)
            raise DocumentParseError(f"Failed to parse docx: {exc}", cause=exc) from exc


class PDFExtractor:
    """Extract text from PDF documents through an external tool."""

    def __init__(self, tool: Optional[PdfTextTool] = None) -> None:
        self.tool = tool or PdfToTextTool()

    def extract(self, path: Path) -> str:
        return self.tool.run(path)


__all__ = ["DocxExtractor", "PDFExtractor", "TextExtractor"]
