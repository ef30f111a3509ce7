"""Format-dispatched text extraction from document files."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from docvocab.config import Settings, resolve_settings
from docvocab.errors import UnsupportedFormatError
from docvocab.telemetry import traced_duration

from .extractors import DocxExtractor, PDFExtractor, TextExtractor
from .format_detection import SUPPORTED_EXTENSIONS, DocumentFormat, DocumentKind, PathLike, classify
from .pdf_tool import PdfTextTool, PdfToTextTool

LOGGER = logging.getLogger(__name__)


class DocumentExtractor:
    """Dispatch a path to the extractor matching its :class:`DocumentKind`."""

    def __init__(
        self,
        *,
        pdf_tool: Optional[PdfTextTool] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        if pdf_tool is None:
            pdf_tool = PdfToTextTool(resolve_settings(settings).pdftotext_binary)
        self._text = TextExtractor()
        self._docx = DocxExtractor()
        self._pdf = PDFExtractor(pdf_tool)

    def extract(self, path: PathLike) -> str:
        target = Path(path)
        with traced_duration("extract", logger=LOGGER, file=target.name) as trace:
            document_format = classify(target)
            trace["kind"] = document_format.kind.value
            if not document_format.supported:
                raise UnsupportedFormatError(document_format.extension)
            text = self._dispatch(document_format, target)
            trace["chars"] = len(text)
        return text

    def _dispatch(self, document_format: DocumentFormat, path: Path) -> str:
        if document_format.kind is DocumentKind.PLAIN:
            return self._text.extract(path)
        if document_format.kind is DocumentKind.STRUCTURED:
            return self._docx.extract(path)
        if document_format.kind is DocumentKind.PAGINATED:
            return self._pdf.extract(path)
        raise UnsupportedFormatError(document_format.extension)


def extract_document_text(
    path: PathLike,
    *,
    pdf_tool: Optional[PdfTextTool] = None,
    settings: Optional[Settings] = None,
) -> str:
    """Extract the textual content of the document at ``path``.

    Supported extensions are ``txt``, ``md``, ``docx`` and ``pdf`` (any case).
    Every failure raises a subclass of :class:`docvocab.errors.ExtractionError`;
    text is only returned when extraction succeeded completely.
    """

    return DocumentExtractor(pdf_tool=pdf_tool, settings=settings).extract(path)


__all__ = [
    "DocumentExtractor",
    "DocumentFormat",
    "DocumentKind",
    "PdfTextTool",
    "PdfToTextTool",
    "SUPPORTED_EXTENSIONS",
    "classify",
    "extract_document_text",
]
