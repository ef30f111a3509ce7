"""External ``pdftotext`` invocation used to linearise PDF pages."""
from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Protocol, runtime_checkable

from docvocab.config import DEFAULT_PDFTOTEXT_BINARY
from docvocab.errors import DocumentReadError, ToolFailedError, ToolUnavailableError

LOGGER = logging.getLogger(__name__)


@runtime_checkable
class PdfTextTool(Protocol):
    """Capability that turns a PDF file into text."""

    def run(self, path: Path) -> str:
        """Return the text of ``path`` or raise an :class:`ExtractionError`."""
        ...


class PdfToTextTool:
    """Run poppler's ``pdftotext`` in layout mode and capture its stdout."""

    def __init__(self, binary: str = DEFAULT_PDFTOTEXT_BINARY) -> None:
        self.binary = binary

    def command(self, path: Path) -> list[str]:
        return [self.binary, "-layout", str(path), "-"]

    def run(self, path: Path) -> str:
        cmd = self.command(path)
        LOGGER.debug("Running PDF extraction command: %s", " ".join(cmd))
        try:
            result = subprocess.run(
                cmd,
                check=False,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
            )
        except OSError as exc:
            LOGGER.warning("%s could not be launched: %s", self.binary, exc)
            raise ToolUnavailableError(self.binary, cause=exc) from exc

        if result.returncode != 0:
            diagnostics = result.stderr.decode(errors="replace")
            LOGGER.warning(
                "%s exited with code %s for %s",
                self.binary,
                result.returncode,
                path,
            )
            raise ToolFailedError(self.binary, result.returncode, diagnostics)

        try:
            return result.stdout.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DocumentReadError(f"Invalid UTF-8 in PDF: {exc}", cause=exc) from exc


__all__ = ["PdfTextTool", "PdfToTextTool"]
