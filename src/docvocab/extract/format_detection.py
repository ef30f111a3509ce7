"""Utilities for classifying documents by their file extension."""
from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Union

from docvocab.errors import UnknownFileTypeError

PathLike = Union[str, "os.PathLike[str]"]


class DocumentKind(str, Enum):
    """Extraction backends a document can be dispatched to."""

    PLAIN = "plain"
    STRUCTURED = "structured"
    PAGINATED = "paginated"
    UNSUPPORTED = "unsupported"


_EXTENSION_MAP: dict[str, DocumentKind] = {
    "txt": DocumentKind.PLAIN,
    "md": DocumentKind.PLAIN,
    "docx": DocumentKind.STRUCTURED,
    "pdf": DocumentKind.PAGINATED,
}

SUPPORTED_EXTENSIONS: tuple[str, ...] = tuple(_EXTENSION_MAP)


@dataclass(slots=True, frozen=True)
class DocumentFormat:
    """Result of classifying a path: the lowercased extension and its backend."""

    extension: str
    kind: DocumentKind

    @property
    def supported(self) -> bool:
        return self.kind is not DocumentKind.UNSUPPORTED


def classify(path: PathLike) -> DocumentFormat:
    """Return the :class:`DocumentFormat` for ``path`` without touching the file.

    The extension comparison is case-insensitive. A path without an extension
    raises :class:`UnknownFileTypeError`; unknown extensions are reported as
    :attr:`DocumentKind.UNSUPPORTED` so callers can decide how to surface them.
    """

    suffix = Path(path).suffix
    extension = suffix[1:].lower() if suffix else ""
    if not extension:
        raise UnknownFileTypeError()
    return DocumentFormat(extension=extension, kind=_EXTENSION_MAP.get(extension, DocumentKind.UNSUPPORTED))


__all__ = ["DocumentFormat", "DocumentKind", "PathLike", "SUPPORTED_EXTENSIONS", "classify"]
