"""Exceptions raised by document extraction and vocabulary mining."""
from __future__ import annotations

PDFTOTEXT_GUIDANCE = (
    "PDF extraction requires pdftotext (install poppler-utils). "
    "For now, please use .docx or .txt files."
)


class DocVocabError(RuntimeError):
    """Base class for every error surfaced to callers of this package."""

    def __init__(self, message: str, *, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.__cause__ = cause


class ExtractionError(DocVocabError):
    """Raised when text cannot be extracted from a document."""


class UnknownFileTypeError(ExtractionError):
    """Raised when a path carries no extension to classify it by."""

    def __init__(self) -> None:
        super().__init__("Could not determine file type")


class UnsupportedFormatError(ExtractionError):
    """Raised when the extension does not map to a known extraction backend."""

    def __init__(self, extension: str) -> None:
        super().__init__(f"Unsupported file type: {extension}")
        self.extension = extension


class DocumentReadError(ExtractionError):
    """Raised on I/O failures or undecodable text."""


class DocumentParseError(ExtractionError):
    """Raised when a structured document cannot be parsed."""


class ToolUnavailableError(ExtractionError):
    """Raised when the external extraction tool cannot be launched at all."""

    def __init__(self, tool: str, *, cause: BaseException | None = None) -> None:
        super().__init__(PDFTOTEXT_GUIDANCE, cause=cause)
        self.tool = tool


class ToolFailedError(ExtractionError):
    """Raised when the external tool ran but exited with a failure status."""

    def __init__(self, tool: str, returncode: int, diagnostics: str) -> None:
        super().__init__(f"{tool} failed: {diagnostics}")
        self.tool = tool
        self.returncode = returncode
        self.diagnostics = diagnostics


class MiningError(DocVocabError):
    """Raised when vocabulary terms cannot be obtained from the language model."""


class TransportError(MiningError):
    """Raised when the HTTP request could not be completed."""


class APIError(MiningError):
    """Raised for non-success HTTP responses."""

    def __init__(self, status_code: int, reason: str, body: str) -> None:
        status = f"{status_code} {reason}".strip()
        super().__init__(f"OpenAI API error {status}: {body}")
        self.status_code = status_code
        self.body = body


class ResponseFormatError(MiningError):
    """Raised when a successful response does not have the chat-completion shape."""


class EmptyResponseError(MiningError):
    """Raised when the response carries no choices."""

    def __init__(self) -> None:
        super().__init__("No response from model")


class TermsParseError(MiningError):
    """Raised when the model output is not a valid vocabulary document."""


__all__ = [
    "APIError",
    "DocVocabError",
    "DocumentParseError",
    "DocumentReadError",
    "EmptyResponseError",
    "ExtractionError",
    "MiningError",
    "PDFTOTEXT_GUIDANCE",
    "ResponseFormatError",
    "TermsParseError",
    "ToolFailedError",
    "ToolUnavailableError",
    "TransportError",
    "UnknownFileTypeError",
    "UnsupportedFormatError",
]
