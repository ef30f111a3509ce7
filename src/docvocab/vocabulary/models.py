"""Request and response shapes for the chat-completions vocabulary call."""
from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

CATEGORY_NAMES: tuple[str, ...] = (
    "Drug Names",
    "Medical Terms",
    "Acronyms",
    "Industry Terms",
    "Organizations",
)


class ExtractedCategory(BaseModel):
    """A named group of terms, in the order the model returned them."""

    # Model-chosen names outside CATEGORY_NAMES are accepted as-is.
    name: str
    terms: list[str]


class ExtractedVocabulary(BaseModel):
    """Categorised vocabulary plus a display name suggested by the model."""

    categories: list[ExtractedCategory]
    suggested_name: str

    @property
    def term_count(self) -> int:
        return sum(len(category.terms) for category in self.categories)


class ChatMessage(BaseModel):
    role: Literal["system", "user", "assistant"]
    content: str


class ResponseFormat(BaseModel):
    type: str = "json_object"


class ChatCompletionRequest(BaseModel):
    """Body sent to the chat-completions endpoint."""

    model: str
    max_tokens: int
    response_format: ResponseFormat = Field(default_factory=ResponseFormat)
    messages: list[ChatMessage]


class ResponseMessage(BaseModel):
    content: str


class Choice(BaseModel):
    message: ResponseMessage


class ChatCompletionResponse(BaseModel):
    """Subset of the chat-completions response envelope that is consumed."""

    choices: list[Choice]


__all__ = [
    "CATEGORY_NAMES",
    "ChatCompletionRequest",
    "ChatCompletionResponse",
    "ChatMessage",
    "Choice",
    "ExtractedCategory",
    "ExtractedVocabulary",
    "ResponseFormat",
    "ResponseMessage",
]
