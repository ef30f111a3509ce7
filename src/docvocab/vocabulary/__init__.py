"""Domain vocabulary mining via a chat-completions model."""

from .miner import VocabularyMiner, extract_vocabulary_terms
from .models import CATEGORY_NAMES, ExtractedCategory, ExtractedVocabulary
from .prompt_builder import USER_PROMPT_PREFIX, build_request, load_system_prompt, truncate_text

__all__ = [
    "CATEGORY_NAMES",
    "ExtractedCategory",
    "ExtractedVocabulary",
    "USER_PROMPT_PREFIX",
    "VocabularyMiner",
    "build_request",
    "extract_vocabulary_terms",
    "load_system_prompt",
    "truncate_text",
]
