"""Document text extraction and domain vocabulary mining."""

from .errors import DocVocabError, ExtractionError, MiningError
from .extract import extract_document_text
from .vocabulary import ExtractedCategory, ExtractedVocabulary, extract_vocabulary_terms

__all__ = [
    "DocVocabError",
    "ExtractedCategory",
    "ExtractedVocabulary",
    "ExtractionError",
    "MiningError",
    "extract_document_text",
    "extract_vocabulary_terms",
]
