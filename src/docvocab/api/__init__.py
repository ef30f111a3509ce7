"""HTTP routes for the document vocabulary service."""

from .routes import get_document_extractor, get_vocabulary_miner, router

__all__ = ["get_document_extractor", "get_vocabulary_miner", "router"]
