"""Services layer for the document similarity engine.

This package provides service classes that coordinate between callers and the core algorithms.
"""

from .comparison_service import (
    ComparisonService,
    DocumentNotFoundError,
    DocumentRepository,
    InMemoryDocumentRepository,
)

__all__ = [
    "ComparisonService",
    "DocumentNotFoundError",
    "DocumentRepository",
    "InMemoryDocumentRepository",
]
