"""Comparison service for callers of the similarity engine.

The service owns the concerns the engine leaves to its caller: fetching
documents from an injected repository, capping input length and ranking
batch results. Both comparison modes go through it: batch-ranked
(query vs stored documents) and pairwise-detailed (document vs document).
"""

import logging
from collections.abc import Sequence
from typing import Any, Optional, Protocol

import pandas as pd

from docsim.normalize import ensure_text
from docsim.similarity.batch import (
    compare_against_candidates,
    compare_documents_pairwise,
    results_to_frame,
)
from docsim.similarity.scoring import combined_similarity
from docsim.similarity.types import (
    CandidateDocument,
    CandidateResult,
    PairwiseComparison,
    SimilarityReport,
)
from docsim.utils.parallel_protocols import ExecutorLike
from docsim.utils.settings import get_edit_distance_engine, get_max_input_chars

logger = logging.getLogger(__name__)


class DocumentNotFoundError(KeyError):
    """Raised when a requested document is not in the repository."""


class DocumentRepository(Protocol):
    """Storage contract for candidate documents."""

    def list_documents(self, owner_id: Optional[Any] = None) -> Sequence[CandidateDocument]:
        """Documents visible to ``owner_id`` (all documents when ``None``)."""
        ...


class InMemoryDocumentRepository:
    """Document repository backed by a list, keyed by optional owner."""

    def __init__(self) -> None:
        self._documents: list[tuple[Optional[Any], CandidateDocument]] = []

    def add(self, document: CandidateDocument, owner_id: Optional[Any] = None) -> None:
        self._documents.append((owner_id, document))

    def list_documents(self, owner_id: Optional[Any] = None) -> Sequence[CandidateDocument]:
        return [
            doc
            for owner, doc in self._documents
            if owner_id is None or owner == owner_id
        ]


class ComparisonService:
    """Runs batch and pairwise comparisons against a document repository."""

    def __init__(
        self,
        repository: DocumentRepository,
        settings: Optional[dict[str, Any]] = None,
        parallel_executor: Optional[ExecutorLike] = None,
    ):
        """Initialize the comparison service.

        Args:
            repository: Source of candidate documents
            settings: Configuration settings
            parallel_executor: Optional executor for batch scoring
        """
        self.repository = repository
        self.settings = settings or {}
        self.parallel_executor = parallel_executor
        self.engine = get_edit_distance_engine(self.settings)
        self.max_input_chars = get_max_input_chars(self.settings)

    def truncate(self, text: str) -> str:
        """Cap text at ``max_input_chars`` characters (0 disables the cap)."""
        if self.max_input_chars and len(text) > self.max_input_chars:
            logger.warning(
                f"Truncating input from {len(text)} to {self.max_input_chars} characters",
            )
            return text[: self.max_input_chars]
        return text

    def _candidates(self, owner_id: Optional[Any]) -> list[CandidateDocument]:
        documents = self.repository.list_documents(owner_id)
        # Documents without content are not comparison candidates
        candidates = [
            CandidateDocument(id=doc.id, name=doc.name, content=self.truncate(doc.content))
            for doc in documents
            if doc.content
        ]
        logger.info(f"Found {len(candidates)} documents with content for owner {owner_id}")
        return candidates

    def compare_text(
        self,
        query: Any,
        owner_id: Optional[Any] = None,
    ) -> list[CandidateResult]:
        """Batch comparison of ``query`` against the stored documents, in storage order."""
        query = self.truncate(ensure_text(query, field="query"))
        return compare_against_candidates(
            query,
            self._candidates(owner_id),
            engine=self.engine,
            parallel_executor=self.parallel_executor,
        )

    def rank_text(
        self,
        query: Any,
        owner_id: Optional[Any] = None,
        top_n: Optional[int] = None,
    ) -> pd.DataFrame:
        """Batch results sorted by similarity, most similar first.

        The sort is stable, so equal scores keep storage order.
        """
        frame = results_to_frame(self.compare_text(query, owner_id))
        ranked = frame.sort_values("similarity", ascending=False, kind="mergesort")
        ranked = ranked.reset_index(drop=True)
        if top_n is not None:
            ranked = ranked.head(top_n)
        return ranked

    def compare_pair(self, text_a: Any, text_b: Any) -> SimilarityReport:
        """Detailed comparison of two texts."""
        text_a = self.truncate(ensure_text(text_a, field="text_a"))
        text_b = self.truncate(ensure_text(text_b, field="text_b"))
        return combined_similarity(text_a, text_b, self.engine)

    def compare_documents(
        self,
        document_ids: Sequence[Any],
        owner_id: Optional[Any] = None,
    ) -> list[PairwiseComparison]:
        """Detailed comparison of every pair among the requested documents.

        Raises:
            ValueError: If fewer than two document ids are given
            DocumentNotFoundError: If an id is not visible to ``owner_id``
        """
        if len(document_ids) < 2:
            raise ValueError("At least two document IDs are required")

        by_id = {doc.id: doc for doc in self.repository.list_documents(owner_id)}
        missing = [doc_id for doc_id in document_ids if doc_id not in by_id]
        if missing:
            raise DocumentNotFoundError(f"Documents not found: {missing}")

        documents = [
            CandidateDocument(
                id=by_id[doc_id].id,
                name=by_id[doc_id].name,
                content=self.truncate(by_id[doc_id].content),
            )
            for doc_id in document_ids
        ]
        return compare_documents_pairwise(documents, engine=self.engine)
