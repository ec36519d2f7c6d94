"""Batch comparison of a query against candidate documents."""

from __future__ import annotations

import functools
import logging
from collections.abc import Mapping, Sequence
from typing import Any, Optional, Union

import pandas as pd

from docsim.normalize import ensure_text
from docsim.similarity.metrics import DEFAULT_ENGINE, edit_distance_similarity
from docsim.similarity.scoring import combined_similarity
from docsim.similarity.types import (
    CandidateDocument,
    CandidateResult,
    PairwiseComparison,
)
from docsim.utils.parallel_protocols import ExecutorLike

logger = logging.getLogger(__name__)

CandidateLike = Union[CandidateDocument, Mapping[str, Any]]

RESULT_COLUMNS = ["id", "name", "similarity_percentage", "similarity"]


def format_percentage(ratio: float) -> str:
    """Format a [0, 1] ratio as a percentage string with two decimals, capped at 100."""
    return f"{min(ratio * 100, 100.0):.2f}"


def _score_candidate(
    query: str,
    candidate: CandidateDocument,
    engine: str,
) -> CandidateResult:
    ratio = edit_distance_similarity(query, candidate.content, engine)
    result = CandidateResult(
        id=candidate.id,
        name=candidate.name,
        similarity_percentage=format_percentage(ratio),
    )
    logger.debug(
        f"Compared with document: {candidate.name}, Similarity: {result.similarity_percentage}%",
    )
    return result


def compare_against_candidates(
    query: Optional[Any],
    candidates: Sequence[CandidateLike],
    *,
    engine: str = DEFAULT_ENGINE,
    parallel_executor: Optional[ExecutorLike] = None,
) -> list[CandidateResult]:
    """Score a query against every candidate by raw edit-distance similarity.

    Args:
        query: Query text (``None`` or empty scores 0.00 everywhere)
        candidates: Candidate documents or ``{id, name, content}`` mappings
        engine: Edit-distance engine
        parallel_executor: Optional executor; results keep candidate order

    Returns:
        One CandidateResult per candidate, in input order

    Raises:
        TextInputError: If the query or a candidate is malformed

    """
    query = ensure_text(query, field="query")
    documents = [CandidateDocument.coerce(candidate) for candidate in candidates]

    if not documents:
        logger.info("No candidates to compare against")
        return []

    logger.info(f"Comparing query ({len(query)} chars) against {len(documents)} candidates")

    if parallel_executor is not None:
        # Must stay picklable for process pools
        score = functools.partial(_score_candidate, query, engine=engine)
        results = list(parallel_executor.map(score, documents))
    else:
        results = [_score_candidate(query, doc, engine) for doc in documents]

    return results


def compare_documents_pairwise(
    documents: Sequence[CandidateLike],
    *,
    engine: str = DEFAULT_ENGINE,
) -> list[PairwiseComparison]:
    """Detailed comparison of every unordered pair of documents.

    Pairs are produced as ``(i, j)`` with ``i < j`` in input order.
    """
    docs = [CandidateDocument.coerce(doc) for doc in documents]

    comparisons = []
    for i, doc_a in enumerate(docs):
        for doc_b in docs[i + 1 :]:
            report = combined_similarity(doc_a.content, doc_b.content, engine)
            comparisons.append(
                PairwiseComparison(
                    document_a=(doc_a.id, doc_a.name),
                    document_b=(doc_b.id, doc_b.name),
                    report=report,
                ),
            )

    logger.info(f"Made {len(comparisons)} pairwise comparisons for {len(docs)} documents")
    return comparisons


def results_to_frame(results: Sequence[CandidateResult]) -> pd.DataFrame:
    """Convert batch results to a DataFrame, keeping result order."""
    if not results:
        return pd.DataFrame(columns=RESULT_COLUMNS)

    return pd.DataFrame.from_records(
        [
            {
                "id": r.id,
                "name": r.name,
                "similarity_percentage": r.similarity_percentage,
                "similarity": r.similarity,
            }
            for r in results
        ],
        columns=RESULT_COLUMNS,
    )
