"""Similarity module for the document similarity engine.

This module provides whole-text metrics, the combined weighted report
and batch comparison against candidate documents.
"""

from .batch import (
    compare_against_candidates,
    compare_documents_pairwise,
    format_percentage,
    results_to_frame,
)
from .metrics import (
    EDIT_DISTANCE_ENGINES,
    cosine_similarity,
    edit_distance,
    edit_distance_similarity,
    jaccard_similarity,
    line_similarity,
    normalized_edit_distance_similarity,
)
from .scoring import (
    COMBINED_WEIGHTS,
    combined_similarity,
    line_matches,
    weighted_score,
    word_matches,
)
from .types import (
    CandidateDocument,
    CandidateResult,
    LineMatch,
    PairwiseComparison,
    SimilarityReport,
    SimilarityWeights,
    WordMatch,
)

__all__ = [
    "COMBINED_WEIGHTS",
    "EDIT_DISTANCE_ENGINES",
    "CandidateDocument",
    "CandidateResult",
    "LineMatch",
    "PairwiseComparison",
    "SimilarityReport",
    "SimilarityWeights",
    "WordMatch",
    "combined_similarity",
    "compare_against_candidates",
    "compare_documents_pairwise",
    "cosine_similarity",
    "edit_distance",
    "edit_distance_similarity",
    "format_percentage",
    "jaccard_similarity",
    "line_matches",
    "line_similarity",
    "normalized_edit_distance_similarity",
    "results_to_frame",
    "weighted_score",
    "word_matches",
]
