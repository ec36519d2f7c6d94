"""Combined similarity scoring with word and line match detail."""

from __future__ import annotations

import logging
from typing import Any, Optional

from docsim.normalize import ensure_text, normalize_text, split_lines, split_words
from docsim.similarity.metrics import (
    DEFAULT_ENGINE,
    cosine_similarity,
    edit_distance_similarity,
    jaccard_similarity,
    line_similarity,
)
from docsim.similarity.types import (
    LineMatch,
    SimilarityReport,
    SimilarityWeights,
    WordMatch,
)

logger = logging.getLogger(__name__)

# Jaccard and cosine reward shared vocabulary, edit distance rewards exact order
COMBINED_WEIGHTS = SimilarityWeights(jaccard=0.4, cosine=0.4, edit_distance=0.2)


def weighted_score(
    jaccard: float,
    cosine: float,
    edit_distance: float,
    weights: SimilarityWeights = COMBINED_WEIGHTS,
) -> float:
    """Blend the three component scores into one overall score."""
    return (
        weights.jaccard * jaccard
        + weights.cosine * cosine
        + weights.edit_distance * edit_distance
    )


def word_matches(text_a: str, text_b: str) -> list[WordMatch]:
    """Flag every word of ``text_a`` that also occurs in ``text_b``.

    Words of ``text_a`` keep their order and duplicates.
    """
    words_b = set(split_words(text_b))
    return [WordMatch(word=word, matched=word in words_b) for word in split_words(text_a)]


def line_matches(
    text_a: str,
    text_b: str,
    engine: str = DEFAULT_ENGINE,
) -> list[LineMatch]:
    """Pair each line of ``text_a`` with its most similar line of ``text_b``.

    Lines are compared in normalized form; the first best-scoring line of
    ``text_b`` wins ties.
    """
    lines_b = split_lines(text_b)
    normalized_b = [normalize_text(line) for line in lines_b]

    matches = []
    for line in split_lines(text_a):
        normalized = normalize_text(line)
        best_line = ""
        best_score = -1.0
        for candidate, normalized_candidate in zip(lines_b, normalized_b):
            score = line_similarity(normalized, normalized_candidate, engine)
            if score > best_score:
                best_line, best_score = candidate, score
        matches.append(LineMatch(line=line, best_match=best_line, score=max(best_score, 0.0)))

    return matches


def combined_similarity(
    text_a: Optional[Any],
    text_b: Optional[Any],
    engine: str = DEFAULT_ENGINE,
) -> SimilarityReport:
    """Detailed similarity report for two texts.

    Args:
        text_a: First text (``None`` or empty is allowed)
        text_b: Second text (``None`` or empty is allowed)
        engine: Edit-distance engine

    Returns:
        SimilarityReport with the component scores, the weighted overall
        score and word/line match detail. Empty or absent input on either
        side gives ``SimilarityReport.empty()``.

    Raises:
        TextInputError: If either input is not text

    """
    text_a = ensure_text(text_a, field="text_a")
    text_b = ensure_text(text_b, field="text_b")

    logger.debug(
        f"Detailed similarity: len_a={len(text_a)} len_b={len(text_b)} "
        f"preview_a={text_a[:100]!r} preview_b={text_b[:100]!r}",
    )

    if not text_a or not text_b:
        logger.warning(
            f"Empty text provided to similarity calculation "
            f"(text_a={bool(text_a)}, text_b={bool(text_b)})",
        )
        return SimilarityReport.empty()

    jaccard = jaccard_similarity(text_a, text_b)
    cosine = cosine_similarity(text_a, text_b)
    edit = edit_distance_similarity(normalize_text(text_a), normalize_text(text_b), engine)
    overall = weighted_score(jaccard, cosine, edit)

    logger.debug(
        f"Combined similarity: jaccard={jaccard:.4f} cosine={cosine:.4f} "
        f"edit_distance={edit:.4f} overall={overall:.4f}",
    )

    return SimilarityReport(
        overall=overall,
        jaccard=jaccard,
        cosine=cosine,
        edit_distance=edit,
        word_matches=tuple(word_matches(text_a, text_b)),
        line_matches=tuple(line_matches(text_a, text_b, engine)),
    )
