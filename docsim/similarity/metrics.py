"""Whole-text similarity metrics.

Edit distance is quadratic in time and space. The ``dp`` engine keeps a full
``(len(a) + 1) x (len(b) + 1)`` table of Python ints and stays practical up to a
few thousand characters per side; beyond that use the ``rapidfuzz`` engine,
which the settings select by default. Callers cap longer inputs before
scoring (see ``similarity.max_input_chars``).

Every public metric accepts ``str``, ``bytes`` or ``None`` and rejects other
types with ``TextInputError``.
"""

from __future__ import annotations

import logging
import math

from rapidfuzz.distance import Levenshtein

from docsim.normalize import ensure_text, normalize_text, term_frequencies, token_set

logger = logging.getLogger(__name__)

EDIT_DISTANCE_ENGINES = ("dp", "rapidfuzz")
DEFAULT_ENGINE = "dp"


def _dp_edit_distance(a: str, b: str) -> int:
    rows = len(a) + 1
    cols = len(b) + 1
    dp = [[0] * cols for _ in range(rows)]

    for i in range(rows):
        dp[i][0] = i
    for j in range(cols):
        dp[0][j] = j

    for i in range(1, rows):
        char_a = a[i - 1]
        prev_row = dp[i - 1]
        row = dp[i]
        for j in range(1, cols):
            cost = 0 if char_a == b[j - 1] else 1
            row[j] = min(
                prev_row[j] + 1,  # deletion
                row[j - 1] + 1,  # insertion
                prev_row[j - 1] + cost,  # substitution
            )

    return dp[rows - 1][cols - 1]


def edit_distance(a: str, b: str, engine: str = DEFAULT_ENGINE) -> int:
    """Single-character insertion/deletion/substitution distance.

    Args:
        a: First string
        b: Second string
        engine: ``"dp"`` for the dynamic-programming table or ``"rapidfuzz"``
            for the RapidFuzz implementation (identical results)

    Returns:
        Minimum number of edits turning ``a`` into ``b``

    Raises:
        ValueError: If ``engine`` is unknown

    """
    if engine == "dp":
        return _dp_edit_distance(a, b)
    if engine == "rapidfuzz":
        return int(Levenshtein.distance(a, b))
    raise ValueError(
        f"Unknown edit distance engine '{engine}'. Expected one of {EDIT_DISTANCE_ENGINES}",
    )


def edit_distance_similarity(a: str, b: str, engine: str = DEFAULT_ENGINE) -> float:
    """Edit-distance similarity ``1 - distance / max(len(a), len(b))``.

    Two empty strings have nothing to compare and score 0.0.
    """
    a = ensure_text(a, field="a")
    b = ensure_text(b, field="b")
    max_length = max(len(a), len(b))
    if max_length == 0:
        return 0.0

    distance = edit_distance(a, b, engine)
    similarity = 1 - distance / max_length
    logger.debug(
        f"Edit distance: distance={distance} max_length={max_length} similarity={similarity:.4f}",
    )
    return similarity


def normalized_edit_distance_similarity(
    a: str,
    b: str,
    engine: str = DEFAULT_ENGINE,
) -> float:
    """Edit-distance similarity of the normalized forms of ``a`` and ``b``."""
    a = ensure_text(a, field="a")
    b = ensure_text(b, field="b")
    return edit_distance_similarity(normalize_text(a), normalize_text(b), engine)


def jaccard_similarity(a: str, b: str) -> float:
    """Distinct-token overlap ``|A & B| / |A | B|``; 0.0 when both are empty."""
    tokens_a = token_set(ensure_text(a, field="a"))
    tokens_b = token_set(ensure_text(b, field="b"))

    union = len(tokens_a | tokens_b)
    if union == 0:
        return 0.0

    intersection = len(tokens_a & tokens_b)
    jaccard = intersection / union
    logger.debug(
        f"Jaccard: |A|={len(tokens_a)} |B|={len(tokens_b)} "
        f"intersection={intersection} union={union} jaccard={jaccard:.4f}",
    )
    return jaccard


def cosine_similarity(a: str, b: str) -> float:
    """Cosine of the term-frequency vectors of ``a`` and ``b``.

    Sums stay in integers so the result does not depend on argument order.
    The magnitude product is floored at 1, so a side with no tokens gives 0.0.
    """
    freq_a = term_frequencies(ensure_text(a, field="a"))
    freq_b = term_frequencies(ensure_text(b, field="b"))

    dot_product = 0
    for token in freq_a.keys() & freq_b.keys():
        dot_product += freq_a[token] * freq_b[token]
    magnitude_a = sum(count * count for count in freq_a.values())
    magnitude_b = sum(count * count for count in freq_b.values())

    denominator = max(math.sqrt(magnitude_a * magnitude_b), 1.0)
    cosine = min(dot_product / denominator, 1.0)
    logger.debug(
        f"Cosine: dot={dot_product} |A|={math.sqrt(magnitude_a):.4f} "
        f"|B|={math.sqrt(magnitude_b):.4f} cosine={cosine:.4f}",
    )
    return cosine


def line_similarity(line1: str, line2: str, engine: str = DEFAULT_ENGINE) -> float:
    """Edit-distance similarity of two already-normalized lines.

    Two empty lines are identical and score 1.0.
    """
    line1 = ensure_text(line1, field="line1")
    line2 = ensure_text(line2, field="line2")
    if not line1 and not line2:
        return 1.0
    return edit_distance_similarity(line1, line2, engine)
