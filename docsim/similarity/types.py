"""Type definitions for similarity results.

All result types are frozen dataclasses: a report is built once per
comparison and never mutated.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from docsim.normalize import TextInputError, ensure_text


@dataclass(frozen=True)
class SimilarityWeights:
    """Weights of the combined score components."""

    jaccard: float
    cosine: float
    edit_distance: float

    def as_dict(self) -> dict[str, float]:
        return {
            "jaccard": self.jaccard,
            "cosine": self.cosine,
            "edit_distance": self.edit_distance,
        }


@dataclass(frozen=True)
class WordMatch:
    """A word of text A and whether text B contains it."""

    word: str
    matched: bool

    @property
    def match_score(self) -> int:
        return 1 if self.matched else 0

    def to_dict(self) -> dict[str, Any]:
        return {"word": self.word, "matchScore": self.match_score}


@dataclass(frozen=True)
class LineMatch:
    """A line of text A paired with its best-matching line of text B."""

    line: str
    best_match: str
    score: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "originalLine": self.line,
            "bestMatch": self.best_match,
            "matchScore": self.score,
        }


@dataclass(frozen=True)
class SimilarityReport:
    """Detailed pairwise similarity between two texts.

    ``overall``, ``jaccard``, ``cosine`` and ``edit_distance`` are ratios
    in [0, 1].
    """

    overall: float
    jaccard: float
    cosine: float
    edit_distance: float
    word_matches: tuple[WordMatch, ...] = field(default_factory=tuple)
    line_matches: tuple[LineMatch, ...] = field(default_factory=tuple)

    @classmethod
    def empty(cls) -> SimilarityReport:
        """Zero-valued report used for empty or absent input."""
        return cls(overall=0.0, jaccard=0.0, cosine=0.0, edit_distance=0.0)

    def to_dict(self) -> dict[str, Any]:
        return {
            "overallSimilarity": self.overall,
            "jaccardSimilarity": self.jaccard,
            "cosineSimilarity": self.cosine,
            "levenshteinSimilarity": self.edit_distance,
            "wordMatches": [m.to_dict() for m in self.word_matches],
            "lineMatches": [m.to_dict() for m in self.line_matches],
        }


@dataclass(frozen=True)
class CandidateDocument:
    """A stored document that a query is compared against."""

    id: Any
    name: str
    content: str = ""

    @classmethod
    def from_mapping(cls, record: Mapping[str, Any]) -> CandidateDocument:
        """Build a candidate from a record with ``id``, ``name`` and ``content``.

        Raises:
            TextInputError: If ``id`` or ``name`` is missing, or content is not text

        """
        missing = [key for key in ("id", "name") if key not in record]
        if missing:
            raise TextInputError(f"Candidate record is missing {missing}")
        return cls(
            id=record["id"],
            name=str(record["name"]),
            content=ensure_text(record.get("content"), field="content"),
        )

    @classmethod
    def coerce(cls, candidate: CandidateDocument | Mapping[str, Any]) -> CandidateDocument:
        if isinstance(candidate, CandidateDocument):
            return candidate
        if isinstance(candidate, Mapping):
            return cls.from_mapping(candidate)
        raise TextInputError(
            f"Candidate must be a CandidateDocument or mapping, got {type(candidate).__name__}",
        )


@dataclass(frozen=True)
class CandidateResult:
    """Batch comparison result for one candidate."""

    id: Any
    name: str
    similarity_percentage: str

    @property
    def similarity(self) -> float:
        return float(self.similarity_percentage)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "similarity": self.similarity_percentage,
        }


@dataclass(frozen=True)
class PairwiseComparison:
    """Detailed comparison of two stored documents."""

    document_a: tuple[Any, str]
    document_b: tuple[Any, str]
    report: SimilarityReport

    @property
    def similarity(self) -> float:
        return self.report.overall

    def to_dict(self, include_matches: bool = True) -> dict[str, Any]:
        result: dict[str, Any] = {
            "document1": {"id": self.document_a[0], "name": self.document_a[1]},
            "document2": {"id": self.document_b[0], "name": self.document_b[1]},
            "similarity": self.report.overall,
        }
        if include_matches:
            result["wordMatches"] = [m.to_dict() for m in self.report.word_matches]
            result["lineMatches"] = [m.to_dict() for m in self.report.line_matches]
        return result


__all__ = [
    "CandidateDocument",
    "CandidateResult",
    "LineMatch",
    "PairwiseComparison",
    "SimilarityReport",
    "SimilarityWeights",
    "WordMatch",
]
