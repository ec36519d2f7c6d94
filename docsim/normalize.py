"""Text normalization and tokenization for similarity scoring.

This module handles:
- Input validation with a single explicit string conversion
- Normalized text (lower-case, punctuation stripped, whitespace collapsed)
- Word tokenization for the set and vector metrics
- Line splitting for line-level matching
"""

import logging
import re
from collections import Counter
from typing import Any, Optional

logger = logging.getLogger(__name__)

PUNCTUATION_RE = re.compile(r"[^\w\s]")
WHITESPACE_RE = re.compile(r"\s+")
NON_WORD_RE = re.compile(r"\W+")

# Tokens of this length or shorter are ignored by Jaccard and cosine
MIN_TOKEN_LENGTH = 2


class TextInputError(ValueError):
    """Raised when a similarity input is not text."""


def ensure_text(value: Any, field: str = "text") -> str:
    """Return ``value`` as a ``str``.

    ``None`` is treated as absent text and becomes ``""``. ``bytes`` are
    decoded as UTF-8. Every other type is rejected.

    Args:
        value: Raw input
        field: Name used in error messages

    Returns:
        The input as a string

    Raises:
        TextInputError: If the value is not text or cannot be decoded

    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        try:
            return bytes(value).decode("utf-8")
        except UnicodeDecodeError as e:
            raise TextInputError(f"{field} is not valid UTF-8: {e}") from e
    raise TextInputError(
        f"{field} must be a string, got {type(value).__name__}",
    )


def normalize_text(text: Optional[str]) -> str:
    """Normalize text for edit-distance and line comparison.

    Args:
        text: Raw text

    Returns:
        Lower-cased text with punctuation removed and whitespace collapsed

    """
    if not text:
        return ""
    cleaned = PUNCTUATION_RE.sub("", text.lower())
    return WHITESPACE_RE.sub(" ", cleaned).strip()


def split_words(text: Optional[str]) -> list[str]:
    """Split normalized text into words, keeping duplicates and short words."""
    normalized = normalize_text(text)
    return normalized.split(" ") if normalized else []


def tokenize(text: Optional[str]) -> list[str]:
    """Tokenize text for the set and vector metrics.

    Tokens come from the normalized text split on runs of non-word
    characters; tokens shorter than ``MIN_TOKEN_LENGTH`` are dropped.
    Order and duplicates are preserved.
    """
    normalized = normalize_text(text)
    return [
        token
        for token in NON_WORD_RE.split(normalized)
        if len(token) >= MIN_TOKEN_LENGTH
    ]


def token_set(text: Optional[str]) -> set[str]:
    """Distinct tokens of ``text``."""
    return set(tokenize(text))


def term_frequencies(text: Optional[str]) -> Counter[str]:
    """Term-frequency mapping (token -> count) of ``text``."""
    return Counter(tokenize(text))


def split_lines(text: Optional[str]) -> list[str]:
    """Split text on line feeds.

    A trailing carriage return is kept with its line and is removed later
    by normalization, so CRLF input matches LF input.
    """
    if text is None:
        return []
    return text.split("\n")
