"""Tests for degenerate inputs in similarity scoring.

This module tests handling of degenerate inputs:
- Empty or absent text gives the zero-valued report
- Whitespace-only and punctuation-only inputs
- Non-text inputs are rejected, not coerced
- Empty candidate lists give empty results
"""

import logging

import pytest

from docsim.normalize import TextInputError
from docsim.similarity.batch import compare_against_candidates, compare_documents_pairwise
from docsim.similarity.scoring import combined_similarity
from docsim.similarity.types import SimilarityReport


class TestScoringDegenerate:
    """Test degenerate input handling for similarity scoring."""

    @pytest.mark.parametrize(
        "text_a,text_b",
        [("", "anything"), ("anything", ""), ("", ""), (None, "anything"), ("anything", None)],
    )
    def test_empty_or_absent_text_gives_zero_report(self, text_a, text_b):
        report = combined_similarity(text_a, text_b)

        assert report == SimilarityReport.empty()
        assert report.overall == 0
        assert report.word_matches == ()
        assert report.line_matches == ()

    def test_empty_text_logs_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="docsim.similarity.scoring"):
            combined_similarity("", "anything")
        assert "Empty text provided" in caplog.text

    def test_whitespace_only_is_not_empty(self):
        """Whitespace is text; every metric guards its own zero division."""
        report = combined_similarity("   ", "\n\n")

        assert report.jaccard == 0.0
        assert report.cosine == 0.0
        assert report.edit_distance == 0.0
        assert report.overall == 0.0
        assert report.word_matches == ()
        assert len(report.line_matches) == 1

    def test_punctuation_only_inputs(self):
        report = combined_similarity("?!.", "...")
        assert report.overall == 0.0
        assert 0.0 <= report.overall <= 1.0

    @pytest.mark.parametrize("bad", [42, 3.14, ["text"], {"text": "x"}, object()])
    def test_non_text_rejected(self, bad):
        with pytest.raises(TextInputError):
            combined_similarity(bad, "text")
        with pytest.raises(TextInputError):
            combined_similarity("text", bad)

    def test_bytes_accepted_as_utf8(self):
        report = combined_similarity(b"the cat sat", "the cat sat")
        assert report.overall == pytest.approx(1.0)

    def test_empty_candidate_list_empty_results(self):
        assert compare_against_candidates("hello world", []) == []
        assert compare_documents_pairwise([]) == []

    def test_single_character_inputs(self):
        report = combined_similarity("a", "a")

        # No tokens survive the length filter; edit distance still sees the text
        assert report.jaccard == 0.0
        assert report.cosine == 0.0
        assert report.edit_distance == 1.0
        assert report.overall == pytest.approx(0.2)

    def test_very_long_input_stays_bounded(self):
        text_a = "lorem ipsum dolor sit amet " * 40
        text_b = "dolor sit amet lorem ipsum " * 40
        report = combined_similarity(text_a, text_b)

        assert 0.0 <= report.overall <= 1.0
        assert report.jaccard == 1.0
        assert report.cosine == pytest.approx(1.0)
