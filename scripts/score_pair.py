#!/usr/bin/env python3
"""Score Pair CLI - Debug utility to trace the detailed similarity of two texts.

Usage:
    python scripts/score_pair.py "the cat sat on the mat" "the cat ran to the mat"
    python scripts/score_pair.py essay_a.txt essay_b.txt --file
    python scripts/score_pair.py essay_a.txt essay_b.txt --file --json
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Optional

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from docsim.normalize import normalize_text, term_frequencies, token_set  # noqa: E402
from docsim.services import ComparisonService, InMemoryDocumentRepository  # noqa: E402
from docsim.similarity.metrics import edit_distance  # noqa: E402
from docsim.similarity.scoring import COMBINED_WEIGHTS  # noqa: E402
from docsim.similarity.types import SimilarityReport  # noqa: E402
from docsim.utils.io_utils import load_settings, read_text_file  # noqa: E402
from docsim.utils.logging_utils import LOG_FORMAT, setup_logging  # noqa: E402
from docsim.utils.path_utils import get_config_path  # noqa: E402
from docsim.utils.settings import get_edit_distance_engine, validate_settings  # noqa: E402


def trace_scoring(
    text_a: str,
    text_b: str,
    settings: Optional[dict[str, Any]] = None,
) -> SimilarityReport:
    """Trace the complete scoring process for two texts."""
    service = ComparisonService(InMemoryDocumentRepository(), settings)
    engine = get_edit_distance_engine(settings)

    print("=" * 80)
    print("SIMILARITY SCORING TRACE")
    print("=" * 80)

    print("\n1. INPUT TEXTS:")
    print(f"   Text A: {len(text_a)} chars, preview {text_a[:60]!r}")
    print(f"   Text B: {len(text_b)} chars, preview {text_b[:60]!r}")

    norm_a = normalize_text(service.truncate(text_a))
    norm_b = normalize_text(service.truncate(text_b))
    print("\n2. NORMALIZATION:")
    print(f"   Text A: {norm_a[:60]!r}")
    print(f"   Text B: {norm_b[:60]!r}")

    report = service.compare_pair(text_a, text_b)

    print("\n3. JACCARD SIMILARITY:")
    tokens_a = token_set(norm_a)
    tokens_b = token_set(norm_b)
    print(f"   Intersection: {len(tokens_a & tokens_b)} tokens")
    print(f"   Union: {len(tokens_a | tokens_b)} tokens")
    print(f"   Jaccard: {report.jaccard:.4f}")

    print("\n4. COSINE SIMILARITY:")
    freq_a = term_frequencies(norm_a)
    freq_b = term_frequencies(norm_b)
    print(f"   Terms A: {sum(freq_a.values())} ({len(freq_a)} distinct)")
    print(f"   Terms B: {sum(freq_b.values())} ({len(freq_b)} distinct)")
    print(f"   Cosine: {report.cosine:.4f}")

    print(f"\n5. EDIT DISTANCE ({engine}):")
    if norm_a and norm_b:
        print(f"   Distance: {edit_distance(norm_a, norm_b, engine)}")
        print(f"   Max length: {max(len(norm_a), len(norm_b))}")
    print(f"   Similarity: {report.edit_distance:.4f}")

    print("\n6. COMBINED SCORE:")
    print(
        f"   {COMBINED_WEIGHTS.jaccard} × {report.jaccard:.4f} + "
        f"{COMBINED_WEIGHTS.cosine} × {report.cosine:.4f} + "
        f"{COMBINED_WEIGHTS.edit_distance} × {report.edit_distance:.4f} = {report.overall:.4f}",
    )

    print("\n7. LINE MATCHES:")
    for match in report.line_matches:
        print(f"   {match.score:6.2%}  {match.line[:35]!r} -> {match.best_match[:35]!r}")

    matched_words = sum(m.match_score for m in report.word_matches)
    print(f"\n8. WORD MATCHES: {matched_words}/{len(report.word_matches)} words of A found in B")

    print("=" * 80)
    return report


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Trace detailed similarity scoring for two texts",
    )
    parser.add_argument("text_a", help="First text (or path with --file)")
    parser.add_argument("text_b", help="Second text (or path with --file)")
    parser.add_argument(
        "--file", action="store_true", help="Treat arguments as paths to text files",
    )
    parser.add_argument(
        "--config", default=str(get_config_path()), help="Path to config file",
    )
    parser.add_argument(
        "--json", action="store_true", help="Print the report as JSON instead of a trace",
    )

    args = parser.parse_args(argv)

    settings = load_settings(args.config)
    log_settings = settings.get("logging") or {}
    setup_logging(
        log_settings.get("level", "INFO"),
        log_settings.get("file"),
        log_settings.get("format", LOG_FORMAT),
    )
    for warning in validate_settings(settings):
        print(f"Warning: {warning}", file=sys.stderr)

    if args.file:
        text_a = read_text_file(args.text_a)
        text_b = read_text_file(args.text_b)
    else:
        text_a, text_b = args.text_a, args.text_b

    try:
        if args.json:
            service = ComparisonService(InMemoryDocumentRepository(), settings)
            report = service.compare_pair(text_a, text_b)
            print(json.dumps(report.to_dict(), indent=2))
            return 0

        report = trace_scoring(text_a, text_b, settings)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"\n🎯 FINAL RESULT: {report.overall:.2%} similarity")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
