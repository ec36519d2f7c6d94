#!/usr/bin/env python3
"""Rank Candidates CLI - Compare a query text against a file of candidate documents.

The candidate file (CSV, JSON or Excel) needs ``id``, ``name`` and ``content``
columns.

Usage:
    python scripts/rank_candidates.py "some query text" data/candidates.csv
    python scripts/rank_candidates.py query.txt data/candidates.json --file --top 5
    python scripts/rank_candidates.py query.txt data/candidates.xlsx --file --output data/ranked.csv
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from docsim.services import ComparisonService, InMemoryDocumentRepository  # noqa: E402
from docsim.similarity.types import CandidateDocument  # noqa: E402
from docsim.utils.io_utils import (  # noqa: E402
    load_candidates,
    load_settings,
    read_text_file,
    write_results_csv,
)
from docsim.utils.logging_utils import LOG_FORMAT, setup_logging  # noqa: E402
from docsim.utils.path_utils import get_config_path  # noqa: E402
from docsim.utils.settings import validate_settings  # noqa: E402


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Rank candidate documents by similarity to a query",
    )
    parser.add_argument("query", help="Query text (or path with --file)")
    parser.add_argument("candidates", help="Candidate file (.csv, .json, .xlsx, .xls)")
    parser.add_argument(
        "--file", action="store_true", help="Treat the query argument as a path to a text file",
    )
    parser.add_argument(
        "--config", default=str(get_config_path()), help="Path to config file",
    )
    parser.add_argument("--top", type=int, default=None, help="Only show the N best matches")
    parser.add_argument("--output", default=None, help="Write the ranked table to this CSV path")

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

    query = read_text_file(args.query) if args.file else args.query

    try:
        records = load_candidates(args.candidates)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    repository = InMemoryDocumentRepository()
    try:
        for record in records:
            repository.add(CandidateDocument.from_mapping(record))

        service = ComparisonService(repository, settings)
        ranked = service.rank_text(query, top_n=args.top)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if ranked.empty:
        print("No documents found for comparison")
        return 0

    print(ranked[["id", "name", "similarity_percentage"]].to_string(index=False))

    if args.output:
        write_results_csv(ranked, args.output)
        print(f"\nRanked results written to {args.output}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
