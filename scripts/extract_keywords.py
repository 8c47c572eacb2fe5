#!/usr/bin/env python3
"""
Extract ranked keywords from a text file (or stdin) with YAKE.

Usage:
    python scripts/extract_keywords.py document.txt
    python scripts/extract_keywords.py document.txt --top 10 --scores
    cat document.txt | python scripts/extract_keywords.py - --json
    python scripts/extract_keywords.py document.txt --stopwords config/stopwords.json

Output:
    One keyword per line (optionally tab-separated with its score), or a JSON
    array of {"keyword", "score"} objects with --json.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Final, TextIO

from keyword_extraction.core.exceptions import ConfigurationError, StopwordsLoadError
from keyword_extraction.core.logging import configure_logging, extraction_context
from keyword_extraction.nlp.yake_extractor import YAKEConfig, YAKEExtractor
from keyword_extraction.yake.params import (
    DEFAULT_NGRAM,
    DEFAULT_THRESHOLD,
    DEFAULT_WINDOW_SIZE,
)

# =============================================================================
# Constants
# =============================================================================

STDIN_MARKER: Final[str] = "-"
DEFAULT_TOP: Final[int] = 20


def build_parser() -> argparse.ArgumentParser:
    """Command line definition."""
    parser = argparse.ArgumentParser(description="Extract ranked keywords with YAKE")
    parser.add_argument("input", help="Text file to read, or '-' for stdin")
    parser.add_argument("--top", type=int, default=DEFAULT_TOP, help="Number of keywords")
    parser.add_argument("--ngram", type=int, default=DEFAULT_NGRAM, help="Maximum words per keyword")
    parser.add_argument(
        "--window-size", type=int, default=DEFAULT_WINDOW_SIZE, help="Neighbor window size"
    )
    parser.add_argument(
        "--threshold", type=float, default=DEFAULT_THRESHOLD, help="Deduplication threshold (0, 1]"
    )
    parser.add_argument("--stopwords", type=str, default=None, help="JSON file of extra stopwords")
    parser.add_argument(
        "--replace-stopwords",
        action="store_true",
        help="Use --stopwords alone instead of merging with the English table",
    )
    parser.add_argument("--scores", action="store_true", help="Print scores next to keywords")
    parser.add_argument("--json", action="store_true", help="Print a JSON array")
    parser.add_argument("--log-level", type=str, default="WARNING", help="Log level")
    return parser


def read_input(source: str, stdin: TextIO = sys.stdin) -> str:
    """Read the document from a file path or stdin."""
    if source == STDIN_MARKER:
        return stdin.read()
    return Path(source).read_text(encoding="utf-8")


def format_results(
    pairs: list[tuple[str, float]],
    with_scores: bool = False,
    as_json: bool = False,
) -> str:
    """Render (keyword, score) pairs for printing."""
    if as_json:
        return json.dumps(
            [{"keyword": keyword, "score": score} for keyword, score in pairs],
            ensure_ascii=False,
            indent=2,
        )
    if with_scores:
        return "\n".join(f"{keyword}\t{score:.6f}" for keyword, score in pairs)
    return "\n".join(keyword for keyword, _ in pairs)


def run(argv: list[str] | None = None, stdin: TextIO = sys.stdin) -> tuple[int, str]:
    """Parse arguments, extract keywords and return (exit code, output)."""
    args = build_parser().parse_args(argv)
    configure_logging(log_level=args.log_level, json_output=False)

    try:
        text = read_input(args.input, stdin)
    except FileNotFoundError:
        return 1, f"❌ File not found: {args.input}"

    try:
        extractor = YAKEExtractor(
            YAKEConfig(
                top_n=args.top,
                n_gram_size=args.ngram,
                dedup_threshold=args.threshold,
                window_size=args.window_size,
                stopwords_path=args.stopwords,
                merge_stopwords=not args.replace_stopwords,
            )
        )
    except ConfigurationError as e:
        return 2, f"❌ Invalid parameters: {e}"
    except FileNotFoundError:
        return 1, f"❌ Stopwords file not found: {args.stopwords}"
    except (StopwordsLoadError, json.JSONDecodeError) as e:
        return 2, f"❌ Invalid stopwords file: {e}"

    with extraction_context(source="stdin" if args.input == STDIN_MARKER else "file"):
        pairs = extractor.extract(text)
    return 0, format_results(pairs, with_scores=args.scores, as_json=args.json)


def main() -> None:
    """Main entry point."""
    code, output = run()
    stream = sys.stdout if code == 0 else sys.stderr
    if output:
        print(output, file=stream)
    sys.exit(code)


if __name__ == "__main__":
    main()
