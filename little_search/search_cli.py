"""
Interactive "OR" search over two keywords.

Builds the keyword index from a documents file and a noise-words file, then
reads queries of the form "kw1 kw2" and prints up to five matching documents
in descending order of frequency.

Usage (from repo root):
    python -m little_search.search_cli \
        --docs docs.txt \
        --noise noisewords.txt
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, List, Optional

from .index_builder import make_index
from .posting import InvertedIndex


def parse_query(raw_query: str) -> Optional[List[str]]:
    """
    Split a raw query into two keywords. A single word is searched as both.
    Returns None when the query does not have one or two words.
    """
    words = raw_query.split()
    if len(words) == 1:
        return [words[0], words[0]]
    if len(words) == 2:
        return words
    return None


def print_results(documents: Optional[List[str]]) -> None:
    if documents is None:
        print("No documents matched.")
        return
    for rank, document in enumerate(documents, start=1):
        print(f"{rank}. {document}")


def run_search_loop(index: InvertedIndex) -> None:
    """
    Interactive command-line search loop.
    """
    print(f"Indexed {len(index)} keywords.")
    print("Enter two keywords per query (OR semantics). Empty line or Ctrl+C to exit.")

    while True:
        try:
            raw_query = input("query> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if not raw_query:
            break

        keywords = parse_query(raw_query)
        if keywords is None:
            print("Please enter one or two keywords.")
            continue

        print_results(index.top5search(*keywords))


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def main(argv: Iterable[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Top-5 two-keyword search.")
    parser.add_argument(
        "--docs",
        type=Path,
        default=Path("docs.txt"),
        help="File listing the documents to index.",
    )
    parser.add_argument(
        "--noise",
        type=Path,
        default=Path("noisewords.txt"),
        help="File listing noise words to ignore.",
    )
    parser.add_argument(
        "--query",
        nargs=2,
        metavar=("KW1", "KW2"),
        default=None,
        help="Run one query and exit instead of prompting.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log indexing details.",
    )
    args = parser.parse_args(list(argv) if argv is not None else None)
    configure_logging(args.verbose)

    try:
        index = make_index(args.docs, args.noise)
    except FileNotFoundError as e:
        print(f"Could not build index: {e}")
        sys.exit(1)

    if args.query:
        print_results(index.top5search(*args.query))
        return

    run_search_loop(index)


if __name__ == "__main__":
    main()
