"""
Build the keyword index and print index analytics.

Usage:
    python build_index.py --docs docs.txt --noise noisewords.txt

The documents file lists one document per line (plain text or .html);
relative names are resolved next to the documents file. The noise-words
file lists words that are never indexed.

Output:
  - Analytics table printed to console
  - With --show-index, the index as JSON (keyword -> [[document, frequency], ...])
"""

import json
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent))

from little_search.index_builder import make_index
from little_search.search_cli import configure_logging


def main() -> None:
    import argparse
    parser = argparse.ArgumentParser(description="Build the keyword index")
    parser.add_argument(
        "--docs",
        type=Path,
        default=Path("docs.txt"),
        help="File listing the documents to index (default: docs.txt)",
    )
    parser.add_argument(
        "--noise",
        type=Path,
        default=Path("noisewords.txt"),
        help="File listing noise words (default: noisewords.txt)",
    )
    parser.add_argument(
        "--show-index",
        action="store_true",
        help="Print the full index as JSON",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log each merge",
    )
    args = parser.parse_args()
    configure_logging(args.verbose)

    try:
        index = make_index(args.docs, args.noise)
    except FileNotFoundError as e:
        print(f"Could not build index: {e}")
        sys.exit(1)

    documents = {o.document for kw in index.keywords() for o in index.get_occurrences(kw)}

    print("\n" + "=" * 50)
    print("INDEX ANALYTICS")
    print("=" * 50)
    print()
    print("| Metric                        | Value |")
    print("|-------------------------------|-------|")
    print(f"| Documents with keywords       | {len(documents)} |")
    print(f"| Number of unique keywords     | {len(index)} |")
    print(f"| Total keyword occurrences     | {index.total_occurrences()} |")
    print()
    print("=" * 50)

    if args.show_index:
        print(json.dumps(index.to_dict(), indent=2, ensure_ascii=False))
    print()


if __name__ == "__main__":
    main()
