"""
Build the keyword index and print analytics for it.

Usage:
    python build_index.py --docs docs.txt --noise noisewords.txt

Output:
  - Analytics table printed to console
  - With --dump, the keyword -> [[document, frequency], ...] index as JSON
"""

import json
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent))

from littlesearch.search_cli import add_index_arguments, configure_logging, engine_from_args


def main() -> None:
    import argparse
    parser = argparse.ArgumentParser(description="Build the keyword index and report on it")
    add_index_arguments(parser)
    parser.add_argument(
        "--dump",
        type=Path,
        default=None,
        help="Write the index as JSON to this path (for inspection)",
    )
    parser.add_argument(
        "--top",
        type=int,
        default=10,
        help="Number of keywords with the longest occurrence lists to show",
    )
    args = parser.parse_args()
    configure_logging(args.verbose)

    try:
        engine = engine_from_args(args)
    except FileNotFoundError as e:
        print(e)
        sys.exit(1)

    if not engine.documents:
        print("No documents listed in", args.docs)
        sys.exit(1)

    index = engine.index
    num_occurrences = sum(len(index[kw]) for kw in index.keywords())
    widest = sorted(index.keywords(), key=lambda kw: (-len(index[kw]), kw))[: args.top]

    print("\n" + "=" * 50)
    print("INDEX ANALYTICS")
    print("=" * 50)
    print()
    print("| Metric                    | Value |")
    print("|---------------------------|-------|")
    print(f"| Number of indexed documents | {len(engine.documents)} |")
    print(f"| Number of unique keywords   | {len(index)} |")
    print(f"| Number of occurrences       | {num_occurrences} |")
    print(f"| Number of noise words       | {len(engine.noise_words)} |")
    print()
    if widest:
        print("| Keyword | Documents | Top document |")
        print("|---------|-----------|--------------|")
        for kw in widest:
            top = index[kw][0]
            print(f"| {kw} | {len(index[kw])} | {top.document} ({top.frequency}) |")
        print()
    print("=" * 50)

    if args.dump is not None:
        with open(args.dump, "w", encoding="utf-8") as f:
            json.dump(index.to_dict(), f, indent=2, ensure_ascii=False)
        print(f"\nIndex saved to: {args.dump}")
    print()


if __name__ == "__main__":
    main()
