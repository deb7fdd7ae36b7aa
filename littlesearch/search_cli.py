"""
Interactive search over a little search engine index.

Each query line holds two keywords; documents containing either are listed,
highest frequency first, at most five.

Usage (from repo root):
    python -m littlesearch.search_cli --docs docs.txt --noise noisewords.txt
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, List

from .index_builder import LittleSearchEngine
from .tokenizer import ascii_lower, nltk_noise_words

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def add_index_arguments(parser: argparse.ArgumentParser) -> None:
    """Arguments shared by the command-line tools that build an index."""
    parser.add_argument(
        "--docs",
        type=Path,
        default=Path("docs.txt"),
        help="File listing the document file names.",
    )
    parser.add_argument(
        "--noise",
        type=Path,
        default=Path("noisewords.txt"),
        help="File listing the noise words.",
    )
    parser.add_argument(
        "--root",
        type=Path,
        default=None,
        help="Directory that document file names are relative to (default: current directory).",
    )
    parser.add_argument(
        "--html",
        action="store_true",
        help="Index .html/.htm documents by their visible text instead of as plain text.",
    )
    parser.add_argument(
        "--nltk-noise-words",
        action="store_true",
        help="Also treat NLTK's English stop words as noise words.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every document as it is indexed.",
    )


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
    )


def engine_from_args(args: argparse.Namespace) -> LittleSearchEngine:
    """Build an engine from parsed arguments. Raises FileNotFoundError."""
    noise_words = nltk_noise_words() if args.nltk_noise_words else None
    engine = LittleSearchEngine(noise_words=noise_words, html=args.html)
    engine.make_index(args.docs, args.noise, root=args.root)
    return engine


def parse_query(raw_query: str) -> List[str] | None:
    """
    Split a query line into two lowercased keywords. A single word is
    searched on its own. Returns None when the line has more than two words.
    """
    words = [ascii_lower(w) for w in raw_query.split()]
    if len(words) == 1:
        return [words[0], words[0]]
    if len(words) == 2:
        return words
    return None


def run_search_loop(engine: LittleSearchEngine) -> None:
    """
    Interactive command-line search loop.
    """
    print(f"Loaded {len(engine.index)} keywords from {len(engine.documents)} documents.")
    print("Enter two keywords per query. Empty line or Ctrl+C to exit.")

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
            print("Enter one or two keywords.")
            continue

        results = engine.top5_search(*keywords)
        if not results:
            print("No matches.")
            continue
        for rank, doc in enumerate(results, start=1):
            print(f"{rank}. {doc}")


def main(argv: Iterable[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Two-keyword top-5 search.")
    add_index_arguments(parser)
    args = parser.parse_args(list(argv) if argv is not None else None)
    configure_logging(args.verbose)

    try:
        engine = engine_from_args(args)
    except FileNotFoundError as e:
        print(e)
        sys.exit(1)

    run_search_loop(engine)


if __name__ == "__main__":
    main()
