"""Console harness for comparing documents without running the HTTP server.

Compare two files (``.txt``, ``.md`` or ``.docx``)::

    python -m wordmover.cli first.txt second.docx --embeddings vectors.txt

Pass more than one candidate to rank them by distance to the first file::

    python -m wordmover.cli query.txt a.txt b.txt c.md --top-k 2
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from .comparator import WordVectorComparator
from .config import DEFAULT_MODEL, DEFAULT_SOLVER, get_embeddings_path
from .documents import Document, load_document
from .embeddings import KeyedVectors, WordVectorModel, available_models, get_model
from .errors import ComparisonError
from .logging_config import configure_logging
from .solvers import available_solvers, get_solver


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer: '{value}'") from exc
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Word Mover's distance and embedding similarity between documents."
    )
    parser.add_argument("query", type=Path, help="Reference document.")
    parser.add_argument(
        "candidates",
        nargs="+",
        type=Path,
        help="One document to compare against, or several to rank.",
    )
    parser.add_argument(
        "--embeddings",
        type=Path,
        default=None,
        help="Word vectors in word2vec text format (implies the 'keyed' model).",
    )
    parser.add_argument(
        "--model",
        choices=sorted(available_models()),
        default=DEFAULT_MODEL,
        help="Embedding source used when --embeddings is not given.",
    )
    parser.add_argument(
        "--solver",
        choices=sorted(available_solvers()),
        default=DEFAULT_SOLVER,
        help="Distance solver applied to the bag-of-words distributions.",
    )
    parser.add_argument(
        "--top-k", type=positive_int, default=5, help="Hits to show when ranking."
    )
    parser.add_argument(
        "--similarity",
        action="store_true",
        help="Also report the unit-core similarity for a pairwise comparison.",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging.")
    return parser.parse_args(argv)


def load_model(args: argparse.Namespace) -> WordVectorModel:
    if args.embeddings is not None:
        return KeyedVectors.load(args.embeddings)
    if args.model == "keyed":
        return KeyedVectors.load(get_embeddings_path())
    return get_model(args.model)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        model = load_model(args)
    except (FileNotFoundError, RuntimeError, ValueError) as exc:
        print(f"[error] Cannot load embeddings: {exc}", file=sys.stderr)
        return 1

    try:
        query = load_document(args.query)
        candidates = [load_document(path) for path in args.candidates]
    except (OSError, ValueError) as exc:
        print(f"[error] Cannot read document: {exc}", file=sys.stderr)
        return 1

    comparator = WordVectorComparator(model, get_solver(args.solver))

    try:
        if len(candidates) == 1:
            _report_pair(comparator, query, candidates[0], with_similarity=args.similarity)
        else:
            _report_ranking(comparator, query, candidates, top_k=args.top_k)
    except ComparisonError as exc:
        print(f"[error] {type(exc).__name__}: {exc}", file=sys.stderr)
        return 1
    return 0


def _report_pair(
    comparator: WordVectorComparator,
    first: Document,
    second: Document,
    *,
    with_similarity: bool,
) -> None:
    distance = comparator.wm_distance(first.tokens, second.tokens)
    print(f"{first.name} <-> {second.name}")
    print(f"  distance ({comparator.solver.name}): {distance:.6f}")
    if with_similarity:
        print(f"  similarity: {comparator.similarity(first.tokens, second.tokens):.6f}")


def _report_ranking(
    comparator: WordVectorComparator,
    query: Document,
    candidates: List[Document],
    *,
    top_k: int,
) -> None:
    hits = comparator.rank(query.tokens, [doc.tokens for doc in candidates], top_k=top_k)
    print(f"Nearest to {query.name} ({comparator.solver.name}):")
    for rank, hit in enumerate(hits, start=1):
        print(f"  {rank}. {candidates[hit.position].name}  {hit.distance:.6f}")
    if not hits:
        print("  no comparable documents")


if __name__ == "__main__":
    sys.exit(main())
