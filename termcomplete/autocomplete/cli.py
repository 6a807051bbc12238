"""Autocomplete CLI — query a vocabulary file from the command line."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from termcomplete.autocomplete.backends import BACKENDS, create_autocompletor
from termcomplete.autocomplete.loader import read_vocabulary
from termcomplete.config.logging_config import setup_logging
from termcomplete.config.settings import get_settings

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Weighted prefix autocompletion.")
    sub = parser.add_subparsers(dest="command")

    def add_vocab_args(p: argparse.ArgumentParser, backend: bool = True) -> None:
        p.add_argument("--vocab", type=Path, required=True, help="Vocabulary file (<weight>\\t<word> lines).")
        if backend:
            p.add_argument("--backend", choices=sorted(BACKENDS), default=None, help="Index implementation.")

    query = sub.add_parser("query", help="Top matches for a prefix.")
    query.add_argument("prefix", help="Prefix to complete.")
    query.add_argument("--top-k", type=int, default=None, help="Max matches.")
    add_vocab_args(query)

    weight = sub.add_parser("weight", help="Weight of a single term.")
    weight.add_argument("term", help="Term to look up.")
    add_vocab_args(weight)

    compare = sub.add_parser("compare", help="Check both backends agree on a prefix.")
    compare.add_argument("prefix", help="Prefix to complete.")
    compare.add_argument("--top-k", type=int, default=None, help="Max matches.")
    add_vocab_args(compare, backend=False)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    settings = get_settings()
    setup_logging(log_dir=settings.logs_dir)
    ac = settings.autocomplete
    top_k = getattr(args, "top_k", None)
    top_k = ac.max_suggestions if top_k is None else top_k

    try:
        words, weights = read_vocabulary(args.vocab)

        if args.command == "compare":
            indexes = {
                name: create_autocompletor(words, weights, backend=name)
                for name in sorted(BACKENDS)
            }
            rankings = {
                name: [index.weight_of(w) for w in index.top_matches(args.prefix, top_k)]
                for name, index in indexes.items()
            }
            agree = len({tuple(r) for r in rankings.values()}) == 1
            for name, ranking in rankings.items():
                print(f"{name:>8}: {ranking}")
            print("agree" if agree else "DISAGREE")
            return 0 if agree else 1

        index = create_autocompletor(words, weights, backend=args.backend or ac.backend)

        if args.command == "query":
            matches = index.top_matches(args.prefix, top_k)
            if not matches:
                print("No matches.")
            for word in matches:
                print(f"  {index.weight_of(word):10.1f}  {word}")
        else:
            print(index.weight_of(args.term))
    except Exception as exc:
        logger.exception("Autocomplete command '%s' failed: %s", args.command, exc)
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
