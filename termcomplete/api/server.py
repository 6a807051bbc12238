"""Serve the autocomplete API with uvicorn."""

from __future__ import annotations

import argparse
import dataclasses
import logging
from pathlib import Path

import uvicorn

from termcomplete.api.app import create_app
from termcomplete.autocomplete.backends import BACKENDS
from termcomplete.config.logging_config import setup_logging
from termcomplete.config.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Serve weighted prefix suggestions over HTTP.")
    parser.add_argument("--host", default="127.0.0.1", help="Bind address.")
    parser.add_argument("--port", type=int, default=8000, help="Bind port.")
    parser.add_argument("--backend", choices=sorted(BACKENDS), default=None, help="Index implementation.")
    parser.add_argument("--vocabularies", type=Path, default=None, help="Directory of <label>.txt vocabularies.")
    parser.add_argument("--default-vocabulary", default=None, help="Label used when a request names none.")
    return parser


def settings_from_args(args: argparse.Namespace, base: Settings) -> tuple[Settings, Path]:
    """Apply command-line overrides; returns the settings and vocabularies dir."""
    overrides = {}
    if args.backend:
        overrides["backend"] = args.backend
    if args.default_vocabulary:
        overrides["default_vocabulary"] = args.default_vocabulary
    autocomplete = dataclasses.replace(base.autocomplete, **overrides)
    settings = dataclasses.replace(base, autocomplete=autocomplete)
    return settings, args.vocabularies or settings.vocabularies_dir


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    base = get_settings()
    setup_logging(log_dir=base.logs_dir)
    settings, vocab_dir = settings_from_args(args, base)

    if not vocab_dir.is_dir():
        logger.error("Vocabulary directory %s does not exist", vocab_dir)
        return 1

    app = create_app(settings, vocabularies_dir=vocab_dir)
    logger.info(
        "Serving %s on %s:%d (%s backend, default '%s')",
        vocab_dir, args.host, args.port,
        settings.autocomplete.backend, settings.autocomplete.default_vocabulary,
    )
    uvicorn.run(app, host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
