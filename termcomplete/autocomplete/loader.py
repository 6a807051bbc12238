"""
Vocabulary file reader.

Files hold one ``<weight><TAB><word>`` entry per line. An optional first
line with a lone integer is an entry count and is skipped; blank lines
and ``#`` comments are ignored.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

logger = logging.getLogger(__name__)


def parse_vocabulary(
    lines: Iterable[str],
    source: str = "<vocabulary>",
) -> tuple[list[str], list[float]]:
    """Parse vocabulary lines into parallel ``(words, weights)`` lists."""
    words: list[str] = []
    weights: list[float] = []
    seen_entry = False

    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue

        if not seen_entry and line.isdigit():
            # Leading entry count
            seen_entry = True
            continue
        seen_entry = True

        weight_text, sep, word = line.partition("\t")
        word = word.strip()
        if not sep or not word:
            raise ValueError(f"{source}:{lineno}: expected '<weight>\\t<word>', got {raw!r}")
        try:
            weight = float(weight_text)
        except ValueError:
            raise ValueError(f"{source}:{lineno}: bad weight {weight_text!r}") from None

        words.append(word)
        weights.append(weight)

    return words, weights


def read_vocabulary(path: Path) -> tuple[list[str], list[float]]:
    """Read a vocabulary file. Raises FileNotFoundError if *path* is missing."""
    with open(path, encoding="utf-8") as f:
        words, weights = parse_vocabulary(f, source=str(path))
    logger.info("Read %d terms from %s", len(words), path)
    return words, weights
