"""
Shared test fixtures for the termcomplete test suite.

Provides the small reference vocabulary, a seeded random vocabulary
factory, and a fixture parametrized over both index backends so contract
tests run once per implementation.
"""

from __future__ import annotations

import random
from pathlib import Path

import pytest

from termcomplete.autocomplete.backends import BACKENDS, create_autocompletor

SAMPLE_TERMS = ["air", "bat", "bell", "boy"]
SAMPLE_WEIGHTS = [3.0, 2.0, 4.0, 1.0]


@pytest.fixture(params=sorted(BACKENDS))
def backend(request) -> str:
    """Name of each index implementation in turn."""
    return request.param


@pytest.fixture
def sample_index(backend: str):
    """The {air:3, bat:2, bell:4, boy:1} vocabulary on the current backend."""
    return create_autocompletor(SAMPLE_TERMS, SAMPLE_WEIGHTS, backend=backend)


@pytest.fixture
def vocab_file(tmp_path: Path) -> Path:
    """A vocabulary file holding the sample terms."""
    path = tmp_path / "sample.txt"
    lines = [str(len(SAMPLE_TERMS))]
    lines += [f"{w}\t{t}" for t, w in zip(SAMPLE_TERMS, SAMPLE_WEIGHTS)]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Sample data factories
# ---------------------------------------------------------------------------


def make_vocabulary(
    n: int,
    seed: int = 0,
    alphabet: str = "abc",
    max_len: int = 6,
    distinct_weights: bool = False,
) -> tuple[list[str], list[float]]:
    """
    Build a random vocabulary of up to *n* unique words.

    A small alphabet keeps prefixes heavily shared so the trie has deep,
    branching paths. With *distinct_weights* every word gets its own weight.
    """
    rng = random.Random(seed)
    words: set[str] = set()
    attempts = 0
    while len(words) < n and attempts < n * 20:
        attempts += 1
        length = rng.randint(1, max_len)
        words.add("".join(rng.choice(alphabet) for _ in range(length)))

    terms = sorted(words)
    rng.shuffle(terms)
    if distinct_weights:
        weights = [float(w) for w in rng.sample(range(len(terms) * 10), len(terms))]
    else:
        weights = [float(rng.randint(0, 5)) for _ in terms]
    return terms, weights
