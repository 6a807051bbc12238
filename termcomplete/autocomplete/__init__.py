"""Autocomplete package — binary-search and trie prefix indexes."""

from termcomplete.autocomplete.backends import BACKENDS, create_autocompletor
from termcomplete.autocomplete.base import Autocompletor
from termcomplete.autocomplete.binary_search import BinarySearchAutocomplete
from termcomplete.autocomplete.loader import parse_vocabulary, read_vocabulary
from termcomplete.autocomplete.suggester import PrefixSuggester, Suggestion
from termcomplete.autocomplete.term import Term
from termcomplete.autocomplete.trie import TrieAutocomplete

__all__ = [
    "BACKENDS",
    "Autocompletor",
    "BinarySearchAutocomplete",
    "PrefixSuggester",
    "Suggestion",
    "Term",
    "TrieAutocomplete",
    "create_autocompletor",
    "parse_vocabulary",
    "read_vocabulary",
]
