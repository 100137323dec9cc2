"""Analyzer utilities for turning raw document text into index terms.

The pipeline is deliberately small: a regex tokenizer emits maximal runs of
word characters and a lowercase filter folds them. Indexing and querying must
normalize identically, so both go through this module.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
import re
from typing import Protocol


class Tokenizer(Protocol):
    """Protocol implemented by tokenizers."""

    def __call__(self, text: str) -> Iterator[str]:  # pragma: no cover - interface definition
        ...


class TokenFilter(Protocol):
    """Protocol implemented by token filters."""

    def __call__(self, tokens: Iterable[str]) -> Iterator[str]:  # pragma: no cover - interface definition
        ...


class RegexTokenizer:
    """Regex-based tokenizer that yields word tokens.

    Everything outside a match (punctuation, whitespace) is a boundary and is
    discarded.
    """

    def __init__(self, pattern: str = r"\w+", flags: int = re.UNICODE) -> None:
        self.pattern = re.compile(pattern, flags)

    def __call__(self, text: str) -> Iterator[str]:
        for match in self.pattern.finditer(text):
            yield match.group(0)


class LowercaseFilter:
    """Filter that lowercases token text."""

    def __call__(self, tokens: Iterable[str]) -> Iterator[str]:
        for token in tokens:
            yield normalize_word(token)


class WordAnalyzer:
    """Tokenizer followed by a chain of filters, evaluated lazily."""

    def __init__(self, tokenizer: Tokenizer | None = None, filters: Iterable[TokenFilter] | None = None) -> None:
        self.tokenizer = tokenizer or RegexTokenizer()
        self.filters = list(filters) if filters is not None else [LowercaseFilter()]

    def __call__(self, text: str) -> Iterator[str]:
        stream: Iterator[str] = self.tokenizer(text or "")
        for token_filter in self.filters:
            stream = token_filter(stream)
        return stream


def normalize_word(word: str) -> str:
    """Apply the token normalization step on its own (case folding to lowercase)."""
    return word.lower()


_DEFAULT_ANALYZER = WordAnalyzer()


def tokenize(text: str) -> Iterator[str]:
    """Lazily yield normalized word tokens for ``text``, duplicates included."""
    return _DEFAULT_ANALYZER(text)
