"""Unit tests for the word tokenizer and normalization."""

import types

import pytest

from minisearch.search.analyzers import (
    LowercaseFilter,
    RegexTokenizer,
    WordAnalyzer,
    normalize_word,
    tokenize,
)


@pytest.mark.unit
def test_tokenize_splits_on_punctuation_and_whitespace():
    tokens = list(tokenize("Example document with multiple sentences. And punctuation"))

    assert tokens == ["example", "document", "with", "multiple", "sentences", "and", "punctuation"]


@pytest.mark.unit
def test_tokenize_is_lazy():
    assert isinstance(tokenize("one two"), types.GeneratorType)


@pytest.mark.unit
def test_tokenize_keeps_duplicates_in_order():
    assert list(tokenize("the cat, the hat; THE end")) == ["the", "cat", "the", "hat", "the", "end"]


@pytest.mark.unit
@pytest.mark.parametrize("text", ["", "   ", "...!?", "-- ; --"])
def test_tokenize_without_word_characters_yields_nothing(text):
    assert list(tokenize(text)) == []


@pytest.mark.unit
def test_tokenize_treats_digits_and_underscore_as_word_characters():
    assert list(tokenize("snake_case v2 3.14")) == ["snake_case", "v2", "3", "14"]


@pytest.mark.unit
def test_tokenize_handles_unicode_letters():
    assert list(tokenize("Über café, naïve")) == ["über", "café", "naïve"]


@pytest.mark.unit
def test_tokenize_is_deterministic():
    text = "Deterministic: same INPUT, same output!"
    assert list(tokenize(text)) == list(tokenize(text))


@pytest.mark.unit
def test_tokenize_does_not_stem_or_drop_stopwords():
    assert list(tokenize("The runners were running")) == ["the", "runners", "were", "running"]


@pytest.mark.unit
def test_normalize_word_only_case_folds():
    assert normalize_word("DOCUMENT") == "document"
    assert normalize_word("two words") == "two words"


@pytest.mark.unit
def test_word_analyzer_composes_custom_pieces():
    analyzer = WordAnalyzer(RegexTokenizer(r"[a-z]+"), filters=[])

    assert list(analyzer("abc DEF ghi")) == ["abc", "ghi"]


@pytest.mark.unit
def test_lowercase_filter_folds_each_token():
    assert list(LowercaseFilter()(["MiXeD", "lower"])) == ["mixed", "lower"]
