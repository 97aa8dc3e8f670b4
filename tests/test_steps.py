from __future__ import annotations

import numpy as np
import pytest

from text_analyzer.preprocessing import steps
from text_analyzer.preprocessing.errors import InvalidNGramSize


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Dog, can ! bark.;", "Dog can  bark"),
        ("", ""),
        ("naïve — café!", "naïve — café"),
        ("tab\tand\nnewline?", "tab\tand\nnewline"),
        ("<a href='x'>[1]</a>", "a hrefx1a"),
    ],
)
def test_remove_punctuation(text: str, expected: str) -> None:
    assert steps.remove_punctuation(text) == expected


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("  a   dog\t\tcan\nbark  ", "a dog can bark"),
        ("", ""),
        (" \t\n ", ""),
        ("single", "single"),
    ],
)
def test_trim_spaces(text: str, expected: str) -> None:
    assert steps.trim_spaces(text) == expected


def test_lowercase_keeps_non_alphabetic() -> None:
    assert steps.lowercase("ÀBC 123 ΣΟΦΙΑ!") == "àbc 123 σοφια!"


def test_word_ngrams_windows() -> None:
    assert steps.word_ngrams("a dog can bark", 3) == ["a dog can", "dog can bark"]


def test_word_ngrams_exact_length() -> None:
    assert steps.word_ngrams("a dog", 2) == ["a dog"]


@pytest.mark.parametrize("n", [0, -1, 2.0, True, "2"])
def test_invalid_ngram_size(n) -> None:
    with pytest.raises(InvalidNGramSize) as exc_info:
        steps.ngrams("a dog", " | ", n)
    assert exc_info.value.n == n


def test_invalid_ngram_size_is_value_error() -> None:
    with pytest.raises(ValueError):
        steps.check_ngram_size(0)


@pytest.mark.parametrize("n", [np.int64(2), np.int32(2), np.uint8(2)])
def test_numpy_integer_ngram_size(n) -> None:
    assert steps.ngrams("a dog can", " | ", n) == "a dog | dog can"
    assert steps.check_ngram_size(n) == 2
    assert type(steps.check_ngram_size(n)) is int


@pytest.mark.parametrize("n", [np.int64(0), np.float64(2.0)])
def test_invalid_numpy_ngram_size(n) -> None:
    with pytest.raises(InvalidNGramSize):
        steps.check_ngram_size(n)
