# preprocessing/steps.py
import operator
import string

from .errors import InvalidNGramSize

_PUNCTUATION_TABLE = str.maketrans("", "", string.punctuation)


# --- Basic steps ---
def lowercase(text: str) -> str:
    return text.lower()


def remove_punctuation(text: str) -> str:
    # ASCII only, non-ASCII symbols are kept
    return text.translate(_PUNCTUATION_TABLE)


def trim_spaces(text: str) -> str:
    return " ".join(text.split())


# --- N-grams ---
def check_ngram_size(n) -> int:
    # Any integer type (numpy included) is accepted, bool is not
    if isinstance(n, bool):
        raise InvalidNGramSize(n)
    try:
        size = operator.index(n)
    except TypeError:
        raise InvalidNGramSize(n) from None
    if size <= 0:
        raise InvalidNGramSize(n)
    return size


def word_ngrams(text: str, n: int) -> list[str]:
    """
    Returns every window of n consecutive words, each joined with a single space.

    An empty list is returned when the text has fewer than n words.
    """
    n = check_ngram_size(n)
    words = text.split()
    return [" ".join(words[i : i + n]) for i in range(len(words) - n + 1)]


def ngrams(text: str, separator: str, n: int) -> str:
    return separator.join(word_ngrams(text, n))
