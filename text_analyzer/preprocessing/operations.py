# preprocessing/operations.py
"""
Operations a Pipeline can run.

The set is closed: Pipeline dispatches on exactly these four types.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class RemovePunctuation:
    """Drops ASCII punctuation characters."""


@dataclass(frozen=True)
class TrimSpaces:
    """Collapses whitespace runs to a single space and strips both ends."""


@dataclass(frozen=True)
class Lowercase:
    """Lowercases the whole text."""


@dataclass(frozen=True)
class NGrams:
    """
    Replaces the text with its word n-grams.

    Args:
        separator: string placed between consecutive n-grams
        n: window size in words, must be positive
    """

    separator: str
    n: int


Operation = RemovePunctuation | TrimSpaces | Lowercase | NGrams

OPERATION_TYPES = (RemovePunctuation, TrimSpaces, Lowercase, NGrams)
