from .errors import (
    ColumnNotFoundError,
    InputFileError,
    InvalidNGramSize,
    TextAnalyzerError,
    UnsupportedFormatError,
)
from .operations import Lowercase, NGrams, Operation, RemovePunctuation, TrimSpaces
from .pipeline import Pipeline
from .tokenizer import make_tokenizer, simple_tokenizer

__all__ = [
    "ColumnNotFoundError",
    "InputFileError",
    "InvalidNGramSize",
    "Lowercase",
    "NGrams",
    "Operation",
    "Pipeline",
    "RemovePunctuation",
    "TextAnalyzerError",
    "TrimSpaces",
    "UnsupportedFormatError",
    "make_tokenizer",
    "simple_tokenizer",
]
