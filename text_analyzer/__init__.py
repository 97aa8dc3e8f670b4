from text_analyzer.io import process_file, read_file
from text_analyzer.preprocessing import (
    ColumnNotFoundError,
    InputFileError,
    InvalidNGramSize,
    Lowercase,
    NGrams,
    Operation,
    Pipeline,
    RemovePunctuation,
    TextAnalyzerError,
    TrimSpaces,
    UnsupportedFormatError,
    make_tokenizer,
)

__version__ = "0.1.0"

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
    "process_file",
    "read_file",
]
