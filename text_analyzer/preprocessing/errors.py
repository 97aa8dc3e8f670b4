# preprocessing/errors.py
class TextAnalyzerError(Exception):
    """Base class for all errors raised by text_analyzer."""


class InvalidNGramSize(TextAnalyzerError, ValueError):
    def __init__(self, n):
        self.n = n
        super().__init__(f"n-gram size must be a positive integer, got {n!r}")


class InputFileError(TextAnalyzerError, OSError):
    def __init__(self, path, reason: str):
        self.path = str(path)
        super().__init__(f"Cannot read input file {self.path}: {reason}")

    def __str__(self) -> str:
        return self.args[0]


class ColumnNotFoundError(TextAnalyzerError, KeyError):
    def __init__(self, column: str, available: list[str]):
        self.column = column
        super().__init__(f"Column {column!r} not found, available: {', '.join(available) or '-'}")

    def __str__(self) -> str:
        return self.args[0]


class UnsupportedFormatError(TextAnalyzerError, ValueError):
    pass
