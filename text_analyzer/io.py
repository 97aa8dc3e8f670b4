# io.py
"""
Input side: load a whole file into memory for the pipeline.
"""

from pathlib import Path

from text_analyzer.preprocessing.errors import InputFileError
from text_analyzer.preprocessing.pipeline import Pipeline


def read_file(path: str | Path, encoding: str = "utf-8") -> str:
    path = Path(path)
    try:
        return path.read_text(encoding=encoding)
    except FileNotFoundError as exc:
        raise InputFileError(path, "no such file") from exc
    except UnicodeDecodeError as exc:
        raise InputFileError(path, f"not valid {encoding} text") from exc
    except OSError as exc:
        raise InputFileError(path, exc.strerror or str(exc)) from exc


def process_file(path: str | Path, pipeline: Pipeline, encoding: str = "utf-8") -> str:
    return pipeline.process(read_file(path, encoding=encoding))
