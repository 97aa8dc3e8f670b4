# config.py
import os

from text_analyzer.preprocessing.operations import Lowercase, NGrams, RemovePunctuation, TrimSpaces
from text_analyzer.preprocessing.pipeline import Pipeline

DEFAULT_NGRAM_SEPARATOR = "; "
DEFAULT_NGRAM_SIZE = 2
MIN_TOKEN_LENGTH = 1
DEFAULT_TEXT_COLUMN = "text"

LOG_LEVEL = os.environ.get("TEXT_ANALYZER_LOG_LEVEL", "WARNING")


def create_pipeline(
    remove_punctuation: bool = True,
    trim_spaces: bool = True,
    lowercase: bool = True,
    ngram_size: int | None = None,
    ngram_separator: str = DEFAULT_NGRAM_SEPARATOR,
) -> Pipeline:
    pipeline = Pipeline()

    if remove_punctuation:
        pipeline = pipeline.append(RemovePunctuation())
    if trim_spaces:
        pipeline = pipeline.append(TrimSpaces())
    if lowercase:
        pipeline = pipeline.append(Lowercase())
    if ngram_size is not None:
        pipeline = pipeline.append(NGrams(ngram_separator, ngram_size))

    return pipeline


# Cleans text down to lowercase words separated by single spaces
default_pipeline = create_pipeline()
