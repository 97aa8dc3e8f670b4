# preprocessing/tokenizer.py
from typing import Callable, Optional

from . import steps
from .operations import NGrams
from .pipeline import Pipeline


def simple_tokenizer(x: str) -> list[str]:
    return x.split()


def make_tokenizer(
    pipeline: Optional[Pipeline] = None, min_token_length: int = 1
) -> Callable[[str], list[str]]:
    """
    Creates a tokenizer that runs the pipeline first.

    Args:
        pipeline: operations applied to the text before splitting
        min_token_length: shorter tokens are dropped

    When the pipeline ends with NGrams the n-grams are taken directly as tokens,
    so every n-gram stays whole whatever its separator.
    """
    ngram_size = None
    if pipeline is not None and len(pipeline) and isinstance(pipeline.operations[-1], NGrams):
        ngram_size = pipeline.operations[-1].n
        pipeline = Pipeline(pipeline.operations[:-1])

    def tokenizer(text: str) -> list[str]:
        if pipeline is not None:
            text = pipeline.process(text)
        if ngram_size is None:
            tokens = text.split()
        else:
            tokens = steps.word_ngrams(text, ngram_size)
        return [t for t in tokens if len(t) >= min_token_length]

    return tokenizer
