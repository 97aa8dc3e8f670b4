# data/vocabulary.py
import logging
from collections import Counter
from typing import Callable, Iterable

from text_analyzer.preprocessing.tokenizer import simple_tokenizer

logger = logging.getLogger(__name__)


def build_vocabulary(
    texts: Iterable[str | None],
    tokenizer: Callable[[str], list[str]] = simple_tokenizer,
    min_df: int = 1,
    max_df: float = 1.0,
) -> tuple[dict[str, int], dict[str, int]]:
    """
    Builds a token vocabulary with document-frequency filtering.

    Returns:
        token_to_id: dict[str, int], ids follow sorted token order
        doc_freq: dict[str, int], number of documents containing each kept token
    """
    if min_df < 1:
        raise ValueError(f"min_df must be >= 1, got {min_df}")
    if not 0.0 < max_df <= 1.0:
        raise ValueError(f"max_df must be in (0, 1], got {max_df}")

    token_freq = Counter()
    n_docs = 0
    for text in texts:
        n_docs += 1
        if text is None:
            continue
        # Each document counts once per token
        token_freq.update(set(tokenizer(str(text))))

    max_count = int(max_df * n_docs) if max_df < 1.0 else float("inf")
    kept = sorted(token for token, freq in token_freq.items() if min_df <= freq <= max_count)
    token_to_id = {token: i for i, token in enumerate(kept)}
    doc_freq = {token: token_freq[token] for token in kept}

    logger.info("Vocab size: %d | Documents: %d", len(token_to_id), n_docs)
    return token_to_id, doc_freq
