# data/counts.py
from typing import Callable, Sequence

import numpy as np
from scipy.sparse import csr_matrix


def count_matrix(
    texts: Sequence[str | None],
    tokenizer: Callable[[str], list[str]],
    token_to_id: dict[str, int],
) -> csr_matrix:
    """
    Builds a sparse document x token count matrix.

    Args:
        texts: one document per row, None is an empty document
        tokenizer: turns a document into tokens
        token_to_id: vocabulary, tokens outside it and ids outside [0, len) are ignored

    Returns:
        csr_matrix of shape (len(texts), len(token_to_id)), int32
    """
    shape = (len(texts), len(token_to_id))

    token_ids = []
    doc_indices = []
    for i, text in enumerate(texts):
        if text is None:
            continue
        ids = [token_to_id[t] for t in tokenizer(text) if t in token_to_id]
        token_ids.extend(ids)
        doc_indices.extend([i] * len(ids))

    if not token_ids:
        return csr_matrix(shape, dtype=np.int32)

    token_ids = np.array(token_ids, dtype=np.int64)
    doc_indices = np.array(doc_indices, dtype=np.int64)

    # Ids outside [0, vocab_size) are dropped
    mask = (token_ids >= 0) & (token_ids < shape[1])
    token_ids = token_ids[mask]
    doc_indices = doc_indices[mask]

    # data = 1 per occurrence, csr_matrix sums duplicates
    data = np.ones_like(token_ids, dtype=np.int32)
    return csr_matrix((data, (doc_indices, token_ids)), shape=shape, dtype=np.int32)


def top_tokens(matrix: csr_matrix, token_to_id: dict[str, int], k: int) -> list[tuple[str, int]]:
    """Returns the k most frequent tokens over all documents, ties broken by token."""
    if k <= 0 or matrix.shape[1] == 0:
        return []
    totals = np.asarray(matrix.sum(axis=0)).ravel()
    id_to_token = {i: token for token, i in token_to_id.items()}
    ranked = sorted(
        (
            (id_to_token[i], int(count))
            for i, count in enumerate(totals)
            if count > 0 and i in id_to_token
        ),
        key=lambda item: (-item[1], item[0]),
    )
    return ranked[:k]
