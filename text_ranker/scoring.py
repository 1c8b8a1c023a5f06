from __future__ import annotations
import logging
from typing import List, Optional
from .graphing import total_relevance

logger = logging.getLogger(__name__)

DAMPING = 0.8


def score_sentences(M: List[List[float]], total: Optional[float] = None, damping: float = DAMPING) -> List[float]:
    """
    Single damped pass over the relevance matrix.

    score(Si) = (1-d) + d × Σj M[i][j] / total

    where ``total`` is the sum of every matrix entry. This is not iterated to
    a fixed point. When ``total`` is 0 (one sentence, or no overlap between
    any pair) every sentence scores exactly ``1 - d``.

    Args:
        M: Square symmetric relevance matrix with a zero diagonal
        total: Precomputed sum of ``M``; computed when omitted
        damping: Blend between the uniform baseline and the graph signal

    Returns:
        One score per sentence, in document order
    """
    if total is None:
        total = total_relevance(M)
    base = 1.0 - damping
    if total <= 0.0:
        return [base] * len(M)

    scores: List[float] = []
    for row in M:
        share = 0.0
        for w in row:
            share += w / total
        scores.append(base + damping * share)
    return scores
