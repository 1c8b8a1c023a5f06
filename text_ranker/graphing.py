from __future__ import annotations
import logging
import math
from typing import List, Sequence
from .datatypes import Document, Graph, Edge

logger = logging.getLogger(__name__)


def compute_relevance(s1: Sequence[int], s2: Sequence[int]) -> float:
    """
    Lexical relevance between two token-id sequences.

    relevance = |set(s1) & set(s2)| / (log10(len(s1)) + log10(len(s2)))

    The numerator counts distinct shared ids, the denominator uses the raw
    sequence lengths. A denominator that is not strictly positive (an empty
    sequence, or two single-token sequences) yields 0.0.
    """
    if not s1 or not s2:
        return 0.0
    denom = math.log10(len(s1)) + math.log10(len(s2))
    if denom <= 0.0:
        return 0.0
    common = len(set(s1) & set(s2))
    return common / denom

def build_relevance_matrix(doc: Document) -> List[List[float]]:
    seqs = [s.sequence for s in doc.sentences]
    n = len(seqs)
    M = [[0.0]*n for _ in range(n)]
    for i in range(n):
        for j in range(i+1, n):
            M[i][j] = M[j][i] = compute_relevance(seqs[i], seqs[j])
    return M

def total_relevance(M: List[List[float]]) -> float:
    # row-major so repeated runs sum in the same order
    total = 0.0
    for row in M:
        for w in row:
            total += w
    logger.debug("Total relevance over %d sentences: %.6f", len(M), total)
    return total

def build_graph(doc: Document, M: List[List[float]]) -> Graph:
    nodes = doc.sentences
    edges: List[Edge] = []
    n = len(nodes)
    for i in range(n):
        for j in range(i+1, n):
            w = M[i][j]
            if w > 0.0:
                edges.append(Edge(i=i, j=j, weight=w))
    return Graph(nodes=nodes, edges=edges)
