from __future__ import annotations
import logging
from typing import List, Optional
from .config import SummarizerConfig
from .datatypes import Document, RankResult
from .errors import InvalidSentenceCount
from .graphing import build_relevance_matrix, total_relevance
from .language import detect_language
from .preprocessing import preprocess_text
from .scoring import score_sentences

logger = logging.getLogger(__name__)


def _check_count(n) -> int:
    if isinstance(n, bool) or not isinstance(n, int) or n < 0:
        raise InvalidSentenceCount(n)
    return n

def select_top(scores: List[float], n: int) -> List[int]:
    """Indices of the ``n`` highest scores, returned in ascending (document) order.

    Each pass takes the first maximum of a linear scan, so ties go to the
    lowest surviving index. Asking for more than ``len(scores)`` returns all.
    """
    n = _check_count(n)
    pool = list(enumerate(scores))
    picked: List[int] = []
    while len(picked) < n and pool:
        best = 0
        for k in range(1, len(pool)):
            if pool[k][1] > pool[best][1]:
                best = k
        picked.append(pool.pop(best)[0])
    picked.sort()  # restore original order
    return picked

def generate_summary(doc: Document, scores: List[float], n: int) -> str:
    selected = select_top(scores, n)
    logger.debug("Selected sentences %s", selected)
    # sentence texts already carry their trailing whitespace
    return "".join(doc.sentences[i].text for i in selected)

def rank(text: Optional[str]) -> RankResult:
    doc = preprocess_text(text)
    M = build_relevance_matrix(doc)
    total = total_relevance(M)
    scores = score_sentences(M, total=total)
    return RankResult(document=doc, matrix=M, total=total, scores=scores)

def summarize(text: Optional[str], n: int = 5) -> str:
    # Pipeline glue
    n = _check_count(n)
    result = rank(text)
    return generate_summary(result.document, result.scores, n)

def summarize_text(text: str, n: Optional[int] = None, cfg: Optional[SummarizerConfig] = None) -> RankResult:
    """
    Detect the language first, then rank and summarize.

    Returns the RankResult with ``language``, ``selected`` and ``summary``
    filled in. Raises LanguageUndetected before any scoring happens.
    """
    cfg = cfg or SummarizerConfig()
    n = _check_count(cfg.sentence_count if n is None else n)
    lang = detect_language(text, cfg)
    result = rank(text)
    result.language = lang
    result.selected = select_top(result.scores, n)
    result.summary = "".join(result.document.sentences[i].text for i in result.selected)
    return result
