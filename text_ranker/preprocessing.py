from __future__ import annotations
import logging
from typing import Dict, List, Optional, Tuple
from uniseg.sentencebreak import sentences as _unicode_sentences
from uniseg.wordbreak import words as _unicode_words
from .datatypes import Document, Sentence

logger = logging.getLogger(__name__)


def split_sentences(text: str) -> List[str]:
    # UAX #29 sentence boundaries; each piece keeps its trailing whitespace
    if not text:
        return []
    return [s for s in _unicode_sentences(text) if s]

def _is_word(segment: str) -> bool:
    return any(ch.isalnum() for ch in segment)

def tokenize(text: str) -> List[str]:
    """
    Split a sentence into word tokens using UAX #29 word boundaries.

    Segments made only of whitespace or punctuation are dropped. Scripts
    without inter-word spacing fall back to the default boundary rules,
    so Han text yields one token per ideograph. Tokens are kept verbatim:
    no case folding and no normalization.
    """
    return [w for w in _unicode_words(text) if _is_word(w)]

def index_tokens(tokens: List[str], vocabulary: Dict[str, int]) -> List[int]:
    """Map tokens to ids, growing ``vocabulary`` in first-seen order (ids start at 1)."""
    sequence = []
    for tok in tokens:
        idx = vocabulary.get(tok)
        if idx is None:
            idx = len(vocabulary) + 1
            vocabulary[tok] = idx
        sequence.append(idx)
    return sequence

def build_vocabulary(token_lists: List[List[str]]) -> Tuple[Dict[str, int], List[List[int]]]:
    vocabulary: Dict[str, int] = {}
    sequences = [index_tokens(toks, vocabulary) for toks in token_lists]
    return vocabulary, sequences

def preprocess_text(text: Optional[str]) -> Document:
    text = text or ""
    sents_raw = split_sentences(text)
    token_lists = [tokenize(s) for s in sents_raw]
    vocabulary, sequences = build_vocabulary(token_lists)

    sentences = [
        Sentence(idx=i, text=s, tokens=toks, sequence=seq)
        for i, (s, toks, seq) in enumerate(zip(sents_raw, token_lists, sequences))
    ]
    logger.debug("Segmented %d sentences, vocabulary size %d", len(sentences), len(vocabulary))
    return Document(raw_text=text, sentences=sentences, vocabulary=vocabulary)
