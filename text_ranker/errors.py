from __future__ import annotations


class SummarizerError(Exception):
    """Base class for every error raised by text_ranker."""


class LanguageUndetected(SummarizerError):
    def __init__(self, candidates=()):
        self.candidates = tuple(candidates)
        names = ", ".join(self.candidates) or "none"
        super().__init__(f"Cannot detect language (candidates: {names})")


class InvalidSentenceCount(SummarizerError, ValueError):
    def __init__(self, n):
        self.n = n
        super().__init__(f"Sentence count must be a non-negative integer, got {n!r}")
