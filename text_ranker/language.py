from __future__ import annotations
import logging
from typing import Optional

from lingua import Language, LanguageDetectorBuilder

from .config import SummarizerConfig
from .errors import LanguageUndetected

logger = logging.getLogger(__name__)


def detect_language(text: str, cfg: Optional[SummarizerConfig] = None) -> Language:
    """Identify the language of ``text`` among the configured candidates.

    Raises LanguageUndetected when lingua has no confident answer.
    """
    cfg = cfg or SummarizerConfig()
    languages = cfg.lingua_languages()
    detector = (
        LanguageDetectorBuilder.from_languages(*languages)
        .with_minimum_relative_distance(cfg.min_relative_distance)
        .build()
    )
    lang = detector.detect_language_of(text or "")
    if lang is None:
        raise LanguageUndetected(cfg.languages)
    logger.debug("Detected language %s", lang.name)
    return lang
