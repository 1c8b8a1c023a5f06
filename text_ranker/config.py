from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Tuple, Union
import json

from lingua import Language

@dataclass
class SummarizerConfig:
    sentence_count: int = 5
    languages: Tuple[str, ...] = ("ENGLISH", "CHINESE")  # lingua.Language member names
    min_relative_distance: float = 0.0

    def lingua_languages(self) -> Tuple[Language, ...]:
        out = []
        for name in self.languages:
            lang = getattr(Language, str(name).upper(), None)
            if not isinstance(lang, Language):
                raise ValueError(f"Unknown language: {name}")
            out.append(lang)
        return tuple(out)

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "SummarizerConfig":
        languages = data.get("languages", ("ENGLISH", "CHINESE"))
        if isinstance(languages, str):
            languages = (languages,)
        cfg = SummarizerConfig(
            sentence_count=int(data.get("sentence_count", 5)),
            languages=tuple(languages),
            min_relative_distance=float(data.get("min_relative_distance", 0.0)),
        )
        cfg.lingua_languages()  # validate names early
        return cfg

    @staticmethod
    def load(path: Union[str, Path]) -> "SummarizerConfig":
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        return SummarizerConfig.from_dict(data or {})
