from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Dict, Optional, Any

@dataclass
class Sentence:
    idx: int
    text: str  # verbatim, including trailing whitespace
    tokens: List[str] = field(default_factory=list)
    sequence: List[int] = field(default_factory=list)  # vocabulary ids, same order as tokens

@dataclass
class Document:
    raw_text: str
    sentences: List[Sentence]
    vocabulary: Dict[str, int] = field(default_factory=dict)

@dataclass
class Edge:
    i: int
    j: int
    weight: float  # relevance

@dataclass
class Graph:
    nodes: List[Sentence]
    edges: List[Edge]  # undirected weighted edges, i < j

@dataclass
class RankResult:
    document: Document
    matrix: List[List[float]]
    total: float
    scores: List[float]
    language: Optional[Any] = None  # lingua.Language when detection ran
    selected: List[int] = field(default_factory=list)
    summary: str = ""

    def __len__(self) -> int:
        return len(self.scores)
