# src/oddword/models.py
from dataclasses import dataclass, field
from typing import Dict


@dataclass(frozen=True)
class FileRecord:
    """Word counts gathered from a single file."""
    path: str
    counts: Dict[str, int] = field(default_factory=dict)
    total: int = 0


@dataclass(frozen=True)
class CorpusTable:
    """Word counts merged across every processed file."""
    counts: Dict[str, int] = field(default_factory=dict)
    total: int = 0


@dataclass(frozen=True)
class Outlier:
    path: str
    word: str
    ratio: float
