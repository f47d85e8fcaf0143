# src/oddword/core/frequency.py
from typing import Iterable, List, Optional

from oddword.models import CorpusTable, FileRecord, Outlier


def build_corpus(records: Iterable[FileRecord]) -> CorpusTable:
    """Merges per-file counts into one corpus-wide table."""
    counts = {}
    total = 0
    for record in records:
        total += record.total
        for word, count in record.counts.items():
            counts[word] = counts.get(word, 0) + count
    return CorpusTable(counts=counts, total=total)


def relative_ratio(file_count: int, file_total: int, corpus_count: int, corpus_total: int) -> float:
    """A word's frequency in one file divided by its frequency in the corpus."""
    file_freq = file_count / file_total
    corpus_freq = corpus_count / corpus_total
    return file_freq / corpus_freq


def select_outlier(record: FileRecord, corpus: CorpusTable) -> Optional[Outlier]:
    """
    Returns the word of `record` with the highest relative ratio.
    Equal ratios resolve to the lexicographically smaller word.
    Returns None for a file (or corpus) without any counted word.
    """
    if record.total <= 0 or corpus.total <= 0:
        return None

    max_word = None
    max_ratio = 0.0
    for word, count in record.counts.items():
        corpus_count = corpus.counts.get(word)
        if not corpus_count:
            continue
        ratio = relative_ratio(count, record.total, corpus_count, corpus.total)
        if ratio > max_ratio or (ratio == max_ratio and (max_word is None or word < max_word)):
            max_ratio = ratio
            max_word = word

    if max_word is None:
        return None
    return Outlier(path=record.path, word=max_word, ratio=max_ratio)


def find_outliers(records: List[FileRecord], corpus: Optional[CorpusTable] = None) -> List[Outlier]:
    if corpus is None:
        corpus = build_corpus(records)
    outliers = []
    for record in records:
        outlier = select_outlier(record, corpus)
        if outlier is not None:
            outliers.append(outlier)
    return outliers
