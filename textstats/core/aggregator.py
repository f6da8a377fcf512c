"""
Folder-wide aggregation of document statistics.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, List

from ..models.document import Document
from ..models.stats import AggregateStats

TOP_AGGREGATE_WORDS = 10


def merge_word_counts(documents: Iterable[Document]) -> Counter:
    """
    Sum the common-word counts of every document.

    Only each document's own top words take part. Keys appear in
    first-encounter order, walking documents in the order given.
    """
    merged: Counter = Counter()
    for doc in documents:
        merged.update(doc.common_words)
    return merged


def aggregate(documents: Iterable[Document]) -> AggregateStats:
    """
    Fold documents into folder-wide totals.

    The average word length is the mean of the per-document averages,
    not a figure recomputed over all words.
    """
    docs: List[Document] = list(documents)
    if not docs:
        return AggregateStats()

    top_words = merge_word_counts(docs).most_common(TOP_AGGREGATE_WORDS)

    return AggregateStats(
        total_word_count=sum(doc.word_count for doc in docs),
        total_char_count=sum(doc.char_count for doc in docs),
        total_line_count=sum(doc.line_count for doc in docs),
        mean_avg_word_length=sum(doc.avg_word_length for doc in docs) / len(docs),
        top_common_words=dict(top_words),
        document_count=len(docs),
    )
