"""
Document ranking for the TextStats application.

Ranking never mutates its input: it returns a new list ordered by
descending metric. Python's sort is stable, so documents with equal
values keep their input (scan) order.
"""

from __future__ import annotations

from typing import Iterable, List, Union

from ..models.document import Document
from ..models.stats import SortMetric


def rank(documents: Iterable[Document], metric: Union[SortMetric, str]) -> List[Document]:
    """
    Rank documents by a metric, highest first.

    Args:
        documents: Documents in scan order
        metric: A SortMetric or its command line key (``word``, ``line``, ``cha``)

    Returns:
        New list of the same documents in ranked order

    Raises:
        ValidationError: If ``metric`` is an unknown key
    """
    if not isinstance(metric, SortMetric):
        metric = SortMetric.from_key(metric)
    return sorted(documents, key=lambda doc: getattr(doc, metric.attribute), reverse=True)


def rank_by_word_count(documents: Iterable[Document]) -> List[Document]:
    return rank(documents, SortMetric.WORD)


def rank_by_line_count(documents: Iterable[Document]) -> List[Document]:
    return rank(documents, SortMetric.LINE)


def rank_by_char_count(documents: Iterable[Document]) -> List[Document]:
    return rank(documents, SortMetric.CHA)
