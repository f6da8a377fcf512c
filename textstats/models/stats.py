"""
Statistics models for the TextStats application.

This module defines the ranking metrics, the folder-wide aggregate
statistics and the search hit record.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, Any, Mapping

from ..utils.exceptions import ValidationError


class SortMetric(Enum):
    """
    Metrics documents can be ranked by.

    The value is the key accepted on the command line.
    """
    WORD = "word"
    LINE = "line"
    CHA = "cha"

    @property
    def attribute(self) -> str:
        """Name of the Document attribute holding this metric."""
        return {
            SortMetric.WORD: "word_count",
            SortMetric.LINE: "line_count",
            SortMetric.CHA: "char_count",
        }[self]

    @property
    def label(self) -> str:
        """Human-readable label."""
        return {
            SortMetric.WORD: "word count",
            SortMetric.LINE: "line count",
            SortMetric.CHA: "character count",
        }[self]

    @classmethod
    def keys(cls) -> list:
        """Command line keys in declaration order."""
        return [metric.value for metric in cls]

    @classmethod
    def from_key(cls, key: str) -> SortMetric:
        """
        Look up a metric by its command line key.

        Raises:
            ValidationError: If the key is not a known sort method
        """
        for metric in cls:
            if metric.value == key:
                return metric
        raise ValidationError(
            f"Invalid sorting method: {key}. Available sort methods: {', '.join(cls.keys())}"
        )


@dataclass(frozen=True)
class AggregateStats:
    """
    Folder-wide statistics folded from a set of documents.

    Attributes:
        total_word_count: Sum of word counts
        total_char_count: Sum of non-whitespace character counts
        total_line_count: Sum of line counts
        mean_avg_word_length: Mean of the per-document average word lengths
        top_common_words: Up to 10 words with the highest summed counts
        document_count: Number of documents folded in
    """
    total_word_count: int = 0
    total_char_count: int = 0
    total_line_count: int = 0
    mean_avg_word_length: float = 0.0
    top_common_words: Mapping[str, int] = field(default_factory=dict, hash=False)
    document_count: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "top_common_words", MappingProxyType(dict(self.top_common_words)))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "total_word_count": self.total_word_count,
            "total_char_count": self.total_char_count,
            "total_line_count": self.total_line_count,
            "mean_avg_word_length": round(self.mean_avg_word_length, 3),
            "top_common_words": dict(self.top_common_words),
            "document_count": self.document_count,
        }


@dataclass(frozen=True)
class WordMatch:
    """A line of a text file containing the searched word."""
    file_name: str
    line_number: int

    def __post_init__(self) -> None:
        if self.line_number < 1:
            raise ValueError("Line numbers start at 1")
