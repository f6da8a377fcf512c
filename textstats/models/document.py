"""
Document models for the TextStats application.

This module defines the data structure used to represent one analyzed
text file and the statistics derived from its content.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Any, Mapping, Union

from .stats import SortMetric

MAX_COMMON_WORDS = 5


@dataclass(frozen=True)
class Document:
    """
    Represents one analyzed text file.

    Every derived field is a pure function of ``content``. Instances are
    normally built with :meth:`from_text` rather than field by field.

    Attributes:
        name: Identifier of the file (its path), used for display and ordering
        content: Raw text of the file
        word_count: Number of whitespace-delimited words
        line_count: Number of lines
        char_count: Number of non-whitespace characters
        avg_word_length: Mean token length, 0.0 for an empty document
        common_words: Up to five cleaned words mapped to their counts,
            most frequent first
    """
    name: str
    content: str = field(repr=False)
    word_count: int = 0
    line_count: int = 0
    char_count: int = 0
    avg_word_length: float = 0.0
    common_words: Mapping[str, int] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        """Validate document data after initialization."""
        for field_name in ("word_count", "line_count", "char_count"):
            if getattr(self, field_name) < 0:
                raise ValueError(f"{field_name} must be non-negative")
        if self.avg_word_length < 0:
            raise ValueError("avg_word_length must be non-negative")
        if len(self.common_words) > MAX_COMMON_WORDS:
            raise ValueError(f"common_words holds at most {MAX_COMMON_WORDS} entries")
        if any(count <= 0 for count in self.common_words.values()):
            raise ValueError("common_words counts must be positive")
        # read-only view so the frozen instance cannot be changed through the map
        object.__setattr__(self, "common_words", MappingProxyType(dict(self.common_words)))

    @classmethod
    def from_text(cls, name: str, content: str) -> Document:
        """Analyze ``content`` and build the document for file ``name``."""
        from ..core import document_analyzer as analyzer

        return cls(
            name=name,
            content=content,
            word_count=analyzer.count_words(content),
            line_count=analyzer.count_lines(content),
            char_count=analyzer.count_characters(content),
            avg_word_length=analyzer.average_word_length(content),
            common_words=analyzer.top_common_words(content),
        )

    def metric(self, metric: Union[SortMetric, str]) -> int:
        """Get the value of a ranking metric for this document."""
        if not isinstance(metric, SortMetric):
            metric = SortMetric.from_key(metric)
        return getattr(self, metric.attribute)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation (content excluded)."""
        return {
            "name": self.name,
            "word_count": self.word_count,
            "line_count": self.line_count,
            "char_count": self.char_count,
            "avg_word_length": round(self.avg_word_length, 3),
            "common_words": dict(self.common_words),
        }
