"""
TextStats - folder-level statistics and word search for plain-text files.

This package computes per-document statistics for a folder of text
files, ranks the documents, and renders an HTML report with a word
frequency histogram. A search mode exports the lines containing a
word to CSV.

Version: 1.0.0
License: MIT
"""

__version__ = "1.0.0"

from .core.analyzer import TextStatsAnalyzer
from .models.document import Document
from .models.stats import AggregateStats, SortMetric, WordMatch

__all__ = [
    "TextStatsAnalyzer",
    "Document",
    "AggregateStats",
    "SortMetric",
    "WordMatch",
]
