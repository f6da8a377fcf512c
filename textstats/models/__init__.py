"""
Data models for the TextStats application.

This package contains the document and statistics models used
throughout the application.
"""

from .document import Document
from .stats import AggregateStats, SortMetric, WordMatch

__all__ = [
    "Document",
    "AggregateStats",
    "SortMetric",
    "WordMatch",
]
