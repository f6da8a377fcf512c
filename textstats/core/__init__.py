"""
Core package initialization for the TextStats application.

This module provides text statistics, ranking, aggregation,
folder scanning, word search and report output.
"""

from .analyzer import TextStatsAnalyzer
from .aggregator import aggregate
from .ranker import rank
from .report_renderer import render_html
from .line_matcher import find_in_folder

__all__ = [
    "TextStatsAnalyzer",
    "aggregate",
    "rank",
    "render_html",
    "find_in_folder",
]
