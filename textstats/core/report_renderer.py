"""
HTML report rendering for the TextStats application.

The report has a ranked table of documents with a totals row, followed
by a bar-chart histogram of the most common words in the folder. Bars
are plain CSS blocks, ``count * 5`` pixels high.
"""

from __future__ import annotations

from html import escape
from typing import Optional, Sequence

from ..models.document import Document
from ..models.stats import AggregateStats
from .aggregator import aggregate

BAR_HEIGHT_SCALE = 5

TABLE_HEADER = (
    "<tr><th>File</th><th>Word count</th><th>Character count</th><th>Line count</th>"
    "<th>Average word length</th><th>Most common words</th></tr>\n"
)

HISTOGRAM_STYLE = (
    ".bar {width: 25px; background-color: black;display: inline-block;margin:30px;}"
    "span {display: inline;margin-left: -40px;margin-top: 5px;width:25px;}"
)


def bar_height(count: int) -> int:
    """Height in pixels of the histogram bar for a word count."""
    return count * BAR_HEIGHT_SCALE


def render_document_row(doc: Document) -> str:
    words = "".join(f"{escape(word)}: {count}<br>" for word, count in doc.common_words.items())
    return (
        "<tr>"
        f"<td>{escape(doc.name)}</td>"
        f"<td>{doc.word_count}</td>"
        f"<td>{doc.char_count}</td>"
        f"<td>{doc.line_count}</td>"
        f"<td>{doc.avg_word_length:.2f}</td>"
        f"<td>{words}</td>"
        "</tr>\n"
    )


def render_totals_row(stats: AggregateStats) -> str:
    return (
        "<tr>"
        "<td><b>Total</b></td>"
        f"<td>{stats.total_word_count}</td>"
        f"<td>{stats.total_char_count}</td>"
        f"<td>{stats.total_line_count}</td>"
        f"<td>{stats.mean_avg_word_length:.2f}</td>"
        "</tr>"
    )


def render_histogram(stats: AggregateStats) -> str:
    """Render the CSS bar chart of the folder's most common words."""
    parts = ["<style>", HISTOGRAM_STYLE]
    for word, count in stats.top_common_words.items():
        parts.append(f".hist-{escape(word)}{{height: {bar_height(count)}px;}}")
    parts.append("</style>")
    for word in stats.top_common_words:
        label = escape(word)
        parts.append(f"<div class='bar hist-{label}'></div><span>{label}</span>")
    return "".join(parts)


def render_html(ranked: Sequence[Document], sort_method: str,
                stats: Optional[AggregateStats] = None) -> str:
    """
    Render the statistics report.

    Args:
        ranked: Documents in the order they should appear in the table
        sort_method: Name of the ranking metric shown in the heading
        stats: Precomputed aggregate; computed from ``ranked`` when omitted

    Returns:
        The report as an HTML string
    """
    if stats is None:
        stats = aggregate(ranked)

    parts = [
        f"<h3>Ranked Documents by {escape(sort_method)}</h3>",
        "<table border=\"1\" style=\"text-align: right;\">\n",
        TABLE_HEADER,
    ]
    parts.extend(render_document_row(doc) for doc in ranked)
    parts.append(render_totals_row(stats))
    parts.append("</table>\n")
    parts.append("<br/><br/><br/>")
    parts.append("<h1>Most Common Words in Folder</h1>")
    parts.append(render_histogram(stats))
    return "".join(parts)
