"""
Main analyzer class for the TextStats application.

This module provides the TextStatsAnalyzer class that orchestrates
both pipelines: folder statistics with an HTML report, and word
search with a CSV export.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Tuple, Union

from ..models.document import Document
from ..models.stats import AggregateStats, SortMetric, WordMatch
from ..utils.config import Config
from ..utils.exceptions import ProcessingError
from ..utils.validators import InputValidator
from . import aggregator, csv_writer, line_matcher, ranker, report_renderer
from .folder_scanner import scan_folder


log = logging.getLogger(__name__)

REPORT_FILE_SUFFIX = "count_ranked_docs.html"
SEARCH_RESULTS_FILE = "word_location.csv"


def report_file_name(sort_method: Union[SortMetric, str]) -> str:
    """File name of the HTML report, e.g. ``wordcount_ranked_docs.html``."""
    if isinstance(sort_method, SortMetric):
        sort_method = sort_method.value
    return f"{sort_method}{REPORT_FILE_SUFFIX}"


class TextStatsAnalyzer:
    """
    High-level interface to the TextStats pipelines.

    Attributes:
        config: Application configuration
    """

    def __init__(self, config: Optional[Config] = None) -> None:
        """
        Initialize the analyzer.

        Args:
            config: Optional configuration object. If not provided,
                   default configuration will be used.
        """
        self.config = config or Config()
        log.debug("TextStats analyzer initialized")

    def load_documents(self, folder: Union[str, Path]) -> List[Document]:
        """
        Analyze every text file in a folder.

        All files are read before anything is returned, so a single
        unreadable file fails the whole run.

        Raises:
            ValidationError: If ``folder`` is not a directory
            ProcessingError: If a file cannot be read
        """
        documents = [
            Document.from_text(name, content)
            for name, content in scan_folder(folder, self.config.get_encoding())
        ]
        log.info(f"Analyzed {len(documents)} text files in {folder}")
        return documents

    def rank_documents(self, documents: List[Document],
                       sort_method: Union[SortMetric, str]) -> List[Document]:
        """Rank documents by a metric, highest first, keeping scan order on ties."""
        return ranker.rank(documents, sort_method)

    def aggregate(self, documents: List[Document]) -> AggregateStats:
        """Compute folder-wide totals for a set of documents."""
        return aggregator.aggregate(documents)

    def generate_report(self, folder: Union[str, Path], sort_method: Union[SortMetric, str],
                        output_dir: Optional[Union[str, Path]] = None) -> Path:
        """
        Run the statistics pipeline and write the HTML report.

        Args:
            folder: Folder holding the text files
            sort_method: Ranking metric or its command line key
            output_dir: Where to write the report; defaults to the configured directory

        Returns:
            Path of the written report

        Raises:
            ValidationError: If the folder or sort method is invalid
            ProcessingError: If reading input or writing the report fails
        """
        metric = self._metric(sort_method)
        # fail before scanning when the output directory is unusable
        self.report_path(metric, output_dir)
        ranked, stats = self.analyze_folder(folder, metric)
        return self.write_report(ranked, stats, metric, output_dir)

    def analyze_folder(self, folder: Union[str, Path],
                       sort_method: Union[SortMetric, str]) -> Tuple[List[Document], AggregateStats]:
        """
        Load, rank and aggregate the documents of a folder.

        Returns:
            The ranked documents and their aggregate statistics
        """
        metric = self._metric(sort_method)
        ranked = self.rank_documents(self.load_documents(folder), metric)
        return ranked, self.aggregate(ranked)

    def report_path(self, sort_method: Union[SortMetric, str],
                    output_dir: Optional[Union[str, Path]] = None) -> Path:
        """
        Where the report for ``sort_method`` will be written.

        Raises:
            ValidationError: If the sort method is unknown or the output
                directory is unusable
        """
        return self._output_path(report_file_name(self._metric(sort_method)), output_dir)

    def write_report(self, ranked: List[Document], stats: AggregateStats,
                     sort_method: Union[SortMetric, str],
                     output_dir: Optional[Union[str, Path]] = None) -> Path:
        """
        Render the HTML report and write it to ``<sort_method>count_ranked_docs.html``.

        Raises:
            ProcessingError: If the report cannot be written
        """
        metric = self._metric(sort_method)
        output_path = self.report_path(metric, output_dir)
        html = report_renderer.render_html(ranked, metric.value, stats)

        try:
            with open(output_path, "w", encoding="utf-8") as f:
                f.write(html)
        except OSError as e:
            raise ProcessingError("Failed to write the output file",
                                  operation=f"write {output_path}", original_error=str(e))

        log.info(f"Report written to {output_path}")
        return output_path

    def find_word(self, folder: Union[str, Path], search_word: str,
                  output_dir: Optional[Union[str, Path]] = None) -> Optional[Path]:
        """
        Search a folder for a word and export hits to CSV.

        Returns:
            Path of the CSV file, or None when the word was not found
            (no file is written in that case)
        """
        matches = self.search(folder, search_word)
        if not matches:
            return None
        output_path = self._output_path(SEARCH_RESULTS_FILE, output_dir)
        return csv_writer.write_matches(matches, output_path)

    def search(self, folder: Union[str, Path], search_word: str) -> List[WordMatch]:
        """Find every line in the folder's text files containing ``search_word``."""
        return line_matcher.find_in_folder(folder, search_word, self.config.get_encoding())

    def _metric(self, sort_method: Union[SortMetric, str]) -> SortMetric:
        if isinstance(sort_method, SortMetric):
            return sort_method
        return InputValidator.validate_sort_method(sort_method)

    def _output_path(self, file_name: str, output_dir: Optional[Union[str, Path]]) -> Path:
        directory = Path(output_dir) if output_dir is not None else self.config.get_output_dir()
        return InputValidator.validate_output_path(directory / file_name)
