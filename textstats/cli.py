"""
Command line interface for the TextStats application.

This module provides the command line interface for running folder
statistics and word searches from the terminal.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from . import __version__
from .core.analyzer import TextStatsAnalyzer
from .models.stats import AggregateStats, SortMetric
from .utils.config import Config
from .utils.exceptions import (
    TextStatsError,
    ValidationError,
    ProcessingError,
    ConfigurationError,
    log_exception,
)

FIND_WORD_COMMAND = "find_word"
# options that consume the next argument
VALUE_OPTIONS = ("--out", "-o", "--config")

log = logging.getLogger(__name__)


class UsageError(Exception):
    """Raised by the parser instead of exiting with argparse's status 2."""


class TextStatsArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports usage problems with exit status 1."""

    def error(self, message: str) -> None:
        raise UsageError(message)


def setup_logging(level: str = "WARNING") -> None:
    """
    Set up logging for CLI.

    Args:
        level: Logging level
    """
    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(
        level=numeric_level,
        format='[%(levelname)s] %(message)s',
        stream=sys.stderr
    )


def build_parser() -> argparse.ArgumentParser:
    """
    Build the command line parser.

    Returns:
        Configured parser
    """
    parser = TextStatsArgumentParser(
        prog="textstats",
        description="TextStats - rank plain-text files by size and chart their most common words",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Rank documents by word count, writes wordcount_ranked_docs.html
  textstats corpus/ word

  # Rank by line count or by character count
  textstats corpus/ line
  textstats corpus/ cha

  # List every line containing a word, writes word_location.csv
  textstats corpus/ find_word hello
        """
    )

    parser.add_argument(
        "folder_path",
        nargs="?",
        help="Folder holding the .txt files"
    )

    parser.add_argument(
        "sort_method",
        nargs="?",
        default="",
        help=f"Sort method ({', '.join(SortMetric.keys())}) or {FIND_WORD_COMMAND}"
    )

    parser.add_argument(
        "search_word",
        nargs="?",
        default="",
        help=f"Word to search for in {FIND_WORD_COMMAND} mode"
    )

    parser.add_argument(
        "--out", "-o",
        help="Output directory for the report (default: current directory)"
    )

    parser.add_argument(
        "--config",
        help="Path to configuration file"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose output"
    )

    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Suppress non-error output"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    return parser


def split_search_word(argv: List[str]) -> Tuple[List[str], Optional[str]]:
    """
    Take the search word out of a ``find_word`` command line.

    The word after ``find_word`` is taken verbatim, so words that look
    like options (``-foo``) are searched for rather than parsed.

    Returns:
        The remaining arguments and the search word, or None when the
        command line has no word after ``find_word``
    """
    for index in range(1, len(argv) - 1):
        if argv[index] == FIND_WORD_COMMAND and argv[index - 1] not in VALUE_OPTIONS:
            return argv[:index + 1] + argv[index + 2:], argv[index + 1]
    return argv, None


def print_usage(prog: str = "textstats", find_word: bool = False) -> None:
    """Print the usage banner to standard error."""
    if find_word:
        print(f"Usage: {prog} <folder_path> {FIND_WORD_COMMAND} <search_word>", file=sys.stderr)
    else:
        print(f"Usage: {prog} <folder_path> <sort_method>", file=sys.stderr)
        print(f"Available sort methods: {', '.join(SortMetric.keys())}", file=sys.stderr)


def print_results(ranked: List, stats: AggregateStats, report_path: Path) -> None:
    """
    Print a short summary of a statistics run.

    Args:
        ranked: Documents in ranked order
        stats: Aggregate statistics of the folder
        report_path: Where the HTML report was written
    """
    print("\n" + "=" * 60)
    print("TEXTSTATS RESULTS")
    print("=" * 60)

    print(f"\nTop {min(5, len(ranked))} Documents:")
    print("-" * 40)
    for i, doc in enumerate(ranked[:5], 1):
        print(f"{i}. {doc.name}")
        print(f"   Words: {doc.word_count}  Characters: {doc.char_count}  Lines: {doc.line_count}")

    print("\nFolder Totals:")
    print("-" * 40)
    print(f"Documents: {stats.document_count}")
    print(f"Words: {stats.total_word_count}")
    print(f"Characters: {stats.total_char_count}")
    print(f"Lines: {stats.total_line_count}")
    print(f"Average word length: {stats.mean_avg_word_length:.2f}")
    if stats.top_common_words:
        words = ", ".join(f"{word}: {count}" for word, count in stats.top_common_words.items())
        print(f"Most common words: {words}")

    print(f"\nReport saved to: {report_path}")
    print("=" * 60)


def run_statistics(analyzer: TextStatsAnalyzer, args: argparse.Namespace) -> int:
    """Rank the folder's documents and write the HTML report."""
    metric = SortMetric.from_key(args.sort_method)
    # fail before scanning when the output directory is unusable
    analyzer.report_path(metric, args.out)
    ranked, stats = analyzer.analyze_folder(args.folder_path, metric)
    report_path = analyzer.write_report(ranked, stats, metric, args.out)

    if not args.quiet:
        print_results(ranked, stats, report_path)
    return 0


def run_search(analyzer: TextStatsAnalyzer, args: argparse.Namespace) -> int:
    """Search the folder and write matching lines to CSV."""
    csv_path = analyzer.find_word(args.folder_path, args.search_word, args.out)
    if csv_path is None:
        print(f"The word '{args.search_word}' was not found in any file in the folder.")
    else:
        print(f"Search results have been written to '{csv_path.name}'")
    print("Search completed.")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main CLI entry point.

    Args:
        argv: Arguments without the program name; defaults to ``sys.argv[1:]``

    Returns:
        Process exit code
    """
    parser = build_parser()
    argv, search_word = split_search_word(sys.argv[1:] if argv is None else list(argv))
    try:
        args = parser.parse_args(argv)
        if search_word is not None:
            if args.search_word:
                parser.error(f"unrecognized arguments: {args.search_word}")
            args.search_word = search_word
    except UsageError as e:
        print(f"{parser.prog}: error: {e}", file=sys.stderr)
        print_usage(parser.prog, find_word=search_word is not None)
        return 1

    if not args.folder_path:
        print_usage(parser.prog)
        return 1

    find_word = args.sort_method == FIND_WORD_COMMAND
    if find_word and not args.search_word:
        print_usage(parser.prog, find_word=True)
        return 1

    try:
        config = Config(args.config) if args.config else Config()
        if not config.validate_configuration():
            raise ConfigurationError("Invalid configuration", config_key=str(config.config_file))
    except TextStatsError as e:
        setup_logging("ERROR")
        log_exception(log, e, "Configuration")
        return 1

    if args.quiet:
        log_level = "ERROR"
    elif args.verbose:
        log_level = "DEBUG"
    else:
        log_level = config.get_logging_config().get("level", "WARNING")
    setup_logging(log_level)

    analyzer = TextStatsAnalyzer(config)
    try:
        if find_word:
            return run_search(analyzer, args)
        return run_statistics(analyzer, args)
    except ValidationError as e:
        log.error(f"Validation error: {e}")
        return 1
    except ProcessingError as e:
        log.error(f"Processing error: {e}")
        return 1
    except TextStatsError as e:
        log.error(f"TextStats error: {e}")
        return 1
    except Exception as e:
        log.critical(f"Unexpected error: {e}", exc_info=args.verbose)
        return 1


if __name__ == "__main__":
    sys.exit(main())
