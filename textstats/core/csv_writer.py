"""
CSV output of search results.
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Iterable, Union

from ..models.stats import WordMatch
from ..utils.exceptions import ProcessingError


log = logging.getLogger(__name__)

CSV_HEADER = ["File Name", "Line Number"]


def write_matches(matches: Iterable[WordMatch], path: Union[str, Path]) -> Path:
    """
    Write search hits to a CSV file with a ``File Name,Line Number`` header.

    Returns:
        Path of the written file

    Raises:
        ProcessingError: If the file cannot be written
    """
    path = Path(path)
    try:
        with open(path, "w", encoding="utf-8", newline="") as f:
            writer = csv.writer(f, lineterminator="\n")
            writer.writerow(CSV_HEADER)
            for match in matches:
                writer.writerow([match.file_name, match.line_number])
    except OSError as e:
        raise ProcessingError("Failed to write CSV file", operation=f"write {path}",
                              original_error=str(e))

    log.info(f"Search results written to {path}")
    return path
