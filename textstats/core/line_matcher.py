"""
Literal substring search over text files.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, List, Union

from ..models.stats import WordMatch
from ..utils.validators import InputValidator
from .folder_scanner import scan_folder


log = logging.getLogger(__name__)


def split_lines(text: str) -> Iterator[str]:
    """
    Split text into lines.

    Lines end at ``\\n``; a trailing ``\\r`` is dropped. A final newline
    does not start an extra empty line. Other separators such as form
    feeds stay inside the line, unlike ``str.splitlines``.
    """
    if not text:
        return
    segments = text.split("\n")
    if text.endswith("\n"):
        segments.pop()
    for segment in segments:
        yield segment[:-1] if segment.endswith("\r") else segment


def find_in_text(name: str, text: str, search_word: str) -> List[WordMatch]:
    """
    Find the lines of one file containing ``search_word``.

    Matching is a literal, case-sensitive substring test. Line numbers
    start at 1.
    """
    search_word = InputValidator.validate_search_word(search_word)
    return [
        WordMatch(file_name=name, line_number=number)
        for number, line in enumerate(split_lines(text), start=1)
        if search_word in line
    ]


def find_in_folder(folder: Union[str, Path], search_word: str,
                   encoding: str = "utf-8") -> List[WordMatch]:
    """
    Search every text file in ``folder`` for ``search_word``.

    Raises:
        ValidationError: If the folder is not a directory or the word is empty
        ProcessingError: If a file cannot be read
    """
    search_word = InputValidator.validate_search_word(search_word)
    matches: List[WordMatch] = []
    for name, content in scan_folder(folder, encoding):
        file_matches = find_in_text(name, content, search_word)
        if file_matches:
            log.debug(f"{len(file_matches)} matching lines in {name}")
        matches.extend(file_matches)
    log.info(f"Found {len(matches)} lines containing '{search_word}'")
    return matches
