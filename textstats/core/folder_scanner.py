"""
Folder scanner for the TextStats application.

This module lists the ``.txt`` files directly inside a folder and
reads their contents. Both the statistics and the search pipeline
use it, so extension matching is the same for both: case-insensitive.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, List, Tuple, Union

from ..utils.exceptions import ProcessingError
from ..utils.validators import InputValidator


log = logging.getLogger(__name__)


def iter_text_files(folder: Union[str, Path]) -> List[Path]:
    """
    List the text files directly inside ``folder``, sorted by name.

    Subdirectories are skipped, not descended into.

    Raises:
        ValidationError: If ``folder`` is not a directory
        ProcessingError: If the directory cannot be listed
    """
    folder_path = InputValidator.validate_directory_path(folder)
    try:
        entries = sorted(folder_path.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise ProcessingError("Failed to read directory", operation=f"list {folder_path}",
                              original_error=str(e))

    return [
        entry for entry in entries
        if not entry.is_dir() and InputValidator.is_text_file(entry)
    ]


def read_text_file(path: Union[str, Path], encoding: str = "utf-8") -> str:
    """
    Read a whole text file.

    Raises:
        ProcessingError: If the file cannot be read or decoded
    """
    try:
        # newline="" keeps "\r\n" intact so line counting sees the raw text
        with open(path, "r", encoding=encoding, newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ProcessingError("Failed to read file", operation=f"read {path}",
                              original_error=str(e))


def scan_folder(folder: Union[str, Path], encoding: str = "utf-8") -> Iterator[Tuple[str, str]]:
    """
    Yield ``(identifier, content)`` for every text file in ``folder``.

    The identifier is the file path as a string, built from the folder
    path given by the caller.

    Raises:
        ValidationError: If ``folder`` is not a directory
        ProcessingError: If any file cannot be read
    """
    for path in iter_text_files(folder):
        log.debug(f"Found text file: {path}")
        yield str(path), read_text_file(path, encoding)
