"""
Input validation utilities for the TextStats application.

This module provides input validation for folder paths, output
paths and command line values used throughout the application.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from ..utils.exceptions import ValidationError


log = logging.getLogger(__name__)


class InputValidator:
    """
    Input validation utilities for TextStats application.

    Provides validation methods for:
    - Directory paths
    - Output file paths
    - Sort methods
    - Search words
    """

    TEXT_FILE_EXTENSION = ".txt"

    @classmethod
    def validate_directory_path(cls, dir_path: Union[str, Path], must_exist: bool = True,
                                create_if_missing: bool = False) -> Path:
        """
        Validate a directory path.

        Args:
            dir_path: Path to validate
            must_exist: Whether the directory must exist
            create_if_missing: Whether to create the directory if it doesn't exist

        Returns:
            Validated Path object

        Raises:
            ValidationError: If path is invalid
        """
        if isinstance(dir_path, str):
            if not dir_path:
                raise ValidationError("Directory path cannot be empty")
            dir_path = Path(dir_path)

        if not isinstance(dir_path, Path):
            raise ValidationError("Directory path must be a string or Path object")

        if not dir_path.exists():
            if create_if_missing:
                try:
                    dir_path.mkdir(parents=True, exist_ok=True)
                    log.info(f"Created directory: {dir_path}")
                except OSError as e:
                    raise ValidationError(f"Failed to create directory: {e}")
            elif must_exist:
                raise ValidationError("The provided path is not a directory.", value=str(dir_path))
        elif not dir_path.is_dir():
            raise ValidationError("The provided path is not a directory.", value=str(dir_path))

        return dir_path

    @classmethod
    def validate_output_path(cls, file_path: Union[str, Path]) -> Path:
        """
        Validate the path of an artifact about to be written.

        Args:
            file_path: Path of the output file

        Returns:
            Validated Path object

        Raises:
            ValidationError: If the parent directory is missing or the path is a directory
        """
        file_path = Path(file_path)
        parent = file_path.parent
        if not parent.is_dir():
            raise ValidationError(f"Output directory does not exist: {parent}")
        if file_path.is_dir():
            raise ValidationError(f"Output path is a directory: {file_path}")
        return file_path

    @classmethod
    def validate_sort_method(cls, sort_method: str):
        """
        Validate a sort method given on the command line.

        Args:
            sort_method: One of ``word``, ``line`` or ``cha``

        Returns:
            The matching SortMetric

        Raises:
            ValidationError: If the sort method is unknown
        """
        from ..models.stats import SortMetric

        if not isinstance(sort_method, str):
            raise ValidationError("Sort method must be a string")
        return SortMetric.from_key(sort_method)

    @classmethod
    def validate_search_word(cls, search_word: str) -> str:
        """
        Validate a search word.

        The word is matched literally, so surrounding whitespace is kept.

        Raises:
            ValidationError: If the word is empty
        """
        if not isinstance(search_word, str) or not search_word:
            raise ValidationError("Search word must be a non-empty string")
        return search_word

    @classmethod
    def is_text_file(cls, path: Union[str, Path]) -> bool:
        """Check whether a path names a ``.txt`` file (case-insensitive)."""
        return Path(path).suffix.lower() == cls.TEXT_FILE_EXTENSION
