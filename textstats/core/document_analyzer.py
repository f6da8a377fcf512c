"""
Per-document text statistics.

Every function here is pure and total: it accepts any string and
never raises. Whitespace follows ``str.isspace``; letters and digits
follow ``str.isalnum`` plus the combining marks.
"""

from __future__ import annotations

import unicodedata
from collections import Counter
from typing import Dict

from ..models.document import Document, MAX_COMMON_WORDS


def count_words(text: str) -> int:
    """Count maximal runs of non-whitespace characters."""
    count = 0
    in_word = False
    for char in text:
        if char.isspace():
            in_word = False
        elif not in_word:
            count += 1
            in_word = True
    return count


def count_characters(text: str) -> int:
    """Count characters that are not whitespace, punctuation included."""
    return sum(1 for char in text if not char.isspace())


def count_lines(text: str) -> int:
    """
    Count lines in ``text``.

    Each newline ends a line; a non-empty trailing segment without a
    newline counts as one more line.
    """
    count = text.count("\n")
    if text and not text.endswith("\n"):
        count += 1
    return count


def average_word_length(text: str) -> float:
    """Mean length of the whitespace-delimited tokens, punctuation included."""
    words = text.split()
    if not words:
        return 0.0
    return sum(len(word) for word in words) / len(words)


def is_alphanumeric(char: str) -> bool:
    """
    True for letters and digits of any script.

    Combining marks count as letters so that vowel signs in scripts
    such as Devanagari stay part of their word.
    """
    return char.isalnum() or unicodedata.category(char).startswith("M")


def is_valid_word(word: str) -> bool:
    """True when every character is alphanumeric. The empty string is valid."""
    return all(is_alphanumeric(char) for char in word)


def clean_word(word: str) -> str:
    """Strip every non-alphanumeric character from ``word``."""
    return "".join(char for char in word if is_alphanumeric(char))


def count_cleaned_words(text: str) -> Counter:
    """
    Count cleaned words in first-encounter order.

    Tokens that clean down to the empty string are not counted.
    """
    cleaned = (clean_word(token) for token in text.split())
    return Counter(word for word in cleaned if word and is_valid_word(word))


def top_common_words(text: str) -> Dict[str, int]:
    """
    Return the five most frequent cleaned words of ``text``.

    Words are compared case-sensitively. The result is ordered by
    descending count; equal counts keep first-encounter order.
    """
    return dict(count_cleaned_words(text).most_common(MAX_COMMON_WORDS))


def analyze_document(name: str, text: str) -> Document:
    """Build the analyzed Document for file ``name``."""
    return Document.from_text(name, text)
