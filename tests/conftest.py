"""
Test suite initialization for the TextStats application.

This module provides the main test configuration and fixtures
for the TextStats test suite.
"""

import pytest
import tempfile
import logging
from pathlib import Path

from textstats.utils.config import Config


# Configure logging for tests
logging.basicConfig(
    level=logging.DEBUG,
    format='[TEST] %(levelname)s - %(name)s - %(message)s'
)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_config(temp_dir):
    """Create a configuration that ignores any user config file."""
    config = Config(temp_dir / "missing_config.json")
    config.set_output_dir(temp_dir / "out")
    (temp_dir / "out").mkdir()
    return config


@pytest.fixture
def corpus_dir(temp_dir):
    """Directory for input text files."""
    path = temp_dir / "corpus"
    path.mkdir()
    return path


@pytest.fixture
def create_test_file(corpus_dir):
    """Factory fixture to create files in the corpus directory."""
    def _create_file(filename: str, content: str) -> Path:
        file_path = corpus_dir / filename
        file_path.write_text(content, encoding="utf-8")
        return file_path

    return _create_file


@pytest.fixture
def animals_corpus(create_test_file, corpus_dir):
    """Two small documents with overlapping words."""
    create_test_file("a.txt", "cat cat dog")
    create_test_file("b.txt", "dog bird bird bird")
    return corpus_dir


@pytest.fixture
def sample_text_content():
    """A multi-line document with punctuation and repeated words."""
    return (
        "The quick brown fox jumps over the lazy dog.\n"
        "The dog sleeps; the fox runs!\n"
        "Foxes and dogs: the end\n"
    )


@pytest.fixture
def mixed_corpus(create_test_file, corpus_dir, sample_text_content):
    """Documents of different sizes plus files that must be skipped."""
    create_test_file("long.txt", sample_text_content)
    create_test_file("short.txt", "one line only")
    create_test_file("UPPER.TXT", "Shouting file\nwith two lines\n")
    create_test_file("notes.md", "not a text file")
    (corpus_dir / "nested.txt").mkdir()
    return corpus_dir
