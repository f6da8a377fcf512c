"""
Test suite for TextStats models.

This module contains tests for data models used throughout the application.
"""

import dataclasses

import pytest

from textstats.models.document import Document
from textstats.models.stats import AggregateStats, SortMetric, WordMatch
from textstats.utils.exceptions import ValidationError


class TestDocumentModel:
    """Test cases for the Document model."""

    def test_from_text_derives_all_fields(self):
        """Test that every statistic is computed from the content."""
        doc = Document.from_text("notes.txt", "Hello world, hello!\nworld\n")

        assert doc.name == "notes.txt"
        assert doc.word_count == 4
        assert doc.char_count == 22
        assert doc.line_count == 2
        assert doc.avg_word_length == 5.5
        assert doc.common_words == {"world": 2, "Hello": 1, "hello": 1}

    def test_from_text_empty_content(self):
        """Test an empty file."""
        doc = Document.from_text("empty.txt", "")

        assert doc.word_count == 0
        assert doc.char_count == 0
        assert doc.line_count == 0
        assert doc.avg_word_length == 0.0
        assert doc.common_words == {}

    def test_document_is_immutable(self):
        """Test that fields cannot be reassigned."""
        doc = Document.from_text("a.txt", "text")

        with pytest.raises(dataclasses.FrozenInstanceError):
            doc.word_count = 10

    def test_common_words_are_read_only(self):
        """Test that the word map cannot be changed after construction."""
        counts = {"cat": 2}
        doc = Document(name="a.txt", content="cat cat", word_count=2, common_words=counts)
        counts["dog"] = 1

        with pytest.raises(TypeError):
            doc.common_words["cat"] = 5
        assert doc.common_words == {"cat": 2}

    def test_document_is_hashable(self):
        """Test that documents can be hashed and used in sets."""
        first = Document.from_text("a.txt", "cat cat dog")
        second = Document.from_text("a.txt", "cat cat dog")

        assert hash(first) == hash(second)
        assert len({first, second}) == 1

    def test_validation_negative_count(self):
        """Test validation of negative counts."""
        with pytest.raises(ValueError, match="word_count must be non-negative"):
            Document(name="a.txt", content="", word_count=-1)

    def test_validation_negative_average(self):
        """Test validation of a negative average word length."""
        with pytest.raises(ValueError, match="avg_word_length must be non-negative"):
            Document(name="a.txt", content="", avg_word_length=-0.5)

    def test_validation_too_many_common_words(self):
        """Test that at most five common words are accepted."""
        words = {f"w{i}": 1 for i in range(6)}
        with pytest.raises(ValueError, match="at most 5"):
            Document(name="a.txt", content="", common_words=words)

    def test_validation_non_positive_word_count(self):
        """Test that common word counts must be positive."""
        with pytest.raises(ValueError, match="must be positive"):
            Document(name="a.txt", content="", common_words={"word": 0})

    def test_metric_lookup(self):
        """Test reading metrics by enum and by key."""
        doc = Document.from_text("a.txt", "one two\nthree\n")

        assert doc.metric(SortMetric.WORD) == 3
        assert doc.metric("line") == 2
        assert doc.metric("cha") == 11

    def test_metric_unknown_key(self):
        """Test an unknown metric key."""
        doc = Document.from_text("a.txt", "text")

        with pytest.raises(ValidationError):
            doc.metric("bytes")

    def test_to_dict_excludes_content(self):
        """Test dictionary conversion."""
        doc = Document.from_text("a.txt", "Word1, Word2, Word3")
        data = doc.to_dict()

        assert "content" not in data
        assert data["name"] == "a.txt"
        assert data["avg_word_length"] == 5.667
        assert data["common_words"] == {"Word1": 1, "Word2": 1, "Word3": 1}


class TestSortMetric:
    """Test cases for SortMetric."""

    def test_keys(self):
        """Test command line keys in order."""
        assert SortMetric.keys() == ["word", "line", "cha"]

    def test_from_key(self):
        """Test lookup by key."""
        assert SortMetric.from_key("word") is SortMetric.WORD
        assert SortMetric.from_key("cha") is SortMetric.CHA

    def test_from_key_invalid(self):
        """Test lookup with an unknown key."""
        with pytest.raises(ValidationError, match="Available sort methods: word, line, cha"):
            SortMetric.from_key("chars")

    def test_attributes_and_labels(self):
        """Test attribute names and labels."""
        assert SortMetric.WORD.attribute == "word_count"
        assert SortMetric.LINE.attribute == "line_count"
        assert SortMetric.CHA.attribute == "char_count"
        assert SortMetric.CHA.label == "character count"


class TestStatsModels:
    """Test cases for AggregateStats and WordMatch."""

    def test_aggregate_stats_defaults(self):
        """Test the empty aggregate."""
        stats = AggregateStats()

        assert stats.total_word_count == 0
        assert stats.mean_avg_word_length == 0.0
        assert stats.top_common_words == {}
        assert stats.document_count == 0

    def test_aggregate_stats_to_dict(self):
        """Test dictionary conversion."""
        stats = AggregateStats(
            total_word_count=7,
            total_char_count=30,
            total_line_count=2,
            mean_avg_word_length=4.16666,
            top_common_words={"bird": 3},
            document_count=2,
        )
        data = stats.to_dict()

        assert data["mean_avg_word_length"] == 4.167
        assert data["top_common_words"] == {"bird": 3}
        assert data["document_count"] == 2

    def test_aggregate_stats_read_only_and_hashable(self):
        """Test that the aggregate word map is frozen with the instance."""
        stats = AggregateStats(top_common_words={"bird": 3}, document_count=1)

        with pytest.raises(TypeError):
            stats.top_common_words["bird"] = 4
        assert hash(stats) == hash(AggregateStats(top_common_words={"bird": 3}, document_count=1))

    def test_word_match(self):
        """Test WordMatch creation."""
        match = WordMatch(file_name="a.txt", line_number=3)

        assert match.file_name == "a.txt"
        assert match.line_number == 3

    def test_word_match_line_numbers_start_at_one(self):
        """Test WordMatch validation."""
        with pytest.raises(ValueError, match="Line numbers start at 1"):
            WordMatch(file_name="a.txt", line_number=0)
