"""
Unit tests for search results data models.

Tests DirectoryEntry, MatchSet and LineRecord.
"""

import os
import pytest
from pydantic import ValidationError

from fstools.models.search_query import SearchKind, SearchQuery
from fstools.models.search_results import DirectoryEntry, LineRecord, MatchSet


class TestDirectoryEntry:
    """Test cases for DirectoryEntry model."""

    def test_name_is_base_name(self):
        entry = DirectoryEntry(path=os.path.join("root", "sub", "a.txt"), is_dir=False)
        assert entry.name == "a.txt"

    def test_defaults_to_file(self):
        entry = DirectoryEntry(path="root/a.txt")
        assert entry.is_dir is False

    def test_empty_path_rejected(self):
        with pytest.raises(ValidationError):
            DirectoryEntry(path="", is_dir=True)


class TestMatchSet:
    """Test cases for MatchSet model."""

    def setup_method(self):
        self.query = SearchQuery(name="a.txt", kind=SearchKind.FILE)

    def test_empty_match_set(self):
        matches = MatchSet(query=self.query)

        assert matches.is_empty()
        assert len(matches) == 0
        assert list(matches) == []

    def test_preserves_insertion_order(self):
        matches = MatchSet(query=self.query)
        matches.add("root/sub/a.txt")
        matches.add("root/a.txt")

        assert not matches.is_empty()
        assert list(matches) == ["root/sub/a.txt", "root/a.txt"]

    def test_to_dict(self):
        matches = MatchSet(query=self.query, paths=["root/a.txt"])
        data = matches.to_dict()

        assert data['query'] == {'name': 'a.txt', 'kind': 'f'}
        assert data['paths'] == ["root/a.txt"]
        assert data['total'] == 1


class TestLineRecord:
    """Test cases for LineRecord model."""

    def test_format(self):
        record = LineRecord(line_number=3, text="HELLO again")

        assert record.format() == "Line 3: HELLO again"
        assert str(record) == "Line 3: HELLO again"

    def test_line_numbers_are_one_based(self):
        with pytest.raises(ValidationError):
            LineRecord(line_number=0, text="x")

    def test_empty_text_allowed(self):
        assert LineRecord(line_number=1, text="").format() == "Line 1: "

    def test_text_with_newline_rejected(self):
        with pytest.raises(ValidationError):
            LineRecord(line_number=1, text="line\n")
