"""
Unit tests for the SearchQuery data model.
"""

import pytest
from pydantic import ValidationError
from fstools.models.search_query import SearchKind, SearchQuery


class TestSearchKind:
    """Test cases for the SearchKind enum."""

    def test_from_flag(self):
        assert SearchKind.from_flag("f") is SearchKind.FILE
        assert SearchKind.from_flag("d") is SearchKind.DIRECTORY

    def test_from_flag_defaults_to_file(self):
        """Unknown or missing -type values select file mode."""
        assert SearchKind.from_flag("") is SearchKind.FILE
        assert SearchKind.from_flag(None) is SearchKind.FILE
        assert SearchKind.from_flag("x") is SearchKind.FILE
        assert SearchKind.from_flag("D") is SearchKind.FILE

    def test_label(self):
        assert SearchKind.FILE.label == "file"
        assert SearchKind.DIRECTORY.label == "directory"


class TestSearchQuery:
    """Test cases for SearchQuery model."""

    def test_basic_query_creation(self):
        """Test creating a basic search query."""
        query = SearchQuery(name="a.txt")

        assert query.name == "a.txt"
        assert query.kind is SearchKind.FILE
        assert not query.is_directory_search()

    def test_kind_from_flag_string(self):
        query = SearchQuery(name="src", kind="d")
        assert query.kind is SearchKind.DIRECTORY
        assert query.is_directory_search()

        query = SearchQuery(name="src", kind="bogus")
        assert query.kind is SearchKind.FILE

    def test_query_is_immutable(self):
        """Queries cannot be modified after construction."""
        query = SearchQuery(name="a.txt")

        with pytest.raises(ValidationError):
            query.name = "b.txt"

    def test_to_dict(self):
        query = SearchQuery(name="sub", kind=SearchKind.DIRECTORY)
        assert query.to_dict() == {'name': 'sub', 'kind': 'd'}

    def test_string_representation(self):
        assert str(SearchQuery(name="a.txt")) == "file 'a.txt'"
        assert str(SearchQuery(name="", kind="d")) == "directory '*'"
