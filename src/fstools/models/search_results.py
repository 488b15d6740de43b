"""
Search results data models for fstools.

This module defines the values produced while walking a directory tree or
scanning a text file: directory entries, ordered match sets, and matched
lines.
"""

import os
from typing import Any, Dict, Iterator, List
from pydantic import BaseModel, Field, field_validator

from .search_query import SearchQuery


class DirectoryEntry(BaseModel):
    """
    A single entry found while listing one directory level.

    Attributes:
        path: Entry path, the listed directory joined with the entry name
        is_dir: Whether the entry is a directory (symlinks are followed)
    """

    path: str = Field(..., min_length=1, description="Path of the entry")
    is_dir: bool = Field(False, description="Whether the entry is a directory")

    @property
    def name(self) -> str:
        """Base name of the entry."""
        return os.path.basename(self.path)


class MatchSet(BaseModel):
    """
    Ordered paths matched by one traversal.

    Paths are kept in discovery order. The same path never appears twice,
    but the same base name can, once per depth it was found at.

    Attributes:
        query: The query that produced the matches
        paths: Matched paths in breadth-first discovery order
    """

    query: SearchQuery = Field(..., description="Query that produced the matches")
    paths: List[str] = Field(default_factory=list, description="Matched paths in discovery order")

    def add(self, path: str) -> None:
        self.paths.append(path)

    def is_empty(self) -> bool:
        return not self.paths

    def __iter__(self) -> Iterator[str]:
        return iter(self.paths)

    def __len__(self) -> int:
        return len(self.paths)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the match set to dictionary representation."""
        return {
            'query': self.query.to_dict(),
            'paths': list(self.paths),
            'total': len(self.paths)
        }


class LineRecord(BaseModel):
    """
    A line reported by the line scanner.

    Attributes:
        line_number: 1-based position of the line in the file
        text: The line as read, without its line terminator
    """

    line_number: int = Field(..., ge=1, description="1-based line number")
    text: str = Field(..., description="Original line text")

    @field_validator('text')
    @classmethod
    def validate_text(cls, v: str) -> str:
        """Reject text that still carries a line terminator."""
        if v.endswith('\n'):
            raise ValueError("Line text must not include the line terminator")
        return v

    def format(self) -> str:
        """Render the record the way grep prints it."""
        return f"Line {self.line_number}: {self.text}"

    def __str__(self) -> str:
        return self.format()
