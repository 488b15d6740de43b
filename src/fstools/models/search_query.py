"""
Search query data models for fstools.

This module defines the value handed to the filesystem walker: the name being
looked for and whether files or directories are eligible for the result.
"""

from typing import Any, Dict, Optional
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, field_validator


class SearchKind(Enum):
    """Kinds of entries a search can collect."""
    FILE = "f"
    DIRECTORY = "d"

    @classmethod
    def from_flag(cls, value: Optional[str]) -> 'SearchKind':
        """
        Map a ``-type`` flag value to a search kind.

        Unknown or missing values fall back to file mode.
        """
        for kind in cls:
            if kind.value == value:
                return kind
        return cls.FILE

    @property
    def label(self) -> str:
        """Human readable name used in messages."""
        return "directory" if self is SearchKind.DIRECTORY else "file"


class SearchQuery(BaseModel):
    """
    Represents a name search over a directory tree.

    The query is immutable once built; the walker reads it for the whole
    traversal without modifying it.

    Attributes:
        name: Exact base name to look for; empty matches every eligible entry
        kind: Whether only directories or every entry is eligible
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field("", description="Exact entry name to match")
    kind: SearchKind = Field(SearchKind.FILE, description="Eligible entry kind")

    @field_validator('kind', mode='before')
    @classmethod
    def validate_kind(cls, v) -> SearchKind:
        """Accept ``-type`` flag strings as well as enum members."""
        if isinstance(v, str):
            return SearchKind.from_flag(v)
        return v

    def is_directory_search(self) -> bool:
        return self.kind is SearchKind.DIRECTORY

    def to_dict(self) -> Dict[str, Any]:
        """Convert the search query to a dictionary representation."""
        data = self.model_dump()
        data['kind'] = self.kind.value
        return data

    def __str__(self) -> str:
        name = self.name if self.name else "*"
        return f"{self.kind.label} '{name}'"
