"""
Data models for fstools.

This module contains all the core data structures used throughout the system.
"""

from .search_query import SearchKind, SearchQuery
from .search_results import DirectoryEntry, LineRecord, MatchSet
from .config import ToolkitConfig

__all__ = [
    'SearchKind',
    'SearchQuery',
    'DirectoryEntry',
    'LineRecord',
    'MatchSet',
    'ToolkitConfig'
]
