"""
Filesystem walker for fstools.

This module provides the breadth-first traversal behind ``find``. It lists one
directory level at a time, queues every subdirectory it discovers, and collects
the entries whose names satisfy a search query.
"""

import os
from collections import deque
from typing import Deque, Dict, List, Optional, Protocol, Union
import logging

from ..errors import NotFoundError
from ..models.search_query import SearchQuery
from ..models.search_results import DirectoryEntry, MatchSet
from .name_matcher import name_matches


logger = logging.getLogger(__name__)


class DirectoryLister(Protocol):
    """Filesystem capability the walker depends on."""

    def list_children(self, path: str) -> List[DirectoryEntry]:
        ...

    def is_directory(self, path: str) -> bool:
        ...


class LocalFileSystem:
    """DirectoryLister backed by the host filesystem."""

    def list_children(self, path: str) -> List[DirectoryEntry]:
        """
        List the direct entries of a directory.

        Entries come back in the order the operating system reports them.
        Symlinks are classified by their target.

        Args:
            path: Directory to list

        Returns:
            List of DirectoryEntry objects

        Raises:
            OSError: If the directory cannot be opened or read
        """
        with os.scandir(path) as it:
            return [DirectoryEntry(path=entry.path, is_dir=entry.is_dir()) for entry in it]

    def is_directory(self, path: str) -> bool:
        return os.path.isdir(path)


class FSWalker:
    """
    Breadth-first walker that finds entries by name.

    Directories are expanded strictly in FIFO order, so every entry at depth n
    is examined before any entry at depth n + 1. Every subdirectory is queued
    whatever the search kind; the kind only decides which entries are eligible
    for the result. There is no cycle detection.
    """

    def __init__(self, filesystem: Optional[DirectoryLister] = None):
        """
        Initialize the filesystem walker.

        Args:
            filesystem: Listing capability to walk; defaults to the local filesystem
        """
        self.filesystem = filesystem if filesystem is not None else LocalFileSystem()
        self._stats = {
            'directories_traversed': 0,
            'entries_scanned': 0,
            'entries_matched': 0
        }

    def find(self, root: Union[str, os.PathLike], query: SearchQuery) -> MatchSet:
        """
        Search the tree under ``root`` for entries matching ``query``.

        Args:
            root: Directory to start from
            query: Name and kind to search for

        Returns:
            MatchSet with at least one path, in discovery order

        Raises:
            NotFoundError: If the walk completed without a match
            OSError: If any directory on the way cannot be listed
        """
        root = os.fspath(root)
        logger.info(f"Searching {root} for {query}")

        matches = MatchSet(query=query)
        for path in self._walk(root, query):
            matches.add(path)

        if matches.is_empty():
            raise NotFoundError(query.kind, query.name)

        logger.debug(f"Found {len(matches)} matches for {query}")
        return matches

    def _walk(self, root: str, query: SearchQuery):
        """
        Yield matching paths breadth-first.

        Errors from listing a directory propagate immediately and end the walk.
        """
        directories_only = query.is_directory_search()
        frontier: Deque[str] = deque([root])

        while frontier:
            directory = frontier.popleft()
            entries = self.filesystem.list_children(directory)
            self._stats['directories_traversed'] += 1

            for entry in entries:
                self._stats['entries_scanned'] += 1
                if entry.is_dir:
                    frontier.append(entry.path)
                elif directories_only:
                    continue

                if name_matches(entry.name, query.name):
                    self._stats['entries_matched'] += 1
                    yield entry.path

    def find_files(self, root: Union[str, os.PathLike], name: str) -> MatchSet:
        """Find every entry named ``name`` under ``root``."""
        return self.find(root, SearchQuery(name=name, kind='f'))

    def find_directories(self, root: Union[str, os.PathLike], name: str) -> MatchSet:
        """Find every directory named ``name`` under ``root``."""
        return self.find(root, SearchQuery(name=name, kind='d'))

    def get_stats(self) -> Dict[str, int]:
        """
        Get statistics about the filesystem walking operation.

        Returns:
            Dictionary containing operation statistics
        """
        return self._stats.copy()

    def reset_stats(self) -> None:
        """Reset the statistics counters."""
        self._stats = {
            'directories_traversed': 0,
            'entries_scanned': 0,
            'entries_matched': 0
        }
