"""
Exception types for fstools.

I/O failures are not wrapped: the walker and scanner let the built-in
``OSError`` family propagate so callers see the operating system's error.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models.search_query import SearchKind


class FSToolsError(Exception):
    """Base class for errors raised by fstools."""
    pass


class ArgumentError(FSToolsError):
    """Raised when a tool is invoked with malformed or missing arguments."""
    pass


class NotFoundError(FSToolsError):
    """
    Raised when a search completed without matching anything.

    Attributes:
        kind: The kind of entry that was searched for
        name: The name that was searched for
    """

    def __init__(self, kind: 'SearchKind', name: str):
        self.kind = kind
        self.name = name
        super().__init__(f"{kind.label.capitalize()} '{name}' not found")
