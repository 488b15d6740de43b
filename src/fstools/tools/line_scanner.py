"""
Line scanner for fstools.

Reads a text file one line at a time and reports the lines containing a
literal substring. This is the matching core of ``grep``.
"""

import os
import sys
from typing import Iterator, Optional, TextIO, Union
import logging

from ..models.search_results import LineRecord


logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Not found!"


class LineScanner:
    """
    Streaming substring scanner over a text file.

    Lines are split on ``\\n`` with a trailing ``\\r`` removed, and each line
    is decoded on its own, so matches before an undecodable line are still
    reported before the decode error surfaces.
    """

    def __init__(self, encoding: str = 'utf-8'):
        """
        Initialize the line scanner.

        Args:
            encoding: Codec used to decode each line (strict)
        """
        self.encoding = encoding

    def scan(self, path: Union[str, os.PathLike], pattern: str,
             case_insensitive: bool = False) -> Iterator[LineRecord]:
        """
        Yield the lines of ``path`` that contain ``pattern``.

        Args:
            path: File to read
            pattern: Literal substring to look for; empty matches every line
            case_insensitive: Compare lower-cased forms of line and pattern

        Yields:
            LineRecord objects in file order, carrying the original text

        Raises:
            OSError: If the file cannot be opened or read
            UnicodeDecodeError: If a line is not valid text in the configured encoding
        """
        needle = pattern.lower() if case_insensitive else pattern

        with open(path, 'rb') as f:
            for line_number, raw in enumerate(f, start=1):
                line = self._decode(raw)
                haystack = line.lower() if case_insensitive else line
                if needle in haystack:
                    yield LineRecord(line_number=line_number, text=line)

    def _decode(self, raw: bytes) -> str:
        if raw.endswith(b'\n'):
            raw = raw[:-1]
            if raw.endswith(b'\r'):
                raw = raw[:-1]
        return raw.decode(self.encoding)

    def grep(self, path: Union[str, os.PathLike], pattern: str,
             case_insensitive: bool = False, out: Optional[TextIO] = None) -> int:
        """
        Print every matching line, or the not-found sentinel.

        Matches are written as they are found. ``Not found!`` is written once
        the end of the file is reached without a match.

        Args:
            path: File to read
            pattern: Literal substring to look for
            case_insensitive: Whether to ignore case
            out: Stream to write to; defaults to stdout

        Returns:
            Number of matching lines
        """
        out = out if out is not None else sys.stdout
        found = 0

        for record in self.scan(path, pattern, case_insensitive):
            found += 1
            print(record.format(), file=out)

        if not found:
            print(NOT_FOUND_MESSAGE, file=out)

        logger.debug(f"{found} matching lines for {pattern!r} in {path}")
        return found
