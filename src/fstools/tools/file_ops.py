"""
Plain file operations behind ``echo``, ``cat`` and ``ls``.

Each helper writes to a caller supplied stream and lets ``OSError`` propagate;
reporting is left to the command dispatcher.
"""

import os
import sys
from typing import List, Optional, Sequence, TextIO, Union
import logging

from .fs_walker import DirectoryLister, LocalFileSystem


logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


def echo(text: str, out: Optional[TextIO] = None) -> None:
    """Write ``text`` followed by a newline."""
    print(text, file=out if out is not None else sys.stdout)


def read_text(path: PathLike, encoding: str = 'utf-8') -> str:
    """
    Read a whole file as text.

    Line endings are returned exactly as stored.
    """
    with open(path, 'r', encoding=encoding, newline='') as f:
        return f.read()


def cat(path: PathLike, out: Optional[TextIO] = None, encoding: str = 'utf-8') -> None:
    """
    Print the contents of a single file, followed by a newline.

    Raises:
        OSError: If the file cannot be read
    """
    content = read_text(path, encoding)
    print(content, file=out if out is not None else sys.stdout)


def append(sources: Sequence[PathLike], target: PathLike, encoding: str = 'utf-8') -> int:
    """
    Append the contents of ``sources`` to ``target``.

    The target must already exist. Each source is followed by a newline.
    Sources are processed in order and the first failure stops the operation;
    sources appended before it stay appended.

    Args:
        sources: Files whose contents are appended
        target: Existing file to append to
        encoding: Text encoding of sources and target

    Returns:
        Number of sources appended

    Raises:
        OSError: If the target cannot be opened or a source cannot be read
    """
    fd = os.open(target, os.O_WRONLY | os.O_APPEND)
    appended = 0
    with os.fdopen(fd, 'w', encoding=encoding, newline='') as data_file:
        for source in sources:
            content = read_text(source, encoding)
            data_file.write(content)
            data_file.write("\n")
            appended += 1
            logger.debug(f"Appended {source} to {target}")
    return appended


def list_directory(path: PathLike, filesystem: Optional[DirectoryLister] = None) -> List[str]:
    """
    List the direct entries of a directory, in listing order.

    Raises:
        OSError: If the directory cannot be listed
    """
    filesystem = filesystem if filesystem is not None else LocalFileSystem()
    return [entry.path for entry in filesystem.list_children(os.fspath(path))]


def ls(path: PathLike, out: Optional[TextIO] = None) -> None:
    """Print one line per entry of ``path``."""
    out = out if out is not None else sys.stdout
    for entry_path in list_directory(path):
        print(entry_path, file=out)
