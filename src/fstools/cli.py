"""
Command-line front door for fstools.

Picks the tool named by the first argument, validates its arguments, and
runs it. Every error a tool hits is printed to stderr here; the tools
themselves only raise.

Usage:
    fstools echo <text>
    fstools cat <file> | cat <source>... <target>
    fstools ls <path>
    fstools find <root> [-type f|d] -name <name>
    fstools grep <pattern> <file> [-i]
"""

import logging
import sys
from typing import Callable, Dict, List, Optional, Sequence, TextIO, Tuple

from .config import load_config
from .errors import ArgumentError, NotFoundError
from .models.config import ToolkitConfig
from .models.search_query import SearchKind, SearchQuery
from .tools import file_ops
from .tools.fs_walker import FSWalker
from .tools.line_scanner import LineScanner


logger = logging.getLogger(__name__)

Tool = Callable[[List[str], ToolkitConfig, TextIO, TextIO], None]

# Reported as open failures; a directory operand is a read failure
OPEN_ERRORS = (FileNotFoundError, NotADirectoryError, PermissionError)


def _echo(args: List[str], config: ToolkitConfig, out: TextIO, err: TextIO) -> None:
    file_ops.echo(args[0], out)


def _cat(args: List[str], config: ToolkitConfig, out: TextIO, err: TextIO) -> None:
    if len(args) == 1:
        try:
            file_ops.cat(args[0], out, config.encoding)
        except (OSError, UnicodeDecodeError) as e:
            print(f"Error reading file: {e}", file=err)
        return

    try:
        file_ops.append(args[:-1], args[-1], config.encoding)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error creating or appending to file: {e}", file=err)


def _ls(args: List[str], config: ToolkitConfig, out: TextIO, err: TextIO) -> None:
    try:
        file_ops.ls(args[0], out)
    except OSError as e:
        print(f"Error listing files in the given directory: {e}", file=err)


def parse_find_options(options: Sequence[str]) -> SearchQuery:
    """
    Build a search query from the tokens following the ``find`` root.

    Tokens are scanned left to right; ``-type`` and ``-name`` take the next
    token as their value (empty if there is none) and a later flag overrides
    an earlier one. Other tokens are ignored.

    Raises:
        ArgumentError: If no non-empty ``-name`` was given
    """
    name = ""
    type_flag = ""
    for i, option in enumerate(options):
        value = options[i + 1] if i + 1 < len(options) else ""
        if option == "-type":
            type_flag = value
        elif option == "-name":
            name = value

    if not name:
        raise ArgumentError("Cannot find a file without it's name")

    return SearchQuery(name=name, kind=SearchKind.from_flag(type_flag))


def _find(args: List[str], config: ToolkitConfig, out: TextIO, err: TextIO) -> None:
    root = args[0]
    try:
        query = parse_find_options(args[1:])
    except ArgumentError as e:
        print(e, file=err)
        return

    walker = FSWalker()
    try:
        matches = walker.find(root, query)
    except (NotFoundError, OSError) as e:
        print(f"Error during finding the {query.kind.label}: {e}", file=err)
        return
    finally:
        logger.debug(f"find stats: {walker.get_stats()}")

    for path in matches:
        print(path, file=out)


def parse_grep_arguments(args: Sequence[str]) -> Tuple[str, str, bool]:
    """
    Split ``grep`` arguments into (pattern, path, case_insensitive).

    Case folding is enabled only by a literal ``-i`` right after the file.

    Raises:
        ArgumentError: If the file operand is missing
    """
    if len(args) < 2:
        raise ArgumentError("grep: missing file operand")
    case_insensitive = len(args) >= 3 and args[2] == "-i"
    return args[0], args[1], case_insensitive


def _grep(args: List[str], config: ToolkitConfig, out: TextIO, err: TextIO) -> None:
    try:
        pattern, path, case_insensitive = parse_grep_arguments(args)
    except ArgumentError as e:
        print(e, file=err)
        return

    scanner = LineScanner(encoding=config.encoding)
    try:
        scanner.grep(path, pattern, case_insensitive, out)
    except OPEN_ERRORS as e:
        print(f"Error opening the file: {e}", file=err)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading the line: {e}", file=err)


TOOLS: Dict[str, Tool] = {
    'echo': _echo,
    'cat': _cat,
    'ls': _ls,
    'find': _find,
    'grep': _grep,
}


def configure_logging(config: ToolkitConfig) -> None:
    """Send diagnostic log records to stderr at the configured level."""
    logging.basicConfig(level=config.get_log_level(), format=config.log_format)


def main(argv: Optional[Sequence[str]] = None, config: Optional[ToolkitConfig] = None,
         out: Optional[TextIO] = None, err: Optional[TextIO] = None) -> int:
    """
    Run one tool invocation.

    ``argv`` excludes the program name and defaults to ``sys.argv[1:]``.
    ``config`` is primarily for tests; when omitted it is loaded from the
    first usable settings file, if any.

    Returns:
        Process exit status: 0 whenever a tool ran, 1 for a missing tool or
        argument
    """
    args = list(sys.argv[1:] if argv is None else argv)
    out = out if out is not None else sys.stdout
    err = err if err is not None else sys.stderr

    if config is None:
        # Unusable settings files are skipped
        config = load_config().config
    configure_logging(config)

    if len(args) < 2:
        print("Error: Missing arguments", file=err)
        return 1

    tool_name, tool_args = args[0], args[1:]
    tool = TOOLS.get(tool_name)
    if tool is None:
        print(f"Unknown tool: {tool_name}", file=out)
        return 0

    logger.debug(f"Running {tool_name} with {tool_args}")
    tool(tool_args, config, out, err)
    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(main())
