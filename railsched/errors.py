"""Error reporting shared by the input file parsers."""

import sys
from typing import NoReturn, Optional, TextIO

_RED = "\033[0;31m"
_GREEN = "\033[0;32m"
_YELLOW = "\033[0;33m"
_END = "\033[0m"

_USAGE = (
    "Usage: railsched [options] | default `-e data.txt -d Schedules`\n"
    "Options:\n"
    "  -h, --help        Show this help message\n"
    "  -e, --elements    Specify the elements file\n"
    "  -d, --directory   Specify the directory containing schedule files\n"
)


class ParsingError(RuntimeError):
    """Raised when an input file or the command line cannot be parsed."""

    def __init__(
        self,
        message: str,
        file: str = "",
        line: int = 0,
        column: int = 0,
        line_content: str = "",
    ) -> None:
        super().__init__(f"Parsing Error: {message}")
        self.message = message
        self.file = file
        self.line = line
        self.column = column
        self.line_content = line_content


def report_error(
    file: str, line: int, column: int, message: str, line_content: str
) -> NoReturn:
    """Print a located error to stderr, then raise ParsingError."""
    err = sys.stderr
    if line != 0 and column != 0:
        print(
            f"{_RED}Error in file {file} at line {line}, column {column}: "
            f"{message}{_END}",
            file=err,
        )
        print(f"{_YELLOW}{line_content}{_END}", file=err)
    if column > 0:
        print(" " * (column - 1) + f"{_GREEN}^{_END}", file=err)
    raise ParsingError(message, file, line, column, line_content)


def usage_text() -> str:
    """Return the command-line usage summary."""
    return _USAGE


def print_usage(stream: Optional[TextIO] = None) -> None:
    """Write the usage summary to ``stream`` (stdout by default)."""
    (stream if stream is not None else sys.stdout).write(_USAGE)