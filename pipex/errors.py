"""Error kinds and the messages reported for them."""

from __future__ import annotations

from enum import IntEnum
from typing import Optional

WHITE = "\033[1;37m"
LIGHT_RED = "\033[1;31m"
END_COLOR = "\033[0m"

EXIT_FAILURE = 1


class ErrorKind(IntEnum):
    """The failures the pipeline can report."""

    WRONG_ARG = 2
    MEMORY = 3
    INIT_PATH = 4
    PIPE = 5
    FORK = 6
    OPEN_INFILE = 7
    OPEN_OUTFILE = 8
    CMD1_EXECUTION = 9
    CMD2_EXECUTION = 10
    CMD_ACCESS = 11


_MESSAGES = {
    ErrorKind.MEMORY: "",
    ErrorKind.INIT_PATH: "Failed to allocate cmd_paths.\n",
    ErrorKind.PIPE: "Failed to pipe.\n",
    ErrorKind.FORK: "Failed to fork.\n",
    ErrorKind.OPEN_INFILE: "Failed to open infile.\n",
    ErrorKind.OPEN_OUTFILE: "Failed to open outfile.\n",
    ErrorKind.CMD1_EXECUTION: "Failed to execute the first command.\n",
    ErrorKind.CMD2_EXECUTION: "Failed to execute the second command.\n",
    ErrorKind.CMD_ACCESS: "Could not access a command.\n",
}


def _body(kind: ErrorKind, color: bool) -> str:
    if kind is ErrorKind.WRONG_ARG:
        usage = " file1 cmd1 cmd2 file2"
        if color:
            usage = f"{WHITE}{usage}{END_COLOR}"
        return "Wrong number of arguments.\nWrite ./pipex" + usage
    return _MESSAGES[kind]


def format_error(kind: ErrorKind, color: bool = True) -> str:
    """Return the full report for ``kind``: an ``Error`` header and its message."""
    kind = ErrorKind(kind)
    header = f"{LIGHT_RED}Error\n{END_COLOR}" if color else "Error\n"
    return header + _body(kind, color)


class PipexError(Exception):
    """A failure of the pipeline, carrying its kind and an optional detail."""

    exit_code = EXIT_FAILURE

    def __init__(self, kind: ErrorKind, detail: Optional[str] = None) -> None:
        self.kind = ErrorKind(kind)
        self.detail = detail
        super().__init__(self.kind, detail)

    def report(self, color: bool = True) -> str:
        """Return the text written to standard error for this failure."""
        return format_error(self.kind, color)

    def __str__(self) -> str:
        message = _body(self.kind, color=False).rstrip("\n") or "Error"
        if self.detail:
            return f"{message.rstrip('.')}: {self.detail}"
        return message