"""Locating commands through the PATH of an environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterable, Mapping, Optional

from pipex.errors import ErrorKind, PipexError
from pipex.strutil import split_words


@dataclass(frozen=True)
class Command:
    """A command ready to run: the program's location and its argument vector."""

    path: str
    argv: tuple[str, ...]

    @property
    def name(self) -> str:
        """The command name as it was written."""
        return self.argv[0]


def get_cmd_paths(env: Mapping[str, str]) -> list[str]:
    """Return the directories of ``env['PATH']``, each ending with a slash.

    Empty entries are dropped. A missing PATH raises ``PipexError``.
    """
    try:
        raw = env["PATH"]
    except KeyError:
        raise PipexError(ErrorKind.INIT_PATH, "PATH is not set") from None
    return [directory + "/" for directory in split_words(raw, ":")]


def parse_command(text: str) -> list[str]:
    """Split a command line on spaces into its words."""
    return split_words(text, " ")


def find_executable(paths: Iterable[str], name: str) -> Optional[str]:
    """Return the first ``directory + name`` that exists and is executable."""
    for directory in paths:
        candidate = directory + name
        if os.access(candidate, os.F_OK) and os.access(candidate, os.X_OK):
            return candidate
    return None


def resolve_command(paths: Iterable[str], text: str) -> Command:
    """Parse ``text`` and locate its program among ``paths``.

    Raises ``PipexError`` when the command is empty or cannot be found.
    """
    words = parse_command(text)
    if not words:
        raise PipexError(ErrorKind.CMD_ACCESS, "empty command")
    location = find_executable(paths, words[0])
    if location is None:
        raise PipexError(ErrorKind.CMD_ACCESS, words[0])
    return Command(path=location, argv=tuple(words))