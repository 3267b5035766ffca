"""Run ``< infile cmd1 | cmd2 > outfile`` without a shell."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import IO, Any, Mapping, Optional, Sequence

from pipex.errors import ErrorKind, PipexError, format_error
from pipex.paths import Command, get_cmd_paths, resolve_command


def _resolve(paths: list[str], text: str, kind: ErrorKind) -> Command:
    try:
        return resolve_command(paths, text)
    except PipexError as exc:
        raise PipexError(kind, exc.detail) from exc


def _spawn(
    command: Command,
    stdin: Any,
    stdout: Any,
    env: dict[str, str],
    kind: ErrorKind,
) -> subprocess.Popen:
    try:
        return subprocess.Popen(
            list(command.argv),
            executable=command.path,
            stdin=stdin,
            stdout=stdout,
            env=env,
        )
    except OSError as exc:
        raise PipexError(kind, exc.strerror or str(exc)) from exc


def _open_outfile(outfile: str) -> IO[bytes]:
    try:
        descriptor = os.open(outfile, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)
    except OSError as exc:
        raise PipexError(ErrorKind.OPEN_OUTFILE, exc.strerror) from exc
    return os.fdopen(descriptor, "wb")


def run_pipex(
    infile: str,
    first: str,
    second: str,
    outfile: str,
    env: Optional[Mapping[str, str]] = None,
) -> int:
    """Feed ``infile`` to ``first``, its output to ``second``, and that to ``outfile``.

    The outfile is created (mode 0644) or truncated before either command
    runs. Returns the exit status of the second command; failures raise
    ``PipexError``.
    """
    environ = dict(os.environ if env is None else env)
    paths = get_cmd_paths(environ)
    try:
        source = open(infile, "rb")
    except OSError as exc:
        raise PipexError(ErrorKind.OPEN_INFILE, exc.strerror) from exc
    with source, _open_outfile(outfile) as sink:
        first_cmd = _resolve(paths, first, ErrorKind.CMD1_EXECUTION)
        producer = _spawn(
            first_cmd, source, subprocess.PIPE, environ, ErrorKind.CMD1_EXECUTION
        )
        try:
            second_cmd = _resolve(paths, second, ErrorKind.CMD2_EXECUTION)
            consumer = _spawn(
                second_cmd, producer.stdout, sink, environ, ErrorKind.CMD2_EXECUTION
            )
        finally:
            producer.stdout.close()
        producer.wait()
        return consumer.wait()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry: ``pipex infile cmd1 cmd2 outfile``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        sys.stderr.write(format_error(ErrorKind.WRONG_ARG))
        return PipexError.exit_code
    try:
        return run_pipex(*args)
    except PipexError as exc:
        sys.stderr.write(exc.report())
        return exc.exit_code


if __name__ == "__main__":
    sys.exit(main())