import re

import pytest

from pipex.errors import ErrorKind, PipexError, format_error

_ANSI = re.compile("\033\\[[0-9;]*m")


def test_plain_open_infile_report():
    assert format_error(ErrorKind.OPEN_INFILE, False) == "Error\nFailed to open infile.\n"


def test_colored_header():
    text = format_error(ErrorKind.PIPE, True)
    assert text.startswith("\033[1;31mError\n\033[0m")
    assert text.endswith("Failed to pipe.\n")


def test_wrong_arg_usage():
    text = format_error(ErrorKind.WRONG_ARG, False)
    assert text == "Error\nWrong number of arguments.\nWrite ./pipex file1 cmd1 cmd2 file2"


@pytest.mark.parametrize("kind", list(ErrorKind))
def test_every_report_starts_with_header(kind):
    assert format_error(kind, False).startswith("Error\n")


@pytest.mark.parametrize("kind", list(ErrorKind))
def test_colored_equals_plain_without_codes(kind):
    assert _ANSI.sub("", format_error(kind, True)) == format_error(kind, False)


def test_unknown_kind_rejected():
    with pytest.raises(ValueError):
        format_error(99, False)


def test_exception_str_without_detail():
    assert str(PipexError(ErrorKind.FORK)) == "Failed to fork."


def test_exception_str_with_detail():
    err = PipexError(ErrorKind.OPEN_OUTFILE, "Permission denied")
    assert str(err) == "Failed to open outfile: Permission denied"
    assert err.kind is ErrorKind.OPEN_OUTFILE


def test_exception_report_and_exit_code():
    err = PipexError(ErrorKind.CMD_ACCESS)
    assert err.report(color=False) == "Error\nCould not access a command.\n"
    assert err.exit_code == 1


def test_exception_keeps_detail_and_kind():
    err = PipexError(ErrorKind.CMD1_EXECUTION, "ls")
    assert err.detail == "ls"
    assert err.kind is ErrorKind.CMD1_EXECUTION
    assert str(err) == "Failed to execute the first command: ls"