import io

import pytest

from pipex.lines import BUFFER_SIZE, read_lines


def test_lines_without_trailing_newline():
    assert list(read_lines(io.StringIO("a\nb"))) == ["a", "b"]


def test_trailing_newline_gives_final_empty_line():
    assert list(read_lines(io.StringIO("a\nb\n"))) == ["a", "b", ""]


def test_empty_stream_gives_one_empty_line():
    assert list(read_lines(io.StringIO(""))) == [""]


def test_blank_lines_are_kept():
    assert list(read_lines(io.StringIO("a\n\nb"))) == ["a", "", "b"]


def test_binary_stream_yields_bytes():
    assert list(read_lines(io.BytesIO(b"x\ny\n"))) == [b"x", b"y", b""]


def test_line_longer_than_buffer():
    long_line = "z" * (BUFFER_SIZE * 3 + 7)
    lines = list(read_lines(io.StringIO(long_line + "\nend")))
    assert lines == [long_line, "end"]


def test_newline_on_buffer_boundary():
    first = "q" * (BUFFER_SIZE - 1)
    lines = list(read_lines(io.StringIO(first + "\n" + "r")))
    assert lines == [first, "r"]


@pytest.mark.parametrize(
    "text",
    ["", "\n", "\n\n", "one", "one\ntwo\nthree\n", "x" * 2500 + "\n" + "y" * 10],
)
def test_join_round_trip(text):
    assert "\n".join(read_lines(io.StringIO(text))) == text


def test_reading_is_lazy():
    stream = io.StringIO("first\n" + "rest\n" * (BUFFER_SIZE * 2))
    lines = read_lines(stream)
    assert next(lines) == "first"
    assert stream.tell() < len(stream.getvalue())


class _NoData:
    def read(self, size):
        return None


def test_unavailable_data_raises():
    with pytest.raises(OSError):
        list(read_lines(_NoData()))