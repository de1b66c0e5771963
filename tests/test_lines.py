import io
import os

import pytest

from cubecaster.libft.lines import LineReader, LineReaderPool


@pytest.mark.parametrize("size", [1, 2, 3, 5, 64])
def test_lines_keep_newlines(size):
    text = "NO ./north.xpm\nF 1,2,3\n\n111\n"
    reader = LineReader(io.StringIO(text), size)
    lines = list(reader)
    assert lines == text.splitlines(keepends=True)
    assert reader.read_line() is None


@pytest.mark.parametrize("size", [1, 4, 100])
def test_last_line_without_newline(size):
    reader = LineReader(io.StringIO("ab\ncd"), size)
    assert reader.read_line() == "ab\n"
    assert reader.read_line() == "cd"
    assert reader.read_line() is None


def test_empty_source():
    assert LineReader(io.StringIO("")).read_line() is None


def test_bytes_stream_round_trip():
    data = b"one\ntwo\nthree"
    lines = list(LineReader(io.BytesIO(data), 3))
    assert b"".join(lines) == data
    assert lines[0] == b"one\n"


def test_file_descriptor(tmp_path):
    path = tmp_path / "map.cub"
    path.write_bytes(b"1111\n1N01\n1111\n")
    fd = os.open(path, os.O_RDONLY)
    try:
        lines = list(LineReader(fd, 2))
    finally:
        os.close(fd)
    assert lines == [b"1111\n", b"1N01\n", b"1111\n"]


def test_invalid_arguments():
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), 0)
    with pytest.raises(ValueError):
        LineReader(-1)
    with pytest.raises(ValueError):
        LineReaderPool(-3)


def test_pool_keeps_buffers_apart(tmp_path):
    first = tmp_path / "a.txt"
    second = tmp_path / "b.txt"
    first.write_bytes(b"a1\na2\n")
    second.write_bytes(b"b1\nb2")
    fd_a = os.open(first, os.O_RDONLY)
    fd_b = os.open(second, os.O_RDONLY)
    pool = LineReaderPool(4)
    try:
        got = [
            pool.read_line(fd_a),
            pool.read_line(fd_b),
            pool.read_line(fd_a),
            pool.read_line(fd_b),
            pool.read_line(fd_a),
            pool.read_line(fd_b),
        ]
    finally:
        os.close(fd_a)
        os.close(fd_b)
    assert got == [b"a1\n", b"b1\n", b"a2\n", b"b2", None, None]


def test_pool_rejects_negative_fd():
    with pytest.raises(ValueError):
        LineReaderPool().read_line(-1)