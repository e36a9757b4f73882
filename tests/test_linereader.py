import os

import pytest

from libft.linereader import BUFF_SIZE, MAX_FD, LineReader, get_next_line


@pytest.fixture
def open_text(tmp_path):
    opened = []

    def _open(content, name="input.txt"):
        path = tmp_path / name
        path.write_bytes(content.encode("utf-8") if isinstance(content, str) else content)
        fd = os.open(path, os.O_RDONLY)
        opened.append(fd)
        return fd

    yield _open
    for fd in opened:
        try:
            os.close(fd)
        except OSError:
            pass


def _read_all(reader, fd):
    lines = []
    while (line := reader.read_line(fd)) is not None:
        lines.append(line)
    return lines


@pytest.mark.parametrize("buffer_size", [1, 2, 3, 7, BUFF_SIZE, 1000])
def test_lines_are_returned_in_order(open_text, buffer_size):
    expected = ["first line", "", "third one is a bit longer than the buffer", "end"]
    fd = open_text("\n".join(expected) + "\n")
    assert _read_all(LineReader(buffer_size), fd) == expected


@pytest.mark.parametrize("buffer_size", [1, 5, BUFF_SIZE])
def test_last_line_without_newline(open_text, buffer_size):
    fd = open_text("alpha\nbeta")
    assert _read_all(LineReader(buffer_size), fd) == ["alpha", "beta"]


def test_empty_file_gives_none(open_text):
    fd = open_text("")
    assert LineReader().read_line(fd) is None


def test_none_repeats_after_end(open_text):
    fd = open_text("only\n")
    reader = LineReader()
    assert reader.read_line(fd) == "only"
    assert reader.read_line(fd) is None
    assert reader.read_line(fd) is None


def test_blank_lines_only(open_text):
    fd = open_text("\n\n\n")
    assert _read_all(LineReader(4), fd) == ["", "", ""]


def test_interleaved_descriptors_keep_separate_data(open_text):
    fd_a = open_text("a1\na2\na3\n", "a.txt")
    fd_b = open_text("b1\nb2\n", "b.txt")
    reader = LineReader(64)
    assert reader.read_line(fd_a) == "a1"
    assert reader.read_line(fd_b) == "b1"
    assert reader.read_line(fd_a) == "a2"
    assert reader.read_line(fd_b) == "b2"
    assert reader.read_line(fd_b) is None
    assert reader.read_line(fd_a) == "a3"
    assert reader.read_line(fd_a) is None


def test_forget_drops_buffered_data(open_text):
    fd = open_text("one\ntwo\nthree\n")
    reader = LineReader(1000)
    assert reader.read_line(fd) == "one"
    reader.forget(fd)
    assert reader.read_line(fd) is None


def test_forget_unknown_descriptor_leaves_others(open_text):
    fd = open_text("x\ny\n")
    reader = LineReader(1000)
    assert reader.read_line(fd) == "x"
    reader.forget(fd + 100)
    assert reader.read_line(fd) == "y"


def test_multibyte_text_split_across_chunks(open_text):
    lines = ["héllo wörld", "日本語"]
    fd = open_text("\n".join(lines) + "\n")
    assert _read_all(LineReader(1), fd) == lines


def test_reads_from_pipe():
    read_fd, write_fd = os.pipe()
    try:
        os.write(write_fd, b"pipe one\npipe two")
        os.close(write_fd)
        reader = LineReader(3)
        assert _read_all(reader, read_fd) == ["pipe one", "pipe two"]
    finally:
        os.close(read_fd)


@pytest.mark.parametrize("fd", [-1, MAX_FD + 1])
def test_descriptor_out_of_range(fd):
    with pytest.raises(ValueError):
        LineReader().read_line(fd)


@pytest.mark.parametrize("buffer_size", [-1, 10_000_001])
def test_buffer_size_out_of_range(buffer_size):
    with pytest.raises(ValueError):
        LineReader(buffer_size)


def test_closed_descriptor_raises(open_text):
    fd = open_text("data\n")
    os.close(fd)
    with pytest.raises(OSError):
        LineReader().read_line(fd)


def test_zero_buffer_reads_nothing(open_text):
    fd = open_text("content\n")
    assert LineReader(0).read_line(fd) is None


def test_get_next_line_reads_all_lines(open_text):
    expected = ["shared reader", "second"]
    fd = open_text("shared reader\nsecond\n")
    assert get_next_line(fd) == expected[0]
    assert get_next_line(fd) == expected[1]
    assert get_next_line(fd) is None


def test_line_longer_than_many_buffers(open_text):
    long_line = "z" * 500
    fd = open_text(long_line + "\nshort\n")
    lines = _read_all(LineReader(BUFF_SIZE), fd)
    assert lines == [long_line, "short"]
    assert len(lines[0]) == 500