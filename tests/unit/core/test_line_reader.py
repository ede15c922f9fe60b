import io
from unittest.mock import Mock

import pytest

from rbgn.core.common.exceptions import MalformedInputError
from rbgn.core.io.line_reader import LineReader


def test_reads_binary_lines_and_strips_terminators() -> None:
    reader = LineReader(io.BytesIO(b"ECHO x\r\nREAD y\nlast"))

    assert reader.next_line() == "ECHO x"
    assert reader.next_line() == "READ y"
    assert reader.next_line() == "last"
    assert reader.next_line() is None
    assert reader.line_number == 3


def test_keeps_trailing_spaces_and_blank_lines() -> None:
    reader = LineReader(io.StringIO("a  \n\n b\n"))

    assert list(reader) == ["a  ", "", " b"]


def test_exhausted_reader_stays_exhausted() -> None:
    reader = LineReader(io.BytesIO(b""))

    assert reader.next_line() is None
    assert reader.next_line() is None
    assert reader.exhausted
    assert reader.line_number == 0


def test_iteration_is_forward_only() -> None:
    reader = LineReader(io.StringIO("one\ntwo\n"))

    assert reader.next_line() == "one"
    assert list(reader) == ["two"]
    assert list(reader) == []


def test_decodes_utf8() -> None:
    reader = LineReader(io.BytesIO("héllo wörld\n".encode()))

    assert reader.next_line() == "héllo wörld"


def test_invalid_utf8_is_malformed_input() -> None:
    reader = LineReader(io.BytesIO(b"ok\n\xff\xfe\n"), name="script.bgn")

    assert reader.next_line() == "ok"
    with pytest.raises(MalformedInputError) as exc_info:
        reader.next_line()

    assert exc_info.value.line_number == 2
    assert exc_info.value.exit_code == 65
    assert "script.bgn" in exc_info.value.message


def test_io_failure_is_malformed_input() -> None:
    stream = Mock()
    stream.readline.side_effect = OSError("disk on fire")
    reader = LineReader(stream, name="broken")

    with pytest.raises(MalformedInputError, match="disk on fire"):
        reader.next_line()
