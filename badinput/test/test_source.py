import io
import logging

import pytest

from .. import source as source_module
from ..source import BadInput
from ..input_string import InputString
from ..errors import DecodeFailure, ExhaustedInput

class CountingReader:
    """A byte stream that remembers how often it was read."""
    def __init__(self, data: bytes):
        self.stream = io.BytesIO(data)
        self.reads = 0
        self.closed = False

    def read(self, size: int = -1) -> bytes:
        self.reads += 1
        return self.stream.read(size)

    def close(self):
        self.closed = True


def test_lines_in_order():
    cases = [
        (b"Hello, world!\nGood bye!", ["Hello, world!", "Good bye!"]),
        (b"Hello, world!\nGood bye!\n", ["Hello, world!", "Good bye!"]),
        (b"one\r\ntwo\r\n", ["one", "two"]),
        (b"first\n\nthird", ["first", "", "third"]),
        (b"\n", [""]),
        (b"", []),
    ]

    for data, expected in cases:
        print(f"Reading: {data!r}")
        lines = list(BadInput.from_bytes(data).lines())
        assert lines == expected
        assert all(isinstance(line, InputString) for line in lines)


def test_lone_carriage_return_is_text():
    assert list(BadInput.from_bytes(b"a\rb\nc\r")) == ["a\rb", "c\r"]


def test_small_chunks():
    data = "Game 1: 3 blue\nGame 2: 1 green\nGame 3: héllo".encode("utf-8")

    for chunk_size in (1, 2, 3, 7, 1024):
        lines = list(BadInput.from_bytes(data, chunk_size=chunk_size))
        assert lines == ["Game 1: 3 blue", "Game 2: 1 green", "Game 3: héllo"]


def test_nothing_read_until_iterated():
    reader = CountingReader(b"What is\ngoing on!?")
    source = BadInput(reader)
    lines = source.lines()
    assert reader.reads == 0

    assert next(lines) == "What is"
    assert reader.reads > 0


def test_line_and_try_line():
    source = BadInput.from_text("Two\nlines")
    assert source.try_line() == "Two"
    assert source.line() == "lines"
    assert source.try_line() is None

    with pytest.raises(ExhaustedInput):
        source.line()


def test_lines_not_restartable():
    source = BadInput.from_text("Here are multiple\nlines.")
    assert list(source.lines()) == ["Here are multiple", "lines."]
    assert list(source.lines()) == []
    assert list(source) == []


def test_partial_iteration_leaves_rest():
    source = BadInput.from_text("Here are multiple\nlines.")
    for line in source.lines():
        assert line == "Here are multiple"
        break

    assert source.line() == "lines."


def test_invalid_utf8():
    source = BadInput.from_bytes(b"fine\nbad \xff\xfe\nnever")
    assert source.line() == "fine"

    with pytest.raises(DecodeFailure) as info:
        source.line()
    assert info.value.encoding == "utf-8"
    assert isinstance(info.value.__cause__, UnicodeDecodeError)


def test_invalid_utf8_on_last_line():
    with pytest.raises(DecodeFailure):
        list(BadInput.from_bytes(b"ok\n\xc3"))


def test_other_encoding():
    data = "caf\xe9\nna\xefve".encode("latin-1")
    assert list(BadInput.from_bytes(data, encoding="latin-1")) == ["café", "naïve"]

    with pytest.raises(DecodeFailure):
        list(BadInput.from_bytes(data))


def test_from_text_roundtrips_encoding():
    assert list(BadInput.from_text("ø\nå", encoding="latin-1")) == ["ø", "å"]


def test_bad_chunk_size():
    with pytest.raises(ValueError):
        BadInput.from_bytes(b"", chunk_size=0)


def test_context_manager_closes_reader():
    reader = CountingReader(b"a\nb")
    with BadInput(reader) as source:
        assert source.line() == "a"
    assert reader.closed


def test_open_file(tmp_path):
    path = tmp_path / "input.txt"
    path.write_bytes(b"3 blue\n4 red\n")

    with BadInput.open(str(path)) as source:
        counts = [line.split_n(2, " ")[0].parse(int) for line in source]
        assert counts == [3, 4]
    assert source.reader.closed


def test_stdin(monkeypatch):
    class FakeStdin:
        buffer = io.BytesIO(b"from stdin\n")

    monkeypatch.setattr("sys.stdin", FakeStdin())
    assert list(BadInput.stdin()) == ["from stdin"]


def test_debug_logging(caplog):
    with caplog.at_level(logging.DEBUG, logger="badinput"):
        list(BadInput.from_bytes(b"a\nb", chunk_size=2))

    messages = [record.getMessage() for record in caplog.records]
    print(messages)
    assert "Read 2 bytes" in messages
    assert any(message.startswith("End of input") for message in messages)


def test_open_closes_file_on_bad_config(tmp_path, monkeypatch):
    path = tmp_path / "input.txt"
    path.write_bytes(b"a\n")
    opened = []

    def recording_open(*args, **kwargs):
        handle = open(*args, **kwargs)
        opened.append(handle)
        return handle

    monkeypatch.setattr(source_module, "open", recording_open, raising=False)

    with pytest.raises(ValueError):
        BadInput.open(str(path), chunk_size=0)

    assert len(opened) == 1
    assert opened[0].closed
