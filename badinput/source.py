import io
import logging
import sys
from typing import Any, Iterator, Optional, Protocol

from .errors import DecodeFailure, ExhaustedInput
from .input_string import InputString

logger = logging.getLogger("badinput")

DEFAULT_ENCODING = "utf-8"
DEFAULT_CHUNK_SIZE = 1024

class Readable(Protocol):
    def read(self, size: int = -1) -> bytes: ...

class BadInput:
    """
    Reads lines from any byte stream, and gives up loudly the moment the input is not what you expected.

    Nothing is read until the first line is requested. Lines come out in input order with their
    `\\n` or `\\r\\n` terminator removed, and each line is read from the stream exactly once.
    The encoding must encode `\\n` as a single byte, as UTF-8 does.
    """
    def __init__(self, reader: Readable, encoding: str = DEFAULT_ENCODING, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        if chunk_size < 1:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self.reader: Readable = reader
        self.encoding: str = encoding
        self.chunk_size: int = chunk_size
        self._buf: bytearray = bytearray()
        self._eof: bool = False

    @classmethod
    def from_bytes(cls, data: bytes, **kwargs: Any) -> 'BadInput':
        return cls(io.BytesIO(data), **kwargs)

    @classmethod
    def from_text(cls, text: str, encoding: str = DEFAULT_ENCODING, **kwargs: Any) -> 'BadInput':
        return cls(io.BytesIO(text.encode(encoding)), encoding=encoding, **kwargs)

    @classmethod
    def stdin(cls, **kwargs: Any) -> 'BadInput':
        return cls(sys.stdin.buffer, **kwargs)

    @classmethod
    def open(cls, path: str, **kwargs: Any) -> 'BadInput':
        """Open a file in binary mode; the file is closed along with the BadInput."""
        reader = open(path, 'rb')
        try:
            return cls(reader, **kwargs)
        except Exception:
            reader.close()
            raise

    def line(self) -> InputString:
        """
        Read the next line.

        Raises ExhaustedInput when there are no more lines, and DecodeFailure when the line
        is not valid in the configured encoding.
        """
        line = self.try_line()
        if line is None:
            raise ExhaustedInput()
        return line

    def try_line(self) -> Optional[InputString]:
        """Read the next line, or return None at the end of input."""
        raw = self._read_to_byte(b'\n')
        if raw is not None:
            line = self._decode(raw)
            if line.endswith('\r'):
                line = line[:-1]
            return InputString(line)

        # last line without a terminator
        if not self._buf:
            return None
        raw = bytes(self._buf)
        self._buf.clear()
        return InputString(self._decode(raw))

    def lines(self) -> Iterator[InputString]:
        """
        Iterate over the remaining lines.

        Only the lines pulled from the iterator are consumed; breaking out early leaves the rest to be read.
        """
        while True:
            line = self.try_line()
            if line is None:
                return
            yield line

    def __iter__(self) -> Iterator[InputString]:
        return self.lines()

    def close(self) -> None:
        close = getattr(self.reader, 'close', None)
        if close is not None:
            close()

    def __enter__(self) -> 'BadInput':
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _read_to_byte(self, delimiter: bytes) -> Optional[bytes]:
        """Take everything up to `delimiter` out of the buffer, reading more as needed. None at end of input."""
        searched = 0
        while True:
            index = self._buf.find(delimiter, searched)
            if index != -1:
                raw = bytes(self._buf[:index])
                del self._buf[:index + 1]
                return raw
            searched = len(self._buf)

            if self._eof:
                return None
            chunk = self.reader.read(self.chunk_size)
            if not chunk:
                logger.debug(f"End of input with {len(self._buf)} bytes pending")
                self._eof = True
                return None
            logger.debug(f"Read {len(chunk)} bytes")
            self._buf.extend(chunk)

    def _decode(self, raw: bytes) -> str:
        try:
            return raw.decode(self.encoding)
        except UnicodeDecodeError as e:
            raise DecodeFailure(self.encoding, raw) from e

