from typing import Any


class FatalInputError(Exception):
    """Base class for input that does not have the shape the program expects."""

    pass


class ArityMismatch(FatalInputError):
    """Raised when text splits into a different number of pieces than requested."""

    def __init__(self, expected: int, actual: int, text: str) -> None:
        self.expected: int = expected
        self.actual: int = actual
        self.text: str = text
        super().__init__(f"Expected {expected} pieces but found {actual} in \"{text}\"")


class ParseFailure(FatalInputError):
    """Raised when text is not a valid literal of the requested type."""

    def __init__(self, text: str, target: Any) -> None:
        self.text: str = text
        self.target: Any = target
        super().__init__(f"Could not parse \"{text}\" to {type_name(target)}")


class DecodeFailure(FatalInputError):
    """Raised when a line of input is not valid in the configured encoding."""

    def __init__(self, encoding: str, data: bytes) -> None:
        self.encoding: str = encoding
        self.data: bytes = data
        super().__init__(f"Line is not valid {encoding}: {data!r}")


class ExhaustedInput(FatalInputError):
    """Raised when a line is requested after the end of input."""

    def __init__(self) -> None:
        super().__init__("No more lines to read")


class IndexOutOfRange(FatalInputError):
    """Raised when text is split at an index outside of it."""

    def __init__(self, index: int, text: str) -> None:
        self.index: int = index
        self.text: str = text
        super().__init__(f"Cannot split \"{text}\" (length {len(text)}) at index {index}")


def type_name(target: Any) -> str:
    return getattr(target, '__name__', None) or repr(target)
