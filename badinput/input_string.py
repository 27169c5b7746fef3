from typing import Any, Callable, Iterator, Sequence, Tuple

from .errors import ArityMismatch, IndexOutOfRange
from .parser import default_parser

class InputString:
    """
    One immutable piece of input text, usually a line or a piece split out of one.

    Splitting and parsing never modify the token; they hand back new tokens or typed values,
    and they fail hard as soon as the text does not have the shape asked for.
    """
    __slots__ = ("_inner",)

    def __init__(self, inner: str) -> None:
        if not isinstance(inner, str):
            raise TypeError(f"InputString wraps str, got {type(inner).__name__}")
        object.__setattr__(self, "_inner", inner)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("InputString is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("InputString is immutable")

    def __reduce__(self) -> Tuple[Any, Tuple[str]]:
        return InputString, (self._inner,)

    def as_str(self) -> str:
        return self._inner

    def bytes(self, encoding: str = "utf-8") -> bytes:
        return self._inner.encode(encoding)

    def is_empty(self) -> bool:
        return self._inner == ""

    def chars(self) -> Iterator[str]:
        return iter(self._inner)

    def parse(self, target: Callable[[str], Any] = str) -> Any:
        """
        Parse the text as `target`, e.g. `token.parse(int)`.

        Raises ParseFailure with the text and the type name when the text is not a literal of `target`.
        """
        return default_parser.parse(self._inner, target)

    def split(self, separator: str) -> Iterator['InputString']:
        """Lazily yield the pieces between every occurrence of `separator`."""
        _check_separator(separator)
        return (InputString(piece) for piece in self._inner.split(separator))

    def split_n(self, n: int, separator: str) -> Tuple['InputString', ...]:
        """
        Split on every occurrence of `separator` into exactly `n` pieces.

        Raises ArityMismatch if the text holds any other number of pieces.
        """
        pieces = tuple(self.split(separator))
        if len(pieces) != n:
            raise ArityMismatch(n, len(pieces), self._inner)
        return pieces

    def split_at(self, index: int) -> Tuple['InputString', 'InputString']:
        if not 0 <= index <= len(self._inner):
            raise IndexOutOfRange(index, self._inner)
        return InputString(self._inner[:index]), InputString(self._inner[index:])

    def destruct_n(self, separators: Sequence[str], m: int) -> Tuple['InputString', ...]:
        """
        Cut the text into `m` pieces, taking the separators in turn and starting over when they run out.

        `"Very,8;fancy,82"` with `[",", ";"]` and `m=4` gives `Very`, `8`, `fancy`, `82`.
        Raises ArityMismatch when a separator is missing before `m` pieces are cut.
        """
        if m < 1:
            raise ValueError(f"destruct_n needs at least one piece, got m={m}")
        if not separators:
            raise ValueError("destruct_n needs at least one separator")
        for separator in separators:
            _check_separator(separator)

        pieces = []
        rest = self._inner
        while len(pieces) < m - 1:
            separator = separators[len(pieces) % len(separators)]
            part, found, rest = rest.partition(separator)
            if not found:
                raise ArityMismatch(m, len(pieces) + 1, self._inner)
            pieces.append(InputString(part))
        pieces.append(InputString(rest))
        return tuple(pieces)

    def __len__(self) -> int:
        return len(self._inner)

    def __iter__(self) -> Iterator[str]:
        return self.chars()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, InputString):
            return self._inner == other._inner
        if isinstance(other, str):
            return self._inner == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._inner)

    def __str__(self) -> str:
        return self._inner

    def __format__(self, format_spec: str) -> str:
        return format(self._inner, format_spec)

    def __repr__(self) -> str:
        return f"InputString({self._inner!r})"

def _check_separator(separator: str) -> None:
    if not isinstance(separator, str):
        raise TypeError(f"Separator must be str, got {type(separator).__name__}")
    if separator == "":
        raise ValueError("Empty separator")
