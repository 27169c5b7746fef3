import re
from typing import Dict, Any, Callable, Tuple, Type

from .errors import ParseFailure

class ValueType:
    def __init__(self) -> None:
        raise NotImplementedError("Subclasses must implement this method")

    def match(self, text: str) -> bool:
        raise NotImplementedError("Subclasses must implement this method")

    def generate_value(self, text: str) -> Any:
        raise NotImplementedError("Subclasses must implement this method")

    def convert(self, text: str) -> Any:
        """
        Convert text to the rule's target type, failing hard on anything it does not match.
        """
        if not self.match(text):
            raise ParseFailure(text, self.target)
        return self.generate_value(text)

class Text(ValueType):
    def __init__(self) -> None:
        self.target: Type[str] = str

    def match(self, text: str) -> bool:
        return isinstance(text, str)

    def generate_value(self, text: str) -> str:
        return text

class Integer(ValueType):
    pattern: str = r'[+-]?[0-9]+'
    # stays under the interpreter's int/str conversion limit
    chunk_digits: int = 1000

    def __init__(self) -> None:
        self.target: Type[int] = int

    def match(self, text: str) -> bool:
        return re.fullmatch(self.pattern, text) is not None

    def generate_value(self, text: str) -> int:
        sign = -1 if text[0] == "-" else 1
        digits = text.lstrip("+-")
        if len(digits) <= self.chunk_digits:
            return sign * int(digits)

        value = 0
        for start in range(0, len(digits), self.chunk_digits):
            chunk = digits[start:start + self.chunk_digits]
            value = value * 10 ** len(chunk) + int(chunk)
        return sign * value

class Float(ValueType):
    def __init__(self) -> None:
        self.target: Type[float] = float

    def match(self, text: str) -> bool:
        # float() would also take padding and digit separators
        if not text or text != text.strip() or "_" in text:
            return False
        try:
            float(text)
        except ValueError:
            return False
        return True

    def generate_value(self, text: str) -> float:
        return float(text)

class Boolean(ValueType):
    literals: Dict[str, bool] = {"true": True, "false": False}

    def __init__(self) -> None:
        self.target: Type[bool] = bool

    def match(self, text: str) -> bool:
        return text in self.literals

    def generate_value(self, text: str) -> bool:
        return self.literals[text]

class Constructor(ValueType):
    """
    Falls back to calling the target with the text, e.g. Decimal or Fraction.
    """
    failures: Tuple[Type[Exception], ...] = (ValueError, TypeError, ArithmeticError)

    def __init__(self, target: Callable[[str], Any]) -> None:
        self.target: Callable[[str], Any] = target

    def match(self, text: str) -> bool:
        try:
            self.target(text)
        except self.failures:
            return False
        return True

    def generate_value(self, text: str) -> Any:
        return self.target(text)

    def convert(self, text: str) -> Any:
        try:
            return self.target(text)
        except self.failures as e:
            raise ParseFailure(text, self.target) from e
