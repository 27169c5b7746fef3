from typing import Dict, Any, Callable, Optional as OptionalType

from .abstract import (
    ValueType,
    Text,
    Integer,
    Float,
    Boolean,
    Constructor
)

class Parser:
    """
    Maps a target type to the value rule that converts text into it.
    """
    def __init__(self, rules: OptionalType[Dict[Any, ValueType]] = None) -> None:
        self.rules: Dict[Any, ValueType] = {
            str: Text(),
            int: Integer(),
            float: Float(),
            bool: Boolean(),
        }
        if rules:
            self.rules.update(rules)

    def register(self, target: Any, rule: ValueType) -> 'Parser':
        """Use `rule` whenever text is parsed to `target`."""
        self.rules[target] = rule
        return self

    def rule_for(self, target: Callable[[str], Any]) -> ValueType:
        if target in self.rules:
            return self.rules[target]
        elif callable(target):
            return Constructor(target)
        else:
            raise ValueError(f"Unsupported parse target: {target!r}")

    def parse(self, text: str, target: Callable[[str], Any] = str) -> Any:
        """
        Parse the text as a value of `target`.

        Raises ParseFailure when the text is not a literal of `target`; no default is ever substituted.
        """
        return self.rule_for(target).convert(text)

default_parser = Parser()

def parse(text: str, target: Callable[[str], Any] = str) -> Any:
    return default_parser.parse(text, target)
