"""
BadInput, input parsing that crashes on purpose

Unlicense (CC0, Public Domain), 2025

This is a library for terse parsing of line-based text input in Python.
Give any byte stream to BadInput, stdin or a file for instance, and split and parse its lines
with the expectation that they have a known shape. The moment they don't, the program stops
with a message pointing at the offending text.

    data = BadInput.from_text("Very,8;fancy,82;string,11")
    w1, n1, w2, n2, w3, n3 = data.line().destruct_n([",", ";"], 6)
    assert f"{w1} {w2} {w3}" == "Very fancy string"
    assert n1.parse(int) + n2.parse(int) + n3.parse(int) == 101
"""

import logging

__all__ = [
    "abstract",
    "errors",
    "input_string",
    "parser",
    "source",
    "BadInput",
    "InputString",
    "FatalInputError",
    "configure_logging",
]

from . import errors
from . import abstract
from . import parser
from . import input_string
from . import source

from .errors import FatalInputError
from .input_string import InputString
from .source import BadInput

def configure_logging(level: int = logging.DEBUG) -> None:
    """Print the reader's trace to stderr, for scripts that want to watch what is being read."""
    logging.basicConfig(level=level, format='%(levelname)s: %(message)s')
    logging.getLogger("badinput").setLevel(level)
