"""Error kinds, endianness selection and the exceptions raised by parsers.

A parser is any callable that takes an input (``bytes`` or ``str``) and
returns a ``(remaining, output)`` pair.  When it cannot produce a value it
raises one of the exceptions below:

* :class:`ParseError` - a recoverable error; another branch may be tried.
* :class:`Failure` - an unrecoverable error; parsing must stop.
* :class:`Incomplete` - more input is required to decide.
"""

from __future__ import annotations

import sys
from enum import Enum, auto
from typing import Any, Optional


class ErrorKind(Enum):
    """The parser that produced an error."""

    TAG = auto()
    MAP_RES = auto()
    MAP_OPT = auto()
    ALT = auto()
    IS_NOT = auto()
    IS_A = auto()
    SEPARATED_LIST = auto()
    SEPARATED_NON_EMPTY_LIST = auto()
    MANY0 = auto()
    MANY1 = auto()
    MANY_TILL = auto()
    COUNT = auto()
    TAKE_UNTIL = auto()
    LENGTH_VALUE = auto()
    TAG_CLOSURE = auto()
    ALPHA = auto()
    DIGIT = auto()
    HEX_DIGIT = auto()
    OCT_DIGIT = auto()
    ALPHA_NUMERIC = auto()
    SPACE = auto()
    MULTI_SPACE = auto()
    LENGTH_VALUE_FN = auto()
    EOF = auto()
    SWITCH = auto()
    TAKE_WHILE1 = auto()
    COMPLETE = auto()
    FIX = auto()
    ESCAPED = auto()
    ESCAPED_TRANSFORM = auto()
    NON_EMPTY = auto()
    MANY_MN = auto()
    NOT = auto()
    PERMUTATION = auto()
    VERIFY = auto()
    TAKE_TILL1 = auto()
    TAKE_WHILE_MN = auto()
    TOO_LARGE = auto()
    MANY0_COUNT = auto()
    MANY1_COUNT = auto()
    FLOAT = auto()
    SATISFY = auto()
    FAIL = auto()
    CHAR = auto()
    CRLF = auto()
    ONE_OF = auto()
    NONE_OF = auto()


class Endianness(Enum):
    """Byte order used by the configurable number parsers."""

    BIG = "big"
    LITTLE = "little"
    NATIVE = "native"

    def resolve(self) -> "Endianness":
        """Return BIG or LITTLE, replacing NATIVE with the host's byte order."""
        if self is Endianness.NATIVE:
            return Endianness(sys.byteorder)
        return self


class _PositionedError(Exception):
    """An error tied to the input at which it occurred."""

    def __init__(self, input: Any, kind: ErrorKind) -> None:
        super().__init__(input, kind)
        self.input = input
        self.kind = kind

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.input == other.input and self.kind == other.kind

    def __hash__(self) -> int:
        return hash((type(self), self.input, self.kind))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.input!r}, {self.kind})"

    def __str__(self) -> str:
        return f"{self.kind.name} error at {self.input!r}"


class ParseError(_PositionedError):
    """A recoverable parse error: another alternative may still succeed."""

    def to_failure(self) -> "Failure":
        """Turn this error into an unrecoverable one at the same position."""
        return Failure(self.input, self.kind)


class Failure(_PositionedError):
    """An unrecoverable parse error: no alternative should be tried."""


class Incomplete(Exception):
    """More input is needed; ``needed`` is the missing count, or None if unknown."""

    def __init__(self, needed: Optional[int] = None) -> None:
        if needed is not None and needed < 0:
            raise ValueError("needed must not be negative")
        self.needed: Optional[int] = needed or None
        super().__init__(self.needed)

    @property
    def is_known(self) -> bool:
        """Whether the number of missing elements is known."""
        return self.needed is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Incomplete):
            return NotImplemented
        return self.needed == other.needed

    def __hash__(self) -> int:
        return hash((Incomplete, self.needed))

    def __repr__(self) -> str:
        return f"Incomplete({self.needed!r})"

    def __str__(self) -> str:
        if self.needed is None:
            return "more input needed"
        return f"{self.needed} more element(s) needed"