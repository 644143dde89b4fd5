"""Combinators that apply parsers one after another."""

from __future__ import annotations

from typing import Any, Callable, Tuple, TypeVar

Input = TypeVar("Input")
Parser = Callable[[Any], Tuple[Any, Any]]


def pair(first: Parser, second: Parser) -> Parser:
    """Apply ``first`` then ``second`` and return both outputs as a pair."""

    def parse(data):
        rest, out1 = first(data)
        rest, out2 = second(rest)
        return rest, (out1, out2)

    return parse


def preceded(first: Parser, second: Parser) -> Parser:
    """Apply ``first``, discard its output, and return the output of ``second``."""

    def parse(data):
        rest, _ = first(data)
        return second(rest)

    return parse


def terminated(first: Parser, second: Parser) -> Parser:
    """Apply ``first`` then ``second``, returning only the output of ``first``."""

    def parse(data):
        rest, out = first(data)
        rest, _ = second(rest)
        return rest, out

    return parse


def separated_pair(first: Parser, sep: Parser, second: Parser) -> Parser:
    """Apply ``first``, ``sep`` and ``second``; return the outputs of the outer two."""

    def parse(data):
        rest, out1 = first(data)
        rest, _ = sep(rest)
        rest, out2 = second(rest)
        return rest, (out1, out2)

    return parse


def delimited(first: Parser, second: Parser, third: Parser) -> Parser:
    """Apply three parsers in turn and return only the output of the middle one."""

    def parse(data):
        rest, _ = first(data)
        rest, out = second(rest)
        rest, _ = third(rest)
        return rest, out

    return parse


def sequence_of(*args: Parser) -> Parser:
    """Apply each parser in order and return their outputs as a tuple."""
    if not args:
        raise ValueError("sequence_of needs at least one parser")
    parsers = tuple(args)

    def parse(data):
        outputs = []
        for parser in parsers:
            data, out = parser(data)
            outputs.append(out)
        return data, tuple(outputs)

    return parse