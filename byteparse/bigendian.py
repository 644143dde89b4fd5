"""Big endian binary number parsers for complete input.

Each parser takes a bytes-like input and returns ``(remaining, value)``.
If the input is shorter than the number being read, a
:class:`~byteparse.errors.ParseError` of kind ``EOF`` is raised, positioned
at the whole input.
"""

from __future__ import annotations

import struct
from typing import Tuple

from byteparse.errors import ErrorKind, ParseError

__all__ = [
    "be_u8",
    "be_u16",
    "be_u24",
    "be_u32",
    "be_u64",
    "be_u128",
    "be_i8",
    "be_i16",
    "be_i24",
    "be_i32",
    "be_i64",
    "be_i128",
    "be_f32",
    "be_f64",
]

_F32 = struct.Struct(">f")
_F64 = struct.Struct(">d")


def _split(data: bytes, size: int) -> Tuple[bytes, bytes]:
    """Return ``(head, rest)`` with ``size`` bytes in head, or raise EOF."""
    if len(data) < size:
        raise ParseError(data, ErrorKind.EOF)
    return data[:size], data[size:]


def _unsigned(data: bytes, size: int) -> Tuple[bytes, int]:
    head, rest = _split(data, size)
    return rest, int.from_bytes(head, "big", signed=False)


def _signed(data: bytes, size: int) -> Tuple[bytes, int]:
    head, rest = _split(data, size)
    return rest, int.from_bytes(head, "big", signed=True)


def be_u8(data):
    """Read an unsigned 1 byte integer."""
    return _unsigned(data, 1)


def be_u16(data):
    """Read a big endian unsigned 2 byte integer."""
    return _unsigned(data, 2)


def be_u24(data):
    """Read a big endian unsigned 3 byte integer."""
    return _unsigned(data, 3)


def be_u32(data):
    """Read a big endian unsigned 4 byte integer."""
    return _unsigned(data, 4)


def be_u64(data):
    """Read a big endian unsigned 8 byte integer."""
    return _unsigned(data, 8)


def be_u128(data):
    """Read a big endian unsigned 16 byte integer."""
    return _unsigned(data, 16)


def be_i8(data):
    """Read a signed 1 byte integer."""
    return _signed(data, 1)


def be_i16(data):
    """Read a big endian signed 2 byte integer."""
    return _signed(data, 2)


def be_i24(data):
    """Read a big endian signed 3 byte integer, sign-extended from bit 23."""
    return _signed(data, 3)


def be_i32(data):
    """Read a big endian signed 4 byte integer."""
    return _signed(data, 4)


def be_i64(data):
    """Read a big endian signed 8 byte integer."""
    return _signed(data, 8)


def be_i128(data):
    """Read a big endian signed 16 byte integer."""
    return _signed(data, 16)


def be_f32(data):
    """Read a big endian 4 byte IEEE 754 floating point number."""
    head, rest = _split(data, 4)
    return rest, _F32.unpack(bytes(head))[0]


def be_f64(data):
    """Read a big endian 8 byte IEEE 754 floating point number."""
    head, rest = _split(data, 8)
    return rest, _F64.unpack(bytes(head))[0]