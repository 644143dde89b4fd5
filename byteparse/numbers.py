"""Number parsers for complete input: configurable endianness, hex and text floats.

Binary parsers take bytes and return ``(remaining, value)``; text parsers
accept either ``str`` or ``bytes`` and slice the input they were given.
"""

from __future__ import annotations

import math
from fractions import Fraction
from typing import Callable, Tuple, Union

from byteparse.bigendian import (
    be_f32,
    be_f64,
    be_i16,
    be_i24,
    be_i32,
    be_i64,
    be_i128,
    be_i8,
    be_u16,
    be_u24,
    be_u32,
    be_u64,
    be_u128,
    be_u8,
)
from byteparse.errors import Endianness, ErrorKind, Failure, ParseError
from byteparse.littleendian import (
    le_f32,
    le_f64,
    le_i16,
    le_i24,
    le_i32,
    le_i64,
    le_i128,
    le_u16,
    le_u24,
    le_u32,
    le_u64,
    le_u128,
)

__all__ = [
    "u8",
    "i8",
    "u16",
    "u24",
    "u32",
    "u64",
    "u128",
    "i16",
    "i24",
    "i32",
    "i64",
    "i128",
    "f32",
    "f64",
    "hex_u32",
    "recognize_float",
    "recognize_float_parts",
    "float32",
    "double",
]

Text = Union[str, bytes, bytearray]
Parser = Callable[[bytes], Tuple[bytes, object]]

_DIGITS = "0123456789"
_HEX_DIGITS = "0123456789abcdefABCDEF"
_I32_MAX = 2**31 - 1
_I32_MIN = -(2**31)


def _as_str(data: Text) -> str:
    """View the input as text with one character per input element."""
    if isinstance(data, str):
        return data
    return bytes(data).decode("latin-1")


def _digits_end(s: str, pos: int) -> int:
    """Index just past the run of ASCII digits starting at ``pos``."""
    while pos < len(s) and s[pos] in _DIGITS:
        pos += 1
    return pos


def _skip_sign(s: str, pos: int) -> int:
    if pos < len(s) and s[pos] in "+-":
        return pos + 1
    return pos


def _pick(endian, big: Parser, little: Parser) -> Parser:
    if Endianness(endian).resolve() is Endianness.BIG:
        return big
    return little


def u8(data):
    """Read an unsigned 1 byte integer."""
    return be_u8(data)


def i8(data):
    """Read a signed 1 byte integer."""
    return be_i8(data)


def u16(endian):
    """Return the unsigned 2 byte parser for the given byte order."""
    return _pick(endian, be_u16, le_u16)


def u24(endian):
    """Return the unsigned 3 byte parser for the given byte order."""
    return _pick(endian, be_u24, le_u24)


def u32(endian):
    """Return the unsigned 4 byte parser for the given byte order."""
    return _pick(endian, be_u32, le_u32)


def u64(endian):
    """Return the unsigned 8 byte parser for the given byte order."""
    return _pick(endian, be_u64, le_u64)


def u128(endian):
    """Return the unsigned 16 byte parser for the given byte order."""
    return _pick(endian, be_u128, le_u128)


def i16(endian):
    """Return the signed 2 byte parser for the given byte order."""
    return _pick(endian, be_i16, le_i16)


def i24(endian):
    """Return the signed 3 byte parser for the given byte order."""
    return _pick(endian, be_i24, le_i24)


def i32(endian):
    """Return the signed 4 byte parser for the given byte order."""
    return _pick(endian, be_i32, le_i32)


def i64(endian):
    """Return the signed 8 byte parser for the given byte order."""
    return _pick(endian, be_i64, le_i64)


def i128(endian):
    """Return the signed 16 byte parser for the given byte order."""
    return _pick(endian, be_i128, le_i128)


def f32(endian):
    """Return the 4 byte float parser for the given byte order."""
    return _pick(endian, be_f32, le_f32)


def f64(endian):
    """Return the 8 byte float parser for the given byte order."""
    return _pick(endian, be_f64, le_f64)


def hex_u32(data):
    """Read a hex-encoded integer of at most 8 digits.

    Raises a ParseError of kind IS_A if the input does not start with a hex
    digit.  Digits beyond the eighth are left in the remaining input.
    """
    s = _as_str(data)
    end = 0
    while end < len(s) and s[end] in _HEX_DIGITS:
        end += 1
    if end == 0:
        raise ParseError(data, ErrorKind.IS_A)
    end = min(end, 8)
    return data[end:], int(s[:end], 16)


def recognize_float(text):
    """Recognise a floating point number and return the matching slice.

    Raises ParseError when no number starts the input, and Failure when an
    exponent marker is not followed by digits.
    """
    s = _as_str(text)
    pos = _skip_sign(s, 0)
    digits_end = _digits_end(s, pos)
    if digits_end > pos:
        pos = digits_end
        if s.startswith(".", pos):
            pos = _digits_end(s, pos + 1)
    else:
        if not s.startswith(".", pos):
            raise ParseError(text[pos:], ErrorKind.CHAR)
        after = _digits_end(s, pos + 1)
        if after == pos + 1:
            raise ParseError(text[pos + 1 :], ErrorKind.DIGIT)
        pos = after
    if pos < len(s) and s[pos] in "eE":
        exp_start = _skip_sign(s, pos + 1)
        exp_end = _digits_end(s, exp_start)
        if exp_end == exp_start:
            raise Failure(text[exp_start:], ErrorKind.DIGIT)
        pos = exp_end
    return text[pos:], text[:pos]


def _parse_i32(text: Text, s: str, start: int) -> Tuple[int, int]:
    """Parse a signed 32 bit decimal at ``start``; return ``(end, value)``."""
    pos = start
    negative = False
    if s.startswith("-", pos):
        negative = True
        pos += 1
    elif s.startswith("+", pos):
        pos += 1
    if pos >= len(s):
        raise ParseError(text[start:], ErrorKind.DIGIT)
    end = _digits_end(s, pos)
    if end == pos:
        raise ParseError(text[start:], ErrorKind.DIGIT)
    value = int(s[pos:end])
    if negative:
        value = -value
    if not _I32_MIN <= value <= _I32_MAX:
        raise ParseError(text[start:], ErrorKind.DIGIT)
    return end, value


def recognize_float_parts(text):
    """Split a text float into ``(positive, integer, fraction, exponent)``.

    Leading zeros of the integer part and trailing zeros of the fraction are
    dropped, keeping one zero where the part would otherwise be all zeros.
    Returns ``(remaining, parts)``.
    """
    s = _as_str(text)
    n = len(s)
    pos = 0
    positive = True
    if s.startswith("-"):
        positive = False
        pos = 1
    elif s.startswith("+"):
        pos = 1

    zeros_end = pos
    while zeros_end < n and s[zeros_end] == "0":
        zeros_end += 1
    int_end = _digits_end(s, zeros_end)
    integer = text[zeros_end:int_end]
    if int_end == zeros_end and zeros_end > pos:
        integer = text[zeros_end - 1 : zeros_end]
    pos = int_end

    fraction = text[pos:pos]
    if s.startswith(".", pos):
        start = pos + 1
        end = _digits_end(s, start)
        digits = s[start:end]
        length = end - start
        trailing = length - len(digits.rstrip("0"))
        if trailing == 0:
            keep = length
        elif trailing == length:
            keep = 1
        else:
            keep = length - trailing
        fraction = text[start : start + keep]
        pos = end

    if not integer and not fraction:
        raise ParseError(text, ErrorKind.FLOAT)

    exponent = 0
    if pos < n and s[pos] in "eE":
        try:
            pos, exponent = _parse_i32(text, s, pos + 1)
        except ParseError as exc:
            raise exc.to_failure() from None
    return text[pos:], (positive, integer, fraction, exponent)


def _to_f64(integer: str, fraction: str, exponent: int) -> float:
    return float(f"{integer or '0'}.{fraction or '0'}e{exponent}")


def _pow2(shift: int) -> Fraction:
    return Fraction(2**shift) if shift >= 0 else Fraction(1, 2**-shift)


def _round_f32(value: Fraction) -> float:
    """Round a non-negative exact value to the nearest binary32 number."""
    if value == 0:
        return 0.0
    e = value.numerator.bit_length() - value.denominator.bit_length()
    if _pow2(e) > value:
        e -= 1
    shift = max(e, -126) - 23
    mantissa = round(value / _pow2(shift))
    if mantissa == 0:
        return 0.0
    if mantissa.bit_length() + shift > 128:
        return math.inf
    return math.ldexp(mantissa, shift)


def _to_f32(integer: str, fraction: str, exponent: int) -> float:
    digits = (integer + fraction).lstrip("0")
    if not digits:
        return 0.0
    scale = exponent - len(fraction)
    magnitude = len(digits) - 1 + scale
    if magnitude > 39:
        return math.inf
    if magnitude < -46:
        return 0.0
    factor = Fraction(10**scale) if scale >= 0 else Fraction(1, 10**-scale)
    return _round_f32(int(digits) * factor)


def float32(text):
    """Parse a text float, rounded to single precision."""
    rest, (positive, integer, fraction, exponent) = recognize_float_parts(text)
    value = _to_f32(_as_str(integer), _as_str(fraction), exponent)
    return rest, value if positive else -value


def double(text):
    """Parse a text float, rounded to double precision."""
    rest, (positive, integer, fraction, exponent) = recognize_float_parts(text)
    value = _to_f64(_as_str(integer), _as_str(fraction), exponent)
    return rest, value if positive else -value