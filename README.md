# byteparse

This package provides small parser functions for binary numbers and numeric text. You can combine them.

A parser takes its input, which is a `bytes` object or a `str`. It returns a tuple `(remaining, value)`. If the input does not match, the parser raises an exception. It does not return a status.

The exceptions are defined in `byteparse.errors`:

- `ParseError(input, kind)`: the input does not match. The `input` attribute holds the input at the point of failure. The `kind` attribute holds an `ErrorKind` member. `to_failure()` turns the error into a `Failure` at the same position.
- `Failure(input, kind)`: the input does not match, and no other alternative should be tried.
- `Incomplete(needed)`: more input is needed. The `needed` attribute holds the number of missing elements, or `None` when that number is unknown. The parsers in this package read complete input only, so none of them raise this exception.

Two errors compare equal when they are of the same class and have the same input and kind.

## Binary integers and floats

`byteparse.bigendian` provides `be_u8`, `be_u16`, `be_u24`, `be_u32`, `be_u64` and `be_u128`. It also provides the signed versions `be_i8` … `be_i128`, and the IEEE 754 floats `be_f32` and `be_f64`. `byteparse.littleendian` provides the same set with the prefix `le_`.

```python
from byteparse.bigendian import be_u16, be_i24, be_f64
from byteparse.littleendian import le_u32

be_u16(b"\x00\x03abc")                 # (b"abc", 3)
be_i24(b"\xff\xff\xff")                # (b"", -1)
le_u32(b"\x00\x03\x05\x07rest")        # (b"rest", 0x07050300)
be_f64(bytes([0x40, 0x29, 0, 0, 0, 0, 0, 0]))  # (b"", 12.5)
```

Suppose the input has fewer bytes than the number needs. The parser then raises `ParseError` with `ErrorKind.EOF`, and the error's input is the whole input it was given.

## Choosing endianness at run time

`byteparse.numbers` has functions that take an `Endianness` and return the matching parser:

- `u16`, `u24`, `u32`, `u64`, `u128`
- `i16`, `i24`, `i32`, `i64`, `i128`
- `f32`, `f64`

`u8` and `i8` are plain parsers, because byte order does not apply to a single byte.

```python
from byteparse.errors import Endianness
from byteparse.numbers import u16, i16

u16(Endianness.BIG)(b"\x80\x00")       # (b"", 32768)
u16(Endianness.LITTLE)(b"\x80\x00")    # (b"", 128)
i16(Endianness.LITTLE)(b"\x00\x80")    # (b"", -32768)
```

`Endianness.NATIVE` follows the byte order of the host. `Endianness.resolve()` returns the concrete `BIG` or `LITTLE` member.

## Text numbers

These parsers accept either `str` or `bytes`. The slices they return have the same type as the input.

```python
from byteparse.numbers import hex_u32, recognize_float, recognize_float_parts, double, float32

hex_u32(b"1be2;")                      # (b";", 7138)
hex_u32(b"c5a31be201;")                # (b"01;", 3315801058)
recognize_float("123E-02rest")         # ("rest", "123E-02")
recognize_float_parts("-0012.500e3")   # ("", (False, "12", "5", 3))
double("11e-1")                        # ("", 1.1)
float32("123K-01")                     # ("K-01", 123.0)
```

Each function has its own limits and errors:

- **`hex_u32`** reads at most eight hex digits. Any further digits stay in the remaining input. If the input does not start with a hex digit, it raises `ParseError` with `ErrorKind.IS_A`.
- **`recognize_float`** raises `ParseError` when no number starts the input. It raises `Failure` with `ErrorKind.DIGIT` when an `e`/`E` is not followed by digits.
- **`recognize_float_parts`** drops the leading zeros of the integer part and the trailing zeros of the fraction. It keeps one zero where a part would otherwise contain nothing but zeros. It raises `ParseError` with `ErrorKind.FLOAT` when there are no digits at all. It raises `Failure` when the exponent is missing or does not fit in a signed 32-bit integer.
- **`double`** rounds to double precision.
- **`float32`** rounds to single precision and returns the result as a Python `float`.

## Sequencing parsers

`byteparse.sequence` combines any callables that follow the `(remaining, value)` convention:

```python
from byteparse.sequence import pair, delimited, sequence_of
from byteparse.bigendian import be_u8, be_u16

pair(be_u8, be_u8)(b"\x01\x02\x03")    # (b"\x03", (1, 2))
sequence_of(be_u16, be_u8)(b"abc")     # (b"", (0x6162, 0x63))
delimited(be_u8, be_u16, be_u8)(b"\x00ab\x00!")  # (b"!", 0x6162)
```

- `pair` returns the results of both parsers.
- `preceded` keeps the second result.
- `terminated` keeps the first result.
- `separated_pair` keeps the two outer results.
- `delimited` keeps the middle result.
- `sequence_of` needs at least one parser and returns every result as a tuple.

Exceptions from the inner parsers pass through unchanged.

## What is not included

The package has no streaming parsers that ask for more input: every parser treats its input as complete. It has no text-matching parsers such as tag, take or character classes, and no choice or repetition combinators. To get those, write your own callables that follow the same `(remaining, value)` convention and combine them with `byteparse.sequence`.

## Running the tests

```
pip install -e ".[test]"
pytest
```