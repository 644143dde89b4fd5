import pytest

from byteparse.errors import ErrorKind, ParseError
from byteparse.littleendian import (
    le_f32,
    le_f64,
    le_i8,
    le_i16,
    le_i24,
    le_i32,
    le_i64,
    le_i128,
    le_u8,
    le_u16,
    le_u24,
    le_u32,
    le_u64,
    le_u128,
)

I128_MAX = 170_141_183_460_469_231_731_687_303_715_884_105_727
I128_MIN = -170_141_183_460_469_231_731_687_303_715_884_105_728


@pytest.mark.parametrize(
    "data, expected",
    [
        (b"\x00", 0),
        (b"\x7f", 127),
        (b"\xff", -1),
        (b"\x80", -128),
    ],
)
def test_le_i8(data, expected):
    assert le_i8(data) == (b"", expected)


@pytest.mark.parametrize(
    "data, expected",
    [
        (b"\x00\x00", 0),
        (b"\xff\x7f", 32_767),
        (b"\xff\xff", -1),
        (b"\x00\x80", -32_768),
    ],
)
def test_le_i16(data, expected):
    assert le_i16(data) == (b"", expected)


@pytest.mark.parametrize(
    "data, expected",
    [
        (b"\x00\x00\x00", 0),
        (b"\xff\xff\x00", 65_535),
        (b"\x56\x34\x12", 1_193_046),
    ],
)
def test_le_u24(data, expected):
    assert le_u24(data) == (b"", expected)


@pytest.mark.parametrize(
    "data, expected",
    [
        (b"\xff\xff\xff", -1),
        (b"\x00\x00\xff", -65_536),
        (b"\xaa\xcb\xed", -1_193_046),
    ],
)
def test_le_i24(data, expected):
    assert le_i24(data) == (b"", expected)


@pytest.mark.parametrize(
    "data, expected",
    [
        (b"\x00\x00\x00\x00", 0),
        (b"\xff\xff\xff\x7f", 2_147_483_647),
        (b"\xff\xff\xff\xff", -1),
        (b"\x00\x00\x00\x80", -2_147_483_648),
    ],
)
def test_le_i32(data, expected):
    assert le_i32(data) == (b"", expected)


@pytest.mark.parametrize(
    "data, expected",
    [
        (b"\x00" * 8, 0),
        (b"\xff" * 7 + b"\x7f", 9_223_372_036_854_775_807),
        (b"\xff" * 8, -1),
        (b"\x00" * 7 + b"\x80", -9_223_372_036_854_775_808),
    ],
)
def test_le_i64(data, expected):
    assert le_i64(data) == (b"", expected)


@pytest.mark.parametrize(
    "data, expected",
    [
        (b"\x00" * 16, 0),
        (b"\xff" * 15 + b"\x7f", I128_MAX),
        (b"\xff" * 16, -1),
        (b"\x00" * 15 + b"\x80", I128_MIN),
    ],
)
def test_le_i128(data, expected):
    assert le_i128(data) == (b"", expected)


def test_le_f64():
    assert le_f64(b"\x00" * 8) == (b"", 0.0)
    assert le_f64(b"\x00\x00\x00\x10\xfb\x23\xa6\x41") == (b"", 185_728_392.0)
    assert le_f64(bytes([0, 0, 0, 0, 0, 0, 0x29, 0x40])) == (b"", 12.5)


def test_le_u8():
    assert le_u8(b"\x00\x03abcefg") == (b"\x03abcefg", 0x00)


def test_le_i8_leaves_rest():
    assert le_i8(b"\x00\x03abcefg") == (b"\x03abcefg", 0x00)


def test_le_u16():
    assert le_u16(b"\x00\x03abcefg") == (b"abcefg", 0x0300)


def test_le_i16_leaves_rest():
    assert le_i16(b"\x00\x03abcefg") == (b"abcefg", 0x0300)


def test_le_u24_leaves_rest():
    assert le_u24(b"\x00\x03\x05abcefg") == (b"abcefg", 0x050300)


def test_le_i24_leaves_rest():
    assert le_i24(b"\x00\x03\x05abcefg") == (b"abcefg", 0x050300)


def test_le_u32():
    assert le_u32(b"\x00\x03\x05\x07abcefg") == (b"abcefg", 0x07050300)


def test_le_i32_leaves_rest():
    assert le_i32(b"\x00\x03\x05\x07abcefg") == (b"abcefg", 0x07050300)


def test_le_u64():
    data = b"\x00\x01\x02\x03\x04\x05\x06\x07abcefg"
    assert le_u64(data) == (b"abcefg", 0x0706050403020100)


def test_le_i64_leaves_rest():
    data = b"\x00\x01\x02\x03\x04\x05\x06\x07abcefg"
    assert le_i64(data) == (b"abcefg", 0x0706050403020100)


def test_le_u128():
    data = b"\x00\x01\x02\x03\x04\x05\x06\x07" * 2 + b"abcefg"
    assert le_u128(data) == (b"abcefg", 0x07060504030201000706050403020100)


def test_le_i128_leaves_rest():
    data = b"\x00\x01\x02\x03\x04\x05\x06\x07" * 2 + b"abcefg"
    assert le_i128(data) == (b"abcefg", 0x07060504030201000706050403020100)


@pytest.mark.parametrize("parser", [le_u8, le_i8])
def test_one_byte_eof(parser):
    with pytest.raises(ParseError) as info:
        parser(b"")
    assert info.value == ParseError(b"", ErrorKind.EOF)


@pytest.mark.parametrize(
    "parser",
    [le_u16, le_u24, le_u32, le_u64, le_u128, le_i16, le_i24, le_i32, le_i64, le_i128],
)
def test_short_input_eof(parser):
    with pytest.raises(ParseError) as info:
        parser(b"\x01")
    assert info.value == ParseError(b"\x01", ErrorKind.EOF)


@pytest.mark.parametrize("parser", [le_f32, le_f64])
def test_float_eof(parser):
    with pytest.raises(ParseError) as info:
        parser(b"abc")
    assert info.value.input == b"abc"
    assert info.value.kind is ErrorKind.EOF


@pytest.mark.parametrize("value", [0, 1, 0x1234, 0xFFFF])
def test_u16_round_trip(value):
    assert le_u16(value.to_bytes(2, "little")) == (b"", value)


@pytest.mark.parametrize("value", [0, 0x123456, 0xFFFFFF])
def test_u24_round_trip(value):
    assert le_u24(value.to_bytes(3, "little")) == (b"", value)