"""Tests for the shared binary helpers."""

import io

import pytest

from agonyl.binary import (
    FieldDef,
    decode_field,
    encode_field,
    encode_text,
    decode_text,
    hex_dump,
    read_exact,
    write_all,
)
from agonyl.errors import CodecError, TruncatedError

from conftest import ChunkedReader, StallingReader


def test_decode_field_u8():
    f = FieldDef("test", 0, 1, "u8")
    assert decode_field(b"\xff", f) == 255


def test_decode_field_u16le():
    f = FieldDef("test", 0, 2, "u16le")
    assert decode_field(b"\x01\x00", f) == 1
    assert decode_field(b"\x00\x01", f) == 256


def test_decode_field_u32le():
    f = FieldDef("test", 0, 4, "u32le")
    assert decode_field(b"\x01\x00\x00\x00", f) == 1


def test_decode_field_i32le():
    f = FieldDef("test", 0, 4, "i32le")
    assert decode_field(b"\xff\xff\xff\xff", f) == -1


def test_decode_field_str():
    f = FieldDef("test", 0, 10, "str")
    assert decode_field(b"hello\x00\x00\x00\x00\x00", f) == "hello"


def test_decode_field_with_offset():
    f = FieldDef("test", 4, 2, "u16le")
    data = b"\x00\x00\x00\x00\x42\x00"
    assert decode_field(data, f) == 0x42


def test_encode_field_touches_only_its_range():
    buf = bytearray(b"\xaa" * 8)
    encode_field(buf, FieldDef("test", 2, 2, "u16le"), 0x1234)
    assert buf == bytearray(b"\xaa\xaa\x34\x12\xaa\xaa\xaa\xaa")


def test_encode_field_signed():
    buf = bytearray(4)
    encode_field(buf, FieldDef("test", 0, 4, "i32le"), -2)
    assert buf == bytearray(b"\xfe\xff\xff\xff")


def test_encode_field_bytes_size_checked():
    buf = bytearray(8)
    with pytest.raises(ValueError):
        encode_field(buf, FieldDef("pad", 0, 4, "pad"), b"\x01\x02")
    encode_field(buf, FieldDef("pad", 4, 4, "pad"), b"\x01\x02\x03\x04")
    assert buf[4:] == bytearray(b"\x01\x02\x03\x04")


def test_text_round_trip():
    raw = encode_text("Forest", 0x20)
    assert len(raw) == 0x20
    assert decode_text(raw) == "Forest"
    with pytest.raises(ValueError):
        encode_text("x" * 33, 0x20)


def test_decode_text_tolerates_garbage():
    assert decode_text(b"ab\xffcd\x00zz") == "ab\ufffdcd"


def test_read_exact_collects_short_reads():
    assert read_exact(ChunkedReader(b"abcdefgh", chunk=3), 8, "test") == b"abcdefgh"


def test_read_exact_truncated():
    with pytest.raises(TruncatedError) as exc:
        read_exact(io.BytesIO(b"abc"), 8, "block")
    assert isinstance(exc.value, CodecError)
    assert isinstance(exc.value, ValueError)
    assert (exc.value.section, exc.value.expected, exc.value.received) == ("block", 8, 3)
    assert "block" in str(exc.value)


def test_read_exact_would_block_is_not_truncation():
    with pytest.raises(BlockingIOError) as exc:
        read_exact(StallingReader(b"abcdefgh", stall_at=3), 8, "block")
    assert not isinstance(exc.value, CodecError)
    assert "block" in str(exc.value)


def test_read_exact_zero_bytes():
    assert read_exact(io.BytesIO(b""), 0, "empty") == b""


def test_write_all_short_write():
    class Short:
        def write(self, data):
            return len(data) - 1

    with pytest.raises(OSError):
        write_all(Short(), b"abcd")


def test_hex_dump():
    out = hex_dump(b"AB\x00" + bytes(16))
    lines = out.splitlines()
    assert len(lines) == 2
    assert lines[0].startswith("  0000  41 42 00")
    assert lines[0].endswith("AB" + "." * 14)
    assert lines[1].startswith("  0010  00 00 00")
