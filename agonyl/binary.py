"""
Binary helpers — field tables, exact reads and flat struct records.

Every A3 format is little-endian. Layouts are described either as a table of
FieldDef entries over an owning byte buffer (when padding must survive a
round-trip byte-for-byte) or as a Record with a struct format (flat records
with no inert bytes worth keeping apart).
"""

from __future__ import annotations

import errno
import struct
from dataclasses import dataclass, field, fields
from typing import BinaryIO, ClassVar, Iterable

from .errors import TruncatedError

# Null-padded names are decoded leniently; game data is not always clean.
TEXT_ENCODING = "utf-8"


@dataclass(frozen=True)
class FieldDef:
    """A field within a fixed-size buffer."""
    name: str
    offset: int
    size: int
    type: str  # "u8", "u16le", "u32le", "i32le", "str", "bytes", "pad"
    description: str = ""

    @property
    def end(self) -> int:
        return self.offset + self.size


def field_table(*defs: FieldDef) -> dict[str, FieldDef]:
    """Index field definitions by name, in layout order."""
    return {d.name: d for d in defs}


def decode_text(raw: bytes) -> str:
    """Decode a null-padded name buffer."""
    return raw.split(b"\x00", 1)[0].decode(TEXT_ENCODING, errors="replace")


def encode_text(text: str, size: int) -> bytes:
    """Encode text into a null-padded buffer of exactly `size` bytes."""
    raw = text.encode(TEXT_ENCODING)
    if len(raw) > size:
        raise ValueError(f"text is {len(raw)} bytes, field holds {size}")
    return raw.ljust(size, b"\x00")


def decode_field(data: bytes | bytearray, field_def: FieldDef) -> int | str | bytes:
    """Decode a single field from a buffer."""
    raw = bytes(data[field_def.offset:field_def.end])
    match field_def.type:
        case "u8":
            return raw[0]
        case "u16le" | "u32le":
            return int.from_bytes(raw, "little", signed=False)
        case "i32le":
            return int.from_bytes(raw, "little", signed=True)
        case "str":
            return decode_text(raw)
        case _:
            return raw


def encode_field(data: bytearray, field_def: FieldDef, value: int | str | bytes) -> None:
    """Overwrite a single field in place; bytes outside it are not touched."""
    match field_def.type:
        case "u8" | "u16le" | "u32le":
            raw = int(value).to_bytes(field_def.size, "little", signed=False)
        case "i32le":
            raw = int(value).to_bytes(field_def.size, "little", signed=True)
        case "str":
            raw = encode_text(value, field_def.size)
        case _:
            raw = bytes(value)
            if len(raw) != field_def.size:
                raise ValueError(
                    f"{field_def.name}: expected {field_def.size} bytes, got {len(raw)}"
                )
    data[field_def.offset:field_def.end] = raw


class BufferField:
    """Descriptor exposing one FieldDef of an instance's byte buffer.

    The buffer attribute must hold a bytearray; writes replace only the
    field's own byte range.
    """

    def __init__(self, field_def: FieldDef, buffer: str = "raw"):
        self.field_def = field_def
        self.buffer = buffer

    def __set_name__(self, owner, name: str) -> None:
        self.name = name

    def __get__(self, obj, objtype=None):
        if obj is None:
            return self
        return decode_field(getattr(obj, self.buffer), self.field_def)

    def __set__(self, obj, value) -> None:
        encode_field(getattr(obj, self.buffer), self.field_def, value)


# ---- Stream I/O ----

def read_exact(stream: BinaryIO, n: int, section: str) -> bytes:
    """Read exactly n bytes from stream or raise TruncatedError.

    Only an empty read means end of stream. A non-blocking stream with no
    data ready returns None, which raises BlockingIOError.
    """
    buf = bytearray()
    while len(buf) < n:
        chunk = stream.read(n - len(buf))
        if chunk is None:
            raise BlockingIOError(errno.EAGAIN, f"{section}: no data available", len(buf))
        if not chunk:
            break
        buf.extend(chunk)
    if len(buf) < n:
        raise TruncatedError(section, n, len(buf))
    return bytes(buf)


def write_all(stream: BinaryIO, data: bytes | bytearray) -> None:
    """Write all of data to stream; a short write is an OSError."""
    written = stream.write(data)
    if written is not None and written < len(data):
        raise OSError(f"short write: {written} of {len(data)} bytes")


def hex_dump(data: bytes | bytearray, width: int = 16) -> str:
    """Hex dump with offsets and ASCII column."""
    lines = []
    for i in range(0, len(data), width):
        chunk = data[i:i + width]
        hex_part = " ".join(f"{b:02x}" for b in chunk)
        ascii_part = "".join(chr(b) if 32 <= b < 127 else "." for b in chunk)
        lines.append(f"  {i:04x}  {hex_part:<{width * 3}s}  {ascii_part}")
    return "\n".join(lines)


# ---- Flat records ----

class Record:
    """Base for dataclass records packed with a fixed struct format.

    Subclasses set FORMAT; field order of the dataclass follows the format.
    A field declared with nested() holds a fixed-length tuple of sub-records
    whose values sit inline at that position.
    """
    FORMAT: ClassVar[str] = ""
    SIZE: ClassVar[int] = 0
    ARITY: ClassVar[int] = 0  # number of flat struct values
    _struct: ClassVar[struct.Struct]

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if "FORMAT" in cls.__dict__:
            cls._struct = struct.Struct(cls.FORMAT)
            cls.SIZE = cls._struct.size
            cls.ARITY = len(cls._struct.unpack(bytes(cls.SIZE)))

    def __post_init__(self):
        for f in fields(self):
            if "record" not in f.metadata:
                continue
            items = tuple(getattr(self, f.name))
            if len(items) != f.metadata["count"]:
                raise ValueError(
                    f"{f.name} needs exactly {f.metadata['count']} entries, got {len(items)}"
                )
            setattr(self, f.name, items)

    def to_values(self) -> tuple:
        values = []
        for f in fields(self):
            value = getattr(self, f.name)
            if "record" in f.metadata:
                for item in value:
                    values.extend(item.to_values())
            else:
                values.append(value)
        return tuple(values)

    @classmethod
    def from_values(cls, values: tuple):
        args = []
        pos = 0
        for f in fields(cls):
            sub = f.metadata.get("record")
            if sub is None:
                args.append(values[pos])
                pos += 1
                continue
            items = []
            for _ in range(f.metadata["count"]):
                items.append(sub.from_values(values[pos:pos + sub.ARITY]))
                pos += sub.ARITY
            args.append(tuple(items))
        return cls(*args)

    def pack(self) -> bytes:
        return self._struct.pack(*self.to_values())

    @classmethod
    def unpack(cls, data: bytes):
        """Decode from the front of data; extra bytes are ignored."""
        if len(data) < cls.SIZE:
            raise TruncatedError(cls.__name__, cls.SIZE, len(data))
        return cls.from_values(cls._struct.unpack_from(data))

    @classmethod
    def read_from(cls, stream: BinaryIO):
        return cls.from_values(cls._struct.unpack(read_exact(stream, cls.SIZE, cls.__name__)))

    def write_to(self, stream: BinaryIO) -> None:
        write_all(stream, self.pack())


_COUNT = struct.Struct("<I")


def read_counted(stream: BinaryIO, record_cls: type[Record], section: str) -> list:
    """Read a u32le entry count followed by that many records."""
    (count,) = _COUNT.unpack(read_exact(stream, _COUNT.size, f"{section} count"))
    return [record_cls.read_from(stream) for _ in range(count)]


def write_counted(stream: BinaryIO, records: Iterable[Record]) -> None:
    """Write a u32le entry count followed by each record."""
    records = list(records)
    write_all(stream, _COUNT.pack(len(records)))
    for record in records:
        record.write_to(stream)


def nested(record_cls: type[Record], count: int):
    """Dataclass field holding `count` inline sub-records, blank by default."""
    return field(
        default_factory=lambda: tuple(record_cls() for _ in range(count)),
        metadata={"record": record_cls, "count": count},
    )


def nested_format(record_cls: type[Record], count: int) -> str:
    """Struct format for `count` inline copies of record_cls."""
    return record_cls.FORMAT.lstrip("<") * count


class TextField:
    """Descriptor exposing a null-padded bytes attribute of a record as text."""

    def __init__(self, raw: str, size: int):
        self.raw = raw
        self.size = size

    def __get__(self, obj, objtype=None):
        if obj is None:
            return self
        return decode_text(getattr(obj, self.raw))

    def __set__(self, obj, value: str) -> None:
        setattr(obj, self.raw, encode_text(value, self.size))
