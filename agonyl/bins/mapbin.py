"""
Map bin — client map table.

    [count:u32le][MapBinItem:56] x count
"""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import BinaryIO, ClassVar

from ..binary import Record, decode_text, encode_text, read_counted, write_counted

NAME_SIZE = 0x20


@dataclass
class MapBinItem(Record):
    """A single map record: ID, five reserved u32 values and a null-padded name."""
    FORMAT: ClassVar[str] = f"<6I{NAME_SIZE}s"

    id: int = 0
    unknown1: int = 0
    unknown2: int = 0
    unknown3: int = 0
    unknown4: int = 0
    unknown5: int = 0
    name_raw: bytes = bytes(NAME_SIZE)

    @property
    def name(self) -> str:
        return decode_text(self.name_raw)

    @name.setter
    def name(self, value: str) -> None:
        self.name_raw = encode_text(value, NAME_SIZE)


def read(stream: BinaryIO) -> list[MapBinItem]:
    return read_counted(stream, MapBinItem, "map bin")


def write(stream: BinaryIO, items: list[MapBinItem]) -> None:
    write_counted(stream, items)


def decode(data: bytes) -> list[MapBinItem]:
    return read(io.BytesIO(data))


def encode(items: list[MapBinItem]) -> bytes:
    buf = io.BytesIO()
    write(buf, items)
    return buf.getvalue()
