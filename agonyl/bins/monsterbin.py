"""
Monster bin — client monster table.

    [count:u32le][MonsterBinItem:96] x count
"""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import BinaryIO, ClassVar

from ..binary import Record, decode_text, encode_text, read_counted, write_counted

NAME_SIZE = 0x1F
RESERVED_SIZE = 0x3D


@dataclass
class MonsterBinItem(Record):
    """A single monster record: ID, null-padded name and reserved bytes."""
    FORMAT: ClassVar[str] = f"<I{NAME_SIZE}s{RESERVED_SIZE}s"

    id: int = 0
    name_raw: bytes = bytes(NAME_SIZE)
    unknown: bytes = bytes(RESERVED_SIZE)

    @property
    def name(self) -> str:
        return decode_text(self.name_raw)

    @name.setter
    def name(self, value: str) -> None:
        self.name_raw = encode_text(value, NAME_SIZE)


def read(stream: BinaryIO) -> list[MonsterBinItem]:
    return read_counted(stream, MonsterBinItem, "monster bin")


def write(stream: BinaryIO, items: list[MonsterBinItem]) -> None:
    write_counted(stream, items)


def decode(data: bytes) -> list[MonsterBinItem]:
    return read(io.BytesIO(data))


def encode(items: list[MonsterBinItem]) -> bytes:
    buf = io.BytesIO()
    write(buf, items)
    return buf.getvalue()
