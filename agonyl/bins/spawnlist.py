"""
Spawn list — contiguous 8-byte spawn entries until end of stream.

There is no count; a stream whose length is not a multiple of the entry size
is truncated.
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from typing import BinaryIO, ClassVar

from ..binary import Record, write_all
from ..errors import TruncatedError

log = logging.getLogger(__name__)


@dataclass
class SpawnListItem(Record):
    """A single spawn entry."""
    FORMAT: ClassVar[str] = "<HBBHBB"

    id: int = 0
    x: int = 0
    y: int = 0
    unknown1: int = 0
    orientation: int = 0
    spawn_step: int = 0


def read(stream: BinaryIO) -> list[SpawnListItem]:
    data = stream.read()
    size = SpawnListItem.SIZE
    if len(data) % size:
        expected = (len(data) // size + 1) * size
        raise TruncatedError("spawn list", expected, len(data))
    items = [SpawnListItem(*values) for values in SpawnListItem._struct.iter_unpack(data)]
    log.debug("Decoded spawn list with %d entries", len(items))
    return items


def write(stream: BinaryIO, items: list[SpawnListItem]) -> None:
    write_all(stream, b"".join(item.pack() for item in items))


def decode(data: bytes) -> list[SpawnListItem]:
    return read(io.BytesIO(data))


def encode(items: list[SpawnListItem]) -> bytes:
    return b"".join(item.pack() for item in items)
