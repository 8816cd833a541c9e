"""
Quest file codec — read/write the complete quest file as one unit.

Decode is a strict linear scan:
1. header (96 bytes)
2. 7 x objective block (96 bytes), type and name length checked per slot,
   then the name bytes if name length > 0
3. continuation (3 x u32le)
4. a 1-byte probe that must find the stream exhausted

Decode validates and is all-or-nothing. Encode is a direct transcription of
the in-memory value with no validation.
"""

from __future__ import annotations

import errno
import io
import logging
import os
import struct
import tempfile
from pathlib import Path
from typing import BinaryIO

from ..binary import read_exact, write_all
from ..errors import (
    CodecError,
    InvalidObjectiveTypeError,
    NameLengthError,
    ProbeError,
    TrailingBytesError,
)
from .layout import (
    CONTINUATION_SIZE,
    HEADER_SIZE,
    NAME_LENGTH_OFFSET,
    NAMED_OBJECTIVE_TYPES,
    NUM_OBJECTIVES,
    OBJECTIVE_BLOCK_SIZE,
    VALID_OBJECTIVE_TYPES,
)
from .model import Objective, QuestFile, QuestHeader

log = logging.getLogger(__name__)

_CONTINUATION = struct.Struct("<3I")


# ---- Decode ----

def read(stream: BinaryIO) -> QuestFile:
    """Read a complete quest file from a binary stream.

    Raises TruncatedError, InvalidObjectiveTypeError, NameLengthError or
    TrailingBytesError on malformed data, ProbeError if the end-of-stream
    probe itself fails. Other I/O errors propagate unchanged.
    """
    try:
        quest = _read(stream)
    except CodecError as e:
        log.debug("Quest decode failed: %s", e)
        raise
    log.debug(
        "Decoded quest %d (%d bytes, %d named objectives)",
        quest.header.quest_id, quest.encoded_size,
        sum(1 for o in quest.objectives if o.name),
    )
    return quest


def _read(stream: BinaryIO) -> QuestFile:
    header = QuestHeader(read_exact(stream, HEADER_SIZE, "header"))
    objectives = tuple(_read_objective(stream, slot) for slot in range(NUM_OBJECTIVES))
    continuation = _CONTINUATION.unpack(read_exact(stream, CONTINUATION_SIZE, "continuation"))
    _expect_end(stream)
    return QuestFile(header, objectives, continuation)


def _read_objective(stream: BinaryIO, slot: int) -> Objective:
    block = read_exact(stream, OBJECTIVE_BLOCK_SIZE, f"objective {slot}")
    obj_type = block[0]
    name_len = block[NAME_LENGTH_OFFSET]

    # Type is checked before name length within a slot; the first bad slot wins.
    if obj_type not in VALID_OBJECTIVE_TYPES:
        raise InvalidObjectiveTypeError(slot, obj_type)
    if obj_type not in NAMED_OBJECTIVE_TYPES and name_len != 0:
        raise NameLengthError(slot, obj_type, name_len)

    name = read_exact(stream, name_len, f"objective {slot} name") if name_len else b""
    return Objective(bytearray(block), name)


def _expect_end(stream: BinaryIO) -> None:
    """Probe one byte past the continuation; only a clean b"" is success."""
    try:
        extra = stream.read(1)
    except OSError as e:
        raise ProbeError(f"end-of-stream probe failed: {e}") from e
    # None is a non-blocking stream with nothing ready yet, not the end.
    if extra is None:
        raise ProbeError(errno.EAGAIN, "end-of-stream probe would block")
    if extra:
        raise TrailingBytesError()


def decode(data: bytes | bytearray | memoryview) -> QuestFile:
    """Decode a quest file held entirely in memory."""
    return read(io.BytesIO(data))


def load(path: str | Path) -> QuestFile:
    """Decode a quest file from disk."""
    with open(path, "rb") as f:
        return read(f)


# ---- Encode ----

def write(stream: BinaryIO, quest: QuestFile) -> None:
    """Write quest to a binary stream.

    Write errors propagate immediately; the stream is then left partially
    written.
    """
    write_all(stream, quest.header.raw)
    for obj in quest.objectives:
        write_all(stream, obj.block)
        if obj.name:
            write_all(stream, obj.name)
    write_all(stream, _CONTINUATION.pack(*quest.continuation))


def encode(quest: QuestFile) -> bytes:
    """Encode quest to bytes."""
    buf = io.BytesIO()
    write(buf, quest)
    data = buf.getvalue()
    log.debug("Encoded quest %d (%d bytes)", quest.header.quest_id, len(data))
    return data


def dump(quest: QuestFile, path: str | Path) -> None:
    """Write quest to disk through a staging file, replacing path atomically."""
    path = Path(path)
    data = encode(quest)
    # A unique staging name per call; sibling files and concurrent dumps
    # never share it.
    staging = None
    try:
        with tempfile.NamedTemporaryFile(
            dir=path.parent, prefix=f".{path.name}.", suffix=".tmp", delete=False,
        ) as f:
            staging = Path(f.name)
            f.write(data)
        os.replace(staging, path)
    except OSError:
        if staging is not None:
            staging.unlink(missing_ok=True)
        raise
    log.debug("Wrote %s (%d bytes)", path, len(data))
