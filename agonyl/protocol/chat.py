"""Chat messages and say types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar

from ..binary import TextField, encode_text
from .login import CHARACTER_NAME_SIZE
from .messages import MsgHead

WORDS_SIZE = 0x40


class SayType(IntEnum):
    SYSTEM = 0x00
    GENERAL = 0x01
    WHISPER = 0x03
    PARTY = 0x04
    KNIGHTHOOD = 0x05
    COUNTRY = 0x06
    ALLIANCE = 0x08
    NOTICE = 0x0C
    SHOUT = 0xF1


@dataclass
class MsgC2SSay(MsgHead):
    """Client chat line; say_pc is the whisper target or the speaker."""
    FORMAT: ClassVar[str] = MsgHead.FORMAT + f"B{CHARACTER_NAME_SIZE}s{WORDS_SIZE}s"

    say_type: int = SayType.SYSTEM
    say_pc_raw: bytes = bytes(CHARACTER_NAME_SIZE)
    words_raw: bytes = bytes(WORDS_SIZE)

    say_pc = TextField("say_pc_raw", CHARACTER_NAME_SIZE)
    words = TextField("words_raw", WORDS_SIZE)

    @classmethod
    def new(cls, pc_id: int, say_type: int, say_pc: str, words: str, *,
            protocol: int) -> MsgC2SSay:
        return cls.build(
            pc_id=pc_id,
            protocol=protocol,
            say_type=say_type,
            say_pc_raw=encode_text(say_pc, CHARACTER_NAME_SIZE),
            words_raw=encode_text(words, WORDS_SIZE),
        )


@dataclass
class MsgS2CSay(MsgHead):
    """Chat line relayed to clients, with the speaker's pc id."""
    FORMAT: ClassVar[str] = MsgHead.FORMAT + f"BI{CHARACTER_NAME_SIZE}s{WORDS_SIZE}s"

    say_type: int = SayType.SYSTEM
    say_pc_id: int = 0
    say_pc_raw: bytes = bytes(CHARACTER_NAME_SIZE)
    words_raw: bytes = bytes(WORDS_SIZE)

    say_pc = TextField("say_pc_raw", CHARACTER_NAME_SIZE)
    words = TextField("words_raw", WORDS_SIZE)

    @classmethod
    def new(cls, pc_id: int, say_type: int, say_pc: str, words: str, *,
            protocol: int) -> MsgS2CSay:
        return cls.build(
            pc_id=pc_id,
            protocol=protocol,
            say_type=say_type,
            say_pc_id=pc_id,
            say_pc_raw=encode_text(say_pc, CHARACTER_NAME_SIZE),
            words_raw=encode_text(words, WORDS_SIZE),
        )
