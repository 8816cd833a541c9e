"""Clan information messages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from ..binary import Record, TextField, nested, nested_format
from .login import CHARACTER_NAME_SIZE
from .messages import MsgHead

CLAN_NAME_SIZE = 0x20
NUM_CLAN_MATES = 0x0D


@dataclass
class MsgC2SReqClanInfo(MsgHead):
    FORMAT: ClassVar[str] = MsgHead.FORMAT

    @classmethod
    def new(cls, pc_id: int, *, protocol: int) -> MsgC2SReqClanInfo:
        return cls.build(pc_id=pc_id, protocol=protocol)


@dataclass
class ClanMate(Record):
    FORMAT: ClassVar[str] = f"<{CHARACTER_NAME_SIZE}s11sB3s"

    character_name_raw: bytes = bytes(CHARACTER_NAME_SIZE)
    unknown1: bytes = bytes(11)
    class_id: int = 0
    unknown2: bytes = bytes(3)

    character_name = TextField("character_name_raw", CHARACTER_NAME_SIZE)


@dataclass
class MsgS2CClanInfo(MsgHead):
    FORMAT: ClassVar[str] = (
        MsgHead.FORMAT + f"{CLAN_NAME_SIZE}sHHBHII" + nested_format(ClanMate, NUM_CLAN_MATES)
    )

    clan_name_raw: bytes = bytes(CLAN_NAME_SIZE)
    unknown1: int = 0
    unknown2: int = 0
    unknown3: int = 0
    unknown4: int = 0
    unknown5: int = 0
    unknown6: int = 0
    clan_mates: tuple[ClanMate, ...] = nested(ClanMate, NUM_CLAN_MATES)

    clan_name = TextField("clan_name_raw", CLAN_NAME_SIZE)
