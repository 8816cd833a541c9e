"""Character selection and progression messages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Iterable

from ..binary import Record, TextField, encode_text, nested, nested_format
from .login import CHARACTER_NAME_SIZE
from .messages import MsgHead

NUM_WEAR_SLOTS = 0x0A
NUM_CHARACTER_SLOTS = 5
EMPTY_SLOT_CLASS = 0xFF


@dataclass
class MsgC2SAskDeletePlayer(MsgHead):
    FORMAT: ClassVar[str] = MsgHead.FORMAT + f"{CHARACTER_NAME_SIZE}s"

    character_name_raw: bytes = bytes(CHARACTER_NAME_SIZE)

    character_name = TextField("character_name_raw", CHARACTER_NAME_SIZE)

    @classmethod
    def new(cls, pc_id: int, character_name: str, *, protocol: int) -> MsgC2SAskDeletePlayer:
        return cls.build(
            pc_id=pc_id,
            protocol=protocol,
            character_name_raw=encode_text(character_name, CHARACTER_NAME_SIZE),
        )


@dataclass
class AclCharacterWear(Record):
    """One worn item as shown on the character select screen."""
    FORMAT: ClassVar[str] = "<IIII"

    item_ptr: int = 0
    item_code: int = 0
    item_option: int = 0
    wear_index: int = 0


@dataclass
class CharacterInfo(Record):
    FORMAT: ClassVar[str] = (
        f"<{CHARACTER_NAME_SIZE}sBBBI{nested_format(AclCharacterWear, NUM_WEAR_SLOTS)}"
    )

    name_raw: bytes = bytes(CHARACTER_NAME_SIZE)
    slot_used: int = 0
    class_id: int = 0
    nation: int = 0
    level: int = 0
    wear: tuple[AclCharacterWear, ...] = nested(AclCharacterWear, NUM_WEAR_SLOTS)

    name = TextField("name_raw", CHARACTER_NAME_SIZE)

    @classmethod
    def empty(cls) -> CharacterInfo:
        return cls(class_id=EMPTY_SLOT_CLASS)

    @property
    def is_empty(self) -> bool:
        return self.class_id == EMPTY_SLOT_CLASS


@dataclass
class MsgS2CCharacterList(MsgHead):
    """The account's character slots; unfilled slots carry class 0xFF."""
    FORMAT: ClassVar[str] = MsgHead.FORMAT + nested_format(CharacterInfo, NUM_CHARACTER_SLOTS)

    characters: tuple[CharacterInfo, ...] = nested(CharacterInfo, NUM_CHARACTER_SLOTS)

    @classmethod
    def new(cls, pc_id: int, characters: Iterable[CharacterInfo] = (), *,
            protocol: int) -> MsgS2CCharacterList:
        slots = list(characters)[:NUM_CHARACTER_SLOTS]
        slots += [CharacterInfo.empty() for _ in range(NUM_CHARACTER_SLOTS - len(slots))]
        return cls.build(pc_id=pc_id, protocol=protocol, characters=tuple(slots))


@dataclass
class MsgS2CLevelUp(MsgHead):
    FORMAT: ClassVar[str] = MsgHead.FORMAT + "H"

    level: int = 0

    @classmethod
    def new(cls, level: int, *, protocol: int) -> MsgS2CLevelUp:
        return cls.build(level=level, protocol=protocol)
