"""
NPC file — a single fixed 78-byte NPC record.

Stats, three attack slots and a null-padded display name, little-endian with
no alignment padding.
"""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import BinaryIO, ClassVar

from ..binary import Record, TextField, nested, nested_format

NAME_SIZE = 0x14
NUM_ATTACKS = 3


@dataclass
class NPCAttack(Record):
    """One attack slot: range, area, damage and additional damage."""
    FORMAT: ClassVar[str] = "<4H"

    range: int = 0
    area: int = 0
    damage: int = 0
    additional_damage: int = 0


@dataclass
class NPCFileData(Record):
    FORMAT: ClassVar[str] = (
        f"<{NAME_SIZE}sHHBBBB{nested_format(NPCAttack, NUM_ATTACKS)}HHIBHBIHHHHH"
    )

    name_raw: bytes = bytes(NAME_SIZE)
    id: int = 0
    respawn_rate: int = 0
    attack_type_info: int = 0
    target_selection_info: int = 0
    defense: int = 0
    additional_defense: int = 0
    attacks: tuple[NPCAttack, ...] = nested(NPCAttack, NUM_ATTACKS)
    attack_speed_low: int = 0
    attack_speed_high: int = 0
    movement_speed: int = 0
    level: int = 0
    player_exp: int = 0
    appearance: int = 0
    hp: int = 0
    blue_attack_defense: int = 0
    red_attack_defense: int = 0
    grey_attack_defense: int = 0
    mercenary_exp: int = 0
    unknown: int = 0

    name = TextField("name_raw", NAME_SIZE)


def read(stream: BinaryIO) -> NPCFileData:
    return NPCFileData.read_from(stream)


def write(stream: BinaryIO, data: NPCFileData) -> None:
    data.write_to(stream)


def decode(data: bytes) -> NPCFileData:
    return read(io.BytesIO(data))


def encode(data: NPCFileData) -> bytes:
    return data.pack()
