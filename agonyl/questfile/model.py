"""
Quest file model — header, objectives and the QuestFile aggregate.

Header and objective blocks keep their full raw buffers; logical fields are
views over byte sub-ranges, so unknown and padding bytes survive any
decode/encode cycle unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..binary import TEXT_ENCODING, BufferField, decode_field, decode_text
from .layout import (
    CONTINUATION_SIZE,
    HEADER_FIELDS,
    HEADER_SIZE,
    MAX_NAME_LENGTH,
    NAME_LENGTH_OFFSET,
    NAMED_OBJECTIVE_TYPES,
    NUM_CONTINUATIONS,
    NUM_OBJECTIVES,
    OBJECTIVE_BLOCK_SIZE,
    OBJECTIVE_FIELDS,
    TARGET_NPC_ID,
    UNUSED_CONTINUATION,
    UNUSED_REWARD_ITEM_CODE,
    ObjectiveType,
)


def _fixed_buffer(data, size: int, what: str) -> bytearray:
    buf = bytearray(data)
    if len(buf) != size:
        raise ValueError(f"{what} must be {size} bytes, got {len(buf)}")
    return buf


@dataclass
class QuestHeader:
    """The fixed 96-byte quest header."""
    raw: bytearray = field(default_factory=lambda: bytearray(HEADER_SIZE))

    def __post_init__(self):
        self.raw = _fixed_buffer(self.raw, HEADER_SIZE, "header")

    quest_id = BufferField(HEADER_FIELDS["quest_id"])
    given_npc_id = BufferField(HEADER_FIELDS["given_npc_id"])
    target_npc_block = BufferField(HEADER_FIELDS["target_npc_block"])
    target_npc_id = BufferField(TARGET_NPC_ID)
    min_level = BufferField(HEADER_FIELDS["min_level"])
    max_level = BufferField(HEADER_FIELDS["max_level"])
    quest_flags = BufferField(HEADER_FIELDS["quest_flags"])
    reward_item_1 = BufferField(HEADER_FIELDS["reward_item_1"])
    reward_item_2 = BufferField(HEADER_FIELDS["reward_item_2"])
    reward_item_3 = BufferField(HEADER_FIELDS["reward_item_3"])
    reward_count_1 = BufferField(HEADER_FIELDS["reward_count_1"])
    reward_count_2 = BufferField(HEADER_FIELDS["reward_count_2"])
    reward_count_3 = BufferField(HEADER_FIELDS["reward_count_3"])
    exp = BufferField(HEADER_FIELDS["exp"])
    woonz = BufferField(HEADER_FIELDS["woonz"])
    lore = BufferField(HEADER_FIELDS["lore"])

    # Padding regions, exposed for inspection and tests.
    quest_id_pad = BufferField(HEADER_FIELDS["quest_id_pad"])
    given_npc_pad = BufferField(HEADER_FIELDS["given_npc_pad"])
    reward_slot4_pad = BufferField(HEADER_FIELDS["reward_slot4_pad"])
    reward_area_pad = BufferField(HEADER_FIELDS["reward_area_pad"])
    header_tail = BufferField(HEADER_FIELDS["header_tail"])

    @property
    def reward_items(self) -> tuple[int, int, int]:
        return (self.reward_item_1, self.reward_item_2, self.reward_item_3)

    @property
    def reward_counts(self) -> tuple[int, int, int]:
        return (self.reward_count_1, self.reward_count_2, self.reward_count_3)

    def active_rewards(self) -> list[tuple[int, int]]:
        """(item_code, count) pairs for reward slots not set to the unused sentinel."""
        return [
            (code, count)
            for code, count in zip(self.reward_items, self.reward_counts)
            if code != UNUSED_REWARD_ITEM_CODE
        ]

    def field_value(self, name: str):
        """Read any header field by its layout name, padding included."""
        return decode_field(self.raw, HEADER_FIELDS[name])


@dataclass
class Objective:
    """One objective slot: a 96-byte block plus an optional trailing name.

    The name is kept apart from the block; its length lives in the block at
    offset 92 and is not re-derived on encode.
    """
    block: bytearray = field(default_factory=lambda: bytearray(OBJECTIVE_BLOCK_SIZE))
    name: bytes = b""

    def __post_init__(self):
        self.block = _fixed_buffer(self.block, OBJECTIVE_BLOCK_SIZE, "objective block")
        self.name = bytes(self.name)

    objective_type = BufferField(OBJECTIVE_FIELDS["objective_type"], "block")
    name_length = BufferField(OBJECTIVE_FIELDS["name_length"], "block")
    map_id = BufferField(OBJECTIVE_FIELDS["map_id"], "block")
    location_id = BufferField(OBJECTIVE_FIELDS["location_id"], "block")
    radius = BufferField(OBJECTIVE_FIELDS["radius"], "block")
    monster_id = BufferField(OBJECTIVE_FIELDS["monster_id"], "block")
    kill_count = BufferField(OBJECTIVE_FIELDS["kill_count"], "block")
    item_code = BufferField(OBJECTIVE_FIELDS["item_code"], "block")

    @classmethod
    def unused(cls) -> Objective:
        """An empty slot as real files store it: 0xFF fill, last 4 bytes zero."""
        block = bytearray(b"\xff" * NAME_LENGTH_OFFSET) + bytearray(4)
        return cls(block)

    @classmethod
    def of_type(cls, objective_type: int, name: bytes = b"") -> Objective:
        obj = cls()
        obj.objective_type = objective_type
        obj.set_name(name)
        return obj

    @property
    def is_unused(self) -> bool:
        return self.objective_type == ObjectiveType.UNUSED

    @property
    def is_named_type(self) -> bool:
        return self.objective_type in NAMED_OBJECTIVE_TYPES

    @property
    def type_name(self) -> str:
        try:
            return ObjectiveType(self.objective_type).name
        except ValueError:
            return f"0x{self.objective_type:02x}"

    @property
    def name_text(self) -> str:
        return decode_text(self.name)

    def set_name(self, name: bytes | str) -> None:
        """Set the name and the in-block name length together."""
        if isinstance(name, str):
            name = name.encode(TEXT_ENCODING)
        if len(name) > MAX_NAME_LENGTH:
            raise ValueError(f"name is {len(name)} bytes, max {MAX_NAME_LENGTH}")
        self.name = bytes(name)
        self.name_length = len(name)


def _blank_objectives() -> tuple[Objective, ...]:
    return tuple(Objective() for _ in range(NUM_OBJECTIVES))


def _check_objectives(objectives) -> tuple[Objective, ...]:
    objectives = tuple(objectives)
    if len(objectives) != NUM_OBJECTIVES:
        raise ValueError(
            f"quest file needs exactly {NUM_OBJECTIVES} objectives, got {len(objectives)}"
        )
    return objectives


def _check_continuation(continuation) -> tuple[int, ...]:
    continuation = tuple(continuation)
    if len(continuation) != NUM_CONTINUATIONS:
        raise ValueError(
            f"quest file needs exactly {NUM_CONTINUATIONS} continuation values, "
            f"got {len(continuation)}"
        )
    for value in continuation:
        if not 0 <= value <= UNUSED_CONTINUATION:
            raise ValueError(f"continuation value out of u32 range: {value}")
    return continuation


@dataclass
class QuestFile:
    """One header, exactly 7 objectives in order, and 3 continuation slots."""
    header: QuestHeader = field(default_factory=QuestHeader)
    objectives: tuple[Objective, ...] = field(default_factory=_blank_objectives)
    continuation: tuple[int, int, int] = (UNUSED_CONTINUATION,) * NUM_CONTINUATIONS

    # Arity is checked on every assignment, including the ones in __init__.
    def __setattr__(self, name, value):
        if name == "objectives":
            value = _check_objectives(value)
        elif name == "continuation":
            value = _check_continuation(value)
        super().__setattr__(name, value)

    @classmethod
    def new(cls) -> QuestFile:
        """A blank quest: no rewards, unused objective slots, no continuation."""
        header = QuestHeader()
        header.reward_item_1 = UNUSED_REWARD_ITEM_CODE
        header.reward_item_2 = UNUSED_REWARD_ITEM_CODE
        header.reward_item_3 = UNUSED_REWARD_ITEM_CODE
        objectives = tuple(Objective.unused() for _ in range(NUM_OBJECTIVES))
        return cls(header, objectives)

    @property
    def encoded_size(self) -> int:
        return (
            HEADER_SIZE
            + NUM_OBJECTIVES * OBJECTIVE_BLOCK_SIZE
            + sum(len(o.name) for o in self.objectives)
            + CONTINUATION_SIZE
        )

    def active_objectives(self) -> list[tuple[int, Objective]]:
        """(slot, objective) for every slot not marked unused."""
        return [(i, o) for i, o in enumerate(self.objectives) if not o.is_unused]

    def next_quests(self) -> list[int]:
        """Continuation values that are not the unused sentinel."""
        return [c for c in self.continuation if c != UNUSED_CONTINUATION]
