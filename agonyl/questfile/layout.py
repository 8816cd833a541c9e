"""
Quest file layout — section sizes, sentinels and field tables.

    [header:96][objective block:96 (+name)] x 7 [continuation:12]

All multi-byte values are little-endian. Logical header fields often use only
part of their storage slot; the rest is padding that must round-trip verbatim,
so every range, padding included, is listed here.
"""

from __future__ import annotations

from enum import IntEnum

from ..binary import FieldDef, field_table

HEADER_SIZE = 96
OBJECTIVE_BLOCK_SIZE = 96
NUM_OBJECTIVES = 7
NUM_CONTINUATIONS = 3
CONTINUATION_SIZE = 4 * NUM_CONTINUATIONS
NAME_LENGTH_OFFSET = 92
MAX_NAME_LENGTH = 0xFF

MIN_FILE_SIZE = HEADER_SIZE + NUM_OBJECTIVES * OBJECTIVE_BLOCK_SIZE + CONTINUATION_SIZE  # 780
MAX_FILE_SIZE = MIN_FILE_SIZE + NUM_OBJECTIVES * MAX_NAME_LENGTH  # 2565

# ---- Sentinels ----

UNUSED_REWARD_ITEM_CODE = 0xFFFF
UNUSED_CONTINUATION = 0xFFFFFFFF


class ObjectiveType(IntEnum):
    """Objective type tag, byte 0 of each objective block."""
    KILL = 0
    QUESTITEM = 1
    BRINGNPC = 2
    DROP = 3
    FIND = 4
    UNUSED = 0xFF  # real files fill empty slots with this rather than omitting them


VALID_OBJECTIVE_TYPES = frozenset(int(t) for t in ObjectiveType)

# Only these types may carry a trailing name. UNUSED is deliberately absent.
NAMED_OBJECTIVE_TYPES = frozenset({int(ObjectiveType.DROP), int(ObjectiveType.FIND)})


# ---- Header (96 bytes) ----

HEADER_FIELDS = field_table(
    FieldDef("quest_id", 0, 2, "u16le", "Quest ID"),
    FieldDef("quest_id_pad", 2, 2, "pad"),
    FieldDef("given_npc_id", 4, 2, "u16le", "NPC that gives the quest"),
    FieldDef("given_npc_pad", 6, 2, "pad"),
    FieldDef("target_npc_block", 8, 24, "bytes", "Target NPC (first 2 bytes = ID)"),
    FieldDef("min_level", 32, 1, "u8", "Minimum level"),
    FieldDef("min_level_pad", 33, 3, "pad"),
    FieldDef("max_level", 36, 1, "u8", "Maximum level"),
    FieldDef("max_level_pad", 37, 3, "pad"),
    FieldDef("quest_flags", 40, 4, "u32le", "Quest flags"),
    FieldDef("reward_item_1", 44, 2, "u16le", "Reward item code (0xFFFF = unused)"),
    FieldDef("reward_item_1_pad", 46, 2, "pad"),
    FieldDef("reward_item_2", 48, 2, "u16le", "Reward item code (0xFFFF = unused)"),
    FieldDef("reward_item_2_pad", 50, 2, "pad"),
    FieldDef("reward_item_3", 52, 2, "u16le", "Reward item code (0xFFFF = unused)"),
    FieldDef("reward_item_3_pad", 54, 2, "pad"),
    FieldDef("reward_slot4_pad", 56, 4, "pad", "Fourth slot, never a reward"),
    FieldDef("reward_area_pad", 60, 8, "pad"),
    FieldDef("reward_count_1", 68, 1, "u8", "Reward item count"),
    FieldDef("reward_count_1_pad", 69, 3, "pad"),
    FieldDef("reward_count_2", 72, 1, "u8", "Reward item count"),
    FieldDef("reward_count_2_pad", 73, 3, "pad"),
    FieldDef("reward_count_3", 76, 1, "u8", "Reward item count"),
    FieldDef("reward_count_3_pad", 77, 3, "pad"),
    FieldDef("exp", 80, 4, "u32le", "Experience reward"),
    FieldDef("woonz", 84, 4, "u32le", "Woonz (currency) reward"),
    FieldDef("lore", 88, 4, "u32le", "Lore (currency) reward"),
    FieldDef("header_tail", 92, 4, "pad"),
)

TARGET_NPC_ID = FieldDef("target_npc_id", 8, 2, "u16le", "Target NPC ID")


# ---- Objective block (96 bytes) ----
# Only type and name length are structural. The rest are conventional
# per-type values, exposed as views without validation.

OBJECTIVE_FIELDS = field_table(
    FieldDef("objective_type", 0, 1, "u8", "Objective type tag"),
    FieldDef("map_id", 4, 2, "u16le", "Map ID"),
    FieldDef("location_id", 8, 2, "u16le", "Location ID"),
    FieldDef("radius", 12, 1, "u8", "Search radius"),
    FieldDef("monster_id", 16, 2, "u16le", "Monster ID"),
    FieldDef("kill_count", 20, 2, "u16le", "Required kill count"),
    FieldDef("item_code", 24, 2, "u16le", "Quest item code"),
    FieldDef("name_length", NAME_LENGTH_OFFSET, 1, "u8", "Length of trailing name"),
)
