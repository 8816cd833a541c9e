from .layout import (
    CONTINUATION_SIZE,
    HEADER_FIELDS,
    HEADER_SIZE,
    MAX_FILE_SIZE,
    MAX_NAME_LENGTH,
    MIN_FILE_SIZE,
    NAME_LENGTH_OFFSET,
    NAMED_OBJECTIVE_TYPES,
    NUM_CONTINUATIONS,
    NUM_OBJECTIVES,
    OBJECTIVE_BLOCK_SIZE,
    OBJECTIVE_FIELDS,
    UNUSED_CONTINUATION,
    UNUSED_REWARD_ITEM_CODE,
    ObjectiveType,
)
from .model import Objective, QuestFile, QuestHeader
from .codec import decode, dump, encode, load, read, write
from ..errors import (
    InvalidObjectiveTypeError,
    NameLengthError,
    ProbeError,
    QuestFileError,
    TrailingBytesError,
    TruncatedError,
)

__all__ = [
    "CONTINUATION_SIZE", "HEADER_FIELDS", "HEADER_SIZE", "MAX_FILE_SIZE",
    "MAX_NAME_LENGTH", "MIN_FILE_SIZE", "NAME_LENGTH_OFFSET", "NAMED_OBJECTIVE_TYPES",
    "NUM_CONTINUATIONS", "NUM_OBJECTIVES", "OBJECTIVE_BLOCK_SIZE", "OBJECTIVE_FIELDS",
    "UNUSED_CONTINUATION", "UNUSED_REWARD_ITEM_CODE", "ObjectiveType",
    "Objective", "QuestFile", "QuestHeader",
    "decode", "dump", "encode", "load", "read", "write",
    "InvalidObjectiveTypeError", "NameLengthError", "ProbeError", "QuestFileError",
    "TrailingBytesError", "TruncatedError",
]
