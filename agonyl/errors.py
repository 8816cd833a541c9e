"""
Error taxonomy shared by every codec in the package.

Format errors derive from CodecError (a ValueError). I/O faults raised by the
underlying stream are not wrapped and propagate as OSError.
"""

from __future__ import annotations


class CodecError(ValueError):
    """Base class for malformed binary data."""


class TruncatedError(CodecError):
    """Fewer bytes were available than a section requires."""

    def __init__(self, section: str, expected: int, received: int):
        self.section = section
        self.expected = expected
        self.received = received
        super().__init__(
            f"{section}: truncated, need {expected} bytes, got {received}"
        )


# ---- Quest file ----

class QuestFileError(CodecError):
    """Base class for quest-file specific format errors."""


class InvalidObjectiveTypeError(QuestFileError):
    """An objective's type byte is outside the known type domain."""

    def __init__(self, slot: int, value: int):
        self.slot = slot
        self.value = value
        super().__init__(f"objective {slot}: invalid objective type 0x{value:02x}")


class NameLengthError(QuestFileError):
    """A type that carries no name has a non-zero name length."""

    def __init__(self, slot: int, objective_type: int, name_length: int):
        self.slot = slot
        self.objective_type = objective_type
        self.name_length = name_length
        super().__init__(
            f"objective {slot}: name length must be 0 for type "
            f"0x{objective_type:02x}, got {name_length}"
        )


class TrailingBytesError(QuestFileError):
    """Data remains in the stream after the continuation section."""

    def __init__(self):
        super().__init__("trailing bytes after continuation")


class ProbeError(OSError):
    """The end-of-stream probe after the continuation failed with an I/O fault.

    Distinct from TrailingBytesError: it says nothing about whether more data
    exists, only that the stream could not answer.
    """
