"""Shared fixtures for agonyl tests."""

import pytest

from agonyl.questfile import (
    UNUSED_CONTINUATION,
    UNUSED_REWARD_ITEM_CODE,
    QuestFile,
    encode,
)


def make_minimal_quest() -> QuestFile:
    """Quest 1 from NPC 100, levels 10-50, every objective KILL, no continuation."""
    q = QuestFile()
    q.header.quest_id = 1
    q.header.given_npc_id = 100
    q.header.min_level = 10
    q.header.max_level = 50
    q.header.exp = 1000
    q.header.woonz = 500
    q.header.lore = 100
    q.header.reward_item_1 = UNUSED_REWARD_ITEM_CODE
    q.header.reward_item_2 = UNUSED_REWARD_ITEM_CODE
    q.header.reward_item_3 = UNUSED_REWARD_ITEM_CODE
    q.continuation = (UNUSED_CONTINUATION,) * 3
    return q


@pytest.fixture
def minimal_quest() -> QuestFile:
    return make_minimal_quest()


@pytest.fixture
def minimal_bytes() -> bytes:
    """The encoded minimal quest (780 bytes)."""
    return encode(make_minimal_quest())


class ChunkedReader:
    """Binary reader that hands out at most `chunk` bytes per read()."""

    def __init__(self, data: bytes, chunk: int = 1):
        self.data = data
        self.pos = 0
        self.chunk = chunk

    def read(self, n: int = -1) -> bytes:
        if n < 0:
            n = len(self.data) - self.pos
        n = min(n, self.chunk)
        out = self.data[self.pos:self.pos + n]
        self.pos += len(out)
        return out


class FailingReader:
    """Binary reader that raises OSError once `fail_at` bytes have been served."""

    def __init__(self, data: bytes, fail_at: int | None = None):
        self.data = data
        self.pos = 0
        self.fail_at = len(data) if fail_at is None else fail_at

    def read(self, n: int = -1) -> bytes:
        if self.pos >= self.fail_at:
            raise OSError("connection reset by peer")
        if n < 0:
            n = len(self.data) - self.pos
        n = min(n, self.fail_at - self.pos)
        out = self.data[self.pos:self.pos + n]
        self.pos += len(out)
        return out


class StallingReader:
    """Non-blocking style reader that returns None once when it reaches `stall_at`."""

    def __init__(self, data: bytes, stall_at: int):
        self.data = data
        self.pos = 0
        self.stall_at = stall_at
        self.stalled = False

    def read(self, n: int = -1) -> bytes | None:
        if self.pos == self.stall_at and not self.stalled:
            self.stalled = True
            return None
        if n < 0:
            n = len(self.data) - self.pos
        if self.pos < self.stall_at:
            n = min(n, self.stall_at - self.pos)
        out = self.data[self.pos:self.pos + n]
        self.pos += len(out)
        return out
