"""Personal market messages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from ..binary import TextField
from .messages import MsgHead

MARKET_ITEMS_SIZE = 80
MARKET_MSG_SIZE = 0x40


@dataclass
class MsgC2SOpenMarket(MsgHead):
    """Open a personal shop; the item block is kept as raw bytes."""
    FORMAT: ClassVar[str] = MsgHead.FORMAT + f"{MARKET_ITEMS_SIZE}s{MARKET_MSG_SIZE}s"

    items: bytes = bytes(MARKET_ITEMS_SIZE)
    msg_raw: bytes = bytes(MARKET_MSG_SIZE)

    msg = TextField("msg_raw", MARKET_MSG_SIZE)
