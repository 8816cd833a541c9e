"""
Protocol message records — header layouts and fixed-size messages.

Messages embed their header by extending it: header fields come first on the
wire, followed by the message body, all little-endian with no alignment.

Messages built on MsgHead also carry a protocol number. Those numbers belong
to the server's protocol table, so constructors take them from the caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, TypeVar

from ..binary import Record

M = TypeVar("M", bound=Record)


@dataclass
class MsgHeadNoProtocol(Record):
    """Common message header without a protocol number."""
    FORMAT: ClassVar[str] = "<IIBB"

    CTRL: ClassVar[int] = 0
    CMD: ClassVar[int] = 0

    size: int = 0
    pc_id: int = 0
    ctrl: int = 0
    cmd: int = 0

    def set_size(self) -> None:
        """Set the size field to the encoded size of this message."""
        self.size = self.SIZE

    @classmethod
    def build(cls, **values):
        """Construct with this message's ctrl/cmd and a correct size field."""
        msg = cls(ctrl=cls.CTRL, cmd=cls.CMD, **values)
        msg.set_size()
        return msg


@dataclass
class MsgHead(MsgHeadNoProtocol):
    """Message header carrying a protocol number."""
    FORMAT: ClassVar[str] = MsgHeadNoProtocol.FORMAT + "H"

    CTRL: ClassVar[int] = 0x03
    CMD: ClassVar[int] = 0xFF

    protocol: int = 0


@dataclass
class MsgZACLChkTimeTick(MsgHeadNoProtocol):
    """Server time-tick check (ping) sent to the client."""
    FORMAT: ClassVar[str] = MsgHeadNoProtocol.FORMAT + "III"

    CTRL: ClassVar[int] = 0x01
    CMD: ClassVar[int] = 0xF0

    tick_count: int = 0
    tick_svr: int = 0
    tick_clt: int = 0

    @classmethod
    def new(cls, pc_id: int, tick_count: int, tick_svr: int) -> MsgZACLChkTimeTick:
        return cls.build(pc_id=pc_id, tick_count=tick_count, tick_svr=tick_svr)


def pack_msg(msg: Record) -> bytes:
    """Serialize a message record to bytes."""
    return msg.pack()


def unpack_msg(data: bytes, msg_cls: type[M]) -> M:
    """Decode a message record from the front of data."""
    return msg_cls.unpack(data)


def peek_header(data: bytes) -> MsgHeadNoProtocol:
    """Decode just the common header, e.g. to dispatch on ctrl/cmd."""
    return MsgHeadNoProtocol.unpack(data)
