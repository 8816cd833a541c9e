"""Server error notice."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from ..binary import TextField, encode_text
from .messages import MsgHead

ERROR_MSG_SIZE = 64


@dataclass
class MsgS2CError(MsgHead):
    FORMAT: ClassVar[str] = MsgHead.FORMAT + f"H{ERROR_MSG_SIZE}s"

    code: int = 0
    msg_raw: bytes = bytes(ERROR_MSG_SIZE)

    msg = TextField("msg_raw", ERROR_MSG_SIZE)

    @classmethod
    def new(cls, pc_id: int, code: int, msg: str, *, protocol: int) -> MsgS2CError:
        return cls.build(
            pc_id=pc_id, protocol=protocol, code=code, msg_raw=encode_text(msg, ERROR_MSG_SIZE),
        )
