"""Gate agent messages to the login server and zone server."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from ..binary import TextField, encode_text
from .login import ACCOUNT_SIZE, IP_SIZE, SERVER_NAME_SIZE
from .messages import MsgHeadNoProtocol


@dataclass
class MsgGate2LsConnect(MsgHeadNoProtocol):
    """Gate registers itself with the login server."""
    FORMAT: ClassVar[str] = MsgHeadNoProtocol.FORMAT + f"BB{IP_SIZE}sI{SERVER_NAME_SIZE}s"

    CTRL: ClassVar[int] = 0x02
    CMD: ClassVar[int] = 0xE0

    server_id: int = 0
    agent_id: int = 0
    ip_address_raw: bytes = bytes(IP_SIZE)
    port: int = 0
    name_raw: bytes = bytes(SERVER_NAME_SIZE)

    ip_address = TextField("ip_address_raw", IP_SIZE)
    name = TextField("name_raw", SERVER_NAME_SIZE)

    @classmethod
    def new(cls, server_id: int, agent_id: int, ip_address: str, port: int,
            name: str) -> MsgGate2LsConnect:
        return cls.build(
            server_id=server_id,
            agent_id=agent_id,
            ip_address_raw=encode_text(ip_address, IP_SIZE),
            port=port,
            name_raw=encode_text(name, SERVER_NAME_SIZE),
        )


@dataclass
class MsgGate2LsAccLogout(MsgHeadNoProtocol):
    FORMAT: ClassVar[str] = MsgHeadNoProtocol.FORMAT + f"B{ACCOUNT_SIZE}s9s7s"

    CTRL: ClassVar[int] = 0x02
    CMD: ClassVar[int] = 0xE2

    reason: int = 0
    account_raw: bytes = bytes(ACCOUNT_SIZE)
    logout_date_raw: bytes = bytes(9)
    logout_time_raw: bytes = bytes(7)

    account = TextField("account_raw", ACCOUNT_SIZE)
    logout_date = TextField("logout_date_raw", 9)
    logout_time = TextField("logout_time_raw", 7)

    @classmethod
    def new(cls, reason: int, account: str) -> MsgGate2LsAccLogout:
        return cls.build(reason=reason, account_raw=encode_text(account, ACCOUNT_SIZE))


@dataclass
class MsgGate2LsPreparedAccLogin(MsgHeadNoProtocol):
    FORMAT: ClassVar[str] = MsgHeadNoProtocol.FORMAT + f"{ACCOUNT_SIZE}s"

    CTRL: ClassVar[int] = 0x02
    CMD: ClassVar[int] = 0xE3

    account_raw: bytes = bytes(ACCOUNT_SIZE)

    account = TextField("account_raw", ACCOUNT_SIZE)

    @classmethod
    def new(cls, account: str) -> MsgGate2LsPreparedAccLogin:
        return cls.build(account_raw=encode_text(account, ACCOUNT_SIZE))


@dataclass
class MsgGate2ZsConnect(MsgHeadNoProtocol):
    FORMAT: ClassVar[str] = MsgHeadNoProtocol.FORMAT + "B"

    CTRL: ClassVar[int] = 0x01
    CMD: ClassVar[int] = 0xE0

    agent_id: int = 0

    @classmethod
    def new(cls, agent_id: int) -> MsgGate2ZsConnect:
        return cls.build(agent_id=agent_id)


@dataclass
class MsgZa2ZsAccLogout(MsgHeadNoProtocol):
    FORMAT: ClassVar[str] = MsgHeadNoProtocol.FORMAT + "B"

    CTRL: ClassVar[int] = 0x01
    CMD: ClassVar[int] = 0xE2

    reason: int = 0

    @classmethod
    def new(cls, pc_id: int, reason: int) -> MsgZa2ZsAccLogout:
        return cls.build(pc_id=pc_id, reason=reason)
