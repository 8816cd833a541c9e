"""
Login server messages: account login, server selection, gate hand-off and
character login.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from ..binary import Record, TextField, encode_text
from .messages import MsgHead, MsgHeadNoProtocol

ACCOUNT_SIZE = 0x15
PASSWORD_SIZE = 0x15
CHARACTER_NAME_SIZE = 0x15
SAY_WORDS_SIZE = 0x51
SERVER_NAME_SIZE = 0x11
SERVER_STATUS_SIZE = 0x51
IP_SIZE = 0x10


@dataclass
class MsgC2SLogin(MsgHeadNoProtocol):
    """Client account login."""
    FORMAT: ClassVar[str] = MsgHeadNoProtocol.FORMAT + f"{ACCOUNT_SIZE}s{PASSWORD_SIZE}s"

    CTRL: ClassVar[int] = 0x01
    CMD: ClassVar[int] = 0xE0

    username_raw: bytes = bytes(ACCOUNT_SIZE)
    password_raw: bytes = bytes(PASSWORD_SIZE)

    username = TextField("username_raw", ACCOUNT_SIZE)
    password = TextField("password_raw", PASSWORD_SIZE)

    @classmethod
    def new(cls, username: str, password: str) -> MsgC2SLogin:
        return cls.build(
            username_raw=encode_text(username, ACCOUNT_SIZE),
            password_raw=encode_text(password, PASSWORD_SIZE),
        )


@dataclass
class MsgC2SGateLogin(MsgHeadNoProtocol):
    """Client login to the gate agent; the pc id is repeated in the body."""
    FORMAT: ClassVar[str] = MsgHeadNoProtocol.FORMAT + f"I{ACCOUNT_SIZE}s{PASSWORD_SIZE}s"

    CTRL: ClassVar[int] = 0x01
    CMD: ClassVar[int] = 0xE2

    gate_pc_id: int = 0
    account_raw: bytes = bytes(ACCOUNT_SIZE)
    password_raw: bytes = bytes(PASSWORD_SIZE)

    account = TextField("account_raw", ACCOUNT_SIZE)
    password = TextField("password_raw", PASSWORD_SIZE)

    @classmethod
    def new(cls, pc_id: int, account: str, password: str) -> MsgC2SGateLogin:
        return cls.build(
            pc_id=pc_id,
            gate_pc_id=pc_id,
            account_raw=encode_text(account, ACCOUNT_SIZE),
            password_raw=encode_text(password, PASSWORD_SIZE),
        )


@dataclass
class MsgLs2ClSay(MsgHeadNoProtocol):
    """Login server text shown to the client (e.g. a login failure reason)."""
    FORMAT: ClassVar[str] = MsgHeadNoProtocol.FORMAT + f"B{SAY_WORDS_SIZE}s"

    CTRL: ClassVar[int] = 0x01
    CMD: ClassVar[int] = 0xE0

    type: int = 0
    words_raw: bytes = bytes(SAY_WORDS_SIZE)

    words = TextField("words_raw", SAY_WORDS_SIZE)

    @classmethod
    def new(cls, words: str) -> MsgLs2ClSay:
        return cls.build(words_raw=encode_text(words, SAY_WORDS_SIZE))


@dataclass
class GateServerInfo(Record):
    """One entry of the server list."""
    FORMAT: ClassVar[str] = f"<B{SERVER_NAME_SIZE}s{SERVER_STATUS_SIZE}s"

    server_id: int = 0
    server_name_raw: bytes = bytes(SERVER_NAME_SIZE)
    server_status_raw: bytes = bytes(SERVER_STATUS_SIZE)

    server_name = TextField("server_name_raw", SERVER_NAME_SIZE)
    server_status = TextField("server_status_raw", SERVER_STATUS_SIZE)


@dataclass
class MsgLs2GateLogin(MsgHeadNoProtocol):
    """Login server tells the gate that an account is logging in."""
    FORMAT: ClassVar[str] = MsgHeadNoProtocol.FORMAT + f"{ACCOUNT_SIZE}s9s"

    CTRL: ClassVar[int] = 0x01
    CMD: ClassVar[int] = 0xE1

    account_raw: bytes = bytes(ACCOUNT_SIZE)
    unknown: bytes = bytes(9)

    account = TextField("account_raw", ACCOUNT_SIZE)

    @classmethod
    def new(cls, account: str, pc_id: int) -> MsgLs2GateLogin:
        return cls.build(pc_id=pc_id, account_raw=encode_text(account, ACCOUNT_SIZE))


@dataclass
class MsgS2CGateInfo(MsgHeadNoProtocol):
    """Zone agent address the client should connect to."""
    FORMAT: ClassVar[str] = MsgHeadNoProtocol.FORMAT + f"I{IP_SIZE}sI"

    CTRL: ClassVar[int] = 0x01
    CMD: ClassVar[int] = 0xE2

    gate_pc_id: int = 0
    za_ip_raw: bytes = bytes(IP_SIZE)
    za_port: int = 0

    za_ip = TextField("za_ip_raw", IP_SIZE)

    @classmethod
    def new(cls, pc_id: int, za_ip: str, za_port: int) -> MsgS2CGateInfo:
        return cls.build(
            pc_id=pc_id,
            gate_pc_id=pc_id,
            za_ip_raw=encode_text(za_ip, IP_SIZE),
            za_port=za_port,
        )


@dataclass
class MsgLs2ZaDisconnect(MsgHeadNoProtocol):
    """Login server asks the zone agent to drop an account."""
    FORMAT: ClassVar[str] = MsgHeadNoProtocol.FORMAT + f"B{ACCOUNT_SIZE}s16s"

    CTRL: ClassVar[int] = 0x01
    CMD: ClassVar[int] = 0xE3

    reason: int = 0
    account_raw: bytes = bytes(ACCOUNT_SIZE)
    unknown: bytes = bytes(16)

    account = TextField("account_raw", ACCOUNT_SIZE)

    @classmethod
    def new(cls, reason: int, account: str, pc_id: int) -> MsgLs2ZaDisconnect:
        return cls.build(
            pc_id=pc_id, reason=reason, account_raw=encode_text(account, ACCOUNT_SIZE),
        )


@dataclass
class MsgC2SSelectServer(MsgHeadNoProtocol):
    FORMAT: ClassVar[str] = MsgHeadNoProtocol.FORMAT + "B"

    CTRL: ClassVar[int] = 0x01
    CMD: ClassVar[int] = 0xE1

    server_id: int = 0

    @classmethod
    def new(cls, server_id: int) -> MsgC2SSelectServer:
        return cls.build(server_id=server_id)


@dataclass
class MsgC2SCharacterLogout(MsgHead):
    FORMAT: ClassVar[str] = MsgHead.FORMAT

    @classmethod
    def new(cls, pc_id: int, *, protocol: int) -> MsgC2SCharacterLogout:
        return cls.build(pc_id=pc_id, protocol=protocol)


@dataclass
class MsgC2SCharacterLogin(MsgHead):
    FORMAT: ClassVar[str] = MsgHead.FORMAT + f"{CHARACTER_NAME_SIZE}sI"

    character_name_raw: bytes = bytes(CHARACTER_NAME_SIZE)
    client_version: int = 0

    character_name = TextField("character_name_raw", CHARACTER_NAME_SIZE)

    @classmethod
    def new(cls, pc_id: int, character_name: str, client_version: int, *,
            protocol: int) -> MsgC2SCharacterLogin:
        return cls.build(
            pc_id=pc_id,
            protocol=protocol,
            character_name_raw=encode_text(character_name, CHARACTER_NAME_SIZE),
            client_version=client_version,
        )


@dataclass
class MsgC2SWorldLogin(MsgHead):
    FORMAT: ClassVar[str] = MsgHead.FORMAT + f"{CHARACTER_NAME_SIZE}s"

    character_name_raw: bytes = bytes(CHARACTER_NAME_SIZE)

    character_name = TextField("character_name_raw", CHARACTER_NAME_SIZE)

    @classmethod
    def new(cls, pc_id: int, character_name: str, *, protocol: int) -> MsgC2SWorldLogin:
        return cls.build(
            pc_id=pc_id,
            protocol=protocol,
            character_name_raw=encode_text(character_name, CHARACTER_NAME_SIZE),
        )


@dataclass
class MsgS2CWorldLogin(MsgHead):
    """Character state sent when entering the world."""
    FORMAT: ClassVar[str] = MsgHead.FORMAT + f"{CHARACTER_NAME_SIZE}sBHIII28sBBHIIIIHHH"

    character_name_raw: bytes = bytes(CHARACTER_NAME_SIZE)
    class_id: int = 0
    level: int = 0
    exp: int = 0
    map_num: int = 0
    xy: int = 0
    skill_info: bytes = bytes(0x1C)
    town: int = 0
    unknown1: int = 0
    unknown2: int = 0
    woonz: int = 0
    hp_pot: int = 0
    mp_pot: int = 0
    lore: int = 0
    remaining_points: int = 0
    strength: int = 0
    intelligence: int = 0

    character_name = TextField("character_name_raw", CHARACTER_NAME_SIZE)


@dataclass
class MsgS2CCharacterLogin(MsgHead):
    FORMAT: ClassVar[str] = MsgHead.FORMAT + f"{CHARACTER_NAME_SIZE}sIH"

    character_name_raw: bytes = bytes(CHARACTER_NAME_SIZE)
    unknown: int = 0
    map_num: int = 0

    character_name = TextField("character_name_raw", CHARACTER_NAME_SIZE)

    @classmethod
    def new(cls, pc_id: int, character_name: str, unknown: int, map_num: int, *,
            protocol: int) -> MsgS2CCharacterLogin:
        return cls.build(
            pc_id=pc_id,
            protocol=protocol,
            character_name_raw=encode_text(character_name, CHARACTER_NAME_SIZE),
            unknown=unknown,
            map_num=map_num,
        )
