from .character import (
    AclCharacterWear,
    CharacterInfo,
    MsgC2SAskDeletePlayer,
    MsgS2CCharacterList,
    MsgS2CLevelUp,
)
from .chat import MsgC2SSay, MsgS2CSay, SayType
from .clan import ClanMate, MsgC2SReqClanInfo, MsgS2CClanInfo
from .error import MsgS2CError
from .gate import (
    MsgGate2LsAccLogout,
    MsgGate2LsConnect,
    MsgGate2LsPreparedAccLogin,
    MsgGate2ZsConnect,
    MsgZa2ZsAccLogout,
)
from .login import (
    GateServerInfo,
    MsgC2SCharacterLogin,
    MsgC2SCharacterLogout,
    MsgC2SGateLogin,
    MsgC2SLogin,
    MsgC2SSelectServer,
    MsgC2SWorldLogin,
    MsgLs2ClSay,
    MsgLs2GateLogin,
    MsgLs2ZaDisconnect,
    MsgS2CCharacterLogin,
    MsgS2CGateInfo,
    MsgS2CWorldLogin,
)
from .market import MsgC2SOpenMarket
from .messages import (
    MsgHead,
    MsgHeadNoProtocol,
    MsgZACLChkTimeTick,
    pack_msg,
    peek_header,
    unpack_msg,
)

__all__ = [
    "MsgHead", "MsgHeadNoProtocol", "MsgZACLChkTimeTick",
    "pack_msg", "peek_header", "unpack_msg",
    # login
    "MsgC2SLogin", "MsgC2SGateLogin", "MsgLs2ClSay", "GateServerInfo", "MsgLs2GateLogin",
    "MsgS2CGateInfo", "MsgLs2ZaDisconnect", "MsgC2SSelectServer", "MsgC2SCharacterLogout",
    "MsgC2SCharacterLogin", "MsgC2SWorldLogin", "MsgS2CWorldLogin", "MsgS2CCharacterLogin",
    # gate
    "MsgGate2LsConnect", "MsgGate2LsAccLogout", "MsgGate2LsPreparedAccLogin",
    "MsgGate2ZsConnect", "MsgZa2ZsAccLogout",
    # character / clan
    "MsgC2SAskDeletePlayer", "AclCharacterWear", "CharacterInfo", "MsgS2CCharacterList",
    "MsgS2CLevelUp", "MsgC2SReqClanInfo", "ClanMate", "MsgS2CClanInfo",
    # chat
    "SayType", "MsgC2SSay", "MsgS2CSay",
    # misc
    "MsgS2CError", "MsgC2SOpenMarket",
]
