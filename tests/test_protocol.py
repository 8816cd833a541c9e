"""Tests for protocol message records."""

import struct

import pytest

from agonyl.errors import TruncatedError
from agonyl.protocol import (
    AclCharacterWear,
    CharacterInfo,
    ClanMate,
    GateServerInfo,
    MsgC2SAskDeletePlayer,
    MsgC2SCharacterLogin,
    MsgC2SCharacterLogout,
    MsgC2SGateLogin,
    MsgC2SLogin,
    MsgC2SOpenMarket,
    MsgC2SReqClanInfo,
    MsgC2SSay,
    MsgC2SSelectServer,
    MsgC2SWorldLogin,
    MsgGate2LsAccLogout,
    MsgGate2LsConnect,
    MsgGate2LsPreparedAccLogin,
    MsgGate2ZsConnect,
    MsgHead,
    MsgHeadNoProtocol,
    MsgLs2ClSay,
    MsgLs2GateLogin,
    MsgLs2ZaDisconnect,
    MsgS2CCharacterList,
    MsgS2CCharacterLogin,
    MsgS2CClanInfo,
    MsgS2CError,
    MsgS2CGateInfo,
    MsgS2CLevelUp,
    MsgS2CSay,
    MsgS2CWorldLogin,
    MsgZa2ZsAccLogout,
    MsgZACLChkTimeTick,
    SayType,
    pack_msg,
    peek_header,
    unpack_msg,
)


def test_header_sizes():
    assert MsgHeadNoProtocol.SIZE == 10
    assert MsgHead.SIZE == 12
    assert MsgZACLChkTimeTick.SIZE == 22


def test_ping_constructor():
    msg = MsgZACLChkTimeTick.new(pc_id=7, tick_count=100, tick_svr=200)
    assert msg.size == 22
    assert (msg.ctrl, msg.cmd) == (0x01, 0xF0)
    assert msg.tick_clt == 0


def test_ping_wire_layout():
    msg = MsgZACLChkTimeTick.new(pc_id=7, tick_count=100, tick_svr=200)
    data = pack_msg(msg)
    assert data == struct.pack("<IIBBIII", 22, 7, 0x01, 0xF0, 100, 200, 0)


def test_unpack_round_trip():
    msg = MsgZACLChkTimeTick.new(pc_id=0xABCDEF, tick_count=1, tick_svr=2)
    msg.tick_clt = 3
    assert unpack_msg(pack_msg(msg), MsgZACLChkTimeTick) == msg


def test_unpack_ignores_extra_bytes():
    head = MsgHead(size=12, pc_id=1, ctrl=3, cmd=0xFF, protocol=0x1234)
    assert unpack_msg(pack_msg(head) + b"\x00\x00", MsgHead) == head


def test_peek_header():
    data = pack_msg(MsgZACLChkTimeTick.new(pc_id=5, tick_count=0, tick_svr=0))
    head = peek_header(data)
    assert (head.size, head.pc_id, head.ctrl, head.cmd) == (22, 5, 0x01, 0xF0)


def test_unpack_truncated():
    with pytest.raises(TruncatedError):
        unpack_msg(b"\x00" * 11, MsgHead)


# ---- Message catalog ----

SAY_PROTOCOL = 0x1106


@pytest.mark.parametrize("msg_cls, size", [
    (MsgC2SLogin, 52),
    (MsgC2SGateLogin, 56),
    (MsgLs2ClSay, 92),
    (GateServerInfo, 99),
    (MsgLs2GateLogin, 40),
    (MsgS2CGateInfo, 34),
    (MsgLs2ZaDisconnect, 48),
    (MsgC2SSelectServer, 11),
    (MsgC2SCharacterLogout, 12),
    (MsgC2SCharacterLogin, 37),
    (MsgC2SWorldLogin, 33),
    (MsgS2CWorldLogin, 102),
    (MsgS2CCharacterLogin, 39),
    (MsgGate2LsConnect, 49),
    (MsgGate2LsAccLogout, 48),
    (MsgGate2LsPreparedAccLogin, 31),
    (MsgGate2ZsConnect, 11),
    (MsgZa2ZsAccLogout, 11),
    (MsgC2SAskDeletePlayer, 33),
    (AclCharacterWear, 16),
    (CharacterInfo, 188),
    (MsgS2CCharacterList, 952),
    (MsgS2CLevelUp, 14),
    (MsgC2SReqClanInfo, 12),
    (ClanMate, 36),
    (MsgS2CClanInfo, 527),
    (MsgC2SSay, 98),
    (MsgS2CSay, 102),
    (MsgS2CError, 78),
    (MsgC2SOpenMarket, 156),
])
def test_message_sizes(msg_cls, size):
    assert msg_cls.SIZE == size
    assert len(msg_cls().pack()) == size


def test_say_pack_matches_size():
    msg = MsgC2SSay.new(12345, SayType.GENERAL, "PlayerOne", "Hello world", protocol=SAY_PROTOCOL)
    data = pack_msg(msg)
    assert len(data) == msg.size == MsgC2SSay.SIZE
    assert data == msg.pack()
    assert peek_header(data).pc_id == 12345


def test_say_unpack():
    msg = MsgC2SSay.new(999, SayType.WHISPER, "Sender", "Secret message", protocol=SAY_PROTOCOL)
    decoded = unpack_msg(pack_msg(msg), MsgC2SSay)
    assert decoded == msg
    assert decoded.say_pc == "Sender"
    assert decoded.words == "Secret message"
    assert decoded.say_type == SayType.WHISPER
    assert (decoded.ctrl, decoded.cmd, decoded.protocol) == (0x03, 0xFF, SAY_PROTOCOL)


def test_say_round_trip_shout():
    msg = MsgC2SSay.new(42, SayType.SHOUT, "Shouter", "Hello everyone!", protocol=SAY_PROTOCOL)
    assert unpack_msg(pack_msg(msg), MsgC2SSay) == msg


def test_say_too_short():
    data = pack_msg(MsgC2SSay.new(1, SayType.GENERAL, "A", "B", protocol=SAY_PROTOCOL))
    with pytest.raises(TruncatedError):
        unpack_msg(data[:len(data) // 2], MsgC2SSay)


def test_say_text_too_long():
    with pytest.raises(ValueError):
        MsgC2SSay.new(1, SayType.GENERAL, "A" * 0x16, "hi", protocol=SAY_PROTOCOL)


def test_server_say_repeats_pc_id():
    msg = MsgS2CSay.new(77, SayType.PARTY, "Leader", "go", protocol=SAY_PROTOCOL)
    assert msg.say_pc_id == 77
    assert unpack_msg(pack_msg(msg), MsgS2CSay) == msg


def test_login_wire_layout():
    msg = MsgC2SLogin.new("user", "secret")
    data = pack_msg(msg)
    assert data[:10] == struct.pack("<IIBB", 52, 0, 0x01, 0xE0)
    assert data[10:31] == b"user".ljust(0x15, b"\x00")
    assert data[31:52] == b"secret".ljust(0x15, b"\x00")
    assert unpack_msg(data, MsgC2SLogin).username == "user"


def test_gate_login_repeats_pc_id():
    msg = MsgC2SGateLogin.new(0x1234, "acct", "pw")
    data = pack_msg(msg)
    assert struct.unpack_from("<I", data, 4) == struct.unpack_from("<I", data, 10) == (0x1234,)
    assert (msg.ctrl, msg.cmd) == (0x01, 0xE2)


def test_gate_info_address():
    msg = MsgS2CGateInfo.new(9, "127.0.0.1", 9999)
    decoded = unpack_msg(pack_msg(msg), MsgS2CGateInfo)
    assert decoded.za_ip == "127.0.0.1"
    assert (decoded.gate_pc_id, decoded.za_port) == (9, 9999)


@pytest.mark.parametrize("msg, ctrl, cmd", [
    (MsgLs2ClSay.new("bad password"), 0x01, 0xE0),
    (MsgLs2GateLogin.new("acct", 3), 0x01, 0xE1),
    (MsgLs2ZaDisconnect.new(1, "acct", 3), 0x01, 0xE3),
    (MsgC2SSelectServer.new(2), 0x01, 0xE1),
    (MsgGate2LsConnect.new(1, 2, "10.0.0.1", 3000, "Temoz"), 0x02, 0xE0),
    (MsgGate2LsAccLogout.new(0, "acct"), 0x02, 0xE2),
    (MsgGate2LsPreparedAccLogin.new("acct"), 0x02, 0xE3),
    (MsgGate2ZsConnect.new(4), 0x01, 0xE0),
    (MsgZa2ZsAccLogout.new(3, 1), 0x01, 0xE2),
    (MsgC2SCharacterLogout.new(3, protocol=1), 0x03, 0xFF),
    (MsgC2SCharacterLogin.new(3, "Hero", 100, protocol=1), 0x03, 0xFF),
    (MsgC2SWorldLogin.new(3, "Hero", protocol=1), 0x03, 0xFF),
    (MsgS2CCharacterLogin.new(3, "Hero", 0, 7, protocol=1), 0x03, 0xFF),
    (MsgC2SAskDeletePlayer.new(3, "Hero", protocol=1), 0x03, 0xFF),
    (MsgS2CLevelUp.new(50, protocol=1), 0x03, 0xFF),
    (MsgC2SReqClanInfo.new(3, protocol=1), 0x03, 0xFF),
    (MsgS2CError.new(3, 7, "no such character", protocol=1), 0x03, 0xFF),
])
def test_constructors_set_header(msg, ctrl, cmd):
    assert (msg.ctrl, msg.cmd) == (ctrl, cmd)
    assert msg.size == type(msg).SIZE
    assert unpack_msg(pack_msg(msg), type(msg)) == msg


def test_character_list_pads_empty_slots():
    hero = CharacterInfo(slot_used=1, class_id=2, nation=1, level=30)
    hero.name = "Hero"
    msg = MsgS2CCharacterList.new(5, [hero], protocol=1)
    assert msg.characters[0].name == "Hero"
    assert not msg.characters[0].is_empty
    assert all(c.is_empty for c in msg.characters[1:])
    assert len(msg.characters) == 5


def test_character_list_round_trip_nested_wear():
    hero = CharacterInfo(level=99)
    wear = list(hero.wear)
    wear[3] = AclCharacterWear(item_ptr=1, item_code=2, item_option=3, wear_index=4)
    hero.wear = tuple(wear)
    msg = MsgS2CCharacterList.new(5, [hero], protocol=1)
    data = pack_msg(msg)
    # first slot: header 12 + name 21 + 3 bytes + level 4, then wear[3]
    assert struct.unpack_from("<4I", data, 12 + 28 + 3 * 16) == (1, 2, 3, 4)
    decoded = unpack_msg(data, MsgS2CCharacterList)
    assert decoded == msg
    assert decoded.characters[0].wear[3].item_code == 2


def test_character_list_rejects_wrong_slot_count():
    with pytest.raises(ValueError):
        MsgS2CCharacterList(characters=(CharacterInfo(),))


def test_clan_info_round_trip():
    mates = [ClanMate() for _ in range(13)]
    mates[12].character_name = "Last"
    mates[12].class_id = 3
    msg = MsgS2CClanInfo(protocol=1, clan_mates=tuple(mates))
    msg.clan_name = "Knights"
    msg.set_size()
    decoded = unpack_msg(pack_msg(msg), MsgS2CClanInfo)
    assert decoded.clan_name == "Knights"
    assert decoded.clan_mates[12].character_name == "Last"
    assert decoded.clan_mates[12].class_id == 3
    assert decoded.size == 527


def test_open_market_keeps_item_block():
    items = bytes(range(80))
    msg = MsgC2SOpenMarket(protocol=1, items=items)
    msg.msg = "cheap pots"
    decoded = unpack_msg(pack_msg(msg), MsgC2SOpenMarket)
    assert decoded.items == items
    assert decoded.msg == "cheap pots"


def test_world_login_fields():
    msg = MsgS2CWorldLogin(protocol=1, class_id=1, level=12, woonz=5000, intelligence=9)
    msg.character_name = "Mage"
    decoded = unpack_msg(pack_msg(msg), MsgS2CWorldLogin)
    assert decoded == msg
    assert decoded.character_name == "Mage"
    assert pack_msg(msg)[-2:] == (9).to_bytes(2, "little")
