import io

import pytest

from steamnet.headers import ExtendedClientMsgHdr, MsgHdr
from steamnet.messages import (
    MsgChannelEncryptRequest,
    MsgChannelEncryptResponse,
    MsgChannelEncryptResult,
    MsgClientAppUsageEvent,
    MsgClientEmailAddrInfo,
    MsgClientGenericResponse,
    MsgClientGetFriendsWhoPlayGame,
    MsgClientGetFriendsWhoPlayGameResponse,
    MsgClientJustStrings,
    MsgClientLoggedOff,
    MsgClientLogOnResponse,
    MsgClientLogon,
    MsgClientMarketingMessageUpdate2,
    MsgClientNewLoginKey,
    MsgClientNewLoginKeyAccepted,
    MsgClientOGSBeginSession,
    MsgClientOGSBeginSessionResponse,
    MsgClientOGSEndSession,
    MsgClientOGSEndSessionResponse,
    MsgClientOGSWriteRow,
    MsgClientP2PIntroducerMessage,
    MsgClientRequestedClientStats,
    MsgClientServerUnavailable,
    MsgClientUpdateGuestPassesList,
    MsgClientVACBanStatus,
)
from steamnet.protocol import ClientMsg, Msg

SAMPLES = [
    MsgClientGenericResponse(result=-5),
    MsgChannelEncryptRequest(protocol_version=1, universe=1),
    MsgChannelEncryptResponse(protocol_version=1, key_size=128),
    MsgChannelEncryptResult(result=1),
    MsgClientNewLoginKey(unique_id=77, login_key=bytes(range(20))),
    MsgClientNewLoginKeyAccepted(unique_id=77),
    MsgClientVACBanStatus(num_bans=3),
    MsgClientAppUsageEvent(app_usage_event=2, game_id=440, offline=1),
    MsgClientEmailAddrInfo(password_strength=4, flags_account_security_policy=9, validated=True),
    MsgClientUpdateGuestPassesList(result=1, count_guest_passes_to_give=2, count_guest_passes_to_redeem=-1),
    MsgClientRequestedClientStats(count_stats=12),
    MsgClientP2PIntroducerMessage(steam_id=76561197960265728, routing_type=1, data=b"\x07" * 1450, data_len=1450),
    MsgClientOGSBeginSession(account_type=1, account_id=123456, app_id=570, time_started=1000),
    MsgClientOGSBeginSessionResponse(result=1, collecting_any=True, collecting_details=False, session_id=2**40),
    MsgClientOGSEndSession(session_id=99, time_ended=2000, reason_code=-3, count_attributes=4),
    MsgClientOGSEndSessionResponse(result=2),
    MsgClientOGSWriteRow(session_id=99, count_attributes=7),
    MsgClientGetFriendsWhoPlayGame(game_id=730),
    MsgClientGetFriendsWhoPlayGameResponse(result=1, game_id=730, count_friends=5),
    MsgClientLoggedOff(result=3, sec_min_reconnect_hint=10, sec_max_reconnect_hint=60),
    MsgClientLogOnResponse(
        result=1,
        out_of_game_heartbeat_rate_sec=9,
        in_game_heartbeat_rate_sec=9,
        client_supplied_steam_id=76561197960265728,
        ip_public=0x7F000001,
        server_real_time=1234,
    ),
    MsgClientServerUnavailable(jobid_sent=2**64 - 1, emsg_sent=751, eserver_type_unavailable=5),
    MsgClientMarketingMessageUpdate2(marketing_message_update_time=555, count=2),
]


@pytest.mark.parametrize("message", SAMPLES, ids=lambda m: type(m).__name__)
def test_round_trip(message):
    data = message.to_bytes()
    framed = Msg(message, payload=b"").to_bytes()
    assert framed.endswith(data)
    stream = io.BytesIO(framed)
    header = MsgHdr().deserialize(stream)
    assert header.msg == type(message).emsg
    decoded = type(message)().deserialize(stream)
    assert decoded == message


@pytest.mark.parametrize("message", SAMPLES, ids=lambda m: type(m).__name__)
def test_truncated_input_raises(message):
    stream = io.BytesIO(Msg(message, payload=b"").to_bytes()[:-1])
    MsgHdr().deserialize(stream)
    with pytest.raises(EOFError):
        type(message)().deserialize(stream)


@pytest.mark.parametrize("message", SAMPLES, ids=lambda m: type(m).__name__)
def test_deserialize_consumes_exactly_its_bytes(message):
    stream = io.BytesIO(Msg(message, payload=b"trailing").to_bytes())
    MsgHdr().deserialize(stream)
    type(message)().deserialize(stream)
    assert stream.read() == b"trailing"


def test_channel_encrypt_request_defaults_wire_bytes():
    assert MsgChannelEncryptRequest().to_bytes() == b"\x01\x00\x00\x00\x00\x00\x00\x00"


def test_channel_encrypt_response_defaults_wire_bytes():
    assert MsgChannelEncryptResponse().to_bytes() == b"\x01\x00\x00\x00\x80\x00\x00\x00"


def test_channel_encrypt_result_default_is_invalid():
    assert MsgChannelEncryptResult().result == 0


def test_empty_bodies_serialize_to_nothing():
    assert MsgClientJustStrings().to_bytes() == b""
    assert MsgClientLogon().to_bytes() == b""


def test_login_key_defaults_to_twenty_zero_bytes():
    assert MsgClientNewLoginKey().login_key == bytes(20)


def test_login_key_wrong_length_rejected():
    with pytest.raises(ValueError):
        MsgClientNewLoginKey(unique_id=1, login_key=b"short").to_bytes()


def test_bool_field_reads_any_nonzero_as_true():
    raw = MsgClientEmailAddrInfo(password_strength=1, flags_account_security_policy=2).to_bytes()
    raw = raw[:-1] + b"\x05"
    decoded = MsgClientEmailAddrInfo().deserialize(io.BytesIO(raw))
    assert decoded.validated is True


def test_negative_result_survives_round_trip():
    raw = MsgClientGenericResponse(result=-5).to_bytes()
    assert raw == b"\xfb\xff\xff\xff"
    assert MsgClientGenericResponse().deserialize(io.BytesIO(raw)).result == -5


def test_channel_encrypt_messages_have_distinct_types():
    bodies = [MsgChannelEncryptRequest(), MsgChannelEncryptResponse(), MsgChannelEncryptResult()]
    types = {
        MsgHdr().deserialize(io.BytesIO(Msg(body, payload=b"").to_bytes())).msg for body in bodies
    }
    assert len(types) == 3


def test_msg_wraps_body_with_simple_header():
    body = MsgChannelEncryptResponse()
    msg = Msg(body, payload=b"key")
    data = msg.to_bytes()
    assert msg.msg_type == MsgChannelEncryptResponse.emsg
    header = MsgHdr().deserialize(io.BytesIO(data))
    assert header.msg == MsgChannelEncryptResponse.emsg
    assert data.endswith(body.to_bytes() + b"key")


def test_client_msg_wraps_body_with_extended_header():
    body = MsgClientVACBanStatus(num_bans=2)
    msg = ClientMsg(body, payload=b"tail")
    msg.session_id = 42
    stream = io.BytesIO(msg.to_bytes())
    header = ExtendedClientMsgHdr().deserialize(stream)
    assert header.msg == MsgClientVACBanStatus.emsg
    assert header.session_id == 42
    assert MsgClientVACBanStatus().deserialize(stream) == body
    assert stream.read() == b"tail"