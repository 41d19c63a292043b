"""Struct-backed Steam client message bodies."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from .binary import WireStruct

EMSG_INVALID = 0
ERESULT_INVALID = 0
EUNIVERSE_INVALID = 0

PROTOCOL_VERSION = 1


@dataclass
class MsgClientJustStrings(WireStruct):
    """A body without fixed fields; its content is carried in the payload."""

    emsg: ClassVar[int] = EMSG_INVALID


@dataclass
class MsgClientGenericResponse(WireStruct):
    emsg: ClassVar[int] = EMSG_INVALID

    result: int = 0

    LAYOUT = (("result", "i"),)


@dataclass
class MsgChannelEncryptRequest(WireStruct):
    """Sent by the server to start channel encryption."""

    emsg: ClassVar[int] = 1303
    PROTOCOL_VERSION: ClassVar[int] = PROTOCOL_VERSION

    protocol_version: int = PROTOCOL_VERSION
    universe: int = EUNIVERSE_INVALID

    LAYOUT = (("protocol_version", "I"), ("universe", "i"))


@dataclass
class MsgChannelEncryptResponse(WireStruct):
    """The client's answer carrying the encrypted session key in its payload."""

    emsg: ClassVar[int] = 1304

    protocol_version: int = PROTOCOL_VERSION
    key_size: int = 128

    LAYOUT = (("protocol_version", "I"), ("key_size", "I"))


@dataclass
class MsgChannelEncryptResult(WireStruct):
    emsg: ClassVar[int] = 1305

    result: int = ERESULT_INVALID

    LAYOUT = (("result", "i"),)


@dataclass
class MsgClientNewLoginKey(WireStruct):
    emsg: ClassVar[int] = 5463

    unique_id: int = 0
    login_key: bytes = field(default_factory=lambda: bytes(20))

    LAYOUT = (("unique_id", "I"), ("login_key", "20s"))


@dataclass
class MsgClientNewLoginKeyAccepted(WireStruct):
    emsg: ClassVar[int] = 5464

    unique_id: int = 0

    LAYOUT = (("unique_id", "I"),)


@dataclass
class MsgClientLogon(WireStruct):
    """Logon body; it has no fixed fields, only protocol constants."""

    emsg: ClassVar[int] = 5514

    OBFUSCATION_MASK: ClassVar[int] = 0xBAADF00D
    CURRENT_PROTOCOL: ClassVar[int] = 65580
    PROTOCOL_VER_MAJOR_MASK: ClassVar[int] = 0xFFFF0000
    PROTOCOL_VER_MINOR_MASK: ClassVar[int] = 0xFFFF
    PROTOCOL_VER_MINOR_MIN_GAME_SERVERS: ClassVar[int] = 4
    PROTOCOL_VER_MINOR_MIN_FOR_SUPPORTING_EMSG_MULTI: ClassVar[int] = 12
    PROTOCOL_VER_MINOR_MIN_FOR_SUPPORTING_EMSG_CLIENT_ENCRYPT_PCT: ClassVar[int] = 14
    PROTOCOL_VER_MINOR_MIN_FOR_EXTENDED_MSG_HDR: ClassVar[int] = 17
    PROTOCOL_VER_MINOR_MIN_FOR_CELL_ID: ClassVar[int] = 18
    PROTOCOL_VER_MINOR_MIN_FOR_SESSION_ID_LAST: ClassVar[int] = 19
    PROTOCOL_VER_MINOR_MIN_FOR_SERVER_AVAILABLITY_MSGS: ClassVar[int] = 24
    PROTOCOL_VER_MINOR_MIN_CLIENTS: ClassVar[int] = 25
    PROTOCOL_VER_MINOR_MIN_FOR_OS_TYPE: ClassVar[int] = 26
    PROTOCOL_VER_MINOR_MIN_FOR_CEG_APPLY_PE_SIG: ClassVar[int] = 27
    PROTOCOL_VER_MINOR_MIN_FOR_MARKETING_MESSAGES2: ClassVar[int] = 27
    PROTOCOL_VER_MINOR_MIN_FOR_ANY_PROTO_BUF_MESSAGES: ClassVar[int] = 28
    PROTOCOL_VER_MINOR_MIN_FOR_PROTO_BUF_LOGGED_OFF_MESSAGE: ClassVar[int] = 28
    PROTOCOL_VER_MINOR_MIN_FOR_PROTO_BUF_MULTI_MESSAGES: ClassVar[int] = 28
    PROTOCOL_VER_MINOR_MIN_FOR_SENDING_PROTOCOL_TO_UFS: ClassVar[int] = 30
    PROTOCOL_VER_MINOR_MIN_FOR_MACHINE_AUTH: ClassVar[int] = 33
    PROTOCOL_VER_MINOR_MIN_FOR_SESSION_ID_LAST_ANON: ClassVar[int] = 36
    PROTOCOL_VER_MINOR_MIN_FOR_ENHANCED_APP_LIST: ClassVar[int] = 40
    PROTOCOL_VER_MINOR_MIN_FOR_STEAM_GUARD_NOTIFICATION_UI: ClassVar[int] = 41
    PROTOCOL_VER_MINOR_MIN_FOR_PROTO_BUF_SERVICE_MODULE_CALLS: ClassVar[int] = 42
    PROTOCOL_VER_MINOR_MIN_FOR_GZIP_MULTI_MESSAGES: ClassVar[int] = 43
    PROTOCOL_VER_MINOR_MIN_FOR_NEW_VOICE_CALL_AUTHORIZE: ClassVar[int] = 44
    PROTOCOL_VER_MINOR_MIN_FOR_CLIENT_INSTANCE_IDS: ClassVar[int] = 44


@dataclass
class MsgClientVACBanStatus(WireStruct):
    emsg: ClassVar[int] = 782

    num_bans: int = 0

    LAYOUT = (("num_bans", "I"),)


@dataclass
class MsgClientAppUsageEvent(WireStruct):
    emsg: ClassVar[int] = 715

    app_usage_event: int = 0
    game_id: int = 0
    offline: int = 0

    LAYOUT = (("app_usage_event", "i"), ("game_id", "Q"), ("offline", "H"))


@dataclass
class MsgClientEmailAddrInfo(WireStruct):
    emsg: ClassVar[int] = 5456

    password_strength: int = 0
    flags_account_security_policy: int = 0
    validated: bool = False

    LAYOUT = (
        ("password_strength", "I"),
        ("flags_account_security_policy", "I"),
        ("validated", "?"),
    )


@dataclass
class MsgClientUpdateGuestPassesList(WireStruct):
    emsg: ClassVar[int] = 798

    result: int = 0
    count_guest_passes_to_give: int = 0
    count_guest_passes_to_redeem: int = 0

    LAYOUT = (
        ("result", "i"),
        ("count_guest_passes_to_give", "i"),
        ("count_guest_passes_to_redeem", "i"),
    )


@dataclass
class MsgClientRequestedClientStats(WireStruct):
    emsg: ClassVar[int] = 5480

    count_stats: int = 0

    LAYOUT = (("count_stats", "i"),)


@dataclass
class MsgClientP2PIntroducerMessage(WireStruct):
    emsg: ClassVar[int] = 5502

    steam_id: int = 0
    routing_type: int = 0
    data: bytes = field(default_factory=lambda: bytes(1450))
    data_len: int = 0

    LAYOUT = (
        ("steam_id", "Q"),
        ("routing_type", "i"),
        ("data", "1450s"),
        ("data_len", "I"),
    )


@dataclass
class MsgClientOGSBeginSession(WireStruct):
    emsg: ClassVar[int] = 741

    account_type: int = 0
    account_id: int = 0
    app_id: int = 0
    time_started: int = 0

    LAYOUT = (
        ("account_type", "B"),
        ("account_id", "Q"),
        ("app_id", "I"),
        ("time_started", "I"),
    )


@dataclass
class MsgClientOGSBeginSessionResponse(WireStruct):
    emsg: ClassVar[int] = 742

    result: int = 0
    collecting_any: bool = False
    collecting_details: bool = False
    session_id: int = 0

    LAYOUT = (
        ("result", "i"),
        ("collecting_any", "?"),
        ("collecting_details", "?"),
        ("session_id", "Q"),
    )


@dataclass
class MsgClientOGSEndSession(WireStruct):
    emsg: ClassVar[int] = 743

    session_id: int = 0
    time_ended: int = 0
    reason_code: int = 0
    count_attributes: int = 0

    LAYOUT = (
        ("session_id", "Q"),
        ("time_ended", "I"),
        ("reason_code", "i"),
        ("count_attributes", "i"),
    )


@dataclass
class MsgClientOGSEndSessionResponse(WireStruct):
    emsg: ClassVar[int] = 744

    result: int = 0

    LAYOUT = (("result", "i"),)


@dataclass
class MsgClientOGSWriteRow(WireStruct):
    emsg: ClassVar[int] = 745

    session_id: int = 0
    count_attributes: int = 0

    LAYOUT = (("session_id", "Q"), ("count_attributes", "i"))


@dataclass
class MsgClientGetFriendsWhoPlayGame(WireStruct):
    emsg: ClassVar[int] = 5591

    game_id: int = 0

    LAYOUT = (("game_id", "Q"),)


@dataclass
class MsgClientGetFriendsWhoPlayGameResponse(WireStruct):
    emsg: ClassVar[int] = 5592

    result: int = 0
    game_id: int = 0
    count_friends: int = 0

    LAYOUT = (("result", "i"), ("game_id", "Q"), ("count_friends", "I"))


@dataclass
class MsgClientLoggedOff(WireStruct):
    emsg: ClassVar[int] = 757

    result: int = 0
    sec_min_reconnect_hint: int = 0
    sec_max_reconnect_hint: int = 0

    LAYOUT = (
        ("result", "i"),
        ("sec_min_reconnect_hint", "i"),
        ("sec_max_reconnect_hint", "i"),
    )


@dataclass
class MsgClientLogOnResponse(WireStruct):
    emsg: ClassVar[int] = 751

    result: int = 0
    out_of_game_heartbeat_rate_sec: int = 0
    in_game_heartbeat_rate_sec: int = 0
    client_supplied_steam_id: int = 0
    ip_public: int = 0
    server_real_time: int = 0

    LAYOUT = (
        ("result", "i"),
        ("out_of_game_heartbeat_rate_sec", "i"),
        ("in_game_heartbeat_rate_sec", "i"),
        ("client_supplied_steam_id", "Q"),
        ("ip_public", "I"),
        ("server_real_time", "I"),
    )


@dataclass
class MsgClientServerUnavailable(WireStruct):
    emsg: ClassVar[int] = 5500

    jobid_sent: int = 0
    emsg_sent: int = 0
    eserver_type_unavailable: int = 0

    LAYOUT = (
        ("jobid_sent", "Q"),
        ("emsg_sent", "I"),
        ("eserver_type_unavailable", "i"),
    )


@dataclass
class MsgClientMarketingMessageUpdate2(WireStruct):
    emsg: ClassVar[int] = 5510

    marketing_message_update_time: int = 0
    count: int = 0

    LAYOUT = (("marketing_message_update_time", "I"), ("count", "I"))