"""Struct-backed game server and chat message bodies."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .binary import WireStruct


@dataclass
class MsgGSPerformHardwareSurvey(WireStruct):
    emsg: ClassVar[int] = 902

    flags: int = 0

    LAYOUT = (("flags", "I"),)


@dataclass
class MsgGSGetPlayStatsResponse(WireStruct):
    emsg: ClassVar[int] = 919

    result: int = 0
    rank: int = 0
    lifetime_connects: int = 0
    lifetime_minutes_played: int = 0

    LAYOUT = (
        ("result", "i"),
        ("rank", "i"),
        ("lifetime_connects", "I"),
        ("lifetime_minutes_played", "I"),
    )


@dataclass
class MsgGSGetReputationResponse(WireStruct):
    emsg: ClassVar[int] = 937

    result: int = 0
    reputation_score: int = 0
    banned: bool = False
    banned_ip: int = 0
    banned_port: int = 0
    banned_game_id: int = 0
    time_ban_expires: int = 0

    LAYOUT = (
        ("result", "i"),
        ("reputation_score", "I"),
        ("banned", "?"),
        ("banned_ip", "I"),
        ("banned_port", "H"),
        ("banned_game_id", "Q"),
        ("time_ban_expires", "I"),
    )


@dataclass
class MsgGSDeny(WireStruct):
    emsg: ClassVar[int] = 759

    steam_id: int = 0
    deny_reason: int = 0

    LAYOUT = (("steam_id", "Q"), ("deny_reason", "i"))


@dataclass
class MsgGSApprove(WireStruct):
    emsg: ClassVar[int] = 758

    steam_id: int = 0

    LAYOUT = (("steam_id", "Q"),)


@dataclass
class MsgGSKick(WireStruct):
    emsg: ClassVar[int] = 760

    steam_id: int = 0
    deny_reason: int = 0
    wait_til_map_change: int = 0

    LAYOUT = (("steam_id", "Q"), ("deny_reason", "i"), ("wait_til_map_change", "i"))


@dataclass
class MsgGSGetUserGroupStatus(WireStruct):
    emsg: ClassVar[int] = 920

    steam_id_user: int = 0
    steam_id_group: int = 0

    LAYOUT = (("steam_id_user", "Q"), ("steam_id_group", "Q"))


@dataclass
class MsgGSGetUserGroupStatusResponse(WireStruct):
    emsg: ClassVar[int] = 923

    steam_id_user: int = 0
    steam_id_group: int = 0
    clan_relationship: int = 0
    clan_rank: int = 0

    LAYOUT = (
        ("steam_id_user", "Q"),
        ("steam_id_group", "Q"),
        ("clan_relationship", "i"),
        ("clan_rank", "i"),
    )


@dataclass
class MsgClientJoinChat(WireStruct):
    emsg: ClassVar[int] = 801

    steam_id_chat: int = 0
    is_voice_speaker: bool = False

    LAYOUT = (("steam_id_chat", "Q"), ("is_voice_speaker", "?"))


@dataclass
class MsgClientChatEnter(WireStruct):
    emsg: ClassVar[int] = 807

    steam_id_chat: int = 0
    steam_id_friend: int = 0
    chat_room_type: int = 0
    steam_id_owner: int = 0
    steam_id_clan: int = 0
    chat_flags: int = 0
    enter_response: int = 0
    num_members: int = 0

    LAYOUT = (
        ("steam_id_chat", "Q"),
        ("steam_id_friend", "Q"),
        ("chat_room_type", "i"),
        ("steam_id_owner", "Q"),
        ("steam_id_clan", "Q"),
        ("chat_flags", "B"),
        ("enter_response", "i"),
        ("num_members", "i"),
    )


@dataclass
class MsgClientChatMsg(WireStruct):
    emsg: ClassVar[int] = 799

    steam_id_chatter: int = 0
    steam_id_chat_room: int = 0
    chat_msg_type: int = 0

    LAYOUT = (
        ("steam_id_chatter", "Q"),
        ("steam_id_chat_room", "Q"),
        ("chat_msg_type", "i"),
    )


@dataclass
class MsgClientChatMemberInfo(WireStruct):
    emsg: ClassVar[int] = 802

    steam_id_chat: int = 0
    type: int = 0

    LAYOUT = (("steam_id_chat", "Q"), ("type", "i"))


@dataclass
class MsgClientChatAction(WireStruct):
    emsg: ClassVar[int] = 597

    steam_id_chat: int = 0
    steam_id_user_to_act_on: int = 0
    chat_action: int = 0

    LAYOUT = (
        ("steam_id_chat", "Q"),
        ("steam_id_user_to_act_on", "Q"),
        ("chat_action", "i"),
    )


@dataclass
class MsgClientChatActionResult(WireStruct):
    emsg: ClassVar[int] = 814

    steam_id_chat: int = 0
    steam_id_user_acted_on: int = 0
    chat_action: int = 0
    action_result: int = 0

    LAYOUT = (
        ("steam_id_chat", "Q"),
        ("steam_id_user_acted_on", "Q"),
        ("chat_action", "i"),
        ("action_result", "i"),
    )


@dataclass
class MsgClientChatRoomInfo(WireStruct):
    emsg: ClassVar[int] = 4026

    steam_id_chat: int = 0
    type: int = 0

    LAYOUT = (("steam_id_chat", "Q"), ("type", "i"))


@dataclass
class MsgClientSetIgnoreFriend(WireStruct):
    emsg: ClassVar[int] = 855

    my_steam_id: int = 0
    steam_id_friend: int = 0
    ignore: int = 0

    LAYOUT = (("my_steam_id", "Q"), ("steam_id_friend", "Q"), ("ignore", "B"))


@dataclass
class MsgClientSetIgnoreFriendResponse(WireStruct):
    emsg: ClassVar[int] = 856

    friend_id: int = 0
    result: int = 0

    LAYOUT = (("friend_id", "Q"), ("result", "i"))


@dataclass
class MsgClientCreateChat(WireStruct):
    emsg: ClassVar[int] = 809

    chat_room_type: int = 0
    game_id: int = 0
    steam_id_clan: int = 0
    permission_officer: int = 0
    permission_member: int = 0
    permission_all: int = 0
    members_max: int = 0
    chat_flags: int = 0
    steam_id_friend_chat: int = 0
    steam_id_invited: int = 0

    LAYOUT = (
        ("chat_room_type", "i"),
        ("game_id", "Q"),
        ("steam_id_clan", "Q"),
        ("permission_officer", "i"),
        ("permission_member", "i"),
        ("permission_all", "i"),
        ("members_max", "I"),
        ("chat_flags", "B"),
        ("steam_id_friend_chat", "Q"),
        ("steam_id_invited", "Q"),
    )


@dataclass
class MsgClientCreateChatResponse(WireStruct):
    emsg: ClassVar[int] = 810

    result: int = 0
    steam_id_chat: int = 0
    chat_room_type: int = 0
    steam_id_friend_chat: int = 0

    LAYOUT = (
        ("result", "i"),
        ("steam_id_chat", "Q"),
        ("chat_room_type", "i"),
        ("steam_id_friend_chat", "Q"),
    )