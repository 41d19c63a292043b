"""Fixed-layout headers that precede Steam messages on the wire."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .binary import WireStruct

EMSG_INVALID = 0
JOB_ID_NONE = 0xFFFFFFFFFFFFFFFF

UDP_HEADER_MAGIC = 0x31305356
UDP_PACKET_TYPE_INVALID = 0
CHALLENGE_MASK = 0xA426DF2B


@dataclass
class UdpHeader(WireStruct):
    """Header of a UDP datagram exchanged with a connection manager."""

    MAGIC: ClassVar[int] = UDP_HEADER_MAGIC

    magic: int = UDP_HEADER_MAGIC
    payload_size: int = 0
    packet_type: int = UDP_PACKET_TYPE_INVALID
    flags: int = 0
    source_conn_id: int = 512
    dest_conn_id: int = 0
    seq_this: int = 0
    seq_ack: int = 0
    packets_in_msg: int = 0
    msg_start_seq: int = 0
    msg_size: int = 0

    LAYOUT = (
        ("magic", "I"),
        ("payload_size", "H"),
        ("packet_type", "B"),
        ("flags", "B"),
        ("source_conn_id", "I"),
        ("dest_conn_id", "I"),
        ("seq_this", "I"),
        ("seq_ack", "I"),
        ("packets_in_msg", "I"),
        ("msg_start_seq", "I"),
        ("msg_size", "I"),
    )


@dataclass
class ChallengeData(WireStruct):
    CHALLENGE_MASK: ClassVar[int] = CHALLENGE_MASK

    challenge_value: int = 0
    server_load: int = 0

    LAYOUT = (("challenge_value", "I"), ("server_load", "I"))


@dataclass
class ConnectData(WireStruct):
    CHALLENGE_MASK: ClassVar[int] = CHALLENGE_MASK

    challenge_value: int = 0

    LAYOUT = (("challenge_value", "I"),)


@dataclass
class Accept(WireStruct):
    """A UDP accept packet; it carries no fields."""


@dataclass
class Datagram(WireStruct):
    """A UDP datagram packet; it carries no fields."""


@dataclass
class Disconnect(WireStruct):
    """A UDP disconnect packet; it carries no fields."""


@dataclass
class MsgHdr(WireStruct):
    """Simple header used before logging on."""

    msg: int = EMSG_INVALID
    target_job_id: int = JOB_ID_NONE
    source_job_id: int = JOB_ID_NONE

    LAYOUT = (("msg", "I"), ("target_job_id", "Q"), ("source_job_id", "Q"))


@dataclass
class ExtendedClientMsgHdr(WireStruct):
    """Header of non-protobuf client messages carrying session data."""

    msg: int = EMSG_INVALID
    header_size: int = 36
    header_version: int = 2
    target_job_id: int = JOB_ID_NONE
    source_job_id: int = JOB_ID_NONE
    header_canary: int = 239
    steam_id: int = 0
    session_id: int = 0

    LAYOUT = (
        ("msg", "I"),
        ("header_size", "B"),
        ("header_version", "H"),
        ("target_job_id", "Q"),
        ("source_job_id", "Q"),
        ("header_canary", "B"),
        ("steam_id", "Q"),
        ("session_id", "i"),
    )


@dataclass
class MsgGCHdr(WireStruct):
    """Header of non-protobuf game coordinator messages."""

    header_version: int = 1
    target_job_id: int = JOB_ID_NONE
    source_job_id: int = JOB_ID_NONE

    LAYOUT = (("header_version", "H"), ("target_job_id", "Q"), ("source_job_id", "Q"))