"""Outgoing struct-backed Steam messages and protocol helpers."""

from __future__ import annotations

import io
from dataclasses import dataclass, field
from typing import BinaryIO, Optional, Protocol

from .headers import JOB_ID_NONE, ExtendedClientMsgHdr, MsgHdr

DEFAULT_AVATAR = "fef49e7fa7e1997310d705b2a6158ff8dc1cdfeb"


class MessageBody(Protocol):
    """A serializable message body that knows its message type."""

    emsg: int

    def serialize(self, stream: BinaryIO) -> None: ...

    def deserialize(self, stream: BinaryIO) -> object: ...


def format_job_id(job_id: int) -> str:
    """Render a job id, showing the sentinel value as ``(none)``."""
    return "(none)" if job_id == JOB_ID_NONE else str(job_id)


def valid_avatar(avatar: bytes) -> bool:
    """An avatar hash is valid if it is 20 bytes and not all zero."""
    text = bytes(avatar).hex()
    return not (text == "0" * 40 or len(text) != 40)


@dataclass
class Msg:
    """A message sent before logging on, with a simple header."""

    body: MessageBody
    payload: bytes = b""
    header: Optional[MsgHdr] = field(default=None)

    def __post_init__(self) -> None:
        if self.header is None:
            self.header = MsgHdr(msg=self.body.emsg)

    is_proto = False

    @property
    def msg_type(self) -> int:
        return self.header.msg

    @property
    def target_job_id(self) -> int:
        return self.header.target_job_id

    @target_job_id.setter
    def target_job_id(self, job: int) -> None:
        self.header.target_job_id = job

    @property
    def source_job_id(self) -> int:
        return self.header.source_job_id

    @source_job_id.setter
    def source_job_id(self, job: int) -> None:
        self.header.source_job_id = job

    def serialize(self, stream: BinaryIO) -> None:
        self.header.serialize(stream)
        self.body.serialize(stream)
        stream.write(bytes(self.payload))

    def to_bytes(self) -> bytes:
        buffer = io.BytesIO()
        self.serialize(buffer)
        return buffer.getvalue()


@dataclass
class ClientMsg:
    """A struct-backed client message with session data in its header."""

    body: MessageBody
    payload: bytes = b""
    header: Optional[ExtendedClientMsgHdr] = field(default=None)

    def __post_init__(self) -> None:
        if self.header is None:
            self.header = ExtendedClientMsgHdr(msg=self.body.emsg)

    is_proto = True

    @property
    def msg_type(self) -> int:
        return self.header.msg

    @property
    def session_id(self) -> int:
        return self.header.session_id

    @session_id.setter
    def session_id(self, session: int) -> None:
        self.header.session_id = session

    @property
    def steam_id(self) -> int:
        return self.header.steam_id

    @steam_id.setter
    def steam_id(self, steam_id: int) -> None:
        self.header.steam_id = steam_id

    @property
    def target_job_id(self) -> int:
        return self.header.target_job_id

    @target_job_id.setter
    def target_job_id(self, job: int) -> None:
        self.header.target_job_id = job

    @property
    def source_job_id(self) -> int:
        return self.header.source_job_id

    @source_job_id.setter
    def source_job_id(self, job: int) -> None:
        self.header.source_job_id = job

    def serialize(self, stream: BinaryIO) -> None:
        self.header.serialize(stream)
        self.body.serialize(stream)
        stream.write(bytes(self.payload))

    def to_bytes(self) -> bytes:
        buffer = io.BytesIO()
        self.serialize(buffer)
        return buffer.getvalue()