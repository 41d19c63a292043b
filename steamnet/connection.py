"""Framed, optionally encrypted TCP connection to a Steam connection manager."""

from __future__ import annotations

import socket
import struct
import threading
from typing import Optional, Tuple

from .cryptoutil import symmetric_decrypt, symmetric_encrypt
from .netutil import PortAddr

TCP_CONNECTION_MAGIC = 0x31305456  # "VT01"

_UINT32 = struct.Struct("<I")
_HEADER = struct.Struct("<II")


class InvalidMagicError(ValueError):
    """A frame did not carry the expected connection magic."""

    def __init__(self, magic: int) -> None:
        super().__init__(
            f"Invalid connection magic! Expected {TCP_CONNECTION_MAGIC}, got {magic}!"
        )
        self.magic = magic


class TcpConnection:
    """Reads and writes length-prefixed frames over a connected socket."""

    def __init__(self, sock: socket.socket) -> None:
        self._sock = sock
        self._key: Optional[bytes] = None
        self._key_lock = threading.Lock()

    def __enter__(self) -> "TcpConnection":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _recv_exact(self, size: int) -> bytes:
        received = bytearray()
        while len(received) < size:
            chunk = self._sock.recv(size - len(received))
            if not chunk:
                raise EOFError("connection closed")
            received += chunk
        return bytes(received)

    def _current_key(self) -> Optional[bytes]:
        with self._key_lock:
            return self._key

    def read(self) -> bytes:
        """Read one frame and return its payload, decrypted if a key is set."""
        (length,) = _UINT32.unpack(self._recv_exact(_UINT32.size))
        (magic,) = _UINT32.unpack(self._recv_exact(_UINT32.size))
        if magic != TCP_CONNECTION_MAGIC:
            raise InvalidMagicError(magic)
        payload = self._recv_exact(length)
        key = self._current_key()
        if key is not None:
            payload = symmetric_decrypt(key, payload)
        return payload

    def write(self, message: bytes) -> None:
        """Write one frame; only one thread may write at a time."""
        key = self._current_key()
        if key is not None:
            message = symmetric_encrypt(key, message)
        self._sock.sendall(_HEADER.pack(len(message), TCP_CONNECTION_MAGIC) + bytes(message))

    def close(self) -> None:
        self._sock.close()

    def set_encryption_key(self, key: Optional[bytes]) -> None:
        """Set the 32-byte session key, or clear it with None."""
        if key is not None and len(key) != 32:
            raise ValueError("Connection AES key is not 32 bytes long!")
        with self._key_lock:
            self._key = None if key is None else bytes(key)

    def is_encrypted(self) -> bool:
        return self._current_key() is not None


def dial_tcp(
    remote: PortAddr,
    local: Optional[Tuple[str, int]] = None,
    timeout: Optional[float] = None,
) -> TcpConnection:
    """Connect to ``remote``, optionally bound to ``local``; ``timeout`` limits only the dial."""
    sock = socket.create_connection(remote.to_tcp_addr(), timeout=timeout, source_address=local)
    sock.settimeout(None)
    return TcpConnection(sock)