"""Little-endian primitives and fixed-layout structures of the Steam wire format."""

from __future__ import annotations

import io
import struct
from typing import Any, BinaryIO, Callable, ClassVar, Iterator, Optional, Tuple, Union

PROTO_MASK = 0x80000000
EMSG_MASK = ~PROTO_MASK & 0xFFFFFFFF

FieldSpec = Union[Tuple[str, str], Tuple[str, str, Callable[[Any], Any]]]


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size) or b""
    if len(data) != size:
        raise EOFError(f"expected {size} bytes, got {len(data)}")
    return data


def _unpack(stream: BinaryIO, fmt: str) -> Any:
    packer = struct.Struct("<" + fmt)
    return packer.unpack(_read_exact(stream, packer.size))[0]


def read_bool(stream: BinaryIO) -> bool:
    """Read one byte; any non-zero value is true."""
    return _unpack(stream, "B") != 0


def read_uint8(stream: BinaryIO) -> int:
    return _unpack(stream, "B")


def read_uint16(stream: BinaryIO) -> int:
    return _unpack(stream, "H")


def read_uint32(stream: BinaryIO) -> int:
    return _unpack(stream, "I")


def read_uint64(stream: BinaryIO) -> int:
    return _unpack(stream, "Q")


def read_int8(stream: BinaryIO) -> int:
    return _unpack(stream, "b")


def read_int16(stream: BinaryIO) -> int:
    return _unpack(stream, "h")


def read_int32(stream: BinaryIO) -> int:
    return _unpack(stream, "i")


def read_int64(stream: BinaryIO) -> int:
    return _unpack(stream, "q")


def read_byte(stream: BinaryIO) -> int:
    return _unpack(stream, "B")


def read_string(stream: BinaryIO) -> str:
    """Read a NUL-terminated string; raises EOFError if the terminator is missing."""
    collected = bytearray()
    while True:
        byte = stream.read(1)
        if not byte:
            raise EOFError("string is not NUL-terminated")
        if byte == b"\x00":
            return collected.decode("utf-8", errors="replace")
        collected += byte


def read_bytes(stream: BinaryIO, count: int) -> bytes:
    if count < 0:
        raise ValueError(f"negative byte count: {count}")
    return _read_exact(stream, count)


def write_bool(stream: BinaryIO, value: bool) -> None:
    stream.write(b"\x01" if value else b"\x00")


def new_emsg(value: int) -> int:
    """Strip the protobuf flag from a raw message type."""
    return value & EMSG_MASK


def is_proto(value: int) -> bool:
    """Tell whether a raw message type carries the protobuf flag."""
    return value & PROTO_MASK != 0


def _pack_field(name: str, fmt: str, value: Any) -> bytes:
    if fmt.endswith("s"):
        data = bytes(value)
        expected = struct.calcsize("<" + fmt)
        if len(data) != expected:
            raise ValueError(f"field {name!r} must be {expected} bytes, got {len(data)}")
        return data
    if fmt == "?":
        return struct.pack("<?", bool(value))
    return struct.pack("<" + fmt, int(value))


class WireStruct:
    """Base for structures laid out field by field in little-endian order.

    Subclasses list their fields in ``LAYOUT`` as ``(name, struct_format)`` or
    ``(name, struct_format, converter)``; the converter is applied on reading.
    """

    LAYOUT: ClassVar[Tuple[FieldSpec, ...]] = ()

    @classmethod
    def _fields(cls) -> Iterator[Tuple[str, str, Optional[Callable[[Any], Any]]]]:
        for spec in cls.LAYOUT:
            name, fmt = spec[0], spec[1]
            convert = spec[2] if len(spec) > 2 else None  # type: ignore[misc]
            yield name, fmt, convert

    def serialize(self, stream: BinaryIO) -> None:
        for name, fmt, _ in self._fields():
            stream.write(_pack_field(name, fmt, getattr(self, name)))

    def deserialize(self, stream: BinaryIO) -> "WireStruct":
        for name, fmt, convert in self._fields():
            value = _unpack(stream, fmt)
            if convert is not None:
                value = convert(value)
            setattr(self, name, value)
        return self

    def to_bytes(self) -> bytes:
        buffer = io.BytesIO()
        self.serialize(buffer)
        return buffer.getvalue()