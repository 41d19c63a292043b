import io
from dataclasses import dataclass, field
from enum import IntEnum

import pytest

from steamnet.binary import (
    EMSG_MASK,
    PROTO_MASK,
    WireStruct,
    is_proto,
    new_emsg,
    read_bool,
    read_byte,
    read_bytes,
    read_int8,
    read_int16,
    read_int32,
    read_int64,
    read_string,
    read_uint8,
    read_uint16,
    read_uint32,
    read_uint64,
    write_bool,
)


class Color(IntEnum):
    RED = 1
    BLUE = 2


@dataclass
class Sample(WireStruct):
    LAYOUT = (
        ("number", "I"),
        ("flag", "?"),
        ("signed", "q"),
        ("color", "i", Color),
        ("blob", "4s"),
    )
    number: int = 0
    flag: bool = False
    signed: int = 0
    color: Color = Color.RED
    blob: bytes = field(default=bytes(4))


def stream(data):
    return io.BytesIO(data)


def test_read_uint32_is_little_endian():
    assert read_uint32(stream(b"VT01")) == 0x31305456


def test_signed_reads_all_ones():
    assert read_int8(stream(b"\xff")) == -1
    assert read_int16(stream(b"\xff\xff")) == -1
    assert read_int32(stream(b"\xff" * 4)) == -1
    assert read_int64(stream(b"\xff" * 8)) == -1


def test_unsigned_small_values():
    assert read_uint8(stream(b"\x07")) == 7
    assert read_byte(stream(b"\x07")) == 7
    assert read_uint16(stream(b"\x01\x00")) == 1
    assert read_uint64(stream(b"\x01" + bytes(7))) == 1


def test_read_bool():
    assert read_bool(stream(b"\x00")) is False
    assert read_bool(stream(b"\x02")) is True


def test_read_string_stops_at_nul():
    s = stream(b"abc\x00def")
    assert read_string(s) == "abc"
    assert s.read() == b"def"


def test_read_string_without_terminator():
    with pytest.raises(EOFError):
        read_string(stream(b"abc"))


def test_read_bytes():
    s = stream(b"hello world")
    assert read_bytes(s, 5) == b"hello"
    assert read_bytes(s, 0) == b""


def test_read_bytes_negative():
    with pytest.raises(ValueError):
        read_bytes(stream(b"x"), -1)


@pytest.mark.parametrize(
    "reader, data",
    [
        (read_uint16, b"\x01"),
        (read_uint32, b"\x01\x02\x03"),
        (read_uint64, b"\x01" * 7),
        (read_int32, b""),
        (read_bool, b""),
    ],
)
def test_short_reads_raise_eof(reader, data):
    with pytest.raises(EOFError):
        reader(stream(data))


def test_read_bytes_short():
    with pytest.raises(EOFError):
        read_bytes(stream(b"ab"), 3)


def test_write_bool():
    buffer = io.BytesIO()
    write_bool(buffer, True)
    write_bool(buffer, False)
    assert buffer.getvalue() == b"\x01\x00"


def test_emsg_masks():
    assert new_emsg(PROTO_MASK | 5474) == 5474
    assert is_proto(PROTO_MASK | 5474)
    assert not is_proto(5474)
    assert PROTO_MASK | EMSG_MASK == 0xFFFFFFFF
    assert not is_proto(new_emsg(0xFFFFFFFF))


def test_wire_struct_round_trip():
    original = Sample(number=1, flag=True, signed=-5, color=Color.BLUE, blob=b"abcd")
    data = WireStruct.to_bytes(original)
    decoded = WireStruct.deserialize(Sample(), stream(data))
    assert decoded == original
    assert decoded.color is Color.BLUE


def test_wire_struct_bytes_start_little_endian():
    data = WireStruct.to_bytes(Sample(number=1))
    assert read_uint32(stream(data[:4])) == 1
    assert data[:4] == b"\x01\x00\x00\x00"
    assert data[-4:] == bytes(4)


def test_wire_struct_fixed_bytes_length_checked():
    with pytest.raises(ValueError):
        WireStruct.to_bytes(Sample(blob=b"abc"))


def test_wire_struct_short_input():
    data = WireStruct.to_bytes(Sample(number=3))
    with pytest.raises(EOFError):
        WireStruct.deserialize(Sample(), stream(data[:-1]))


def test_wire_struct_serialize_to_stream():
    buffer = io.BytesIO()
    sample = Sample(number=9, blob=b"wxyz")
    WireStruct.serialize(sample, buffer)
    assert buffer.getvalue() == WireStruct.to_bytes(sample)
    assert read_uint32(stream(buffer.getvalue())) == 9