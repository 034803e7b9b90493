import json
import struct
from datetime import datetime, timedelta, timezone

import pytest

from idiota.id import (
    Id,
    InvalidByteLengthError,
    InvalidStringLengthError,
    ScanError,
    new_id,
    set_random_func,
)


def _yesterday():
    now = datetime.now(timezone.utc).replace(microsecond=0)
    return now - timedelta(days=1)


def test_new():
    identifier = new_id()
    assert len(str(identifier)) == 13


def test_new_with_time():
    yesterday = _yesterday()
    identifier = new_id(yesterday)
    assert len(str(identifier)) == 13
    assert identifier.time() == yesterday


def test_new_with_random():
    random_part = 123456789
    identifier = new_id(random=random_part)
    assert len(str(identifier)) == 13
    assert identifier.to_uint64() & 0xFFFFFFFF == random_part


def test_new_with_random_and_time():
    yesterday = _yesterday()
    random_part = 123456789
    identifier = new_id(yesterday, random_part)
    assert len(str(identifier)) == 13
    full = identifier.to_uint64()
    assert full & 0xFFFFFFFF == random_part
    assert full >> 32 == int(yesterday.timestamp()) & 0xFFFFFFFF


def test_new_rejects_random_out_of_range():
    with pytest.raises(ValueError):
        new_id(random=1 << 32)


def test_set_random_func_is_used():
    previous = set_random_func(lambda: 42)
    try:
        identifier = new_id()
    finally:
        set_random_func(previous)
    assert identifier.rand == 42


def test_unmarshal_text():
    identifier = new_id()
    assert Id.from_text(str(identifier)) == identifier


def test_unmarshal_text_from_bytes():
    identifier = new_id()
    assert Id.from_text(str(identifier).encode("ascii")) == identifier


def test_marshal_text():
    identifier = new_id()
    assert identifier.to_text() == str(identifier)


def test_marshal_binary():
    identifier = new_id()
    data = identifier.to_bytes()
    assert len(data) == 8
    high, low = struct.unpack(">II", data)
    assert high == identifier.to_uint64() >> 32
    assert low == identifier.to_uint64() & 0xFFFFFFFF


def test_unmarshal_binary():
    identifier = new_id()
    assert Id.from_bytes(identifier.to_bytes()) == identifier


def test_unmarshal_binary_pads_short_input_on_the_right():
    assert Id.from_bytes(b"\x00\x00\x00\x01") == Id(ts=1, rand=0)


def test_unmarshal_binary_rejects_long_input():
    with pytest.raises(InvalidByteLengthError):
        Id.from_bytes(b"\x00" * 9)


def test_unmarshal_text_rejects_long_input():
    with pytest.raises(InvalidStringLengthError):
        Id.from_text("a" * 14)


def test_unmarshal_text_rejects_value_wider_than_eight_bytes():
    with pytest.raises(InvalidByteLengthError):
        Id.from_text("z" * 13)


def test_scan_string():
    identifier = new_id()
    assert Id.scan(str(identifier)) == identifier
    assert Id.scan(identifier.to_text().encode("ascii")) == identifier


def test_scan_uint64():
    now = int(datetime.now(timezone.utc).timestamp())
    random_part = 123456789
    case_value = (now << 32) | random_part
    identifier = Id.scan(case_value)
    assert int(identifier.time().timestamp()) & 0xFFFFFFFF == now & 0xFFFFFFFF
    assert identifier.to_uint64() == case_value
    assert identifier.to_uint64() & 0xFFFFFFFF == random_part


def test_scan_nil():
    with pytest.raises(ScanError):
        Id.scan(None)


def test_scan_invalid_type():
    with pytest.raises(ScanError):
        Id.scan([])


def test_scan_rejects_long_bytes():
    with pytest.raises(ScanError):
        Id.scan(b"a" * 14)


def test_scan_rejects_long_string():
    with pytest.raises(ScanError):
        Id.scan("a" * 14)


def test_scan_rejects_negative_integer():
    with pytest.raises(ScanError):
        Id.scan(-1)


def test_from_uint64():
    original = new_id()
    assert Id.from_uint64(original.to_uint64()) == original


def test_from_uint64_rejects_out_of_range():
    with pytest.raises(ValueError):
        Id.from_uint64(1 << 64)


def test_int_conversion_matches_uint64():
    identifier = new_id()
    assert int(identifier) == identifier.to_uint64()


def test_marshal_unmarshal_json():
    original = new_id()
    data = original.to_json()
    assert json.loads(data) == str(original)
    assert Id.from_json(data) == original


def test_unmarshal_json_rejects_non_string():
    with pytest.raises(ValueError):
        Id.from_json("123")


def test_value():
    identifier = new_id()
    assert identifier.value() == str(identifier)


def test_id_rejects_parts_out_of_range():
    with pytest.raises(ValueError):
        Id(ts=1 << 32, rand=0)