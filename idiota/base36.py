"""Base36 encoding of unsigned 64-bit integers and of byte strings."""

from __future__ import annotations

ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"

_UINT64_MASK = (1 << 64) - 1
_MAX_DECODE_LENGTH = 13

_DIGIT_VALUES = {
    **{ord(ch): value for value, ch in enumerate(ALPHABET)},
    **{ord(ch.upper()): value for value, ch in enumerate(ALPHABET) if ch.isalpha()},
}
_POWERS = [36**exponent & _UINT64_MASK for exponent in range(14)]


def encode(value: int) -> str:
    """Encode an unsigned 64-bit integer as a lower-case base36 string."""
    if not 0 <= value <= _UINT64_MASK:
        raise ValueError(f"value out of unsigned 64-bit range: {value}")
    digits = []
    while True:
        value, remainder = divmod(value, 36)
        digits.append(ALPHABET[remainder])
        if value == 0:
            break
    return "".join(reversed(digits))


def decode(s: str) -> int:
    """Decode a base36 string to an unsigned 64-bit integer.

    Strings longer than 13 characters are cut to their first 12; characters
    outside the alphabet count as zero and the result wraps at 64 bits.
    """
    data = s.encode("utf-8")
    if len(data) > _MAX_DECODE_LENGTH:
        data = data[:12]
    result = 0
    for position, byte in enumerate(reversed(data)):
        result += _DIGIT_VALUES.get(byte, 0) * _POWERS[position]
    return result & _UINT64_MASK


def encode_bytes_as_bytes(b: bytes) -> bytes:
    """Encode a byte string to base36, returning ASCII bytes.

    Every leading zero byte becomes one leading ``0`` digit.
    """
    data = bytes(b)
    number = int.from_bytes(data, "big")
    digits = []
    while number > 0:
        number, remainder = divmod(number, 36)
        digits.append(ALPHABET[remainder])
    leading_zeros = len(data) - len(data.lstrip(b"\x00"))
    text = "0" * leading_zeros + "".join(reversed(digits))
    return text.encode("ascii")


def encode_bytes(b: bytes) -> str:
    """Encode a byte string to a lower-case base36 string."""
    return encode_bytes_as_bytes(b).decode("ascii")


def decode_to_bytes(s: str) -> bytes:
    """Decode a base36 string to bytes.

    Each leading ``0`` digit becomes a leading zero byte. A string holding any
    character outside the alphabet decodes to empty bytes.
    """
    text = s.lower()
    number = 0
    for ch in text:
        value = ALPHABET.find(ch) if len(ch) == 1 else -1
        if value == -1:
            return b""
        number = number * 36 + value
    body = number.to_bytes((number.bit_length() + 7) // 8, "big")
    leading_zeros = len(text) - len(text.lstrip("0"))
    return b"\x00" * leading_zeros + body