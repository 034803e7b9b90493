"""Sortable 64-bit identifiers built from a UNIX timestamp and a random part."""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from math import floor
from random import getrandbits
from typing import Callable

from idiota import base36

_UINT32_MASK = 0xFFFFFFFF
_UINT64_MASK = (1 << 64) - 1
_MAX_TEXT_LENGTH = 13
_BINARY_LENGTH = 8


class InvalidStringLengthError(ValueError):
    """Raised when a text form is longer than an identifier can be."""

    def __init__(self, length: int) -> None:
        super().__init__(f"Invalid string length (got {length})")
        self.length = length


class InvalidByteLengthError(ValueError):
    """Raised when a binary form is longer than an identifier can be."""

    def __init__(self, length: int) -> None:
        super().__init__(f"Invalid byte length (got {length})")
        self.length = length


class ScanError(ValueError):
    """Raised when a database value cannot be turned into an identifier."""


def _default_random() -> int:
    return getrandbits(32)


class _RandomSource:
    """Holds the function that supplies random parts of new identifiers."""

    def __init__(self, func: Callable[[], int]) -> None:
        self.func = func

    def swap(self, func: Callable[[], int]) -> Callable[[], int]:
        if not callable(func):
            raise TypeError(f"random function must be callable, got {type(func).__name__}")
        previous, self.func = self.func, func
        return previous

    def draw(self) -> int:
        return self.func() & _UINT32_MASK


_random_source = _RandomSource(_default_random)


def set_random_func(func: Callable[[], int]) -> Callable[[], int]:
    """Replace the source of random parts; return the one it replaces."""
    return _random_source.swap(func)


@dataclass(frozen=True, slots=True)
class Id:
    """An identifier: a 32-bit UNIX timestamp and a 32-bit random part."""

    ts: int = 0
    rand: int = 0

    def __post_init__(self) -> None:
        for name, part in (("ts", self.ts), ("rand", self.rand)):
            if not 0 <= part <= _UINT32_MASK:
                raise ValueError(f"{name} out of unsigned 32-bit range: {part}")

    @classmethod
    def from_uint64(cls, value: int) -> Id:
        """Build an identifier from its 64-bit integer form."""
        if not 0 <= value <= _UINT64_MASK:
            raise ValueError(f"value out of unsigned 64-bit range: {value}")
        return cls.from_bytes(value.to_bytes(_BINARY_LENGTH, "big"))

    @classmethod
    def from_bytes(cls, data: bytes) -> Id:
        """Build an identifier from big-endian bytes, zero-padded on the right."""
        data = bytes(data)
        if len(data) > _BINARY_LENGTH:
            raise InvalidByteLengthError(len(data))
        data = data.ljust(_BINARY_LENGTH, b"\x00")
        return cls(
            ts=int.from_bytes(data[:4], "big"),
            rand=int.from_bytes(data[4:], "big"),
        )

    @classmethod
    def from_text(cls, text: str | bytes) -> Id:
        """Build an identifier from its base36 text form."""
        if isinstance(text, (bytes, bytearray)):
            raw = bytes(text)
            text = raw.decode("utf-8", errors="replace")
        else:
            raw = text.encode("utf-8")
        if len(raw) > _MAX_TEXT_LENGTH:
            raise InvalidStringLengthError(len(raw))
        data = base36.decode_to_bytes(text)
        if len(data) > _BINARY_LENGTH:
            raise InvalidByteLengthError(len(data))
        return cls.from_bytes(data)

    @classmethod
    def from_json(cls, data: str | bytes) -> Id:
        """Build an identifier from a JSON string value."""
        decoded = json.loads(data)
        if not isinstance(decoded, str):
            raise ValueError(
                f"cannot read JSON {type(decoded).__name__} as an identifier"
            )
        return cls.from_text(decoded)

    @classmethod
    def scan(cls, src: object) -> Id:
        """Build an identifier from a value read from a database."""
        if src is None:
            raise ScanError("Scan: unable to scan nil into Id-Iota Id")
        if isinstance(src, (bytes, bytearray)):
            if len(src) > _MAX_TEXT_LENGTH:
                raise ScanError(
                    f"Scan: unable to scan bytes of length {len(src)} into Id-Iota Id"
                )
            try:
                return cls.from_text(bytes(src))
            except ValueError as exc:
                raise ScanError(
                    f"Scan: unable to scan while unmarshalling bytes {src!r} into Id-Iota Id"
                ) from exc
        if isinstance(src, str):
            try:
                return cls.from_text(src)
            except ValueError as exc:
                raise ScanError(
                    f"Scan: unable to scan while unmarshalling string {src} into Id-Iota Id"
                ) from exc
        if isinstance(src, int) and not isinstance(src, bool):
            try:
                return cls.from_uint64(src)
            except ValueError as exc:
                raise ScanError(
                    f"Scan: unable to scan while unmarshalling integer {src} into Id-Iota Id"
                ) from exc
        raise ScanError(
            f"Scan: unable to scan type {type(src).__name__} into Id-Iota Id"
        )

    def to_bytes(self) -> bytes:
        """Return the 8-byte big-endian binary form."""
        return self.ts.to_bytes(4, "big") + self.rand.to_bytes(4, "big")

    def to_text(self) -> str:
        """Return the base36 text form."""
        return base36.encode(self.to_uint64())

    def to_json(self) -> str:
        """Return the identifier as a JSON string value."""
        return f'"{self.to_text()}"'

    def to_uint64(self) -> int:
        """Return the 64-bit integer form."""
        return (self.ts << 32) | self.rand

    def time(self) -> datetime:
        """Return the timestamp part as a UTC datetime."""
        return datetime.fromtimestamp(self.ts, tz=timezone.utc)

    def value(self) -> str:
        """Return the value stored in a database column."""
        return self.to_text()

    def __str__(self) -> str:
        return self.to_text()

    def __int__(self) -> int:
        return self.to_uint64()


def new_id(when: datetime | None = None, random: int | None = None) -> Id:
    """Create an identifier for ``when`` (default now) with a random part.

    The timestamp wraps at 32 bits. When ``random`` is not given, the current
    random function supplies it.
    """
    moment = when if when is not None else datetime.now(timezone.utc)
    ts = floor(moment.timestamp()) & _UINT32_MASK
    if random is None:
        rand = _random_source.draw()
    else:
        if not 0 <= random <= _UINT32_MASK:
            raise ValueError(f"random out of unsigned 32-bit range: {random}")
        rand = random
    return Id(ts=ts, rand=rand)