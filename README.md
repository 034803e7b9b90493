# idiota

Compact 64-bit identifiers. Each `Id` holds a 32-bit UNIX timestamp in
seconds in its upper half and a 32-bit random number in its lower half. Its
text form is the lower-case base36 encoding of that 64-bit value. For any id
created today, that is 13 characters. Because the timestamp is the upper
half, the integer forms of ids order by creation second.

The library has no dependencies beyond the standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Creating ids

```python
from datetime import datetime, timezone
from idiota.id import Id, new_id

ident = new_id()                    # current time, random lower half
print(str(ident))                   # 13 base36 characters

fixed = new_id(datetime(2024, 1, 1, tzinfo=timezone.utc), 123456789)
print(fixed.time())                 # 2024-01-01 00:00:00+00:00
print(int(fixed) & 0xFFFFFFFF)      # 123456789
```

`new_id(when=None, random=None)` behaves as follows:

- It takes the timestamp from `when`, or from the current time if `when` is
  not given.
- The seconds are rounded down and wrap at 32 bits.
- A naive `datetime` is read as local time, as `datetime.timestamp()` does.
- A `random` value outside the unsigned 32-bit range raises `ValueError`.

`Id(ts, rand)` can also be built directly. It is a frozen, hashable
dataclass and checks that both parts fit in 32 bits.

### Random parts

If `random` is not given, the random part comes from a replaceable source.
By default that source is `random.getrandbits(32)`.

`set_random_func(func)` installs any zero-argument callable that returns an
integer. The result is masked to 32 bits. The function returns the callable
it replaced and raises `TypeError` for anything that is not callable. This is
handy for deterministic tests:

```python
from idiota.id import new_id, set_random_func

previous = set_random_func(lambda: 42)
try:
    assert int(new_id()) & 0xFFFFFFFF == 42
finally:
    set_random_func(previous)
```

## Converting

| Form    | Out                                | In                     |
|---------|------------------------------------|------------------------|
| text    | `ident.to_text()` / `str(ident)`   | `Id.from_text(text)`   |
| 8 bytes | `ident.to_bytes()`                 | `Id.from_bytes(data)`  |
| JSON    | `ident.to_json()`                  | `Id.from_json(data)`   |
| integer | `ident.to_uint64()` / `int(ident)` | `Id.from_uint64(n)`    |

### Binary form

The binary form is big-endian: four bytes of timestamp, then four bytes of
random part.

`Id.from_bytes` pads input shorter than eight bytes with zeros on the right.
Longer input raises `InvalidByteLengthError`.

### Text form

`Id.from_text` accepts `str` or `bytes` and is case-insensitive. It raises
errors in these cases:

- Text longer than 13 bytes (UTF-8) raises `InvalidStringLengthError`.
- Text that decodes to more than eight bytes raises `InvalidByteLengthError`.

Text holding a character outside `0-9a-z` decodes to the all-zero id.

Text is decoded with `base36.decode_to_bytes`, so each leading `0` becomes
a leading zero byte. The text produced by `to_text` reads back to the same
id whenever it is 13 characters long, as it is for any current timestamp.

### JSON form

`to_json` returns a quoted JSON string. `Id.from_json` raises `ValueError`
in two cases:

- The JSON is not valid (`json.JSONDecodeError`).
- The JSON value is not a string.

### Integer form

`Id.from_uint64` raises `ValueError` outside the unsigned 64-bit range.

All error classes (`InvalidStringLengthError`, `InvalidByteLengthError`,
`ScanError`) are subclasses of `ValueError`.

## Database values

`ident.value()` returns the text form for storing in a column.

`Id.scan(src)` reads a value back from a `str`, from `bytes`/`bytearray` of
at most 13 bytes, or from a non-negative integer below 2**64. It raises
`ScanError` for `None`, for `bool` or any other type, and for values that do
not decode.

These are plain methods; the package does not register itself with any
database driver or ORM.

## Base36 helpers

`idiota.base36` exposes the encoding used above.

### 64-bit integers

`encode(value)` returns the lower-case base36 form of an unsigned 64-bit
integer. It raises `ValueError` outside that range.

`decode(s)` reads upper or lower case. It has these edge cases:

- Strings longer than 13 characters are cut to their first 12.
- Characters outside the alphabet count as zero.
- The result wraps at 64 bits.

### Byte strings

`encode_bytes(b)` returns a `str` and `encode_bytes_as_bytes(b)` returns
ASCII `bytes`. Each leading zero byte becomes a leading `0` digit.

`decode_to_bytes(s)` reverses this, turning each leading `0` into a zero
byte. It returns `b""` if the string holds any character outside the
alphabet.

```python
from idiota import base36

base36.encode(35)                         # "z"
base36.decode("Z")                        # 35
base36.encode_bytes(b"\x00\x01")          # "01"
base36.decode_to_bytes("01")              # b"\x00\x01"
```