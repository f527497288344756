'''
### Helpers Module

This module provides low-level utility functions for reading the bit-packed, little-endian
fields of an FSB5 bank, commonly used throughout the parsing process.

Functions:
    `bits`:
        Extracts a bit-field from an integer.

    `read_u32` / `read_u64`:
        Read a little-endian unsigned integer, raising `Truncated` if it runs past a limit.

    `read_cstring`:
        Reads a NUL-terminated byte string, raising `Truncated` if no terminator is found
        before a limit.

Constants:
    `DATA_ALIGNMENT`:
        Multiplier applied to the stored sample data offsets.

    `FREQUENCIES`:
        Maps the 4-bit frequency index of a sample header to a sample rate in Hz.

Dependencies:
    `struct`:
        Imported and exposed for byte-level unpacking operations needed by other modules.

Intended Usage:
    This module is intended to be imported whenever a field of the bank needs to be read,
    ensuring every read is bounds-checked the same way.
'''

# Import struct as it is used by /bank
import struct as _struct
from typing import Final

from .Errors import Truncated

DATA_ALIGNMENT: Final = 16

FREQUENCIES: Final[dict[int, int]] = {
  1: 8000,
  2: 11000,
  3: 11025,
  4: 16000,
  5: 22050,
  6: 24000,
  7: 32000,
  8: 44100,
  9: 48000,
}

''' Helper Functions '''
def bits(value: int, start: int, length: int) -> int:
  return (value >> start) & ((1 << length) - 1)

def read_u32(data, offset: int, limit: int = None, what: str = 'field') -> int:
  limit = len(data) if limit is None else limit
  if offset + 4 > limit:
    raise Truncated(what, offset + 4, limit)
  return _struct.unpack_from('<I', data, offset)[0]

def read_u64(data, offset: int, limit: int = None, what: str = 'field') -> int:
  limit = len(data) if limit is None else limit
  if offset + 8 > limit:
    raise Truncated(what, offset + 8, limit)
  return _struct.unpack_from('<Q', data, offset)[0]

def read_cstring(data, offset: int, limit: int, what: str = 'string') -> bytes:
  # memoryview has no find(), so walk the bytes
  end = offset
  while end < limit:
    if data[end] == 0:
      return bytes(data[offset:end])
    end += 1
  raise Truncated(what, limit + 1, limit)

# Expose struct
struct = _struct

if __name__ == '__main__':
  pass
