'''
### NameTable Module

This module decodes the optional sample name table of an FSB5 bank. The table starts with one
u32 offset per sample, relative to the start of the table, each pointing at a NUL-terminated
UTF-8 name.

Functions:
    `parse_names`:
        Returns the sample names in sample order, or None when the bank has no name table.
'''

from ...Helpers import read_u32, read_cstring
from ...Errors import Truncated, InvalidName

def parse_names(data, count: int, offset: int, size: int):
  if size == 0:
    return None

  end = offset + size
  if end > len(data):
    raise Truncated('name table', end, len(data))

  names = []
  for i in range(count):
    name_offset = read_u32(data, offset + (4 * i), end, 'name table offsets')
    if name_offset >= size:
      raise Truncated(f'name table entry {i}', offset + name_offset + 1, end)

    raw = read_cstring(data, offset + name_offset, end, f'name table entry {i}')
    try:
      names.append(raw.decode('utf-8'))
    except UnicodeDecodeError:
      raise InvalidName(i) from None

  return names

if __name__ == '__main__':
  pass
