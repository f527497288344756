'''
### Header Module

This module defines the `BankHeader` class, which represents the fixed-size header at the
start of every FSB5 sample bank.

Classes:
    `BankHeader`:
        Represents the bank header.

Functions:
    `parse_header`:
        Parses and validates a bank header from the start of a buffer.

Functionality:
    - Parse the header from a binary format ('from_bytes').
    - Validate the magic, the version, and that the buffer holds the whole header.
    - Convert the header into a dictionary format ('to_yaml') for the YAML manifest.

Dependencies:
    `struct`:
        For byte-level unpacking.

    `Enums`:
        `SoundFormat`:
            Enum defining the codec mode of the bank.

Intended Usage:
    This module is the first step of opening a bank. The header's sizes locate the
    sample header table, the name table, and the data region that follow it.
'''

import logging
from typing import Final

# Import helper functions
from ...Helpers import struct

# Import the codec mode enum
from ...Enums import SoundFormat
from ...Errors import BadMagic, UnsupportedVersion, Truncated, UnsupportedCodec

logger = logging.getLogger(__name__)

FSB5_MAGIC: Final = b'FSB5'

# Version 0 headers carry an extra u32 after the dummy field
HEADER_SIZES: Final[dict[int, int]] = {
  0: 0x40,
  1: 0x3C,
}

class BankHeader: # struct size = 0x3C or 0x40
  ''' Represents the header of an FSB5 bank '''
  def __init__(self):
    self.magic   = FSB5_MAGIC
    self.version = 1

    self.num_samples         = 0
    self.sample_headers_size = 0
    self.name_table_size     = 0
    self.data_size           = 0
    self.mode                = SoundFormat.NONE

    # Reserved fields, not needed for extraction
    self.zero    = bytes(8)
    self.hash    = bytes(16)
    self.dummy   = bytes(8)
    self.unknown = 0

    self.size = HEADER_SIZES[1]

  @classmethod
  def from_bytes(cls, data):
    self = cls()

    if len(data) < 4 or bytes(data[0:4]) != FSB5_MAGIC:
      raise BadMagic(bytes(data[0:4]))

    if len(data) < 8:
      raise Truncated('bank header', 8, len(data))

    self.version = struct.unpack_from('<I', data, 4)[0]
    if self.version not in HEADER_SIZES:
      raise UnsupportedVersion(self.version)

    self.size = HEADER_SIZES[self.version]
    if len(data) < self.size:
      raise Truncated('bank header', self.size, len(data))

    (
      self.magic,
      self.version,
      self.num_samples,
      self.sample_headers_size,
      self.name_table_size,
      self.data_size,
      mode,
      self.zero,
      self.hash,
      self.dummy
    ) = struct.unpack_from('<4s6I8s16s8s', data, 0)

    if self.version == 0:
      self.unknown = struct.unpack_from('<I', data, 0x3C)[0]

    try:
      self.mode = SoundFormat(mode)
    except ValueError:
      raise UnsupportedCodec(mode) from None

    logger.debug(
      "FSB5 header: version=%d samples=%d headers=%d names=%d data=%d mode=%s",
      self.version, self.num_samples, self.sample_headers_size,
      self.name_table_size, self.data_size, self.mode.name
    )

    return self

  @property
  def sample_headers_offset(self) -> int:
    return self.size

  @property
  def name_table_offset(self) -> int:
    return self.size + self.sample_headers_size

  @property
  def data_offset(self) -> int:
    return self.size + self.sample_headers_size + self.name_table_size

  @property
  def raw_size(self) -> int:
    return self.data_offset + self.data_size

  def to_yaml(self) -> dict:
    return {
      "version": self.version,
      "mode": self.mode.name,
      "sample count": self.num_samples,
      "sample headers size": self.sample_headers_size,
      "name table size": self.name_table_size,
      "data size": self.data_size,
      "hash": self.hash.hex()
    }

def parse_header(data) -> BankHeader:
  return BankHeader.from_bytes(data)

if __name__ == '__main__':
  pass
