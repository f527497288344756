'''
### SampleHeader Module

This module defines the `SampleDescriptor` class, which represents the packed header of an
individual sample in an FSB5 bank, together with the chain of extended chunks that may
follow it.

Classes:
    `SampleDescriptor`:
        Represents a single sample header.

Functions:
    `parse_samples`:
        Parses the whole sample header table and derives each sample's data length.

Functionality:
    - Parse a sample header and its chunk chain from a binary format ('from_bytes').
    - Apply frequency and channel override chunks to the decoded bit-fields.
    - Validate that data offsets never decrease and stay inside the data region.
    - Convert the descriptor into a dictionary format ('to_yaml') for the YAML manifest.

Dependencies:
    `Helpers`:
        For bounds-checked reads and bit-field extraction.

    `Chunk`:
        For decoding the extended chunk payloads.
'''

import logging

# Import child structures
from .Chunk import ChannelOverride, FrequencyOverride, read_chunk, chunk_to_yaml

# Import helper functions
from ...Helpers import bits, read_u32, read_u64, DATA_ALIGNMENT, FREQUENCIES

from ...Errors import TruncatedChunk, CorruptOffsets, InvalidFrequency, InvalidChannels

logger = logging.getLogger(__name__)

class SampleDescriptor: # struct size = 0x08 + chunks
  ''' Represents a sample header in an FSB5 bank '''
  def __init__(self):
    self.index = -1

    # Bitfield
    self.bits = 0

    # Unpacked bitfield
    self.has_chunks      = 0
    self.frequency_index = 0
    self.channel_bit     = 0
    self.data_offset     = 0
    self.num_samples     = 0

    self.frequency   = 0
    self.channels    = 1
    self.data_length = 0

    # Extended chunks, in file order
    self.chunks = []

    # Bytes consumed from the sample header table
    self.struct_size = 0

  @classmethod
  def from_bytes(cls, index: int, offset: int, data, limit: int):
    self = cls()
    self.index = index

    self.bits = read_u64(data, offset, limit, f'sample header {index}')
    position = offset + 0x08

    self.has_chunks      = bits(self.bits, 0, 1)
    self.frequency_index = bits(self.bits, 1, 4)
    self.channel_bit     = bits(self.bits, 5, 1)
    self.data_offset     = bits(self.bits, 6, 28) * DATA_ALIGNMENT
    self.num_samples     = bits(self.bits, 34, 30)

    self.channels = self.channel_bit + 1

    next_chunk = self.has_chunks
    while next_chunk:
      raw = read_u32(data, position, limit, f'sample {index} chunk header')
      position += 0x04

      next_chunk = bits(raw, 0, 1)
      chunk_size = bits(raw, 1, 24)
      chunk_type = bits(raw, 25, 7)

      if position + chunk_size > limit:
        raise TruncatedChunk(index, chunk_type, chunk_size, limit - position)

      self.chunks.append(read_chunk(data, position, chunk_size, chunk_type, index))
      position += chunk_size

    frequency_override = self.find_chunk(FrequencyOverride)
    if frequency_override is not None:
      if frequency_override.frequency == 0:
        raise InvalidFrequency(index, self.frequency_index, frequency_override.frequency)
      self.frequency = frequency_override.frequency
    elif self.frequency_index in FREQUENCIES:
      self.frequency = FREQUENCIES[self.frequency_index]
    else:
      raise InvalidFrequency(index, self.frequency_index)

    channel_override = self.find_chunk(ChannelOverride)
    if channel_override is not None:
      if channel_override.channels == 0:
        raise InvalidChannels(index, channel_override.channels)
      self.channels = channel_override.channels

    self.struct_size = position - offset
    return self

  def find_chunk(self, chunk_class):
    ''' Returns the last chunk of the given class, or None '''
    found = None
    for chunk in self.chunks:
      if isinstance(chunk, chunk_class):
        found = chunk
    return found

  @property
  def end_offset(self) -> int:
    return self.data_offset + self.data_length

  def to_yaml(self) -> dict:
    return {
      "index": self.index,
      "bitfield": {
        "frequency index": self.frequency_index,
        "channel bit": self.channel_bit,
        "data offset": self.data_offset,
        "samples": self.num_samples
      },
      "frequency": self.frequency,
      "channels": self.channels,
      "data length": self.data_length,
      "chunks": [chunk_to_yaml(chunk) for chunk in self.chunks]
    }

def parse_samples(data, count: int, data_size: int, offset: int = 0, limit: int = None) -> list:
  ''' Parses `count` sample headers starting at `offset`, reading no further than `limit`.
  The last sample runs to the end of the `data_size` byte data region. '''
  limit = len(data) if limit is None else min(limit, len(data))

  descriptors = []
  position = offset
  for i in range(count):
    descriptor = SampleDescriptor.from_bytes(i, position, data, limit)
    position += descriptor.struct_size
    descriptors.append(descriptor)

  # Lengths are not stored, they are the gaps between consecutive offsets
  for current, following in zip(descriptors, descriptors[1:]):
    if following.data_offset < current.data_offset:
      raise CorruptOffsets(following.index, following.data_offset, current.data_offset)
    current.data_length = following.data_offset - current.data_offset

  if descriptors:
    last = descriptors[-1]
    if last.data_offset > data_size:
      raise CorruptOffsets(last.index, last.data_offset, data_size)
    last.data_length = data_size - last.data_offset

  logger.debug("Parsed %d sample header(s) from %d byte(s)", len(descriptors), position - offset)
  return descriptors

if __name__ == '__main__':
  pass
