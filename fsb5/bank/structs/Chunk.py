'''
### Chunk Module

This module defines the extended metadata chunks that may be chained after a sample header
in an FSB5 bank. Each chunk is a tagged variant: the chunk type selects how its payload is
decoded.

Classes:
    `ChannelOverride`, `FrequencyOverride`, `LoopInfo`:
        Chunks that carry sample properties which do not fit in the packed sample header.

    `SeekTable`, `DspCoefficients`, `XwmaData`:
        Codec-specific chunks kept as opaque payloads.

    `VorbisSetup`:
        The CRC32 of the Vorbis setup header the sample was encoded with, plus the
        remaining payload kept opaque.

    `UnknownChunk`:
        Any chunk type not listed above, kept as its raw payload.

Functions:
    `read_chunk`:
        Decodes one chunk payload into its variant.

Dependencies:
    `struct`:
        For byte-level unpacking.

    `Enums`:
        `ChunkType`:
            Enum defining the known chunk types.
'''

import logging
from dataclasses import dataclass

# Import helper functions
from ...Helpers import struct

from ...Enums import ChunkType
from ...Errors import TruncatedChunk
from ...YAMLSerializer import FlowStyleList

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class ChannelOverride:
  size: int
  channels: int
  chunk_type = ChunkType.CHANNELS

@dataclass(frozen=True)
class FrequencyOverride:
  size: int
  frequency: int
  chunk_type = ChunkType.FREQUENCY

@dataclass(frozen=True)
class LoopInfo:
  size: int
  start: int
  end: int
  chunk_type = ChunkType.LOOP

@dataclass(frozen=True)
class SeekTable:
  size: int
  data: bytes
  chunk_type = ChunkType.XMASEEK

@dataclass(frozen=True)
class DspCoefficients:
  size: int
  data: bytes
  chunk_type = ChunkType.DSPCOEFF

@dataclass(frozen=True)
class XwmaData:
  size: int
  data: bytes
  chunk_type = ChunkType.XWMADATA

@dataclass(frozen=True)
class VorbisSetup:
  size: int
  crc32: int
  data: bytes
  chunk_type = ChunkType.VORBIS

@dataclass(frozen=True)
class UnknownChunk:
  size: int
  type_id: int
  data: bytes

  @property
  def chunk_type(self) -> int:
    return self.type_id

# Payload size each fixed-layout chunk needs at least
_MINIMUM_SIZES = {
  ChunkType.CHANNELS: 1,
  ChunkType.FREQUENCY: 4,
  ChunkType.LOOP: 8,
  ChunkType.VORBIS: 4,
}

_OPAQUE_CHUNKS = {
  ChunkType.XMASEEK: SeekTable,
  ChunkType.DSPCOEFF: DspCoefficients,
  ChunkType.XWMADATA: XwmaData,
}

def read_chunk(data, offset: int, size: int, chunk_type: int, sample_index: int = -1):
  ''' Decodes the payload at `offset`; the caller has already checked it fits '''
  minimum = _MINIMUM_SIZES.get(chunk_type, 0)
  if size < minimum:
    raise TruncatedChunk(sample_index, chunk_type, minimum, size)

  payload = bytes(data[offset:offset + size])

  if chunk_type == ChunkType.CHANNELS:
    return ChannelOverride(size, payload[0])

  if chunk_type == ChunkType.FREQUENCY:
    return FrequencyOverride(size, struct.unpack_from('<I', payload)[0])

  if chunk_type == ChunkType.LOOP:
    start, end = struct.unpack_from('<2I', payload)
    return LoopInfo(size, start, end)

  if chunk_type in _OPAQUE_CHUNKS:
    return _OPAQUE_CHUNKS[chunk_type](size, payload)

  if chunk_type == ChunkType.VORBIS:
    crc32 = struct.unpack_from('<I', payload)[0]
    return VorbisSetup(size, crc32, payload[4:])

  logger.debug("Sample %d: keeping unknown chunk type %d (%d bytes)", sample_index, chunk_type, size)
  return UnknownChunk(size, chunk_type, payload)

def chunk_to_yaml(chunk) -> dict:
  entry = {"type": getattr(chunk.chunk_type, 'name', chunk.chunk_type), "size": chunk.size}

  if isinstance(chunk, ChannelOverride):
    entry["channels"] = chunk.channels
  elif isinstance(chunk, FrequencyOverride):
    entry["frequency"] = chunk.frequency
  elif isinstance(chunk, LoopInfo):
    entry["loop"] = FlowStyleList([chunk.start, chunk.end])
  elif isinstance(chunk, VorbisSetup):
    entry["crc32"] = f"{chunk.crc32:08x}"

  return entry

if __name__ == '__main__':
  pass
