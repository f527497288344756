'''
### Wave Module

This module wraps raw PCM sample bytes in a canonical 44-byte RIFF/WAVE header. The sample
bytes are written unchanged after the header.

Functions:
    `build_wave_header`:
        Builds the RIFF, fmt and data chunk headers for a PCM payload.

    `build_wave`:
        Returns the header followed by the PCM bytes.
'''

from typing import Final

from ..Helpers import struct
from ..Errors import ContainerTooLarge

WAVE_FORMAT_PCM: Final = 0x0001
WAVE_HEADER_SIZE: Final = 44
U16_MAX: Final = 0xFFFF
U32_MAX: Final = 0xFFFFFFFF

def build_wave_header(data_size: int, frequency: int, channels: int, bits_per_sample: int) -> bytes:
  block_align = channels * (bits_per_sample // 8)
  byte_rate = frequency * block_align

  # RIFF size covers everything after its own size field
  riff_size = 4 + (8 + 16) + (8 + data_size)

  if block_align > U16_MAX:
    raise ContainerTooLarge('block align', block_align)
  if byte_rate > U32_MAX:
    raise ContainerTooLarge('byte rate', byte_rate)
  if riff_size > U32_MAX:
    raise ContainerTooLarge('RIFF size', riff_size)

  return struct.pack(
    '<4sI4s 4sI2H2I2H 4sI',
    b'RIFF', riff_size, b'WAVE',
    b'fmt ', 16,
    WAVE_FORMAT_PCM,
    channels,
    frequency,
    byte_rate,
    block_align,
    bits_per_sample,
    b'data', data_size
  )

def build_wave(data, frequency: int, channels: int, bits_per_sample: int) -> bytes:
  return build_wave_header(len(data), frequency, channels, bits_per_sample) + bytes(data)

if __name__ == '__main__':
  pass
