'''
### Enums Module

This module defines enumerations used throughout the project to classify and interpret
constants found in FSB5 sample banks.

Classes:
    `SoundFormat`:
        Enumerates the codec modes a bank header can declare. Every sample in a bank
        shares the header's codec mode.

    `ChunkType`:
        Enumerates the known extended metadata chunk types that may follow a sample header.

Functionality:
    - Provides strongly typed constants for use in parsing, validation, and container rebuilding.
    - Improves readability and reduces the likelihood of errors from magic numbers.

Dependencies:
    `enum`:
        Used for defining enumeration types.

Intended Usage:
    This module should be imported wherever the codec mode or a chunk type needs to be
    identified during binary parsing or container rebuilding.
'''

from enum import IntEnum


class SoundFormat(IntEnum):
  NONE      = 0
  PCM8      = 1
  PCM16     = 2
  PCM24     = 3
  PCM32     = 4
  PCMFLOAT  = 5
  GCADPCM   = 6
  IMAADPCM  = 7
  VAG       = 8
  HEVAG     = 9
  XMA       = 10
  MPEG      = 11
  CELT      = 12
  AT9       = 13
  XWMA      = 14
  VORBIS    = 15


class ChunkType(IntEnum):
  CHANNELS  = 1
  FREQUENCY = 2
  LOOP      = 3
  XMASEEK   = 6
  DSPCOEFF  = 7
  XWMADATA  = 10
  VORBIS    = 11


if __name__ == '__main__':
  pass
