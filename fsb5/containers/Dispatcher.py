'''
### Dispatcher Module

This module maps a bank's codec mode to the function that rebuilds a sample of that codec
into a standalone container. Every builder takes `(data, frequency, channels)` and returns
the container bytes.

Functions:
    `get_builder`:
        Returns the builder registered for a codec mode.

    `file_extension`:
        Returns the file extension of the containers produced for a codec mode.

Constants:
    `CONTAINER_BUILDERS`:
        Codec mode to builder registry.
'''

from functools import partial

from .Wave import build_wave
from .Mpeg import build_mpeg

from ..Enums import SoundFormat
from ..Errors import UnsupportedCodec, CodecNotImplemented

CONTAINER_BUILDERS: dict = {
  SoundFormat.PCM8:  partial(build_wave, bits_per_sample=8),
  SoundFormat.PCM16: partial(build_wave, bits_per_sample=16),
  SoundFormat.PCM24: partial(build_wave, bits_per_sample=24),
  SoundFormat.PCM32: partial(build_wave, bits_per_sample=32),
  SoundFormat.MPEG:  build_mpeg,
}

# Recognized, but rebuilding needs the Vorbis setup header table keyed by the chunk CRC32
NOT_IMPLEMENTED: frozenset = frozenset({SoundFormat.VORBIS})

FILE_EXTENSIONS: dict = {
  SoundFormat.PCM8:   'wav',
  SoundFormat.PCM16:  'wav',
  SoundFormat.PCM24:  'wav',
  SoundFormat.PCM32:  'wav',
  SoundFormat.MPEG:   'mp3',
  SoundFormat.VORBIS: 'ogg',
}

def get_builder(mode: SoundFormat):
  if mode in NOT_IMPLEMENTED:
    raise CodecNotImplemented(mode)

  builder = CONTAINER_BUILDERS.get(mode)
  if builder is None:
    raise UnsupportedCodec(mode)

  return builder

def file_extension(mode: SoundFormat) -> str:
  return FILE_EXTENSIONS.get(mode, 'bin')

if __name__ == '__main__':
  pass
