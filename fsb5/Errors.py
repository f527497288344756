'''
### Errors Module

This module defines the exceptions raised while opening an FSB5 bank or rebuilding
one of its samples into a standalone container.

Classes:
    `FSB5Error`:
        Base class for every error raised by the package.

    `FormatError`:
        The bank's binary data is malformed. Raised while parsing; no bank is returned.

    `CodecError`:
        A sample's codec mode cannot be rebuilt into a standalone container.

Intended Usage:
    Callers catch `FSB5Error` to handle any failure, or `FormatError` and `CodecError`
    separately to tell a broken file apart from an unsupported codec.
'''


class FSB5Error(Exception):
  ''' Base class for all FSB5 errors '''


''' Format Errors '''
class FormatError(FSB5Error):
  ''' The bank's binary data is malformed '''


class BadMagic(FormatError):
  def __init__(self, magic: bytes):
    self.magic = bytes(magic)
    super().__init__(f"Expected magic header b'FSB5' but got {self.magic!r}")


class UnsupportedVersion(FormatError):
  def __init__(self, version: int):
    self.version = version
    super().__init__(f"Unsupported FSB5 header version {version}")


class Truncated(FormatError):
  def __init__(self, what: str, needed: int, available: int):
    self.what = what
    self.needed = needed
    self.available = available
    super().__init__(f"Truncated {what}: needed {needed} byte(s) but only {available} available")


class TruncatedChunk(FormatError):
  def __init__(self, sample_index: int, chunk_type: int, size: int, available: int):
    self.sample_index = sample_index
    self.chunk_type = chunk_type
    self.size = size
    self.available = available
    super().__init__(
      f"Sample {sample_index}: chunk of type {chunk_type} needs {size} byte(s) "
      f"but only {available} are available"
    )


class CorruptOffsets(FormatError):
  def __init__(self, sample_index: int, offset: int, limit: int):
    self.sample_index = sample_index
    self.offset = offset
    self.limit = limit
    super().__init__(f"Sample {sample_index}: data offset {offset:#x} is out of order (limit {limit:#x})")


class InvalidFrequency(FormatError):
  def __init__(self, sample_index: int, frequency_index: int, frequency: int = None):
    self.sample_index = sample_index
    self.frequency_index = frequency_index
    self.frequency = frequency
    if frequency is None:
      message = (
        f"Sample {sample_index}: frequency index {frequency_index} is not valid "
        f"and no frequency chunk was provided"
      )
    else:
      message = f"Sample {sample_index}: frequency chunk declares an invalid frequency of {frequency} Hz"
    super().__init__(message)


class InvalidChannels(FormatError):
  def __init__(self, sample_index: int, channels: int):
    self.sample_index = sample_index
    self.channels = channels
    super().__init__(f"Sample {sample_index}: channel chunk declares {channels} channel(s)")


class InvalidName(FormatError):
  def __init__(self, sample_index: int):
    self.sample_index = sample_index
    super().__init__(f"Sample {sample_index}: name table entry is not valid UTF-8")


''' Codec Errors '''
class CodecError(FSB5Error):
  ''' The sample's codec cannot be rebuilt into a standalone container '''


class UnsupportedCodec(CodecError):
  def __init__(self, mode):
    self.mode = mode
    name = getattr(mode, 'name', str(mode))
    super().__init__(f"Rebuilding samples of codec mode {name} is not supported")


class CodecNotImplemented(CodecError):
  def __init__(self, mode):
    self.mode = mode
    name = getattr(mode, 'name', str(mode))
    super().__init__(f"Rebuilding samples of codec mode {name} is not implemented yet")


class ContainerTooLarge(CodecError):
  def __init__(self, field: str, value: int):
    self.field = field
    self.value = value
    super().__init__(f"Container {field} of {value} does not fit in a 32-bit field")


if __name__ == '__main__':
  pass
