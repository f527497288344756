'''
### Bank Module

This module defines the classes that represent an opened FSB5 sample bank and the samples
it contains.

Classes:
    `Sample`:
        Represents one sample: its decoded header, its optional name, and a read-only view
        of its bytes inside the bank's buffer.

    `Bank`:
        Represents the full content of a bank: its header and its samples, in table order.

Functions:
    `open`:
        Parses a whole bank from an in-memory buffer.

Functionality:
    - Load a bank from binary data (`from_bytes`).
    - Slice each sample's data out of the data region without copying it.
    - Rebuild a sample into a standalone, playable container (`to_container_bytes`).
    - Describe the bank as nested dictionaries (`to_yaml`) for the YAML manifest.

Dependencies:
    `bank.structs`:
        Includes the header, sample header, chunk, and name table decoders.

    `containers`:
        Includes the codec dispatcher and the container builders.

Intended Usage:
    Read a file into memory, pass the bytes to `open`, then write the result of
    `to_container_bytes` for each sample. Nothing in this module performs I/O, and the
    buffer is never modified, so samples may be rebuilt from several threads at once.
'''

import logging

# Import Bank child structures
from .structs.Header import BankHeader
from .structs.SampleHeader import SampleDescriptor, parse_samples
from .structs.NameTable import parse_names

# Import the codec dispatcher
from ..containers.Dispatcher import get_builder, file_extension
from ..Enums import SoundFormat
from ..Errors import Truncated

logger = logging.getLogger(__name__)

class Sample:
  ''' Represents a single sample of an FSB5 bank '''
  def __init__(self, descriptor: SampleDescriptor, data: memoryview, mode: SoundFormat, name: str = None):
    self.descriptor = descriptor
    self.data = data
    self.mode = mode
    self._name = name

  def name(self):
    return self._name

  @property
  def index(self) -> int:
    return self.descriptor.index

  @property
  def frequency(self) -> int:
    return self.descriptor.frequency

  @property
  def channels(self) -> int:
    return self.descriptor.channels

  @property
  def file_extension(self) -> str:
    return file_extension(self.mode)

  def to_container_bytes(self) -> bytes:
    builder = get_builder(self.mode)
    return builder(self.data, self.descriptor.frequency, self.descriptor.channels)

  def to_yaml(self) -> dict:
    entry = {"name": self._name} if self._name is not None else {}
    entry.update(self.descriptor.to_yaml())
    return entry

  def __repr__(self):
    return f"<Sample {self.index} name={self._name!r} {self.frequency}Hz x{self.channels} {len(self.data)} bytes>"

class Bank:
  ''' Represents an FSB5 sample bank '''
  def __init__(self):
    self.header = None
    self.data = memoryview(b'')

    self._samples = ()

  @classmethod
  def from_bytes(cls, data):
    self = cls()
    self.data = memoryview(data).toreadonly()

    self.header = BankHeader.from_bytes(self.data)
    header = self.header

    descriptors = parse_samples(
      self.data,
      header.num_samples,
      header.data_size,
      header.sample_headers_offset,
      header.name_table_offset
    )

    names = parse_names(self.data, header.num_samples, header.name_table_offset, header.name_table_size)

    if header.raw_size > len(self.data):
      raise Truncated('data region', header.raw_size, len(self.data))

    samples = []
    for i, descriptor in enumerate(descriptors):
      start = header.data_offset + descriptor.data_offset
      view = self.data[start:start + descriptor.data_length]
      samples.append(Sample(descriptor, view, header.mode, names[i] if names else None))

    self._samples = tuple(samples)

    logger.debug("Opened FSB5 bank with %d sample(s), mode %s", len(self._samples), header.mode.name)
    return self

  def samples(self) -> tuple:
    return self._samples

  @property
  def raw_size(self) -> int:
    return self.header.raw_size

  def __len__(self):
    return len(self._samples)

  def __iter__(self):
    return iter(self._samples)

  def to_yaml(self) -> dict:
    return {
      "header": self.header.to_yaml(),
      "samples": [sample.to_yaml() for sample in self._samples]
    }

def open(data) -> Bank:
  return Bank.from_bytes(data)

if __name__ == '__main__':
  pass
