'''
### FSB5 Package

This package parses FSB5 ("FMOD Sample Bank" version 5) files and rebuilds each embedded
sample into a standalone, playable file.

Modules:
    `Enums`:
        Defines the codec mode and chunk type enumerations.

    `Errors`:
        Defines the `FormatError` and `CodecError` exception families.

    `Helpers`:
        Provides bounds-checked little-endian reads and bit-field extraction.

    `YAMLSerializer`:
        Provides YAML helpers for writing bank manifests.

    `bank.Bank`:
        Core classes representing an opened bank and its samples.

    `bank.structs.Header`:
        Defines the `BankHeader` class and the header parser.

    `bank.structs.SampleHeader`:
        Defines the `SampleDescriptor` class and the sample header table parser.

    `bank.structs.Chunk`:
        Defines the extended metadata chunk variants.

    `bank.structs.NameTable`:
        Decodes the optional sample name table.

    `containers.Dispatcher`:
        Maps a codec mode to its container builder.

    `containers.Wave`:
        Wraps raw PCM bytes in a RIFF/WAVE header.

    `containers.Mpeg`:
        Passes MPEG frames through unchanged.

Functionality:
    - Open a bank from an in-memory buffer (`open`).
    - List its samples with their names, frequencies, channel counts, and metadata chunks.
    - Rebuild PCM samples as WAVE files and MPEG samples as MP3 streams.

Dependencies:
    `struct`:
        For byte-level unpacking and packing.

    `yaml`:
        For writing bank manifests.

Intended Usage:
    The package performs no file I/O. Callers read a bank into memory, call `open`, and
    write the bytes returned by each sample's `to_container_bytes`.
'''

from .bank.Bank import Bank, Sample, open
from .Enums import SoundFormat, ChunkType
from .Errors import *
