'''
### Structs Package

This package provides the decoders for the fundamental structures of an FSB5 bank.

Modules:
    `Header`:
        Defines the `BankHeader` class, with the magic, version and size validation.

    `SampleHeader`:
        Defines the `SampleDescriptor` class, decoded from a bit-packed u64 and its chunk chain.

    `Chunk`:
        Defines the tagged chunk variants, unknown types included.

    `NameTable`:
        Decodes the NUL-terminated sample names.

Dependencies:
    `struct`:
        For byte-level unpacking.

    `Helpers`:
        For bounds-checked reads and bit-field extraction.
'''
