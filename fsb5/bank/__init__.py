'''
### Bank Package

This package defines the classes for representing and parsing a full FSB5 sample bank.

Modules:
    `Bank`:
        Core classes representing an opened bank (`Bank`) and its samples (`Sample`).

    `structs.Header`:
        Defines the `BankHeader` class, representing the fixed-size bank header.

    `structs.SampleHeader`:
        Defines the `SampleDescriptor` class, representing a packed sample header.

    `structs.Chunk`:
        Defines the extended metadata chunk variants chained after a sample header.

    `structs.NameTable`:
        Decodes the optional sample name table.
'''
