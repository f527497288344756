'''
### Containers Package

This package rebuilds a sample's raw bytes into a standalone container for its codec.

Modules:
    `Dispatcher`:
        Maps a bank's codec mode to a builder, or raises a `CodecError`.

    `Wave`:
        Synthesizes a RIFF/WAVE header around raw PCM bytes.

    `Mpeg`:
        Returns MPEG frames unchanged.
'''
