"""
Shared fixtures for the FSB5 test suite.

Banks are synthesized in memory so every test states exactly which bytes it parses.
"""

import os
import struct
import sys

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def pack_descriptor(frequency_index=8, channel_bit=0, data_offset=0, num_samples=0, has_chunks=False):
    """Pack a sample header u64; data_offset is in bytes and must be 16-aligned"""
    assert data_offset % 16 == 0
    raw = int(has_chunks)
    raw |= frequency_index << 1
    raw |= channel_bit << 5
    raw |= (data_offset // 16) << 6
    raw |= num_samples << 34
    return struct.pack('<Q', raw)


def pack_chunk(chunk_type, payload, more=False, size=None):
    """Pack a chunk header followed by its payload; size overrides the declared size"""
    size = len(payload) if size is None else size
    raw = int(more) | (size << 1) | (chunk_type << 25)
    return struct.pack('<I', raw) + payload


def pack_header(version=1, num_samples=0, sample_headers_size=0, name_table_size=0,
                data_size=0, mode=2, magic=b'FSB5'):
    header = struct.pack('<4s6I', magic, version, num_samples, sample_headers_size,
                         name_table_size, data_size, mode)
    header += bytes(8) + bytes(range(16)) + bytes(8)
    if version == 0:
        header += struct.pack('<I', 0)
    return header


def pack_name_table(names):
    offsets = b''
    strings = b''
    base = 4 * len(names)
    for name in names:
        offsets += struct.pack('<I', base + len(strings))
        strings += name.encode('utf-8') + b'\x00'
    return offsets + strings


def build_bank(samples, mode=2, version=1, names=None):
    """
    Build a complete FSB5 bank.

    Each sample is a dict with `data` (bytes) and optionally `frequency_index`,
    `channel_bit`, `num_samples` and `chunks` (list of (type, payload) tuples).
    Sample data is padded to 16 bytes so the stored offsets stay aligned.
    """
    headers = b''
    data = b''
    for sample in samples:
        chunks = sample.get('chunks', [])
        headers += pack_descriptor(
            frequency_index=sample.get('frequency_index', 8),
            channel_bit=sample.get('channel_bit', 0),
            data_offset=len(data),
            num_samples=sample.get('num_samples', 0),
            has_chunks=bool(chunks),
        )
        for i, (chunk_type, payload) in enumerate(chunks):
            headers += pack_chunk(chunk_type, payload, more=i < len(chunks) - 1)

        data += sample['data']
        data += b'\x00' * ((-len(data)) % 16)

    name_table = pack_name_table(names) if names is not None else b''

    header = pack_header(
        version=version,
        num_samples=len(samples),
        sample_headers_size=len(headers),
        name_table_size=len(name_table),
        data_size=len(data),
        mode=mode,
    )
    return header + headers + name_table + data


@pytest.fixture
def pcm16_bank():
    """Two stereo 44.1kHz PCM16 samples of 32 and 64 bytes, with names"""
    return build_bank(
        [
            {'data': bytes(range(32)), 'channel_bit': 1, 'num_samples': 8},
            {'data': bytes(range(64)), 'channel_bit': 1, 'num_samples': 16},
        ],
        mode=2,
        names=['kick', 'snare'],
    )
