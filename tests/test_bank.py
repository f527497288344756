"""
FSB5 Bank Test Suite

End-to-end tests for opening banks and rebuilding their samples.

Run with: pytest tests/test_bank.py -v
"""

import struct

import pytest
import yaml

from conftest import build_bank, pack_header, pack_descriptor, pack_chunk

import fsb5
from fsb5.Enums import SoundFormat, ChunkType
from fsb5.Errors import (
    BadMagic, Truncated, TruncatedChunk, CorruptOffsets, InvalidChannels,
    CodecNotImplemented, UnsupportedCodec, ContainerTooLarge,
)
from fsb5.YAMLSerializer import dump_manifest


class TestOpenBank:
    """Test opening whole banks"""

    def test_samples_in_order(self, pcm16_bank):
        bank = fsb5.open(pcm16_bank)
        samples = bank.samples()

        assert len(samples) == 2
        assert [s.index for s in samples] == [0, 1]
        assert [s.name() for s in samples] == ['kick', 'snare']
        assert bytes(samples[0].data) == bytes(range(32))
        assert bytes(samples[1].data) == bytes(range(64))

    def test_lengths_cover_data_region(self, pcm16_bank):
        bank = fsb5.open(pcm16_bank)
        total = sum(s.descriptor.data_length for s in bank.samples())
        assert total == bank.header.data_size
        assert bank.raw_size == len(pcm16_bank)

    def test_offsets_non_decreasing(self):
        bank = fsb5.open(build_bank([{'data': b'\x01' * n} for n in (16, 0, 48, 32)]))
        offsets = [s.descriptor.data_offset for s in bank.samples()]
        assert offsets == sorted(offsets)

    def test_no_name_table(self):
        bank = fsb5.open(build_bank([{'data': b'\x00' * 16}]))
        assert bank.samples()[0].name() is None

    def test_version_0_bank(self):
        bank = fsb5.open(build_bank([{'data': b'\x05' * 16}], version=0))
        assert bank.header.size == 64
        assert bytes(bank.samples()[0].data) == b'\x05' * 16

    def test_empty_bank(self):
        bank = fsb5.open(build_bank([]))
        assert bank.samples() == ()
        assert len(bank) == 0

    def test_sample_views_share_buffer(self):
        """Samples are read-only views into the caller's buffer, not copies"""
        raw = bytearray(build_bank([{'data': b'\x07' * 32}]))
        bank = fsb5.open(raw)
        view = bank.samples()[0].data

        assert isinstance(view, memoryview)
        assert view.readonly
        with pytest.raises(BufferError):
            raw.extend(b'\x00')

    def test_bank_is_iterable(self, pcm16_bank):
        bank = fsb5.open(pcm16_bank)
        assert list(bank) == list(bank.samples())

    def test_unknown_chunk_does_not_abort(self):
        data = build_bank([
            {'data': b'\x01' * 16, 'chunks': [(99, b'\xab' * 7)]},
            {'data': b'\x02' * 16},
        ])
        samples = fsb5.open(data).samples()

        assert len(samples) == 2
        unknown = samples[0].descriptor.chunks[0]
        assert unknown.type_id == 99
        assert unknown.size == 7
        assert bytes(samples[1].data) == b'\x02' * 16

    def test_chunk_overrides_apply(self):
        data = build_bank([{
            'data': b'\x00' * 16,
            'frequency_index': 0,
            'chunks': [(ChunkType.FREQUENCY, struct.pack('<I', 12345)), (ChunkType.CHANNELS, b'\x04')],
        }])
        sample = fsb5.open(data).samples()[0]

        assert sample.frequency == 12345
        assert sample.channels == 4


class TestOpenErrors:
    """A failed parse raises one error and returns no bank"""

    def test_bad_magic(self, pcm16_bank):
        with pytest.raises(BadMagic):
            fsb5.open(b'FSB4' + pcm16_bank[4:])

    def test_truncated_descriptor_table(self, pcm16_bank):
        """Cut inside the second sample header"""
        with pytest.raises(Truncated):
            fsb5.open(pcm16_bank[:60 + 12])

    def test_truncated_data_region(self, pcm16_bank):
        with pytest.raises(Truncated):
            fsb5.open(pcm16_bank[:-1])

    def test_descriptors_beyond_declared_table(self):
        """The header's table size bounds the descriptors even if the buffer goes on"""
        header = pack_header(num_samples=2, sample_headers_size=8, data_size=32)
        data = header + pack_descriptor(data_offset=0) + pack_descriptor(data_offset=16) + b'\x00' * 32
        with pytest.raises(Truncated):
            fsb5.open(data)

    def test_truncated_chunk(self):
        table = pack_descriptor(has_chunks=True) + pack_chunk(ChunkType.XMASEEK, b'\x00' * 4, size=64)
        header = pack_header(num_samples=1, sample_headers_size=len(table), data_size=16)
        with pytest.raises(TruncatedChunk):
            fsb5.open(header + table + b'\x00' * 16)

    def test_corrupt_offsets(self):
        table = pack_descriptor(data_offset=32) + pack_descriptor(data_offset=0)
        header = pack_header(num_samples=2, sample_headers_size=len(table), data_size=64)
        with pytest.raises(CorruptOffsets):
            fsb5.open(header + table + b'\x00' * 64)

    def test_zero_channel_chunk(self):
        data = build_bank([{'data': b'\x00' * 16, 'chunks': [(ChunkType.CHANNELS, b'\x00')]}],
                          mode=SoundFormat.PCM16)
        with pytest.raises(InvalidChannels):
            fsb5.open(data)


class TestContainerBytes:
    """Test rebuilding samples through the bank's codec mode"""

    def test_pcm16_stereo_wave(self):
        pcm = bytes(range(160))
        bank = fsb5.open(build_bank([{'data': pcm, 'frequency_index': 8, 'channel_bit': 1}], mode=SoundFormat.PCM16))
        wave = bank.samples()[0].to_container_bytes()

        assert len(wave) == 44 + len(pcm)
        assert struct.unpack_from('<H', wave, 20)[0] == 1
        assert struct.unpack_from('<H', wave, 22)[0] == 2
        assert struct.unpack_from('<I', wave, 24)[0] == 44100
        assert struct.unpack_from('<H', wave, 34)[0] == 16
        assert wave[44:] == pcm
        assert bank.samples()[0].file_extension == 'wav'

    def test_mpeg_identity(self):
        frames = b'\xff\xfb\x92\x64' + bytes(range(60))
        bank = fsb5.open(build_bank([{'data': frames}], mode=SoundFormat.MPEG))
        sample = bank.samples()[0]

        assert sample.to_container_bytes() == frames
        assert sample.file_extension == 'mp3'

    def test_vorbis_not_implemented(self):
        data = build_bank([{'data': b'\x00' * 32, 'chunks': [(ChunkType.VORBIS, struct.pack('<I', 0x1234))]}],
                          mode=SoundFormat.VORBIS)
        sample = fsb5.open(data).samples()[0]

        with pytest.raises(CodecNotImplemented):
            sample.to_container_bytes()
        with pytest.raises(CodecNotImplemented):
            sample.to_container_bytes()

    def test_unsupported_codec(self):
        bank = fsb5.open(build_bank([{'data': b'\x00' * 16}], mode=SoundFormat.GCADPCM))
        with pytest.raises(UnsupportedCodec):
            bank.samples()[0].to_container_bytes()

    def test_frequency_too_large_for_wave(self):
        """The byte rate of a huge frequency override cannot be stored in the WAVE header"""
        data = build_bank([{
            'data': b'\x00' * 16,
            'channel_bit': 1,
            'chunks': [(ChunkType.FREQUENCY, struct.pack('<I', 0x40000000))],
        }], mode=SoundFormat.PCM16)
        sample = fsb5.open(data).samples()[0]

        assert sample.frequency == 0x40000000
        with pytest.raises(ContainerTooLarge) as excinfo:
            sample.to_container_bytes()
        assert excinfo.value.field == 'byte rate'


class TestManifest:
    """Test the YAML description of a bank"""

    def test_to_yaml(self, pcm16_bank):
        manifest = fsb5.open(pcm16_bank).to_yaml()

        assert manifest['header']['mode'] == 'PCM16'
        assert [s['name'] for s in manifest['samples']] == ['kick', 'snare']
        assert manifest['samples'][1]['data length'] == 64

    def test_dump_round_trips_through_yaml(self):
        data = build_bank([{'data': b'\x00' * 16, 'chunks': [(ChunkType.LOOP, struct.pack('<2I', 4, 12))]}])
        text = dump_manifest(fsb5.open(data).to_yaml())

        loaded = yaml.safe_load(text)
        assert loaded['samples'][0]['chunks'][0]['loop'] == [4, 12]
        assert '[4, 12]' in text
