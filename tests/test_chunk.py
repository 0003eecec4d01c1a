import struct

import pytest

from pngme.chunk import Chunk
from pngme.chunk_type import ChunkType
from pngme.exceptions import InvalidChunkLength, InvalidCrc, InvalidUtf8, UnexpectedEof
from pngme.streams import Stream


MESSAGE = b'This is where your secret message will be!'
MESSAGE_CRC = 2882656334


def chunk_data(length=len(MESSAGE), chunk_type=b'RuSt', data=MESSAGE, crc=MESSAGE_CRC):
    return struct.pack('>I', length) + chunk_type + data + struct.pack('>I', crc)


def test_new_chunk():
    chunk = Chunk.new(ChunkType.from_str('RuSt'), MESSAGE)

    assert chunk.length() == 42
    assert chunk.crc() == MESSAGE_CRC
    assert chunk.size == 42 + 12


def test_chunk_from_bytes():
    chunk = Chunk.from_bytes(chunk_data())

    assert chunk.length() == 42
    assert chunk.chunk_type() == ChunkType.from_str('RuSt')
    assert chunk.data() == MESSAGE
    assert chunk.data_as_text() == MESSAGE.decode()
    assert chunk.crc() == MESSAGE_CRC


def test_chunk_as_bytes():
    raw = chunk_data()

    assert Chunk.new(ChunkType.from_str('RuSt'), MESSAGE).as_bytes() == raw
    assert Chunk.from_bytes(raw).as_bytes() == raw


def test_chunk_roundtrip():
    chunk = Chunk.new(ChunkType.from_str('ruSt'), b'\x00\xff' * 100)

    assert Chunk.from_bytes(chunk.as_bytes()) == chunk


def test_chunk_empty_data():
    chunk = Chunk.new(ChunkType.from_str('IEND'), b'')

    assert chunk.length() == 0
    assert chunk.as_bytes() == b'\x00\x00\x00\x00IEND\xaeB`\x82'


def test_chunk_invalid_crc():
    with pytest.raises(InvalidCrc) as excinfo:
        Chunk.from_bytes(chunk_data(crc=MESSAGE_CRC - 1))

    assert excinfo.value.expected == MESSAGE_CRC - 1
    assert excinfo.value.actual == MESSAGE_CRC


def test_chunk_corrupted_data():
    """Any byte changed into the data must be detected."""
    raw = chunk_data()

    for idx in range(8, 8 + len(MESSAGE)):
        corrupted = bytearray(raw)
        corrupted[idx] ^= 0x01

        with pytest.raises(InvalidCrc):
            Chunk.from_bytes(bytes(corrupted))


def test_chunk_length_too_big():
    with pytest.raises(InvalidChunkLength):
        Chunk.from_bytes(chunk_data(length=100))


def test_chunk_truncated_header():
    with pytest.raises(UnexpectedEof):
        Chunk.from_bytes(b'\x00\x00\x00')


def test_chunk_type_not_checked_when_parsing():
    """A type with the reserved bit set is still a chunk."""
    chunk = Chunk.new(ChunkType.from_bytes(b'Rust'), b'data')

    parsed = Chunk.from_bytes(chunk.as_bytes())

    assert not parsed.chunk_type().is_valid()
    assert parsed == chunk


def test_chunk_unpack_leaves_stream_after_chunk():
    raw = chunk_data() + b'trailing'
    stream = Stream(raw)

    Chunk.unpack(stream)

    assert stream.read_all() == b'trailing'


def test_chunk_invalid_utf8():
    chunk = Chunk.new(ChunkType.from_str('ruSt'), b'\xff\xfe\xfd')

    with pytest.raises(InvalidUtf8):
        chunk.data_as_text()


def test_chunk_str():
    chunk = Chunk.from_bytes(chunk_data())

    text = str(chunk)

    assert 'Length: 42' in text
    assert 'Type: RuSt' in text
    assert 'Crc: %d' % MESSAGE_CRC in text
