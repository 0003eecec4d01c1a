import io
import struct
import zlib
from pathlib import Path

import pytest
from PIL import Image


def raw_chunk(chunk_type: bytes, data: bytes) -> bytes:
    return struct.pack('>I', len(data)) + chunk_type + data + struct.pack('>I', zlib.crc32(chunk_type + data))


@pytest.fixture
def test_root_dir():
    return Path(__file__).parent


@pytest.fixture
def png_header():
    return b'\x89PNG\r\n\x1a\n'


@pytest.fixture
def minimal_png(png_header):
    """A signature followed by IHDR and IEND, nothing else."""
    ihdr = struct.pack('>IIBBBBB', 1, 1, 8, 2, 0, 0, 0)
    return png_header + raw_chunk(b'IHDR', ihdr) + raw_chunk(b'IEND', b'')


@pytest.fixture
def real_png():
    """A real image as produced by an encoder, with IDAT and all."""
    image = Image.new('RGB', (5, 10), color=(255, 0, 0))
    buffer = io.BytesIO()
    image.save(buffer, format='PNG')
    return buffer.getvalue()
