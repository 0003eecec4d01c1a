'''
The user-facing operations: each one takes the raw bytes of a PNG file and
returns either new bytes to be written back or something to show.

Nothing here touches the filesystem; that is left to the caller.
'''
import logging
from typing import List, Tuple, Union

from .chunk import Chunk
from .chunk_type import ChunkType
from .exceptions import ChunkNotFound, InvalidUtf8
from .png import Png


logger = logging.getLogger(__name__)


def encode(png_bytes: bytes, chunk_type_text: str, message: Union[str, bytes]) -> bytes:
    '''Hide the message into a new chunk appended at the end of the file.

    A message already in bytes is stored as it is.'''
    png = Png.from_bytes(png_bytes)
    chunk_type = ChunkType.from_str(chunk_type_text)

    if not chunk_type.is_valid():
        logger.warning(f'chunk type {chunk_type} has the reserved bit set')

    if isinstance(message, str):
        try:
            message = message.encode('utf-8')
        except UnicodeEncodeError as e:
            raise InvalidUtf8(value=message, message=f'message cannot be encoded as UTF-8 ({e.reason})')

    png.append_chunk(Chunk.new(chunk_type, message))

    return png.as_bytes()


def decode(png_bytes: bytes, chunk_type_text: str) -> str:
    png = Png.from_bytes(png_bytes)
    chunk_type = ChunkType.from_str(chunk_type_text)

    chunk = png.chunk_by_type(chunk_type)
    if chunk is None:
        raise ChunkNotFound(value=str(chunk_type))

    return chunk.data_as_text()


def remove(png_bytes: bytes, chunk_type_text: str) -> Tuple[bytes, Chunk]:
    '''Returns the new content of the file and the chunk removed from it.'''
    png = Png.from_bytes(png_bytes)
    chunk_type = ChunkType.from_str(chunk_type_text)

    chunk = png.remove_first_chunk(chunk_type)

    return png.as_bytes(), chunk


def print_chunks(png_bytes: bytes) -> str:
    png = Png.from_bytes(png_bytes)

    return '\n'.join(
        f'[{idx:02d}] {chunk.chunk_type()} length: {chunk.length()}' for idx, chunk in enumerate(png.chunks())
    )


def check(png_bytes: bytes) -> List[Chunk]:
    '''Find the chunks that look like hidden messages, i.e. ancillary chunks
    with some text in them.'''
    png = Png.from_bytes(png_bytes)

    found = []
    for chunk in png.chunks():
        if chunk.chunk_type().is_critical() or chunk.length() == 0:
            continue

        try:
            chunk.data_as_text()
        except InvalidUtf8:
            continue

        found.append(chunk)

    return found
