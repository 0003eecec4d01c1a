'''
# Portable Network Graphics

Format created to replace patent-emcumbered GIF files.

The specification is at <http://www.libpng.org/pub/png/spec/1.2/PNG-Contents.html>.

A PNG file is an 8 bytes signature followed by a sequence of chunks; here the
chunks are handled generically, i.e. we don't care about which chunks are
present or their order, only that each one is well formed.
'''
import logging

from .chunk import Chunk
from .chunk_type import ChunkType
from .exceptions import ChunkNotFound, InvalidHeader
from .streams import Stream


logger = logging.getLogger(__name__)


def _as_chunk_type(chunk_type):
    '''Types coming as text are from the user so they must be legal.'''
    if isinstance(chunk_type, ChunkType):
        return chunk_type

    return ChunkType.from_str(chunk_type)


class Png(object):
    STANDARD_HEADER = b'\x89\x50\x4e\x47\x0d\x0a\x1a\x0a'

    def __init__(self, chunks=None):
        self._chunks = list(chunks) if chunks else []

    @classmethod
    def unpack(cls, stream: Stream) -> 'Png':
        header = stream.read(len(cls.STANDARD_HEADER))
        if header != cls.STANDARD_HEADER:
            raise InvalidHeader(value=header)

        chunks = []
        while not stream.at_eof():
            chunks.append(Chunk.unpack(stream))

        logger.debug('unpacked %d chunks' % len(chunks))

        return cls(chunks)

    @classmethod
    def from_bytes(cls, raw: bytes) -> 'Png':
        return cls.unpack(Stream(raw))

    def append_chunk(self, chunk: Chunk) -> None:
        logger.debug('appending %r' % chunk)
        self._chunks.append(chunk)

    def remove_first_chunk(self, chunk_type) -> Chunk:
        chunk_type = _as_chunk_type(chunk_type)

        for idx, chunk in enumerate(self._chunks):
            if chunk.chunk_type() == chunk_type:
                logger.debug('removing %r at index %d' % (chunk, idx))
                return self._chunks.pop(idx)

        raise ChunkNotFound(value=str(chunk_type))

    def chunk_by_type(self, chunk_type):
        chunk_type = _as_chunk_type(chunk_type)

        for chunk in self._chunks:
            if chunk.chunk_type() == chunk_type:
                return chunk

        return None

    def chunks(self):
        return tuple(self._chunks)

    def as_bytes(self) -> bytes:
        return self.STANDARD_HEADER + b''.join(_.as_bytes() for _ in self._chunks)

    def __len__(self):
        return len(self._chunks)

    def __iter__(self):
        return iter(self._chunks)

    def __eq__(self, other):
        if not isinstance(other, Png):
            return NotImplemented

        return self._chunks == other._chunks

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, ','.join(repr(_) for _ in self._chunks))

    def __str__(self):
        msg = 'Png {\n'
        for chunk in self._chunks:
            msg += '  %s: %d bytes\n' % (chunk.chunk_type(), chunk.length())
        return msg + '}'
