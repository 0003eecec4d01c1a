'''
# Chunk

This is the main data structure of the format: the 4 fields represent
a chunk into the file. Each field is intended big-endian.

    .--------.------.------------------.-----.
    | length | type |       data       | crc |
    '--------'------'------------------'-----'
        4       4         length          4

The length counts only the bytes of the data; the crc field is network-byte-order
CRC-32 computed over the chunk type and chunk data, but not the length.
'''
import logging

from . import fields
from .common import crc
from .chunk_type import ChunkType, CHUNK_TYPE_SIZE
from .exceptions import InvalidChunkLength, InvalidCrc, InvalidUtf8
from .streams import Stream


logger = logging.getLogger(__name__)


class Chunk(object):
    length_field = fields.StructField('I', endianess=fields.Endianess.BIG_ENDIAN, name='length')
    type_field   = fields.StringField(CHUNK_TYPE_SIZE, name='type')
    data_field   = fields.StringField(name='data')
    crc_field    = crc.CRCField(endianess=fields.Endianess.BIG_ENDIAN, name='crc')

    def __init__(self, chunk_type: ChunkType, data: bytes, crc=None):
        self._chunk_type = chunk_type
        self._data = bytes(data)
        self._crc = self.calculate_crc() if crc is None else crc

    @classmethod
    def new(cls, chunk_type: ChunkType, data: bytes) -> 'Chunk':
        return cls(chunk_type, data)

    @classmethod
    def unpack(cls, stream: Stream) -> 'Chunk':
        '''Read a single chunk from the actual position of the stream.

        The type is taken verbatim: a chunk with a weird type is still
        a chunk as long as its CRC is right.'''
        offset = stream.tell()
        length = cls.length_field.unpack(stream)
        chunk_type = ChunkType.from_bytes(cls.type_field.unpack(stream))

        logger.debug('unpacking chunk %s with length %d at offset 0x%08x' % (chunk_type, length, offset))

        remaining = stream.remaining()
        if remaining < length + cls.crc_field.size:
            raise InvalidChunkLength(
                value=length,
                message=f'chunk {chunk_type} at offset 0x{offset:08x} declares {length} bytes'
                        f' but only {max(remaining - cls.crc_field.size, 0)} are available',
            )

        data = cls.data_field.unpack(stream, n=length)
        stored = cls.crc_field.unpack(stream)

        calculated = cls.crc_field.calculate(chunk_type.bytes(), data)
        if stored != calculated:
            raise InvalidCrc(stored, calculated, chunk_type=str(chunk_type))

        return cls(chunk_type, data, crc=stored)

    @classmethod
    def from_bytes(cls, raw: bytes) -> 'Chunk':
        return cls.unpack(Stream(raw))

    def calculate_crc(self) -> int:
        return self.crc_field.calculate(self._chunk_type.bytes(), self._data)

    def length(self) -> int:
        return len(self._data)

    @property
    def size(self) -> int:
        '''Number of bytes occupied by the chunk in the file.'''
        return self.length_field.size + CHUNK_TYPE_SIZE + self.length() + self.crc_field.size

    def chunk_type(self) -> ChunkType:
        return self._chunk_type

    def data(self) -> bytes:
        return self._data

    def crc(self) -> int:
        return self._crc

    def data_as_text(self) -> str:
        try:
            return self._data.decode('utf-8')
        except UnicodeDecodeError as e:
            raise InvalidUtf8(value=str(self._chunk_type), message=f'chunk data is not valid UTF-8 ({e.reason})')

    def as_bytes(self) -> bytes:
        return b''.join([
            self.length_field.pack(self.length()),
            self._chunk_type.bytes(),
            self._data,
            self.crc_field.pack(self._crc),
        ])

    def __eq__(self, other):
        if not isinstance(other, Chunk):
            return NotImplemented

        return (self._chunk_type, self._data, self._crc) == (other._chunk_type, other._data, other._crc)

    def __repr__(self):
        return '<%s(type=%s,length=%d,crc=%08x)>' % (
            self.__class__.__name__,
            self._chunk_type,
            self.length(),
            self._crc,
        )

    def __str__(self):
        return (
            'Chunk {\n'
            f'  Length: {self.length()}\n'
            f'  Type: {self._chunk_type}\n'
            f'  Data: {len(self._data)} bytes\n'
            f'  Crc: {self._crc}\n'
            '}'
        )
