"""
A Field is "fundamental" datatype from the format point of view, something directly
packable/unpackable from a stream.
"""
import logging
import struct
from enum import Enum, auto

from .exceptions import InvalidChunkLength, UnexpectedEof


class Endianess(Enum):
    LITTLE_ENDIAN = auto()
    BIG_ENDIAN    = auto()


class StructField(object):
    """
    Simplest of the fields: mimic the behaviour of the struct module packing/unpacking
    integers to/from bytes.
    """

    def __init__(self, format, endianess=Endianess.LITTLE_ENDIAN, name=None):
        self.format = format
        self.endianess = endianess
        self.name = name
        self.logger = logging.getLogger(__name__)

    def __repr__(self):
        return '<%s(%s%s)>' % (self.__class__.__name__, self.name + ':' if self.name else '', self.get_format())

    def get_format(self):
        return '%s%s' % ('<' if self.endianess == Endianess.LITTLE_ENDIAN else '>', self.format)

    @property
    def size(self):
        return struct.calcsize(self.get_format())

    def pack(self, value) -> bytes:
        try:
            return struct.pack(self.get_format(), value)
        except struct.error as e:
            self.logger.error(e)
            raise InvalidChunkLength(value=value, message=f'value out of range for field {self.name!r}')

    def unpack(self, stream) -> int:
        raw = stream.read(self.size)
        if len(raw) != self.size:
            raise UnexpectedEof(
                value=raw,
                message=f'expected {self.size} bytes for field {self.name!r}, got {len(raw)}',
            )

        return struct.unpack(self.get_format(), raw)[0]


class StringField(object):
    """Represent a contiguous chunk of bytes."""

    def __init__(self, n=None, name=None):
        self.length = n
        self.name = name

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, self.length)

    def unpack(self, stream, n=None) -> bytes:
        length = self.length if n is None else n
        raw = stream.read(length)
        if len(raw) != length:
            raise UnexpectedEof(
                value=raw,
                message=f'expected {length} bytes for field {self.name!r}, got {len(raw)}',
            )

        return raw
