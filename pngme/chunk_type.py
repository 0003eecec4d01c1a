'''
# Chunk type

A 4-byte code; the PNG specification restricts each byte to the ASCII letters
(A-Z, a-z) so that a human can read it and, more important, because bit 5 of
each byte (the one that distinguishes upper and lower case) is used to convey
chunk properties:

 1. Ancillary bit (first byte): 0 (uppercase) = critical, 1 (lowercase) = ancillary
 2. Private bit (second byte): 0 (uppercase) = public, 1 (lowercase) = private
 3. Reserved bit (third byte): must be 0 (uppercase) in conforming files
 4. Safe-to-copy bit (fourth byte): 0 (uppercase) = unsafe, 1 (lowercase) = safe

See <http://www.libpng.org/pub/png/spec/1.2/PNG-Structure.html>, section 3.3.
'''
import logging

from bitstring import Bits

from .exceptions import InvalidChunkType


logger = logging.getLogger(__name__)

CHUNK_TYPE_SIZE = 4


def _is_ascii_letter(byte):
    return 0x41 <= byte <= 0x5a or 0x61 <= byte <= 0x7a


class ChunkType(object):
    '''Immutable container of the type code of a chunk.

    Building it from bytes found in a file never checks the letters (a file can
    contain whatever), building it from text given by the user does.'''

    __slots__ = ('_raw', '_bits')

    def __init__(self, raw: bytes):
        raw = bytes(raw)
        if len(raw) != CHUNK_TYPE_SIZE:
            raise InvalidChunkType(value=raw, message=f'chunk type must be {CHUNK_TYPE_SIZE} bytes long')

        object.__setattr__(self, '_raw', raw)
        object.__setattr__(self, '_bits', Bits(raw))

    def __setattr__(self, name, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    @classmethod
    def from_bytes(cls, raw: bytes) -> 'ChunkType':
        chunk_type = cls(raw)
        if not chunk_type.is_alphabetic():
            logger.warning(f'chunk type {chunk_type.bytes()!r} contains non-letter bytes')

        return chunk_type

    @classmethod
    def from_str(cls, text: str) -> 'ChunkType':
        try:
            raw = text.encode('ascii')
        except UnicodeEncodeError:
            raise InvalidChunkType(value=text)

        if len(raw) != CHUNK_TYPE_SIZE or not all(_is_ascii_letter(_) for _ in raw):
            raise InvalidChunkType(value=text)

        return cls(raw)

    def bytes(self) -> bytes:
        return self._raw

    def _property_bit(self, index: int) -> bool:
        # bit 5 is the third one counting from the most significant
        return self._bits[index * 8 + 2]

    def is_critical(self) -> bool:
        return not self._property_bit(0)

    def is_ancillary(self) -> bool:
        return not self.is_critical()

    def is_public(self) -> bool:
        return not self._property_bit(1)

    def is_private(self) -> bool:
        return not self.is_public()

    def is_reserved_bit_valid(self) -> bool:
        return not self._property_bit(2)

    def is_safe_to_copy(self) -> bool:
        return self._property_bit(3)

    def is_valid(self) -> bool:
        '''A type is structurally valid when the reserved bit is not set.'''
        return self.is_reserved_bit_valid()

    def is_alphabetic(self) -> bool:
        return all(_is_ascii_letter(_) for _ in self._raw)

    def __eq__(self, other):
        if not isinstance(other, ChunkType):
            return NotImplemented

        return self._raw == other._raw

    def __hash__(self):
        return hash(self._raw)

    def __repr__(self):
        return '<%s(%r)>' % (self.__class__.__name__, self._raw)

    def __str__(self):
        return self._raw.decode('ascii', errors='replace')
