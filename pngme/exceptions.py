class PngmeException(Exception):
    '''Base class to extend in order to throw exception in pngme.

    It takes the value that caused the exception so that the caller can
    show it to the user; an optional message overrides the default one.
    '''
    default_message = 'pngme error'

    def __init__(self, value=None, message=None):
        self.value = value
        self.message = message or self.default_message
        super().__init__(self.message if value is None else f'{self.message}: {value!r}')


class UnpackException(PngmeException):
    default_message = 'unable to unpack'


class InvalidHeader(UnpackException):
    default_message = 'invalid PNG signature'


class InvalidChunkLength(UnpackException):
    default_message = 'chunk length exceeds the remaining data'


class UnexpectedEof(InvalidChunkLength):
    default_message = 'unexpected end of data'


class InvalidCrc(UnpackException):
    '''The CRC stored in the chunk doesn't correspond to the one calculated
    over its type and data: the file is corrupted (or tampered).'''

    def __init__(self, expected, actual, chunk_type=None):
        self.expected = expected
        self.actual = actual
        super().__init__(
            value=chunk_type,
            message=f'CRC mismatch (stored 0x{expected:08x}, calculated 0x{actual:08x})',
        )


class InvalidChunkType(PngmeException):
    default_message = 'chunk type must be 4 ASCII letters'


class InvalidUtf8(PngmeException):
    default_message = 'chunk data is not valid UTF-8'


class ChunkNotFound(PngmeException):
    default_message = 'no chunk with type'
