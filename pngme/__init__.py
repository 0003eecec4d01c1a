"""
# pngme: hide messages into PNG files.

A PNG file is a signature followed by a list of chunks, each one with a type
telling what it contains; a decoder must ignore the ancillary chunks it doesn't
know, so we can add our own chunk with whatever data we want and the image
is still a perfectly valid PNG.

The operations available are

 1. encode(): append a chunk with a message
 2. decode(): read back the message from the first chunk with a given type
 3. remove(): remove the first chunk with a given type
 4. print_chunks(): list the chunks contained into the file

all of them work on the raw bytes of the file, the rest of the bytes are
left untouched.
"""
from .chunk import Chunk
from .chunk_type import ChunkType
from .commands import check, decode, encode, print_chunks, remove
from .png import Png
