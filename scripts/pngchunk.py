#!/usr/bin/env python3
'''
 $ pngchunk.py encode image.png -c ruSt -m "This is where your secret message will be!"
 $ pngchunk.py decode image.png -c ruSt
'''
import argparse
import logging
import os
import sys

from pngme import commands
from pngme.exceptions import PngmeException
from pngme.streams import Stream


logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.INFO)
logger = logging.getLogger(__name__)

CHUNK_TYPE_HELP = 'chunk type, 4 ASCII letters with the third one uppercase, e.g. ruSt'


def read_file(path):
    with Stream(path) as stream:
        return stream.read_all()


def write_file(path, content):
    with open(path, 'wb') as f:
        f.write(content)


def do_encode(args):
    # argv bytes that are not valid UTF-8 come back as surrogates
    data = commands.encode(read_file(args.path), args.chunk_type, os.fsencode(args.message))
    write_file(args.output or args.path, data)


def do_decode(args):
    print(commands.decode(read_file(args.path), args.chunk_type))


def do_remove(args):
    data, chunk = commands.remove(read_file(args.path), args.chunk_type)
    write_file(args.path, data)
    print(f'`{chunk.chunk_type()}` message removed')


def do_print(args):
    print(commands.print_chunks(read_file(args.path)))


def do_check(args):
    chunks = commands.check(read_file(args.path))
    if not chunks:
        print('exclude secret message')
        return

    print('include secret message')
    for chunk in chunks:
        print(f'  {chunk.chunk_type()} ({chunk.length()} bytes)')


def get_parser():
    parser = argparse.ArgumentParser(prog='pngme', description='shadow message in png file')
    subparsers = parser.add_subparsers(dest='command', required=True)

    encode = subparsers.add_parser('encode', help='hide a message into the file')
    encode.add_argument('path')
    encode.add_argument('-c', '--chunk-type', required=True, help=CHUNK_TYPE_HELP)
    encode.add_argument('-m', '--message', required=True, help='message to hide')
    encode.add_argument('-o', '--output', help='output file (default is to overwrite the input)')
    encode.set_defaults(func=do_encode)

    decode = subparsers.add_parser('decode', help='show the message hidden into the file')
    decode.add_argument('path')
    decode.add_argument('-c', '--chunk-type', required=True, help=CHUNK_TYPE_HELP)
    decode.set_defaults(func=do_decode)

    remove = subparsers.add_parser('remove', help='remove the message from the file')
    remove.add_argument('path')
    remove.add_argument('-c', '--chunk-type', required=True, help=CHUNK_TYPE_HELP)
    remove.set_defaults(func=do_remove)

    print_ = subparsers.add_parser('print', help='list the chunks of the file')
    print_.add_argument('path')
    print_.set_defaults(func=do_print)

    check = subparsers.add_parser('check', help='tell if the file contains some message')
    check.add_argument('path')
    check.set_defaults(func=do_check)

    return parser


def main(argv=None):
    args = get_parser().parse_args(argv)

    try:
        args.func(args)
    except (PngmeException, OSError) as e:
        logger.error(e)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
