'''Block module

This module contains the records stored in a binary BMFont file and the
decoder of each block type.
See http://www.angelcode.com/products/bmfont/doc/file_format.html
'''
from collections import namedtuple

import numpy as np

from bmfont.exception import EncodingError, TruncatedBlockError
from bmfont.reader import ByteReader


INFO_FORMAT = '<hBBHB4B2BB'
COMMON_FORMAT = '<HHHHHBBBBB'

CHAR_DTYPE = np.dtype([
    ('id', '<u4'), ('x', '<u2'), ('y', '<u2'), ('width', '<u2'),
    ('height', '<u2'), ('x_offset', '<i2'), ('y_offset', '<i2'),
    ('x_advance', '<i2'), ('page', 'u1'), ('chnl', 'u1')
])
KERNING_DTYPE = np.dtype([
    ('first', '<u4'), ('second', '<u4'), ('amount', '<i2')
])

InfoBlock = namedtuple('InfoBlock', [
    'font_size', 'bit_field', 'char_set', 'stretch_h', 'aa', 'padding',
    'spacing', 'outline', 'font_name'])

CommonBlock = namedtuple('CommonBlock', [
    'line_height', 'base', 'scale_w', 'scale_h', 'pages', 'bit_field',
    'alpha_chnl', 'red_chnl', 'green_chnl', 'blue_chnl'])

Char = namedtuple('Char', CHAR_DTYPE.names)

KerningPair = namedtuple('KerningPair', KERNING_DTYPE.names)


def decode_text(raw, what):
    '''Decode UTF-8 bytes and strip trailing NUL characters

    Args:
        raw (bytes): Encoded text
        what (str): Name of the field, used in the error message

    Returns:
        str
    '''
    try:
        text = raw.decode('utf-8')
    except UnicodeDecodeError as e:
        msg = "Invalid UTF-8 in %s: %s" % (what, e)
        raise EncodingError(msg) from e

    return text.rstrip('\0')


def parse_info_block(data):
    """Decode the info block (tag 1)

    Args:
        data (bytes): Block payload

    Returns:
        InfoBlock
    """
    reader = ByteReader(data)
    values = reader.unpack(INFO_FORMAT)
    font_name = decode_text(reader.read_rest(), 'font name')

    return InfoBlock(
        font_size=values[0],
        bit_field=values[1],
        char_set=values[2],
        stretch_h=values[3],
        aa=values[4],
        padding=tuple(values[5:9]),
        spacing=tuple(values[9:11]),
        outline=values[11],
        font_name=font_name)


def parse_common_block(data):
    """Decode the common block (tag 2)

    Args:
        data (bytes): Block payload

    Returns:
        CommonBlock
    """
    reader = ByteReader(data)
    return CommonBlock(*reader.unpack(COMMON_FORMAT))


def parse_pages_block(data):
    """Decode the pages block (tag 3)

    Each page name is a NUL-terminated string, the index of a name is
    the page id referenced by chars.

    Args:
        data (bytes): Block payload

    Returns:
        tuple of str
    """
    reader = ByteReader(data)
    pages = []
    while not reader.exhausted():
        pages.append(decode_text(reader.read_until(0), 'page name'))

    return tuple(pages)


def _read_records(data, dtype, what):
    size = len(data)
    if size % dtype.itemsize:
        msg = ("%s block size %d is not a multiple of %d" %
               (what, size, dtype.itemsize))
        raise TruncatedBlockError(msg)

    if not size:
        return []

    return np.frombuffer(data, dtype=dtype).tolist()


def parse_chars_block(data):
    """Decode the chars block (tag 4)

    Args:
        data (bytes): Block payload

    Returns:
        dict of codepoint to Char, the last record wins for a duplicate id
    """
    chars = {}
    for record in _read_records(data, CHAR_DTYPE, 'Chars'):
        char = Char(*record)
        chars[char.id] = char

    return chars


def parse_kerning_block(data):
    """Decode the kerning pairs block (tag 5)

    Args:
        data (bytes): Block payload

    Returns:
        tuple of KerningPair in file order
    """
    return tuple(KerningPair(*record)
                 for record in _read_records(data, KERNING_DTYPE, 'Kerning'))
