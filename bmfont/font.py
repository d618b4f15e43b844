'''Font module

This module contains the BMFont descriptor and the decoding entry point.
'''
from collections import namedtuple
import logging
from types import MappingProxyType

from bmfont import block
from bmfont.exception import InvalidHeaderError, TruncatedBlockError
from bmfont.reader import ByteReader


logger = logging.getLogger()

MAGIC = b'BMF\x03'

BLOCK_INFO = 1
BLOCK_COMMON = 2
BLOCK_PAGES = 3
BLOCK_CHARS = 4
BLOCK_KERNING = 5

# Tag -> (BMFont field, decoder)
BLOCK_DECODERS = {
    BLOCK_INFO: ('info', block.parse_info_block),
    BLOCK_COMMON: ('common', block.parse_common_block),
    BLOCK_PAGES: ('pages', block.parse_pages_block),
    BLOCK_CHARS: ('chars', block.parse_chars_block),
    BLOCK_KERNING: ('kernings', block.parse_kerning_block),
}


class BMFont(namedtuple('BMFont', ['info', 'common', 'pages', 'chars',
                                   'kernings'])):
    '''Decoded binary BMFont

    *Exemple:*

    ```
    font = BMFont.from_bytes(data)
    glyph = font.get_char('A')
    amount = font.kerning('A', 'V')
    ```

    **Note: A BMFont is immutable, `chars` is a read-only mapping**
    '''
    __slots__ = ()

    @classmethod
    def from_bytes(cls, data):
        return decode(data)

    def get_char(self, char):
        '''Get the Char record of a codepoint

        *Parameters:*

        - `char`: `int` codepoint or one character `str`

        *Returns:*

        Char or None if the font doesn't contain it
        '''
        if isinstance(char, str):
            char = ord(char)
        return self.chars.get(char)

    def kerning(self, first, second):
        '''Kerning amount between two codepoints

        The last matching pair of the file wins, 0 when there is none.

        **Note: Every call scans all the pairs, build a dict from
                `kernings` when looking up pairs in a layout loop.**
        '''
        if isinstance(first, str):
            first = ord(first)
        if isinstance(second, str):
            second = ord(second)

        amount = 0
        for pair in self.kernings:
            if pair.first == first and pair.second == second:
                amount = pair.amount
        return amount


def check_header(reader):
    '''Consume the 4 bytes magic or raise InvalidHeaderError'''
    if reader.remaining < len(MAGIC) or reader.read(len(MAGIC)) != MAGIC:
        raise InvalidHeaderError("Invalid BMFont header")


def iter_blocks(reader):
    '''Yield (tag, payload) until the buffer is exhausted

    *Parameters:*

    - `reader`: `ByteReader` positioned after the header
    '''
    while not reader.exhausted():
        offset = reader.position
        tag = reader.unpack_one('<B')
        try:
            size = reader.unpack_one('<I')
            payload = reader.read(size)
        except TruncatedBlockError as e:
            msg = "Truncated block %d at offset %d" % (tag, offset)
            raise TruncatedBlockError(msg) from e

        logger.debug("Block %d at offset %d, %d bytes", tag, offset, size)
        yield tag, payload


def decode(data):
    """Decode a binary BMFont

    Blocks may come in any order and are all optional. A later block of
    the same type replaces the previous one, chars and kernings included.
    Unknown block types are skipped.

    Args:
        data (bytes): Whole content of a .fnt binary file

    Returns:
        BMFont
    """
    reader = ByteReader(data)
    check_header(reader)

    fields = {
        'info': None,
        'common': None,
        'pages': (),
        'chars': {},
        'kernings': (),
    }
    for tag, payload in iter_blocks(reader):
        try:
            name, decoder = BLOCK_DECODERS[tag]
        except KeyError:
            logger.debug("Skipping unknown block %d", tag)
            continue
        fields[name] = decoder(payload)

    fields['chars'] = MappingProxyType(fields['chars'])
    return BMFont(**fields)
