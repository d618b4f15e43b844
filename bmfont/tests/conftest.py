import struct

import pytest


MAGIC = b'BMF\x03'


def pack_block(tag, payload):
    return struct.pack('<BI', tag, len(payload)) + payload


def pack_info(font_size=32, bit_field=0x03, char_set=0, stretch_h=100,
              aa=1, padding=(1, 2, 3, 4), spacing=(1, 1), outline=0,
              font_name=b'Arial\0'):
    return struct.pack('<hBBHB4B2BB', font_size, bit_field, char_set,
                       stretch_h, aa, *padding, *spacing,
                       outline) + font_name


def pack_common(line_height=36, base=29, scale_w=256, scale_h=256, pages=2,
                bit_field=0, alpha=1, red=0, green=0, blue=0):
    return struct.pack('<HHHHHBBBBB', line_height, base, scale_w, scale_h,
                       pages, bit_field, alpha, red, green, blue)


def pack_char(id, x=0, y=0, width=10, height=12, x_offset=0, y_offset=0,
              x_advance=11, page=0, chnl=15):
    return struct.pack('<IHHHHhhhBB', id, x, y, width, height, x_offset,
                       y_offset, x_advance, page, chnl)


def pack_kerning(first, second, amount):
    return struct.pack('<IIh', first, second, amount)


@pytest.fixture
def packers():
    '''Helpers building raw blocks'''
    class Packers():
        magic = MAGIC
        block = staticmethod(pack_block)
        info = staticmethod(pack_info)
        common = staticmethod(pack_common)
        char = staticmethod(pack_char)
        kerning = staticmethod(pack_kerning)
    return Packers


@pytest.fixture
def menu_font():
    '''A complete two pages font'''
    return b''.join([
        MAGIC,
        pack_block(1, pack_info()),
        pack_block(2, pack_common()),
        pack_block(3, b'menu_0.png\0menu_1.png\0'),
        pack_block(4, b''.join([
            pack_char(32, x=0, y=0, width=0, height=0, y_offset=29,
                      x_advance=8, page=0),
            pack_char(65, x=10, y=0, width=20, height=24, x_offset=-1,
                      y_offset=5, x_advance=19, page=0),
            pack_char(86, x=0, y=40, width=21, height=24, x_offset=-1,
                      y_offset=5, x_advance=19, page=1),
        ])),
        pack_block(5, pack_kerning(65, 86, -2) + pack_kerning(86, 65, -1)),
    ])
