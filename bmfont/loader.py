'''Loader module

Read binary BMFont files from disk and expose them in the dict layout
used by the BMFont text format.
'''
import logging

from path import Path

from bmfont.font import decode


logger = logging.getLogger()

# Bits of InfoBlock.bit_field
INFO_SMOOTH = 1 << 0
INFO_UNICODE = 1 << 1
INFO_ITALIC = 1 << 2
INFO_BOLD = 1 << 3
INFO_FIXED_HEIGHT = 1 << 4

# Bit of CommonBlock.bit_field
COMMON_PACKED = 1 << 7


def load(filepath):
    """Load a binary BMFont file

    Args:
        filepath (str): Path of the .fnt file

    Returns:
        BMFont
    """
    filepath = Path(filepath)
    logger.debug("Loading BMFont %s", filepath)
    return decode(filepath.read_bytes())


def _flag(bit_field, bit):
    return int(bool(bit_field & bit))


def to_atlas(font):
    """Convert a BMFont into a dict

    Keys and value names follow the text variant of the format so code
    written against a text atlas can consume binary fonts.

    Args:
        font (BMFont): Decoded font

    Returns:
        dict
    """
    atlas = {}

    if font.info:
        info = font.info
        atlas['info'] = {
            'face': info.font_name,
            'size': info.font_size,
            'bold': _flag(info.bit_field, INFO_BOLD),
            'italic': _flag(info.bit_field, INFO_ITALIC),
            'charset': info.char_set,
            'unicode': _flag(info.bit_field, INFO_UNICODE),
            'stretchH': info.stretch_h,
            'smooth': _flag(info.bit_field, INFO_SMOOTH),
            'fixedHeight': _flag(info.bit_field, INFO_FIXED_HEIGHT),
            'aa': info.aa,
            'padding': list(info.padding),
            'spacing': list(info.spacing),
            'outline': info.outline,
        }

    if font.common:
        common = font.common
        atlas['common'] = {
            'lineHeight': common.line_height,
            'base': common.base,
            'scaleW': common.scale_w,
            'scaleH': common.scale_h,
            'pages': common.pages,
            'packed': _flag(common.bit_field, COMMON_PACKED),
            'alphaChnl': common.alpha_chnl,
            'redChnl': common.red_chnl,
            'greenChnl': common.green_chnl,
            'blueChnl': common.blue_chnl,
        }

    atlas['page'] = [{'id': i, 'file': name}
                     for i, name in enumerate(font.pages)]

    atlas['char'] = [{
        'id': c.id,
        'x': c.x,
        'y': c.y,
        'width': c.width,
        'height': c.height,
        'xoffset': c.x_offset,
        'yoffset': c.y_offset,
        'xadvance': c.x_advance,
        'page': c.page,
        'chnl': c.chnl,
    } for c in font.chars.values()]

    atlas['kerning'] = [{
        'first': k.first,
        'second': k.second,
        'amount': k.amount,
    } for k in font.kernings]

    return atlas
