"""BMFont CLI

Usage:
    bmfont dump <file> [--kernings --debug]
    bmfont check <file> [--debug]
    bmfont -h | --help
    bmfont --version

Options:
    -h --help    Show this screen
    --version    Show version
    --kernings   Also print kerning pairs
    --debug      Log decoding steps
"""
from collections import namedtuple
import logging
import sys

import docopt

import bmfont
from bmfont.exception import BMFontError
from bmfont.loader import load


logger = logging.getLogger()
stream_handler = logging.StreamHandler()
stream_handler.setFormatter(logging.Formatter('%(asctime)s :: %(levelname)s '
                                              ':: %(message)s'))
stream_handler.setLevel(logging.DEBUG)


def init_logger(debug):
    if debug:
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.WARNING)

    if stream_handler not in logger.handlers:
        logger.addHandler(stream_handler)


def parse_configuration(argv=None):
    '''Return the CLI options as an immutable configuration'''
    args = docopt.docopt(__doc__, argv=argv, version=bmfont.__version__)
    c = {
        'command': 'dump' if args['dump'] else 'check',
        'filepath': args['<file>'],
        'kernings': args['--kernings'],
        'debug': args['--debug'],
    }
    return namedtuple('CliConfiguration', c.keys())(**c)


def dump(font, kernings=False, out=None):
    """Print a human readable description of the font

    Args:
        font (BMFont): Font to print
        kernings (bool): Print kerning pairs too
        out: Text stream
    """
    out = out or sys.stdout
    if font.info:
        info = font.info
        print("info face=%r size=%d charset=%d stretchH=%d aa=%d "
              "padding=%s spacing=%s outline=%d flags=0x%02X" % (
                  info.font_name, info.font_size, info.char_set,
                  info.stretch_h, info.aa,
                  ','.join(map(str, info.padding)),
                  ','.join(map(str, info.spacing)),
                  info.outline, info.bit_field), file=out)

    if font.common:
        common = font.common
        print("common lineHeight=%d base=%d scaleW=%d scaleH=%d pages=%d "
              "flags=0x%02X channels=%d,%d,%d,%d" % (
                  common.line_height, common.base, common.scale_w,
                  common.scale_h, common.pages, common.bit_field,
                  common.alpha_chnl, common.red_chnl, common.green_chnl,
                  common.blue_chnl), file=out)

    for i, name in enumerate(font.pages):
        print("page id=%d file=%r" % (i, name), file=out)

    print("chars count=%d" % len(font.chars), file=out)
    for c in sorted(font.chars.values()):
        print("char id=%-5d x=%-4d y=%-4d width=%-3d height=%-3d "
              "xoffset=%-3d yoffset=%-3d xadvance=%-3d page=%d chnl=%d" %
              tuple(c), file=out)

    print("kernings count=%d" % len(font.kernings), file=out)
    if kernings:
        for k in font.kernings:
            print("kerning first=%d second=%d amount=%d" % tuple(k),
                  file=out)


def check(font):
    """Check page references of the font

    Args:
        font (BMFont): Font to check

    Returns:
        list of problems, empty when the font is consistent
    """
    problems = []
    if font.common and font.common.pages != len(font.pages):
        problems.append("common declares %d pages, found %d" %
                        (font.common.pages, len(font.pages)))

    for c in font.chars.values():
        if c.page >= len(font.pages):
            problems.append("char %d references missing page %d" %
                            (c.id, c.page))

    return problems


def main(argv=None):
    configuration = parse_configuration(argv)
    init_logger(configuration.debug)

    try:
        font = load(configuration.filepath)
    except (BMFontError, OSError) as e:
        print("Cannot decode %s: %s" % (configuration.filepath, e),
              file=sys.stderr)
        return 1

    if configuration.command == 'dump':
        dump(font, configuration.kernings)
        return 0

    problems = check(font)
    for problem in problems:
        print(problem, file=sys.stderr)
    return 1 if problems else 0


if __name__ == '__main__':
    sys.exit(main())
