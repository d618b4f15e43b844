"""BMFont binary decoder

Decode AngelCode BMFont binary files (version 3)
"""
# flake8: noqa

from bmfont.block import Char, CommonBlock, InfoBlock, KerningPair
from bmfont.exception import *
from bmfont.font import BMFont, decode
from bmfont.loader import load, to_atlas


__version__ = "0.1.0"
