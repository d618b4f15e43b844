class BMFontError(Exception):
    pass


class FormatError(BMFontError):
    '''The binary data doesn't follow the BMFont layout'''
    pass


class InvalidHeaderError(FormatError):
    pass


class TruncatedBlockError(FormatError):
    pass


class EncodingError(FormatError):
    pass
