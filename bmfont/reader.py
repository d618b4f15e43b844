'''Byte reader module

This module contains the cursor used by every decoder of the package.
'''
import struct

from bmfont.exception import TruncatedBlockError


class ByteReader():
    '''Position-tracked reader over an immutable byte buffer

    Only two primitives are exposed, `read` which reads exactly `size`
    bytes or fails and `read_until` which reads up to a delimiter or the
    end of the buffer. Everything else is built on top of them.
    '''

    def __init__(self, data):
        '''
        *Parameters:*

        - `data`: `bytes`, `bytearray` or `memoryview`
        '''
        self._data = memoryview(data).cast('B')
        self.position = 0

    def __len__(self):
        return len(self._data)

    @property
    def remaining(self):
        '''Number of bytes not consumed yet'''
        return len(self._data) - self.position

    def exhausted(self):
        return self.position >= len(self._data)

    def read(self, size):
        '''Read exactly `size` bytes

        *Parameters:*

        - `size`: Number of bytes to read

        *Returns:*

        `bytes` copied from the buffer

        **Note: Raise TruncatedBlockError if fewer than `size` bytes
                remain. The position is left untouched in that case.**
        '''
        end = self.position + size
        if end > len(self._data):
            msg = ("Cannot read %d bytes at offset %d, only %d remaining" %
                   (size, self.position, self.remaining))
            raise TruncatedBlockError(msg)

        result = self._data[self.position:end].tobytes()
        self.position = end
        return result

    def read_until(self, delimiter=0):
        '''Read up to and including `delimiter` or to the end of buffer

        *Parameters:*

        - `delimiter`: Byte value which ends the run

        *Returns:*

        `bytes` of the run, delimiter included when found
        '''
        start = self.position
        end = start
        size = len(self._data)
        while end < size:
            end += 1
            if self._data[end - 1] == delimiter:
                break

        self.position = end
        return self._data[start:end].tobytes()

    def read_rest(self):
        '''Read every remaining byte'''
        return self.read(self.remaining)

    def unpack(self, fmt):
        '''Read a struct formatted group of values

        *Parameters:*

        - `fmt`: `struct` format, must specify the byte order

        *Returns:*

        `tuple` of values
        '''
        return struct.unpack(fmt, self.read(struct.calcsize(fmt)))

    def unpack_one(self, fmt):
        return self.unpack(fmt)[0]
