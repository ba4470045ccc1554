# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

"""Integer conversion for size fields.

Frame sizes and the declared tag size are plain 4-byte big-endian
integers here, not the 7-bit syncsafe scheme of later ID3v2 revisions.
"""

class Int8:
    """Conversion to/from binary integer values of any length."""

    @staticmethod
    def decode(data):
        "Decodes an 8-bit big-endian integer of any length"
        value = 0
        for b in data:
            value <<= 8
            value += b
        return value

    @staticmethod
    def encode(i, *, width=-1):
        "Encodes a nonnegative integer into a big-endian bytearray of given length"
        assert width != 0
        if i is None:
            i = 0
        if i < 0: raise ValueError("Nonnegative integer expected")
        data = bytearray()
        while i:
            data.append(i & 255)
            i >>= 8
        if width > 0 and len(data) > width:
            raise ValueError("Integer too large")
        if len(data) < abs(width):
            data.extend([0] * (abs(width) - len(data)))
        return bytes(data[::-1])

def to_host_order(data):
    "Decode a 4-byte size field as read from the stream."
    if len(data) != 4:
        raise ValueError("Size fields are 4 bytes long")
    return Int8.decode(data)

def to_wire_order(value):
    "Encode value as a 4-byte size field."
    return Int8.encode(value, width=4)
