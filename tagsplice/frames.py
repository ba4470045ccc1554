# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

"""Frame records, the frame cursor, and the table of known text frames."""

import collections
import os

from tagsplice.errors import *
from tagsplice.conversion import to_host_order, to_wire_order

import tagsplice.fileutil as fileutil

FRAME_HEADER_SIZE = 11     # id + size + flags
SCAN_LIMIT = 6

class KnownFrame(collections.namedtuple("KnownFrame", "frameid field flag")):
    "A frame the scanner understands: its id, display field, and command line flag."
    __slots__ = ()

KNOWN_FRAMES = (
    KnownFrame("TIT2", "TITLE", "-t"),
    KnownFrame("TPE1", "ARTIST", "-a"),
    KnownFrame("TALB", "ALBUM", "-A"),
    KnownFrame("TYER", "YEAR", "-y"),
    KnownFrame("TCON", "GENRE", "-g"),
    KnownFrame("COMM", "COMMENT", "-c"),
    )

_by_frameid = dict((frame.frameid, frame) for frame in KNOWN_FRAMES)
_by_field = dict((frame.field, frame) for frame in KNOWN_FRAMES)
_by_flag = dict((frame.flag, frame) for frame in KNOWN_FRAMES)

assert len(_by_frameid) == len(_by_field) == len(_by_flag) == SCAN_LIMIT

def lookup(key):
    """Return the KnownFrame for key.

    key may be a KnownFrame, a frame id ("TIT2"), a field name ("title",
    case-insensitive) or a command line flag ("-t").  Raises
    UnknownFieldError for anything else.
    """
    if isinstance(key, KnownFrame):
        if _by_frameid.get(key.frameid) == key:
            return key
    elif isinstance(key, str):
        if key in _by_frameid:
            return _by_frameid[key]
        if key in _by_flag:
            return _by_flag[key]
        if key.upper() in _by_field:
            return _by_field[key.upper()]
    raise UnknownFieldError("Unknown field " + repr(key))

def field_for_frameid(frameid):
    "Return the field name for frameid, or None if it isn't a known frame."
    frame = _by_frameid.get(frameid)
    return frame.field if frame else None


class FrameHeader(collections.namedtuple("FrameHeader", "frameid size flags")):
    """The fixed part of a frame record.

    size counts the content bytes plus one; the extra byte is the text
    encoding marker, which lives at the end of the three opaque flag
    bytes and is copied along with them.
    """
    __slots__ = ()

    @property
    def content_size(self):
        return self.size - 1

    @classmethod
    def decode(cls, data):
        assert len(data) == FRAME_HEADER_SIZE
        frameid = data[0:4].decode("latin-1")
        size = to_host_order(data[4:8])
        if size == 0:
            raise FrameError("Frame {0} has invalid size 0".format(repr(frameid)))
        return cls(frameid, size, bytes(data[8:11]))

    def encode(self):
        data = bytearray()
        data.extend(self.frameid.encode("latin-1"))
        data.extend(to_wire_order(self.size))
        data.extend(self.flags)
        assert len(data) == FRAME_HEADER_SIZE
        return bytes(data)

    def with_content_size(self, length):
        "Return a copy of this header describing length bytes of content."
        return self._replace(size=length + 1)


class FrameCursor:
    """Sequential reader of frame records.

    The cursor owns the read position of its file.  peek_frameid() leaves
    the position unchanged, so a caller can test a frame's identity and
    then hand the whole frame to read_header() and read_content() or
    skip_content().  Nothing may be read in between.
    """
    def __init__(self, file):
        self.file = file

    def remaining(self):
        return fileutil.remaining(self.file)

    def peek_frameid(self):
        data = fileutil.xread(self.file, 4)
        self.file.seek(-4, os.SEEK_CUR)
        return data.decode("latin-1")

    def read_header(self):
        return FrameHeader.decode(fileutil.xread(self.file, FRAME_HEADER_SIZE))

    def check_content(self, header):
        left = self.remaining()
        if header.content_size > left:
            raise TruncatedStreamError(
                "Frame {0} declares {1} bytes of content, only {2} left"
                .format(repr(header.frameid), header.content_size, left))

    def read_content(self, header):
        self.check_content(header)
        return fileutil.xread(self.file, header.content_size)

    def skip_content(self, header):
        self.check_content(header)
        self.file.seek(header.content_size, os.SEEK_CUR)

    def read_frame(self):
        "Read a whole frame; return (header, content)."
        header = self.read_header()
        return (header, self.read_content(header))

    def frames(self, limit=SCAN_LIMIT):
        "Iterate over the next limit frames as (header, content) pairs."
        for i in range(limit):
            yield self.read_frame()
