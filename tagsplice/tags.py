# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

import collections
import tempfile

from warnings import warn

from tagsplice.errors import *
from tagsplice.conversion import to_host_order, to_wire_order
from tagsplice.frames import FrameCursor, SCAN_LIMIT

import tagsplice.frames as Frames
import tagsplice.fileutil as fileutil
import tagsplice.splicer as splicer

TAG_MAGIC = b"ID3"
TAG_HEADER_SIZE = 10
DEFAULT_ENCODING = "latin-1"

class TagHeader(collections.namedtuple("TagHeader", "magic major minor flags size")):
    """The 10-byte preamble of an ID3v2 tag.

    Only the magic is validated.  size is whatever the file declares;
    it is not recomputed when frames change length.
    """
    __slots__ = ()

    @classmethod
    def decode(cls, data):
        if len(data) < TAG_HEADER_SIZE:
            raise TruncatedStreamError("Tag header too short")
        if data[0:3] != TAG_MAGIC:
            raise NoTagError("ID3v2 tag not found")
        return cls(bytes(data[0:3]), data[3], data[4], data[5],
                   to_host_order(data[6:10]))

    def encode(self):
        data = bytearray()
        data.extend(self.magic)
        data.append(self.major)
        data.append(self.minor)
        data.append(self.flags)
        data.extend(to_wire_order(self.size))
        assert len(data) == TAG_HEADER_SIZE
        return bytes(data)

    @property
    def version(self):
        return (self.major, self.minor)

def read_header(file):
    "Read and validate the tag header at the current position of file."
    return TagHeader.decode(fileutil.xread(file, TAG_HEADER_SIZE))

def write_header_copy(source, dest):
    "Copy the tag header from source to dest verbatim."
    header = read_header(source)
    dest.write(header.encode())
    return header

def decode_text(content, encoding=DEFAULT_ENCODING):
    return content.decode(encoding, "replace").strip("\x00")

def encode_text(value, encoding=DEFAULT_ENCODING):
    if isinstance(value, str):
        return value.encode(encoding)
    return bytes(value)

def extract_known_frames(file, encoding=DEFAULT_ENCODING, limit=SCAN_LIMIT):
    """Decode the text of the next limit frames in file.

    Returns a dictionary mapping field names to strings, in file order.
    Frames whose id is not in the known frame table are left out.
    """
    result = dict()
    cursor = FrameCursor(file)
    for (header, content) in cursor.frames(limit):
        field = Frames.field_for_frameid(header.frameid)
        if field is None:
            warn("Unknown frame id {0}".format(repr(header.frameid)),
                 UnknownFrameWarning)
            continue
        result[field] = decode_text(content, encoding)
    return result

def read_version(filename):
    "Return the (major, minor) version of the ID3v2 tag in filename."
    with fileutil.opened(filename, "rb") as file:
        file.seek(0)
        return read_header(file).version

def read_all_tags(filename, encoding=DEFAULT_ENCODING):
    "Return the known text fields of the tag in filename as a dictionary."
    with fileutil.opened(filename, "rb") as file:
        file.seek(0)
        read_header(file)
        return extract_known_frames(file, encoding)

def edit_tag(filename, field, value, encoding=DEFAULT_ENCODING,
             in_place=True, max_mem=5):
    """Replace the content of one known frame in filename.

    field is anything Frames.lookup accepts; value is a string (encoded
    with encoding) or raw bytes.  The rebuilt file is assembled in a
    scratch file first and copied over the original only after the
    whole scan succeeded.  Returns (old_header, new_header) of the
    edited frame.
    """
    frame = Frames.lookup(field)
    content = encode_text(value, encoding)
    if not in_place and not isinstance(filename, str):
        raise ValueError("in_place=False needs a filename")
    with fileutil.opened(filename, "rb+") as file:
        with tempfile.SpooledTemporaryFile(max_size=max_mem * (1<<20),
                                           prefix="tagsplice-",
                                           suffix=".tmp") as scratch:
            file.seek(0)
            write_header_copy(file, scratch)
            result = splicer.FrameSplicer(file, scratch).compare_and_edit(
                frame.frameid, content)
            if in_place:
                fileutil.splice_back(scratch, file)
            else:
                file.close()
                fileutil.splice_back(scratch, filename, in_place=False)
            return result
