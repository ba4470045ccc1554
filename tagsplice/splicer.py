# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

"""Rebuilding a tagged stream with one frame's content replaced."""

from tagsplice.errors import *
from tagsplice.frames import FrameCursor, SCAN_LIMIT

import tagsplice.fileutil as fileutil

class FrameSplicer:
    """Copy frames from source to dest, replacing the content of one of them.

    The source must be positioned at the start of a frame record (right
    after the tag header, for a whole scan); dest receives the rebuilt
    stream.  The splicer owns dest for the duration of the splice.
    """

    scan_limit = SCAN_LIMIT

    def __init__(self, source, dest):
        self.cursor = FrameCursor(source)
        self.source = source
        self.dest = dest

    def skip_frame(self):
        "Copy the current frame to dest unchanged."
        header = self.cursor.read_header()
        self.dest.write(header.encode())
        self.cursor.check_content(header)
        fileutil.copy_chunk(self.source, self.dest, header.content_size)
        return header

    def edit_frame(self, content):
        """Write the current frame with new content, then copy the rest of source.

        The frame id and flag bytes are kept; the size field is recomputed
        from the new content.  Returns (old_header, new_header).
        """
        content = bytes(content)
        old = self.cursor.read_header()
        new = old.with_content_size(len(content))
        self.cursor.skip_content(old)
        self.dest.write(new.encode())
        self.dest.write(content)
        self.copy_remainder()
        return (old, new)

    def copy_remainder(self):
        "Copy the remaining frames and audio data verbatim; return the byte count."
        return fileutil.copy_rest(self.source, self.dest)

    def compare_and_edit(self, frameid, content):
        """Scan up to scan_limit frames for frameid and replace its content.

        Frames before the match are copied unchanged; everything after it
        is copied by edit_frame.  Raises FrameNotFoundError if no scanned
        frame matches.
        """
        for i in range(self.scan_limit):
            if self.cursor.peek_frameid() == frameid:
                return self.edit_frame(content)
            self.skip_frame()
        raise FrameNotFoundError("Frame {0} not found in the first {1} frames"
                                 .format(frameid, self.scan_limit))
