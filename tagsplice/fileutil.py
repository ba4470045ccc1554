# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

"""File manipulation utilities."""

import os
import os.path
import shutil
import tempfile
import signal

from contextlib import contextmanager

from tagsplice.errors import *

BUFSIZE = 128 * 1024

def xread(file, length):
    "Read exactly length bytes from file; raise TruncatedStreamError if file ends sooner."
    data = file.read(length)
    if len(data) != length:
        raise TruncatedStreamError("Expected {0} bytes, got {1}"
                                   .format(length, len(data)))
    return data

def remaining(file):
    "Return the number of bytes between the current position and the end of file."
    pos = file.tell()
    end = file.seek(0, os.SEEK_END)
    file.seek(pos)
    return end - pos

@contextmanager
def opened(filename, mode):
    "Open filename, or do nothing if filename is already an open file object"
    if isinstance(filename, str):
        try:
            file = open(filename, mode)
        except OSError as e:
            raise OpenError(e.errno, "Unable to open file", filename) from e
        try:
            yield file
        finally:
            if not file.closed:
                file.close()
    else:
        yield filename

@contextmanager
def suppress_interrupt():
    """Suppress KeyboardInterrupt exceptions while the context is active.

    The suppressed interrupt (if any) is raised when the context is exited.
    """
    interrupted = False

    def sigint_handler(signum, frame):
        nonlocal interrupted
        interrupted = True

    s = signal.signal(signal.SIGINT, sigint_handler)
    try:
        yield None
    finally:
        signal.signal(signal.SIGINT, s)
    if interrupted:
        raise KeyboardInterrupt()

def copy_chunk(src, dst, length):
    "Copy length bytes from file src to file dst."
    while length > 0:
        l = min(BUFSIZE, length)
        buf = xread(src, l)
        dst.write(buf)
        length -= l

def copy_rest(src, dst):
    "Copy everything up to the end of src into dst; return the byte count."
    total = 0
    while True:
        buf = src.read(BUFSIZE)
        if not buf:
            return total
        dst.write(buf)
        total += len(buf)

def splice_back(scratch, filename, in_place=True):
    """Replace the whole contents of filename with the contents of scratch.
    Any KeyboardInterrupts arriving while splice_back is running
    are deferred until the operation is complete.

    If in_place is true, scratch is copied over the original file
    starting at offset 0 and the file is truncated to its new length.
    This works on files that are already open, but an error or
    interrupt during the copy leaves a mix of old and new data behind.

    If in_place is false, filename must be a path; the new contents go
    into a temporary file in the same directory, which is then renamed
    over the original.
    """
    with suppress_interrupt():
        _splice_back(scratch, filename, in_place)

def _splice_back(scratch, filename, in_place):
    size = scratch.seek(0, os.SEEK_END)
    scratch.seek(0)
    if in_place:
        with opened(filename, "rb+") as file:
            file.seek(0)
            written = copy_rest(scratch, file)
            file.truncate()
            file.flush()
            end = file.tell()
    else:
        if not isinstance(filename, str):
            raise ValueError("in_place=False needs a filename")
        temp = tempfile.NamedTemporaryFile(dir=os.path.dirname(filename) or ".",
                                           prefix="tagsplice-",
                                           suffix=".tmp",
                                           delete=False)
        try:
            written = copy_rest(scratch, temp)
            end = temp.tell()
            temp.close()
            shutil.copymode(filename, temp.name)
            shutil.move(temp.name, filename)
        except BaseException:
            temp.close()
            if os.path.exists(temp.name):
                os.unlink(temp.name)
            raise
    if written != size or end != size:
        raise SpliceError("Wrote {0} of {1} bytes".format(written, size))
