# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

import warnings
import sys
from contextlib import contextmanager

def verb(verbose, *args, **kwargs):
    if verbose:
        print(*args, **kwargs)

def check_mp3_filename(filename):
    "Raise a ValueError if FILENAME doesn't look like the name of an MP3 file."
    basename = filename.replace("\\", "/").rsplit("/", 1)[-1]
    if basename.startswith("."):
        raise ValueError("Invalid source file without filename")
    if not basename.lower().endswith(".mp3"):
        raise ValueError("Invalid source file without .mp3 extension")

@contextmanager
def print_warnings(filename, options):
    with warnings.catch_warnings(record=True) as ws:
        warnings.simplefilter("always")
        try:
            yield None
        finally:
            if not options.quiet and len(ws) > 0:
                for w in ws:
                    print(filename + ":warning: " + str(w.message),
                          file=sys.stderr)
            sys.stderr.flush()
