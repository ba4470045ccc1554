# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

import tagsplice.frames
import tagsplice.tags
import tagsplice.splicer

from tagsplice.errors import *
from tagsplice.frames import KNOWN_FRAMES, KnownFrame, FrameCursor, FrameHeader
from tagsplice.splicer import FrameSplicer
from tagsplice.tags import (TagHeader, read_header, write_header_copy,
                            extract_known_frames, read_version,
                            read_all_tags, edit_tag)

version = "0.1.0"
