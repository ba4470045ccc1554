# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

import unittest
import io
import os
import random
import shutil
import signal
import tempfile

from unittest import mock

from tagsplice.errors import *
from tagsplice.fileutil import *

class ShortWriter(io.BytesIO):
    "A file that silently drops the last byte of every write."
    def write(self, data):
        return super().write(bytes(data)[:-1])

class FileutilTestCase(unittest.TestCase):
    def testSpliceBack(self):
        def compare(data, filename):
            with opened(filename, "rb") as file:
                data2 = file.read()
                return data == data2
        def random_data(length):
            return bytes(random.randint(0, 255) for i in range(length))

        FILESIZE = 100 * 1024

        # Overwrite a random temp file with shorter, equal and longer
        # scratch contents; the file must end up identical to the scratch.
        for in_place in [False, True]:
            file = tempfile.NamedTemporaryFile(prefix="tagsplicetest-", suffix=".tmp", delete=False)
            try:
                filename = file.name
                file.write(random_data(FILESIZE))
                file.close()
                for length in (FILESIZE - 1000, FILESIZE - 1000, FILESIZE + 3000, 0, 10):
                    data = random_data(length)
                    scratch = io.BytesIO(data)
                    scratch.seek(length // 2)
                    splice_back(scratch, filename, in_place=in_place)
                    self.assertTrue(compare(data, filename))
                    self.assertEqual(os.path.getsize(filename), length)
            finally:
                os.unlink(filename)

    def testSpliceBackOpenFile(self):
        file = io.BytesIO(b"0123456789")
        file.seek(4)
        splice_back(io.BytesIO(b"abc"), file)
        self.assertEqual(file.getvalue(), b"abc")
        self.assertRaises(ValueError, splice_back, io.BytesIO(b"abc"), file, in_place=False)

    def testFailedRenameRemovesTemp(self):
        dirname = tempfile.mkdtemp(prefix="tagsplicetest-")
        filename = os.path.join(dirname, "song.mp3")
        try:
            with open(filename, "wb") as file:
                file.write(b"0123456789")
            with mock.patch("tagsplice.fileutil.shutil.move",
                            side_effect=OSError("rename failed")):
                self.assertRaises(OSError, splice_back, io.BytesIO(b"abc"),
                                  filename, in_place=False)
            self.assertEqual(os.listdir(dirname), ["song.mp3"])
            with open(filename, "rb") as file:
                self.assertEqual(file.read(), b"0123456789")
        finally:
            shutil.rmtree(dirname)

    def testShortWrite(self):
        self.assertRaises(SpliceError, splice_back, io.BytesIO(b"abcdef"), ShortWriter())

    def testCopy(self):
        src = io.BytesIO(bytes(range(256)) * 1024)
        dst = io.BytesIO()
        copy_chunk(src, dst, 1000)
        self.assertEqual(dst.getvalue(), src.getvalue()[:1000])
        self.assertEqual(copy_rest(src, dst), 256 * 1024 - 1000)
        self.assertEqual(dst.getvalue(), src.getvalue())
        self.assertEqual(copy_rest(src, dst), 0)
        src.seek(-10, os.SEEK_END)
        self.assertRaises(TruncatedStreamError, copy_chunk, src, io.BytesIO(), 11)

    def testXread(self):
        file = io.BytesIO(b"ID3\x03")
        self.assertEqual(xread(file, 3), b"ID3")
        self.assertEqual(remaining(file), 1)
        self.assertEqual(file.tell(), 3)
        self.assertRaises(TruncatedStreamError, xread, file, 2)
        self.assertEqual(remaining(file), 0)

    def testOpened(self):
        file = io.BytesIO()
        with opened(file, "rb") as f:
            self.assertTrue(f is file)
        self.assertFalse(file.closed)
        with self.assertRaises(OpenError) as cm:
            with opened(os.path.join(tempfile.gettempdir(), "tagsplice-no-such-file.mp3"), "rb"):
                pass
        self.assertTrue(isinstance(cm.exception, OSError))

    @unittest.skipUnless(hasattr(os, "kill") and hasattr(signal, "SIGINT")
                         and os.name == "posix", "needs POSIX signals")
    def testSuppressInterrupt(self):
        done = []
        with self.assertRaises(KeyboardInterrupt):
            with suppress_interrupt():
                os.kill(os.getpid(), signal.SIGINT)
                done.append(True)
        self.assertEqual(done, [True])

suite = unittest.TestLoader().loadTestsFromTestCase(FileutilTestCase)

if __name__ == "__main__":
    unittest.main(defaultTest="suite")
