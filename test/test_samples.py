# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

import unittest
import os
import os.path
import shutil
import tempfile

import tagsplice

class SamplesTestCase(unittest.TestCase):
    sample_dir = os.path.join(os.path.dirname(__file__), "samples")

    def list_mp3(self, path):
        for root, dirs, files in os.walk(path):
            dirs.sort()
            for file in sorted(files):
                if file.endswith(".mp3"):
                    yield os.path.join(root, file)

    def testLoadSamples(self):
        for file in self.list_mp3(self.sample_dir):
            self.assertEqual(tagsplice.read_version(file)[0], 3)
            tags = tagsplice.read_all_tags(file)
            self.assertEqual(len(tags), 6)

    def testSample01(self):
        testfile = os.path.join(self.sample_dir, "sample-01.mp3")
        self.assertEqual(tagsplice.read_all_tags(testfile),
                         dict(TITLE="Yesterday", ARTIST="The Beatles",
                              ALBUM="Help!", YEAR="1965", GENRE="Pop",
                              COMMENT="Remastered"))

    def testEditSampleCopy(self):
        testfile = os.path.join(self.sample_dir, "sample-01.mp3")
        with open(testfile, "rb") as file:
            origdata = file.read()
        tempdir = tempfile.mkdtemp(prefix="tagsplicetest-")
        try:
            copy = os.path.join(tempdir, "copy.mp3")
            shutil.copy(testfile, copy)
            tagsplice.edit_tag(copy, "YEAR", "2009")
            tagsplice.edit_tag(copy, "ARTIST", "Beatles")
            tagsplice.edit_tag(copy, "ARTIST", "The Beatles")
            with open(copy, "rb") as file:
                data = file.read()
            # Same length year, and the artist is back to its original value
            self.assertEqual(data, origdata.replace(b"1965", b"2009"))
        finally:
            shutil.rmtree(tempdir)

suite = unittest.TestLoader().loadTestsFromTestCase(SamplesTestCase)

if __name__ == "__main__":
    unittest.main(defaultTest="suite")
