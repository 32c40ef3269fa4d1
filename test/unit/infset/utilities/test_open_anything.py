import bz2
import io
import os
import shutil
import tempfile
import unittest

from infset.utilities.open_anything import open_anything


class TestOpenAnything(unittest.TestCase):
    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.lines = ["first line\n", "second line\n"]

    def tearDown(self):
        shutil.rmtree(self.temp_dir)

    def test_plain_file_should_be_read_as_text(self):
        # arrange
        fname = os.path.join(self.temp_dir, "plain.txt")
        with open(fname, "w") as f_out:
            f_out.writelines(self.lines)

        # act
        with open_anything(fname) as f_in:
            lines = list(f_in)

        # assert
        self.assertListEqual(lines, self.lines)

    def test_bz2_file_should_be_decompressed_as_text(self):
        # arrange
        fname = os.path.join(self.temp_dir, "compressed.txt.bz2")
        with bz2.open(fname, "wt") as f_out:
            f_out.writelines(self.lines)

        # act
        with open_anything(fname) as f_in:
            lines = list(f_in)

        # assert
        self.assertListEqual(lines, self.lines)

    def test_file_objects_should_be_returned_unchanged(self):
        # arrange
        stream = io.StringIO("".join(self.lines))

        # act
        result = open_anything(stream)

        # assert
        self.assertIs(result, stream)
