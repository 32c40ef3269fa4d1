import os
import shutil
import tempfile
import unittest

from infset.backing.sorted_backing_set import SortedBackingSet
from infset.expression import parse_expression
from infset.infinite_set import InfiniteSet
from infset.storage.hdf5_store import InfiniteSetStore


class TestInfiniteSetStore(unittest.TestCase):
    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.path = os.path.join(self.temp_dir, "sets.h5")
        self.trusted = parse_expression("ALL-HMMPanther-Gene3D")
        self.novel = InfiniteSet.from_elements(["Novel"])
        with InfiniteSetStore(self.path, "w") as store:
            store.save("trusted", self.trusted)
            store.save("novel", self.novel)
            store.save("nothing", InfiniteSet.empty())

    def tearDown(self):
        shutil.rmtree(self.temp_dir)

    def test_loaded_sets_should_equal_saved_ones(self):
        # arrange
        with InfiniteSetStore(self.path) as sut:
            # act
            trusted = sut.load("trusted")
            novel = sut.load("novel", backing=SortedBackingSet)
            nothing = sut.load("nothing")

        # assert
        self.assertEqual(trusted, self.trusted)
        self.assertEqual(novel, self.novel)
        self.assertIsInstance(novel.storage, SortedBackingSet)
        self.assertEqual(nothing, InfiniteSet.empty())

    def test_names_should_list_stored_sets(self):
        # act
        with InfiniteSetStore(self.path) as sut:
            names = sut.names()

        # assert
        self.assertListEqual(names, ["nothing", "novel", "trusted"])

    def test_contains_should_answer_from_the_file(self):
        # act
        with InfiniteSetStore(self.path) as sut:
            membership = [sut.contains("trusted", "Gene3D"),
                          sut.contains("trusted", "HMMPfam"),
                          sut.contains("novel", "Novel"),
                          sut.contains("novel", "HMMPfam"),
                          sut.contains("trusted", "x" * 300),
                          sut.contains("novel", "x" * 300)]

        # assert
        self.assertListEqual(membership,
                             [False, True, True, False, True, False])

    def test_saving_again_should_replace_the_set(self):
        # arrange
        replacement = InfiniteSet.all()

        # act
        with InfiniteSetStore(self.path, "a") as sut:
            sut.save("trusted", replacement)
        with InfiniteSetStore(self.path) as sut:
            result = sut.load("trusted")

        # assert
        self.assertEqual(result, replacement)

    def test_deleted_set_should_not_be_found(self):
        # act
        with InfiniteSetStore(self.path, "a") as sut:
            sut.delete("novel")
            names = sut.names()

        # assert
        self.assertListEqual(names, ["nothing", "trusted"])

    def test_missing_set_should_raise_exception(self):
        with InfiniteSetStore(self.path) as sut:
            with self.assertRaises(KeyError):
                sut.load("unknown")
            with self.assertRaises(KeyError):
                sut.contains("unknown", "Novel")

    def test_invalid_input_should_raise_exception(self):
        with InfiniteSetStore(self.path, "a") as sut:
            with self.assertRaises(ValueError):
                sut.save("not a name", self.novel)
            with self.assertRaises(ValueError):
                sut.save("numbers", InfiniteSet.from_elements([1]))
            with self.assertRaises(ValueError):
                sut.save("long", InfiniteSet.from_elements(["x" * 300]))
        with InfiniteSetStore(self.path) as sut:
            with self.assertRaises(IOError):
                sut.save("novel", self.novel)
        with self.assertRaises(ValueError):
            InfiniteSetStore(self.path, "x")

    def test_closed_store_should_report_it(self):
        # arrange
        sut = InfiniteSetStore(self.path)

        # act
        sut.close()

        # assert
        self.assertFalse(sut.is_open)
