import logging
import unittest
from configparser import ConfigParser
from test.fixtures.filter_lines_fixture import FilterLinesFixture

from infset.config.sets_from_config_reader import SetsFromConfigReader
from infset.infinite_set import InfiniteSet


class TestSetsFromConfigReader(unittest.TestCase):
    def setUp(self):
        fixture = FilterLinesFixture()
        self.log = logging.getLogger(__name__)
        self.config = ConfigParser()
        self.config.read(fixture.get_config_file())

    def test_sets_should_be_read_in_file_order(self):
        # arrange
        sut = SetsFromConfigReader(self.config, self.log)

        # act
        sets = sut.get_sets()

        # assert
        self.assertListEqual(list(sets.keys()),
                             ["trusted", "novel", "stages.1", "stages.2",
                              "stages.3"])
        self.assertEqual(sets["trusted"], InfiniteSet.from_complement(
            ["HMMPanther", "Gene3D"]))
        self.assertEqual(sets["novel"], InfiniteSet.from_elements(["Novel"]))

    def test_stages_should_be_read_in_order(self):
        # arrange
        sut = SetsFromConfigReader(self.config, self.log)

        # act
        stages = sut.get_stages()

        # assert
        self.assertListEqual(stages, [
            InfiniteSet.from_complement(["HMMPanther", "Gene3D"]),
            InfiniteSet.from_complement(["Novel"]),
            InfiniteSet.all()])

    def test_stages_should_stop_at_first_missing_index(self):
        # arrange
        config = ConfigParser()
        config.read_dict({"infset:sets": {"stages.1": "A",
                                          "stages.3": "B"}})
        sut = SetsFromConfigReader(config, self.log)

        # act
        stages = sut.get_stages()

        # assert
        self.assertListEqual(stages, [InfiniteSet.from_elements(["A"])])

    def test_without_config_should_use_defaults(self):
        # arrange
        sut1 = SetsFromConfigReader(None, self.log)
        sut2 = SetsFromConfigReader(ConfigParser(), self.log,
                                    defaults={"stages.1": "ALL-Seg"})

        # act
        sets1 = sut1.get_sets()
        stages2 = sut2.get_stages()

        # assert
        self.assertDictEqual(sets1, {"default": InfiniteSet.all()})
        self.assertListEqual(stages2, [InfiniteSet.from_complement(["Seg"])])

    def test_returned_sets_should_not_alter_cached_ones(self):
        # arrange
        sut = SetsFromConfigReader(self.config, self.log)

        # act
        sut.get_set("novel").insert("Seg")

        # assert
        self.assertEqual(sut.get_set("novel"),
                         InfiniteSet.from_elements(["Novel"]))

    def test_missing_set_should_raise_exception(self):
        # arrange
        sut = SetsFromConfigReader(self.config, self.log)

        # act / assert
        with self.assertRaises(KeyError):
            sut.get_set("unknown")

    def test_malformed_expression_should_raise_exception(self):
        # arrange
        self.config.set("infset:sets", "broken", "ALL-Seg-")
        sut = SetsFromConfigReader(self.config, self.log)

        # act / assert
        with self.assertRaises(ValueError):
            sut.get_sets()
