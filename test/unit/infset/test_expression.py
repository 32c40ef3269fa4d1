import unittest

from infset.backing.sorted_backing_set import SortedBackingSet
from infset.expression import format_expression, parse_expression
from infset.infinite_set import InfiniteSet


class TestParseExpression(unittest.TestCase):
    def test_single_name_should_give_singleton(self):
        # act
        sut = parse_expression("HMMPanther")

        # assert
        self.assertEqual(sut, InfiniteSet.from_elements(["HMMPanther"]))

    def test_all_should_give_universal_set(self):
        # act / assert
        self.assertEqual(parse_expression("ALL"), InfiniteSet.all())
        self.assertEqual(parse_expression("ALL+HMMPanther"),
                         InfiniteSet.all())

    def test_excluded_names_should_give_complement(self):
        # act
        sut = parse_expression("ALL - HMMPanther -Gene3D")

        # assert
        self.assertEqual(sut, InfiniteSet.from_complement(
            ["HMMPanther", "Gene3D"]))
        self.assertIn("HMMPfam", sut)
        self.assertNotIn("Gene3D", sut)

    def test_added_names_should_give_union(self):
        # act
        sut = parse_expression("HMMPanther+HMMPfam")

        # assert
        self.assertEqual(sut, InfiniteSet.from_elements(
            ["HMMPanther", "HMMPfam"]))

    def test_terms_should_be_applied_left_to_right(self):
        # act
        sut1 = parse_expression("ALL-Seg+Seg")
        sut2 = parse_expression("Seg+Coil-Seg")

        # assert
        self.assertEqual(sut1, InfiniteSet.all())
        self.assertEqual(sut2, InfiniteSet.from_elements(["Coil"]))

    def test_blank_expression_should_give_empty_set(self):
        # act / assert
        self.assertEqual(parse_expression(""), InfiniteSet.empty())
        self.assertEqual(parse_expression("   "), InfiniteSet.empty())

    def test_custom_all_token_and_backing(self):
        # act
        sut = parse_expression("*-b-a", all_token="*",
                               backing=SortedBackingSet)

        # assert
        self.assertIsInstance(sut.storage, SortedBackingSet)
        self.assertListEqual(list(sut.as_complement()), ["a", "b"])

    def test_leading_sign_should_apply_to_the_empty_set(self):
        # act / assert
        self.assertEqual(parse_expression("-Seg"), InfiniteSet.empty())
        self.assertEqual(parse_expression("+Seg"),
                         InfiniteSet.from_elements(["Seg"]))

    def test_dangling_or_doubled_operators_should_raise_exception(self):
        # arrange
        invalid_expressions = ["a-", "a+", "+", "-", "a+-b", "a--b",
                               "--a", "ALL- -Seg", "a+ +b"]

        # act / assert
        for text in invalid_expressions:
            with self.assertRaises(ValueError, msg=text):
                parse_expression(text)


class TestFormatExpression(unittest.TestCase):
    def test_sets_should_be_formatted_with_sorted_names(self):
        # act / assert
        self.assertEqual(format_expression(
            InfiniteSet.from_elements(["b", "a"])), "a+b")
        self.assertEqual(format_expression(
            InfiniteSet.from_complement(["b", "a"])), "ALL-a-b")
        self.assertEqual(format_expression(InfiniteSet.empty()), "")
        self.assertEqual(format_expression(InfiniteSet.all()), "ALL")

    def test_formatted_expression_should_parse_back(self):
        # arrange
        sets = [parse_expression("ALL-HMMPanther-Gene3D"),
                parse_expression("Novel+Seg"),
                InfiniteSet.all(), InfiniteSet.empty()]

        # act
        results = [parse_expression(format_expression(s)) for s in sets]

        # assert
        self.assertListEqual(results, sets)

    def test_names_that_cannot_be_parsed_back_should_raise_exception(self):
        # arrange
        invalid_sets = [InfiniteSet.from_elements(["a-b"]),
                        InfiniteSet.from_complement(["ALL"]),
                        InfiniteSet.from_elements([" a"]),
                        InfiniteSet.from_elements([1])]

        # act / assert
        for invalid in invalid_sets:
            with self.assertRaises(ValueError):
                format_expression(invalid)
