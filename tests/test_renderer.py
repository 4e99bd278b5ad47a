"""
Tests for case rendering, numeral alignment and joining.
"""

import unittest

import pytest

from fieldcase_generator.domain.expression import parse_expression
from fieldcase_generator.domain.models import (
    CharCase,
    FirstMiddleLast,
    FirstRest,
    NumAlign,
    TransformSpec,
    Uniform,
    Word,
    WordKind,
)
from fieldcase_generator.domain.renderer import join, render, render_word
from fieldcase_generator.domain.splitter import split_identifier

LOWER, UPPER, KEEP = CharCase.LOWER, CharCase.UPPER, CharCase.KEEP


class TestRenderWord(unittest.TestCase):
    """Character level rules."""

    def test_first_middle_last(self):
        word = Word("Variant", WordKind.ALPHA)

        self.assertEqual(render_word(word, FirstMiddleLast(UPPER, LOWER, UPPER)), "VarianT")
        self.assertEqual(render_word(word, FirstMiddleLast(LOWER, UPPER, LOWER)), "vARIANt")

    def test_first_rest(self):
        self.assertEqual(render_word(Word("hELLO", WordKind.ALPHA), FirstRest(UPPER, LOWER)), "Hello")

    def test_single_character_uses_first_rule(self):
        word = Word("a", WordKind.ALPHA)

        self.assertEqual(render_word(word, FirstMiddleLast(UPPER, LOWER, LOWER)), "A")
        self.assertEqual(render_word(word, FirstRest(UPPER, LOWER)), "A")

    def test_two_characters_use_first_and_last(self):
        self.assertEqual(
            render_word(Word("ab", WordKind.ALPHA), FirstMiddleLast(LOWER, LOWER, UPPER)), "aB"
        )

    def test_keep_leaves_characters_unchanged(self):
        self.assertEqual(render_word(Word("MiXeD", WordKind.ALPHA), Uniform(KEEP)), "MiXeD")
        self.assertEqual(
            render_word(Word("MiXeD", WordKind.ALPHA), FirstMiddleLast(KEEP, LOWER, KEEP)), "MixeD"
        )

    def test_no_rule_leaves_word_unchanged(self):
        self.assertEqual(render_word(Word("MiXeD", WordKind.ALPHA), None), "MiXeD")

    def test_digits_are_unaffected_by_case(self):
        self.assertEqual(render_word(Word("42", WordKind.DIGIT), Uniform(UPPER)), "42")

    def test_non_ascii_letters_are_not_case_mapped(self):
        self.assertEqual(render_word(Word("straße", WordKind.ALPHA), Uniform(UPPER)), "STRAßE")


class TestWordRoles(unittest.TestCase):
    """Word level rules."""

    def test_roles_by_position(self):
        spec = parse_expression("C c C")

        self.assertEqual(render(split_identifier("one_two_three_four"), spec), ["ONE", "two", "three", "FOUR"])

    def test_single_word_uses_first_rule(self):
        spec = parse_expression("C c c")

        self.assertEqual(render(split_identifier("single"), spec), ["SINGLE"])

    def test_two_words_use_first_and_last(self):
        spec = parse_expression("C c Cc")

        self.assertEqual(render(split_identifier("one_two"), spec), ["ONE", "Two"])

    def test_uniform_rule_applies_to_every_word(self):
        self.assertEqual(render(split_identifier("aB_cD"), parse_expression("Cc")), ["A", "B", "C", "D"])

    def test_without_case_spec_characters_are_unchanged(self):
        self.assertEqual(render(split_identifier("MiXed_Case"), TransformSpec()), ["Mi", "Xed", "Case"])

    def test_empty_identifier_renders_nothing(self):
        self.assertEqual(render(split_identifier(""), parse_expression("C|_")), [])


class TestNumeralAlignment(unittest.TestCase):
    """Digit runs glued left, right or kept apart."""

    def setUp(self):
        self.identifier = split_identifier("Alpha2Beta")

    def test_left(self):
        self.assertEqual(render(self.identifier, TransformSpec(num_align=NumAlign.LEFT)), ["Alpha2", "Beta"])

    def test_right(self):
        self.assertEqual(render(self.identifier, TransformSpec(num_align=NumAlign.RIGHT)), ["Alpha", "2Beta"])

    def test_middle(self):
        self.assertEqual(
            render(self.identifier, TransformSpec(num_align=NumAlign.MIDDLE)), ["Alpha", "2", "Beta"]
        )

    def test_no_alignment_keeps_digits_standalone(self):
        self.assertEqual(render(self.identifier, TransformSpec()), ["Alpha", "2", "Beta"])

    def test_left_with_leading_digits_stays_standalone(self):
        self.assertEqual(
            render(split_identifier("2Fast"), TransformSpec(num_align=NumAlign.LEFT)), ["2", "Fast"]
        )

    def test_right_with_trailing_digits_stays_standalone(self):
        self.assertEqual(
            render(split_identifier("Fast2"), TransformSpec(num_align=NumAlign.RIGHT)), ["Fast", "2"]
        )

    def test_each_digit_run_is_aligned(self):
        identifier = split_identifier("A2B3C")

        self.assertEqual(render(identifier, TransformSpec(num_align=NumAlign.LEFT)), ["A2", "B3", "C"])
        self.assertEqual(render(identifier, TransformSpec(num_align=NumAlign.RIGHT)), ["A", "2B", "3C"])

    def test_consecutive_digit_runs_chain(self):
        identifier = split_identifier("a_1_2_b")

        self.assertEqual(render(identifier, TransformSpec(num_align=NumAlign.LEFT)), ["a12", "b"])
        self.assertEqual(render(identifier, TransformSpec(num_align=NumAlign.RIGHT)), ["a", "12b"])

    def test_alignment_without_digits_changes_nothing(self):
        identifier = split_identifier("no_digits_here")

        for align in NumAlign:
            self.assertEqual(render(identifier, TransformSpec(num_align=align)), ["no", "digits", "here"])

    def test_roles_are_taken_before_merging(self):
        spec = parse_expression("c C c 1__")

        self.assertEqual(render(split_identifier("AVeryLong2"), spec), ["a", "VERY", "LONG2"])


@pytest.mark.parametrize(
    "units, separator, expected",
    [
        (["a", "b", "c"], "_", "a_b_c"),
        (["a", "b"], "", "ab"),
        (["only"], "-", "only"),
        ([], "_", ""),
        (["Las", "vERy"], "*-*", "Las*-*vERy"),
    ],
)
def test_join(units, separator, expected):
    assert join(units, separator) == expected
