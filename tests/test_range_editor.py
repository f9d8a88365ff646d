import unittest

from ast_node import SourceRange
from errors import EditConflictError, InvalidEditError
from range_editor import (
    INSERT,
    REMOVE,
    apply_edits,
    insert,
    range_with_surrounding_comma,
    range_with_surrounding_space,
    remove,
    replace,
    select_compatible_edits,
)


class RangeDerivationTest(unittest.TestCase):
    def test_surrounding_space_on_the_left(self):
        source = 'shell_output("cmd",  0)'
        zero = SourceRange(source.index("0"), source.index("0") + 1)

        widened = range_with_surrounding_space(source, zero, side="left")

        self.assertEqual(",  0", source[widened.begin - 1:widened.end])
        self.assertEqual("  0", source[widened.begin:widened.end])

    def test_surrounding_space_respects_newlines_flag(self):
        source = "a\n  b  \nc"
        b = SourceRange(4, 5)

        self.assertEqual(SourceRange(1, 8), range_with_surrounding_space(source, b))
        self.assertEqual(SourceRange(2, 7), range_with_surrounding_space(source, b, newlines=False))

    def test_surrounding_comma_takes_one_comma_per_side(self):
        source = "(a,,b,c)"
        b = SourceRange(4, 5)

        self.assertEqual(SourceRange(3, 6), range_with_surrounding_comma(source, b))
        self.assertEqual(SourceRange(3, 5), range_with_surrounding_comma(source, b, side="left"))
        self.assertEqual(SourceRange(4, 6), range_with_surrounding_comma(source, b, side="right"))

    def test_offsets_can_be_relative_to_a_slice(self):
        text = 'x = shell_output("cmd", 0)'
        base = 4
        zero = SourceRange(text.index("0"), text.index("0") + 1)

        widened = range_with_surrounding_space(text[base:], zero, side="left", base=base)
        widened = range_with_surrounding_comma(text[base:], widened, side="left", base=base)

        self.assertEqual(", 0", text[widened.begin:widened.end])

    def test_unknown_side_is_rejected(self):
        with self.assertRaises(ValueError):
            range_with_surrounding_comma("a,b", SourceRange(0, 1), side="up")


class ApplyEditsTest(unittest.TestCase):
    def test_edits_apply_in_source_order_regardless_of_input_order(self):
        source = 'system "/usr/local/bin/foo", 0'
        edits = [
            remove(SourceRange(27, 30)),
            replace(SourceRange(8, 22), "#{bin}"),
            insert(0, "# audited\n"),
        ]

        self.assertEqual('# audited\nsystem "#{bin}/foo"', apply_edits(source, edits))

    def test_edit_kinds(self):
        self.assertEqual(INSERT, insert(3, "x").operation)
        self.assertTrue(insert(3, "x").source_range.is_empty)
        self.assertEqual(REMOVE, remove(SourceRange(0, 1)).operation)
        self.assertEqual("", remove(SourceRange(0, 1)).text)

    def test_overlapping_edits_are_rejected(self):
        with self.assertRaises(EditConflictError):
            apply_edits("abcdef", [replace(SourceRange(0, 3), "x"), remove(SourceRange(2, 4))])

    def test_adjacent_edits_are_fine(self):
        self.assertEqual("xy", apply_edits("abcd", [replace(SourceRange(0, 2), "x"), replace(SourceRange(2, 4), "y")]))

    def test_insertion_inside_a_replaced_span_conflicts(self):
        replaced = replace(SourceRange(0, 4), "X")
        inside = insert(2, "Y")

        self.assertTrue(replaced.source_range.overlaps(inside.source_range))
        with self.assertRaises(EditConflictError):
            apply_edits("abcdef", [replaced, inside])
        self.assertEqual([replaced], select_compatible_edits([inside, replaced]))

    def test_insertions_at_span_boundaries_apply(self):
        edits = [replace(SourceRange(1, 3), "X"), insert(1, "<"), insert(3, ">")]

        self.assertEqual("a<X>d", apply_edits("abcd", edits))

    def test_edits_outside_the_source_are_rejected(self):
        with self.assertRaises(InvalidEditError):
            apply_edits("abc", [remove(SourceRange(2, 9))])

    def test_select_compatible_edits_keeps_the_earliest(self):
        first = replace(SourceRange(0, 3), "x")
        clash = remove(SourceRange(2, 4))
        later = insert(5, "!")

        self.assertEqual([first, later], select_compatible_edits([later, clash, first]))


if __name__ == "__main__":
    unittest.main()
