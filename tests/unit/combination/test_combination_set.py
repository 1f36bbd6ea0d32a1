"""Tests for combination-set accumulation and payload assembly.

Verifies rejection order and reason codes, the exact size boundary, mode
transitions, and that failed operations never mutate the set.
"""

from __future__ import annotations

import logging
import unittest
from types import SimpleNamespace

from snippetpicker.combination import CombinationSet, CommitPayload
from snippetpicker.config import PickerLimits
from snippetpicker.errors import (
    DuplicateError,
    EmptyCombinationError,
    SizeLimitError,
    ValidationError,
)
from snippetpicker.model import Snippet


class CombinationAddTests(unittest.TestCase):
    def test_first_add_enters_combining_mode(self) -> None:
        combination = CombinationSet()
        self.assertFalse(combination.active)
        stored = combination.add_snippet(Snippet("A", "x"))
        self.assertEqual(stored, Snippet("A", "x"))
        self.assertTrue(combination.active)
        self.assertEqual(combination.titles, ("A",))
        self.assertEqual(combination.total_content_length, 1)

    def test_mapping_records_are_stored_as_snippets(self) -> None:
        combination = CombinationSet()
        combination.add_snippet({"title": "A", "content": "abc"})
        self.assertEqual(combination.entries, (Snippet("A", "abc"),))

    def test_attribute_records_are_stored_as_snippets(self) -> None:
        combination = CombinationSet()
        stored = combination.add_snippet(SimpleNamespace(title="A", content="abc"))
        self.assertEqual(stored, Snippet("A", "abc"))
        self.assertEqual(combination.entries, (Snippet("A", "abc"),))
        self.assertEqual(combination.total_content_length, 3)

    def test_duplicate_title_is_rejected_without_change(self) -> None:
        combination = CombinationSet()
        combination.add_snippet(Snippet("A", "one"))
        with self.assertRaises(DuplicateError) as ctx:
            combination.add_snippet(Snippet("A", "two"))
        self.assertEqual(ctx.exception.reason, "duplicate")
        self.assertEqual(len(combination), 1)
        self.assertEqual(combination.total_content_length, 3)

    def test_invalid_structure_is_rejected_first(self) -> None:
        combination = CombinationSet()
        with self.assertLogs("snippetpicker.combination", level=logging.WARNING):
            with self.assertRaises(ValidationError) as ctx:
                combination.add_snippet({"title": "A"})
        self.assertEqual(ctx.exception.reason, "invalid_data")
        self.assertFalse(combination.active)
        self.assertEqual(len(combination), 0)

    def test_exact_size_limit_is_accepted_and_one_more_rejected(self) -> None:
        combination = CombinationSet()
        combination.add_snippet(Snippet("A", "a" * 6_000))
        combination.add_snippet(Snippet("B", "b" * 4_000))
        self.assertEqual(combination.total_content_length, 10_000)
        self.assertEqual(combination.remaining_capacity, 0)

        before = combination.entries
        with self.assertRaises(SizeLimitError) as ctx:
            combination.add_snippet(Snippet("C", "c"))
        self.assertEqual(ctx.exception.reason, "size_limit")
        self.assertEqual(combination.entries, before)
        self.assertEqual(combination.total_content_length, 10_000)

    def test_duplicate_check_precedes_size_check(self) -> None:
        combination = CombinationSet(PickerLimits(max_combined_size=5))
        combination.add_snippet(Snippet("A", "12345"))
        with self.assertRaises(DuplicateError):
            combination.add_snippet(Snippet("A", "6"))


class CombinationRemovalTests(unittest.TestCase):
    def test_remove_recomputes_total_and_keeps_order(self) -> None:
        combination = CombinationSet()
        for title, content in (("A", "x"), ("B", "yy"), ("C", "zzz")):
            combination.add_snippet(Snippet(title, content))
        self.assertTrue(combination.remove_at(1))
        self.assertEqual(combination.titles, ("A", "C"))
        self.assertEqual(combination.total_content_length, 4)
        self.assertTrue(combination.active)

    def test_removing_last_entry_leaves_combining_mode(self) -> None:
        combination = CombinationSet()
        combination.add_snippet(Snippet("A", "x"))
        self.assertTrue(combination.remove_at(0))
        self.assertFalse(combination.active)
        self.assertEqual(combination.total_content_length, 0)

    def test_out_of_range_removal_is_logged_no_op(self) -> None:
        combination = CombinationSet()
        combination.add_snippet(Snippet("A", "x"))
        with self.assertLogs("snippetpicker.combination", level=logging.WARNING) as logs:
            self.assertFalse(combination.remove_at(3))
            self.assertFalse(combination.remove_at(-1))
        self.assertIn("index 3 out of range", logs.output[0])
        self.assertEqual(combination.titles, ("A",))


class CombinationModeTests(unittest.TestCase):
    def test_clear_keeps_mode_flag(self) -> None:
        combination = CombinationSet()
        combination.add_snippet(Snippet("A", "x"))
        combination.clear()
        self.assertEqual(len(combination), 0)
        self.assertEqual(combination.total_content_length, 0)
        self.assertTrue(combination.active)

    def test_exit_combining_mode_clears_and_deactivates(self) -> None:
        combination = CombinationSet()
        combination.add_snippet(Snippet("A", "x"))
        combination.exit_combining_mode()
        self.assertEqual(len(combination), 0)
        self.assertFalse(combination.active)


class CombinationExecuteTests(unittest.TestCase):
    def test_execute_joins_contents_in_insertion_order(self) -> None:
        combination = CombinationSet()
        combination.add_snippet(Snippet("A", "x"))
        combination.add_snippet(Snippet("B", "y"))
        self.assertEqual(combination.execute_combination(), CommitPayload(text="x\ny", titles=("A", "B")))

    def test_execute_on_empty_set_raises(self) -> None:
        combination = CombinationSet()
        with self.assertRaises(EmptyCombinationError) as ctx:
            combination.execute_combination()
        self.assertEqual(ctx.exception.reason, "empty_combination")

    def test_execute_reports_index_of_invalid_member(self) -> None:
        combination = CombinationSet()
        combination.add_snippet(Snippet("A", "x"))
        combination.add_snippet(Snippet("B", "y"))
        # Members are only corrupted by bypassing add_snippet.
        combination._entries[1] = Snippet("B", None)  # type: ignore[arg-type]
        with self.assertLogs("snippetpicker.combination", level=logging.ERROR):
            with self.assertRaises(ValidationError) as ctx:
                combination.execute_combination()
        self.assertEqual(ctx.exception.reason, "validation_failure")
        self.assertEqual(ctx.exception.index, 1)


if __name__ == "__main__":
    unittest.main()
