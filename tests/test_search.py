#!/usr/bin/env python3
import contextlib
import io
import tempfile
import unittest
from pathlib import Path

from dra.errors import ResolveError, StoreError
from dra.model import Range, VerseRow
from dra.reference import parse_query
from dra.search import format_verse, get_verses, print_verses, validate_range

from tests.store_fixture import build_store


class ValidateRangeTests(unittest.TestCase):
    def test_end_chapter_before_start_always_fails(self):
        for start_verse, end_verse in ((1, 1), (1, 50), (50, 1)):
            with self.subTest(start_verse=start_verse, end_verse=end_verse):
                with self.assertRaises(ResolveError) as ctx:
                    validate_range(Range("Gn", 3, 2, start_verse, end_verse))
                self.assertIn("end_chapter precedes start_chapter", str(ctx.exception))

    def test_end_verse_before_start_in_same_chapter_fails(self):
        with self.assertRaises(ResolveError) as ctx:
            validate_range(Range("Gn", 1, 1, 5, 4))
        self.assertIn("end_verse precedes start_verse", str(ctx.exception))

    def test_lower_end_verse_in_later_chapter_is_valid(self):
        validate_range(Range("Gn", 1, 2, 31, 3))

    def test_invalid_range_fails_before_store_is_opened(self):
        with tempfile.TemporaryDirectory() as td:
            missing = Path(td) / "missing.db"
            with self.assertRaises(ResolveError):
                get_verses(Range("Gn", 2, 1, 1, 1), missing)


class GetVersesTests(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.db_path = build_store(Path(self._tmp.name) / "dra.db")

    def tearDown(self):
        self._tmp.cleanup()

    def labels(self, query):
        return [row.label for row in get_verses(parse_query(query), self.db_path)]

    def test_single_verse(self):
        rows = get_verses(parse_query("Gn 1:1"), self.db_path)
        self.assertEqual(len(rows), 1)
        self.assertEqual(rows[0].label, "1:1")
        self.assertTrue(rows[0].text.startswith("In the beginning"))

    def test_verse_range_in_ascending_order(self):
        self.assertEqual(self.labels("Gn 1:1-3"), ["1:1", "1:2", "1:3"])

    def test_whole_chapter(self):
        self.assertEqual(self.labels("Gn 2"), ["2:1", "2:2", "2:3"])

    def test_range_across_chapters(self):
        self.assertEqual(self.labels("Gn 1:4-2:2"), ["1:4", "1:5", "2:1", "2:2"])

    def test_range_stays_inside_book(self):
        rows = get_verses(parse_query("Ex 1:1-2"), self.db_path)
        self.assertEqual([r.label for r in rows], ["1:1", "1:2"])
        self.assertTrue(all(r.book == "Ex" for r in rows))

    def test_single_verse_ranges_return_at_most_one_row(self):
        for query in ("Gn 1:1", "Gn 1:5", "Gn 2:3", "Gn 3:1", "Gn 1:9", "Ex 1:2", "Xx 1:1"):
            with self.subTest(query=query):
                self.assertLessEqual(len(get_verses(parse_query(query), self.db_path)), 1)

    def test_rows_never_fall_outside_range(self):
        for query in ("Gn 1:2-3:1", "Gn 1:3-2:2", "Gn 1", "Gn 2:2-3", "Gn 1:5-2:1"):
            rng = parse_query(query)
            start = (rng.start_chapter, rng.start_verse)
            end = (rng.end_chapter, rng.end_verse)
            with self.subTest(query=query):
                rows = get_verses(rng, self.db_path)
                self.assertTrue(rows)
                for row in rows:
                    self.assertEqual(row.book, rng.book)
                    self.assertLessEqual(start, (row.chapter, row.verse))
                    self.assertLessEqual((row.chapter, row.verse), end)

    def test_unknown_book_is_empty_not_error(self):
        self.assertEqual(get_verses(parse_query("Xx 1:1"), self.db_path), [])

    def test_missing_verse_is_empty(self):
        self.assertEqual(get_verses(parse_query("Gn 1:9"), self.db_path), [])

    def test_missing_store_raises_store_error(self):
        with self.assertRaises(StoreError):
            get_verses(parse_query("Gn 1:1"), Path(self._tmp.name) / "nope.db")


class PrintVersesTests(unittest.TestCase):
    def test_label_column_is_padded(self):
        row = VerseRow("Gn", 1, 1, "In the beginning God created heaven, and earth.")
        self.assertEqual(format_verse(row), "1:1     In the beginning God created heaven, and earth.")

    def test_long_label_is_not_cut(self):
        row = VerseRow("Ps", 118, 176, "I have gone astray like a sheep that is lost.")
        self.assertTrue(format_verse(row).startswith("118:176 I have"))

    def test_empty_result_prints_nothing(self):
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            print_verses([])
        self.assertEqual(out.getvalue(), "")


if __name__ == "__main__":
    unittest.main()
