"""
Minimal test runner using only the standard library.
Run: python3 run_tests.py
"""

import sys
import unittest
from pathlib import Path

# Add src to path so fuzzyscore is importable
sys.path.insert(0, str(Path(__file__).parent / "src"))

TEAMS = ["Atlanta Falcons", "Dallas Cowboys", "New York Jets"]


# ── Matcher Tests ─────────────────────────────────────────────

class TestMatchingBlocks(unittest.TestCase):
    def test_known_blocks(self):
        from fuzzyscore.matcher import find_matching_blocks
        self.assertEqual(
            find_matching_blocks("abxcd", "abcd"),
            [(0, 0, 2), (3, 2, 2), (5, 4, 0)],
        )

    def test_empty(self):
        from fuzzyscore.matcher import find_matching_blocks
        self.assertEqual(find_matching_blocks("", ""), [(0, 0, 0)])

    def test_autojunk(self):
        from fuzzyscore.matcher import find_matching_blocks
        a, b = "b" + "a" * 250, "a" * 250 + "b"
        self.assertEqual(find_matching_blocks(a, b), [(0, 250, 1), (251, 251, 0)])
        self.assertEqual(
            find_matching_blocks(a, b, autojunk=False),
            [(1, 0, 250), (251, 251, 0)],
        )


class TestMatcherRatio(unittest.TestCase):
    def test_empty(self):
        from fuzzyscore.matcher import ratio
        self.assertEqual(ratio("", ""), 100)
        self.assertEqual(ratio("", "nonempty"), 0)

    def test_symmetric(self):
        from fuzzyscore.matcher import ratio
        for a, b in [("tide", "diet"), ("abxcd", "abcd"), ("ab", "ba")]:
            self.assertEqual(ratio(a, b), ratio(b, a), f"{a!r} / {b!r}")


# ── Ratio Function Tests ──────────────────────────────────────

class TestRatios(unittest.TestCase):
    def test_ratio(self):
        from fuzzyscore.fuzz import ratio
        self.assertEqual(ratio("this is a test", "this is a test!"), 97)
        self.assertEqual(ratio("fuzzy wuzzy was a bear", "wuzzy fuzzy was a bear"), 91)
        self.assertEqual(ratio("fuzzy was a bear", "fuzzy fuzzy was a bear"), 84)

    def test_partial_ratio(self):
        from fuzzyscore.fuzz import partial_ratio
        self.assertEqual(partial_ratio("this is a test", "this is a test!"), 100)

    def test_token_sort_ratio(self):
        from fuzzyscore.fuzz import token_sort_ratio
        self.assertEqual(
            token_sort_ratio("fuzzy wuzzy was a bear", "wuzzy fuzzy was a bear"),
            100,
        )

    def test_token_set_ratio(self):
        from fuzzyscore.fuzz import token_set_ratio
        self.assertEqual(
            token_set_ratio("fuzzy was a bear", "fuzzy fuzzy was a bear"), 100
        )
        self.assertEqual(token_set_ratio("a a b", "a b"), 100)

    def test_wratio(self):
        from fuzzyscore.fuzz import wratio
        self.assertEqual(wratio("new york mets", "the wonderful new york mets"), 90)
        self.assertEqual(
            wratio("new york mets vs atlanta braves",
                   "atlanta braves vs new york mets"),
            95,
        )


# ── Extractor Tests ───────────────────────────────────────────

class TestExtract(unittest.TestCase):
    def test_extract_one(self):
        from fuzzyscore.extract import extract_one
        from fuzzyscore.fuzz import wratio
        from fuzzyscore.text import full_process
        self.assertEqual(
            extract_one("cowboys", TEAMS, full_process, wratio, 0),
            ("Dallas Cowboys", 90),
        )

    def test_extract_one_empty(self):
        from fuzzyscore.extract import extract_one
        self.assertIsNone(extract_one("cowboys", []))

    def test_extract_stable(self):
        from fuzzyscore.extract import extract
        from fuzzyscore.fuzz import ratio
        self.assertEqual(
            extract("abc", ["abd", "xyz", "abc", "abe"], None, ratio),
            [("abc", 100), ("abd", 67), ("abe", 67), ("xyz", 0)],
        )

    def test_invalid_score(self):
        from fuzzyscore.exceptions import InvalidScore
        from fuzzyscore.extract import extract_one
        with self.assertRaises(InvalidScore):
            extract_one("abc", ["abc"], scorer=lambda a, b: -1)


if __name__ == "__main__":
    unittest.main(verbosity=2)
