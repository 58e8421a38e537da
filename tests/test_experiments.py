#!/usr/bin/env python3
"""
Tests for the experiments driver.
"""

import io
import os
import shutil
import tempfile
import unittest
from contextlib import redirect_stdout
from assocarray import experiments


S2S_TRACE = [
    "s2s.size() -> 0",
    "s2s.set(a, apple)",
    "s2s.set(A, aardvark)",
    "s2s.size() -> 2",
    "s2s.has_key(a) -> True",
    "s2s.has_key(A) -> True",
    "s2s.get(a) -> apple",
    "s2s.get(A) -> aardvark",
    "s2s.remove(a)",
    "s2s.size() -> 1",
    "s2s.get(a) -> KeyNotFoundError: a",
    "s2s.get(A) -> aardvark",
    "s2s.remove(aardvark)",
    "s2s.size() -> 1",
    "s2s.get(a) -> KeyNotFoundError: a",
    "s2s.get(A) -> aardvark",
]


class TestExperiments(unittest.TestCase):
    """Test experiment traces."""

    def setUp(self):
        """Set up test environment."""
        self.temp_dir = tempfile.mkdtemp()

    def tearDown(self):
        """Clean up test environment."""
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def test_divider(self):
        """Test divider layout."""
        pen = io.StringIO()
        experiments.divider(pen)
        self.assertEqual(pen.getvalue(), "\n" + "-" * 48 + "\n\n")

    def test_strings_to_strings(self):
        """Test the s2s trace."""
        pen = io.StringIO()
        s2s = experiments.experiment_strings_to_strings(pen)

        self.assertEqual(pen.getvalue().splitlines(), S2S_TRACE)
        self.assertEqual(s2s.format(), "{ A: aardvark }")

    def test_big_int_to_big_int(self):
        """Test the b2b trace."""
        pen = io.StringIO()
        b2b = experiments.experiment_big_int_to_big_int(pen)
        lines = pen.getvalue().splitlines()

        # 11 sets, 11 gets, 5 removes, 11 gets, 4 sets, 11 gets
        self.assertEqual(len(lines), 53)
        self.assertIn("b2b.get(1) -> KeyNotFoundError: 1", lines[27:38])
        self.assertEqual(lines[-11:], [
            "b2b.get(0) -> 10",
            "b2b.get(1) -> KeyNotFoundError: 1",
            "b2b.get(2) -> 4",
            "b2b.get(3) -> 13",
            "b2b.get(4) -> 16",
            "b2b.get(5) -> KeyNotFoundError: 5",
            "b2b.get(6) -> 16",
            "b2b.get(7) -> KeyNotFoundError: 7",
            "b2b.get(8) -> 64",
            "b2b.get(9) -> 19",
            "b2b.get(10) -> 100",
        ])
        self.assertEqual(b2b.size(), 8)

    def test_run_experiments(self):
        """Test the full run prints both maps."""
        pen = io.StringIO()
        maps = experiments.run_experiments(pen)
        output = pen.getvalue()

        self.assertEqual([m.name for m in maps], ["s2s", "b2b"])
        self.assertTrue(output.startswith("\n" + "-" * 48 + "\n\n"))
        self.assertEqual(output.count("-" * 48), 3)
        self.assertIn("s2s = { A: aardvark }", output)
        self.assertIn("b2b = { 0: 10, 3: 13, 2: 4, 9: 19, 4: 16, 6: 16, 8: 64, 10: 100 }", output)
        self.assertIn("Current memory usage:", output)

    def test_main_writes_output_file(self):
        """Test the CLI with --output."""
        path = os.path.join(self.temp_dir, "trace.txt")
        code = experiments.main(["--output", path])

        self.assertEqual(code, 0)
        with open(path, encoding="utf-8") as f:
            content = f.read()
        self.assertIn("s2s.set(a, apple)", content)
        self.assertIn("b2b.set(10, 100)", content)

    def test_main_prints_to_stdout(self):
        """Test the CLI default output."""
        out = io.StringIO()
        with redirect_stdout(out):
            code = experiments.main([])

        self.assertEqual(code, 0)
        self.assertIn("s2s.size() -> 0", out.getvalue())


if __name__ == "__main__":
    unittest.main()
