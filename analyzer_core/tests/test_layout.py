from __future__ import annotations

import unittest
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from analyzer_core.layout import select_layout_mode, visible_row_budget  # noqa: E402


class LayoutTests(unittest.TestCase):
    def test_narrow(self):
        self.assertEqual(select_layout_mode(80), "narrow")

    def test_wide(self):
        self.assertEqual(select_layout_mode(160), "wide")

    def test_row_budget_has_floor(self):
        self.assertEqual(visible_row_budget(50, "wide"), 40)
        self.assertEqual(visible_row_budget(10, "narrow"), 5)


if __name__ == "__main__":
    unittest.main()
