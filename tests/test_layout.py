from __future__ import annotations

import unittest

from iconsprites.layout import Rect, pack_rectangles


class LayoutTests(unittest.TestCase):
    def assert_valid_layout(self, sizes: list[tuple[int, int]]) -> None:
        positions, width, height = pack_rectangles(sizes)
        self.assertEqual(len(positions), len(sizes))
        rects = [Rect(x, y, w, h) for (x, y), (w, h) in zip(positions, sizes)]
        for i, a in enumerate(rects):
            self.assertGreaterEqual(a.x, 0)
            self.assertGreaterEqual(a.y, 0)
            self.assertLessEqual(a.right, width)
            self.assertLessEqual(a.bottom, height)
            for b in rects[i + 1 :]:
                self.assertFalse(a.overlaps(b), msg=f"{a} overlaps {b}")

    def test_empty_input(self) -> None:
        self.assertEqual(pack_rectangles([]), ([], 0, 0))

    def test_single_rect_sits_at_origin(self) -> None:
        self.assertEqual(pack_rectangles([(16, 16)]), ([(0, 0)], 16, 16))

    def test_mixed_sizes_do_not_overlap(self) -> None:
        self.assert_valid_layout([(16, 16), (32, 32), (18, 18), (16, 16), (64, 64), (24, 24)])
        self.assert_valid_layout([(10, 40), (40, 10), (25, 25)] * 5)

    def test_layout_is_deterministic(self) -> None:
        sizes = [(16, 16), (32, 32), (16, 16), (8, 8)]
        self.assertEqual(pack_rectangles(sizes), pack_rectangles(list(sizes)))


if __name__ == "__main__":
    unittest.main()
