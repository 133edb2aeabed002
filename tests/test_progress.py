from __future__ import annotations

import unittest
from io import StringIO

from iconsprites.progress import ProgressBar


class ProgressBarTests(unittest.TestCase):
    def test_redirected_output_is_sparse(self) -> None:
        stream = StringIO()
        progress = ProgressBar("sprites", 100, stream=stream)
        for current in range(1, 101):
            progress.update(current)

        lines = stream.getvalue().splitlines()
        self.assertLessEqual(len(lines), 12)
        self.assertTrue(lines[0].startswith("[sprites] 1/100 "))
        self.assertTrue(lines[-1].startswith("[sprites] 100/100 "))

    def test_small_runs_report_every_group(self) -> None:
        stream = StringIO()
        progress = ProgressBar("sprites", 3, stream=stream)
        for current in range(1, 4):
            progress.update(current)

        self.assertEqual(
            [line.split(" ")[1] for line in stream.getvalue().splitlines()],
            ["1/3", "2/3", "3/3"],
        )


if __name__ == "__main__":
    unittest.main()
