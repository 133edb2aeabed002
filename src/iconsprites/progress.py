from __future__ import annotations

import sys
import time
from typing import TextIO


class ProgressBar:
    def __init__(self, label: str, total: int, stream: TextIO | None = None) -> None:
        self.label = label
        self.total = max(total, 1)
        self.current = 0
        self.stream = stream if stream is not None else sys.stderr
        self.is_tty = self.stream.isatty()
        self.start_time = time.monotonic()
        self.next_non_tty_ratio = 0.0

    def _format_line(self) -> str:
        ratio = min(max(self.current / self.total, 0.0), 1.0)
        elapsed = time.monotonic() - self.start_time
        if self.is_tty:
            width = 24
            filled = int(width * ratio)
            bar = ("#" * filled) + ("-" * (width - filled))
            return f"[{self.label}] [{bar}] {self.current}/{self.total} {elapsed:5.1f}s"
        return f"[{self.label}] {self.current}/{self.total} {elapsed:5.1f}s"

    def update(self, current: int) -> None:
        self.current = min(max(current, 0), self.total)
        if self.is_tty:
            self.stream.write("\r" + self._format_line())
            if self.current >= self.total:
                self.stream.write("\n")
            self.stream.flush()
            return

        ratio = self.current / self.total
        if (self.current < self.total) and (ratio < self.next_non_tty_ratio):
            return

        self.next_non_tty_ratio = min(1.0, ratio + 0.1)
        self.stream.write(self._format_line() + "\n")
        self.stream.flush()
