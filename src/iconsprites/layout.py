from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def overlaps(self, other: Rect) -> bool:
        return (
            (self.x < other.right)
            and (self.right > other.x)
            and (self.y < other.bottom)
            and (self.bottom > other.y)
        )

    def contains(self, other: Rect) -> bool:
        return (
            (other.x >= self.x)
            and (other.y >= self.y)
            and (other.right <= self.right)
            and (other.bottom <= self.bottom)
        )


class MaxRectsBin:
    """MaxRects bin with best-area-fit placement."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.free_rects: list[Rect] = [Rect(0, 0, width, height)]

    def place(self, width: int, height: int) -> tuple[int, int] | None:
        best: Rect | None = None
        best_score: tuple[int, int, int] | None = None
        for free in self.free_rects:
            if (width > free.width) or (height > free.height):
                continue
            score = ((free.width * free.height) - (width * height), free.y, free.x)
            if (best_score is None) or (score < best_score):
                best_score = score
                best = free

        if best is None:
            return None

        placed = Rect(best.x, best.y, width, height)
        next_free: list[Rect] = []
        for free in self.free_rects:
            if free.overlaps(placed):
                next_free.extend(self._split(free, placed))
            else:
                next_free.append(free)
        self.free_rects = self._prune(next_free)
        return placed.x, placed.y

    @staticmethod
    def _split(free: Rect, used: Rect) -> list[Rect]:
        parts: list[Rect] = []
        if used.x > free.x:
            parts.append(Rect(free.x, free.y, used.x - free.x, free.height))
        if used.right < free.right:
            parts.append(Rect(used.right, free.y, free.right - used.right, free.height))
        if used.y > free.y:
            parts.append(Rect(free.x, free.y, free.width, used.y - free.y))
        if used.bottom < free.bottom:
            parts.append(Rect(free.x, used.bottom, free.width, free.bottom - used.bottom))
        return parts

    @staticmethod
    def _prune(rects: list[Rect]) -> list[Rect]:
        pruned: list[Rect] = []
        for i, a in enumerate(rects):
            contained = False
            for j, b in enumerate(rects):
                if i == j:
                    continue
                # keep the first of two identical rects
                if b.contains(a) and ((a != b) or (j < i)):
                    contained = True
                    break
            if not contained:
                pruned.append(a)
        return pruned


def pack_rectangles(sizes: list[tuple[int, int]]) -> tuple[list[tuple[int, int]], int, int]:
    """Place ``(width, height)`` boxes without overlap.

    Returns the top-left corner of every box in input order plus the used
    width and height. The result only depends on the input sequence.
    """
    if not sizes:
        return [], 0, 0

    total_area = sum(w * h for w, h in sizes)
    side = int(math.sqrt(total_area)) + 1
    width = max(side, max(w for w, _ in sizes))
    height = max(side, max(h for _, h in sizes))

    order = sorted(range(len(sizes)), key=lambda i: max(sizes[i]), reverse=True)

    while True:
        bin_ = MaxRectsBin(width, height)
        positions: dict[int, tuple[int, int]] = {}
        for index in order:
            w, h = sizes[index]
            position = bin_.place(w, h)
            if position is None:
                break
            positions[index] = position
        else:
            break

        if width <= height:
            width *= 2
        else:
            height *= 2

    placed = [positions[i] for i in range(len(sizes))]
    used_width = max(x + w for (x, _), (w, _) in zip(placed, sizes))
    used_height = max(y + h for (_, y), (_, h) in zip(placed, sizes))
    return placed, used_width, used_height
