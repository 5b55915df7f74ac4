"""Planar guillotine partitioner: free area kept as disjoint rectangles."""

from __future__ import annotations

from typing import NamedTuple, Optional

from cuboid_packer.errors import FreeRegionError
from cuboid_packer.geometry import Rect, exceeds, is_negative
from cuboid_packer.packing.heuristics import (
    FreeRectChoice,
    SplitRule,
    score_rect,
    split_horizontal,
)


class RectFit(NamedTuple):
    """Where a candidate would go: free rectangle index and oriented rect."""

    index: int
    rect: Rect


class Guillotine2D:
    """
    Free space of a width x height area.

    Placement is two-step: find_position() evaluates without touching the
    free list, commit() consumes the chosen free rectangle and re-splits it.
    """

    def __init__(self, width: float, height: float) -> None:
        self.width = width
        self.height = height
        self.free_rects: list[Rect] = []
        self.used_rects: list[Rect] = []
        self._add_free_rect(Rect(0.0, 0.0, width, height))

    def is_empty(self) -> bool:
        return not self.used_rects

    def find_position(
        self,
        width: float,
        height: float,
        choice: FreeRectChoice,
    ) -> Optional[RectFit]:
        """
        Find the best free rectangle for a width x height candidate.

        The candidate is tried upright and turned 90 degrees. The first free
        rectangle that matches exactly either way wins outright; otherwise
        the lowest score wins, earliest index on ties.
        """
        best: Optional[RectFit] = None
        best_score = float("inf")

        for index, free in enumerate(self.free_rects):
            if width == free.width and height == free.height:
                return RectFit(index, Rect(free.x, free.y, width, height))
            if height == free.width and width == free.height:
                return RectFit(index, Rect(free.x, free.y, height, width))

            for w, h in ((width, height), (height, width)):
                if w <= free.width and h <= free.height:
                    score = score_rect(choice, free.width, free.height, w, h)
                    if score < best_score:
                        best_score = score
                        best = RectFit(index, Rect(free.x, free.y, w, h))

        return best

    def commit(self, fit: RectFit, rule: SplitRule) -> None:
        """Consume fit.index with fit.rect and split the leftover by rule."""
        if not 0 <= fit.index < len(self.free_rects):
            raise FreeRegionError(
                f"free rectangle index out of range: {fit.index} "
                f"(free rectangles: {len(self.free_rects)})"
            )
        free = self.free_rects[fit.index]
        placed = fit.rect
        horizontal = split_horizontal(
            rule, free.width, free.height, placed.width, placed.height
        )

        bottom = Rect(
            free.x,
            free.y + placed.height,
            free.width if horizontal else placed.width,
            free.height - placed.height,
        )
        right = Rect(
            free.x + placed.width,
            free.y,
            free.width - placed.width,
            placed.height if horizontal else free.height,
        )

        del self.free_rects[fit.index]
        if not bottom.is_degenerate():
            self._add_free_rect(bottom)
        if not right.is_degenerate():
            self._add_free_rect(right)

        self.used_rects.append(placed)

    def _add_free_rect(self, rect: Rect) -> None:
        if is_negative(rect.x) or is_negative(rect.y):
            raise FreeRegionError(
                f"add free rectangle failed: negative position, rectangle: {rect}"
            )
        if exceeds(rect.x + rect.width, self.width) or exceeds(rect.y + rect.height, self.height):
            raise FreeRegionError(
                f"add free rectangle failed: out of area "
                f"({self.width} x {self.height}), rectangle: {rect}"
            )
        self.free_rects.append(rect)
