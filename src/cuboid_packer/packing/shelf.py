"""Shelf algorithm: horizontal layers, each packed as a planar guillotine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from cuboid_packer.errors import FreeRegionError
from cuboid_packer.geometry import Rect, exceeds
from cuboid_packer.models import Box, PackParameters, Placement
from cuboid_packer.packing.base import PackingAlgorithm
from cuboid_packer.packing.guillotine2d import Guillotine2D
from cuboid_packer.packing.heuristics import FreeRectChoice, ShelfChoice, SplitRule

# (vertical edge, footprint width, footprint depth)
Orientation = tuple[float, float, float]


@dataclass
class Shelf:
    """A layer starting at start_y; its footprint is the bin's width x depth."""

    start_y: float
    height: float
    planar: Guillotine2D = field(repr=False)

    @property
    def top(self) -> float:
        return self.start_y + self.height


class ShelfAlgorithm(PackingAlgorithm):
    def __init__(
        self,
        parameters: PackParameters,
        rect_choice: FreeRectChoice = FreeRectChoice.BEST_AREA_FIT,
        split_rule: SplitRule = SplitRule.LONGER_LEFTOVER_AXIS,
        shelf_choice: ShelfChoice = ShelfChoice.FIRST_FIT,
    ) -> None:
        super().__init__(parameters)
        self.rect_choice = FreeRectChoice(rect_choice)
        self.split_rule = SplitRule(split_rule)
        self.shelf_choice = ShelfChoice(shelf_choice)
        self.shelves: list[Shelf] = []

    @property
    def name(self) -> str:
        return (
            f"Shelf({self.rect_choice.value}, {self.split_rule.value}, "
            f"{self.shelf_choice.value})"
        )

    @property
    def top(self) -> float:
        """Vertical offset where the next shelf would start."""
        return self.shelves[-1].top if self.shelves else 0.0

    def place(self, index: int, box: Box) -> Optional[Placement]:
        if self.shelf_choice is ShelfChoice.NEXT_FIT:
            candidates = self.shelves[-1:]
        else:
            candidates = self.shelves

        for shelf in candidates:
            placed = self._put_on_shelf(shelf, box)
            if placed is not None:
                return self._placement(index, box, shelf, *placed)

        return self._open_shelf(index, box)

    def shelf_orientations(self, box: Box) -> list[Orientation]:
        """Orientations tried on an existing shelf, longest edge up first."""
        if not self.parameters.allow_rotate_vertically:
            return [(box.height, box.width, box.depth)]
        low, mid, high = box.edges()
        return [(high, mid, low), (mid, low, high), (low, mid, high)]

    def new_shelf_orientations(self, box: Box) -> list[Orientation]:
        """Orientations tried when opening a shelf; the vertical edge sets its height."""
        if not self.parameters.allow_rotate_vertically:
            return [(box.height, box.width, box.depth)]
        low, mid, high = box.edges()
        return [(low, mid, high), (low, high, mid), (high, mid, low)]

    def can_start_new_shelf(self, height: float) -> bool:
        return not exceeds(self.top + height, self.bin.height)

    def _open_shelf(self, index: int, box: Box) -> Optional[Placement]:
        tried: set[float] = set()
        for height, _, _ in self.new_shelf_orientations(box):
            # Same height means same empty shelf and same outcome
            if height in tried or not self.can_start_new_shelf(height):
                continue
            tried.add(height)

            shelf = Shelf(self.top, height, Guillotine2D(self.bin.width, self.bin.depth))
            placed = self._put_on_shelf(shelf, box)
            if placed is not None:
                self.shelves.append(shelf)
                return self._placement(index, box, shelf, *placed)

        return None

    def _put_on_shelf(self, shelf: Shelf, box: Box) -> Optional[tuple[float, Rect]]:
        for vertical, width, depth in self.shelf_orientations(box):
            if vertical > shelf.height:
                continue
            fit = shelf.planar.find_position(width, depth, self.rect_choice)
            if fit is not None:
                shelf.planar.commit(fit, self.split_rule)
                return vertical, fit.rect
        return None

    def _placement(
        self,
        index: int,
        box: Box,
        shelf: Shelf,
        vertical: float,
        footprint: Rect,
    ) -> Placement:
        if shelf.height < vertical:
            raise FreeRegionError(
                f"shelf height {shelf.height} < box height {vertical}, algorithm: {self.name}"
            )
        return Placement(
            box_index=index,
            tag=box.tag,
            x=footprint.x,
            y=shelf.start_y,
            z=footprint.y,
            width=footprint.width,
            height=vertical,
            depth=footprint.height,
            weight=box.weight,
        )
