"""Guillotine algorithm: free space of the bin kept as disjoint cuboids."""

from __future__ import annotations

from typing import Optional

from cuboid_packer.errors import FreeRegionError
from cuboid_packer.geometry import Cuboid, exceeds, is_negative
from cuboid_packer.models import Box, PackParameters, Placement
from cuboid_packer.packing.base import PackingAlgorithm
from cuboid_packer.packing.heuristics import (
    FreeCuboidChoice,
    SplitRule,
    score_cuboid,
    split_horizontal,
)

# Axis permutations as indices into (width, height, depth), in the order
# they are tried. The flag marks permutations that change the vertical edge.
ORIENTATIONS: tuple[tuple[tuple[int, int, int], bool], ...] = (
    ((0, 1, 2), False),  # width x height x depth
    ((0, 2, 1), True),   # width x depth x height
    ((2, 1, 0), False),  # depth x height x width
    ((2, 0, 1), True),   # depth x width x height
    ((1, 0, 2), True),   # height x width x depth
    ((1, 2, 0), True),   # height x depth x width
)


class GuillotineAlgorithm(PackingAlgorithm):
    def __init__(
        self,
        parameters: PackParameters,
        cuboid_choice: FreeCuboidChoice = FreeCuboidChoice.MIN_HEIGHT,
        split_rule: SplitRule = SplitRule.SHORTER_LEFTOVER_AXIS,
    ) -> None:
        super().__init__(parameters)
        # Raises ValueError for anything outside the enumerations
        self.cuboid_choice = FreeCuboidChoice(cuboid_choice)
        self.split_rule = SplitRule(split_rule)
        self.orientations = [
            axes for axes, vertical in ORIENTATIONS
            if parameters.allow_rotate_vertically or not vertical
        ]
        self.free_cuboids: list[Cuboid] = []
        self.used_cuboids: list[Cuboid] = []
        self._add_free_cuboid(Cuboid(0.0, 0.0, 0.0, self.bin.width, self.bin.height, self.bin.depth))

    @property
    def name(self) -> str:
        return f"Guillotine({self.cuboid_choice.value}, {self.split_rule.value})"

    def place(self, index: int, box: Box) -> Optional[Placement]:
        found = self._find_position(box)
        if found is None:
            return None
        free_index, placed = found

        free = self.free_cuboids[free_index]
        del self.free_cuboids[free_index]
        self._split(free, placed)
        self.used_cuboids.append(placed)

        return Placement(
            box_index=index,
            tag=box.tag,
            x=placed.x,
            y=placed.y,
            z=placed.z,
            width=placed.width,
            height=placed.height,
            depth=placed.depth,
            weight=box.weight,
        )

    def _find_position(self, box: Box) -> Optional[tuple[int, Cuboid]]:
        """Best (free cuboid index, oriented placement) over every legal orientation."""
        dims = (box.width, box.height, box.depth)
        best: Optional[tuple[int, Cuboid]] = None
        best_score = float("inf")

        for index, free in enumerate(self.free_cuboids):
            for a, b, c in self.orientations:
                width, height, depth = dims[a], dims[b], dims[c]
                if width > free.width or height > free.height or depth > free.depth:
                    continue
                score = score_cuboid(self.cuboid_choice, free.y, height)
                if score < best_score:
                    best_score = score
                    best = (index, Cuboid(free.x, free.y, free.z, width, height, depth))

        return best

    def _split(self, free: Cuboid, placed: Cuboid) -> None:
        """
        Replace the consumed free cuboid by up to three leftovers.

        bottom: in front of the placement along depth, placement height.
        right: beside the placement along width, placement height.
        top: above the placement, full free footprint.
        """
        horizontal = split_horizontal(
            self.split_rule, free.width, free.depth, placed.width, placed.depth
        )

        bottom = Cuboid(
            x=free.x,
            y=free.y,
            z=free.z + placed.depth,
            width=free.width if horizontal else placed.width,
            height=placed.height,
            depth=free.depth - placed.depth,
        )
        right = Cuboid(
            x=free.x + placed.width,
            y=free.y,
            z=free.z,
            width=free.width - placed.width,
            height=placed.height,
            depth=placed.depth if horizontal else free.depth,
        )
        top = Cuboid(
            x=free.x,
            y=free.y + placed.height,
            z=free.z,
            width=free.width,
            height=free.height - placed.height,
            depth=free.depth,
        )

        for leftover in (bottom, right, top):
            if not leftover.is_degenerate():
                self._add_free_cuboid(leftover)

    def _add_free_cuboid(self, cuboid: Cuboid) -> None:
        if is_negative(cuboid.x) or is_negative(cuboid.y) or is_negative(cuboid.z):
            raise FreeRegionError(
                f"add free cuboid failed: negative position, algorithm: {self.name}, "
                f"cuboid: {cuboid}"
            )
        if (
            exceeds(cuboid.x + cuboid.width, self.bin.width)
            or exceeds(cuboid.y + cuboid.height, self.bin.height)
            or exceeds(cuboid.z + cuboid.depth, self.bin.depth)
        ):
            raise FreeRegionError(
                f"add free cuboid failed: out of bin, algorithm: {self.name}, "
                f"cuboid: {cuboid}, bin: {self.bin.width} x {self.bin.height} x {self.bin.depth}"
            )
        self.free_cuboids.append(cuboid)
