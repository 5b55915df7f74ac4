"""Contract shared by the placement algorithms."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

from cuboid_packer.models import Box, PackParameters, Placement
from cuboid_packer.packing.constraints import WeightConstraint


@dataclass
class Attempt:
    """Outcome of one algorithm inserting one ordering into an empty bin."""

    algorithm: str
    placements: list[Placement] = field(default_factory=list)
    unplaced: list[int] = field(default_factory=list)

    @property
    def packed_volume(self) -> float:
        return sum(p.volume for p in self.placements)


class PackingAlgorithm:
    """
    Fills a single empty bin.

    Subclasses implement place(); insert() runs the boxes through it in
    order and applies the bin's weight capacity the same way for every
    algorithm. An instance is good for exactly one bin.
    """

    def __init__(self, parameters: PackParameters) -> None:
        self.parameters = parameters
        self.bin = parameters.bin
        self.weight = WeightConstraint(parameters.bin.max_weight)
        self.loaded_weight = 0.0

    @property
    def name(self) -> str:
        raise NotImplementedError

    def place(self, index: int, box: Box) -> Optional[Placement]:
        """Place one box, or return None if it does not fit."""
        raise NotImplementedError

    def insert(self, boxes: Iterable[tuple[int, Box]]) -> Attempt:
        attempt = Attempt(algorithm=self.name)
        for index, box in boxes:
            placement = None
            if self.weight.admits(self.loaded_weight, box.weight):
                placement = self.place(index, box)
            if placement is None:
                attempt.unplaced.append(index)
                continue
            self.loaded_weight += box.weight
            attempt.placements.append(placement)
        return attempt

    def __str__(self) -> str:
        return self.name
