"""Constraints a packed bin must satisfy."""

from __future__ import annotations

import logging
from typing import Sequence

from cuboid_packer.errors import VerificationError, Violation
from cuboid_packer.geometry import boxes_overlap, exceeds, is_negative
from cuboid_packer.models import Bin, Placement

logger = logging.getLogger(__name__)


class Constraint:
    """Base class for packing constraints."""

    def check(self, placements: Sequence[Placement], container: Bin, algorithm: str) -> None:
        """
        Check that the placements of one bin satisfy the constraint.

        Args:
            placements: Everything packed into the bin
            container: Bin the placements belong to
            algorithm: Name reported if the check fails

        Raises:
            VerificationError: if the constraint is violated
        """
        raise NotImplementedError

    def _fail(
        self,
        kind: Violation,
        algorithm: str,
        placements: Sequence[Placement],
        detail: str = "",
    ) -> None:
        error = VerificationError(kind, algorithm, placements, detail)
        logger.error(str(error))
        raise error


class ContainmentConstraint(Constraint):
    """Every placement lies inside the bin at non-negative coordinates."""

    def check(self, placements: Sequence[Placement], container: Bin, algorithm: str) -> None:
        for p in placements:
            if is_negative(p.x) or is_negative(p.y) or is_negative(p.z):
                self._fail(Violation.NEGATIVE_POSITION, algorithm, [p])
            _, _, _, x2, y2, z2 = p.bounds()
            if exceeds(x2, container.width) or exceeds(y2, container.height) or exceeds(z2, container.depth):
                self._fail(
                    Violation.OUT_OF_BIN,
                    algorithm,
                    [p],
                    f"bin: {container.width} x {container.height} x {container.depth}",
                )


class OverlapConstraint(Constraint):
    """No two placements in the bin share positive volume."""

    def check(self, placements: Sequence[Placement], container: Bin, algorithm: str) -> None:
        bounds = [p.bounds() for p in placements]
        for i in range(len(bounds)):
            for j in range(i + 1, len(bounds)):
                if boxes_overlap(bounds[i], bounds[j]):
                    self._fail(
                        Violation.OVERLAP,
                        algorithm,
                        [placements[i], placements[j]],
                    )


class WeightConstraint(Constraint):
    """Total weight stays within the capacity; 0 means unlimited."""

    def __init__(self, max_weight: float):
        self.max_weight = max_weight

    @property
    def unlimited(self) -> bool:
        return self.max_weight <= 0

    def admits(self, loaded_weight: float, weight: float) -> bool:
        """Whether a box of weight can join a bin already holding loaded_weight."""
        return self.unlimited or loaded_weight + weight <= self.max_weight

    def check(self, placements: Sequence[Placement], container: Bin, algorithm: str) -> None:
        total_weight = sum(p.weight for p in placements)
        if not self.admits(0.0, total_weight):
            self._fail(
                Violation.OVERWEIGHT,
                algorithm,
                placements,
                f"total weight: {total_weight}, capacity: {self.max_weight}",
            )
