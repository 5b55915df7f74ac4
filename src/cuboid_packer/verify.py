"""Independent re-check of a packing: bounds, overlap and weight."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Sequence

from cuboid_packer.models import PackParameters, Placement
from cuboid_packer.packing.constraints import (
    Constraint,
    ContainmentConstraint,
    OverlapConstraint,
    WeightConstraint,
)


class VerifyOption(str, Enum):
    """Which attempts the bin packer verifies."""

    NONE = "none"
    BEST_ONLY = "best"
    ALL = "all"


def bin_constraints(parameters: PackParameters) -> list[Constraint]:
    return [
        ContainmentConstraint(),
        OverlapConstraint(),
        WeightConstraint(parameters.bin.max_weight),
    ]


def verify_bin(
    parameters: PackParameters,
    placements: Sequence[Placement],
    algorithm: str = "",
) -> None:
    """
    Verify the placements of a single bin.

    Raises:
        VerificationError: on the first violation found
    """
    for constraint in bin_constraints(parameters):
        constraint.check(placements, parameters.bin, algorithm)


def verify(
    parameters: PackParameters,
    bins: Sequence[Sequence[Placement]],
    algorithms: Optional[Sequence[str]] = None,
) -> None:
    """Verify every bin; algorithms, if given, names the packer of each bin."""
    for i, placements in enumerate(bins):
        algorithm = algorithms[i] if algorithms is not None and i < len(algorithms) else ""
        verify_bin(parameters, placements, algorithm)
