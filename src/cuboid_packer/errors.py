"""Exceptions raised by the packing engine.

Everything here signals a defect that aborts a pack run. A box that simply
does not fit in one attempt is not an error; it is reported as unplaced.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from cuboid_packer.models import Placement


class PackingError(RuntimeError):
    """Base class for unrecoverable packing defects."""


class FreeRegionError(PackingError):
    """Free-space bookkeeping produced an impossible region or index."""


class NoPlacementError(PackingError):
    """No algorithm/ordering combination could place any remaining box."""


class Violation(str, Enum):
    NEGATIVE_POSITION = "negative_position"
    OUT_OF_BIN = "out_of_bin"
    OVERLAP = "overlap"
    OVERWEIGHT = "overweight"


class VerificationError(PackingError):
    """A packed bin failed the geometric or weight verification."""

    def __init__(
        self,
        kind: Violation,
        algorithm: str,
        placements: Sequence["Placement"] = (),
        detail: str = "",
    ) -> None:
        self.kind = kind
        self.algorithm = algorithm
        self.placements = list(placements)
        message = f"verify failed: {kind.value}, algorithm: {algorithm}"
        if detail:
            message += f", {detail}"
        for p in self.placements:
            message += f"\n  {p}"
        super().__init__(message)
