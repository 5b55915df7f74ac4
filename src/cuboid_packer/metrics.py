from __future__ import annotations

from typing import Sequence

from cuboid_packer.models import PackParameters, Placement


def used_volume(placements: Sequence[Placement]) -> float:
    return sum(p.volume for p in placements)


def total_weight(placements: Sequence[Placement]) -> float:
    return sum(p.weight for p in placements)


def volume_rate(parameters: PackParameters, placements: Sequence[Placement]) -> float:
    """Packed volume of one bin divided by the bin volume."""
    return used_volume(placements) / parameters.bin.volume


def average_volume_rate(
    parameters: PackParameters,
    bins: Sequence[Sequence[Placement]],
) -> float:
    """
    Mean volume rate over all bins but the last.

    The last bin is usually only partly filled, so it is left out unless it
    is the only one. No bins gives 0.0.
    """
    rates = [volume_rate(parameters, placements) for placements in bins]
    if len(rates) > 1:
        rates.pop()
    if not rates:
        return 0.0
    return sum(rates) / len(rates)
