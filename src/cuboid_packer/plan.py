"""Render a packing result as a JSON-serialisable plan."""

from __future__ import annotations

from typing import Any

from cuboid_packer.metrics import average_volume_rate, total_weight, volume_rate
from cuboid_packer.models import PackingResult, PackParameters


def build_plan(parameters: PackParameters, result: PackingResult) -> dict[str, Any]:
    """
    Build the plan dict for a finished pack run.

    Returns:
        Plan dict with bin dims, summary and one entry per packed bin
    """
    bins = []
    for index, (placements, algorithm) in enumerate(zip(result.bins, result.algorithms)):
        bins.append({
            "index": index,
            "algorithm": algorithm,
            "box_count": len(placements),
            "volume_rate": volume_rate(parameters, placements),
            "total_weight": total_weight(placements),
            "placements": [p.model_dump(mode="json") for p in placements],
        })

    return {
        "bin": parameters.bin.model_dump(),
        "allow_rotate_vertically": parameters.allow_rotate_vertically,
        "summary": {
            "requested_boxes": len(parameters.boxes),
            "packed_boxes": result.box_count,
            "bin_count": len(result.bins),
            "average_volume_rate": average_volume_rate(parameters, result.bins),
        },
        "bins": bins,
    }
