"""Randomised rounds that pack and verify every attempt."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Iterator, Optional

from cuboid_packer.metrics import average_volume_rate
from cuboid_packer.models import Bin, Box, PackParameters
from cuboid_packer.packing.multi_container import BinPacker
from cuboid_packer.verify import VerifyOption

logger = logging.getLogger(__name__)


@dataclass
class StressRound:
    number: int
    bin_count: int
    box_count: int
    volume_rate: float
    average_volume_rate: float


def random_parameters(
    rng: random.Random,
    min_boxes: int = 50,
    max_boxes: int = 500,
    shuffle_count: int = 5,
) -> PackParameters:
    """
    Random bin and boxes; every box fits the bin upright so a round can
    always finish.
    """
    width = rng.randint(100, 5000)
    height = rng.randint(100, 5000)
    depth = rng.randint(100, 5000)
    max_weight = rng.randint(100, 5000)
    boxes = [
        Box(
            width=rng.randint(1, width),
            height=rng.randint(1, height),
            depth=rng.randint(1, depth),
            weight=rng.randint(1, max_weight // 20),
        )
        for _ in range(rng.randint(min_boxes, max_boxes))
    ]
    return PackParameters(
        bin=Bin(width=width, height=height, depth=depth, max_weight=max_weight),
        boxes=boxes,
        allow_rotate_vertically=rng.randint(0, 1) == 0,
        shuffle_count=shuffle_count,
        seed=rng.randint(0, 2**31 - 1),
    )


def run_stress(
    rounds: Optional[int] = None,
    seed: Optional[int] = None,
    min_boxes: int = 50,
    max_boxes: int = 500,
    shuffle_count: int = 5,
) -> Iterator[StressRound]:
    """Yield one StressRound per round; rounds=None runs until the caller stops."""
    rng = random.Random(seed)
    packer = BinPacker(verify=VerifyOption.ALL)
    average = 0.0
    n = 0
    while rounds is None or n < rounds:
        parameters = random_parameters(rng, min_boxes, max_boxes, shuffle_count)
        result = packer.pack(parameters)
        rate = average_volume_rate(parameters, result.bins)
        average = (average * n + rate) / (n + 1)
        n += 1
        logger.debug(f"round={n} bins={len(result.bins)} rate={rate:.4f}")
        yield StressRound(
            number=n,
            bin_count=len(result.bins),
            box_count=result.box_count,
            volume_rate=rate,
            average_volume_rate=average,
        )
