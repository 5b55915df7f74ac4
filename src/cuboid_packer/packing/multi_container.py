from __future__ import annotations

import logging
import random
from typing import Callable, Iterator, Optional, Sequence

from cuboid_packer.errors import NoPlacementError
from cuboid_packer.metrics import volume_rate
from cuboid_packer.models import Box, PackingResult, PackParameters, Placement
from cuboid_packer.packing.base import Attempt, PackingAlgorithm
from cuboid_packer.packing.guillotine import GuillotineAlgorithm
from cuboid_packer.packing.heuristics import (
    FreeCuboidChoice,
    FreeRectChoice,
    ShelfChoice,
    SplitRule,
)
from cuboid_packer.packing.shelf import ShelfAlgorithm
from cuboid_packer.verify import VerifyOption, verify_bin

logger = logging.getLogger(__name__)

AlgorithmFactory = Callable[[PackParameters], PackingAlgorithm]


def default_factories() -> list[AlgorithmFactory]:
    return [
        lambda parameters: ShelfAlgorithm(
            parameters,
            FreeRectChoice.BEST_AREA_FIT,
            SplitRule.LONGER_LEFTOVER_AXIS,
            ShelfChoice.FIRST_FIT,
        ),
        lambda parameters: ShelfAlgorithm(
            parameters,
            FreeRectChoice.BEST_AREA_FIT,
            SplitRule.LONGER_LEFTOVER_AXIS,
            ShelfChoice.NEXT_FIT,
        ),
        lambda parameters: GuillotineAlgorithm(
            parameters,
            FreeCuboidChoice.MIN_HEIGHT,
            SplitRule.LONGER_LEFTOVER_AXIS,
        ),
        lambda parameters: GuillotineAlgorithm(
            parameters,
            FreeCuboidChoice.MIN_HEIGHT,
            SplitRule.SHORTER_LEFTOVER_AXIS,
        ),
    ]


def orderings(
    indices: Sequence[int],
    boxes: Sequence[Box],
    shuffle_count: int,
    seed: int,
) -> Iterator[tuple[str, list[int]]]:
    """
    Yield (label, ordering) pairs of the pending box indices.

    Input order first, then largest edge first, largest volume first, and
    shuffle_count seeded shuffles. Sorts are stable.
    """
    yield "original", list(indices)
    yield "max_edge_desc", sorted(
        indices,
        key=lambda i: max(boxes[i].width, boxes[i].height, boxes[i].depth),
        reverse=True,
    )
    yield "volume_desc", sorted(indices, key=lambda i: boxes[i].volume, reverse=True)
    if shuffle_count > 0:
        rng = random.Random(seed)
        for n in range(shuffle_count):
            shuffled = list(indices)
            rng.shuffle(shuffled)
            yield f"shuffle_{n}", shuffled


class BinPacker:
    """
    Packs boxes into as many identical bins as needed.

    For each bin every (algorithm, ordering) combination is run on an empty
    bin and the one with the highest volume rate wins; its leftovers are
    carried into the next bin.
    """

    def __init__(
        self,
        factories: Optional[Sequence[AlgorithmFactory]] = None,
        verify: VerifyOption = VerifyOption.BEST_ONLY,
    ) -> None:
        self.factories = list(factories) if factories is not None else default_factories()
        self.verify = VerifyOption(verify)

    def pack(self, parameters: PackParameters) -> PackingResult:
        boxes = parameters.boxes
        pending = list(range(len(boxes)))
        bins: list[list[Placement]] = []
        algorithms: list[str] = []

        while pending:
            best, best_rate = self.pack_single_bin(parameters, pending)

            if self.verify is VerifyOption.BEST_ONLY:
                verify_bin(parameters, best.placements, best.algorithm)

            bins.append(best.placements)
            algorithms.append(best.algorithm)
            pending = best.unplaced

            logger.info(
                f"bin={len(bins) - 1} algorithm={best.algorithm} "
                f"packed={len(best.placements)} rate={best_rate:.4f} remaining={len(pending)}"
            )

        return PackingResult(bins=bins, algorithms=algorithms)

    def pack_single_bin(
        self,
        parameters: PackParameters,
        pending: Sequence[int],
    ) -> tuple[Attempt, float]:
        """Best attempt over all combinations for one empty bin, with its volume rate."""
        boxes = parameters.boxes
        best: Optional[Attempt] = None
        best_rate = 0.0

        for i, factory in enumerate(self.factories):
            for label, ordering in orderings(
                pending, boxes, parameters.shuffle_count, parameters.seed + i
            ):
                algorithm = factory(parameters)
                attempt = algorithm.insert((index, boxes[index]) for index in ordering)
                if not attempt.placements:
                    logger.debug(f"{attempt.algorithm} ordering={label} placed nothing")
                    continue

                if self.verify is VerifyOption.ALL:
                    verify_bin(parameters, attempt.placements, attempt.algorithm)

                rate = volume_rate(parameters, attempt.placements)
                logger.debug(
                    f"{attempt.algorithm} ordering={label} "
                    f"placed={len(attempt.placements)}/{len(ordering)} rate={rate:.4f}"
                )
                if best is None or rate > best_rate:
                    best = attempt
                    best_rate = rate

        if best is None:
            remaining = "\n".join(f"  [{index}] {boxes[index]!r}" for index in pending)
            target = parameters.bin
            raise NoPlacementError(
                "no algorithm can pack these boxes\n"
                f"bin width: {target.width}, height: {target.height}, depth: {target.depth}, "
                f"max weight: {target.max_weight}, "
                f"allow rotate vertically: {parameters.allow_rotate_vertically}\n"
                f"boxes:\n{remaining}"
            )

        return best, best_rate


def pack(
    parameters: PackParameters,
    verify: VerifyOption = VerifyOption.BEST_ONLY,
) -> PackingResult:
    """Pack with the default algorithms."""
    return BinPacker(verify=verify).pack(parameters)
