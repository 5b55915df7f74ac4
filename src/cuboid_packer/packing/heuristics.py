"""Heuristic choices for the placement algorithms."""

from __future__ import annotations

from enum import Enum


class FreeRectChoice(str, Enum):
    """How the planar partitioner scores a free rectangle for a candidate."""

    BEST_AREA_FIT = "best_area_fit"
    BEST_SHORT_SIDE_FIT = "best_short_side_fit"


class SplitRule(str, Enum):
    """Which way the L-shaped leftover around a placement is cut."""

    SHORTER_LEFTOVER_AXIS = "shorter_leftover_axis"
    LONGER_LEFTOVER_AXIS = "longer_leftover_axis"
    SHORTER_AXIS = "shorter_axis"
    LONGER_AXIS = "longer_axis"


class ShelfChoice(str, Enum):
    NEXT_FIT = "next_fit"  # only the last opened shelf
    FIRST_FIT = "first_fit"  # every shelf, in creation order


class FreeCuboidChoice(str, Enum):
    """How the volumetric partitioner scores a free cuboid."""

    MIN_HEIGHT = "min_height"


def score_rect(
    choice: FreeRectChoice,
    free_width: float,
    free_height: float,
    width: float,
    height: float,
) -> float:
    """
    Score placing a width x height rectangle in a free rectangle.

    Lower is better. Both dimensions are taken as oriented.
    """
    if choice is FreeRectChoice.BEST_AREA_FIT:
        return free_width * free_height - width * height
    if choice is FreeRectChoice.BEST_SHORT_SIDE_FIT:
        return min(abs(free_width - width), abs(free_height - height))
    raise ValueError(f"rect choice is unsupported: {choice}")


def score_cuboid(choice: FreeCuboidChoice, free_y: float, height: float) -> float:
    if choice is FreeCuboidChoice.MIN_HEIGHT:
        return free_y + height
    raise ValueError(f"cuboid choice is unsupported: {choice}")


def split_horizontal(
    rule: SplitRule,
    free_width: float,
    free_length: float,
    placed_width: float,
    placed_length: float,
) -> bool:
    """
    Decide whether the leftover around a placement is split horizontally.

    "length" is the second planar axis: height for rectangles, depth for
    cuboids. A horizontal split gives the bottom leftover the full free
    width; a vertical split gives the right leftover the full free length.
    """
    leftover_width = free_width - placed_width
    leftover_length = free_length - placed_length

    if rule is SplitRule.SHORTER_LEFTOVER_AXIS:
        return leftover_width <= leftover_length
    if rule is SplitRule.LONGER_LEFTOVER_AXIS:
        return leftover_width > leftover_length
    if rule is SplitRule.SHORTER_AXIS:
        return free_width <= free_length
    if rule is SplitRule.LONGER_AXIS:
        return free_width > free_length
    raise ValueError(f"split rule is unsupported: {rule}")
