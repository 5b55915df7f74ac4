from __future__ import annotations

import pytest

from cuboid_packer.geometry import Cuboid
from cuboid_packer.models import Bin, Box, PackParameters
from cuboid_packer.packing.guillotine import GuillotineAlgorithm
from cuboid_packer.packing.heuristics import FreeCuboidChoice, SplitRule


def make_parameters(width=10, height=10, depth=10, max_weight=0, rotate=False):
    return PackParameters(
        bin=Bin(width=width, height=height, depth=depth, max_weight=max_weight),
        allow_rotate_vertically=rotate,
    )


def test_first_box_goes_to_origin_and_splits_three_ways():
    algorithm = GuillotineAlgorithm(
        make_parameters(), FreeCuboidChoice.MIN_HEIGHT, SplitRule.LONGER_LEFTOVER_AXIS
    )

    p = algorithm.place(0, Box(width=4, height=5, depth=6, tag="A"))

    assert (p.x, p.y, p.z) == (0, 0, 0)
    assert (p.width, p.height, p.depth) == (4, 5, 6)
    assert p.tag == "A"
    # leftover width 6 > leftover depth 4 -> horizontal split
    assert algorithm.free_cuboids == [
        Cuboid(0, 0, 6, 10, 5, 4),
        Cuboid(4, 0, 0, 6, 5, 6),
        Cuboid(0, 5, 0, 10, 5, 10),
    ]
    assert algorithm.used_cuboids == [Cuboid(0, 0, 0, 4, 5, 6)]


def test_split_on_total_axis_rules():
    box = Box(width=4, height=5, depth=2)

    longer = GuillotineAlgorithm(make_parameters(depth=6), split_rule=SplitRule.LONGER_AXIS)
    longer.place(0, box)
    # free width 10 > free depth 6 -> horizontal split
    assert longer.free_cuboids == [
        Cuboid(0, 0, 2, 10, 5, 4),
        Cuboid(4, 0, 0, 6, 5, 2),
        Cuboid(0, 5, 0, 10, 5, 6),
    ]

    shorter = GuillotineAlgorithm(make_parameters(depth=6), split_rule=SplitRule.SHORTER_AXIS)
    shorter.place(0, box)
    assert shorter.free_cuboids == [
        Cuboid(0, 0, 2, 4, 5, 4),
        Cuboid(4, 0, 0, 6, 5, 6),
        Cuboid(0, 5, 0, 10, 5, 6),
    ]


def test_min_height_fills_the_floor_first():
    algorithm = GuillotineAlgorithm(
        make_parameters(), FreeCuboidChoice.MIN_HEIGHT, SplitRule.LONGER_LEFTOVER_AXIS
    )

    placements = [algorithm.place(i, Box(width=5, height=5, depth=5)) for i in range(4)]

    assert [p.y for p in placements] == [0, 0, 0, 0]
    assert sorted((p.x, p.z) for p in placements) == [(0, 0), (0, 5), (5, 0), (5, 5)]


def test_vertical_edge_is_kept_without_rotation():
    algorithm = GuillotineAlgorithm(make_parameters(height=5))

    assert algorithm.place(0, Box(width=2, height=8, depth=2)) is None


def test_vertical_rotation_when_allowed():
    algorithm = GuillotineAlgorithm(make_parameters(height=5, rotate=True))

    p = algorithm.place(0, Box(width=2, height=8, depth=2))

    assert p is not None
    assert p.height == 2
    assert sorted((p.width, p.height, p.depth)) == [2, 2, 8]


def test_horizontal_turn_without_vertical_rotation():
    algorithm = GuillotineAlgorithm(make_parameters(width=4, depth=10))

    p = algorithm.place(0, Box(width=8, height=3, depth=2))

    assert (p.width, p.height, p.depth) == (2, 3, 8)


def test_insert_respects_weight_capacity():
    algorithm = GuillotineAlgorithm(make_parameters(max_weight=10))

    attempt = algorithm.insert([
        (0, Box(width=2, height=2, depth=2, weight=6)),
        (1, Box(width=2, height=2, depth=2, weight=6)),
        (2, Box(width=2, height=2, depth=2, weight=4)),
    ])

    assert [p.box_index for p in attempt.placements] == [0, 2]
    assert attempt.unplaced == [1]
    assert algorithm.loaded_weight == 10


def test_insert_reports_boxes_that_do_not_fit():
    algorithm = GuillotineAlgorithm(make_parameters())

    attempt = algorithm.insert([
        (0, Box(width=10, height=10, depth=10)),
        (1, Box(width=1, height=1, depth=1)),
    ])

    assert [p.box_index for p in attempt.placements] == [0]
    assert attempt.unplaced == [1]
    assert attempt.packed_volume == 1000
    assert algorithm.free_cuboids == []


def test_name_and_unsupported_choice():
    algorithm = GuillotineAlgorithm(make_parameters(), split_rule=SplitRule.LONGER_LEFTOVER_AXIS)

    assert algorithm.name == "Guillotine(min_height, longer_leftover_axis)"
    with pytest.raises(ValueError):
        GuillotineAlgorithm(make_parameters(), cuboid_choice="max_height")
