import pytest
from pydantic import ValidationError

from cuboid_packer.errors import NoPlacementError
from cuboid_packer.geometry import boxes_overlap
from cuboid_packer.main import example_parameters
from cuboid_packer.models import Bin, Box, PackParameters
from cuboid_packer.packing.guillotine import GuillotineAlgorithm
from cuboid_packer.packing.multi_container import BinPacker, orderings, pack
from cuboid_packer.verify import VerifyOption, verify


def assert_within_bin(container, placements):
    for p in placements:
        x1, y1, z1, x2, y2, z2 = p.bounds()
        assert x1 >= 0 and y1 >= 0 and z1 >= 0
        assert x2 <= float(container.width)
        assert y2 <= float(container.height)
        assert z2 <= float(container.depth)


def assert_no_overlaps(placements):
    bounds = [p.bounds() for p in placements]
    for i in range(len(bounds)):
        for j in range(i + 1, len(bounds)):
            assert not boxes_overlap(bounds[i], bounds[j])


def assert_each_box_once(parameters, result):
    packed = sorted(p.box_index for placements in result.bins for p in placements)
    assert packed == list(range(len(parameters.boxes)))


def test_pack_60_cubes():
    container = Bin(width=10, height=10, depth=10)
    boxes = [Box(width=3, height=3, depth=3, tag=f"B{i}") for i in range(60)]
    parameters = PackParameters(bin=container, boxes=boxes)

    result = pack(parameters)

    # 10/3 = 3 per axis => 27 cubes per bin (grid max)
    packed_counts = [len(placements) for placements in result.bins]
    assert packed_counts == [27, 27, 6]
    assert_each_box_once(parameters, result)

    # Invariants per bin
    for placements in result.bins:
        assert_within_bin(container, placements)
        assert_no_overlaps(placements)


def test_example_boxes_all_packed():
    parameters = example_parameters()

    result = pack(parameters, VerifyOption.ALL)

    assert 1 <= len(result.bins) <= 5
    assert result.box_count == 5
    assert len(result.algorithms) == len(result.bins)
    assert_each_box_once(parameters, result)
    verify(parameters, result.bins, result.algorithms)


def test_pack_without_verification():
    parameters = example_parameters()

    result = pack(parameters, VerifyOption.NONE)

    assert result == pack(parameters, VerifyOption.BEST_ONLY)
    verify(parameters, result.bins, result.algorithms)


def test_result_is_frozen():
    result = pack(example_parameters())

    with pytest.raises(ValidationError):
        result.bins = []


def test_placements_are_permutations_of_the_box():
    parameters = example_parameters().model_copy(update={"allow_rotate_vertically": True})

    result = pack(parameters)

    for placements in result.bins:
        for p in placements:
            box = parameters.boxes[p.box_index]
            assert sorted((p.width, p.height, p.depth)) == sorted((box.width, box.height, box.depth))
            assert p.tag == box.tag


def test_no_vertical_rotation_keeps_heights():
    parameters = example_parameters()

    result = pack(parameters)

    for placements in result.bins:
        for p in placements:
            assert p.height == parameters.boxes[p.box_index].height


def test_two_large_boxes_need_two_bins():
    parameters = PackParameters(
        bin=Bin(width=10, height=10, depth=10),
        boxes=[Box(width=10, height=10, depth=7), Box(width=10, height=10, depth=7)],
    )

    result = pack(parameters)

    assert [len(placements) for placements in result.bins] == [1, 1]


def test_weight_limit_opens_second_bin():
    parameters = PackParameters(
        bin=Bin(width=10, height=10, depth=10, max_weight=1000),
        boxes=[
            Box(width=2, height=2, depth=2, weight=600, tag="A"),
            Box(width=2, height=2, depth=2, weight=600, tag="B"),
        ],
    )

    result = pack(parameters)

    assert [[p.tag for p in placements] for placements in result.bins] == [["A"], ["B"]]


def test_oversized_box_raises():
    parameters = PackParameters(
        bin=Bin(width=10, height=10, depth=10),
        boxes=[Box(width=20, height=1, depth=1)],
        allow_rotate_vertically=True,
    )

    with pytest.raises(NoPlacementError):
        pack(parameters)


def test_oversized_box_raises_after_other_boxes_are_packed():
    parameters = PackParameters(
        bin=Bin(width=10, height=10, depth=10),
        boxes=[Box(width=5, height=5, depth=5), Box(width=20, height=1, depth=1)],
    )

    with pytest.raises(NoPlacementError):
        pack(parameters)


def test_box_heavier_than_capacity_raises():
    parameters = PackParameters(
        bin=Bin(width=10, height=10, depth=10, max_weight=5),
        boxes=[Box(width=1, height=1, depth=1, weight=6)],
    )

    with pytest.raises(NoPlacementError):
        pack(parameters)


def test_no_boxes_no_bins():
    result = pack(PackParameters(bin=Bin(width=10, height=10, depth=10)))

    assert result.bins == []
    assert result.algorithms == []


def test_same_seed_same_result():
    parameters = PackParameters(
        bin=Bin(width=100, height=100, depth=100),
        boxes=[Box(width=10 + i % 7 * 5, height=20 + i % 5 * 7, depth=15 + i % 3 * 11) for i in range(40)],
        allow_rotate_vertically=True,
        seed=42,
    )

    assert pack(parameters) == pack(parameters)


def test_custom_factories_name_every_bin():
    parameters = PackParameters(
        bin=Bin(width=10, height=10, depth=10),
        boxes=[Box(width=6, height=6, depth=6) for _ in range(3)],
    )
    packer = BinPacker(factories=[lambda p: GuillotineAlgorithm(p)])

    result = packer.pack(parameters)

    assert len(result.bins) == 3
    assert set(result.algorithms) == {"Guillotine(min_height, shorter_leftover_axis)"}


def test_orderings():
    boxes = [
        Box(width=1, height=1, depth=9),
        Box(width=4, height=4, depth=4),
        Box(width=2, height=2, depth=2),
    ]

    produced = list(orderings([0, 1, 2], boxes, shuffle_count=3, seed=7))

    assert [label for label, _ in produced] == [
        "original", "max_edge_desc", "volume_desc", "shuffle_0", "shuffle_1", "shuffle_2",
    ]
    assert produced[0][1] == [0, 1, 2]
    assert produced[1][1] == [0, 1, 2]
    assert produced[2][1] == [1, 0, 2]
    for _, ordering in produced[3:]:
        assert sorted(ordering) == [0, 1, 2]
    assert produced == list(orderings([0, 1, 2], boxes, shuffle_count=3, seed=7))


def test_orderings_without_shuffles():
    boxes = [Box(width=1, height=1, depth=1)]

    assert len(list(orderings([0], boxes, shuffle_count=0, seed=0))) == 3
