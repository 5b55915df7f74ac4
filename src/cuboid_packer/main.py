from __future__ import annotations

from cuboid_packer.metrics import volume_rate
from cuboid_packer.models import Bin, Box, PackingResult, PackParameters
from cuboid_packer.packing.multi_container import BinPacker
from cuboid_packer.verify import VerifyOption


def example_parameters() -> PackParameters:
    return PackParameters(
        bin=Bin(width=1000, height=1000, depth=1000),
        boxes=[
            Box(width=150, height=100, depth=150, tag="A"),
            Box(width=500, height=500, depth=500, tag="B"),
            Box(width=500, height=550, depth=700, tag="C"),
            Box(width=350, height=350, depth=350, tag="D"),
            Box(width=650, height=750, depth=850, tag="E"),
        ],
    )


def run_case(parameters: PackParameters) -> PackingResult:
    b = parameters.bin
    print("\n" + "=" * 60)
    print(f"📦 BIN: {b.width} x {b.height} x {b.depth}")

    # Test every algorithm, keep the best; verify the winner of each bin
    result = BinPacker(verify=VerifyOption.BEST_ONLY).pack(parameters)

    for index, (placements, algorithm) in enumerate(zip(result.bins, result.algorithms)):
        print(f"\nBin {index} ({algorithm}), fill rate {volume_rate(parameters, placements) * 100:.2f}%:")
        for p in placements:
            print(" ", p)

    return result


def main() -> None:
    run_case(example_parameters())


if __name__ == "__main__":
    main()
