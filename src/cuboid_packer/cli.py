from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Optional, Sequence

from cuboid_packer.io.schemas import PackRequestSchema
from cuboid_packer.main import example_parameters, run_case
from cuboid_packer.models import PackParameters
from cuboid_packer.packing.multi_container import BinPacker
from cuboid_packer.plan import build_plan
from cuboid_packer.settings import configure_logging, verify_option
from cuboid_packer.stress import run_stress
from cuboid_packer.verify import VerifyOption

logger = logging.getLogger(__name__)


def load_input(path: Path) -> PackParameters:
    """Read a JSON pack request and turn it into engine parameters."""
    data = json.loads(path.read_text(encoding="utf-8"))
    return PackRequestSchema.model_validate(data).to_parameters()


def apply_overrides(parameters: PackParameters, args: argparse.Namespace) -> PackParameters:
    updates = {}
    if args.shuffle is not None:
        updates["shuffle_count"] = args.shuffle
    if args.seed is not None:
        updates["seed"] = args.seed
    if not updates:
        return parameters
    # Re-validate so a bad override is rejected like bad input
    return PackParameters.model_validate({**parameters.model_dump(), **updates})


def write_plan(plan: dict, path: str = "plan.json") -> None:
    """
    Write a plan dictionary to a JSON file.

    Creates parent folders if needed, writes JSON with indent=2 and sort_keys=True,
    and overwrites the file on every run.

    Args:
        plan: Dictionary containing the plan data
        path: Output file path (default: "plan.json")
    """
    output_path = Path(path).resolve()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    logger.debug(f"write_plan: writing to {output_path}")
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(plan, f, indent=2, sort_keys=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Cuboid bin packer CLI")
    parser.add_argument(
        "--mode",
        choices=["pack", "example", "stress"],
        default="pack",
        help="pack = pack a JSON request, example = pack the built-in example, stress = random verified rounds",
    )
    parser.add_argument("--input", help="Input request JSON file (pack mode)")
    parser.add_argument("--output", help="Output plan JSON file (pack mode)")
    parser.add_argument(
        "--verify",
        choices=[o.value for o in VerifyOption],
        help="Which attempts to verify (default from CUBOID_PACKER_VERIFY, else best)",
    )
    parser.add_argument("--shuffle", type=int, help="Override the number of random orderings")
    parser.add_argument("--seed", type=int, help="Override the random seed")
    parser.add_argument("--rounds", type=int, default=10, help="Rounds to run (stress mode)")
    parser.add_argument("--max-boxes", type=int, default=500, help="Largest box count per round (stress mode)")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging()

    if args.mode == "example":
        run_case(example_parameters())
        return

    if args.mode == "stress":
        min_boxes = min(50, args.max_boxes)
        for r in run_stress(
            rounds=args.rounds,
            seed=args.seed,
            min_boxes=min_boxes,
            max_boxes=args.max_boxes,
            shuffle_count=args.shuffle if args.shuffle is not None else 5,
        ):
            print(
                f"Round {r.number} finished, {r.bin_count} bins contains {r.box_count} boxes, "
                f"average volume rate {r.average_volume_rate:.4f}"
            )
        return

    if not args.input or not args.output:
        parser.error("pack mode requires --input and --output")

    parameters = apply_overrides(load_input(Path(args.input)), args)
    verify = VerifyOption(args.verify) if args.verify else verify_option()

    result = BinPacker(verify=verify).pack(parameters)
    plan = build_plan(parameters, result)

    summary = plan["summary"]
    print(
        f"Packed {summary['packed_boxes']}/{summary['requested_boxes']} boxes into "
        f"{summary['bin_count']} bins, average volume rate {summary['average_volume_rate']:.4f}"
    )
    write_plan(plan, args.output)
    print(f"✅ Plan written to {args.output}")


if __name__ == "__main__":
    main()
