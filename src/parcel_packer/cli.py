from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from parcel_packer.config import configure_logging
from parcel_packer.io.schemas import PackRequestSchema
from parcel_packer.metrics import summarize
from parcel_packer.models import Item, PackingSolution
from parcel_packer.packing.first_fit import pack_items

logger = logging.getLogger(__name__)


def load_input(path: Path) -> list[Item]:
    """
    Read item lines from a JSON file.

    Accepts {"items": [...]} or a bare list. Each line carries id or sku,
    destination, dimensions (length/width/height, dims_cm or dims_in),
    weight or weight_kg and an optional quantity.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ValueError(f"Cannot read input file {path}: {exc}") from exc

    if isinstance(data, list):
        data = {"items": data}
    if not isinstance(data, dict) or "items" not in data:
        raise ValueError("Input must be a list of items or an object with an 'items' list")

    try:
        request = PackRequestSchema(**data)
    except ValidationError as exc:
        raise ValueError(f"Invalid input in {path}:\n{exc}") from exc

    items = request.to_items()
    logger.info(f"Loaded {len(items)} items from {len(request.items)} lines in {path}")
    return items


def write_solution(solution: PackingSolution, path: str = "solution.json") -> Path:
    """
    Write a packing solution to a JSON file.

    Creates parent folders if needed, writes JSON with indent=2 and sort_keys=True,
    and overwrites the file on every run.
    """
    output_path = Path(path).resolve()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(solution.model_dump(mode="json"), f, indent=2, sort_keys=True)
    logger.info(f"Solution written to {output_path}")
    return output_path


def format_summary(summary: dict[str, Any]) -> str:
    lines = [
        f"Boxes     : {summary['boxes']}",
        f"Packed    : {summary['packed_items']}",
        f"Unpacked  : {summary['unpacked_items']}",
        f"Volume    : {summary['total_volume']:.1f} cm3 (fill {summary['fill_rate'] * 100:.1f}%)",
        f"Weight    : {summary['total_weight']:.2f} kg",
    ]
    for destination, count in summary["boxes_per_destination"].items():
        lines.append(f"  {destination}: {count} box(es)")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Parcel Packer CLI")
    parser.add_argument("--input", required=True, help="Input items JSON file")
    parser.add_argument("--output", required=True, help="Output solution JSON file")
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print the summary as JSON instead of text",
    )

    args = parser.parse_args(argv)
    configure_logging()

    try:
        items = load_input(Path(args.input))
    except ValueError as exc:
        parser.error(str(exc))

    solution = pack_items(items)
    write_solution(solution, args.output)

    summary = summarize(solution)
    if args.summary:
        print(json.dumps(summary, indent=2, sort_keys=True))
    else:
        print(format_summary(summary))


if __name__ == "__main__":
    main()
