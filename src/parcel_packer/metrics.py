from __future__ import annotations
from typing import Any

from parcel_packer.models import PackedBox, PackingSolution


def total_box_volume(boxes: list[PackedBox]) -> float:
    """Sum of bounding-box volumes, empty space inside the boxes included."""
    return sum(box.volume for box in boxes)


def compute_metrics(boxes: list[PackedBox]) -> tuple[float, float, float]:
    used_volume = sum(item.volume for box in boxes for item in box.items)
    total_volume = total_box_volume(boxes)
    fill_rate = 0.0 if total_volume == 0 else used_volume / total_volume
    return used_volume, total_volume, fill_rate


def calculate_cost(solution: PackingSolution) -> float:
    """Cost of a solution, taken as proportional to shipped box volume."""
    return solution.total_volume


def summarize(solution: PackingSolution) -> dict[str, Any]:
    used_volume, total_volume, fill_rate = compute_metrics(solution.boxes)

    boxes_per_destination: dict[str, int] = {}
    for box in solution.boxes:
        boxes_per_destination[box.destination] = boxes_per_destination.get(box.destination, 0) + 1

    return {
        "boxes": len(solution.boxes),
        "packed_items": sum(len(box.items) for box in solution.boxes),
        "unpacked_items": len(solution.unpacked_items),
        "total_volume": total_volume,
        "used_volume": used_volume,
        "fill_rate": fill_rate,
        "total_weight": sum(box.weight for box in solution.boxes),
        "boxes_per_destination": boxes_per_destination,
    }
