# src/parcel_packer/packing/placement.py

from __future__ import annotations

from typing import Optional

from parcel_packer.destinations import get_destination_constraints
from parcel_packer.models import Item, PackedBox
from parcel_packer.packing.constraints import PLACEMENT_CONSTRAINTS, Position

ORIGIN: Position = (0.0, 0.0, 0.0)


def generate_candidate_points(box: PackedBox) -> list[Position]:
    """
    Extreme-points style candidates:
      start with origin,
      add (x+L, y, z), (x, y+W, z), (x, y, z+H) for each placed item.
    Duplicates are kept. Sorted by x+y+z; the sort is stable so equal sums
    keep generation order.
    """
    points: list[Position] = [ORIGIN]

    for existing in box.items:
        if existing.position is None:
            continue
        x, y, z = existing.position

        points.append((x + existing.length, y, z))
        points.append((x, y + existing.width, z))
        points.append((x, y, z + existing.height))

    return sorted(points, key=sum)


def can_place(box: PackedBox, item: Item, position: Position) -> bool:
    """
    Check if an item can be placed at the given position:
    - within the destination's dimension caps
    - no overlap with items already in the box
    - box weight stays under the destination cap

    Constraints are re-resolved from the box's destination on every call.
    """
    constraints = get_destination_constraints(box.destination)
    return all(c.check(box, item, position, constraints) for c in PLACEMENT_CONSTRAINTS)


def find_position(box: PackedBox, item: Item) -> Optional[Position]:
    """Nearest-to-origin feasible candidate point for `item`, or None."""
    if not box.items:
        return ORIGIN

    for point in generate_candidate_points(box):
        if can_place(box, item, point):
            return point
    return None
