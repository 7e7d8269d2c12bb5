"""Heuristic choice of orientation for packing an item into a box."""

from __future__ import annotations

from typing import Optional, Tuple

from parcel_packer.destinations import get_destination_constraints
from parcel_packer.geometry import rotations
from parcel_packer.models import Item, PackedBox
from parcel_packer.packing.constraints import Position, fits_constraints
from parcel_packer.packing.placement import find_position


def fitting_rotations(item: Item) -> list[tuple[int, Item]]:
    """Orientations of `item` that pass its destination's static fit check."""
    constraints = get_destination_constraints(item.destination)
    return [(r, rotated) for r, rotated in rotations(item) if fits_constraints(rotated, constraints)]


def choose_placement(box: PackedBox, item: Item) -> Optional[Tuple[Position, Item]]:
    """
    Best-fit over orientations.

    Tries all six rotations of `item` against `box` and keeps the one whose
    trial insertion gives the smallest bounding surface area. Ties go to the
    lowest rotation index.

    Args:
        box: Open box to try
        item: Item to place (any orientation)

    Returns:
        (position, rotated item), or None if no orientation fits this box
    """
    best: Optional[Tuple[Position, Item]] = None
    best_area = float("inf")

    for _, rotated in fitting_rotations(item):
        position = find_position(box, rotated)
        if position is None:
            continue

        trial = box.model_copy(deep=True)
        trial.add_item(rotated, position)
        area = trial.surface_area

        if best is None or area < best_area:
            best = (position, rotated)
            best_area = area

    return best
