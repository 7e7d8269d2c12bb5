# src/parcel_packer/packing/first_fit.py

from __future__ import annotations

import logging
from typing import Iterable

from parcel_packer.models import Item, PackedBox, PackingSolution
from parcel_packer.metrics import total_box_volume
from parcel_packer.packing.heuristics import choose_placement, fitting_rotations
from parcel_packer.packing.placement import ORIGIN

logger = logging.getLogger(__name__)


def group_by_destination(items: Iterable[Item]) -> dict[str, list[Item]]:
    """
    Partition items by destination, keyed in order of first appearance.

    Items are copied with position and box_index cleared; placement from a
    previous run is never carried over.
    """
    groups: dict[str, list[Item]] = {}
    for item in items:
        fresh = item.model_copy(update={"position": None, "box_index": None})
        groups.setdefault(item.destination, []).append(fresh)
    return groups


def pack_destination(destination: str, items: list[Item]) -> tuple[list[PackedBox], list[Item]]:
    """
    First-fit-decreasing packing of one destination's items.
    - Big items first (stable sort, equal volumes keep input order)
    - Each item goes into the FIRST open box that can host it, in creation order
    - A new box is opened only when no open box accepts the item
    - Items no orientation can ship alone are reported as unpacked
    """
    items_sorted = sorted(items, key=lambda item: item.volume, reverse=True)

    boxes: list[PackedBox] = []
    unpacked: list[Item] = []

    for item in items_sorted:
        candidates = fitting_rotations(item)
        if not candidates:
            unpacked.append(item)
            logger.debug(f"[{destination}] item {item.id} exceeds destination limits, unpacked")
            continue

        placed = False
        for box_number, box in enumerate(boxes):
            choice = choose_placement(box, item)
            if choice is None:
                continue
            position, rotated = choice
            box.add_item(rotated, position)
            placed = True
            logger.debug(f"[{destination}] item {item.id} -> box {box_number} at {position}")
            break

        if not placed:
            _, rotated = candidates[0]
            new_box = PackedBox.new(destination)
            new_box.add_item(rotated, ORIGIN)
            boxes.append(new_box)
            logger.debug(f"[{destination}] item {item.id} opens box {len(boxes) - 1}")

    return boxes, unpacked


def pack_items(items: Iterable[Item]) -> PackingSolution:
    """
    Pack items into as few boxes as the greedy heuristic finds, per destination.

    Deterministic: destinations are processed in order of first appearance and
    boxes are listed in creation order within each destination.
    """
    solution = PackingSolution()

    for destination, destination_items in group_by_destination(items).items():
        boxes, unpacked = pack_destination(destination, destination_items)
        solution.boxes.extend(boxes)
        solution.unpacked_items.extend(unpacked)

    solution.total_volume = total_box_volume(solution.boxes)

    logger.info(
        f"boxes={len(solution.boxes)}, "
        f"packed={sum(len(b.items) for b in solution.boxes)}, "
        f"unpacked={len(solution.unpacked_items)}, "
        f"total_volume={solution.total_volume:.1f}"
    )
    return solution
