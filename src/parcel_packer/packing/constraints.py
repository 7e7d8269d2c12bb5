"""Constraints for packing items into destination boxes."""

from __future__ import annotations

from typing import Tuple

from parcel_packer.destinations import dimension_caps
from parcel_packer.geometry import boxes_overlap, item_bounds
from parcel_packer.models import DestinationConstraints, Item, PackedBox

Position = Tuple[float, float, float]


def fits_constraints(item: Item, constraints: DestinationConstraints) -> bool:
    """
    Static fit check: could `item`, in its current orientation, ship alone
    under this destination's policy?
    """
    max_l, max_w, max_h = dimension_caps(constraints)
    return (
        item.length <= max_l
        and item.width <= max_w
        and item.height <= max_h
        and item.weight <= constraints.max_box_weight
    )


class Constraint:
    """Base class for placement constraints."""

    def check(self, box: PackedBox, item: Item, position: Position,
              constraints: DestinationConstraints) -> bool:
        """
        Check if `item` may be placed at `position` in `box`.

        Args:
            box: Box receiving the item
            item: Item in the orientation being tried
            position: Candidate (x, y, z)
            constraints: Policy of the box's destination

        Returns:
            True if constraint is satisfied, False otherwise
        """
        raise NotImplementedError


class DimensionConstraint(Constraint):
    """The item's far edge stays within the destination caps on every axis."""

    def check(self, box, item, position, constraints):
        x, y, z = position
        max_l, max_w, max_h = dimension_caps(constraints)
        return (
            x + item.length <= max_l
            and y + item.width <= max_w
            and z + item.height <= max_h
        )


class CollisionConstraint(Constraint):
    """The item does not intersect anything already in the box."""

    def check(self, box, item, position, constraints):
        new_bounds = item_bounds(item, position)
        for existing in box.items:
            if existing.position is None:
                continue
            if boxes_overlap(new_bounds, item_bounds(existing, existing.position)):
                return False
        return True


class WeightConstraint(Constraint):
    """Current box weight plus the item stays under the destination cap."""

    def check(self, box, item, position, constraints):
        # The shell at the grown size is not re-estimated here
        return box.weight + item.weight <= constraints.max_box_weight


# Evaluated in order; the first failure rejects the position.
PLACEMENT_CONSTRAINTS: tuple[Constraint, ...] = (
    DimensionConstraint(),
    CollisionConstraint(),
    WeightConstraint(),
)
