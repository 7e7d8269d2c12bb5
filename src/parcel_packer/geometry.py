""""Geometry utilities for parcel packing."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator

if TYPE_CHECKING:
    from .models import Item

Bounds = tuple[float, float, float, float, float, float]

# Index permutations of (L, W, H), one per axis-aligned orientation.
#   0:(L,W,H) 1:(L,H,W) 2:(W,L,H) 3:(W,H,L) 4:(H,L,W) 5:(H,W,L)
ORIENTATIONS: tuple[tuple[int, int, int], ...] = (
    (0, 1, 2),
    (0, 2, 1),
    (1, 0, 2),
    (1, 2, 0),
    (2, 0, 1),
    (2, 1, 0),
)


def boxes_overlap(a: Bounds, b: Bounds) -> bool:
    """
    Axis-aligned bounding box (AABB) overlap test.

    a, b are bounds: (x1, y1, z1, x2, y2, z2)

    Two boxes are disjoint iff they are separated along at least one axis.
    Touching faces/edges (ax2 == bx1) is NOT considered overlap.
    """
    ax1, ay1, az1, ax2, ay2, az2 = a
    bx1, by1, bz1, bx2, by2, bz2 = b

    return not (
        ax2 <= bx1 or bx2 <= ax1
        or ay2 <= by1 or by2 <= ay1
        or az2 <= bz1 or bz2 <= az1
    )


def item_bounds(item: "Item", position: tuple[float, float, float]) -> Bounds:
    x, y, z = position
    return (x, y, z, x + item.length, y + item.width, z + item.height)


def rotate_item(item: "Item", rotation: int) -> "Item":
    """
    Return a copy of `item` in orientation `rotation` (0..5).

    id, destination and weight are kept; position and box_index are cleared.
    """
    if not 0 <= rotation < len(ORIENTATIONS):
        raise ValueError(f"rotation must be in 0..5, got {rotation}")
    dims = (item.length, item.width, item.height)
    i, j, k = ORIENTATIONS[rotation]
    return item.model_copy(update={
        "length": dims[i],
        "width": dims[j],
        "height": dims[k],
        "position": None,
        "box_index": None,
    })


def rotations(item: "Item") -> Iterator[tuple[int, "Item"]]:
    """All six orientations in index order, duplicates included."""
    for r in range(len(ORIENTATIONS)):
        yield r, rotate_item(item, r)
