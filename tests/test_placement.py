"""Tests for the extreme-point placement search."""

from __future__ import annotations

from parcel_packer.models import Item, PackedBox
from parcel_packer.packing.placement import ORIGIN, can_place, find_position, generate_candidate_points


def cube(item_id: str, side: float, weight: float = 1, destination: str = "USA") -> Item:
    return Item(id=item_id, destination=destination, length=side, width=side, height=side, weight=weight)


def box_with(destination: str, *placed: tuple[Item, tuple[float, float, float]]) -> PackedBox:
    box = PackedBox.new(destination)
    for item, position in placed:
        box.add_item(item, position)
    return box


def test_empty_box_places_at_origin() -> None:
    box = PackedBox.new("USA")

    # even an item far larger than the destination cap
    assert find_position(box, cube("A", 100)) == ORIGIN


def test_candidates_sorted_by_coordinate_sum() -> None:
    box = box_with("USA", (cube("A", 30), ORIGIN), (cube("B", 10), (30.0, 0.0, 0.0)))

    points = generate_candidate_points(box)

    assert points == [
        (0.0, 0.0, 0.0),
        (30.0, 0.0, 0.0),
        (0.0, 30.0, 0.0),
        (0.0, 0.0, 30.0),
        (40.0, 0.0, 0.0),
        (30.0, 10.0, 0.0),
        (30.0, 0.0, 10.0),
    ]


def test_candidates_keep_duplicates_in_generation_order() -> None:
    # B's "front" point and C's "right" point are both (10, 10, 0)
    box = box_with(
        "USA",
        (cube("A", 10), ORIGIN),
        (cube("B", 10), (10.0, 0.0, 0.0)),
        (cube("C", 10), (0.0, 10.0, 0.0)),
    )

    points = generate_candidate_points(box)

    assert points == [
        (0.0, 0.0, 0.0),
        (10.0, 0.0, 0.0),
        (0.0, 10.0, 0.0),
        (0.0, 0.0, 10.0),
        (20.0, 0.0, 0.0),
        (10.0, 10.0, 0.0),
        (10.0, 0.0, 10.0),
        (10.0, 10.0, 0.0),
        (0.0, 20.0, 0.0),
        (0.0, 10.0, 10.0),
    ]


def test_find_position_skips_occupied_origin() -> None:
    box = box_with("USA", (cube("A", 30, weight=5), ORIGIN))

    assert find_position(box, cube("B", 30, weight=5)) == (30.0, 0.0, 0.0)


def test_find_position_returns_none_when_nothing_fits() -> None:
    box = box_with("USA", (cube("A", 40), ORIGIN))

    # every extreme point pushes a 30 cm cube past 63 cm
    assert find_position(box, cube("B", 30)) is None


def test_can_place_respects_scalar_cap() -> None:
    box = box_with("USA", (cube("A", 30), ORIGIN))

    assert can_place(box, cube("B", 30), (33.0, 0.0, 0.0)) is True
    assert can_place(box, cube("B", 30), (34.0, 0.0, 0.0)) is False


def test_can_place_respects_per_axis_caps() -> None:
    box = box_with("Japan", (Item(id="A", destination="Japan", length=55, width=45, height=40, weight=1), ORIGIN))
    small = cube("B", 10, destination="Japan")

    assert can_place(box, small, (55.0, 0.0, 0.0)) is False  # 65 > 60
    assert can_place(box, small, (0.0, 45.0, 0.0)) is False  # 55 > 50
    assert can_place(box, small, (0.0, 0.0, 40.0)) is True   # 50 <= 50


def test_can_place_rejects_overlap_but_allows_touching() -> None:
    box = box_with("USA", (cube("A", 30), ORIGIN))

    assert can_place(box, cube("B", 10), (10.0, 10.0, 10.0)) is False
    assert can_place(box, cube("B", 10), (29.0, 0.0, 0.0)) is False
    assert can_place(box, cube("B", 10), (30.0, 0.0, 0.0)) is True


def test_can_place_checks_current_box_weight() -> None:
    box = box_with("USA", (cube("A", 10, weight=20), ORIGIN))
    # box weight is 20 kg plus the shell of a 10 cm cube (~0.04 kg)

    assert can_place(box, cube("B", 10, weight=1), (10.0, 0.0, 0.0)) is True
    assert can_place(box, cube("B", 10, weight=2), (10.0, 0.0, 0.0)) is False
