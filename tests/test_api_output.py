"""Tests for API output formatting and input validation."""

from __future__ import annotations

import inspect

from fastapi.testclient import TestClient

from parcel_packer.api import app, pack

client = TestClient(app)


def cube(item_id: str, side: float, weight: float, destination: str) -> dict:
    return {
        "id": item_id,
        "destination": destination,
        "length": side,
        "width": side,
        "height": side,
        "weight": weight,
        "position": None,
        "box_index": None,
    }


def test_pack_returns_solution_shape() -> None:
    """Test that /pack returns the solution fields with placement filled in."""
    request = [cube(f"C{i}", 30, 5, "USA") for i in range(3)] + [cube("X", 70, 5, "Japan")]

    response = client.post("/pack", json=request)

    assert response.status_code == 200
    data = response.json()
    assert set(data) == {"boxes", "total_volume", "unpacked_items"}
    assert data["total_volume"] == 108000.0

    box = data["boxes"][0]
    assert set(box) == {"items", "length", "width", "height", "weight", "destination"}
    assert box["destination"] == "USA"
    assert [i["position"] for i in box["items"]] == [[0.0, 0.0, 0.0], [30.0, 0.0, 0.0], [0.0, 30.0, 0.0]]
    assert [i["box_index"] for i in box["items"]] == [0, 1, 2]

    # unpacked items keep the placement keys, set to null
    unpacked = data["unpacked_items"]
    assert [i["id"] for i in unpacked] == ["X"]
    assert unpacked[0]["position"] is None
    assert unpacked[0]["box_index"] is None


def test_pack_accepts_item_lines_with_quantity() -> None:
    request = {
        "items": [
            {"sku": "A", "destination": "UK", "dims_cm": {"L": 30, "W": 20, "H": 10},
             "weight_kg": 2, "quantity": 3},
            {"id": "solo", "destination": "UK", "length": 5, "width": 5, "height": 5, "weight": 1},
        ]
    }

    response = client.post("/pack", json=request)

    assert response.status_code == 200
    data = response.json()
    packed = sorted(i["id"] for b in data["boxes"] for i in b["items"])
    assert packed == ["A_0001", "A_0002", "A_0003", "solo"]


def test_pack_rejects_invalid_dimensions() -> None:
    """Non-positive dimensions never reach the packer."""
    response = client.post("/pack", json=[cube("bad", -1, 5, "USA")])

    assert response.status_code == 422


def test_pack_rejects_item_line_without_identity() -> None:
    request = {"items": [{"destination": "UK", "length": 5, "width": 5, "height": 5}]}

    response = client.post("/pack", json=request)

    assert response.status_code == 422


def test_pack_rejects_item_line_without_weight() -> None:
    """Weightless lines would bypass the destination weight cap."""
    request = {"items": [{"sku": "A", "destination": "UK", "dims_cm": {"L": 10, "W": 10, "H": 10}, "quantity": 30}]}

    response = client.post("/pack", json=request)

    assert response.status_code == 422


def test_pack_clears_incoming_placement_fields() -> None:
    """Submitted position/box_index never leak into the solution."""
    stale = cube("X", 70, 5, "Japan")
    stale["position"] = [5.0, 5.0, 5.0]
    placed = cube("C", 30, 5, "USA")
    placed["position"] = [9.0, 9.0, 9.0]
    placed["box_index"] = 4

    response = client.post("/pack", json=[stale, placed])

    assert response.status_code == 200
    data = response.json()
    unpacked = data["unpacked_items"][0]
    assert unpacked["id"] == "X"
    assert unpacked["position"] is None
    assert unpacked["box_index"] is None
    item = data["boxes"][0]["items"][0]
    assert item["position"] == [0.0, 0.0, 0.0]
    assert item["box_index"] == 0


def test_cost_returns_total_volume() -> None:
    solution = client.post("/pack", json=[cube(f"C{i}", 30, 5, "USA") for i in range(3)]).json()

    response = client.post("/cost", json=solution)

    assert response.status_code == 200
    assert response.json() == {"cost": 108000.0}


def test_destinations_lists_policies() -> None:
    data = client.get("/destinations").json()

    assert data["destinations"]["Japan"]["alternative_dimensions"] == [60.0, 50.0, 50.0]
    assert data["destinations"]["UK"]["max_box_weight"] == 15.0
    assert data["default"] == {
        "max_box_dimension": 63.0,
        "max_box_weight": 22.0,
        "alternative_dimensions": None,
    }


def test_health() -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"ok": True}


def test_pack_endpoint_runs_in_threadpool() -> None:
    """Packing is CPU-bound; a sync endpoint keeps it off the event loop."""
    assert inspect.iscoroutinefunction(pack) is False
