# src/parcel_packer/destinations.py
from __future__ import annotations

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

from pydantic import ValidationError

from parcel_packer.config import settings
from parcel_packer.models import DestinationConstraints

logger = logging.getLogger(__name__)

# Carrier limits per destination (cm / kg).
DESTINATION_PRESETS: dict[str, dict[str, Any]] = {
    "Australia": {"max_box_dimension": 63.0, "max_box_weight": 22.0},
    "USA":       {"max_box_dimension": 63.0, "max_box_weight": 22.0},
    "UK":        {"max_box_dimension": 63.0, "max_box_weight": 15.0},
    "Germany":   {"max_box_dimension": 63.0, "max_box_weight": 22.5},
    "Japan":     {"max_box_dimension": 60.0, "max_box_weight": 40.0,
                  "alternative_dimensions": (60.0, 50.0, 50.0)},
}

DEFAULT_CONSTRAINTS = DestinationConstraints(max_box_dimension=63.0, max_box_weight=22.0)


def load_destination_overrides(path: str | Path) -> dict[str, DestinationConstraints]:
    """
    Read extra destination policies from a JSON object keyed by destination name.

    Raises ValueError naming the offending destination when an entry is invalid.
    """
    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        raise ValueError(f"Destinations file {path} must contain a JSON object")

    overrides: dict[str, DestinationConstraints] = {}
    for name, policy in raw.items():
        try:
            overrides[name] = DestinationConstraints(**policy)
        except (TypeError, ValidationError) as exc:
            raise ValueError(f"Invalid constraints for destination '{name}': {exc}") from exc
    return overrides


def build_destination_table(overrides_path: str | Path | None = None) -> Mapping[str, DestinationConstraints]:
    table = {name: DestinationConstraints(**policy) for name, policy in DESTINATION_PRESETS.items()}
    if overrides_path:
        overrides = load_destination_overrides(overrides_path)
        logger.info(f"Loaded {len(overrides)} destination policies from {overrides_path}")
        table.update(overrides)
    return MappingProxyType(table)


DESTINATION_CONSTRAINTS = build_destination_table(settings.destinations_file)


def get_destination_constraints(destination: str) -> DestinationConstraints:
    """Resolve a destination's policy; unknown names get the default policy."""
    return DESTINATION_CONSTRAINTS.get(destination, DEFAULT_CONSTRAINTS)


def dimension_caps(constraints: DestinationConstraints) -> tuple[float, float, float]:
    """Per-axis (length, width, height) caps, from the override triple or the scalar cap."""
    if constraints.alternative_dimensions is not None:
        max_l, max_w, max_h = constraints.alternative_dimensions
        return float(max_l), float(max_w), float(max_h)
    cap = float(constraints.max_box_dimension)
    return cap, cap, cap
