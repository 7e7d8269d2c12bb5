from __future__ import annotations

from pydantic import BaseModel, Field, PositiveFloat

from typing import Tuple

from typing import Optional

# Outer carton parameters used for the shell weight estimate
CARDBOARD_THICKNESS_CM = 0.6
CARDBOARD_WEIGHT_KG_PER_SQM = 0.54


class DestinationConstraints(BaseModel):
    """Size and weight policy for boxes shipped to one destination."""

    max_box_dimension: float = Field(gt=0, description="Cap on any side of the box in cm")
    max_box_weight: float = Field(gt=0, description="Maximum weight of a filled box in kg")
    alternative_dimensions: Optional[Tuple[PositiveFloat, PositiveFloat, PositiveFloat]] = Field(
        default=None,
        description="Per-axis caps (length, width, height) in cm, replaces the scalar cap when set")


class Item(BaseModel):
    """Item to ship, dimensions in cm and weight in kg."""

    id: str = Field(description="Unique identifier for the item")
    destination: str = Field(description="Shipping destination name")
    length: float = Field(gt=0, description="Length of the item in cm")
    width: float = Field(gt=0, description="Width of the item in cm")
    height: float = Field(gt=0, description="Height of the item in cm")
    weight: float = Field(ge=0, description="Weight in kg")

    # Set together once the item is placed in a box
    position: Optional[Tuple[float, float, float]] = Field(
        default=None,
        description="(x, y, z) offset of the item inside its box")
    box_index: Optional[int] = Field(
        default=None,
        description="Slot of the item in its box's item list")

    @property
    def volume(self) -> float:
        return self.length * self.width * self.height


def shell_weight(length: float, width: float, height: float) -> float:
    """
    Estimated cardboard weight of a box wrapped around the given bounding dims (cm).

    Each side is inflated by the wall thickness, the surface area is taken in m²
    and multiplied by the cardboard areal density.
    """
    length_m = (length + 2.0 * CARDBOARD_THICKNESS_CM) / 100.0
    width_m = (width + 2.0 * CARDBOARD_THICKNESS_CM) / 100.0
    height_m = (height + 2.0 * CARDBOARD_THICKNESS_CM) / 100.0

    surface_area = 2.0 * (length_m * width_m + length_m * height_m + width_m * height_m)
    return surface_area * CARDBOARD_WEIGHT_KG_PER_SQM


class PackedBox(BaseModel):
    """
    A box being filled for one destination.

    length/width/height are the tight bounding box of the placed items, not a
    nominal carton size. weight includes the cardboard shell.
    """

    items: list[Item] = Field(default_factory=list)
    length: float = 0.0
    width: float = 0.0
    height: float = 0.0
    weight: float = 0.0
    destination: str = Field(description="Destination shared by every item in the box")

    @classmethod
    def new(cls, destination: str) -> "PackedBox":
        return cls(destination=destination)

    @property
    def volume(self) -> float:
        return self.length * self.width * self.height

    @property
    def surface_area(self) -> float:
        L, W, H = self.length, self.width, self.height
        return 2.0 * (L * W + L * H + W * H)

    def add_item(self, item: Item, position: Tuple[float, float, float]) -> bool:
        """
        Append an item at `position`. No feasibility checks are done here,
        callers validate through the placement search first.
        """
        x, y, z = (float(c) for c in position)
        placed = item.model_copy(update={"position": (x, y, z), "box_index": len(self.items)})

        self.items.append(placed)
        self.length = max(self.length, x + placed.length)
        self.width = max(self.width, y + placed.width)
        self.height = max(self.height, z + placed.height)

        self.update_weight()
        return True

    def update_weight(self) -> None:
        # Recomputed from scratch: the shell term depends on the current size
        items_weight = sum(item.weight for item in self.items)
        self.weight = items_weight + shell_weight(self.length, self.width, self.height)


class PackingSolution(BaseModel):
    """Standard result returned by the packer."""
    boxes: list[PackedBox] = Field(default_factory=list)
    total_volume: float = 0.0
    unpacked_items: list[Item] = Field(default_factory=list)
